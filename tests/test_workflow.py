import pytest

from conftest import FakeClient, RecordingNotifier
from src.waitlist.errors import SubmissionError
from src.waitlist.notifier import FAILURE_NOTIFICATION, SUCCESS_NOTIFICATION
from src.waitlist.workflow import SubmissionState, WaitlistForm, default_values


def _form(client, notifier, clock, values=None):
    form = WaitlistForm(client, notifier, reset_delay=3.0, clock=clock)
    for key, value in (values or {}).items():
        form.set_value(key, value)
    return form


def test_new_form_starts_idle_with_defaults(client, notifier, clock):
    form = _form(client, notifier, clock)
    assert form.state == SubmissionState.IDLE
    assert form.can_submit
    assert form.values == default_values()
    assert form.values["contactPreference"] == frozenset({"email"})


def test_missing_required_field_blocks_request(client, notifier, clock, valid_values):
    valid_values["fullName"] = ""
    form = _form(client, notifier, clock, valid_values)

    assert form.submit() is False
    assert client.rows == []
    assert notifier.sent == []
    assert "fullName" in form.errors
    assert form.state == SubmissionState.IDLE


def test_defaults_alone_do_not_submit(client, notifier, clock):
    form = _form(client, notifier, clock)
    assert form.submit() is False
    assert client.rows == []
    assert set(form.errors) == {"fullName", "email", "gamingPlatforms"}


def test_valid_submit_sends_exactly_one_request(client, notifier, clock, valid_values):
    form = _form(client, notifier, clock, valid_values)

    assert form.submit() is True
    assert len(client.rows) == 1
    row = client.rows[0]
    assert row["gaming_platforms"] == "android, ios"
    assert row["contact_preference"] == "email"
    assert "submitted_at" in row
    assert form.state == SubmissionState.SUBMITTED
    assert notifier.sent == [(SUCCESS_NOTIFICATION.title, SUCCESS_NOTIFICATION.description, "default")]


def test_submit_refused_while_not_idle(client, notifier, clock, valid_values):
    form = _form(client, notifier, clock, valid_values)
    form.submit()

    assert not form.can_submit
    assert form.submit() is False
    assert len(client.rows) == 1


def test_success_resets_after_delay(client, notifier, clock, valid_values):
    form = _form(client, notifier, clock, valid_values)
    form.submit()

    clock.advance(2.9)
    assert form.poll() is False
    assert form.state == SubmissionState.SUBMITTED
    assert form.values["fullName"] == "Asha Rao"
    assert form.seconds_until_reset() == pytest.approx(0.1)

    clock.advance(0.1)
    assert form.poll() is True
    assert form.state == SubmissionState.IDLE
    assert form.values == default_values()
    assert form.errors == {}


@pytest.mark.parametrize(
    "error",
    [
        SubmissionError("HTTP error! status: 500", status_code=500),
        SubmissionError("Could not reach SheetDB: timed out"),
    ],
)
def test_failure_returns_to_idle_with_values_intact(notifier, clock, valid_values, error):
    client = FakeClient(error=error)
    form = _form(client, notifier, clock, valid_values)

    assert form.submit() is False
    assert len(client.rows) == 1
    assert form.state == SubmissionState.IDLE
    assert form.can_submit
    assert form.last_failure is error
    assert form.values["fullName"] == "Asha Rao"
    assert form.values["gamingPlatforms"] == frozenset({"ios", "android"})
    assert notifier.sent == [
        (FAILURE_NOTIFICATION.title, FAILURE_NOTIFICATION.description, "destructive")
    ]


def test_manual_resubmit_after_failure(notifier, clock, valid_values):
    client = FakeClient(error=SubmissionError("down"))
    form = _form(client, notifier, clock, valid_values)
    form.submit()

    client.error = None
    assert form.submit() is True
    assert len(client.rows) == 2
    assert form.last_failure is None


def test_selecting_one_item_clears_select_at_least_one_error(client, notifier, clock, valid_values):
    valid_values["gamingPlatforms"] = []
    form = _form(client, notifier, clock, valid_values)
    form.submit()
    assert form.errors == {"gamingPlatforms": "Please select at least one platform."}

    form.toggle("gamingPlatforms", "web")
    assert form.errors == {}

    form.toggle("gamingPlatforms", "web")
    assert form.errors == {"gamingPlatforms": "Please select at least one platform."}


def test_errors_hidden_until_first_submit(client, notifier, clock):
    form = _form(client, notifier, clock)
    form.set_value("email", "not-an-email")
    assert form.errors == {}


def test_unknown_field_raises(client, notifier, clock):
    form = _form(client, notifier, clock)
    with pytest.raises(KeyError):
        form.set_value("nickname", "x")
    with pytest.raises(KeyError):
        form.toggle("email", "x")


def test_each_form_owns_its_values(client, notifier, clock):
    first = _form(client, notifier, clock)
    second = _form(client, notifier, clock)
    first.toggle("recentGames", "uno")
    assert second.values["recentGames"] == frozenset()


class ExplodingClient:
    def __init__(self):
        self.calls = 0

    def submit(self, row):
        self.calls += 1
        raise RuntimeError("connection pool exhausted")


class ExplodingNotifier(RecordingNotifier):
    def notify(self, title, description, *, variant="default"):
        raise RuntimeError("toast backend gone")


def test_unexpected_client_error_counts_as_failure(notifier, clock, valid_values):
    client = ExplodingClient()
    form = _form(client, notifier, clock, valid_values)

    assert form.submit() is False
    assert form.state == SubmissionState.IDLE
    assert isinstance(form.last_failure, SubmissionError)
    assert "connection pool exhausted" in str(form.last_failure)
    assert notifier.sent[-1][0] == FAILURE_NOTIFICATION.title
    assert form.values["fullName"] == "Asha Rao"

    assert form.submit() is False
    assert client.calls == 2


def test_failing_notifier_still_leaves_form_idle(clock, valid_values):
    form = _form(FakeClient(error=SubmissionError("down")), ExplodingNotifier(), clock, valid_values)

    with pytest.raises(RuntimeError):
        form.submit()
    assert form.state == SubmissionState.IDLE
    assert form.can_submit


def test_begin_submit_disables_until_sent(client, notifier, clock, valid_values):
    form = _form(client, notifier, clock, valid_values)

    assert form.begin_submit() is True
    assert form.state == SubmissionState.SUBMITTING
    assert not form.can_submit
    assert client.rows == []
    assert form.begin_submit() is False

    assert form.send() is True
    assert len(client.rows) == 1
    assert form.send() is False
    assert len(client.rows) == 1


def test_begin_submit_records_errors_without_state_change(client, notifier, clock, valid_values):
    valid_values["email"] = "not-an-email"
    form = _form(client, notifier, clock, valid_values)

    assert form.begin_submit() is False
    assert form.errors == {"email": "Please enter a valid email address."}
    assert form.state == SubmissionState.IDLE
    assert form.send() is False
    assert client.rows == []
