from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

import pytest

from src.waitlist.errors import SubmissionError
from src.waitlist.notifier import Notifier


class FakeClient:
    def __init__(self, error: SubmissionError | None = None):
        self.error = error
        self.rows = []

    def submit(self, row):
        self.rows.append(row)
        if self.error is not None:
            raise self.error
        return {"created": 1}


class RecordingNotifier(Notifier):
    def __init__(self):
        self.sent = []

    def notify(self, title, description, *, variant="default"):
        self.sent.append((title, description, variant))


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def valid_values():
    return {
        "fullName": "Asha Rao",
        "email": "asha.rao@gmail.com",
        "phoneNumber": "",
        "ageGroup": "18-24",
        "gamingPlatforms": ["ios", "android"],
        "gamingFrequency": "daily",
        "recentGames": ["uno"],
        "otherRecentGames": "",
        "keepPlaying": [],
        "otherKeepPlaying": "",
        "desiredFeatures": ["chat", "private-rooms"],
        "otherDesiredFeatures": "",
        "specificFeature": "Offline mode",
        "earlyTester": "yes",
        "contactPreference": ["email"],
        "wouldRefer": "maybe",
        "friendEmail": "",
    }


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clock():
    return FakeClock()
