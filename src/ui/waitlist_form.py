"""Streamlit UI for the Chuno waitlist form.

This module contains the UI-only logic: widgets, inline errors, toasts and the
success view. Field state, validation and the HTTP call live in
`waitlist.workflow.WaitlistForm`, built through `helpers.waitlist`.
"""
from __future__ import annotations

import time
from typing import Any, List

import streamlit as st

from src.helpers.waitlist import build_waitlist_form
from src.waitlist import options as opts
from src.waitlist.notifier import Notifier
from src.waitlist.workflow import SubmissionState, WaitlistForm

FORM_KEY = "waitlist_form"
TOASTS_KEY = "waitlist_toasts"
WIDGET_PREFIX = "wl_field_"


class StreamlitNotifier(Notifier):
    """Queue toasts in session state; they are shown on the next render.

    Queuing survives the ``st.rerun()`` that follows a submission.
    """

    def notify(self, title: str, description: str, *, variant: str = "default") -> None:
        queue: List[dict] = st.session_state.setdefault(TOASTS_KEY, [])
        queue.append({"title": title, "description": description, "variant": variant})


def _flush_toasts() -> None:
    for item in st.session_state.pop(TOASTS_KEY, []):
        icon = "❌" if item["variant"] == "destructive" else "✅"
        st.toast(f"**{item['title']}**\n\n{item['description']}", icon=icon)


def _get_form() -> WaitlistForm:
    if FORM_KEY not in st.session_state:
        st.session_state[FORM_KEY] = build_waitlist_form(StreamlitNotifier())
    return st.session_state[FORM_KEY]


def _clear_widgets() -> None:
    for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_PREFIX)]:
        del st.session_state[key]


def _widget_key(field: str, tag: str | None = None) -> str:
    return f"{WIDGET_PREFIX}{field}" + (f"_{tag}" if tag else "")


# ---------------------------------------------------------------------------
# Widgets (each one mirrors a single form value)
# ---------------------------------------------------------------------------

def _error(form: WaitlistForm, field: str) -> None:
    if msg := form.errors.get(field):
        st.markdown(f":red[{msg}]")


def _sync(form: WaitlistForm, field: str) -> None:
    form.set_value(field, st.session_state[_widget_key(field)])


def _text(form: WaitlistForm, field: str, label: str, *, placeholder: str = "", help: str | None = None, area: bool = False) -> None:
    key = _widget_key(field)
    st.session_state.setdefault(key, form.values[field])
    widget = st.text_area if area else st.text_input
    widget(label, key=key, placeholder=placeholder, help=help, on_change=_sync, args=(form, field))
    _error(form, field)


def _single_choice(form: WaitlistForm, field: str, label: str, options: opts.Options, *, select: bool = False) -> None:
    key = _widget_key(field)
    st.session_state.setdefault(key, form.values[field])
    kwargs: dict[str, Any] = dict(
        options=opts.tags(options),
        format_func=lambda tag: opts.label_for(options, tag),
        key=key,
        on_change=_sync,
        args=(form, field),
    )
    if select:
        st.selectbox(label, **kwargs)
    else:
        st.radio(label, **kwargs)
    _error(form, field)


def _on_toggle(form: WaitlistForm, field: str, tag: str) -> None:
    checked = st.session_state[_widget_key(field, tag)]
    if checked != (tag in form.values[field]):
        form.toggle(field, tag)


def _multi_choice(form: WaitlistForm, field: str, label: str, options: opts.Options) -> None:
    st.markdown(f"**{label}**")
    cols = st.columns(2)
    for i, opt in enumerate(options):
        key = _widget_key(field, opt.tag)
        st.session_state.setdefault(key, opt.tag in form.values[field])
        with cols[i % 2]:
            st.checkbox(opt.label, key=key, on_change=_on_toggle, args=(form, field, opt.tag))
    _error(form, field)


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def _render_success(form: WaitlistForm) -> None:
    with st.container(border=True):
        st.markdown(
            """
<div style="text-align:center">
  <div style="font-size:3rem">✅</div>
  <h3 style="color:#15803d">Success!</h3>
  <p style="color:#4b5563">Your waitlist form has been submitted successfully.</p>
</div>
            """,
            unsafe_allow_html=True,
        )
    time.sleep(form.seconds_until_reset())
    if form.poll():
        _clear_widgets()
    st.rerun()


def _render_fields(form: WaitlistForm) -> None:
    st.subheader("Section 1: Basic Info")
    _text(form, "fullName", "Full Name", placeholder="Your name")
    _text(form, "email", "Email Address", placeholder="your.email@example.com")
    _text(form, "phoneNumber", "Phone Number (Optional)", placeholder="+91 9876543210", help="For early access SMS")
    _single_choice(form, "ageGroup", "Age Group", opts.AGE_GROUPS, select=True)

    st.subheader("Section 2: Gaming Behavior")
    _multi_choice(form, "gamingPlatforms", "Where do you usually play games?", opts.GAMING_PLATFORMS)
    _single_choice(form, "gamingFrequency", "How often do you play card or casual games?", opts.GAMING_FREQUENCIES)
    _multi_choice(form, "recentGames", "Which games have you played recently?", opts.RECENT_GAMES)
    _text(form, "otherRecentGames", "Others:", placeholder="Other games you've played...")
    _multi_choice(form, "keepPlaying", "What makes you keep playing a game?", opts.KEEP_PLAYING_FACTORS)
    _text(form, "otherKeepPlaying", "Other:", placeholder="Other factors that keep you playing...")

    st.subheader("Section 3: Feature Wishlist for Chuno v1")
    _multi_choice(form, "desiredFeatures", "Which of these features would you love to see in Chuno?", opts.DESIRED_FEATURES)
    _text(form, "otherDesiredFeatures", "Others:", placeholder="Other features you'd like to see...")
    _text(
        form,
        "specificFeature",
        "Any specific feature you wish no one ever forgets to include in a game like this?",
        placeholder="Share your thoughts...",
        area=True,
    )
    _single_choice(form, "earlyTester", "Would you like to be an early tester for Chuno?", opts.YES_NO)
    _multi_choice(form, "contactPreference", "How should we reach you for updates?", opts.CONTACT_PREFERENCES)

    st.subheader("Section 4: Viral Boost")
    _single_choice(form, "wouldRefer", "Would you refer Chuno to a friend if you liked it?", opts.YES_NO_MAYBE)
    _text(form, "friendEmail", "Leave a friend's email to invite them early (optional):", placeholder="friend@example.com")


def render_waitlist_form() -> None:
    """Render the waitlist form for the current session."""
    form = _get_form()
    _flush_toasts()

    if form.poll():
        _clear_widgets()

    if form.state == SubmissionState.SUBMITTED:
        _render_success(form)
        return

    with st.container(border=True):
        st.markdown(
            "<h2 style='text-align:center'>✅ Chuno Waitlist & Feature Suggestion Form</h2>",
            unsafe_allow_html=True,
        )
        st.caption("Help us build the perfect card game experience")

        _render_fields(form)

        submitting = form.state == SubmissionState.SUBMITTING
        clicked = st.button(
            "Submitting..." if submitting else "📨 Submit Waitlist Form",
            type="primary",
            disabled=not form.can_submit,
            use_container_width=True,
        )

    if clicked:
        # Rerun first so the disabled "Submitting..." control is on screen.
        form.begin_submit()
        st.rerun()

    if submitting:
        with st.spinner("Submitting..."):
            form.send()
        st.rerun()
