import logging

import streamlit as st

from src.config.settings import SETTINGS
from src.ui.waitlist_form import render_waitlist_form

logging.basicConfig(level=SETTINGS.log_level)


def main():
    st.set_page_config(
        page_title="Chuno Waitlist",
        page_icon="🃏",
        layout="centered",
    )

    # Gradient page background around the form card
    st.markdown("""
    <style>
    .stApp {
        background: linear-gradient(to bottom right, #eff6ff, #e0e7ff);
    }
    .block-container {
        max-width: 64rem;
        padding-top: 2rem;
    }
    </style>
    """, unsafe_allow_html=True)

    render_waitlist_form()


if __name__ == "__main__":
    main()
