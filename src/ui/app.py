"""Rock Paper Scissors - Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config.settings import configure_logging, get_settings


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Rock Paper Scissors",
        page_icon="✊",
        layout="centered",
    )

    if "_logging_configured" not in st.session_state:
        configure_logging(get_settings())
        st.session_state["_logging_configured"] = True

    # Lazy import so set_page_config runs before any widget code
    from src.ui.views.game import render_game_page
    render_game_page()


if __name__ == "__main__":
    main()
