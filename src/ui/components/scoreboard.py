"""Scoreboard component - score badge."""

from __future__ import annotations

import streamlit as st

from src.engine.match import MatchController


@st.fragment(run_every=0.5)
def render_scoreboard(controller: MatchController) -> None:
    """Render the score badge.

    Wins are scored after a delay on the scheduler thread, so the badge
    re-runs on its own to pick the new score up without a click.
    """
    st.metric("SCORE", controller.state.score)
