"""Game page - choice buttons, reveal panel, scoreboard and end prompt."""

from __future__ import annotations

import logging

import streamlit as st

from src.config.settings import Settings, get_settings
from src.engine.base import Phase
from src.engine.match import MatchController
from src.engine.opponent import RandomOpponent
from src.ui.components.choice_picker import render_choice_picker
from src.ui.components.end_prompt import render_end_prompt
from src.ui.components.reveal_panel import render_reveal_panel
from src.ui.components.scoreboard import render_scoreboard

logger = logging.getLogger(__name__)


def build_controller(settings: Settings | None = None) -> MatchController:
    """Create a controller configured from settings."""
    settings = settings or get_settings()
    return MatchController(
        config=settings.to_match_config(),
        opponent=RandomOpponent(seed=settings.rng_seed),
    )


def _controller() -> MatchController:
    """Get or create the session's controller."""
    ss = st.session_state
    if "controller" not in ss:
        ss["controller"] = build_controller()
        logger.info("New match session started")
    return ss["controller"]


def render_game_page() -> None:
    """Render the single game screen."""
    controller = _controller()
    state = controller.state

    title_col, score_col = st.columns([3, 1])
    with title_col:
        st.title("Rock Paper Scissors")
    with score_col:
        render_scoreboard(controller)

    st.divider()

    if state.phase is Phase.AWAITING_CHOICE:
        picked = render_choice_picker(state.rounds_played + 1)
        if picked is not None:
            controller.submit_choice(picked)
            st.rerun()
        return

    if state.phase is Phase.SHOWING_OUTCOME:
        if render_reveal_panel(state, controller.matches_remaining(), controller.is_ended):
            controller.advance()
            st.rerun()
        return

    render_end_prompt(controller)
