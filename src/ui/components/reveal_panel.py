"""Reveal panel - both picks, the outcome banner and the continue button."""

from __future__ import annotations

import streamlit as st

from src.engine.base import MatchState


def render_reveal_panel(state: MatchState, remaining: int, is_ended: bool) -> bool:
    """Render the outcome of the latest round.

    Args:
        state: Snapshot of the match after the round.
        remaining: Rounds left in the match.
        is_ended: Whether the round just played was the last one.

    Returns:
        ``True`` if the player clicked "NEXT MATCH" or "FINISH".
    """
    you, enemy = st.columns(2)
    with you:
        st.markdown(f"### {state.player_choice.value.upper()}")
        st.caption("YOU PICKED")
    with enemy:
        st.markdown(f"### {state.opponent_choice.value.upper()}")
        st.caption("ENEMY PICKED")

    if state.outcome is not None:
        st.header(state.outcome.label)

    if not is_ended:
        st.write(f"Match Remaining: {remaining}")

    return st.button(
        "FINISH" if is_ended else "NEXT MATCH",
        key=f"btn_continue_{state.epoch}_{state.rounds_played}",
        type="primary",
        use_container_width=True,
    )
