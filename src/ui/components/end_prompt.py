"""End-of-game prompt - final score and restart."""

from __future__ import annotations

import streamlit as st

from src.engine.match import MatchController


def end_message(score: int, pending: int) -> str:
    """Text under the "Good Game" header.

    The final win can still be in flight when the match ends, so the
    score is only called final once nothing is pending.
    """
    if pending > 0:
        return f"The game was ended. Scoring your last win... ({score} so far)"
    return f"The game was ended. Your last score is {score}"


@st.fragment(run_every=0.5)
def render_end_prompt(controller: MatchController) -> None:
    """Render the end-of-match message and the Restart button.

    Re-runs on its own until the last delayed point has landed.
    """
    state = controller.state
    st.subheader("Good Game")
    st.write(end_message(state.score, controller.pending_increments()))
    if st.button(
        "Restart",
        key=f"btn_restart_{state.epoch}",
        type="primary",
        use_container_width=True,
    ):
        controller.restart()
        st.rerun(scope="app")
