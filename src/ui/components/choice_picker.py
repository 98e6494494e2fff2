"""Choice picker - the three hand buttons shown while awaiting a pick."""

from __future__ import annotations

import streamlit as st

from src.engine.base import Choice

# Paper and scissors on the top row, rock centered below
_TOP_ROW = (Choice.PAPER, Choice.SCISSORS)
_BOTTOM_ROW = (Choice.ROCK,)


def render_choice_picker(round_number: int) -> Choice | None:
    """Render the choice buttons.

    Args:
        round_number: 1-based number of the round about to be played,
            used to keep button keys unique across rounds.

    Returns:
        The clicked Choice, or ``None`` if nothing was clicked.
    """
    picked: Choice | None = None

    top = st.columns(len(_TOP_ROW))
    for col, choice in zip(top, _TOP_ROW):
        with col:
            if _choice_button(choice, round_number):
                picked = choice

    _, middle, _ = st.columns([1, 2, 1])
    with middle:
        for choice in _BOTTOM_ROW:
            if _choice_button(choice, round_number):
                picked = choice

    return picked


def _choice_button(choice: Choice, round_number: int) -> bool:
    return st.button(
        choice.value.upper(),
        key=f"btn_choice_{choice.value}_{round_number}",
        use_container_width=True,
    )
