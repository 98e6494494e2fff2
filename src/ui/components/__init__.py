"""UI components for Rock Paper Scissors."""

from src.ui.components.choice_picker import render_choice_picker
from src.ui.components.end_prompt import end_message, render_end_prompt
from src.ui.components.reveal_panel import render_reveal_panel
from src.ui.components.scoreboard import render_scoreboard

__all__ = [
    "end_message",
    "render_choice_picker",
    "render_end_prompt",
    "render_reveal_panel",
    "render_scoreboard",
]
