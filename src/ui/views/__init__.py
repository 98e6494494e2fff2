"""Page renderers for Rock Paper Scissors."""

from src.ui.views.game import render_game_page

__all__ = ["render_game_page"]
