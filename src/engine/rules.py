"""
Rock Paper Scissors - Rules

Cyclic dominance: rock beats scissors, scissors beats paper,
paper beats rock. Identical picks are a draw.
"""

from src.engine.base import Choice, Outcome

# Maps each choice to the one it defeats
BEATS: dict[Choice, Choice] = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.SCISSORS: Choice.PAPER,
    Choice.PAPER: Choice.ROCK,
}


def beats(choice: Choice, other: Choice) -> bool:
    """Return True if ``choice`` defeats ``other``."""
    return BEATS[choice] is other


def determine_outcome(player: Choice, opponent: Choice) -> Outcome:
    """Resolve a round from the player's point of view.

    Args:
        player: The player's pick
        opponent: The opponent's pick

    Returns:
        Outcome.DRAW on identical picks, otherwise WIN or LOSE
    """
    if player is opponent:
        return Outcome.DRAW
    return Outcome.WIN if beats(player, opponent) else Outcome.LOSE
