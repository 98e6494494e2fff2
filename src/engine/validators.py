"""
Rock Paper Scissors - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from numbers import Real

from src.engine.base import Choice

_SHORTCUTS: dict[str, Choice] = {
    "r": Choice.ROCK,
    "p": Choice.PAPER,
    "s": Choice.SCISSORS,
}


def validate_choice(value: Choice | str) -> Choice:
    """
    Validate and normalize a player's choice.

    Args:
        value: A Choice, its value ("rock", "paper", "scissors")
            or a one-letter shortcut ("r", "p", "s"), case-insensitive

    Returns:
        The matching Choice

    Raises:
        ValueError: If the value names no choice
    """
    if isinstance(value, Choice):
        return value

    if not isinstance(value, str):
        raise ValueError(f"Choice must be a string or Choice, got {type(value).__name__}.")

    key = value.strip().lower()
    if key in _SHORTCUTS:
        return _SHORTCUTS[key]
    try:
        return Choice(key)
    except ValueError:
        valid = ", ".join(c.value for c in Choice)
        raise ValueError(f"Invalid choice {value!r}. Must be one of: {valid}.") from None


def validate_total_rounds(count: int) -> int:
    """
    Validate the number of rounds in a match.

    Raises:
        ValueError: If count is not a positive integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Total rounds must be an integer, got {type(count).__name__}.")

    if count <= 0:
        raise ValueError(f"Total rounds must be positive, got {count}.")

    return count


def validate_score_delay(seconds: float) -> float:
    """
    Validate the delay before a winning round is scored.

    Raises:
        ValueError: If seconds is not a non-negative number
    """
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        raise ValueError(f"Score delay must be a number, got {type(seconds).__name__}.")

    if seconds < 0:
        raise ValueError(f"Score delay cannot be negative, got {seconds}.")

    return float(seconds)
