"""
Yahtzee - Input Validation Utilities

Provides validation functions for values crossing into the game engine from
tests, adapters and front ends. All validators either return normalised data
or raise descriptive exceptions.
"""

from typing import Sequence

from src.engine.base import CONTROL_COUNT, DICE_COUNT, DIE_FACES


def validate_dice_pips(
    pips: Sequence[int],
    count: int = DICE_COUNT,
) -> tuple[int, ...]:
    """
    Validate and normalise a full set of dice given as pip values.

    Args:
        pips: Face values as printed on the dice (1-6)
        count: Exact number of dice required

    Returns:
        Validated pips as a tuple

    Raises:
        ValueError: If the count or any value is out of range
    """
    pips_tuple = tuple(pips)

    if len(pips_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(pips_tuple)}.")

    for i, value in enumerate(pips_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return pips_tuple


def validate_histogram(counts: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a face-count histogram.

    Args:
        counts: Six non-negative counts, index 0 for ones through index 5 for sixes

    Returns:
        Validated counts as a tuple

    Raises:
        ValueError: If the length is wrong or a count is negative
    """
    counts_tuple = tuple(counts)

    if len(counts_tuple) != DIE_FACES:
        raise ValueError(f"Histogram must have {DIE_FACES} entries, got {len(counts_tuple)}.")

    for i, count in enumerate(counts_tuple):
        if not isinstance(count, int):
            raise ValueError(f"Count for face {i + 1} must be an integer, got {type(count).__name__}.")
        if count < 0:
            raise ValueError(f"Count for face {i + 1} cannot be negative, got {count}.")

    return counts_tuple


def validate_control_id(control_id: int) -> int:
    """
    Validate a control id.

    Raises:
        KeyError: If the id is outside the control id space
    """
    if not isinstance(control_id, int) or not (0 <= control_id < CONTROL_COUNT):
        raise KeyError(f"Control id {control_id!r} is out of range 0-{CONTROL_COUNT - 1}.")
    return control_id
