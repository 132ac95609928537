"""
Yahtzee - Scoring Engine

Pure functions computing each category's score from a histogram of die
faces, the category table dispatching to them, and the aggregation logic for
Subtotal, Bonus and Total.

Scoring Rules:
    - Ones..Sixes: face value x count of that face
    - Three / Four of a Kind: sum of all dice if any face shows 3+ / 4+ times
    - Full House: 25 for a 3+2 split; five of a kind also counts
    - Small Straight: 30 for any four consecutive faces
    - Large Straight: 40 for 2-3-4-5-6
    - Yahtzee: 50 for five of a kind
    - Chance: sum of all dice
    - Bonus: 35 once the upper section reaches 63
"""

import logging
from typing import Callable, Sequence

from src.engine.base import (
    DIE_FACES,
    LOWER_SLOTS,
    SELECTABLE_SLOTS,
    UPPER_SLOTS,
    Slot,
    slot_id,
)
from src.engine.session import Session
from src.engine.validators import validate_histogram

logger = logging.getLogger(__name__)

Histogram = Sequence[int]

FULL_HOUSE_POINTS = 25
SMALL_STRAIGHT_POINTS = 30
LARGE_STRAIGHT_POINTS = 40
YAHTZEE_POINTS = 50
UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS_POINTS = 35


def histogram(values: Sequence[int]) -> tuple[int, ...]:
    """
    Count dice per face.

    Args:
        values: Stored die faces (0 for a one through 5 for a six)

    Returns:
        Six counts, index 0 for ones through index 5 for sixes
    """
    counts = [0] * DIE_FACES
    for value in values:
        if not (0 <= value < DIE_FACES):
            raise ValueError(f"Die face {value} is out of range 0-{DIE_FACES - 1}.")
        counts[value] += 1
    return tuple(counts)


def _upper(face: int) -> Callable[[Histogram], int]:
    def score(counts: Histogram) -> int:
        return face * counts[face - 1]
    score.__name__ = f"upper_{face}"
    return score


ones = _upper(1)
twos = _upper(2)
threes = _upper(3)
fours = _upper(4)
fives = _upper(5)
sixes = _upper(6)


def chance(counts: Histogram) -> int:
    return sum((face + 1) * count for face, count in enumerate(counts))


def three_of_a_kind(counts: Histogram) -> int:
    if any(count >= 3 for count in counts):
        return chance(counts)
    return 0


def four_of_a_kind(counts: Histogram) -> int:
    if any(count >= 4 for count in counts):
        return chance(counts)
    return 0


def yahtzee(counts: Histogram) -> int:
    if any(count == 5 for count in counts):
        return YAHTZEE_POINTS
    return 0


def full_house(counts: Histogram) -> int:
    """
    25 for three of one face and two of another.

    Five of a kind also scores as a full house. Any face seen exactly once
    or four times rules it out.
    """
    total = 0
    for count in counts:
        if count == 0:
            continue
        if count in (1, 4):
            return 0
        if count == 5:
            return FULL_HOUSE_POINTS
        total += count
    return FULL_HOUSE_POINTS if total == 5 else 0


def small_straight(counts: Histogram) -> int:
    # Every four-run over six faces contains both 3 and 4.
    if counts[2] and counts[3]:
        if (counts[0] and counts[1]) or (counts[1] and counts[4]) or (counts[4] and counts[5]):
            return SMALL_STRAIGHT_POINTS
    return 0


def large_straight(counts: Histogram) -> int:
    """40 only for 2-3-4-5-6; 1-2-3-4-5 does not qualify."""
    if all(counts[face] == 1 for face in (1, 2, 3, 4, 5)):
        return LARGE_STRAIGHT_POINTS
    return 0


# Category table, in score-sheet order. Derived slots have no rule.
SCORING_RULES: dict[Slot, Callable[[Histogram], int]] = {
    Slot.ONES: ones,
    Slot.TWOS: twos,
    Slot.THREES: threes,
    Slot.FOURS: fours,
    Slot.FIVES: fives,
    Slot.SIXES: sixes,
    Slot.THREE_OF_A_KIND: three_of_a_kind,
    Slot.FOUR_OF_A_KIND: four_of_a_kind,
    Slot.FULL_HOUSE: full_house,
    Slot.SMALL_STRAIGHT: small_straight,
    Slot.LARGE_STRAIGHT: large_straight,
    Slot.YAHTZEE: yahtzee,
    Slot.CHANCE: chance,
}


class ScoringEngine:
    """
    Stateless scoring operations.

    All methods are class methods. Session state is read and the slot
    controls' values written in place; nothing is stored on the engine.
    """

    RULES = SCORING_RULES

    @classmethod
    def score_slot(cls, slot: Slot, counts: Histogram) -> int:
        """
        Score one category.

        Args:
            slot: A rule-bearing slot
            counts: Face histogram

        Returns:
            Points the dice would earn in that slot

        Raises:
            KeyError: If ``slot`` is a derived slot
            ValueError: If ``counts`` is not a valid histogram
        """
        if slot not in cls.RULES:
            raise KeyError(f"{slot.label} is computed from other slots, not from dice.")
        return cls.RULES[slot](validate_histogram(counts))

    @classmethod
    def preview(cls, session: Session) -> dict[Slot, int]:
        """Live score for every open slot under the current dice."""
        counts = histogram(session.dice_values)
        return {
            control.slot: cls.RULES[control.slot](counts)
            for control in session.open_slots
        }

    @classmethod
    def update_open_slots(cls, session: Session) -> None:
        """Write the live score of the current dice into every open slot."""
        for slot, points in cls.preview(session).items():
            session.registry.set_value(slot_id(slot), points)

    @classmethod
    def update_scores(cls, session: Session) -> None:
        """
        Recompute Subtotal, Bonus and Total.

        Only committed slots and the currently selected slot count towards
        the totals; open previews are ignored.
        """
        registry = session.registry
        total = 0
        counted = 0

        for slot in UPPER_SLOTS:
            control = registry.slot(slot)
            if control.disabled or control.selected:
                counted += 1
                total += control.value

        if counted:
            registry.set_value(Slot.SUBTOTAL.control_id, total)
            if total >= UPPER_BONUS_THRESHOLD:
                registry.set_value(Slot.BONUS.control_id, UPPER_BONUS_POINTS)
                total += UPPER_BONUS_POINTS
            else:
                bonus = 0 if counted == len(UPPER_SLOTS) else -1
                registry.set_value(Slot.BONUS.control_id, bonus)
        else:
            registry.set_value(Slot.SUBTOTAL.control_id, -1)
            registry.set_value(Slot.BONUS.control_id, -1)

        for slot in LOWER_SLOTS:
            control = registry.slot(slot)
            if control.disabled or control.selected:
                counted += 1
                total += control.value

        registry.set_value(Slot.TOTAL.control_id, total if counted else -1)
        logger.debug(
            "Scores updated: subtotal=%d bonus=%d total=%d",
            registry.slot(Slot.SUBTOTAL).value,
            registry.slot(Slot.BONUS).value,
            registry.slot(Slot.TOTAL).value,
        )

    @classmethod
    def final_score(cls, session: Session) -> int:
        """Total once every selectable slot is committed, else -1."""
        if any(not session.is_committed(slot) for slot in SELECTABLE_SLOTS):
            return -1
        return session.slot_value(Slot.TOTAL)
