"""
Yahtzee - Game Engine Base Definitions

This module defines the foundational enums, constants and immutable data
structures shared by the registry, the scoring engine and the state machine:
the control id space, the scoring-slot catalogue, button modes and the input
events delivered by presentation adapters.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


# Control id space: dice first, then the action button, then the score sheet.
DICE_COUNT = 5
SLOT_COUNT = 16
DIE_FACES = 6
MAX_ROLLS = 3

DIE_IDS = range(0, DICE_COUNT)
BUTTON_ID = DICE_COUNT
SLOT_IDS = range(BUTTON_ID + 1, BUTTON_ID + 1 + SLOT_COUNT)
CONTROL_COUNT = SLOT_IDS.stop


class ControlKind(Enum):
    """Category of an addressable game element."""
    DIE = "die"
    BUTTON = "button"
    SLOT = "slot"


class Slot(IntEnum):
    """
    The score sheet, in display order.

    The integer value is the slot's position within the sheet; the control
    id of a slot is ``SLOT_IDS.start + slot``.
    """
    ONES = 0
    TWOS = 1
    THREES = 2
    FOURS = 3
    FIVES = 4
    SIXES = 5
    SUBTOTAL = 6
    BONUS = 7
    THREE_OF_A_KIND = 8
    FOUR_OF_A_KIND = 9
    FULL_HOUSE = 10
    SMALL_STRAIGHT = 11
    LARGE_STRAIGHT = 12
    YAHTZEE = 13
    CHANCE = 14
    TOTAL = 15

    @property
    def label(self) -> str:
        """Human-readable name shown on the score sheet."""
        return SLOT_LABELS[self]

    @property
    def hotkey(self) -> str | None:
        """Keyboard shortcut, or None for computed-only slots."""
        return SLOT_HOTKEYS.get(self)

    @property
    def is_derived(self) -> bool:
        """True for Subtotal, Bonus and Total, which are never selectable."""
        return self in DERIVED_SLOTS

    @property
    def control_id(self) -> int:
        return SLOT_IDS.start + self.value


UPPER_SLOTS: tuple[Slot, ...] = (
    Slot.ONES, Slot.TWOS, Slot.THREES, Slot.FOURS, Slot.FIVES, Slot.SIXES,
)
LOWER_SLOTS: tuple[Slot, ...] = (
    Slot.THREE_OF_A_KIND,
    Slot.FOUR_OF_A_KIND,
    Slot.FULL_HOUSE,
    Slot.SMALL_STRAIGHT,
    Slot.LARGE_STRAIGHT,
    Slot.YAHTZEE,
    Slot.CHANCE,
)
DERIVED_SLOTS: tuple[Slot, ...] = (Slot.SUBTOTAL, Slot.BONUS, Slot.TOTAL)
SELECTABLE_SLOTS: tuple[Slot, ...] = UPPER_SLOTS + LOWER_SLOTS

UPPER_SLOT_IDS = range(Slot.ONES.control_id, Slot.SIXES.control_id + 1)
LOWER_SLOT_IDS = range(Slot.THREE_OF_A_KIND.control_id, Slot.CHANCE.control_id + 1)

SLOT_LABELS: dict[Slot, str] = {
    Slot.ONES: "Ones",
    Slot.TWOS: "Twos",
    Slot.THREES: "Threes",
    Slot.FOURS: "Fours",
    Slot.FIVES: "Fives",
    Slot.SIXES: "Sixes",
    Slot.SUBTOTAL: "Subtotal",
    Slot.BONUS: "Bonus",
    Slot.THREE_OF_A_KIND: "Three of a Kind",
    Slot.FOUR_OF_A_KIND: "Four of a Kind",
    Slot.FULL_HOUSE: "Full House",
    Slot.SMALL_STRAIGHT: "Small Straight",
    Slot.LARGE_STRAIGHT: "Large Straight",
    Slot.YAHTZEE: "Yahtzee",
    Slot.CHANCE: "Chance",
    Slot.TOTAL: "Total Score",
}

SLOT_HOTKEYS: dict[Slot, str] = {
    Slot.ONES: "1",
    Slot.TWOS: "2",
    Slot.THREES: "3",
    Slot.FOURS: "4",
    Slot.FIVES: "5",
    Slot.SIXES: "6",
    Slot.THREE_OF_A_KIND: "t",
    Slot.FOUR_OF_A_KIND: "f",
    Slot.FULL_HOUSE: "h",
    Slot.SMALL_STRAIGHT: "s",
    Slot.LARGE_STRAIGHT: "l",
    Slot.YAHTZEE: "y",
    Slot.CHANCE: "x",
}

DIE_HOTKEYS: tuple[str, ...] = ("a", "b", "c", "d", "e")
BUTTON_HOTKEY = " "


class ButtonMode(IntEnum):
    """What the single action button does when clicked."""
    ROLL = 0
    SCORE = 1
    NEW_GAME = 2

    @property
    def label(self) -> str:
        return {
            ButtonMode.ROLL: "Roll",
            ButtonMode.SCORE: "Score",
            ButtonMode.NEW_GAME: "New Game",
        }[self]


class InputAction(Enum):
    """Kinds of input an adapter can report against a control."""
    HOVER_ENTER = auto()
    HOVER_EXIT = auto()
    PRESS_DOWN = auto()
    PRESS_UP = auto()
    CLICKED = auto()


class GamePhase(Enum):
    """Observable phase of the turn state machine."""
    ROLLING = auto()                       # roll 1-2, nothing marked
    AWAITING_REROLL_OR_SELECTION = auto()  # dice marked for reroll
    READY_TO_SCORE = auto()                # slot selected, or third roll taken
    COMMITTED = auto()                     # slot just frozen
    GAME_OVER = auto()
    NEW_GAME_PROMPT = auto()


@dataclass(frozen=True)
class InputEvent:
    """
    A single input delivered by an adapter.

    Attributes:
        control_id: Id of the targeted control (see ``DIE_IDS``, ``BUTTON_ID``,
            ``SLOT_IDS``). Ids outside the space are tolerated by the engine.
        action: What happened to the control
    """
    control_id: int
    action: InputAction = InputAction.CLICKED

    @classmethod
    def click(cls, control_id: int) -> "InputEvent":
        """Shorthand for a completed click on ``control_id``."""
        return cls(control_id=control_id, action=InputAction.CLICKED)


def control_kind(control_id: int) -> ControlKind:
    """
    Classify a control id.

    Raises:
        KeyError: If the id is outside the control id space
    """
    if control_id in DIE_IDS:
        return ControlKind.DIE
    if control_id == BUTTON_ID:
        return ControlKind.BUTTON
    if control_id in SLOT_IDS:
        return ControlKind.SLOT
    raise KeyError(f"No control with id {control_id}.")


def slot_id(slot: Slot) -> int:
    """Control id of a score-sheet slot."""
    return slot.control_id


def slot_for_id(control_id: int) -> Slot:
    """
    Score-sheet slot addressed by a control id.

    Raises:
        KeyError: If the id does not address a slot
    """
    if control_id not in SLOT_IDS:
        raise KeyError(f"Control {control_id} is not a scoring slot.")
    return Slot(control_id - SLOT_IDS.start)
