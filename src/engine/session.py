"""
Yahtzee - Session

The complete mutable state of one game: the control registry, the roll count
for the current turn and the dice source. Dice and slot operations live here;
deciding when to call them is the state machine's job.
"""

import random
from typing import Sequence

from src.engine.base import (
    DIE_FACES,
    MAX_ROLLS,
    SELECTABLE_SLOTS,
    ButtonMode,
    Slot,
)
from src.engine.controls import Control, ControlRegistry
from src.engine.validators import validate_dice_pips


class Session:
    """
    One game's registry plus the current turn's roll count.

    Attributes:
        registry: Every control of the game
        roll_count: Rolls taken this turn (1-3)
        rng: Source of dice values; ``randrange(6)`` is drawn per die
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.registry = ControlRegistry()
        self.roll_count = 0
        self.rng = rng if rng is not None else random.Random()

    # --- Dice ---

    @property
    def dice_values(self) -> tuple[int, ...]:
        """Stored die faces, 0 for a one through 5 for a six."""
        return tuple(die.value for die in self.registry.dice)

    @property
    def dice_pips(self) -> tuple[int, ...]:
        """Die faces as shown on the dice (1-6)."""
        return tuple(die.value + 1 for die in self.registry.dice)

    @property
    def selected_dice(self) -> list[Control]:
        return [die for die in self.registry.dice if die.selected]

    def set_dice(self, pips: Sequence[int]) -> None:
        """
        Place the dice on specific faces.

        Args:
            pips: Five face values (1-6)

        Raises:
            ValueError: If the values are not five faces in range
        """
        for die, pip in zip(self.registry.dice, validate_dice_pips(pips)):
            self.registry.set_value(die.control_id, pip - 1)

    def roll_all_dice(self) -> None:
        """Unmark, re-enable and roll every die."""
        for die in self.registry.dice:
            self.registry.clear_disabled(die.control_id)
            self.registry.clear_selected(die.control_id)
            self.registry.set_value(die.control_id, self.rng.randrange(DIE_FACES))

    def reroll_selected_dice(self) -> list[int]:
        """
        Roll the dice marked for reroll and unmark them.

        Returns:
            Control ids of the dice that were rolled
        """
        rolled = []
        for die in self.registry.dice:
            if die.selected:
                self.registry.set_value(die.control_id, self.rng.randrange(DIE_FACES))
                self.registry.clear_selected(die.control_id)
                rolled.append(die.control_id)
        return rolled

    def deselect_dice(self) -> None:
        for die in self.registry.dice:
            self.registry.clear_selected(die.control_id)

    def fix_dice(self) -> None:
        """Disable every die against further reroll selection."""
        for die in self.registry.dice:
            self.registry.set_disabled(die.control_id)

    @property
    def rolls_exhausted(self) -> bool:
        return self.roll_count >= MAX_ROLLS

    # --- Slots ---

    def clear_all_slots(self) -> None:
        """
        Erase the score sheet.

        Computed-only slots stay permanently disabled; every other slot is
        reopened and unselected.
        """
        for control in self.registry.slots:
            self.registry.set_value(control.control_id, -1)
            self.registry.clear_selected(control.control_id)
            if control.slot.is_derived:
                self.registry.set_disabled(control.control_id)
            else:
                self.registry.clear_disabled(control.control_id)

    @property
    def selected_slot(self) -> Control | None:
        for control in self.registry.slots:
            if control.selected:
                return control
        return None

    def deselect_slots(self) -> None:
        for control in self.registry.slots:
            self.registry.clear_selected(control.control_id)

    @property
    def open_slots(self) -> list[Control]:
        """Selectable slots that have not been committed yet."""
        return [self.registry.slot(s) for s in SELECTABLE_SLOTS if not self.registry.slot(s).disabled]

    def is_committed(self, slot: Slot) -> bool:
        return not slot.is_derived and self.registry.slot(slot).disabled

    def commit(self, control_id: int) -> int:
        """
        Freeze a slot at its current value.

        Returns:
            The committed score
        """
        self.registry.clear_selected(control_id)
        self.registry.set_disabled(control_id)
        return self.registry[control_id].value

    def slot_value(self, slot: Slot) -> int:
        return self.registry.slot(slot).value

    # --- Button ---

    @property
    def button_mode(self) -> ButtonMode:
        return ButtonMode(max(self.registry.button.value, 0))

    def set_button(self, mode: ButtonMode, enabled: bool) -> None:
        button_id = self.registry.button.control_id
        self.registry.set_value(button_id, int(mode))
        if enabled:
            self.registry.clear_disabled(button_id)
        else:
            self.registry.set_disabled(button_id)

    # --- Lifecycle ---

    def reset(self) -> None:
        """Discard all state ahead of a new game."""
        self.registry.reset()
        self.roll_count = 0
