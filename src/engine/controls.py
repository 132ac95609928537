"""
Yahtzee - Control Registry

The canonical, presentation-agnostic representation of every interactive and
display element: five dice, the action button and the sixteen score-sheet
slots. The registry is a typed container with named flag accessors; it holds
no game rules.
"""

from dataclasses import dataclass
from typing import Iterator

from src.engine.base import (
    BUTTON_HOTKEY,
    BUTTON_ID,
    CONTROL_COUNT,
    DIE_HOTKEYS,
    DIE_IDS,
    SLOT_IDS,
    ControlKind,
    Slot,
    control_kind,
    slot_for_id,
)
from src.engine.validators import validate_control_id


@dataclass
class Control:
    """
    One addressable game element.

    Attributes:
        control_id: Position in the control id space
        kind: Die, button or scoring slot
        index: Position within its kind
        key: Input hotkey, or None if the control has none
        value: Die face (0-5), button mode, or slot score; -1 means unset
        selected: Marked by the user (die to reroll, slot to score, button held)
        disabled: Not currently actionable
        hovering: Pointer is over the control
        modified: Changed since the last render
    """
    control_id: int
    kind: ControlKind
    index: int
    key: str | None = None
    value: int = -1
    selected: bool = False
    disabled: bool = False
    hovering: bool = False
    modified: bool = True

    @property
    def slot(self) -> Slot | None:
        """Score-sheet slot for slot controls, else None."""
        if self.kind is ControlKind.SLOT:
            return slot_for_id(self.control_id)
        return None

    @property
    def is_set(self) -> bool:
        """True once a value has been assigned."""
        return self.value != -1


class ControlRegistry:
    """
    Fixed array of all controls, addressed by control id.

    Mutators only flip the named flag and mark the control modified when the
    state actually changes, so incremental renderers can redraw just what
    moved.
    """

    def __init__(self) -> None:
        self._controls: list[Control] = []
        for control_id in range(CONTROL_COUNT):
            kind = control_kind(control_id)
            if kind is ControlKind.DIE:
                index = control_id - DIE_IDS.start
                key = DIE_HOTKEYS[index]
            elif kind is ControlKind.BUTTON:
                index = 0
                key = BUTTON_HOTKEY
            else:
                index = control_id - SLOT_IDS.start
                key = Slot(index).hotkey
            self._controls.append(
                Control(control_id=control_id, kind=kind, index=index, key=key)
            )

    def reset(self) -> None:
        """Return every control to value -1 with all flags cleared."""
        for control in self._controls:
            control.value = -1
            control.selected = False
            control.disabled = False
            control.hovering = False
            control.modified = True

    # --- Lookup ---

    def __getitem__(self, control_id: int) -> Control:
        return self._controls[validate_control_id(control_id)]

    def __iter__(self) -> Iterator[Control]:
        return iter(self._controls)

    def __len__(self) -> int:
        return len(self._controls)

    def contains(self, control_id: object) -> bool:
        return isinstance(control_id, int) and 0 <= control_id < CONTROL_COUNT

    @property
    def dice(self) -> list[Control]:
        return [self._controls[i] for i in DIE_IDS]

    @property
    def button(self) -> Control:
        return self._controls[BUTTON_ID]

    @property
    def slots(self) -> list[Control]:
        return [self._controls[i] for i in SLOT_IDS]

    def slot(self, slot: Slot) -> Control:
        return self._controls[slot.control_id]

    def find_by_key(self, key: str) -> Control | None:
        """Control bound to ``key`` (case-insensitive), or None."""
        if not key:
            return None
        wanted = key if key == BUTTON_HOTKEY else key.lower()
        for control in self._controls:
            if control.key == wanted:
                return control
        return None

    # --- Flag accessors ---

    def is_selected(self, control_id: int) -> bool:
        return self[control_id].selected

    def is_disabled(self, control_id: int) -> bool:
        return self[control_id].disabled

    def is_hovering(self, control_id: int) -> bool:
        return self[control_id].hovering

    def set_selected(self, control_id: int) -> None:
        self._set_flag(control_id, "selected", True)

    def clear_selected(self, control_id: int) -> None:
        self._set_flag(control_id, "selected", False)

    def toggle_selected(self, control_id: int) -> bool:
        """Flip the selected flag and return its new state."""
        new_state = not self[control_id].selected
        self._set_flag(control_id, "selected", new_state)
        return new_state

    def set_disabled(self, control_id: int) -> None:
        self._set_flag(control_id, "disabled", True)

    def clear_disabled(self, control_id: int) -> None:
        self._set_flag(control_id, "disabled", False)

    def set_hovering(self, control_id: int) -> None:
        self._set_flag(control_id, "hovering", True)

    def clear_hovering(self, control_id: int) -> None:
        self._set_flag(control_id, "hovering", False)

    def set_value(self, control_id: int, value: int) -> None:
        control = self[control_id]
        if control.value != value:
            control.value = value
            control.modified = True

    def _set_flag(self, control_id: int, flag: str, state: bool) -> None:
        control = self[control_id]
        if getattr(control, flag) != state:
            setattr(control, flag, state)
            control.modified = True

    # --- Redraw bookkeeping ---

    def modified_ids(self) -> list[int]:
        return [c.control_id for c in self._controls if c.modified]

    def mark_rendered(self) -> None:
        """Clear every modified flag once an adapter has drawn the registry."""
        for control in self._controls:
            control.modified = False
