"""
Yahtzee - Plain Text Adapter

Line-oriented play on any terminal.

Output goes through a ``rich`` console. One input line can expand into
several engine events (dice letters become die clicks followed by a roll),
so parsed events are queued and handed out one at a time; the screen is only
redrawn when the queue runs dry and the player is asked for more input.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from typing import TextIO

from rich.console import Console
from rich.table import Table

from src.config.about import RULES_TEXT, VERSION_INFO
from src.engine.base import (
    DIE_HOTKEYS,
    LOWER_SLOTS,
    UPPER_SLOTS,
    ButtonMode,
    ControlKind,
    InputEvent,
    Slot,
)
from src.engine.controls import Control
from src.engine.io import IOAdapter, IOMode
from src.engine.session import Session

logger = logging.getLogger(__name__)

_LEFT_COLUMN = UPPER_SLOTS + (Slot.SUBTOTAL, Slot.BONUS)
_RIGHT_COLUMN = LOWER_SLOTS + (Slot.TOTAL,)


class TextAdapter(IOAdapter):
    """Reads commands from a text stream and prints the game to a console."""

    mode = IOMode.TEXT

    def __init__(self, stdin: TextIO | None = None, console: Console | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.console = console if console is not None else Console(highlight=False)
        self._queue: deque[int] = deque()
        self._session: Session | None = None
        self._last_sheet: tuple[str, ...] | None = None
        self._show_dice = True
        self._show_sheet = False

    # --- IOAdapter ---

    def initialize(self, mode: IOMode) -> bool:
        # Plain text works wherever a richer mode would.
        if mode is not IOMode.TEXT:
            logger.info("No %s back end available, using plain text", mode.value)
        self.console.print("\nY a h t z e e\n", markup=False)
        return True

    def render(self, session: Session) -> None:
        # Drawing is deferred to the prompt so queued events don't redraw.
        self._session = session

    def get_next_input_event(self) -> InputEvent | None:
        while True:
            if self._queue:
                self._show_dice = True
                return InputEvent.click(self._queue.popleft())

            session = self._session
            if session is None:
                return None
            sheet = self._sheet_snapshot(session)
            if sheet != self._last_sheet:
                self._last_sheet = sheet
                self._show_sheet = True
            self._show_prompt(session)

            line = self.stdin.readline()
            if not line:
                logger.debug("End of input stream")
                return None
            text = line.strip()

            if text[:1].lower() == "q":
                return None
            if text == ".":
                self._show_sheet = True
                self._show_dice = True
                continue
            if text == "?":
                self.console.print(RULES_TEXT, markup=False)
                continue
            if text.lower() == "v":
                for info in VERSION_INFO:
                    self.console.print(f"   {info}", markup=False)
                continue
            if not self.parse_line(session, text):
                self.console.bell()

    # --- Input parsing ---

    def parse_line(self, session: Session, text: str) -> bool:
        """
        Translate one command line into queued control clicks.

        Returns:
            False (after printing why) if the line was rejected
        """
        registry = session.registry
        # Spaces between keys are layout, not the button hotkey.
        keys = "".join(text.split())
        if not keys:
            if registry.button.disabled:
                self._say("Enter (?) for help.")
                return False
            self._queue.append(registry.button.control_id)
            return True

        if session.button_mode is ButtonMode.NEW_GAME:
            return False

        dice: dict[int, None] = {}
        for char in keys:
            control = registry.find_by_key(char)
            if control is not None and control.kind is ControlKind.DIE:
                if control.disabled:
                    self._say("Cannot roll dice.")
                    return False
                dice[control.control_id] = None
        if dice:
            if len(dice) != len(set(keys.lower())):
                self._say("Please specify either dice or a single scoring slot.")
                return False
            self._queue.extend(dice)
            self._queue.append(registry.button.control_id)
            return True

        control = registry.find_by_key(keys[0])
        if control is not None and control.kind is ControlKind.SLOT:
            if control.disabled:
                self._say("Slot not available.")
                return False
            if len(keys) > 1:
                self._say(f'Extra characters after input: "{keys[1:]}".')
                return False
            self._queue.append(control.control_id)
            return True

        self._say("Invalid input. Enter (?) for help.")
        return False

    # --- Display ---

    def _show_prompt(self, session: Session) -> None:
        mode = session.button_mode
        button = session.registry.button

        if mode is ButtonMode.NEW_GAME:
            if self._show_dice:
                self._print_dice(session)
            if self._show_sheet:
                self._print_sheet(session)
            self._say("Another game (RET) or Quit (q):")
            return

        if self._show_sheet:
            self._print_sheet(session)
        if self._show_dice:
            self._print_dice(session)
        if mode is ButtonMode.SCORE and not button.disabled:
            self._say("Confirm (RET):")
            return

        keys = "".join(c.key for c in session.open_slots if c.key)
        prefix = f"Roll ({''.join(DIE_HOTKEYS)}) or " if mode is ButtonMode.ROLL else ""
        self._say(f"{prefix}Score ({keys}):")

    def _print_dice(self, session: Session) -> None:
        self._say("  ".join(f"({pip})" for pip in session.dice_pips))
        self._show_dice = False

    def _print_sheet(self, session: Session) -> None:
        table = Table(show_header=False, box=None, pad_edge=False)
        for _ in range(2):
            table.add_column(no_wrap=True)
            table.add_column(justify="right", min_width=4)
        for left, right in zip(_LEFT_COLUMN, _RIGHT_COLUMN):
            table.add_row(
                self._label(session.registry.slot(left)),
                self._cell(session.registry.slot(left)),
                self._label(session.registry.slot(right)),
                self._cell(session.registry.slot(right)),
            )
        self.console.print(table)
        self._show_sheet = False

    @staticmethod
    def _label(control: Control) -> str:
        prefix = f"{control.key}: " if control.key else "   "
        return f"{prefix}{control.slot.label}"

    @staticmethod
    def _cell(control: Control) -> str:
        if control.is_set and (control.disabled or control.selected):
            return str(control.value)
        return "."

    def _sheet_snapshot(self, session: Session) -> tuple[str, ...]:
        return tuple(self._cell(c) for c in session.registry.slots)

    def _say(self, message: str) -> None:
        self.console.print(message, markup=False)
