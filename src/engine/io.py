"""
Yahtzee - I/O Adapter Contract

The narrow boundary between the game engine and a presentation back end.
Adapters redraw from the session they are handed and deliver input events;
they never mutate the session themselves.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Mapping

from src.engine.base import InputEvent
from src.engine.session import Session


class IOMode(Enum):
    """Presentation technologies an environment can support."""
    TEXT = "text"
    TERMINAL = "terminal"
    GRAPHICAL = "graphical"


def select_io_mode(environ: Mapping[str, str]) -> IOMode:
    """Pick the richest mode the environment advertises."""
    if environ.get("DISPLAY"):
        return IOMode.GRAPHICAL
    if environ.get("TERM"):
        return IOMode.TERMINAL
    return IOMode.TEXT


class IOAdapter(ABC):
    """Render/input back end driven by the game state machine."""

    mode: IOMode = IOMode.TEXT

    def initialize(self, mode: IOMode) -> bool:
        """
        One-time setup for the mode the environment supports.

        Args:
            mode: Richest presentation mode available, from ``select_io_mode``

        Returns:
            False if the adapter cannot run in that mode
        """
        self.mode = mode
        return True

    @abstractmethod
    def render(self, session: Session) -> None:
        """Redraw to reflect ``session``. Must not modify it."""

    @abstractmethod
    def get_next_input_event(self) -> InputEvent | None:
        """Block until the next input event; None means the user quit."""
