"""
Yahtzee Game Engine.

Pure Python game logic with zero UI dependencies.
Handles the control registry, dice rolling, scoring and the turn state machine.
"""

from src.engine.base import (
    BUTTON_ID,
    DIE_IDS,
    LOWER_SLOT_IDS,
    SLOT_IDS,
    UPPER_SLOT_IDS,
    ButtonMode,
    ControlKind,
    GamePhase,
    InputAction,
    InputEvent,
    Slot,
)
from src.engine.controls import Control, ControlRegistry
from src.engine.game import YahtzeeGame
from src.engine.io import IOAdapter, IOMode, select_io_mode
from src.engine.scoring import ScoringEngine
from src.engine.session import Session

__all__ = [
    # Identifiers
    "BUTTON_ID",
    "DIE_IDS",
    "SLOT_IDS",
    "UPPER_SLOT_IDS",
    "LOWER_SLOT_IDS",
    # Enums
    "ButtonMode",
    "ControlKind",
    "GamePhase",
    "InputAction",
    "IOMode",
    "Slot",
    # Data Classes
    "Control",
    "InputEvent",
    # State
    "ControlRegistry",
    "Session",
    # Engines
    "ScoringEngine",
    "YahtzeeGame",
    # I/O
    "IOAdapter",
    "select_io_mode",
]
