"""UI components for Yahtzee."""

from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.scoreboard import render_score_sheet
from src.ui.components.turn_controls import render_action_button

__all__ = [
    "render_dice_tray",
    "render_score_sheet",
    "render_action_button",
]
