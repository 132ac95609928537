"""Dice tray component — renders the five dice as reroll toggles."""

from __future__ import annotations

import streamlit as st

from src.engine.base import ButtonMode, InputEvent
from src.engine.session import Session

DIE_GLYPHS = ("⚀", "⚁", "⚂", "⚃", "⚄", "⚅")


def render_dice_tray(session: Session) -> InputEvent | None:
    """Render dice with interactive reroll toggles.

    A die marked for reroll is drawn as a primary button. Dice are inert
    after the third roll and while the new-game prompt is showing.

    Args:
        session: The game being displayed (read only).

    Returns:
        A click on the toggled die, or ``None`` if nothing was pressed.
    """
    idle = session.button_mode is ButtonMode.NEW_GAME
    clicked: InputEvent | None = None

    cols = st.columns(len(session.registry.dice))
    for col, die in zip(cols, session.registry.dice):
        with col:
            face = DIE_GLYPHS[die.value] if die.value >= 0 else "?"
            label = f"{face} {die.value + 1}" if die.value >= 0 else face
            if st.button(
                label,
                key=f"die_{die.control_id}",
                use_container_width=True,
                type="primary" if die.selected else "secondary",
                disabled=idle or die.disabled,
                help=f"Hotkey {die.key.upper()}" if die.key else None,
            ):
                clicked = InputEvent.click(die.control_id)

    if not idle:
        st.caption(f"Roll {session.roll_count} of 3")
    return clicked
