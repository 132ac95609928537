"""Turn control button — Roll, Score or New Game."""

from __future__ import annotations

import streamlit as st

from src.engine.base import ButtonMode, InputEvent
from src.engine.session import Session


def render_action_button(session: Session) -> InputEvent | None:
    """Render the single action button in its current mode.

    Returns:
        A click on the button, or ``None`` if it was not pressed.
    """
    button = session.registry.button
    mode = session.button_mode

    if mode is ButtonMode.ROLL and button.disabled:
        st.caption("Pick dice to reroll, or choose a line on the score sheet.")
    elif mode is ButtonMode.SCORE and button.disabled:
        st.caption("Choose a line on the score sheet.")

    if st.button(
        mode.label,
        key="btn_action",
        use_container_width=True,
        disabled=button.disabled,
        type="primary",
    ):
        return InputEvent.click(button.control_id)
    return None
