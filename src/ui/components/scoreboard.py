"""Score sheet component — every slot with its committed or live score."""

from __future__ import annotations

import streamlit as st

from src.engine.base import ButtonMode, InputEvent
from src.engine.session import Session


def render_score_sheet(session: Session) -> InputEvent | None:
    """Render the score sheet.

    Open slots are buttons showing the score the current dice would earn;
    the selected slot is highlighted. Committed and computed slots are
    plain text.

    Args:
        session: The game being displayed (read only).

    Returns:
        A click on an open slot, or ``None`` if nothing was pressed.
    """
    idle = session.button_mode is ButtonMode.NEW_GAME
    clicked: InputEvent | None = None

    st.markdown("#### Score Sheet")
    for control in session.registry.slots:
        slot = control.slot
        name_col, score_col = st.columns([3, 1])
        is_open = not control.disabled

        with name_col:
            if is_open:
                if st.button(
                    slot.label,
                    key=f"slot_{control.control_id}",
                    use_container_width=True,
                    type="primary" if control.selected else "secondary",
                    disabled=idle,
                    help=f"Hotkey {control.key.upper()}" if control.key else None,
                ):
                    clicked = InputEvent.click(control.control_id)
            elif slot.is_derived:
                st.markdown(f"**{slot.label}**")
            else:
                st.markdown(slot.label)

        with score_col:
            if not control.is_set:
                st.markdown("&nbsp;", unsafe_allow_html=True)
            elif is_open and not control.selected:
                st.markdown(f"*{control.value}*")
            else:
                st.markdown(f"**{control.value}**")

    return clicked
