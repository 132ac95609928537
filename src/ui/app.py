"""Yahtzee - Streamlit Application Entrypoint.

Streamlit re-runs this script on every interaction, so the game cannot block
waiting for input. The engine's step API is driven instead: settle any forced
moves, draw, and feed the clicked widget back as an input event.
"""

from __future__ import annotations

import streamlit as st

from src.config import RULES_TEXT, VERSION_INFO, configure_logging, get_settings
from src.engine.base import GamePhase, Slot
from src.engine.game import YahtzeeGame


def _get_game() -> YahtzeeGame:
    """Game stored in the browser session, created on first visit."""
    ss = st.session_state
    if "game" not in ss:
        settings = get_settings()
        configure_logging(settings)
        game = YahtzeeGame.from_settings(settings)
        game.start_session()
        ss["game"] = game
    return ss["game"]


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        with st.expander("Yahtzee - Rules", expanded=True):
            st.text(RULES_TEXT)
        st.divider()
        st.caption(VERSION_INFO[0])


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Yahtzee",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    # Lazy imports to keep page config first
    from src.ui.components import (
        render_action_button,
        render_dice_tray,
        render_score_sheet,
    )

    game = _get_game()
    in_play = game.settle()
    if not in_play and game.phase is GamePhase.GAME_OVER:
        game.show_new_game_prompt()

    session = game.session
    st.title("Yahtzee")
    if not in_play:
        st.success(f"Game over! Final score: {session.slot_value(Slot.TOTAL)}")

    left, right = st.columns([3, 2])
    with left:
        dice_event = render_dice_tray(session)
        button_event = render_action_button(session)
    with right:
        slot_event = render_score_sheet(session)
    session.registry.mark_rendered()

    _render_sidebar_rules()

    event = dice_event or button_event or slot_event
    if event is None:
        return
    if in_play:
        game.handle_event(event)
    elif game.handle_new_game_event(event):
        game.start_session()
    st.rerun()


if __name__ == "__main__":
    main()
