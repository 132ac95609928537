"""
Yahtzee - Turn State Machine

Sequences dice rolls, reroll selection, category selection and commitment
for one game, then hands over to the new-game prompt.

Each iteration of a session:
    1. Count open slots; with none left, finalise the totals and stop.
    2. Put the action button in Score or Roll mode and freeze the dice after
       the third roll.
    3. Render and wait for input. On the third roll with a single open slot
       the input is synthesised instead: select that slot, then score it.
    4. Apply the event. Events on disabled or unknown controls are ignored
       without a redraw and the machine waits for the next one.

The blocking ``play``/``prompt_new_game``/``run`` loops drive an
``IOAdapter``. Front ends that cannot block (Streamlit re-runs its script per
interaction) call the same step methods directly: ``start_session``,
``refresh``, ``auto_event``, ``handle_event``, ``settle`` and
``handle_new_game_event``.
"""

import logging
import random
import time

from src.engine.base import (
    BUTTON_ID,
    ButtonMode,
    ControlKind,
    GamePhase,
    InputAction,
    InputEvent,
)
from src.engine.controls import Control
from src.engine.io import IOAdapter
from src.engine.scoring import ScoringEngine
from src.engine.session import Session

logger = logging.getLogger(__name__)

_ACTIVATING = (InputAction.PRESS_DOWN, InputAction.CLICKED)


class YahtzeeGame:
    """
    Owns the session and applies the turn rules to it.

    Attributes:
        session: The game's controls and roll count
        phase: Current observable phase
        flash_delay: Seconds the button stays drawn pressed after a click
        adapter: Back end currently driving the blocking loops, if any
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        flash_delay: float = 0.0,
    ) -> None:
        self.session = Session(rng)
        self.phase = GamePhase.NEW_GAME_PROMPT
        self.flash_delay = flash_delay
        self.adapter: IOAdapter | None = None

    @classmethod
    def from_settings(cls, settings) -> "YahtzeeGame":
        """Build a game seeded and timed from application settings."""
        return cls(rng=random.Random(settings.rng_seed), flash_delay=settings.flash_delay)

    # --- Step API ---

    def start_session(self) -> None:
        """Clear the score sheet and make the first roll of a new game."""
        session = self.session
        session.reset()
        session.clear_all_slots()
        session.roll_all_dice()
        session.roll_count = 1
        session.set_button(ButtonMode.ROLL, enabled=False)
        ScoringEngine.update_open_slots(session)
        ScoringEngine.update_scores(session)
        self._set_phase(GamePhase.ROLLING)
        logger.info("New game started, first roll %s", session.dice_pips)

    def refresh(self) -> bool:
        """
        Bring the button and dice in line with the session.

        Returns:
            False once every slot is committed, True while play continues
        """
        session = self.session
        if not session.open_slots:
            ScoringEngine.update_scores(session)
            if self.phase not in (GamePhase.GAME_OVER, GamePhase.NEW_GAME_PROMPT):
                self._set_phase(GamePhase.GAME_OVER)
                logger.info("Game over, final score %d", ScoringEngine.final_score(session))
            return False

        selected = session.selected_slot
        if session.rolls_exhausted or selected is not None:
            session.set_button(ButtonMode.SCORE, enabled=selected is not None)
            if session.rolls_exhausted:
                session.fix_dice()
            self._set_phase(GamePhase.READY_TO_SCORE)
        else:
            marked = bool(session.selected_dice)
            session.set_button(ButtonMode.ROLL, enabled=marked)
            self._set_phase(
                GamePhase.AWAITING_REROLL_OR_SELECTION if marked else GamePhase.ROLLING
            )
        return True

    def auto_event(self) -> InputEvent | None:
        """
        Input the player would be forced to give anyway.

        On the third roll with one open slot left, that slot is selected and
        then scored without asking the adapter.
        """
        session = self.session
        open_slots = session.open_slots
        if not (session.rolls_exhausted and len(open_slots) == 1):
            return None
        if session.selected_slot is not None:
            return InputEvent.click(BUTTON_ID)
        return InputEvent.click(open_slots[0].control_id)

    def handle_event(self, event: InputEvent) -> bool:
        """
        Apply one input event.

        Returns:
            True if the event changed anything worth redrawing, False if it
            was ignored (disabled or unknown control, nothing to do)
        """
        registry = self.session.registry
        if not registry.contains(event.control_id):
            logger.debug("Ignoring event for unknown control %r", event.control_id)
            return False

        control = registry[event.control_id]
        if control.disabled:
            return False

        if event.action is InputAction.HOVER_ENTER:
            for other in registry:
                registry.clear_hovering(other.control_id)
            registry.set_hovering(control.control_id)
        elif event.action is InputAction.HOVER_EXIT:
            registry.clear_hovering(control.control_id)

        if control.kind is ControlKind.DIE:
            return self._handle_die(control, event.action)
        if control.kind is ControlKind.SLOT:
            if event.action in _ACTIVATING:
                self._toggle_slot(control)
            return True
        return self._handle_button(control, event.action)

    def settle(self) -> bool:
        """
        Refresh and apply synthesised moves until the player must act.

        Returns:
            False if the game is over, True if input is needed
        """
        while self.refresh():
            event = self.auto_event()
            if event is None:
                return True
            self.handle_event(event)
        return False

    def handle_new_game_event(self, event: InputEvent) -> bool:
        """
        Apply an event while the new-game prompt is showing.

        Returns:
            True if the player asked for another game
        """
        if event.control_id != BUTTON_ID:
            return False
        registry = self.session.registry
        if event.action is InputAction.HOVER_ENTER:
            registry.set_hovering(BUTTON_ID)
        elif event.action is InputAction.HOVER_EXIT:
            registry.clear_hovering(BUTTON_ID)
        elif event.action is InputAction.PRESS_DOWN:
            registry.set_selected(BUTTON_ID)
        elif event.action is InputAction.PRESS_UP:
            registry.clear_selected(BUTTON_ID)
            return registry.is_hovering(BUTTON_ID)
        elif event.action is InputAction.CLICKED:
            self._flash_button()
            return True
        return False

    def show_new_game_prompt(self) -> None:
        """Leave only the button live, labelled New Game."""
        self.session.set_button(ButtonMode.NEW_GAME, enabled=True)
        self._set_phase(GamePhase.NEW_GAME_PROMPT)

    # --- Blocking loops ---

    def play(self, adapter: IOAdapter) -> bool:
        """
        Run one game to completion.

        Returns:
            True if every slot was scored, False if the input ended first
        """
        self.adapter = adapter
        self.start_session()
        while self.refresh():
            self._render()
            if not self._await_event():
                logger.info("Input ended during a game")
                return False
        return True

    def prompt_new_game(self, adapter: IOAdapter) -> bool:
        """
        Wait between games for the New Game button.

        Returns:
            True to start another game, False if the input ended
        """
        self.adapter = adapter
        self.show_new_game_prompt()
        while True:
            self._render()
            event = adapter.get_next_input_event()
            if event is None:
                logger.info("Input ended at the new-game prompt")
                return False
            if self.handle_new_game_event(event):
                return True

    def run(self, adapter: IOAdapter) -> None:
        """Play games back to back until the player quits."""
        games = 0
        while self.play(adapter):
            games += 1
            if not self.prompt_new_game(adapter):
                break
        logger.info("Leaving after %d completed game(s)", games)

    # --- Internals ---

    def _await_event(self) -> bool:
        """Take events until one is acted on. False when input has ended."""
        while True:
            event = self.auto_event()
            if event is None:
                event = self.adapter.get_next_input_event()
                if event is None:
                    return False
            if self.handle_event(event):
                return True

    def _handle_die(self, die: Control, action: InputAction) -> bool:
        session = self.session
        if session.rolls_exhausted:
            return False
        if action in _ACTIVATING:
            session.registry.toggle_selected(die.control_id)
            if session.selected_slot is not None:
                session.deselect_slots()
                ScoringEngine.update_open_slots(session)
                ScoringEngine.update_scores(session)
        return True

    def _toggle_slot(self, slot_control: Control) -> None:
        session = self.session
        was_selected = slot_control.selected
        session.deselect_slots()
        session.deselect_dice()
        if not was_selected:
            session.registry.set_selected(slot_control.control_id)
        ScoringEngine.update_scores(session)

    def _handle_button(self, button: Control, action: InputAction) -> bool:
        registry = self.session.registry
        if action is InputAction.PRESS_DOWN:
            registry.set_selected(BUTTON_ID)
            return True
        if action is InputAction.PRESS_UP:
            registry.clear_selected(BUTTON_ID)
            if not button.hovering:
                return True
        elif action is InputAction.CLICKED:
            self._flash_button()
        else:
            return True

        mode = self.session.button_mode
        if mode is ButtonMode.SCORE:
            return self._commit_selected()
        if mode is ButtonMode.ROLL:
            return self._reroll()
        return False

    def _commit_selected(self) -> bool:
        session = self.session
        selected = session.selected_slot
        if selected is None:
            return False

        points = session.commit(selected.control_id)
        self._set_phase(GamePhase.COMMITTED)
        logger.info("Scored %d in %s", points, selected.slot.label)

        if session.open_slots:
            session.roll_all_dice()
            session.roll_count = 1
            ScoringEngine.update_open_slots(session)
            logger.debug("New turn, roll 1: %s", session.dice_pips)
        ScoringEngine.update_scores(session)
        return True

    def _reroll(self) -> bool:
        session = self.session
        if session.rolls_exhausted:
            return False
        session.deselect_slots()
        rolled = session.reroll_selected_dice()
        session.roll_count += 1
        ScoringEngine.update_open_slots(session)
        ScoringEngine.update_scores(session)
        logger.debug(
            "Roll %d rerolled %d dice: %s", session.roll_count, len(rolled), session.dice_pips
        )
        return True

    def _flash_button(self) -> None:
        """Draw the button pressed for a moment, then restore it."""
        if self.adapter is None:
            return
        registry = self.session.registry
        button = registry.button
        was_selected, was_hovering = button.selected, button.hovering
        registry.set_selected(BUTTON_ID)
        registry.set_hovering(BUTTON_ID)
        self._render()
        if self.flash_delay > 0:
            time.sleep(self.flash_delay)
        if not was_selected:
            registry.clear_selected(BUTTON_ID)
        if not was_hovering:
            registry.clear_hovering(BUTTON_ID)
        self._render()

    def _render(self) -> None:
        if self.adapter is None:
            return
        self.adapter.render(self.session)
        self.session.registry.mark_rendered()

    def _set_phase(self, phase: GamePhase) -> None:
        if phase is not self.phase:
            logger.debug("Phase %s -> %s", self.phase.name, phase.name)
            self.phase = phase
