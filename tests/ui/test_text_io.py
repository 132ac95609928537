"""
Yahtzee - Text Adapter Tests

Drives the text adapter with in-memory input and a captured rich console.
"""

import io
import logging

import pytest
from rich.console import Console

from src.engine.base import BUTTON_ID, InputEvent, Slot
from src.engine.game import YahtzeeGame
from src.engine.io import IOMode
from src.ui.text_io import TextAdapter


def make_text_adapter(text: str = "") -> tuple[TextAdapter, io.StringIO]:
    out = io.StringIO()
    console = Console(file=out, color_system=None, width=100, highlight=False)
    return TextAdapter(stdin=io.StringIO(text), console=console), out


@pytest.fixture
def attach(started_game):
    """Build a text adapter already shown the started game."""
    def build(text: str = "") -> tuple[TextAdapter, io.StringIO]:
        adapter, out = make_text_adapter(text)
        adapter.render(started_game.session)
        return adapter, out
    return build


class TestLifecycle:
    """Tests for initialise and end of input."""

    def test_mode(self):
        adapter, _ = make_text_adapter()
        assert adapter.mode is IOMode.TEXT

    def test_initialize_prints_banner(self):
        adapter, out = make_text_adapter()
        assert adapter.initialize(IOMode.TEXT) is True
        assert "Y a h t z e e" in out.getvalue()

    @pytest.mark.parametrize("mode", [IOMode.TERMINAL, IOMode.GRAPHICAL])
    def test_richer_modes_fall_back_to_text(self, mode, caplog):
        adapter, out = make_text_adapter()
        with caplog.at_level(logging.INFO, logger="src.ui.text_io"):
            assert adapter.initialize(mode) is True
        assert adapter.mode is IOMode.TEXT
        assert f"No {mode.value} back end available" in caplog.text
        assert "Y a h t z e e" in out.getvalue()

    def test_no_session_yet(self):
        adapter, _ = make_text_adapter("a\n")
        assert adapter.get_next_input_event() is None

    def test_end_of_input(self, attach):
        adapter, _ = attach("")
        assert adapter.get_next_input_event() is None

    @pytest.mark.parametrize("line", ["q", "Q", "quit"])
    def test_quit(self, attach, line):
        adapter, _ = attach(f"{line}\na\n")
        assert adapter.get_next_input_event() is None


class TestParsing:
    """Tests for translating command lines into events."""

    def test_dice_letters_then_roll(self, attach):
        adapter, _ = attach("ab\n")
        events = [adapter.get_next_input_event() for _ in range(3)]
        assert events == [InputEvent.click(0), InputEvent.click(1), InputEvent.click(BUTTON_ID)]
        assert adapter.get_next_input_event() is None

    def test_uppercase_and_repeated_dice(self, attach):
        adapter, _ = attach("EeA\n")
        events = [adapter.get_next_input_event() for _ in range(3)]
        assert events == [InputEvent.click(4), InputEvent.click(0), InputEvent.click(BUTTON_ID)]

    def test_spaces_between_dice_letters(self, attach):
        adapter, out = attach("a b\n")
        events = [adapter.get_next_input_event() for _ in range(3)]
        assert events == [InputEvent.click(0), InputEvent.click(1), InputEvent.click(BUTTON_ID)]
        assert "Please specify" not in out.getvalue()

    def test_spaces_after_slot_key(self, attach):
        adapter, out = attach("t 2\n")
        assert adapter.get_next_input_event() is None
        assert 'Extra characters after input: "2".' in out.getvalue()

    def test_blank_line_of_spaces_passed_directly(self, started_game):
        adapter, out = make_text_adapter()
        assert adapter.parse_line(started_game.session, "   ") is False
        assert "Enter (?) for help." in out.getvalue()

    def test_slot_key(self, attach):
        adapter, _ = attach("t\n")
        assert adapter.get_next_input_event() == InputEvent.click(Slot.THREE_OF_A_KIND.control_id)

    def test_number_slot_key(self, attach):
        adapter, _ = attach("6\n")
        assert adapter.get_next_input_event() == InputEvent.click(Slot.SIXES.control_id)

    def test_dice_and_slot_mixed(self, attach):
        adapter, out = attach("a1\n")
        assert adapter.get_next_input_event() is None
        assert "Please specify either dice or a single scoring slot." in out.getvalue()

    def test_extra_characters(self, attach):
        adapter, out = attach("t2\n")
        assert adapter.get_next_input_event() is None
        assert 'Extra characters after input: "2".' in out.getvalue()

    def test_invalid_input(self, attach):
        adapter, out = attach("z\n")
        assert adapter.get_next_input_event() is None
        assert "Invalid input. Enter (?) for help." in out.getvalue()

    def test_empty_line_with_disabled_button(self, attach):
        adapter, out = attach("\n")
        assert adapter.get_next_input_event() is None
        assert "Enter (?) for help." in out.getvalue()

    def test_committed_slot(self, started_game, attach):
        started_game.session.commit(Slot.CHANCE.control_id)
        adapter, out = attach("x\n")
        assert adapter.get_next_input_event() is None
        assert "Slot not available." in out.getvalue()

    def test_dice_after_third_roll(self, started_game, attach):
        started_game.session.fix_dice()
        adapter, out = attach("a\n")
        assert adapter.get_next_input_event() is None
        assert "Cannot roll dice." in out.getvalue()

    def test_bad_line_then_good_line(self, attach):
        adapter, _ = attach("zz\nx\n")
        assert adapter.get_next_input_event() == InputEvent.click(Slot.CHANCE.control_id)


class TestCommands:
    """Tests for help, version and redisplay commands."""

    def test_help(self, attach):
        adapter, out = attach("?\n")
        adapter.get_next_input_event()
        assert "bonus of 35 points" in out.getvalue()

    def test_version(self, attach):
        adapter, out = attach("v\n")
        adapter.get_next_input_event()
        assert "yahtzee, version 1.0.0." in out.getvalue()

    def test_redisplay(self, attach):
        adapter, out = attach(".\n")
        adapter.get_next_input_event()
        assert out.getvalue().count("(2)  (2)  (2)  (5)  (6)") == 2
        assert out.getvalue().count("Three of a Kind") == 2


class TestDisplay:
    """Tests for the prompt and score sheet."""

    def test_roll_prompt(self, attach):
        adapter, out = attach("")
        adapter.get_next_input_event()
        assert "Roll (abcde) or Score (123456tfhslyx):" in out.getvalue()

    def test_confirm_prompt(self, started_game, attach):
        started_game.handle_event(InputEvent.click(Slot.THREE_OF_A_KIND.control_id))
        started_game.refresh()
        adapter, out = attach("")
        adapter.get_next_input_event()
        assert "Confirm (RET):" in out.getvalue()
        assert "17" in out.getvalue()

    def test_score_only_prompt_on_third_roll(self, started_game, attach):
        started_game.session.roll_count = 3
        started_game.refresh()
        adapter, out = attach("")
        adapter.get_next_input_event()
        assert "Score (123456tfhslyx):" in out.getvalue()
        assert "Roll (" not in out.getvalue()

    def test_previews_hidden(self, attach):
        adapter, out = attach("")
        adapter.get_next_input_event()
        assert "17" not in out.getvalue()

    def test_new_game_prompt(self, started_game, attach):
        started_game.show_new_game_prompt()
        adapter, out = attach("a\n\n")
        assert adapter.get_next_input_event() == InputEvent.click(BUTTON_ID)
        assert "Another game (RET) or Quit (q):" in out.getvalue()


class TestPlayThroughText:
    """A game driven end to end by typed lines."""

    def test_score_first_roll(self, scripted_random):
        scripted_random.deal(2, 2, 2, 5, 6)
        game = YahtzeeGame(rng=scripted_random)
        adapter, out = make_text_adapter("t\n\n")
        assert game.play(adapter) is False

        session = game.session
        assert session.is_committed(Slot.THREE_OF_A_KIND)
        assert session.slot_value(Slot.THREE_OF_A_KIND) == 17
        assert session.slot_value(Slot.TOTAL) == 17
        assert "Confirm (RET):" in out.getvalue()
