"""
Yahtzee - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

import random
from collections import deque
from typing import Callable, Iterable

import pytest

from src.engine.base import InputEvent
from src.engine.game import YahtzeeGame
from src.engine.io import IOAdapter
from src.engine.scoring import histogram
from src.engine.session import Session


# =============================================================================
# TEST DOUBLES
# =============================================================================

class ScriptedRandom(random.Random):
    """
    Deals predetermined die faces, then falls back to a fixed seed.

    Faces are given as pips (1-6) and handed out by ``randrange`` as the
    engine's stored 0-5 values.
    """

    def __init__(self, pips: Iterable[int] = ()):
        super().__init__(0)
        self.pending = deque(pip - 1 for pip in pips)

    def deal(self, *pips: int) -> None:
        self.pending.extend(pip - 1 for pip in pips)

    def randrange(self, *args, **kwargs):
        if self.pending:
            return self.pending.popleft()
        return super().randrange(*args, **kwargs)


class ScriptedAdapter(IOAdapter):
    """Replays a fixed list of events and records what the engine asked for."""

    def __init__(self, events: Iterable[InputEvent] = ()):
        self.events = deque(events)
        self.renders = 0
        self.requests = 0
        self.button_pressed_on_render: list[bool] = []
        self.modified_on_request: list[int] = []
        self.session: Session | None = None

    def render(self, session: Session) -> None:
        self.session = session
        self.renders += 1
        self.button_pressed_on_render.append(session.registry.button.selected)

    def get_next_input_event(self) -> InputEvent | None:
        self.requests += 1
        if self.session is not None:
            self.modified_on_request.append(len(self.session.registry.modified_ids()))
        if self.events:
            return self.events.popleft()
        return None


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def counts_of() -> Callable[..., tuple[int, ...]]:
    """Build a face histogram from pip values, e.g. ``counts_of(2, 2, 2, 5, 6)``."""
    def build(*pips: int) -> tuple[int, ...]:
        return histogram([pip - 1 for pip in pips])
    return build


@pytest.fixture
def yahtzee_scoring_rolls() -> dict[str, tuple[tuple[int, ...], str, int]]:
    """
    Common rolls with the expected score in one category.

    Returns:
        Dict mapping name to (pips, slot name, expected_points)
    """
    return {
        "three_twos": ((2, 2, 2, 5, 6), "THREE_OF_A_KIND", 17),
        "pairs_no_three": ((2, 2, 5, 5, 6), "THREE_OF_A_KIND", 0),
        "four_threes": ((3, 3, 3, 3, 6), "FOUR_OF_A_KIND", 18),
        "three_not_four": ((3, 3, 3, 6, 6), "FOUR_OF_A_KIND", 0),
        "full_house": ((3, 3, 3, 2, 2), "FULL_HOUSE", 25),
        "full_house_five_of_a_kind": ((5, 5, 5, 5, 5), "FULL_HOUSE", 25),
        "full_house_four_and_one": ((4, 4, 4, 4, 1), "FULL_HOUSE", 0),
        "small_straight_low": ((1, 2, 3, 4, 6), "SMALL_STRAIGHT", 30),
        "small_straight_mid": ((2, 3, 4, 5, 5), "SMALL_STRAIGHT", 30),
        "small_straight_high": ((3, 4, 5, 6, 6), "SMALL_STRAIGHT", 30),
        "no_small_straight": ((1, 1, 2, 3, 5), "SMALL_STRAIGHT", 0),
        "large_straight_high": ((2, 3, 4, 5, 6), "LARGE_STRAIGHT", 40),
        "large_straight_low": ((1, 2, 3, 4, 5), "LARGE_STRAIGHT", 0),
        "yahtzee": ((4, 4, 4, 4, 4), "YAHTZEE", 50),
        "chance": ((1, 3, 4, 6, 6), "CHANCE", 20),
    }


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def scripted_random() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def make_adapter() -> Callable[..., ScriptedAdapter]:
    """Factory for scripted adapters: ``make_adapter([event, ...])``."""
    return ScriptedAdapter


@pytest.fixture
def game(scripted_random: ScriptedRandom) -> YahtzeeGame:
    """A game whose dice come from ``scripted_random``; not yet started."""
    return YahtzeeGame(rng=scripted_random, flash_delay=0.0)


@pytest.fixture
def started_game(game: YahtzeeGame, scripted_random: ScriptedRandom) -> YahtzeeGame:
    """A started game showing 2-2-2-5-6 on its first roll."""
    scripted_random.deal(2, 2, 2, 5, 6)
    game.start_session()
    game.refresh()
    return game
