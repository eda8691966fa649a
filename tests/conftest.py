import os
import sys
from datetime import datetime

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from core.event_bus import EventBus  # noqa: E402
from core.state_manager import StateManager  # noqa: E402
from pitches.grid import SequenceRandomSource  # noqa: E402

FIXED_TIME = datetime(2024, 4, 1, 19, 5, 30)


@pytest.fixture()
def event_bus():
    return EventBus()


@pytest.fixture()
def make_state(event_bus):
    """Factory for a session with scripted randomness and a fixed clock."""

    def _make(values=(0,), **kwargs):
        kwargs.setdefault("event_bus", event_bus)
        kwargs.setdefault("clock", lambda: FIXED_TIME)
        return StateManager(random_source=SequenceRandomSource(values), **kwargs)

    return _make


@pytest.fixture()
def state(make_state):
    return make_state()


def deselect_all(state: StateManager) -> None:
    for category in state.categories:
        for pitch in category.pitches:
            pitch.selected = False
