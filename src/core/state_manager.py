"""Session state manager.

Owns everything one pitching session needs: the pitch catalog and its
selection flags, the ball/strike count, the current sign, the recent
sign history and the saved combinations. All commands run to
completion synchronously and validate before mutating, so a rejected
command leaves the session untouched.

Events published on the bus:
  ``sign_drawn``     data = PitchDraw
  ``state_changed``  data = {"type": "sign" | "selection" | "count" |
                             "combinations" | "name", ...}
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Iterable

from core.errors import (
    EmptyNameError,
    EmptySelectionError,
    IndexOutOfRange,
    NoSelectionError,
)
from pitches.catalog import PitchCategory, SelectedPitch, default_catalog
from pitches.combinations import PRESET_COMBINATIONS, SavedCombination
from pitches.count import Count
from pitches.draw import PitchDraw
from pitches.grid import GRID_SIZE, NumpyRandomSource, RandomSource, is_in_strike_zone

if TYPE_CHECKING:
    from core.event_bus import EventBus

log = logging.getLogger("pitchsign.state")

HISTORY_SIZE = 10


class StateManager:
    """Single-session state for the pitch sign generator."""

    def __init__(self, event_bus: EventBus | None = None,
                 categories: list[PitchCategory] | None = None,
                 combinations: Iterable[SavedCombination] | None = None,
                 random_source: RandomSource | None = None,
                 clock: Callable[[], datetime] | None = None,
                 history_size: int = HISTORY_SIZE):
        if history_size < 1:
            raise ValueError(f"history_size must be at least 1, got {history_size}")

        self.event_bus = event_bus
        self._random = random_source or NumpyRandomSource()
        self._clock = clock or datetime.now

        self._categories: list[PitchCategory] = (
            categories if categories is not None else default_catalog()
        )
        self._combinations: list[SavedCombination] = list(
            PRESET_COMBINATIONS if combinations is None else combinations
        )
        self._count = Count()
        self._current: PitchDraw | None = None
        self._history: deque[PitchDraw] = deque(maxlen=history_size)
        self._combination_name = ""

    # --- Read-only views ---

    @property
    def categories(self) -> list[PitchCategory]:
        return self._categories

    @property
    def count(self) -> Count:
        return self._count

    @property
    def current_pitch(self) -> PitchDraw | None:
        return self._current

    @property
    def current_location(self) -> tuple[int, int] | None:
        return self._current.location if self._current else None

    @property
    def history(self) -> list[PitchDraw]:
        """Recent signs, newest first."""
        return list(self._history)

    @property
    def history_size(self) -> int:
        return self._history.maxlen

    @property
    def saved_combinations(self) -> list[SavedCombination]:
        return list(self._combinations)

    @property
    def combination_name(self) -> str:
        """Pending name for the next save."""
        return self._combination_name

    @combination_name.setter
    def combination_name(self, value: str) -> None:
        self._combination_name = value or ""
        self._notify("name")

    # --- Selection ---

    def select_pitch(self, category_index: int, pitch_index: int) -> bool:
        """Toggle a pitch in or out of the arsenal. Returns the new flag."""
        category = self._category_at(category_index)
        if not 0 <= pitch_index < len(category.pitches):
            raise IndexOutOfRange(f"pitch in {category.name}", pitch_index,
                                  len(category.pitches))
        pitch = category.pitches[pitch_index]
        pitch.toggle()
        log.info("%s %s", pitch.name, "selected" if pitch.selected else "deselected")
        self._notify("selection")
        return pitch.selected

    def get_selected_pitches(self) -> list[SelectedPitch]:
        """Selected pitches in category-then-pitch order."""
        return [
            SelectedPitch(pitch.name, category.name)
            for category in self._categories
            for pitch in category.pitches
            if pitch.selected
        ]

    @property
    def selected_count(self) -> int:
        return len(self.get_selected_pitches())

    # --- Sign generation ---

    def draw_sign(self) -> PitchDraw:
        """Pick a random selected pitch and a random grid location.

        Every selected pitch is equally likely, whatever the size of its
        category. Row and column are drawn independently over the grid.
        """
        selected = self.get_selected_pitches()
        if not selected:
            raise NoSelectionError()

        pitch = selected[self._random.randrange(len(selected))]
        row = self._random.randrange(GRID_SIZE)
        col = self._random.randrange(GRID_SIZE)

        sign = PitchDraw(
            name=pitch.name,
            category=pitch.category,
            row=row,
            col=col,
            is_strike=is_in_strike_zone(row, col),
            timestamp=self._clock(),
        )

        self._current = sign
        self._history.appendleft(sign)
        log.info("Sign: %s @ (%d, %d) %s", sign.name, row, col,
                 "strike" if sign.is_strike else "ball")

        if self.event_bus:
            self.event_bus.publish("sign_drawn", sign)
        self._notify("sign")
        return sign

    # --- Count ---

    def increment_balls(self) -> Count:
        self._count.increment_balls()
        log.info("Count %s", self._count)
        self._notify("count")
        return self._count

    def increment_strikes(self) -> Count:
        self._count.increment_strikes()
        log.info("Count %s", self._count)
        self._notify("count")
        return self._count

    def reset_count(self) -> Count:
        self._count.reset()
        log.info("Count reset")
        self._notify("count")
        return self._count

    # --- Combinations ---

    def save_combination(self, name: str | None = None) -> SavedCombination:
        """Save the current selection under a name.

        Falls back to the pending combination name when ``name`` is None.
        The name is stored as entered; duplicates are allowed.
        """
        if name is None:
            name = self._combination_name
        if not name or not name.strip():
            raise EmptyNameError()

        selected = self.get_selected_pitches()
        if not selected:
            raise EmptySelectionError()

        combo = SavedCombination(name, tuple(p.name for p in selected))
        self._combinations.append(combo)
        self._combination_name = ""
        log.info("Saved combination '%s' (%d pitches)", name, len(combo.pitches))
        self._notify("combinations")
        return combo

    def load_combination(self, combo: SavedCombination) -> int:
        """Select exactly the pitches named in ``combo``.

        Overwrites the whole catalog: pitches not in the combination are
        deselected, names not in the catalog are ignored. Returns the
        number of pitches now selected.
        """
        wanted = set(combo.pitches)
        for category in self._categories:
            for pitch in category.pitches:
                pitch.selected = pitch.name in wanted

        selected = self.selected_count
        log.info("Loaded combination '%s' (%d pitches selected)", combo.name, selected)
        self._notify("selection")
        return selected

    def load_combination_at(self, index: int) -> int:
        return self.load_combination(self._combination_at(index))

    def delete_combination(self, index: int) -> SavedCombination:
        combo = self._combination_at(index)
        del self._combinations[index]
        log.info("Deleted combination '%s'", combo.name)
        self._notify("combinations")
        return combo

    # --- Internals ---

    def _category_at(self, index: int) -> PitchCategory:
        if not 0 <= index < len(self._categories):
            raise IndexOutOfRange("category", index, len(self._categories))
        return self._categories[index]

    def _combination_at(self, index: int) -> SavedCombination:
        if not 0 <= index < len(self._combinations):
            raise IndexOutOfRange("combination", index, len(self._combinations))
        return self._combinations[index]

    def _notify(self, change: str) -> None:
        if self.event_bus:
            self.event_bus.publish("state_changed", {"type": change})
