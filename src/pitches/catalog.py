"""Pitch catalog: categories, pitch options and the default arsenal."""

import logging
from dataclasses import dataclass

log = logging.getLogger("pitchsign.pitches.catalog")

# Default arsenal: category name -> ((pitch name, selected), ...)
DEFAULT_CATEGORIES = {
    "Fastballs": (
        ("4-Seam FB",      True),
        ("2-Seam FB",      False),
        ("Running FB",     False),
        ("Sinker",         True),
        ("Cutter",         True),
    ),
    "Breaking Balls": (
        ("Curveball",      False),
        ("Slider",         False),
        ("Slurve",         True),
        ("Knuckle-Curve",  True),
        ("Screwball",      True),
        ("12-6 Curve",     False),
        ("Sweeping Curve", False),
    ),
    "Off-Speed": (
        ("Splitter",       True),
        ("Changeup",       True),
        ("Circle-Change",  False),
        ("Palmball",       False),
        ("Forkball",       False),
        ("Vulcan-Change",  False),
    ),
}


class PitchOption:
    """A single pitch type and whether it is in the active arsenal."""

    __slots__ = ("name", "selected")

    def __init__(self, name: str, selected: bool = False):
        self.name = name
        self.selected = selected

    def toggle(self) -> None:
        self.selected = not self.selected

    def __repr__(self) -> str:
        mark = "x" if self.selected else " "
        return f"PitchOption([{mark}] {self.name})"


class PitchCategory:
    """A named group of pitch options, kept in display order."""

    __slots__ = ("name", "pitches")

    def __init__(self, name: str, pitches: list[PitchOption] | None = None):
        self.name = name
        self.pitches: list[PitchOption] = list(pitches or [])

    @property
    def selected_count(self) -> int:
        return sum(1 for p in self.pitches if p.selected)

    def __repr__(self) -> str:
        return f"PitchCategory({self.name}, {len(self.pitches)} pitches)"


@dataclass(frozen=True)
class SelectedPitch:
    """A selected pitch flattened out of its category."""

    name: str
    category: str


def build_catalog(entries: list[dict]) -> list[PitchCategory]:
    """Build fresh categories from config-style dicts.

    Each entry looks like ``{"name": "Fastballs", "pitches": [{"name":
    "Sinker", "selected": true}, ...]}``. A pitch may also be given as a
    bare string, which means unselected.
    """
    categories: list[PitchCategory] = []
    seen_categories: set[str] = set()

    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Catalog entry {i} must be a mapping, got {entry!r}")
        name = str(entry.get("name", "")).strip()
        if not name:
            raise ValueError(f"Catalog entry {i} has no name")
        if name in seen_categories:
            raise ValueError(f"Duplicate category name: {name}")
        seen_categories.add(name)

        options: list[PitchOption] = []
        seen_pitches: set[str] = set()
        for pitch in entry.get("pitches") or []:
            if isinstance(pitch, str):
                pitch_name, selected = pitch, False
            elif isinstance(pitch, dict):
                pitch_name = pitch.get("name", "")
                selected = bool(pitch.get("selected", False))
            else:
                raise ValueError(f"Bad pitch in category {name}: {pitch!r}")
            pitch_name = str(pitch_name).strip()
            if not pitch_name:
                raise ValueError(f"Unnamed pitch in category {name}")
            if pitch_name in seen_pitches:
                raise ValueError(f"Duplicate pitch {pitch_name} in category {name}")
            seen_pitches.add(pitch_name)
            options.append(PitchOption(pitch_name, selected))

        categories.append(PitchCategory(name, options))

    log.debug("Built catalog: %d categories, %d pitches",
              len(categories), sum(len(c.pitches) for c in categories))
    return categories


def default_catalog() -> list[PitchCategory]:
    """Fresh copy of the default arsenal."""
    return [
        PitchCategory(name, [PitchOption(p, sel) for p, sel in pitches])
        for name, pitches in DEFAULT_CATEGORIES.items()
    ]


def pitch_names(categories: list[PitchCategory]) -> set[str]:
    """All pitch names in the catalog, across categories."""
    return {p.name for c in categories for p in c.pitches}
