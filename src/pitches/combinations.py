"""Saved pitch combinations and the built-in presets."""

import logging
from dataclasses import dataclass

log = logging.getLogger("pitchsign.pitches.combinations")


@dataclass(frozen=True)
class SavedCombination:
    """A named subset of pitch names for quick recall."""

    name: str
    pitches: tuple[str, ...]


PRESET_COMBINATIONS = (
    SavedCombination("Power Pitcher",
                     ("4-Seam FB", "Cutter", "Slider", "Splitter")),
    SavedCombination("Finesse Pitcher",
                     ("Sinker", "Changeup", "Curveball", "Slurve")),
    SavedCombination("Breaking Ball Specialist",
                     ("Curveball", "Slider", "Knuckle-Curve",
                      "12-6 Curve", "Sweeping Curve")),
)


def build_combinations(entries: list[dict]) -> list[SavedCombination]:
    """Build combinations from config-style ``{name, pitches}`` dicts."""
    combos: list[SavedCombination] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Preset entry {i} must be a mapping, got {entry!r}")
        name = entry.get("name")
        if not name or not str(name).strip():
            raise ValueError(f"Preset entry {i} has no name")
        pitches = entry.get("pitches") or []
        if isinstance(pitches, str):
            raise ValueError(f"Preset {name}: pitches must be a list")
        combos.append(SavedCombination(str(name), tuple(str(p) for p in pitches)))
    log.debug("Built %d preset combinations", len(combos))
    return combos
