"""Pitch draw record (a generated sign)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PitchDraw:
    """One generated sign: a pitch and where to throw it."""

    name: str
    category: str
    row: int
    col: int
    is_strike: bool
    timestamp: datetime

    @property
    def location(self) -> tuple[int, int]:
        return self.row, self.col

    @property
    def time_str(self) -> str:
        return self.timestamp.strftime("%H:%M:%S")

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "location": {"row": self.row, "col": self.col},
            "is_strike": self.is_strike,
            "timestamp": self.time_str,
        }
