"""Plain-text views of the session for the console front end.

Each function takes the state it shows and returns a string; nothing
here mutates the session.
"""

import logging

from pitches.catalog import PitchCategory
from pitches.combinations import SavedCombination
from pitches.count import Count
from pitches.draw import PitchDraw
from pitches.grid import GRID_SIZE, is_in_strike_zone

log = logging.getLogger("pitchsign.ui.console")

CELL_ZONE = "#"
CELL_OUT = "."
CELL_TARGET = "X"

HELP_TEXT = """\
Commands:
  sign | s | <enter>   draw a new sign
  ball | b             add a ball
  strike | k           add a strike
  reset | r            reset the count
  toggle | t C P       toggle pitch P in category C
  pitches | p          list the arsenal
  name NAME            set the pending combination name
  save [NAME]          save the selection as a combination
  combos | c           list saved combinations
  load N               load combination N
  delete | del N       delete combination N
  history | h          show recent signs
  help | ?             show this help
  quit | q             exit"""


def render_count(count: Count) -> str:
    return f"Count  {count.balls}-{count.strikes}"


def render_grid(location: tuple[int, int] | None) -> str:
    """5x5 grid with the strike zone shaded and the target marked."""
    lines = []
    for row in range(GRID_SIZE):
        cells = []
        for col in range(GRID_SIZE):
            if location == (row, col):
                cells.append(CELL_TARGET)
            elif is_in_strike_zone(row, col):
                cells.append(CELL_ZONE)
            else:
                cells.append(CELL_OUT)
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_sign(sign: PitchDraw | None) -> str:
    if sign is None:
        return "Press sign to generate a pitch"
    zone = "STRIKE" if sign.is_strike else "BALL"
    return (f"{sign.name} ({sign.category})  "
            f"row {sign.row + 1}, col {sign.col + 1}  {zone}")


def render_catalog(categories: list[PitchCategory]) -> str:
    lines = []
    total = 0
    for ci, category in enumerate(categories):
        lines.append(f"[{ci}] {category.name}")
        for pi, pitch in enumerate(category.pitches):
            mark = "x" if pitch.selected else " "
            lines.append(f"    {pi}. [{mark}] {pitch.name}")
        total += category.selected_count
    lines.append(f"{total} pitches selected")
    return "\n".join(lines)


def render_history(history: list[PitchDraw]) -> str:
    if not history:
        return "No pitches yet"
    return "\n".join(
        f"{i + 1:>2}. {sign.time_str}  {sign.name:<15} "
        f"({sign.row + 1},{sign.col + 1}) {'S' if sign.is_strike else 'B'}"
        for i, sign in enumerate(history)
    )


def render_combinations(combos: list[SavedCombination]) -> str:
    if not combos:
        return "No saved combinations"
    return "\n".join(
        f"{i}. {combo.name}: {', '.join(combo.pitches)}"
        for i, combo in enumerate(combos)
    )


def render_screen(sign: PitchDraw | None, count: Count) -> str:
    """Main view shown after each sign."""
    return "\n".join([render_count(count), render_grid(
        sign.location if sign else None), render_sign(sign)])
