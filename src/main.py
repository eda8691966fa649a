#!/usr/bin/env python3
"""Pitch sign generator console entry point.

Reads one command per line from stdin and:
  1. Routes it to the session state manager
  2. Prints the updated view
  3. Rings the audio cue on each new sign (via the event bus)
"""

import sys
import os
import logging
from typing import TextIO

# Add src/ to path so imports work when running directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import load_config
from core.logging_config import setup_logging
from core.event_bus import EventBus
from core.errors import PitchSignError
from core.state_manager import StateManager
from pitches.audio import NullAudioCue, TerminalBellCue, attach_audio_cue
from pitches.catalog import build_catalog
from pitches.combinations import build_combinations
from pitches.grid import NumpyRandomSource
from ui import console

log = logging.getLogger("pitchsign.main")

QUIT = object()


class PitchSignApp:
    """Console application wiring config, event bus and session state."""

    def __init__(self, config: dict, state: StateManager | None = None,
                 audio_cue=None):
        self.config = config
        self.event_bus = EventBus()

        if state is None:
            state = self._build_state(config)
        state.event_bus = self.event_bus
        self.state = state

        if audio_cue is None:
            enabled = config.get("audio", {}).get("enabled", True)
            audio_cue = TerminalBellCue() if enabled else NullAudioCue()
        attach_audio_cue(self.event_bus, audio_cue)

        self.event_bus.subscribe("state_changed", self._on_state_changed)

    def _build_state(self, config: dict) -> StateManager:
        session = config.get("session", {})
        catalog_cfg = config.get("catalog")
        presets_cfg = config.get("presets")
        return StateManager(
            event_bus=self.event_bus,
            categories=build_catalog(catalog_cfg) if catalog_cfg else None,
            combinations=(build_combinations(presets_cfg)
                          if presets_cfg is not None else None),
            random_source=NumpyRandomSource(session.get("seed")),
            history_size=session.get("history_size", 10),
        )

    def _on_state_changed(self, data: dict) -> None:
        log.debug("State changed: %s", data)

    # --- Commands ---

    def handle(self, line: str):
        """Run one command line. Returns text to print, or QUIT."""
        parts = line.split()
        cmd = parts[0].lower() if parts else "sign"
        args = parts[1:]
        state = self.state

        if cmd in ("quit", "q", "exit"):
            return QUIT

        if cmd in ("sign", "s"):
            state.draw_sign()
            return console.render_screen(state.current_pitch, state.count)

        if cmd in ("ball", "b"):
            state.increment_balls()
            return console.render_count(state.count)
        if cmd in ("strike", "k"):
            state.increment_strikes()
            return console.render_count(state.count)
        if cmd in ("reset", "r"):
            state.reset_count()
            return console.render_count(state.count)

        if cmd in ("toggle", "t"):
            category_index, pitch_index = _int_args(args, 2)
            state.select_pitch(category_index, pitch_index)
            return console.render_catalog(state.categories)
        if cmd in ("pitches", "p"):
            return console.render_catalog(state.categories)

        if cmd == "name":
            state.combination_name = " ".join(args)
            return f"Combination name: {state.combination_name!r}"
        if cmd == "save":
            combo = state.save_combination(" ".join(args) if args else None)
            return f"Saved '{combo.name}': {', '.join(combo.pitches)}"
        if cmd in ("combos", "c"):
            return console.render_combinations(state.saved_combinations)
        if cmd == "load":
            (index,) = _int_args(args, 1)
            state.load_combination_at(index)
            return console.render_catalog(state.categories)
        if cmd in ("delete", "del"):
            (index,) = _int_args(args, 1)
            combo = state.delete_combination(index)
            return f"Deleted '{combo.name}'"

        if cmd in ("history", "h"):
            return console.render_history(state.history)
        if cmd in ("help", "?"):
            return console.HELP_TEXT

        log.debug("Unknown command: %s", cmd)
        return f"Unknown command: {cmd} (try 'help')"

    def run(self, stdin: TextIO = None, stdout: TextIO = None) -> None:
        """Read-eval-print loop until EOF or quit."""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout

        print(console.render_screen(self.state.current_pitch, self.state.count),
              file=stdout)
        for line in stdin:
            try:
                result = self.handle(line)
            except (PitchSignError, ValueError) as e:
                result = f"Error: {e}"
            if result is QUIT:
                break
            print(result, file=stdout)
        log.info("Session ended after %d signs in history", len(self.state.history))


def _int_args(args: list[str], n: int) -> tuple[int, ...]:
    if len(args) != n:
        raise ValueError(f"expected {n} number(s), got {len(args)}")
    return tuple(int(a) for a in args)


def main() -> None:
    setup_logging()
    log.info("=== Pitch Sign Generator ===")

    config = load_config()
    app = PitchSignApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        log.info("Interrupted, stopping...")


if __name__ == "__main__":
    main()
