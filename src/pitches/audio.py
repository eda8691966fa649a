"""Audio cue played when a new sign is drawn.

The cue is fire-and-forget: it is attached to the ``sign_drawn`` event
and any failure is logged, never raised back to the draw.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from core.event_bus import EventBus
    from pitches.draw import PitchDraw

log = logging.getLogger("pitchsign.pitches.audio")

BELL = "\a"


class AudioCue(Protocol):
    def play(self, sign: PitchDraw | None = None) -> None:
        ...


class NullAudioCue:
    """Silent cue for tests and headless runs."""

    def play(self, sign: PitchDraw | None = None) -> None:
        pass


class TerminalBellCue:
    """Rings the terminal bell on each new sign."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self.played = 0

    def play(self, sign: PitchDraw | None = None) -> None:
        stream = self._stream or sys.stdout
        try:
            stream.write(BELL)
            stream.flush()
            self.played += 1
        except (OSError, ValueError) as e:
            log.debug("Audio couldn't play: %s", e)


def attach_audio_cue(event_bus: EventBus, cue: AudioCue) -> None:
    """Subscribe the cue to new-sign events."""

    def on_sign_drawn(sign: PitchDraw) -> None:
        cue.play(sign)

    event_bus.subscribe("sign_drawn", on_sign_drawn)
    log.debug("Audio cue attached: %s", type(cue).__name__)
