"""Ball/strike count."""

import logging

log = logging.getLogger("pitchsign.pitches.count")

MAX_BALLS = 3     # next ball is a walk
MAX_STRIKES = 2   # next strike is a strikeout


class Count:
    """Ball/strike count that rolls over to 0-0 on a walk or strikeout."""

    __slots__ = ("balls", "strikes")

    def __init__(self, balls: int = 0, strikes: int = 0):
        self.balls = balls
        self.strikes = strikes

    def increment_balls(self) -> None:
        if self.balls < MAX_BALLS:
            self.balls += 1
        else:
            log.info("Ball four, count reset")
            self.reset()

    def increment_strikes(self) -> None:
        if self.strikes < MAX_STRIKES:
            self.strikes += 1
        else:
            log.info("Strike three, count reset")
            self.reset()

    def reset(self) -> None:
        self.balls = 0
        self.strikes = 0

    def as_dict(self) -> dict:
        return {"balls": self.balls, "strikes": self.strikes}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Count):
            return NotImplemented
        return (self.balls, self.strikes) == (other.balls, other.strikes)

    def __str__(self) -> str:
        return f"{self.balls}-{self.strikes}"

    def __repr__(self) -> str:
        return f"Count({self.balls}-{self.strikes})"
