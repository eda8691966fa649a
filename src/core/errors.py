"""Command errors raised by the session state manager.

Every error is raised before any state is touched, so a rejected
command leaves the session exactly as it was.
"""


class PitchSignError(Exception):
    """Base class for rejected session commands."""


class NoSelectionError(PitchSignError):
    """A sign was requested while no pitch is selected."""

    def __init__(self, message: str = "Please select at least one pitch type"):
        super().__init__(message)


class EmptyNameError(PitchSignError):
    """A combination was saved with a blank name."""

    def __init__(self, message: str = "Please enter a name for this combination"):
        super().__init__(message)


class EmptySelectionError(PitchSignError):
    """A combination was saved while no pitch is selected."""

    def __init__(self, message: str = "Please select at least one pitch to save"):
        super().__init__(message)


class IndexOutOfRange(PitchSignError, IndexError):
    """A category, pitch or combination index does not exist."""

    def __init__(self, kind: str, index: int, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"No {kind} at index {index} (have {size})")
