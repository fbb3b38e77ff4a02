"""
Errors - Exception hierarchy for track construction.

Every error raised by linetrack derives from LineTrackError. File system
errors from writing or reading tracks are not wrapped and surface as OSError.
"""


class LineTrackError(Exception):
    """Base class for all linetrack errors."""


class InvalidParameterError(LineTrackError, ValueError):
    """A shape, rider or line request is malformed."""


class DuplicateNameError(InvalidParameterError):
    """A layer with the same name already exists in the game."""


class ParameterMismatchError(LineTrackError, ValueError):
    """An explicit value list is shorter than the requested count."""


class DanglingReferenceError(LineTrackError):
    """A line references a layer that does not exist in the game."""


class NotFoundError(LineTrackError, LookupError):
    """A lookup by identifier or name found nothing."""


class SerializationError(LineTrackError, ValueError):
    """A value cannot be represented in the track file, or a document is malformed."""
