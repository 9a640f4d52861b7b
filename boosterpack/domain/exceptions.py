"""Exceptions raised by boosterpack domain services."""

from .results import ErrorKind


class BoosterPackError(RuntimeError):
    """Base class for domain exceptions."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


class InvalidArgument(BoosterPackError):
    """Raised when a command or inventory call receives bad arguments."""

    kind = ErrorKind.INVALID_ARGUMENT


class EmptyQueue(BoosterPackError):
    """Raised when a pack is requested but none are queued."""

    kind = ErrorKind.EMPTY_QUEUE


class InvalidPackData(BoosterPackError):
    """Raised when a dequeued pack entry cannot be opened."""

    kind = ErrorKind.INVALID_PACK_DATA


class ResolutionFailure(BoosterPackError):
    """Raised when a card, pack type or item cannot be resolved from configuration."""

    kind = ErrorKind.RESOLUTION_FAILURE
