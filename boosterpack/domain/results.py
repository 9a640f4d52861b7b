"""Explicit success/failure values returned across the open and command boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    EMPTY_QUEUE = "empty_queue"
    INVALID_PACK_DATA = "invalid_pack_data"
    RESOLUTION_FAILURE = "resolution_failure"
    UNEXPECTED = "unexpected"


@dataclass(slots=True, frozen=True)
class Result(Generic[T]):
    """Either a value or an error kind with a human readable reason."""

    value: T | None = None
    error: ErrorKind | None = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, reason: str = "") -> "Result[T]":
        return cls(error=error, reason=reason)


@dataclass(slots=True, frozen=True)
class LoadIssue:
    """A configuration entry that was skipped while building the catalog."""

    kind: ErrorKind
    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"
