"""Outcome type returned by every use case.

Expected results (not found, not owner, conflicts, bad input) are values, not
exceptions. Anything raised out of a use case is an unexpected failure.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    INVALID_ARGUMENT = "invalid_argument"
    CONFLICT = "conflict"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    field: str | None = None


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: T | None = None
    error: Failure | None = None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, field: str | None = None) -> Outcome[T]:
        return cls(error=Failure(kind=kind, message=message, field=field))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise ValueError(f"unwrap() on failed outcome: {self.error.kind}: {self.error.message}")
        return self.value  # type: ignore[return-value]
