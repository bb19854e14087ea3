"""Errors raised by the domain layer."""


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    """A field-level invariant was violated.

    ``field`` names the offending attribute, ``reason`` is safe to show to the caller.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason
