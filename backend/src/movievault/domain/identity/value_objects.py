"""Immutable value objects for the Identity bounded context."""
from dataclasses import dataclass

from movievault.domain.errors import ValidationError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
EMAIL_MAX_LENGTH = 100


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("email", "Email cannot be empty")
        if "@" not in self.value:
            raise ValidationError("email", "Invalid email format")
        if len(self.value) > EMAIL_MAX_LENGTH:
            raise ValidationError("email", f"Email cannot exceed {EMAIL_MAX_LENGTH} characters")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("username", "Username cannot be empty")
        if not USERNAME_MIN_LENGTH <= len(self.value) <= USERNAME_MAX_LENGTH:
            raise ValidationError(
                "username",
                f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters",
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PasswordHash:
    """Opaque wrapper for the hashed password string, never the raw password."""
    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("password_hash", "Password hash cannot be empty")

    def __str__(self) -> str:
        return self.value
