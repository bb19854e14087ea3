import pytest

from movievault.domain.errors import ValidationError
from movievault.domain.identity.entities import User
from movievault.domain.identity.value_objects import PasswordHash


def test_create_user() -> None:
    user = User.create(username="cinephile", email="fan@example.com", password_hash="$argon2id$stub")

    assert user.id is None
    assert str(user.username) == "cinephile"
    assert str(user.email) == "fan@example.com"
    assert user.password_hash == PasswordHash("$argon2id$stub")


@pytest.mark.parametrize(
    ("field", "kwargs"),
    [
        ("username", {"username": "ab"}),
        ("username", {"username": "a" * 21}),
        ("username", {"username": "    "}),
        ("email", {"email": "no-at-sign.example.com"}),
        ("email", {"email": ""}),
        ("email", {"email": "a" * 95 + "@x.com"}),
        ("password_hash", {"password_hash": " "}),
    ],
)
def test_create_user_rejects_invalid_fields(field: str, kwargs: dict) -> None:
    values = {"username": "cinephile", "email": "fan@example.com", "password_hash": "hash"}
    values.update(kwargs)
    with pytest.raises(ValidationError) as excinfo:
        User.create(**values)
    assert excinfo.value.field == field


def test_update_password_hash() -> None:
    user = User.create(username="cinephile", email="fan@example.com", password_hash="old")
    user.update_password_hash("new")
    assert str(user.password_hash) == "new"

    with pytest.raises(ValidationError):
        user.update_password_hash("")
