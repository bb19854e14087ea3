import asyncio

from movievault.application.identity.commands import (
    INVALID_CREDENTIALS,
    LoginUser,
    RegisterUser,
    login_user,
    register_user,
)
from movievault.application.identity.queries import get_user_by_id
from movievault.application.outcome import ErrorKind
from movievault.domain.identity.repositories import DuplicateUserError


def _register(user_repo, tokens, username="cinephile", email="fan@example.com", password="popcorn-123"):
    return asyncio.run(register_user(
        RegisterUser(username=username, email=email, password=password),
        user_repo=user_repo, tokens=tokens,
    ))


def test_register_returns_token_for_new_user(user_repo, tokens) -> None:
    outcome = _register(user_repo, tokens)

    assert outcome.ok
    result = outcome.unwrap()
    assert (result.username, result.email) == ("cinephile", "fan@example.com")
    assert tokens.validate(result.token) == 1
    stored = user_repo.users[1]
    assert str(stored.password_hash) != "popcorn-123"
    assert user_repo.commits == 1


def test_register_duplicate_email_conflicts(user_repo, tokens) -> None:
    assert _register(user_repo, tokens).ok

    outcome = _register(user_repo, tokens, username="someone-else")

    assert outcome.error.kind is ErrorKind.CONFLICT
    assert outcome.error.field == "email"
    assert len(user_repo.users) == 1


def test_register_duplicate_username_conflicts(user_repo, tokens) -> None:
    assert _register(user_repo, tokens).ok

    outcome = _register(user_repo, tokens, email="other@example.com")

    assert outcome.error.kind is ErrorKind.CONFLICT
    assert outcome.error.field == "username"


def test_register_invalid_username_is_validation_failure(user_repo, tokens) -> None:
    outcome = _register(user_repo, tokens, username="ab")

    assert outcome.error.kind is ErrorKind.VALIDATION
    assert outcome.error.field == "username"
    assert user_repo.users == {}


def test_register_race_lost_on_insert_conflicts(user_repo, tokens) -> None:
    async def racing_add(user):
        raise DuplicateUserError(str(user.email))

    user_repo.add = racing_add

    outcome = _register(user_repo, tokens)

    assert outcome.error.kind is ErrorKind.CONFLICT
    assert user_repo.commits == 0


def test_login_success(user_repo, tokens) -> None:
    _register(user_repo, tokens)

    outcome = asyncio.run(login_user(
        LoginUser(email="fan@example.com", password="popcorn-123"),
        user_repo=user_repo, tokens=tokens,
    ))

    assert outcome.ok
    assert tokens.validate(outcome.unwrap().token) == 1


def test_login_failures_are_indistinguishable(user_repo, tokens) -> None:
    _register(user_repo, tokens)

    wrong_password = asyncio.run(login_user(
        LoginUser(email="fan@example.com", password="wrong"), user_repo=user_repo, tokens=tokens,
    ))
    unknown_email = asyncio.run(login_user(
        LoginUser(email="ghost@example.com", password="popcorn-123"), user_repo=user_repo, tokens=tokens,
    ))

    assert wrong_password.error == unknown_email.error
    assert wrong_password.error.kind is ErrorKind.UNAUTHENTICATED
    assert wrong_password.error.message == INVALID_CREDENTIALS


def test_get_user_by_id(user_repo, tokens) -> None:
    _register(user_repo, tokens)

    assert asyncio.run(get_user_by_id(1, user_repo)).unwrap().id == 1
    assert asyncio.run(get_user_by_id(99, user_repo)).error.kind is ErrorKind.NOT_FOUND
