"""Identity use-case commands: register, login."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from movievault.application.outcome import ErrorKind, Outcome
from movievault.domain.errors import ValidationError
from movievault.domain.identity.entities import User
from movievault.domain.identity.repositories import DuplicateUserError, IUserRepository
from movievault.infrastructure.auth.jwt import TokenService
from movievault.infrastructure.auth.password import (
    burn_verification,
    hash_password,
    needs_rehash,
    verify_password,
)

logger = logging.getLogger("movievault.identity")

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class RegisterUser:
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class LoginUser:
    email: str
    password: str


@dataclass(frozen=True)
class AuthResult:
    token: str
    expires_at: datetime
    username: str
    email: str


def _auth_result(user: User, tokens: TokenService) -> AuthResult:
    issued = tokens.issue(user.id)
    return AuthResult(
        token=issued.token,
        expires_at=issued.expires_at,
        username=str(user.username),
        email=str(user.email),
    )


async def register_user(
    command: RegisterUser,
    *,
    user_repo: IUserRepository,
    tokens: TokenService,
) -> Outcome[AuthResult]:
    """Register a new user and return an access token."""
    if await user_repo.get_by_email(command.email):
        return Outcome.failure(ErrorKind.CONFLICT, "User with this email already exists", "email")
    if await user_repo.get_by_username(command.username):
        return Outcome.failure(ErrorKind.CONFLICT, "Username is already taken", "username")

    try:
        user = User.create(
            username=command.username,
            email=command.email,
            password_hash=hash_password(command.password),
        )
    except ValidationError as exc:
        return Outcome.failure(ErrorKind.VALIDATION, exc.reason, exc.field)

    try:
        user = await user_repo.add(user)
    except DuplicateUserError:
        # Lost a race with a concurrent registration for the same email/username
        return Outcome.failure(ErrorKind.CONFLICT, "User with this email or username already exists")
    await user_repo.commit()

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return Outcome.success(_auth_result(user, tokens))


async def login_user(
    command: LoginUser,
    *,
    user_repo: IUserRepository,
    tokens: TokenService,
) -> Outcome[AuthResult]:
    """Authenticate by email and password.

    Unknown email and wrong password produce the same failure so callers cannot
    probe which accounts exist.
    """
    user = await user_repo.get_by_email(command.email)
    if user is None:
        burn_verification(command.password)
        logger.info("Login failed: unknown email")
        return Outcome.failure(ErrorKind.UNAUTHENTICATED, INVALID_CREDENTIALS)

    if not verify_password(command.password, user.password_hash):
        logger.info("Login failed for user id=%s", user.id)
        return Outcome.failure(ErrorKind.UNAUTHENTICATED, INVALID_CREDENTIALS)

    if needs_rehash(user.password_hash):
        user.update_password_hash(hash_password(command.password))
        await user_repo.save(user)
        await user_repo.commit()

    logger.info("User id=%s logged in", user.id)
    return Outcome.success(_auth_result(user, tokens))
