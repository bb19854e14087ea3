"""FastAPI dependency injection: DB session, current user, and MovieVaultFacade."""
from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movievault.infrastructure.auth.jwt import TokenService
from movievault.infrastructure.database.connection import session_scope
from movievault.infrastructure.database.repositories.catalog import MovieRepository
from movievault.infrastructure.database.repositories.identity import UserRepository
from movievault.interfaces.facade import MovieVaultFacade

# ── Session ───────────────────────────────────────────────────────────────────

_bearer = HTTPBearer(auto_error=False)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with session_scope(request.app.state.session_factory) as session:
        yield session


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_facade(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> MovieVaultFacade:
    return MovieVaultFacade(
        user_repo=UserRepository(session),
        movie_repo=MovieRepository(session),
        tokens=tokens,
        clock=request.app.state.clock,
    )


# ── Auth ──────────────────────────────────────────────────────────────────────

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> int:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _CREDENTIALS_EXCEPTION

    user_id = tokens.validate(credentials.credentials)
    if user_id is None:
        raise _CREDENTIALS_EXCEPTION
    return user_id


# Type aliases for cleaner signatures
Facade = Annotated[MovieVaultFacade, Depends(get_facade)]
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
