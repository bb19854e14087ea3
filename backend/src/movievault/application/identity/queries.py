"""Identity use-case queries."""
from movievault.application.outcome import ErrorKind, Outcome
from movievault.domain.identity.entities import User
from movievault.domain.identity.repositories import IUserRepository


async def get_user_by_id(user_id: int, user_repo: IUserRepository) -> Outcome[User]:
    user = await user_repo.get_by_id(user_id)
    if user is None:
        return Outcome.failure(ErrorKind.NOT_FOUND, "User not found")
    return Outcome.success(user)
