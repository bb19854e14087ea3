from .catalog import MovieModel
from .identity import UserModel

__all__ = [
    "MovieModel",
    "UserModel",
]
