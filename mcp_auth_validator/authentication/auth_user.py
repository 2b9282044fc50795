from typing import Any

from starlette.authentication import BaseUser


class AuthenticatedUser(BaseUser):
    def __init__(self, username: str, identity: Any = None):
        self.username = username
        self._identity = identity if identity is not None else username

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def display_name(self) -> str:
        return self.username

    @property
    def identity(self) -> Any:
        return self._identity
