from abc import ABC, abstractmethod
from typing import Any

from mcp_auth_validator.authentication.protocols.adapter import ValidatableAdapter
from mcp_auth_validator.authentication.result import AuthenticationResult


class BaseAdapter(ValidatableAdapter, ABC):

    def __init__(self, identity: Any = None, credential: Any = None):
        self._identity = identity
        self._credential = credential

    def get_identity(self) -> Any:
        return self._identity

    def set_identity(self, identity: Any) -> "BaseAdapter":
        self._identity = identity
        return self

    def get_credential(self) -> Any:
        return self._credential

    def set_credential(self, credential: Any) -> "BaseAdapter":
        self._credential = credential
        return self

    @abstractmethod
    def authenticate(self) -> AuthenticationResult: ...
