from typing import Any
from typing import Protocol, runtime_checkable

from mcp_auth_validator.authentication.result import AuthenticationResult


@runtime_checkable
class AuthenticationAdapter(Protocol):

    def authenticate(self) -> AuthenticationResult: ...


@runtime_checkable
class ValidatableAdapter(AuthenticationAdapter, Protocol):

    def get_identity(self) -> Any: ...

    def set_identity(self, identity: Any) -> "ValidatableAdapter": ...

    def get_credential(self) -> Any: ...

    def set_credential(self, credential: Any) -> "ValidatableAdapter": ...
