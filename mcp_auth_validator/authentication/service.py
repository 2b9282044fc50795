from typing import Any

from mcp_auth_validator.authentication.exceptions import AuthenticationRuntimeError
from mcp_auth_validator.authentication.protocols.adapter import AuthenticationAdapter
from mcp_auth_validator.authentication.protocols.storage import Storage
from mcp_auth_validator.authentication.result import AuthenticationResult
from mcp_auth_validator.authentication.storage import NonPersistentStorage

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


class AuthenticationService:
    """Holds the current adapter and the identity of the last successful attempt."""

    def __init__(
        self,
        storage: Storage | None = None,
        adapter: AuthenticationAdapter | None = None,
    ):
        self._storage = storage if storage is not None else NonPersistentStorage()
        self._adapter = adapter

    def get_adapter(self) -> AuthenticationAdapter | None:
        return self._adapter

    def set_adapter(self, adapter: AuthenticationAdapter | None) -> "AuthenticationService":
        self._adapter = adapter
        return self

    def get_storage(self) -> Storage:
        return self._storage

    def set_storage(self, storage: Storage) -> "AuthenticationService":
        self._storage = storage
        return self

    def authenticate(
        self, adapter: AuthenticationAdapter | None = None
    ) -> AuthenticationResult:
        if adapter is None:
            adapter = self._adapter
        if adapter is None:
            raise AuthenticationRuntimeError(
                "An adapter must be set or passed prior to calling authenticate()"
            )

        result = adapter.authenticate()

        # a new attempt always discards the previous identity
        if self.has_identity():
            self.clear_identity()

        if result.is_valid():
            logger.debug("storing authenticated identity")
            self._storage.write(result.identity)

        return result

    def has_identity(self) -> bool:
        return not self._storage.is_empty()

    def get_identity(self) -> Any:
        if self._storage.is_empty():
            return None
        return self._storage.read()

    def clear_identity(self) -> None:
        self._storage.clear()
