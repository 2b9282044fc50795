from typing import Any, Callable, override

from mcp_auth_validator.authentication.adapters.base import BaseAdapter
from mcp_auth_validator.authentication.exceptions import AuthenticationRuntimeError
from mcp_auth_validator.authentication.result import AuthenticationResult, ResultCode

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


class CallbackAdapter(BaseAdapter):
    """Authenticates by calling ``callback(identity, credential)``.

    The callback returns the authenticated identity (any truthy value) on
    success and a falsy value on failure.
    """

    def __init__(
        self,
        callback: Callable[[Any, Any], Any] | None = None,
        identity: Any = None,
        credential: Any = None,
    ):
        super().__init__(identity, credential)
        self._callback = callback

    def get_callback(self) -> Callable[[Any, Any], Any] | None:
        return self._callback

    def set_callback(self, callback: Callable[[Any, Any], Any]) -> "CallbackAdapter":
        self._callback = callback
        return self

    @override
    def authenticate(self) -> AuthenticationResult:
        if self._callback is None:
            raise AuthenticationRuntimeError(
                "No callback provided prior to calling authenticate()"
            )
        try:
            identity = self._callback(self._identity, self._credential)
        except Exception as exp:
            logger.error("authentication callback failed: %s", exp)
            return AuthenticationResult(
                ResultCode.FAILURE_UNCATEGORIZED, None, [str(exp)]
            )

        if not identity:
            return AuthenticationResult(
                ResultCode.FAILURE, None, ["Authentication failure"]
            )
        return AuthenticationResult(
            ResultCode.SUCCESS, identity, ["Authentication success"]
        )
