import base64
import binascii
import threading

from starlette.authentication import (
    AuthCredentials,
    AuthenticationBackend,
    AuthenticationError,
    BaseUser,
)
from starlette.concurrency import run_in_threadpool
from starlette.requests import HTTPConnection

from mcp_auth_validator.authentication.auth_user import AuthenticatedUser
from mcp_auth_validator.authentication.context import auth_context_var
from mcp_auth_validator.authentication.protocols.validator import Validator

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


class ValidatorAuthenticationBackend(AuthenticationBackend):
    """Runs a validator against the Basic credentials of each connection.

    The credentials are handed to the validator as its context, under the
    ``username`` and ``password`` keys, so the validator configuration is
    left untouched between requests. Validation runs in the threadpool,
    one request at a time, as adapters may block on I/O.
    """

    AUTHENTICATION_HEADER_NAME = "Authorization"

    def __init__(self, validator: Validator):
        self._validator = validator
        self._lock = threading.Lock()

    def _validate(self, username: str, password: str) -> dict[str, str] | None:
        # messages belong to the call that produced them
        with self._lock:
            if self._validator.is_valid(
                context={"username": username, "password": password}
            ):
                return None
            return self._validator.get_messages()

    @staticmethod
    def _decode_basic(value: str) -> tuple[str, str]:
        try:
            decoded = base64.b64decode(value, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            raise AuthenticationError("Invalid basic auth credentials")
        username, separator, password = decoded.partition(":")
        if not separator:
            raise AuthenticationError("Invalid basic auth credentials")
        return username, password

    async def authenticate(
        self, conn: HTTPConnection
    ) -> tuple[AuthCredentials, BaseUser] | None:
        header_value = conn.headers.get(self.AUTHENTICATION_HEADER_NAME)
        if header_value is None:
            return None
        scheme, _, value = header_value.partition(" ")
        if scheme.lower() != "basic":
            return None

        username, password = self._decode_basic(value.strip())
        logger.debug("validating basic credentials for user: %s", username)

        messages = await run_in_threadpool(self._validate, username, password)
        if messages is not None:
            logger.debug("authentication rejected: %s", messages)
            raise AuthenticationError("; ".join(messages.values()))

        auth_user = AuthenticatedUser(username)
        # set user to context var
        auth_context_var.set(auth_user)
        return AuthCredentials(["authenticated"]), auth_user
