from typing import Any, Mapping, override

from mcp_auth_validator.authentication.exceptions import (
    AuthenticationRuntimeError,
    InvalidArgumentError,
)
from mcp_auth_validator.authentication.protocols.adapter import ValidatableAdapter
from mcp_auth_validator.authentication.result import ResultCode
from mcp_auth_validator.authentication.service import AuthenticationService
from mcp_auth_validator.authentication.validators.base import AbstractValidator

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _result_code(code: Any) -> int:
    try:
        return int(code)
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            "Result code in code_map option must be an integer"
        )


class AuthenticationValidator(AbstractValidator):
    """Validates an identity/credential pair through an authentication adapter.

    The adapter is either set directly or taken from the authentication
    service at validation time. The adapter result code is translated to a
    message key through the code map.

    Options: ``adapter``, ``service``, ``identity``, ``credential``,
    ``code_map`` and ``messages``.
    """

    IDENTITY_NOT_FOUND = "identity_not_found"
    IDENTITY_AMBIGUOUS = "identity_ambiguous"
    CREDENTIAL_INVALID = "credential_invalid"
    UNCATEGORIZED = "uncategorized"
    GENERAL = "general"

    CONTEXT_IDENTITY_KEY = "username"
    CONTEXT_CREDENTIAL_KEY = "password"

    code_map: dict[int, str] = {
        ResultCode.FAILURE: GENERAL,
        ResultCode.FAILURE_IDENTITY_NOT_FOUND: IDENTITY_NOT_FOUND,
        ResultCode.FAILURE_IDENTITY_AMBIGUOUS: IDENTITY_AMBIGUOUS,
        ResultCode.FAILURE_CREDENTIAL_INVALID: CREDENTIAL_INVALID,
        ResultCode.FAILURE_UNCATEGORIZED: UNCATEGORIZED,
    }

    message_templates: dict[str, str] = {
        GENERAL: "Authentication failed",
        IDENTITY_NOT_FOUND: "Invalid identity",
        IDENTITY_AMBIGUOUS: "Identity is ambiguous",
        CREDENTIAL_INVALID: "Invalid password",
        UNCATEGORIZED: "Authentication failed",
    }

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any):
        self._adapter: ValidatableAdapter | None = None
        self._service: AuthenticationService | None = None
        self._identity: Any = None
        self._credential: Any = None
        self._code_map = {int(code): key for code, key in self.code_map.items()}

        options = {**(options or {}), **kwargs}
        code_map = options.pop("code_map", None)
        messages = options.pop("messages", None)

        super().__init__()
        if code_map:
            self._merge_code_map(code_map)
        self.set_options(options)
        if messages:
            self.set_messages(messages)

    def _merge_code_map(self, code_map: Mapping[Any, Any]) -> None:
        for code, key in code_map.items():
            if not isinstance(key, str) or not key:
                raise InvalidArgumentError(
                    "Message key in code_map option must be a non-empty string"
                )
            if key not in self._message_templates:
                self._message_templates[key] = self._message_templates[self.GENERAL]
            self._code_map[_result_code(code)] = key

    def get_code_map(self) -> dict[int, str]:
        return dict(self._code_map)

    def get_adapter(self) -> ValidatableAdapter | None:
        return self._adapter

    def set_adapter(self, adapter: ValidatableAdapter | None) -> "AuthenticationValidator":
        self._adapter = adapter
        return self

    def get_service(self) -> AuthenticationService | None:
        return self._service

    def set_service(self, service: AuthenticationService | None) -> "AuthenticationValidator":
        self._service = service
        return self

    def get_identity(self) -> Any:
        return self._identity

    def set_identity(self, identity: Any) -> "AuthenticationValidator":
        self._identity = identity
        return self

    def get_credential(self) -> Any:
        return self._credential

    def set_credential(self, credential: Any) -> "AuthenticationValidator":
        self._credential = credential
        return self

    def _resolve_adapter(self) -> ValidatableAdapter:
        if self._adapter is not None:
            return self._adapter
        adapter = self._service.get_adapter()
        if adapter is None:
            raise AuthenticationRuntimeError("Adapter must be set prior to validation")
        if not isinstance(adapter, ValidatableAdapter):
            raise AuthenticationRuntimeError(
                f"Adapter must be an instance of {_type_name(ValidatableAdapter)}; "
                f"{_type_name(type(adapter))} given"
            )
        return adapter

    @override
    def is_valid(self, value: Any = None, context: Mapping | None = None) -> bool:
        self._messages = {}
        if value is not None:
            self.set_credential(value)

        if self._identity is None:
            raise AuthenticationRuntimeError("Identity must be set prior to validation")
        if self._service is None:
            raise AuthenticationRuntimeError(
                "AuthenticationService must be set prior to validation"
            )

        adapter = self._resolve_adapter()

        identity = self._identity
        credential = self._credential
        if context is not None:
            if context.get(self.CONTEXT_IDENTITY_KEY) is not None:
                identity = context[self.CONTEXT_IDENTITY_KEY]
            if context.get(self.CONTEXT_CREDENTIAL_KEY) is not None:
                credential = context[self.CONTEXT_CREDENTIAL_KEY]

        adapter.set_identity(identity)
        adapter.set_credential(credential)

        result = self._service.authenticate(adapter)

        if result.is_valid():
            logger.debug("authentication succeeded")
            return True

        key = self._code_map.get(result.code, self.UNCATEGORIZED)
        logger.debug("authentication failed with code %s (%s)", result.code, key)
        self._error(key)
        return False
