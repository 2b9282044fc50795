from .backend import ValidatorAuthenticationBackend
from .exceptions import (
    AuthenticationException,
    AuthenticationRuntimeError,
    InvalidArgumentError,
)
from .result import AuthenticationResult, ResultCode
from .service import AuthenticationService
from .storage import CacheStorage, NonPersistentStorage
from .validators import AuthenticationValidator

__all__ = [
    "AuthenticationException",
    "AuthenticationResult",
    "AuthenticationRuntimeError",
    "AuthenticationService",
    "AuthenticationValidator",
    "CacheStorage",
    "InvalidArgumentError",
    "NonPersistentStorage",
    "ResultCode",
    "ValidatorAuthenticationBackend",
]
