from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ResultCode(IntEnum):
    FAILURE = 0
    FAILURE_IDENTITY_NOT_FOUND = -1
    FAILURE_IDENTITY_AMBIGUOUS = -2
    FAILURE_CREDENTIAL_INVALID = -3
    FAILURE_UNCATEGORIZED = -4
    SUCCESS = 1


@dataclass
class AuthenticationResult:
    """Outcome of one authentication attempt.

    ``code`` is a plain int: adapters may report codes outside of
    ``ResultCode`` and those are kept as given.
    """

    code: int
    identity: Any = None
    messages: list[str] = field(default_factory=list)

    def is_valid(self) -> bool:
        return self.code > 0
