from abc import ABC, abstractmethod
from typing import Any, Mapping

from mcp_auth_validator.authentication.exceptions import InvalidArgumentError
from mcp_auth_validator.authentication.protocols.validator import Validator


class AbstractValidator(Validator, ABC):
    """Option handling and message bookkeeping shared by validators.

    Options are applied through ``set_<name>`` methods. Message templates
    are used verbatim as messages.
    """

    message_templates: dict[str, str] = {}

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any):
        self._message_templates = dict(self.message_templates)
        self._messages: dict[str, str] = {}
        options = {**(options or {}), **kwargs}
        if options:
            self.set_options(options)

    def set_options(self, options: Mapping[str, Any]) -> "AbstractValidator":
        for name, value in options.items():
            if name == "messages":
                self.set_messages(value)
                continue
            setter = getattr(self, f"set_{name}", None)
            if setter is None:
                raise InvalidArgumentError(f"Unknown option '{name}'")
            setter(value)
        return self

    def get_option(self, name: str) -> Any:
        if name in ("messageTemplates", "message_templates"):
            return self.get_message_templates()
        getter = getattr(self, f"get_{name}", None)
        if getter is None:
            raise InvalidArgumentError(f"Unknown option '{name}'")
        return getter()

    def get_message_templates(self) -> dict[str, str]:
        return dict(self._message_templates)

    def set_message(self, message: str, key: str) -> "AbstractValidator":
        if key not in self._message_templates:
            raise InvalidArgumentError(f"No message template exists for key '{key}'")
        self._message_templates[key] = message
        return self

    def set_messages(self, messages: Mapping[str, str]) -> "AbstractValidator":
        for key, message in messages.items():
            self.set_message(message, key)
        return self

    def get_messages(self) -> dict[str, str]:
        return dict(self._messages)

    def _error(self, key: str) -> None:
        self._messages[key] = self._message_templates[key]

    @abstractmethod
    def is_valid(self, value: Any = None, context: Mapping | None = None) -> bool: ...
