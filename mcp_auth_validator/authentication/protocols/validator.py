from typing import Any, Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class Validator(Protocol):

    def is_valid(self, value: Any = None, context: Mapping | None = None) -> bool: ...

    def get_messages(self) -> dict[str, str]: ...
