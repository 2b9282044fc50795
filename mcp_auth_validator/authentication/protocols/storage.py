from typing import Any
from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):

    def is_empty(self) -> bool: ...

    def read(self) -> Any: ...

    def write(self, contents: Any) -> None: ...

    def clear(self) -> None: ...
