from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Orderable(Protocol):
    """Item that can be reordered: a stable identifier and a writable 1-based position"""

    @property
    def id(self) -> str: ...

    position: int


T = TypeVar("T", bound=Orderable)
