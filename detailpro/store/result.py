"""
Lookup results for reads and updates.

A lookup is either ``Found(value)`` or ``NotFound(entity, id)``; callers
branch on the type (or truthiness) instead of checking for ``None``.
"""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A record that exists."""
    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """No record with this id exists."""
    entity: str
    id: Any

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"{self.entity} not found"


Lookup = Union[Found[T], NotFound]
