from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OptionalField(Generic[T]):
    """A nullable column value: presence flag plus payload.

    Convention for writes: an empty string or a non-positive id means "unset".
    """

    valid: bool
    value: Optional[T] = None

    @property
    def db_value(self) -> Optional[T]:
        return self.value if self.valid else None


def to_optional_string(s: str) -> OptionalField[str]:
    if s == "":
        return OptionalField(valid=False)
    return OptionalField(valid=True, value=s)


def to_optional_int(i: int) -> OptionalField[int]:
    # Negative values are treated as unset too, not as invalid input.
    if i <= 0:
        return OptionalField(valid=False)
    return OptionalField(valid=True, value=int(i))
