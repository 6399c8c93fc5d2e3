"""Typed index and joint data, with casting to a common integer width.

``ReadIndices`` holds the vertex draw sequence of a primitive and
``ReadJoints`` the joint indices of its vertices, each tagged with the
component type it was stored as. The ``into_*`` methods give iterators
that widen every item to the largest type, which can hold any value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, Iterator, TypeVar

__all__ = [
    "IndexType",
    "ReadIndices",
    "JointType",
    "ReadJoints",
    "CastingIter",
]

S = TypeVar("S")
T = TypeVar("T")

Joint = tuple[int, int, int, int]


class IndexType(Enum):
    """Component type of index data."""

    U8 = 8
    U16 = 16
    U32 = 32

    @property
    def max_value(self) -> int:
        """Largest value the type can hold."""
        return (1 << self.value) - 1


class JointType(Enum):
    """Component type of joint data."""

    U8 = 8
    U16 = 16

    @property
    def max_value(self) -> int:
        """Largest value the type can hold."""
        return (1 << self.value) - 1


def _check_unsigned(value: object, max_value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value <= max_value:
        raise ValueError(f"{what} {value} out of range 0..{max_value}")
    return value


class CastingIter(Generic[S, T]):
    """An iterator that casts each item of the data it wraps.

    ``len()`` gives the number of items not yet visited.
    """

    def __init__(self, source: S, items: Iterable, cast: Callable[..., T]) -> None:
        self._source = source
        self._items = list(items)
        self._cast = cast
        self._position = 0

    def __iter__(self) -> CastingIter[S, T]:
        return self

    def __next__(self) -> T:
        if self._position >= len(self._items):
            raise StopIteration
        item = self._items[self._position]
        self._position += 1
        return self._cast(item)

    def __len__(self) -> int:
        return len(self._items) - self._position

    def unwrap(self) -> S:
        """The underlying typed data."""
        return self._source


@dataclass(frozen=True)
class ReadIndices:
    """Index data of one component type."""

    type: IndexType
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        limit = self.type.max_value
        checked = tuple(_check_unsigned(v, limit, "index") for v in self.values)
        object.__setattr__(self, "values", checked)

    def into_u32(self) -> CastingIter[ReadIndices, int]:
        """Reinterpret indices as u32, which can fit any possible index."""
        return CastingIter(self, self.values, int)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def _joint(values: Iterable[int], limit: int) -> Joint:
    items = tuple(values)
    if len(items) != 4:
        raise ValueError(f"joint must have 4 components, got {len(items)}")
    a, b, c, d = (_check_unsigned(v, limit, "joint") for v in items)
    return (a, b, c, d)


@dataclass(frozen=True)
class ReadJoints:
    """Vertex joints of one component type, four per vertex."""

    type: JointType
    values: tuple[Joint, ...]

    def __post_init__(self) -> None:
        limit = self.type.max_value
        checked = tuple(_joint(v, limit) for v in self.values)
        object.__setattr__(self, "values", checked)

    def into_u16(self) -> CastingIter[ReadJoints, Joint]:
        """Reinterpret joints as u16, which can fit any possible joint."""
        return CastingIter(self, self.values, lambda j: tuple(int(v) for v in j))

    def __iter__(self) -> Iterator[Joint]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)