"""Length-aware value sequences returned by register reads."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Sequence


class RegisterValues:
    """Lazy, re-iterable sequence of register fragments with a known length.

    Values either come straight from stored fragments or are produced on
    demand (selection indices, selection contents); both kinds are plain
    ``str`` so callers never need to tell them apart.
    """

    __slots__ = ("_factory", "_length")

    def __init__(self, factory: Callable[[], Iterable[str]], length: int) -> None:
        if length < 0:
            raise ValueError("length cannot be negative")
        self._factory = factory
        self._length = length

    @classmethod
    def empty(cls) -> "RegisterValues":
        return cls(tuple, 0)

    @classmethod
    def single(cls, value: str) -> "RegisterValues":
        return cls(lambda: (value,), 1)

    @classmethod
    def from_stored(cls, stored: Sequence[str]) -> "RegisterValues":
        """Present newest-first storage oldest-first."""

        snapshot = tuple(stored)
        return cls(lambda: reversed(snapshot), len(snapshot))

    @classmethod
    def computed(
        cls, factory: Callable[[], Iterable[str]], length: int
    ) -> "RegisterValues":
        return cls(factory, length)

    def __iter__(self) -> Iterator[str]:
        return iter(self._factory())

    def __len__(self) -> int:
        return self._length

    def first(self) -> Optional[str]:
        return next(iter(self), None)

    def last(self) -> Optional[str]:
        value = None
        for value in self:
            pass
        return value

    def to_list(self) -> List[str]:
        return list(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RegisterValues):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RegisterValues({self.to_list()!r})"
