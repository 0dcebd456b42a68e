"""Composable trimming options.

A :class:`Trimming` carries a bitmask of :class:`TrimOption` flags together
with the predicate each set flag owns. Set operations combine both fields
in lockstep so that ``predicates`` always corresponds to ``bits``.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator

from ._component import Component, Current, Empty

Predicate = Callable[[Component], bool]


class TrimOption(enum.IntFlag):
    EMPTINESS = 1
    SELF = 2
    PARENT = 4


def _not_empty(component: Component) -> bool:
    return not isinstance(component, Empty)


def _not_current(component: Component) -> bool:
    return not isinstance(component, Current)


def _keep(component: Component) -> bool:
    # Parent segments are collapsed by the serializer, not filtered here.
    return True


_PREDICATES: dict[TrimOption, Predicate] = {
    TrimOption.EMPTINESS: _not_empty,
    TrimOption.SELF: _not_current,
    TrimOption.PARENT: _keep,
}

_ALL_BITS = int(TrimOption.EMPTINESS | TrimOption.SELF | TrimOption.PARENT)


class Trimming:
    """Immutable set of trimming options.

    Parameters
    ----------
    *options:
        :class:`TrimOption` members to include.

    Example
    -------
    >>> t = Trimming.emptiness | Trimming.self
    >>> TrimOption.SELF in t
    True
    >>> t & Trimming.self == Trimming.self
    True
    """

    __slots__ = ("_bits", "_predicates")

    none: Trimming
    emptiness: Trimming
    self: Trimming
    parent: Trimming
    all: Trimming

    def __new__(cls, *options: TrimOption) -> Trimming:
        entries: dict[TrimOption, Predicate] = {}
        for option in options:
            if not isinstance(option, TrimOption):
                raise TypeError(f"Expected TrimOption, got {option!r}")
            for flag in _split_flags(int(option)):
                entries[flag] = _PREDICATES[flag]
        return cls._from_entries(entries)

    # -- construction helpers --

    @classmethod
    def from_bits(cls, bits: int) -> Trimming:
        if bits & ~_ALL_BITS:
            raise ValueError(
                f"Invalid trimming bits: {bits:#x}. "
                f"Known options cover {_ALL_BITS:#x}."
            )
        return cls(*_split_flags(bits))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Trimming:
        """Build a trimming from option names such as ``"emptiness"``."""
        options = []
        for name in names:
            try:
                options.append(TrimOption[name.upper()])
            except (KeyError, AttributeError):
                raise ValueError(
                    f"Invalid trimming option: {name!r}. "
                    "Expected 'emptiness', 'self', or 'parent'."
                ) from None
        return cls(*options)

    @classmethod
    def _from_entries(cls, entries: dict[TrimOption, Predicate]) -> Trimming:
        trimming = object.__new__(cls)
        trimming._set(entries)
        return trimming

    def _set(self, entries: dict[TrimOption, Predicate]) -> None:
        ordered = tuple(sorted(entries.items(), key=lambda entry: entry[0].value))
        bits = 0
        for flag, _ in ordered:
            bits |= flag
        object.__setattr__(self, "_bits", bits)
        object.__setattr__(self, "_predicates", ordered)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[object, ...]:
        return (type(self).from_bits, (self._bits,))

    # -- accessors --

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def predicates(self) -> tuple[tuple[TrimOption, Predicate], ...]:
        """``(option, predicate)`` pairs for every set option, by bit order."""
        return self._predicates

    @property
    def options(self) -> tuple[TrimOption, ...]:
        return tuple(flag for flag, _ in self._predicates)

    def keeps(self, component: Component) -> bool:
        """True if every predicate accepts ``component``."""
        return all(predicate(component) for _, predicate in self._predicates)

    # -- set algebra --

    def union(self, other: Trimming) -> Trimming:
        entries = dict(self._predicates)
        entries.update(other._predicates)
        return Trimming._from_entries(entries)

    def intersection(self, other: Trimming) -> Trimming:
        theirs = dict(other._predicates)
        return Trimming._from_entries(
            {flag: predicate for flag, predicate in self._predicates if flag in theirs}
        )

    def symmetric_difference(self, other: Trimming) -> Trimming:
        mine = dict(self._predicates)
        theirs = dict(other._predicates)
        entries = {flag: p for flag, p in mine.items() if flag not in theirs}
        entries.update({flag: p for flag, p in theirs.items() if flag not in mine})
        return Trimming._from_entries(entries)

    def __or__(self, other: object) -> Trimming:
        if not isinstance(other, Trimming):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Trimming:
        if not isinstance(other, Trimming):
            return NotImplemented
        return self.intersection(other)

    def __xor__(self, other: object) -> Trimming:
        if not isinstance(other, Trimming):
            return NotImplemented
        return self.symmetric_difference(other)

    # -- container protocol --

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Trimming):
            return item._bits & self._bits == item._bits
        if isinstance(item, TrimOption):
            return bool(item) and item & self._bits == item
        return False

    def __iter__(self) -> Iterator[TrimOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self._predicates)

    def __bool__(self) -> bool:
        return self._bits != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trimming):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash((Trimming, self._bits))

    def __repr__(self) -> str:
        names = ", ".join(flag.name.lower() for flag in self.options)  # type: ignore[union-attr]
        return f"Trimming({names})"


def _split_flags(bits: int) -> list[TrimOption]:
    return [flag for flag in _PREDICATES if bits & flag]


Trimming.none = Trimming()
Trimming.emptiness = Trimming(TrimOption.EMPTINESS)
Trimming.self = Trimming(TrimOption.SELF)
Trimming.parent = Trimming(TrimOption.PARENT)
Trimming.all = Trimming.from_bits(_ALL_BITS)
