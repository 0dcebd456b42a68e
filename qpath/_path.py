"""Immutable parsed path value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from ._component import Component, classify
from ._serializer import join_components, join_trimmed, trim_components
from ._tokenizer import DELIMITER, iter_segments
from ._trimming import Trimming


class Path:
    """An ordered, immutable sequence of path components.

    Parameters
    ----------
    source:
        A path string, another :class:`Path`, or any iterable of single
        characters. Quoted (``'``/``"``) and escaped (``\\``) delimiters do
        not split segments.

    Example
    -------
    >>> Path("/usr/local/'/'bin").raw_components
    ('usr', 'local', "'/'bin")
    >>> Path("a/./b//c").to_raw(Trimming.emptiness | Trimming.self)
    'a/b/c'
    """

    __slots__ = ("_components",)

    def __new__(cls, source: str | Path | Iterable[str] = "") -> Path:
        if isinstance(source, Path):
            components = source._components
        else:
            components = tuple(classify(segment) for segment in iter_segments(source))
        path = object.__new__(cls)
        object.__setattr__(path, "_components", components)
        return path

    @classmethod
    def from_raw(cls, raw: str) -> Path:
        """Inverse of :meth:`to_raw` without trimming.

        Every delimiter splits, quotes and escapes included, so
        ``Path.from_raw(p.to_raw()) == p`` whenever no item contains a
        delimiter.
        """
        if not raw:
            return cls.from_components(())
        return cls.from_components(classify(segment) for segment in raw.split(DELIMITER))

    @classmethod
    def from_components(cls, components: Iterable[Component]) -> Path:
        items = tuple(components)
        for component in items:
            if not isinstance(component, Component):
                raise TypeError(f"Not a path component: {component!r}")
        path = object.__new__(cls)
        object.__setattr__(path, "_components", items)
        return path

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[object, ...]:
        return (type(self).from_components, (self._components,))

    @property
    def components(self) -> tuple[Component, ...]:
        return self._components

    @property
    def raw_components(self) -> tuple[str, ...]:
        return tuple(component.raw for component in self._components)

    def to_raw(self, trimming: Trimming | None = None) -> str:
        """Join the components with ``/``, optionally trimmed."""
        if trimming is None:
            return join_components(self._components)
        return join_trimmed(self._components, trimming)

    def trimmed(self, trimming: Trimming) -> Path:
        return type(self).from_components(trim_components(self._components, trimming))

    # -- sequence protocol --

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    @overload
    def __getitem__(self, index: int) -> Component: ...

    @overload
    def __getitem__(self, index: slice) -> Path: ...

    def __getitem__(self, index: int | slice) -> Component | Path:
        if isinstance(index, slice):
            return type(self).from_components(self._components[index])
        return self._components[index]

    def __bool__(self) -> bool:
        return bool(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __str__(self) -> str:
        return self.to_raw()

    def __repr__(self) -> str:
        return f"Path({self.to_raw()!r})"
