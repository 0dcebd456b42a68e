"""Path component model.

Every raw segment produced by the tokenizer maps to exactly one of four
variants. ``Item`` keeps the raw text verbatim, quote and escape markers
included.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Current:
    """The ``.`` segment."""

    @property
    def raw(self) -> str:
        return "."


@dataclass(frozen=True, slots=True)
class Parent:
    """The ``..`` segment."""

    @property
    def raw(self) -> str:
        return ".."


@dataclass(frozen=True, slots=True)
class Empty:
    """The zero-length segment between two adjacent delimiters."""

    @property
    def raw(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class Item:
    """Any other segment."""

    name: str

    @property
    def raw(self) -> str:
        return self.name


Component = Current | Parent | Empty | Item

CURRENT = Current()
PARENT = Parent()
EMPTY = Empty()


def classify(raw: str) -> Component:
    match raw:
        case ".":
            return CURRENT
        case "..":
            return PARENT
        case "":
            return EMPTY
        case _:
            return Item(raw)


component_from_raw = classify


def raw_value(component: Component) -> str:
    match component:
        case Current():
            return "."
        case Parent():
            return ".."
        case Empty():
            return ""
        case Item(name=name):
            return name
    raise TypeError(f"Not a path component: {component!r}")
