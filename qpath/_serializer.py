from __future__ import annotations

from collections.abc import Iterable

from ._component import Component, Item, Parent
from ._tokenizer import DELIMITER
from ._trimming import TrimOption, Trimming

_COLLAPSIBLE = Item("")


def join_components(components: Iterable[Component]) -> str:
    return DELIMITER.join(component.raw for component in components)


def trim_components(
    components: Iterable[Component], trimming: Trimming
) -> tuple[Component, ...]:
    """Filter ``components`` through ``trimming`` and collapse parents.

    A ``Parent`` that survives filtering while ``trimming`` includes
    ``TrimOption.PARENT`` removes the most recent ``Item("")`` already
    emitted instead of being emitted itself.
    """
    collapse = TrimOption.PARENT in trimming
    output: list[Component] = []
    for component in components:
        if not trimming.keeps(component):
            continue
        if collapse and isinstance(component, Parent):
            for index in range(len(output) - 1, -1, -1):
                if output[index] == _COLLAPSIBLE:
                    del output[index]
                    break
            else:
                output.append(component)
            continue
        output.append(component)
    return tuple(output)


def join_trimmed(components: Iterable[Component], trimming: Trimming) -> str:
    return join_components(trim_components(components, trimming))
