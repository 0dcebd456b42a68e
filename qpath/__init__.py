from ._component import (
    CURRENT,
    EMPTY,
    PARENT,
    Component,
    Current,
    Empty,
    Item,
    Parent,
    classify,
    component_from_raw,
    raw_value,
)
from ._path import Path
from ._serializer import join_components, join_trimmed, trim_components
from ._tokenizer import SegmentScanner, iter_segments, split_segments
from ._trimming import TrimOption, Trimming

__all__ = [
    "Path",
    "Component",
    "Current",
    "Parent",
    "Empty",
    "Item",
    "CURRENT",
    "PARENT",
    "EMPTY",
    "classify",
    "component_from_raw",
    "raw_value",
    "Trimming",
    "TrimOption",
    "SegmentScanner",
    "iter_segments",
    "split_segments",
    "join_components",
    "join_trimmed",
    "trim_components",
]
__version__ = "0.1.0"
