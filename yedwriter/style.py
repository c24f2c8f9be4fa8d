"""Visual style records and the default cascade used when serializing.

Every record is immutable.  A field left at its zero value (``None``, an empty
string or ``0``) is filled in from the package defaults when the style is
resolved, one field at a time, so a style that only sets ``color`` keeps that
color and inherits everything else.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TypeVar

BLACK = "#000000"
WHITE = "#FFFFFF"


class Shape(str, Enum):
    """Shape types understood by yEd's ``ShapeNode`` realizer."""

    ROUNDED_RECTANGLE = "roundrectangle"
    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"
    PARALLELOGRAM = "parallelogram"
    TRIANGLE = "triangle"


class Arrow(str, Enum):
    """Arrow head types for the ends of a ``PolyLineEdge``."""

    NONE = "none"
    STANDARD = "standard"
    DELTA = "delta"
    WHITE_DELTA = "white_delta"
    DIAMOND = "diamond"
    SHORT = "short"


@dataclass(frozen=True)
class LineStyle:
    """Color and width of an edge path or a node border."""

    color: str = ""
    width: float = 0.0


BorderStyle = LineStyle


@dataclass(frozen=True)
class LabelStyle:
    """Font settings of a node or edge label."""

    font_size: int = 0
    color: str = ""


@dataclass(frozen=True)
class NodeStyle:
    """Appearance of a plain shape node."""

    color: str = ""
    shape: Shape | str = ""
    height: float = 0.0
    border: Optional[LineStyle] = None
    label: Optional[LabelStyle] = None


@dataclass(frozen=True)
class EdgeStyle:
    """Appearance of a directed edge."""

    source: Arrow | str = ""
    target: Arrow | str = ""
    line: Optional[LineStyle] = None
    label: Optional[LabelStyle] = None


DEFAULT_BORDER_STYLE = BorderStyle(color=BLACK, width=1.0)
DEFAULT_LINE_STYLE = LineStyle(color=BLACK, width=1.0)
DEFAULT_LABEL_STYLE = LabelStyle(font_size=12, color=BLACK)
DEFAULT_NODE_STYLE = NodeStyle(
    color="#FFCC00",
    shape=Shape.ROUNDED_RECTANGLE,
    height=30.0,
    border=DEFAULT_BORDER_STYLE,
    label=DEFAULT_LABEL_STYLE,
)
DEFAULT_EDGE_STYLE = EdgeStyle(
    source=Arrow.NONE,
    target=Arrow.STANDARD,
    line=DEFAULT_LINE_STYLE,
    label=DEFAULT_LABEL_STYLE,
)

_T = TypeVar("_T")


def _pick(value: Optional[_T], default: _T) -> _T:
    """Return ``default`` when ``value`` is a zero value."""

    if value is None or value == "" or value == 0:
        return default
    return value


def resolve_line_style(
    style: Optional[LineStyle], default: LineStyle = DEFAULT_LINE_STYLE
) -> LineStyle:
    """Fill the unset fields of ``style`` from ``default``."""

    if style is None:
        return default
    return LineStyle(
        color=_pick(style.color, default.color),
        width=_pick(style.width, default.width),
    )


def resolve_label_style(
    style: Optional[LabelStyle], default: LabelStyle = DEFAULT_LABEL_STYLE
) -> LabelStyle:
    """Fill the unset fields of ``style`` from ``default``."""

    if style is None:
        return default
    return LabelStyle(
        font_size=_pick(style.font_size, default.font_size),
        color=_pick(style.color, default.color),
    )


def resolve_node_style(style: Optional[NodeStyle]) -> NodeStyle:
    """Return a fully populated copy of ``style``.

    Nested border and label styles are resolved field by field as well.  The
    input is never modified; ``None`` yields :data:`DEFAULT_NODE_STYLE`.
    """

    if style is None:
        return DEFAULT_NODE_STYLE
    default = DEFAULT_NODE_STYLE
    return NodeStyle(
        color=_pick(style.color, default.color),
        shape=_pick(style.shape, default.shape),
        height=_pick(style.height, default.height),
        border=resolve_line_style(style.border, DEFAULT_BORDER_STYLE),
        label=resolve_label_style(style.label),
    )


def resolve_edge_style(style: Optional[EdgeStyle]) -> EdgeStyle:
    """Return a fully populated copy of ``style``; see :func:`resolve_node_style`."""

    if style is None:
        return DEFAULT_EDGE_STYLE
    default = DEFAULT_EDGE_STYLE
    return EdgeStyle(
        source=_pick(style.source, default.source),
        target=_pick(style.target, default.target),
        line=resolve_line_style(style.line, DEFAULT_LINE_STYLE),
        label=resolve_label_style(style.label),
    )


__all__ = [
    "Arrow",
    "BLACK",
    "BorderStyle",
    "DEFAULT_BORDER_STYLE",
    "DEFAULT_EDGE_STYLE",
    "DEFAULT_LABEL_STYLE",
    "DEFAULT_LINE_STYLE",
    "DEFAULT_NODE_STYLE",
    "EdgeStyle",
    "LabelStyle",
    "LineStyle",
    "NodeStyle",
    "Shape",
    "WHITE",
    "resolve_edge_style",
    "resolve_label_style",
    "resolve_line_style",
    "resolve_node_style",
]
