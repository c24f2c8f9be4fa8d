"""yedwriter package initialization.

Generate GraphML documents for the yEd graph editor from a small in-memory
graph model.  :class:`Document` builds the whole tree, including group nodes,
before writing it; :class:`StreamWriter` writes a flat graph incrementally.
"""

from .document import Document, StreamWriter
from .errors import NestingError, WriterClosedError, YedWriterError
from .export import GraphExporter
from .graph.model import Edge, Graph, Node
from .markup import escape
from .style import (
    BLACK,
    WHITE,
    Arrow,
    BorderStyle,
    EdgeStyle,
    LabelStyle,
    LineStyle,
    NodeStyle,
    Shape,
)
from .writer import DocumentWriter

__all__ = [
    "Arrow",
    "BLACK",
    "BorderStyle",
    "Document",
    "DocumentWriter",
    "Edge",
    "EdgeStyle",
    "Graph",
    "GraphExporter",
    "LabelStyle",
    "LineStyle",
    "NestingError",
    "Node",
    "NodeStyle",
    "Shape",
    "StreamWriter",
    "WHITE",
    "WriterClosedError",
    "YedWriterError",
    "escape",
]
