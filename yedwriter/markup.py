"""Markup fragments of the yEd flavour of GraphML.

The functions in this module are pure: they receive already resolved styles
and return text.  Writing the fragments, and dealing with sink failures, is
the job of :class:`yedwriter.writer.DocumentWriter`.
"""
from __future__ import annotations

import re
from enum import Enum
from xml.sax.saxutils import escape as _sax_escape

from .style import EdgeStyle, NodeStyle

# Characters outside the XML 1.0 ``Char`` production.
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
_EXTRA_ENTITIES = {
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}

ROOT_GRAPH_ID = "G"

HEADER_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<graphml xmlns="http://graphml.graphdrawing.org/xmlns" xmlns:java="http://www.yworks.com/xml/yfiles-common/1.0/java" xmlns:sys="http://www.yworks.com/xml/yfiles-common/markup/primitives/2.0" xmlns:x="http://www.yworks.com/xml/yfiles-common/markup/2.0" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xmlns:y="http://www.yworks.com/xml/graphml" xmlns:yed="http://www.yworks.com/xml/yed/3" xsi:schemaLocation="http://graphml.graphdrawing.org/xmlns http://www.yworks.com/xml/schema/graphml/1.1/ygraphml.xsd">
  <!--{creator}-->
  <key attr.name="Description" attr.type="string" for="graph" id="d0"/>
  <key for="port" id="d1" yfiles.type="portgraphics"/>
  <key for="port" id="d2" yfiles.type="portgeometry"/>
  <key for="port" id="d3" yfiles.type="portuserdata"/>
  <key attr.name="url" attr.type="string" for="node" id="d4"/>
  <key attr.name="description" attr.type="string" for="node" id="d5"/>
  <key for="node" id="d6" yfiles.type="nodegraphics"/>
  <key for="graphml" id="d7" yfiles.type="resources"/>
  <key attr.name="url" attr.type="string" for="edge" id="d8"/>
  <key attr.name="description" attr.type="string" for="edge" id="d9"/>
  <key for="edge" id="d10" yfiles.type="edgegraphics"/>
"""

FOOTER = """
  <data key="d7">
    <y:Resources/>
  </data>
</graphml>
"""

_GROUP_REALIZERS = """
      <data key="d6">
        <y:ProxyAutoBoundsNode>
          <y:Realizers active="0">
            <y:GroupNode>
              <y:Geometry height="181.87067499999998" width="294.52628859375017" x="186.07787140624984" y="135.68900499999998"/>
              <y:Fill color="#F5F5F5" transparent="false"/>
              <y:BorderStyle color="#000000" type="dashed" width="1.0"/>
              <y:NodeLabel alignment="right" autoSizePolicy="node_width" backgroundColor="#EBEBEB" borderDistance="0.0" fontFamily="Dialog" fontSize="15" fontStyle="plain" hasLineColor="false" height="21.4609375" horizontalTextPosition="center" iconTextGap="4" modelName="internal" modelPosition="t" textColor="#000000" verticalTextPosition="bottom" visible="true" width="294.52628859375017" x="0.0" xml:space="preserve" y="0.0">{label}</y:NodeLabel>
              <y:Shape type="roundrectangle"/>
              <y:State closed="false" closedHeight="50.0" closedWidth="50.0" innerGraphDisplayEnabled="false"/>
              <y:NodeBounds considerNodeLabelSize="true"/>
              <y:Insets bottom="15" bottomF="15.0" left="15" leftF="15.0" right="15" rightF="15.0" top="15" topF="15.0"/>
              <y:BorderInsets bottom="5" bottomF="5.1200000000000045" left="7" leftF="7.15380859375" right="7" rightF="7.040000000000134" top="0" topF="0.0"/>
            </y:GroupNode>
            <y:GroupNode>
              <y:Geometry height="50.0" width="50.0" x="0.0" y="60.0"/>
              <y:Fill color="#F5F5F5" transparent="false"/>
              <y:BorderStyle color="#000000" type="dashed" width="1.0"/>
              <y:NodeLabel alignment="right" autoSizePolicy="node_width" backgroundColor="#EBEBEB" borderDistance="0.0" fontFamily="Dialog" fontSize="15" fontStyle="plain" hasLineColor="false" height="21.4609375" horizontalTextPosition="center" iconTextGap="4" modelName="internal" modelPosition="t" textColor="#000000" verticalTextPosition="bottom" visible="true" width="64.3076171875" x="-7.15380859375" xml:space="preserve" y="0.0">{label}</y:NodeLabel>
              <y:Shape type="roundrectangle"/>
              <y:State closed="true" closedHeight="50.0" closedWidth="50.0" innerGraphDisplayEnabled="false"/>
              <y:Insets bottom="5" bottomF="5.0" left="5" leftF="5.0" right="5" rightF="5.0" top="5" topF="5.0"/>
              <y:BorderInsets bottom="0" bottomF="0.0" left="0" leftF="0.0" right="0" rightF="0.0" top="0" topF="0.0"/>
            </y:GroupNode>
          </y:Realizers>
        </y:ProxyAutoBoundsNode>
      </data>"""


def escape(text: str) -> str:
    """Escape ``text`` for use in XML character data or attribute values.

    Besides ``&``, ``<`` and ``>``, quotes and the whitespace characters that
    a parser would otherwise normalise are written as character references.
    Characters that cannot appear in an XML 1.0 document are replaced with
    U+FFFD.
    """

    return _sax_escape(_INVALID_XML_CHARS.sub("\ufffd", text), _EXTRA_ENTITIES)


def _value(value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    return escape(str(value))


def _comment(text: str) -> str:
    # ``--`` may not appear inside a comment, nor may it end with ``-``.
    text = _INVALID_XML_CHARS.sub("\ufffd", text)
    return re.sub(r"-{2,}", "-", text).rstrip("-")


def header(creator: str) -> str:
    """Return the XML declaration, the ``graphml`` root and the key table."""

    return HEADER_TEMPLATE.format(creator=_comment(creator))


def footer() -> str:
    return FOOTER


def graph_open(graph_id: str, description: str = "") -> str:
    """Open a ``graph`` element; an empty id renders as the root graph id."""

    fragment = f'\n  <graph edgedefault="directed" id="{escape(graph_id or ROOT_GRAPH_ID)}">'
    if description:
        return fragment + f'\n    <data key="d0" xml:space="preserve">{escape(description)}</data>'
    return fragment + '\n    <data key="d0"/>'


def graph_close() -> str:
    return "\n  </graph>"


def node_open(node_id: str, group: bool = False) -> str:
    if group:
        return f'\n\t<node id="{escape(node_id)}" yfiles.foldertype="group">'
    return f'\n\t<node id="{escape(node_id)}">'


def node_close() -> str:
    return "\n\t</node>"


def description(text: str) -> str:
    """Return the ``d5`` description element, self-closing when ``text`` is empty."""

    if not text:
        return '\n\t\t<data key="d5"/>'
    return f'\n\t\t<data key="d5" xml:space="preserve">{escape(text)}</data>'


def shape_node_graphics(label: str, style: NodeStyle) -> str:
    """Return the ``ShapeNode`` realizer for a plain node.

    ``style`` must already be resolved.  The ``NodeLabel`` element is left out
    entirely when ``label`` is empty.
    """

    border = style.border
    parts = [
        f"""
      <data key="d6">
        <y:ShapeNode>
          <y:Geometry height="{style.height:f}" x="0.0" y="0.0"/>
          <y:Fill color="{_value(style.color)}" transparent="false"/>
          <y:BorderStyle color="{_value(border.color)}" raised="false" type="line" width="{border.width:f}"/>
"""
    ]
    if label:
        font = style.label
        parts.append(
            f"""
          <y:NodeLabel alignment="center" autoSizePolicy="content" fontFamily="Dialog" fontSize="{int(font.font_size):d}" fontStyle="plain" hasBackgroundColor="false" hasLineColor="false" height="17.96875" horizontalTextPosition="center" iconTextGap="4" modelName="custom" textColor="{_value(font.color)}" verticalTextPosition="bottom" visible="true" x="5.0" xml:space="preserve" y="6.015625">{escape(label)}<y:LabelModel><y:SmartNodeLabelModel distance="4.0"/></y:LabelModel><y:ModelParameter><y:SmartNodeLabelModelParameter labelRatioX="0.0" labelRatioY="0.0" nodeRatioX="0.0" nodeRatioY="0.0" offsetX="0.0" offsetY="0.0" upX="0.0" upY="-1.0"/></y:ModelParameter></y:NodeLabel>"""
        )
    parts.append(
        f"""
          <y:Shape type="{_value(style.shape)}"/>
        </y:ShapeNode>
      </data>"""
    )
    return "".join(parts)


def group_node_graphics(label: str) -> str:
    """Return the ``ProxyAutoBoundsNode`` with its open and closed realizers."""

    return _GROUP_REALIZERS.format(label=escape(label))


def edge_open(edge_id: str, source_id: str, target_id: str) -> str:
    return (
        f'\n\t<edge id="{escape(edge_id)}" source="{escape(source_id)}"'
        f' target="{escape(target_id)}">'
    )


def edge_close() -> str:
    return "\n\t</edge>"


def edge_graphics(label: str, style: EdgeStyle) -> str:
    """Return the ``PolyLineEdge`` realizer; ``style`` must already be resolved."""

    line = style.line
    parts = [
        f"""
      <data key="d10">
        <y:PolyLineEdge>
          <y:Path sx="0.0" sy="0.0" tx="0.0" ty="0.0"/>
          <y:LineStyle color="{_value(line.color)}" type="line" width="{line.width:f}"/>
          <y:Arrows source="{_value(style.source)}" target="{_value(style.target)}"/>
"""
    ]
    if label:
        font = style.label
        parts.append(
            f"""
          <y:EdgeLabel alignment="center" configuration="AutoFlippingLabel" distance="2.0" fontFamily="Dialog" fontSize="{int(font.font_size):d}" fontStyle="plain" hasBackgroundColor="false" hasLineColor="false" height="17.96875" horizontalTextPosition="center" iconTextGap="4" modelName="three_center" modelPosition="center" preferredPlacement="anywhere" ratio="0.5" textColor="{_value(font.color)}" verticalTextPosition="bottom" visible="true" x="-2.14501953125" xml:space="preserve" y="11.50439453125">{escape(label)}<y:PreferredPlacementDescriptor angle="0.0" angleOffsetOnRightSide="0" angleReference="absolute" angleRotationOnRightSide="co" distance="-1.0" frozen="true" placement="anywhere" side="anywhere" sideReference="relative_to_edge_flow"/></y:EdgeLabel>"""
        )
    parts.append(
        """
          <y:BendStyle smoothed="false"/>
        </y:PolyLineEdge>
      </data>"""
    )
    return "".join(parts)


__all__ = [
    "ROOT_GRAPH_ID",
    "description",
    "edge_close",
    "edge_graphics",
    "edge_open",
    "escape",
    "footer",
    "graph_close",
    "graph_open",
    "group_node_graphics",
    "header",
    "node_close",
    "node_open",
    "shape_node_graphics",
]
