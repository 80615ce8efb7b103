"""Generic ordered tree model.

An Element is the output of every encoder: a tag, an attribute mapping and
an ordered list of children, each child being either a nested Element or a
text string. Serialization (quoting, escaping, indentation) belongs to the
writer; this module is purely structural.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

Node = Union["Element", str]


@dataclass
class Element:
    """A tagged node with attributes and ordered children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def append(self, child: Node) -> None:
        """Append a child, preserving insertion order."""
        self.children.append(child)

    def extend(self, children: Iterable[Node]) -> None:
        """Append several children in order."""
        self.children.extend(children)

    def set(self, key: str, value: str) -> None:
        """Set an attribute, replacing any previous value."""
        self.attributes[key] = value

    def merge(self, other: Element) -> None:
        """Merge another element into this one.

        Attributes of ``other`` overwrite ours on key collision. Children of
        ``other`` are appended after the existing children. The tag of
        ``self`` is kept.
        """
        self.attributes.update(other.attributes)
        self.children.extend(other.children)

    # Read helpers ---------------------------------------------------------

    @property
    def text(self) -> Optional[str]:
        """Concatenated text children, or None if there are none."""
        parts = [c for c in self.children if isinstance(c, str)]
        if not parts:
            return None
        return "".join(parts)

    def elements(self) -> Iterator[Element]:
        """Iterate over nested element children, skipping text."""
        for child in self.children:
            if isinstance(child, Element):
                yield child

    def find(self, tag: str) -> Optional[Element]:
        """Return the first direct child element with the given tag."""
        for child in self.elements():
            if child.tag == tag:
                return child
        return None

    def findall(self, tag: str) -> list[Element]:
        """Return all direct child elements with the given tag."""
        return [c for c in self.elements() if c.tag == tag]

    def child_tags(self) -> list[str]:
        """Tags of the direct child elements, in order."""
        return [c.tag for c in self.elements()]

    def to_etree(self) -> ET.Element:
        """Convert to an ``xml.etree.ElementTree.Element`` for a writer.

        Text children are placed as ``text``/``tail`` so that mixed content
        keeps its order.
        """
        node = ET.Element(self.tag, dict(self.attributes))
        last: Optional[ET.Element] = None
        for child in self.children:
            if isinstance(child, Element):
                last = child.to_etree()
                node.append(last)
            elif last is None:
                node.text = (node.text or "") + child
            else:
                last.tail = (last.tail or "") + child
        return node


def new_node(tag: str, text: str) -> Element:
    """Build an element holding a single text child."""
    return Element(tag, children=[text])
