"""
XML Tree Navigation

Thin read-only wrapper over ElementTree exposing the tag-name queries the
validator needs. Tags are matched on their local name, so documents with a
default namespace and documents with prefixed elements behave the same.
"""

from typing import Iterator, List, Optional
from xml.etree import ElementTree as ET
import logging

from sepa_validator.core.exceptions import XmlParseException

logger = logging.getLogger(__name__)


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def _namespace(tag) -> Optional[str]:
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1 : tag.index("}")]
    return None


class XmlNode:
    """Read-only view of a single XML element."""

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element):
        self._element = element

    @property
    def tag(self) -> str:
        """Local tag name, without namespace."""
        return _local_name(self._element.tag)

    @property
    def namespace(self) -> Optional[str]:
        """Namespace URI of the element, or None."""
        return _namespace(self._element.tag)

    @property
    def text_content(self) -> str:
        """Concatenated text of the element and all its descendants, unstripped."""
        return "".join(self._element.itertext())

    def iter_descendants(self, name: str) -> Iterator["XmlNode"]:
        for element in self._element.iter():
            if element is self._element:
                continue
            if _local_name(element.tag) == name:
                yield XmlNode(element)

    def descendants(self, name: str) -> List["XmlNode"]:
        """All descendants with the given local name, in document order."""
        return list(self.iter_descendants(name))

    def first(self, name: str) -> Optional["XmlNode"]:
        """First descendant with the given local name."""
        return next(self.iter_descendants(name), None)

    def children(self, name: str) -> List["XmlNode"]:
        """Direct children with the given local name."""
        return [XmlNode(child) for child in self._element if _local_name(child.tag) == name]

    def text_of(self, name: str) -> Optional[str]:
        """Text content of the first descendant named ``name``; None if absent."""
        node = self.first(name)
        return node.text_content if node is not None else None

    def __eq__(self, other) -> bool:
        return isinstance(other, XmlNode) and other._element is self._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        return f"XmlNode({self.tag!r})"


class XmlTree:
    """Parsed document. Element queries include the root element."""

    def __init__(self, root: ET.Element):
        self.root = XmlNode(root)
        self._root_element = root

    def elements(self, name: str) -> List[XmlNode]:
        """All elements with the given local name, root included, in document order."""
        return [
            XmlNode(element)
            for element in self._root_element.iter()
            if _local_name(element.tag) == name
        ]

    def first(self, name: str) -> Optional[XmlNode]:
        for element in self._root_element.iter():
            if _local_name(element.tag) == name:
                return XmlNode(element)
        return None

    def contains(self, name: str) -> bool:
        """True when at least one element with the given local name exists."""
        return self.first(name) is not None


def parse_xml(xml_text: str) -> XmlTree:
    """
    Parse XML text into a navigable tree.

    Raises:
        XmlParseException: the text is not well-formed XML. The message
            carries the parser's diagnostic.
    """
    # Remove BOM if present
    if xml_text.startswith("\ufeff"):
        xml_text = xml_text[1:]

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        line, column = getattr(e, "position", (None, None))
        logger.debug(f"XML parsing failed: {e}")
        raise XmlParseException(f"XML format error: {e}", line=line, column=column) from e

    return XmlTree(root)
