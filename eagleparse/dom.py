"""A small read-only XML element tree used by all EAGLE file parsers."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

__all__ = ["ParseError", "DomElement", "parse_document", "read_document"]

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ParseError(Exception):
    """Raised when an EAGLE document or one of its elements cannot be parsed."""


def _to_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _to_float(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class DomElement:
    """An XML element with its tag, text, attributes and child elements."""

    tag_name: str
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[DomElement, ...] = ()

    @classmethod
    def from_xml(cls, element: ET.Element | None) -> DomElement:
        """Build a tree from an ElementTree element."""
        if element is None:
            raise ParseError("Invalid XML node!")
        return cls(
            tag_name=element.tag,
            text="".join(element.itertext()),
            attributes=dict(element.attrib),
            children=tuple(cls.from_xml(child) for child in element),
        )

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_string(self, name: str) -> str:
        try:
            return self.attributes[name]
        except KeyError:
            raise ParseError(
                f"Attribute '{name}' not found in XML element '{self.tag_name}'."
            ) from None

    def get_bool(self, name: str) -> bool:
        value = self.get_string(name)
        if value == "yes":
            return True
        if value == "no":
            return False
        raise ParseError(f"Invalid bool in attribute {name}")

    def get_int(self, name: str) -> int:
        value = _to_int(self.get_string(name))
        if value is None:
            raise ParseError(f"Invalid integer in attribute {name}")
        return value

    def get_float(self, name: str) -> float:
        value = _to_float(self.get_string(name))
        if value is None:
            raise ParseError(f"Invalid double in attribute {name}")
        return value

    def has_child(self, tag_name: str = "") -> bool:
        """Whether a child with this tag exists; an empty tag matches any child."""
        return any(not tag_name or child.tag_name == tag_name for child in self.children)

    def first_child(self, tag_name: str = "") -> DomElement:
        """The first child with this tag; an empty tag matches any child."""
        for child in self.children:
            if not tag_name or child.tag_name == tag_name:
                return child
        raise ParseError(f"Child not found: {tag_name}")


def parse_document(content: Union[bytes, str], kind: str) -> DomElement:
    """Parse XML content and return its root element."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise ParseError(f"Error while parsing EAGLE {kind}: {exc}") from exc
    return DomElement.from_xml(root)


def read_document(path: Union[str, Path], kind: str) -> DomElement:
    """Read an XML file from disk and return its root element."""
    file_path = Path(path)
    if not file_path.exists():
        raise ParseError(f"File does not exist: {path}")
    try:
        content = file_path.read_bytes()
    except OSError as exc:
        raise ParseError(f"Cannot open file {path}: {exc.strerror or exc}") from exc
    return parse_document(content, kind)


# Kept for callers that want to check numeric attribute parsing directly.
_ = math