"""EAGLE libraries, either standalone files or embedded in a board or schematic."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from .deviceset import DeviceSet
from .dom import DomElement, ParseError, parse_document, read_document
from .package import Package
from .symbol import Symbol

__all__ = ["Library"]

Errors = Optional[list]

_T = TypeVar("_T")


def _parse_items(
    element: DomElement,
    container: str,
    label: str,
    parse: Callable[[DomElement, Errors], _T],
    errors: Errors,
) -> tuple[_T, ...]:
    """Parse each child of a container, recording and skipping those that fail."""
    if not element.has_child(container):
        return ()
    items = []
    for child in element.first_child(container).children:
        try:
            items.append(parse(child, errors))
        except ParseError as exc:
            if errors is not None:
                errors.append(f"Failed to parse {label}: {exc}")
    return tuple(items)


@dataclass(frozen=True, kw_only=True)
class Library:
    """Symbols, packages and device sets of one library."""

    embedded_name: str = ""
    embedded_urn: str = ""
    description: str = ""
    symbols: tuple[Symbol, ...] = ()
    packages: tuple[Package, ...] = ()
    device_sets: tuple[DeviceSet, ...] = ()

    @classmethod
    def from_file(cls, path: Union[str, Path], errors: Errors = None) -> Library:
        """Load a library file (.lbr)."""
        root = read_document(path, "library")
        return cls._from_root(root, errors)

    @classmethod
    def from_bytes(cls, content: Union[bytes, str], errors: Errors = None) -> Library:
        """Load a library from the content of a library file."""
        root = parse_document(content, "library")
        return cls._from_root(root, errors)

    @classmethod
    def _from_root(cls, root: DomElement, errors: Errors) -> Library:
        library = root.first_child("drawing").first_child("library")
        return cls.from_element(library, errors)

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Library:
        """Read a ``library`` element."""
        values: dict = {}
        if element.has_attribute("name"):
            values["embedded_name"] = element.get_string("name")
        if element.has_attribute("urn"):
            values["embedded_urn"] = element.get_string("urn")
        if element.has_child("description"):
            values["description"] = element.first_child("description").text
        values["symbols"] = _parse_items(
            element, "symbols", "symbol", Symbol.from_element, errors
        )
        values["packages"] = _parse_items(
            element, "packages", "package", Package.from_element, errors
        )
        values["device_sets"] = _parse_items(
            element, "devicesets", "deviceset", DeviceSet.from_element, errors
        )
        return cls(**values)