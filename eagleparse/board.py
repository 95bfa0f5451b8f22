"""EAGLE boards: placed elements, signals, vias and design rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .dom import DomElement, parse_document, read_document
from .enums import ViaShape, parse_via_shape
from .geometry import Point, Rotation
from .library import Library
from .package import Hole
from .shapes import Attribute, Circle, Dimension, Grid, Polygon, Rectangle, Text, Wire

__all__ = [
    "ContactRef",
    "Param",
    "DesignRules",
    "Element",
    "Via",
    "Signal",
    "Board",
]

Errors = Optional[list]

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> Optional[int]:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _parse_float(text: str) -> Optional[float]:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _position(element: DomElement) -> Point:
    return Point(element.get_float("x"), element.get_float("y"))


@dataclass(frozen=True, kw_only=True)
class ContactRef:
    """A reference from a signal to a pad of a placed element."""

    element: str
    pad: str

    @classmethod
    def from_element(cls, element: DomElement) -> ContactRef:
        return cls(element=element.get_string("element"), pad=element.get_string("pad"))


@dataclass(frozen=True, kw_only=True)
class Param:
    """A single design rule parameter as a name and raw text value."""

    name: str
    value: str

    @classmethod
    def from_element(cls, element: DomElement) -> Param:
        return cls(name=element.get_string("name"), value=element.get_string("value"))

    def value_as_int(self) -> Optional[int]:
        """The value as an integer, or None if it is not one."""
        return _parse_int(self.value)

    def value_as_float(self) -> Optional[float]:
        """The value as a number, or None if it is not one."""
        return _parse_float(self.value)

    def value_with_unit(self) -> Optional[tuple[float, str]]:
        """Split a value such as ``10mil`` into number and trailing letters.

        Returns None if the part before the unit is not a number.
        """
        stripped = self.value.rstrip()
        unit_length = 0
        for char in reversed(self.value):
            if not char.isalpha():
                break
            unit_length += 1
        del stripped
        split_at = len(self.value) - unit_length
        number = _parse_float(self.value[:split_at])
        if number is None:
            return None
        return number, self.value[split_at:]


@dataclass(frozen=True, kw_only=True)
class DesignRules:
    """The design rule set of a board."""

    name: str = ""
    description: str = ""
    params: tuple[Param, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> DesignRules:
        # Some boards omit the name although the format requires it.
        name = element.get_string("name") if element.has_attribute("name") else ""
        description = ""
        params = []
        for child in element.children:
            if child.tag_name == "description":
                description = child.text
            elif child.tag_name == "param":
                params.append(Param.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown design rules child: {child.tag_name}")
        return cls(name=name, description=description, params=tuple(params))

    def find_param(self, name: str) -> Optional[Param]:
        """The first parameter with this name, or None."""
        return next((param for param in self.params if param.name == name), None)


@dataclass(frozen=True, kw_only=True)
class Element:
    """A package placed on the board."""

    name: str
    library: str
    package: str
    value: str
    position: Point
    library_urn: str = ""
    rotation: Rotation = field(default_factory=Rotation)
    locked: bool = False
    populate: bool = True
    smashed: bool = False
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Element:
        values: dict = {
            "name": element.get_string("name"),
            "library": element.get_string("library"),
        }
        if element.has_attribute("library_urn"):
            values["library_urn"] = element.get_string("library_urn")
        values["package"] = element.get_string("package")
        values["value"] = element.get_string("value")
        values["position"] = _position(element)
        if element.has_attribute("rot"):
            values["rotation"] = Rotation.parse(element.get_string("rot"))
        if element.has_attribute("locked"):
            values["locked"] = element.get_bool("locked")
        if element.has_attribute("populate"):
            values["populate"] = element.get_bool("populate")
        if element.has_attribute("smashed"):
            values["smashed"] = element.get_bool("smashed")
        attributes = []
        for child in element.children:
            if child.tag_name == "attribute":
                attributes.append(Attribute.from_element(child, errors))
            elif errors is not None:
                errors.append(f"Unknown element child: {child.tag_name}")
        values["attributes"] = tuple(attributes)
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Via:
    """A plated via spanning a range of layers, e.g. extent ``1-16``."""

    position: Point
    extent: str
    drill: float
    diameter: float = 0.0
    shape: ViaShape = ViaShape.ROUND
    always_stop: bool = False

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Via:
        values: dict = {
            "position": _position(element),
            "extent": element.get_string("extent"),
            "drill": element.get_float("drill"),
        }
        if element.has_attribute("diameter"):
            values["diameter"] = element.get_float("diameter")
        if element.has_attribute("shape"):
            values["shape"] = parse_via_shape(element.get_string("shape"), errors)
        if element.has_attribute("alwaysstop"):
            values["always_stop"] = element.get_bool("alwaysstop")
        return cls(**values)

    def _extent_section(self, index: int) -> str:
        sections = self.extent.split("-")
        return sections[index] if index < len(sections) else ""

    def start_layer(self) -> Optional[int]:
        """The first layer of the extent, or None if it cannot be read."""
        return _parse_int(self._extent_section(0))

    def end_layer(self) -> Optional[int]:
        """The last layer of the extent, or None if it cannot be read."""
        return _parse_int(self._extent_section(1))


@dataclass(frozen=True, kw_only=True)
class Signal:
    """A net on the board with its copper and connected pads."""

    name: str
    net_class: int = 0
    contact_refs: tuple[ContactRef, ...] = ()
    polygons: tuple[Polygon, ...] = ()
    wires: tuple[Wire, ...] = ()
    vias: tuple[Via, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Signal:
        name = element.get_string("name")
        net_class = element.get_int("class") if element.has_attribute("class") else 0
        contact_refs, polygons, wires, vias = [], [], [], []
        for child in element.children:
            tag = child.tag_name
            if tag == "contactref":
                contact_refs.append(ContactRef.from_element(child))
            elif tag == "polygon":
                polygons.append(Polygon.from_element(child, errors))
            elif tag == "wire":
                wires.append(Wire.from_element(child, errors))
            elif tag == "via":
                vias.append(Via.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown signal child: {tag}")
        return cls(
            name=name,
            net_class=net_class,
            contact_refs=tuple(contact_refs),
            polygons=tuple(polygons),
            wires=tuple(wires),
            vias=tuple(vias),
        )


@dataclass(frozen=True, kw_only=True)
class Board:
    """A whole EAGLE board file."""

    grid: Grid = field(default_factory=Grid)
    design_rules: DesignRules = field(default_factory=DesignRules)
    libraries: tuple[Library, ...] = ()
    wires: tuple[Wire, ...] = ()
    rectangles: tuple[Rectangle, ...] = ()
    circles: tuple[Circle, ...] = ()
    polygons: tuple[Polygon, ...] = ()
    texts: tuple[Text, ...] = ()
    holes: tuple[Hole, ...] = ()
    dimensions: tuple[Dimension, ...] = ()
    elements: tuple[Element, ...] = ()
    signals: tuple[Signal, ...] = ()

    @classmethod
    def from_file(cls, path: Union[str, Path], errors: Errors = None) -> Board:
        """Load a board file (.brd)."""
        return cls._from_root(read_document(path, "board"), errors)

    @classmethod
    def from_bytes(cls, content: Union[bytes, str], errors: Errors = None) -> Board:
        """Load a board from the content of a board file."""
        return cls._from_root(parse_document(content, "board"), errors)

    @classmethod
    def _from_root(cls, root: DomElement, errors: Errors) -> Board:
        drawing = root.first_child("drawing")
        values: dict = {}
        if drawing.has_child("grid"):
            values["grid"] = Grid.from_element(drawing.first_child("grid"))

        board = drawing.first_child("board")
        if board.has_child("designrules"):
            values["design_rules"] = DesignRules.from_element(
                board.first_child("designrules"), errors
            )
        if board.has_child("libraries"):
            values["libraries"] = tuple(
                Library.from_element(child)
                for child in board.first_child("libraries").children
            )
        if board.has_child("plain"):
            values.update(cls._read_plain(board.first_child("plain"), errors))
        if board.has_child("elements"):
            values["elements"] = tuple(
                Element.from_element(child, errors)
                for child in board.first_child("elements").children
            )
        if board.has_child("signals"):
            values["signals"] = tuple(
                Signal.from_element(child, errors)
                for child in board.first_child("signals").children
            )
        return cls(**values)

    @staticmethod
    def _read_plain(plain: DomElement, errors: Errors) -> dict[str, tuple]:
        items: dict[str, list] = {
            "wires": [],
            "rectangles": [],
            "circles": [],
            "polygons": [],
            "texts": [],
            "holes": [],
            "dimensions": [],
        }
        for child in plain.children:
            tag = child.tag_name
            if tag == "wire":
                items["wires"].append(Wire.from_element(child, errors))
            elif tag == "rectangle":
                items["rectangles"].append(Rectangle.from_element(child))
            elif tag == "circle":
                items["circles"].append(Circle.from_element(child))
            elif tag == "polygon":
                items["polygons"].append(Polygon.from_element(child, errors))
            elif tag == "text":
                items["texts"].append(Text.from_element(child, errors))
            elif tag == "hole":
                items["holes"].append(Hole.from_element(child))
            elif tag == "dimension":
                items["dimensions"].append(Dimension.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown board child: {tag}")
        return {key: tuple(value) for key, value in items.items()}