"""Footprints (packages) and their pads and holes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .dom import DomElement
from .enums import PadShape, parse_pad_shape
from .geometry import Point, Rotation
from .shapes import Circle, Dimension, Polygon, Rectangle, Text, Wire

__all__ = ["Hole", "SmtPad", "ThtPad", "Package"]

Errors = Optional[list]


def _position(element: DomElement) -> Point:
    return Point(element.get_float("x"), element.get_float("y"))


def _optional_rotation(element: DomElement) -> Rotation:
    if element.has_attribute("rot"):
        return Rotation.parse(element.get_string("rot"))
    return Rotation()


@dataclass(frozen=True, kw_only=True)
class Hole:
    """A non-plated drill hole."""

    position: Point
    diameter: float

    @classmethod
    def from_element(cls, element: DomElement) -> Hole:
        return cls(position=_position(element), diameter=element.get_float("drill"))


@dataclass(frozen=True, kw_only=True)
class SmtPad:
    """A surface-mount pad."""

    name: str
    layer: int
    position: Point
    width: float
    height: float
    rotation: Rotation = field(default_factory=Rotation)
    roundness: int = 0
    stop: bool = True
    cream: bool = True

    @classmethod
    def from_element(cls, element: DomElement) -> SmtPad:
        values: dict = {
            "name": element.get_string("name"),
            "layer": element.get_int("layer"),
            "position": _position(element),
            "rotation": _optional_rotation(element),
            "width": element.get_float("dx"),
            "height": element.get_float("dy"),
        }
        if element.has_attribute("roundness"):
            values["roundness"] = element.get_int("roundness")
        if element.has_attribute("stop"):
            values["stop"] = element.get_bool("stop")
        if element.has_attribute("cream"):
            values["cream"] = element.get_bool("cream")
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class ThtPad:
    """A through-hole pad."""

    name: str
    position: Point
    drill_diameter: float
    outer_diameter: float = 0.0
    shape: PadShape = PadShape.ROUND
    rotation: Rotation = field(default_factory=Rotation)
    stop: bool = True

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> ThtPad:
        values: dict = {
            "name": element.get_string("name"),
            "position": _position(element),
            "drill_diameter": element.get_float("drill"),
        }
        if element.has_attribute("diameter"):
            values["outer_diameter"] = element.get_float("diameter")
        if element.has_attribute("shape"):
            values["shape"] = parse_pad_shape(element.get_string("shape"), errors)
        values["rotation"] = _optional_rotation(element)
        if element.has_attribute("stop"):
            values["stop"] = element.get_bool("stop")
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Package:
    """A footprint with its drawing primitives, pads and holes."""

    name: str
    description: str = ""
    wires: tuple[Wire, ...] = ()
    rectangles: tuple[Rectangle, ...] = ()
    circles: tuple[Circle, ...] = ()
    polygons: tuple[Polygon, ...] = ()
    texts: tuple[Text, ...] = ()
    holes: tuple[Hole, ...] = ()
    tht_pads: tuple[ThtPad, ...] = ()
    smt_pads: tuple[SmtPad, ...] = ()
    dimensions: tuple[Dimension, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Package:
        name = element.get_string("name")
        description = ""
        items: dict[str, list] = {
            "wires": [],
            "rectangles": [],
            "circles": [],
            "polygons": [],
            "texts": [],
            "holes": [],
            "tht_pads": [],
            "smt_pads": [],
            "dimensions": [],
        }
        for child in element.children:
            tag = child.tag_name
            if tag == "description":
                description = child.text
            elif tag == "wire":
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
            elif tag == "pad":
                items["tht_pads"].append(ThtPad.from_element(child, errors))
            elif tag == "smd":
                items["smt_pads"].append(SmtPad.from_element(child))
            elif tag == "dimension":
                items["dimensions"].append(Dimension.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown package child: {tag}")
        return cls(
            name=name,
            description=description,
            **{key: tuple(value) for key, value in items.items()},
        )