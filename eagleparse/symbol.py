"""Schematic symbols and their pins."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .dom import DomElement
from .enums import (
    PinDirection,
    PinFunction,
    PinLength,
    PinVisibility,
    parse_pin_direction,
    parse_pin_function,
    parse_pin_length,
    parse_pin_visibility,
)
from .geometry import Point, Rotation
from .shapes import Circle, Dimension, Frame, Polygon, Rectangle, Text, Wire

__all__ = ["Pin", "Symbol"]

Errors = Optional[list]

_PIN_LENGTH_MM = {
    PinLength.POINT: 0.0,
    PinLength.SHORT: 2.54,
    PinLength.MIDDLE: 5.08,
    PinLength.LONG: 7.62,
}


@dataclass(frozen=True, kw_only=True)
class Pin:
    """A symbol pin."""

    name: str
    position: Point
    visibility: PinVisibility = PinVisibility.BOTH
    length: PinLength = PinLength.LONG
    direction: PinDirection = PinDirection.IO
    function: PinFunction = PinFunction.NONE
    swap_level: int = 0
    rotation: Rotation = field(default_factory=Rotation)

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Pin:
        values: dict = {
            "name": element.get_string("name"),
            "position": Point(element.get_float("x"), element.get_float("y")),
        }
        if element.has_attribute("visible"):
            values["visibility"] = parse_pin_visibility(
                element.get_string("visible"), errors
            )
        if element.has_attribute("length"):
            values["length"] = parse_pin_length(element.get_string("length"), errors)
        if element.has_attribute("direction"):
            values["direction"] = parse_pin_direction(
                element.get_string("direction"), errors
            )
        if element.has_attribute("function"):
            values["function"] = parse_pin_function(
                element.get_string("function"), errors
            )
        if element.has_attribute("swaplevel"):
            values["swap_level"] = element.get_int("swaplevel")
        if element.has_attribute("rot"):
            values["rotation"] = Rotation.parse(element.get_string("rot"))
        return cls(**values)

    def length_in_millimeters(self) -> float:
        """The pin length in millimeters; 0 for an unknown length."""
        return _PIN_LENGTH_MM.get(self.length, 0.0)


@dataclass(frozen=True, kw_only=True)
class Symbol:
    """A schematic symbol with its drawing primitives and pins."""

    name: str
    description: str = ""
    wires: tuple[Wire, ...] = ()
    rectangles: tuple[Rectangle, ...] = ()
    circles: tuple[Circle, ...] = ()
    polygons: tuple[Polygon, ...] = ()
    texts: tuple[Text, ...] = ()
    pins: tuple[Pin, ...] = ()
    frames: tuple[Frame, ...] = ()
    dimensions: tuple[Dimension, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Symbol:
        name = element.get_string("name")
        description = ""
        items: dict[str, list] = {
            "wires": [],
            "rectangles": [],
            "circles": [],
            "polygons": [],
            "texts": [],
            "pins": [],
            "frames": [],
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
            elif tag == "pin":
                items["pins"].append(Pin.from_element(child, errors))
            elif tag == "frame":
                items["frames"].append(Frame.from_element(child))
            elif tag == "dimension":
                items["dimensions"].append(Dimension.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown symbol child: {tag}")
        return cls(
            name=name,
            description=description,
            **{key: tuple(value) for key, value in items.items()},
        )