"""Enumerations for EAGLE attribute values and their parsers."""

from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar

__all__ = [
    "Alignment",
    "AttributeDisplay",
    "Font",
    "GateAddLevel",
    "GridStyle",
    "GridUnit",
    "PadShape",
    "PinDirection",
    "PinFunction",
    "PinLength",
    "PinVisibility",
    "PolygonPour",
    "ViaShape",
    "WireCap",
    "WireStyle",
    "parse_alignment",
    "parse_attribute_display",
    "parse_font",
    "parse_gate_add_level",
    "parse_grid_style",
    "parse_grid_unit",
    "parse_pad_shape",
    "parse_pin_direction",
    "parse_pin_function",
    "parse_pin_length",
    "parse_pin_visibility",
    "parse_polygon_pour",
    "parse_via_shape",
    "parse_wire_cap",
    "parse_wire_style",
]

# Each member's value is the token used in EAGLE files. UNKNOWN marks a
# value that could not be parsed.


class Alignment(Enum):
    UNKNOWN = None
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"


class AttributeDisplay(Enum):
    UNKNOWN = None
    OFF = "off"
    VALUE = "value"
    NAME = "name"
    BOTH = "both"


class Font(Enum):
    UNKNOWN = None
    FIXED = "fixed"
    PROPORTIONAL = "proportional"
    VECTOR = "vector"


class GateAddLevel(Enum):
    UNKNOWN = None
    MUST = "must"
    CAN = "can"
    NEXT = "next"
    REQUEST = "request"
    ALWAYS = "always"


class GridStyle(Enum):
    UNKNOWN = None
    LINES = "lines"
    DOTS = "dots"


class GridUnit(Enum):
    UNKNOWN = None
    MICROMETERS = "mic"
    MILLIMETERS = "mm"
    MILS = "mil"
    INCHES = "inch"


class PadShape(Enum):
    UNKNOWN = None
    SQUARE = "square"
    ROUND = "round"
    OCTAGON = "octagon"
    LONG = "long"
    OFFSET = "offset"


class PinDirection(Enum):
    UNKNOWN = None
    NOT_CONNECTED = "nc"
    INPUT = "in"
    OUTPUT = "out"
    IO = "io"
    OPEN_COLLECTOR = "oc"
    POWER = "pwr"
    PASSIVE = "pas"
    HIGH_Z = "hiz"
    SUPPLY = "sup"


class PinFunction(Enum):
    UNKNOWN = None
    NONE = "none"
    DOT = "dot"
    CLOCK = "clk"
    DOT_CLOCK = "dotclk"


class PinLength(Enum):
    UNKNOWN = None
    POINT = "point"
    SHORT = "short"
    MIDDLE = "middle"
    LONG = "long"


class PinVisibility(Enum):
    UNKNOWN = None
    OFF = "off"
    PAD = "pad"
    PIN = "pin"
    BOTH = "both"


class PolygonPour(Enum):
    UNKNOWN = None
    SOLID = "solid"
    HATCH = "hatch"
    CUTOUT = "cutout"


class ViaShape(Enum):
    UNKNOWN = None
    SQUARE = "square"
    ROUND = "round"
    OCTAGON = "octagon"


class WireCap(Enum):
    UNKNOWN = None
    FLAT = "flat"
    ROUND = "round"


class WireStyle(Enum):
    UNKNOWN = None
    CONTINUOUS = "continuous"
    LONG_DASH = "longdash"
    SHORT_DASH = "shortdash"
    DASH_DOT = "dashdot"


_E = TypeVar("_E", bound=Enum)


def _parse(enum_cls: type[_E], text: str, errors: Optional[list[str]], label: str) -> _E:
    try:
        return enum_cls(text)
    except ValueError:
        if errors is not None:
            errors.append(f"Unknown {label}: {text}")
        return enum_cls(None)


def parse_alignment(text: str, errors: Optional[list[str]] = None) -> Alignment:
    return _parse(Alignment, text, errors, "alignment")


def parse_attribute_display(
    text: str, errors: Optional[list[str]] = None
) -> AttributeDisplay:
    return _parse(AttributeDisplay, text, errors, "attribute display")


def parse_font(text: str, errors: Optional[list[str]] = None) -> Font:
    return _parse(Font, text, errors, "font")


def parse_gate_add_level(text: str, errors: Optional[list[str]] = None) -> GateAddLevel:
    return _parse(GateAddLevel, text, errors, "gate add level")


def parse_grid_style(text: str, errors: Optional[list[str]] = None) -> GridStyle:
    return _parse(GridStyle, text, errors, "grid style")


def parse_grid_unit(text: str, errors: Optional[list[str]] = None) -> GridUnit:
    return _parse(GridUnit, text, errors, "grid unit")


def parse_pad_shape(text: str, errors: Optional[list[str]] = None) -> PadShape:
    return _parse(PadShape, text, errors, "pad shape")


def parse_pin_direction(text: str, errors: Optional[list[str]] = None) -> PinDirection:
    return _parse(PinDirection, text, errors, "pin direction")


def parse_pin_function(text: str, errors: Optional[list[str]] = None) -> PinFunction:
    return _parse(PinFunction, text, errors, "pin function")


def parse_pin_length(text: str, errors: Optional[list[str]] = None) -> PinLength:
    return _parse(PinLength, text, errors, "pin length")


def parse_pin_visibility(
    text: str, errors: Optional[list[str]] = None
) -> PinVisibility:
    return _parse(PinVisibility, text, errors, "pin visibility")


def parse_polygon_pour(text: str, errors: Optional[list[str]] = None) -> PolygonPour:
    return _parse(PolygonPour, text, errors, "polygon pour")


def parse_via_shape(text: str, errors: Optional[list[str]] = None) -> ViaShape:
    return _parse(ViaShape, text, errors, "via shape")


def parse_wire_cap(text: str, errors: Optional[list[str]] = None) -> WireCap:
    return _parse(WireCap, text, errors, "wire cap")


def parse_wire_style(text: str, errors: Optional[list[str]] = None) -> WireStyle:
    return _parse(WireStyle, text, errors, "wire style")