"""Drawing primitives and shared elements found in EAGLE symbols, packages and sheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .dom import DomElement
from .enums import (
    Alignment,
    AttributeDisplay,
    Font,
    GridStyle,
    GridUnit,
    PolygonPour,
    WireCap,
    WireStyle,
    parse_alignment,
    parse_attribute_display,
    parse_font,
    parse_grid_style,
    parse_grid_unit,
    parse_polygon_pour,
    parse_wire_cap,
    parse_wire_style,
)
from .geometry import Point, Rotation

__all__ = [
    "Attribute",
    "Circle",
    "Dimension",
    "Frame",
    "Grid",
    "Polygon",
    "Rectangle",
    "Text",
    "Vertex",
    "Wire",
]

Errors = Optional[list]


def _optional_rotation(element: DomElement) -> Rotation:
    if element.has_attribute("rot"):
        return Rotation.parse(element.get_string("rot"))
    return Rotation()


def _point(element: DomElement, x_name: str, y_name: str) -> Point:
    return Point(element.get_float(x_name), element.get_float(y_name))


@dataclass(frozen=True, kw_only=True)
class Attribute:
    """A named attribute, optionally with its own placement and text style."""

    name: str
    value: str = ""
    position: Point = field(default_factory=Point)
    size: float = 0.0
    layer: int = 0
    font: Font = Font.UNKNOWN
    ratio: int = 0
    rotation: Rotation = field(default_factory=Rotation)
    display: AttributeDisplay = AttributeDisplay.VALUE
    constant: bool = False
    alignment: Alignment = Alignment.BOTTOM_LEFT

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Attribute:
        values: dict = {"name": element.get_string("name")}
        if element.has_attribute("value"):
            values["value"] = element.get_string("value")
        x = element.get_float("x") if element.has_attribute("x") else 0.0
        y = element.get_float("y") if element.has_attribute("y") else 0.0
        values["position"] = Point(x, y)
        if element.has_attribute("size"):
            values["size"] = element.get_float("size")
        if element.has_attribute("layer"):
            values["layer"] = element.get_int("layer")
        if element.has_attribute("font"):
            values["font"] = parse_font(element.get_string("font"), errors)
        if element.has_attribute("ratio"):
            values["ratio"] = element.get_int("ratio")
        values["rotation"] = _optional_rotation(element)
        if element.has_attribute("display"):
            values["display"] = parse_attribute_display(
                element.get_string("display"), errors
            )
        if element.has_attribute("constant"):
            values["constant"] = element.get_bool("constant")
        if element.has_attribute("align"):
            values["alignment"] = parse_alignment(element.get_string("align"), errors)
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Circle:
    """A circle outline or filled disc (width 0)."""

    layer: int
    width: float
    radius: float
    position: Point

    @classmethod
    def from_element(cls, element: DomElement) -> Circle:
        return cls(
            layer=element.get_int("layer"),
            width=element.get_float("width"),
            radius=element.get_float("radius"),
            position=_point(element, "x", "y"),
        )


@dataclass(frozen=True)
class Dimension:
    """A dimension annotation; its geometry is not read."""

    @classmethod
    def from_element(cls, element: DomElement) -> Dimension:
        return cls()


@dataclass(frozen=True, kw_only=True)
class Frame:
    """A drawing frame with a grid of columns and rows."""

    layer: int
    p1: Point
    p2: Point
    columns: int
    rows: int

    @classmethod
    def from_element(cls, element: DomElement) -> Frame:
        return cls(
            layer=element.get_int("layer"),
            p1=_point(element, "x1", "y1"),
            p2=_point(element, "x2", "y2"),
            columns=element.get_int("columns"),
            rows=element.get_int("rows"),
        )


@dataclass(frozen=True, kw_only=True)
class Grid:
    """Grid settings of a drawing."""

    distance: float = 0.0
    unit_distance: GridUnit = GridUnit.UNKNOWN
    unit: GridUnit = GridUnit.UNKNOWN
    style: GridStyle = GridStyle.LINES
    multiple: int = 1
    display: bool = False
    alt_distance: float = 0.0
    alt_unit_distance: GridUnit = GridUnit.UNKNOWN
    alt_unit: GridUnit = GridUnit.UNKNOWN

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Grid:
        values: dict = {}
        if element.has_attribute("distance"):
            values["distance"] = element.get_float("distance")
        if element.has_attribute("unitdist"):
            values["unit_distance"] = parse_grid_unit(
                element.get_string("unitdist"), errors
            )
        if element.has_attribute("unit"):
            values["unit"] = parse_grid_unit(element.get_string("unit"), errors)
        if element.has_attribute("style"):
            values["style"] = parse_grid_style(element.get_string("style"), errors)
        if element.has_attribute("multiple"):
            values["multiple"] = element.get_int("multiple")
        if element.has_attribute("display"):
            values["display"] = element.get_bool("display")
        if element.has_attribute("altdistance"):
            values["alt_distance"] = element.get_float("altdistance")
        if element.has_attribute("altunitdist"):
            values["alt_unit_distance"] = parse_grid_unit(
                element.get_string("altunitdist"), errors
            )
        if element.has_attribute("altunit"):
            values["alt_unit"] = parse_grid_unit(element.get_string("altunit"), errors)
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Vertex:
    """A polygon corner; a non-zero curve bends the edge to the next vertex."""

    position: Point
    curve: float = 0.0

    @classmethod
    def from_element(cls, element: DomElement) -> Vertex:
        curve = element.get_float("curve") if element.has_attribute("curve") else 0.0
        return cls(position=_point(element, "x", "y"), curve=curve)


@dataclass(frozen=True, kw_only=True)
class Polygon:
    """A polygon with its pour settings and vertices."""

    layer: int
    width: float
    spacing: float = 0.0
    pour: PolygonPour = PolygonPour.SOLID
    isolate: float = 0.0
    orphans: bool = False
    thermals: bool = True
    rank: int = 0
    vertices: tuple[Vertex, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Polygon:
        values: dict = {
            "layer": element.get_int("layer"),
            "width": element.get_float("width"),
        }
        if element.has_attribute("spacing"):
            values["spacing"] = element.get_float("spacing")
        if element.has_attribute("pour"):
            values["pour"] = parse_polygon_pour(element.get_string("pour"), errors)
        if element.has_attribute("isolate"):
            values["isolate"] = element.get_float("isolate")
        if element.has_attribute("orphans"):
            values["orphans"] = element.get_bool("orphans")
        if element.has_attribute("thermals"):
            values["thermals"] = element.get_bool("thermals")
        if element.has_attribute("rank"):
            values["rank"] = element.get_int("rank")
        values["vertices"] = tuple(
            Vertex.from_element(child) for child in element.children
        )
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Rectangle:
    """A filled rectangle given by two opposite corners."""

    layer: int
    p1: Point
    p2: Point
    rotation: Rotation = field(default_factory=Rotation)

    @classmethod
    def from_element(cls, element: DomElement) -> Rectangle:
        return cls(
            layer=element.get_int("layer"),
            p1=_point(element, "x1", "y1"),
            p2=_point(element, "x2", "y2"),
            rotation=_optional_rotation(element),
        )


@dataclass(frozen=True, kw_only=True)
class Text:
    """A text item; its value is the element's content."""

    layer: int
    size: float
    position: Point
    font: Font = Font.PROPORTIONAL
    ratio: int = 8
    rotation: Rotation = field(default_factory=Rotation)
    alignment: Alignment = Alignment.BOTTOM_LEFT
    value: str = ""

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Text:
        values: dict = {"layer": element.get_int("layer")}
        if element.has_attribute("font"):
            values["font"] = parse_font(element.get_string("font"), errors)
        values["size"] = element.get_float("size")
        if element.has_attribute("ratio"):
            values["ratio"] = element.get_int("ratio")
        values["position"] = _point(element, "x", "y")
        values["rotation"] = _optional_rotation(element)
        if element.has_attribute("align"):
            values["alignment"] = parse_alignment(element.get_string("align"), errors)
        values["value"] = element.text
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Wire:
    """A straight or curved line segment."""

    layer: int
    width: float
    p1: Point
    p2: Point
    style: WireStyle = WireStyle.CONTINUOUS
    curve: float = 0.0
    cap: WireCap = WireCap.ROUND

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Wire:
        values: dict = {
            "layer": element.get_int("layer"),
            "width": element.get_float("width"),
            "p1": _point(element, "x1", "y1"),
            "p2": _point(element, "x2", "y2"),
        }
        if element.has_attribute("style"):
            values["style"] = parse_wire_style(element.get_string("style"), errors)
        if element.has_attribute("curve"):
            values["curve"] = element.get_float("curve")
        if element.has_attribute("cap"):
            values["cap"] = parse_wire_cap(element.get_string("cap"), errors)
        return cls(**values)