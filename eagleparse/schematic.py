"""EAGLE schematics: parts, sheets, nets and their segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .dom import DomElement, parse_document, read_document
from .enums import Alignment, parse_alignment
from .geometry import Point, Rotation
from .library import Library
from .shapes import (
    Attribute,
    Circle,
    Dimension,
    Frame,
    Grid,
    Polygon,
    Rectangle,
    Text,
    Wire,
)

__all__ = [
    "Bus",
    "Instance",
    "Label",
    "Module",
    "PinRef",
    "Segment",
    "Net",
    "Part",
    "Sheet",
    "Schematic",
]

Errors = Optional[list]


def _position(element: DomElement) -> Point:
    return Point(element.get_float("x"), element.get_float("y"))


def _optional_rotation(element: DomElement) -> Rotation:
    if element.has_attribute("rot"):
        return Rotation.parse(element.get_string("rot"))
    return Rotation()


def _attributes(element: DomElement, label: str, errors: Errors) -> tuple[Attribute, ...]:
    """Read ``attribute`` children, reporting any other child."""
    attributes = []
    for child in element.children:
        if child.tag_name == "attribute":
            attributes.append(Attribute.from_element(child, errors))
        elif errors is not None:
            errors.append(f"Unknown {label} child: {child.tag_name}")
    return tuple(attributes)


@dataclass(frozen=True, kw_only=True)
class Bus:
    """A named bus on a sheet."""

    name: str

    @classmethod
    def from_element(cls, element: DomElement) -> Bus:
        return cls(name=element.get_string("name"))


@dataclass(frozen=True, kw_only=True)
class Instance:
    """A gate of a part placed on a sheet."""

    part: str
    gate: str
    position: Point
    rotation: Rotation = field(default_factory=Rotation)
    smashed: bool = False
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Instance:
        values: dict = {
            "part": element.get_string("part"),
            "gate": element.get_string("gate"),
            "position": _position(element),
            "rotation": _optional_rotation(element),
        }
        if element.has_attribute("smashed"):
            values["smashed"] = element.get_bool("smashed")
        values["attributes"] = _attributes(element, "instance", errors)
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Label:
    """A net label."""

    position: Point
    size: float
    layer: int
    ratio: int = 8
    rotation: Rotation = field(default_factory=Rotation)
    alignment: Alignment = Alignment.BOTTOM_LEFT
    xref: bool = False

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Label:
        values: dict = {
            "position": _position(element),
            "size": element.get_float("size"),
            "layer": element.get_int("layer"),
        }
        if element.has_attribute("ratio"):
            values["ratio"] = element.get_int("ratio")
        values["rotation"] = _optional_rotation(element)
        if element.has_attribute("align"):
            values["alignment"] = parse_alignment(element.get_string("align"), errors)
        if element.has_attribute("xref"):
            values["xref"] = element.get_bool("xref")
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Module:
    """A hierarchical module; only its name is read."""

    name: str

    @classmethod
    def from_element(cls, element: DomElement) -> Module:
        return cls(name=element.get_string("name"))


@dataclass(frozen=True, kw_only=True)
class PinRef:
    """A reference from a net segment to a pin of a part's gate."""

    part: str
    gate: str
    pin: str

    @classmethod
    def from_element(cls, element: DomElement) -> PinRef:
        return cls(
            part=element.get_string("part"),
            gate=element.get_string("gate"),
            pin=element.get_string("pin"),
        )


@dataclass(frozen=True, kw_only=True)
class Segment:
    """A connected piece of a net on one sheet."""

    pin_refs: tuple[PinRef, ...] = ()
    wires: tuple[Wire, ...] = ()
    junctions: tuple[Point, ...] = ()
    labels: tuple[Label, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Segment:
        pin_refs, wires, junctions, labels = [], [], [], []
        for child in element.children:
            tag = child.tag_name
            if tag == "pinref":
                pin_refs.append(PinRef.from_element(child))
            elif tag == "wire":
                wires.append(Wire.from_element(child, errors))
            elif tag == "junction":
                junctions.append(_position(child))
            elif tag == "label":
                # Label problems inside a segment are not reported.
                labels.append(Label.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown net segment child: {tag}")
        return cls(
            pin_refs=tuple(pin_refs),
            wires=tuple(wires),
            junctions=tuple(junctions),
            labels=tuple(labels),
        )


@dataclass(frozen=True, kw_only=True)
class Net:
    """A named net made of segments."""

    name: str
    net_class: int = 0
    segments: tuple[Segment, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Net:
        name = element.get_string("name")
        net_class = element.get_int("class") if element.has_attribute("class") else 0
        segments = []
        for child in element.children:
            if child.tag_name == "segment":
                segments.append(Segment.from_element(child, errors))
            elif errors is not None:
                errors.append(f"Unknown net child: {child.tag_name}")
        return cls(name=name, net_class=net_class, segments=tuple(segments))


@dataclass(frozen=True, kw_only=True)
class Part:
    """A component used in the schematic."""

    name: str
    library: str
    device_set: str
    device: str
    library_urn: str = ""
    technology: str = ""
    value: str = ""
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Part:
        values: dict = {
            "name": element.get_string("name"),
            "library": element.get_string("library"),
        }
        if element.has_attribute("library_urn"):
            values["library_urn"] = element.get_string("library_urn")
        values["device_set"] = element.get_string("deviceset")
        values["device"] = element.get_string("device")
        if element.has_attribute("technology"):
            values["technology"] = element.get_string("technology")
        if element.has_attribute("value"):
            values["value"] = element.get_string("value")
        values["attributes"] = _attributes(element, "part", errors)
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Sheet:
    """One sheet of a schematic."""

    description: str = ""
    wires: tuple[Wire, ...] = ()
    rectangles: tuple[Rectangle, ...] = ()
    circles: tuple[Circle, ...] = ()
    polygons: tuple[Polygon, ...] = ()
    texts: tuple[Text, ...] = ()
    frames: tuple[Frame, ...] = ()
    dimensions: tuple[Dimension, ...] = ()
    instances: tuple[Instance, ...] = ()
    buses: tuple[Bus, ...] = ()
    nets: tuple[Net, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Sheet:
        description = ""
        items: dict[str, list] = {
            "wires": [],
            "rectangles": [],
            "circles": [],
            "polygons": [],
            "texts": [],
            "frames": [],
            "dimensions": [],
            "instances": [],
            "buses": [],
            "nets": [],
        }
        for child in element.children:
            tag = child.tag_name
            if tag == "description":
                description = child.text
            elif tag == "plain":
                cls._read_plain(child, items, errors)
            elif tag == "instances":
                items["instances"].extend(
                    Instance.from_element(sub, errors) for sub in child.children
                )
            elif tag == "busses":
                items["buses"].extend(Bus.from_element(sub) for sub in child.children)
            elif tag == "nets":
                items["nets"].extend(
                    Net.from_element(sub, errors) for sub in child.children
                )
            elif errors is not None:
                errors.append(f"Unknown sheet child: {tag}")
        return cls(
            description=description,
            **{key: tuple(value) for key, value in items.items()},
        )

    @staticmethod
    def _read_plain(plain: DomElement, items: dict[str, list], errors: Errors) -> None:
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
            elif tag == "frame":
                items["frames"].append(Frame.from_element(child))
            elif tag == "dimension":
                items["dimensions"].append(Dimension.from_element(child))
            elif errors is not None:
                errors.append(f"Unknown sheet plain child: {tag}")


@dataclass(frozen=True, kw_only=True)
class Schematic:
    """A whole EAGLE schematic file."""

    description: str = ""
    grid: Grid = field(default_factory=Grid)
    libraries: tuple[Library, ...] = ()
    modules: tuple[Module, ...] = ()
    parts: tuple[Part, ...] = ()
    sheets: tuple[Sheet, ...] = ()

    @classmethod
    def from_file(cls, path: Union[str, Path], errors: Errors = None) -> Schematic:
        """Load a schematic file (.sch)."""
        return cls._from_root(read_document(path, "schematic"), errors)

    @classmethod
    def from_bytes(cls, content: Union[bytes, str], errors: Errors = None) -> Schematic:
        """Load a schematic from the content of a schematic file."""
        return cls._from_root(parse_document(content, "schematic"), errors)

    @classmethod
    def _from_root(cls, root: DomElement, errors: Errors) -> Schematic:
        drawing = root.first_child("drawing")
        values: dict = {}
        if drawing.has_child("grid"):
            values["grid"] = Grid.from_element(drawing.first_child("grid"))

        schematic = drawing.first_child("schematic")
        if schematic.has_child("description"):
            values["description"] = schematic.first_child("description").text
        if schematic.has_child("libraries"):
            values["libraries"] = tuple(
                Library.from_element(child, errors)
                for child in schematic.first_child("libraries").children
            )
        if schematic.has_child("modules"):
            values["modules"] = tuple(
                Module.from_element(child)
                for child in schematic.first_child("modules").children
            )
        if schematic.has_child("parts"):
            values["parts"] = tuple(
                Part.from_element(child, errors)
                for child in schematic.first_child("parts").children
            )
        if schematic.has_child("sheets"):
            values["sheets"] = tuple(
                Sheet.from_element(child, errors)
                for child in schematic.first_child("sheets").children
            )
        return cls(**values)