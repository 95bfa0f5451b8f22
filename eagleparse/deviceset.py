"""Device sets: gates, package variants, pin-to-pad connections and technologies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .dom import DomElement
from .enums import GateAddLevel, parse_gate_add_level
from .geometry import Point
from .shapes import Attribute

__all__ = ["Connection", "Technology", "Device", "Gate", "DeviceSet"]

Errors = Optional[list]


@dataclass(frozen=True, kw_only=True)
class Connection:
    """Connects a gate's pin to one or more package pads."""

    gate: str
    pin: str
    pads: tuple[str, ...]

    @classmethod
    def from_element(cls, element: DomElement) -> Connection:
        return cls(
            gate=element.get_string("gate"),
            pin=element.get_string("pin"),
            pads=tuple(element.get_string("pad").split(" ")),
        )


@dataclass(frozen=True, kw_only=True)
class Technology:
    """A named technology variant with its attributes."""

    name: str
    attributes: tuple[Attribute, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Technology:
        name = element.get_string("name")
        attributes = []
        for child in element.children:
            if child.tag_name == "attribute":
                attributes.append(Attribute.from_element(child, errors))
            elif errors is not None:
                errors.append(f"Unknown technology child: {child.tag_name}")
        return cls(name=name, attributes=tuple(attributes))


@dataclass(frozen=True, kw_only=True)
class Device:
    """A package variant of a device set."""

    name: str = ""
    package: str = ""
    connections: tuple[Connection, ...] = ()
    technologies: tuple[Technology, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Device:
        values: dict = {}
        if element.has_attribute("name"):
            values["name"] = element.get_string("name")
        if element.has_attribute("package"):
            values["package"] = element.get_string("package")
        if element.has_child("connects"):
            values["connections"] = tuple(
                Connection.from_element(child)
                for child in element.first_child("connects").children
            )
        if element.has_child("technologies"):
            values["technologies"] = tuple(
                Technology.from_element(child, errors)
                for child in element.first_child("technologies").children
            )
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class Gate:
    """A placement of a symbol within a device set."""

    name: str
    symbol: str
    position: Point = field(default_factory=Point)
    add_level: GateAddLevel = GateAddLevel.NEXT

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> Gate:
        values: dict = {
            "name": element.get_string("name"),
            "symbol": element.get_string("symbol"),
            "position": Point(element.get_float("x"), element.get_float("y")),
        }
        if element.has_attribute("addlevel"):
            values["add_level"] = parse_gate_add_level(
                element.get_string("addlevel"), errors
            )
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class DeviceSet:
    """A component: its gates and the devices that implement it."""

    name: str
    description: str = ""
    prefix: str = ""
    user_value: bool = False
    gates: tuple[Gate, ...] = ()
    devices: tuple[Device, ...] = ()

    @classmethod
    def from_element(cls, element: DomElement, errors: Errors = None) -> DeviceSet:
        values: dict = {"name": element.get_string("name")}
        if element.has_attribute("prefix"):
            values["prefix"] = element.get_string("prefix")
        if element.has_attribute("uservalue"):
            values["user_value"] = element.get_bool("uservalue")
        if element.has_child("description"):
            values["description"] = element.first_child("description").text
        if element.has_child("gates"):
            values["gates"] = tuple(
                Gate.from_element(child, errors)
                for child in element.first_child("gates").children
            )
        if element.has_child("devices"):
            values["devices"] = tuple(
                Device.from_element(child, errors)
                for child in element.first_child("devices").children
            )
        return cls(**values)