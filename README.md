# eagleparse

Read EAGLE `.lbr`, `.brd` and `.sch` XML files into plain Python objects.

The package needs nothing beyond the standard library. Every parsed item is
a frozen dataclass; lists of items are tuples.

## Install

```
pip install eagleparse
```

## Libraries

```python
from eagleparse.library import Library

errors: list[str] = []
lib = Library.from_file("resistors.lbr", errors)

for symbol in lib.symbols:
    for pin in symbol.pins:
        print(symbol.name, pin.name, pin.length_in_millimeters())

for package in lib.packages:
    print(package.name, len(package.smt_pads), len(package.tht_pads))

for device_set in lib.device_sets:
    print(device_set.name, device_set.prefix)
```

`Library.from_bytes` takes the XML content directly (bytes or str).
`Library.from_element` takes a `DomElement` for a `library` element, such as
one embedded in a board or a schematic.

## Boards and schematics

```python
from eagleparse.board import Board
from eagleparse.schematic import Schematic

board = Board.from_file("main.brd")
rule = board.design_rules.find_param("mdWireWire")
if rule is not None:
    print(rule.value_with_unit())   # e.g. (10.0, "mil"), or None

for signal in board.signals:
    for via in signal.vias:
        print(signal.name, via.start_layer(), via.end_layer())

schematic = Schematic.from_file("main.sch")
for sheet in schematic.sheets:
    for net in sheet.nets:
        print(net.name, len(net.segments))
```

`Board.from_bytes` and `Schematic.from_bytes` take the file content directly.

`Param` also has `value_as_int()` and `value_as_float()`; like
`value_with_unit()`, `Via.start_layer()` and `Via.end_layer()`, they return
`None` when the text cannot be read as a number.

## Building blocks

- `eagleparse.dom`: `DomElement`, a read-only element tree with typed
  attribute access (`get_string`, `get_int`, `get_float`, `get_bool`,
  `has_child`, `first_child`), plus `parse_document` and `read_document`.
- `eagleparse.enums`: the enumerations for attribute values (`Alignment`,
  `PinDirection`, `WireStyle` and others) and a `parse_*` function for each.
  Each member's value is the token used in the files; `UNKNOWN` marks a
  token that was not recognised.
- `eagleparse.geometry`: `Point`, and `Rotation` with `Rotation.parse("MR90")`.
- `eagleparse.shapes`: `Wire`, `Rectangle`, `Circle`, `Polygon`, `Vertex`,
  `Text`, `Frame`, `Grid`, `Attribute` and `Dimension`.
- `eagleparse.package`, `eagleparse.symbol`, `eagleparse.deviceset`: the
  contents of a library.

## Errors

A file that does not exist, cannot be read or is not well-formed XML raises
`ParseError` (from `eagleparse.dom`), as does a required attribute that is
missing or holds an invalid number or yes/no value.

Problems that do not stop the parse go into the optional `errors` list passed
to each `from_*` function: unknown enum values (which then read as the
enum's `UNKNOWN` member), unknown child elements, and, for libraries,
symbols, packages or device sets that raised `ParseError` and were skipped.
Without a list those problems are ignored silently. A few nested items are
read without the list even when one is given: the drawing grid of boards and
schematics, libraries embedded in a board, vias, and net labels.

## What it does not do

The package only reads. It does not write or modify EAGLE files and has no
command-line tool. Dimension annotations are recognised but their geometry is
not read, and of a schematic module only its name is kept.