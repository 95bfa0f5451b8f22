import pytest

from eagleparse.dom import ParseError, parse_document
from eagleparse.enums import Alignment, GridUnit
from eagleparse.geometry import Point
from eagleparse.schematic import (
    Bus,
    Instance,
    Label,
    Module,
    Net,
    Part,
    PinRef,
    Schematic,
    Segment,
    Sheet,
)


def element(xml):
    return parse_document(xml, "test")


SCHEMATIC = b"""<?xml version="1.0" encoding="utf-8"?>
<eagle version="9.0">
<drawing>
<grid distance="0.1" unitdist="inch" unit="inch" style="lines" multiple="1" display="no"/>
<schematic>
<description>Demo board</description>
<libraries>
<library name="lib1">
<packages><package name="P1"/></packages>
</library>
</libraries>
<modules><module name="M1"/></modules>
<parts>
<part name="R1" library="lib1" deviceset="RES" device="" value="10k">
<attribute name="TOL" value="1%"/>
</part>
</parts>
<sheets>
<sheet>
<description>First</description>
<plain>
<wire x1="0" y1="0" x2="10" y2="0" width="0.25" layer="94"/>
<text x="1" y="2" size="1.778" layer="97">Hello</text>
<frame x1="0" y1="0" x2="100" y2="80" columns="4" rows="3" layer="94"/>
</plain>
<instances>
<instance part="R1" gate="G$1" x="5" y="6" rot="R90"/>
</instances>
<busses><bus name="B[0..3]"/></busses>
<nets>
<net name="GND" class="1">
<segment>
<pinref part="R1" gate="G$1" pin="1"/>
<wire x1="5" y1="6" x2="5" y2="10" width="0.1524" layer="91"/>
<junction x="5" y="10"/>
<label x="5" y="10" size="1.778" layer="95"/>
</segment>
</net>
</nets>
</sheet>
</sheets>
</schematic>
</drawing>
</eagle>
"""


def test_schematic_from_bytes_top_level():
    errors = []
    sch = Schematic.from_bytes(SCHEMATIC, errors)
    assert errors == []
    assert sch.description == "Demo board"
    assert sch.grid.unit == GridUnit.INCHES
    assert sch.grid.distance == 0.1
    assert [lib.embedded_name for lib in sch.libraries] == ["lib1"]
    assert [pkg.name for pkg in sch.libraries[0].packages] == ["P1"]
    assert [m.name for m in sch.modules] == ["M1"]


def test_schematic_parts():
    sch = Schematic.from_bytes(SCHEMATIC)
    (part,) = sch.parts
    assert part.name == "R1"
    assert part.library == "lib1"
    assert part.device_set == "RES"
    assert part.device == ""
    assert part.value == "10k"
    assert part.technology == ""
    assert [(a.name, a.value) for a in part.attributes] == [("TOL", "1%")]


def test_schematic_sheet_content():
    sch = Schematic.from_bytes(SCHEMATIC)
    (sheet,) = sch.sheets
    assert sheet.description == "First"
    assert len(sheet.wires) == 1
    assert sheet.texts[0].value == "Hello"
    assert sheet.frames[0].columns == 4
    assert sheet.frames[0].rows == 3
    assert sheet.instances[0].part == "R1"
    assert sheet.instances[0].rotation.angle == 90.0
    assert [b.name for b in sheet.buses] == ["B[0..3]"]
    net = sheet.nets[0]
    assert net.name == "GND"
    assert net.net_class == 1
    segment = net.segments[0]
    assert segment.pin_refs == (PinRef(part="R1", gate="G$1", pin="1"),)
    assert segment.junctions == (Point(5.0, 10.0),)
    assert segment.labels[0].layer == 95


def test_schematic_from_file(tmp_path):
    path = tmp_path / "demo.sch"
    path.write_bytes(SCHEMATIC)
    assert Schematic.from_file(path) == Schematic.from_bytes(SCHEMATIC)


def test_schematic_missing_file(tmp_path):
    with pytest.raises(ParseError, match="File does not exist"):
        Schematic.from_file(tmp_path / "missing.sch")


def test_schematic_invalid_xml():
    with pytest.raises(ParseError, match="Error while parsing EAGLE schematic"):
        Schematic.from_bytes(b"<eagle><drawing>")


def test_schematic_without_drawing():
    with pytest.raises(ParseError, match="Child not found: drawing"):
        Schematic.from_bytes(b"<eagle/>")


def test_schematic_without_schematic_element():
    with pytest.raises(ParseError, match="Child not found: schematic"):
        Schematic.from_bytes(b"<eagle><drawing/></eagle>")


def test_schematic_empty_sections_use_defaults():
    sch = Schematic.from_bytes(b"<eagle><drawing><schematic/></drawing></eagle>")
    assert sch == Schematic()
    assert sch.grid.multiple == 1


def test_grid_errors_are_not_reported():
    errors = []
    sch = Schematic.from_bytes(
        b'<eagle><drawing><grid unit="bogus"/><schematic/></drawing></eagle>', errors
    )
    assert sch.grid.unit == GridUnit.UNKNOWN
    assert errors == []


def test_bus_and_module():
    assert Bus.from_element(element(b'<bus name="D"/>')).name == "D"
    assert Module.from_element(element(b'<module name="sub"/>')).name == "sub"
    with pytest.raises(ParseError):
        Bus.from_element(element(b"<bus/>"))


def test_pinref_requires_pin():
    with pytest.raises(ParseError, match="Attribute 'pin' not found"):
        PinRef.from_element(element(b'<pinref part="U1" gate="A"/>'))


def test_instance_defaults_and_attributes():
    errors = []
    inst = Instance.from_element(
        element(
            b'<instance part="U1" gate="A" x="1" y="2" smashed="yes">'
            b'<attribute name="NAME" x="3" y="4"/><foo/></instance>'
        ),
        errors,
    )
    assert inst.position == Point(1.0, 2.0)
    assert inst.smashed is True
    assert inst.rotation.angle == 0.0
    assert [a.name for a in inst.attributes] == ["NAME"]
    assert errors == ["Unknown instance child: foo"]


def test_instance_invalid_bool():
    with pytest.raises(ParseError, match="Invalid bool"):
        Instance.from_element(
            element(b'<instance part="U1" gate="A" x="1" y="2" smashed="maybe"/>')
        )


def test_label_defaults():
    label = Label.from_element(element(b'<label x="1" y="2" size="1.5" layer="95"/>'))
    assert label.ratio == 8
    assert label.alignment == Alignment.BOTTOM_LEFT
    assert label.xref is False
    assert label.size == 1.5


def test_label_options_and_errors():
    errors = []
    label = Label.from_element(
        element(
            b'<label x="1" y="2" size="1.5" layer="95" ratio="10" '
            b'rot="MR180" align="top-right" xref="yes"/>'
        ),
        errors,
    )
    assert label.ratio == 10
    assert label.rotation.mirror is True
    assert label.alignment == Alignment.TOP_RIGHT
    assert label.xref is True
    assert errors == []
    Label.from_element(
        element(b'<label x="1" y="2" size="1" layer="95" align="nowhere"/>'), errors
    )
    assert errors == ["Unknown alignment: nowhere"]


def test_segment_label_errors_not_reported():
    errors = []
    seg = Segment.from_element(
        element(
            b'<segment><label x="0" y="0" size="1" layer="95" align="nowhere"/>'
            b"<bogus/></segment>"
        ),
        errors,
    )
    assert seg.labels[0].alignment == Alignment.UNKNOWN
    assert errors == ["Unknown net segment child: bogus"]


def test_net_unknown_child_and_default_class():
    errors = []
    net = Net.from_element(element(b'<net name="N1"><segment/><x/></net>'), errors)
    assert net.net_class == 0
    assert net.segments == (Segment(),)
    assert errors == ["Unknown net child: x"]


def test_net_invalid_class():
    with pytest.raises(ParseError, match="Invalid integer in attribute class"):
        Net.from_element(element(b'<net name="N1" class="x"/>'))


def test_part_optional_fields_and_errors():
    errors = []
    part = Part.from_element(
        element(
            b'<part name="U1" library="l" library_urn="urn:x" deviceset="D" '
            b'device="SO8" technology="LS"><other/></part>'
        ),
        errors,
    )
    assert part.library_urn == "urn:x"
    assert part.technology == "LS"
    assert part.value == ""
    assert part.attributes == ()
    assert errors == ["Unknown part child: other"]


def test_part_requires_device():
    with pytest.raises(ParseError, match="Attribute 'device' not found"):
        Part.from_element(element(b'<part name="U1" library="l" deviceset="D"/>'))


def test_sheet_unknown_children():
    errors = []
    sheet = Sheet.from_element(
        element(
            b'<sheet><plain><blob/><circle x="0" y="0" radius="1" width="0" layer="94"/>'
            b"</plain><stuff/></sheet>"
        ),
        errors,
    )
    assert len(sheet.circles) == 1
    assert errors == ["Unknown sheet plain child: blob", "Unknown sheet child: stuff"]


def test_sheet_unknown_children_without_error_list():
    sheet = Sheet.from_element(element(b"<sheet><stuff/><plain><blob/></plain></sheet>"))
    assert sheet == Sheet()