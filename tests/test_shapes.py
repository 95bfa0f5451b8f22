import pytest

from eagleparse.dom import ParseError, parse_document
from eagleparse.enums import (
    Alignment,
    AttributeDisplay,
    Font,
    GridStyle,
    GridUnit,
    PolygonPour,
    WireCap,
    WireStyle,
)
from eagleparse.geometry import Point, Rotation
from eagleparse.shapes import (
    Attribute,
    Circle,
    Dimension,
    Frame,
    Grid,
    Polygon,
    Rectangle,
    Text,
    Vertex,
    Wire,
)


def el(xml):
    return parse_document(xml, "test")


def test_attribute_minimal_defaults():
    attr = Attribute.from_element(el('<attribute name="VALUE"/>'))
    assert attr.name == "VALUE"
    assert attr.value == ""
    assert attr.position == Point(0.0, 0.0)
    assert attr.font is Font.UNKNOWN
    assert attr.display is AttributeDisplay.VALUE
    assert attr.alignment is Alignment.BOTTOM_LEFT
    assert attr.constant is False
    assert attr.rotation == Rotation()


def test_attribute_full():
    errors = []
    attr = Attribute.from_element(
        el(
            '<attribute name="PART" value="R1" x="1.5" y="-2" size="1.27" '
            'layer="95" font="vector" ratio="10" rot="R90" display="both" '
            'constant="yes" align="top-right"/>'
        ),
        errors,
    )
    assert attr.value == "R1"
    assert attr.position == Point(1.5, -2.0)
    assert attr.size == 1.27
    assert attr.layer == 95
    assert attr.font is Font.VECTOR
    assert attr.ratio == 10
    assert attr.rotation.angle == 90.0
    assert attr.display is AttributeDisplay.BOTH
    assert attr.constant is True
    assert attr.alignment is Alignment.TOP_RIGHT
    assert errors == []


def test_attribute_unknown_enum_values_reported():
    errors = []
    attr = Attribute.from_element(
        el('<attribute name="A" font="comic" display="maybe"/>'), errors
    )
    assert attr.font is Font.UNKNOWN
    assert attr.display is AttributeDisplay.UNKNOWN
    assert errors == ["Unknown font: comic", "Unknown attribute display: maybe"]


def test_attribute_missing_name_raises():
    with pytest.raises(ParseError):
        Attribute.from_element(el('<attribute value="x"/>'))


def test_attribute_bad_bool_raises():
    with pytest.raises(ParseError):
        Attribute.from_element(el('<attribute name="A" constant="true"/>'))


def test_circle():
    circle = Circle.from_element(
        el('<circle x="1" y="2" radius="3.5" width="0.254" layer="21"/>')
    )
    assert circle.layer == 21
    assert circle.width == 0.254
    assert circle.radius == 3.5
    assert circle.position == Point(1.0, 2.0)


def test_circle_missing_radius_raises():
    with pytest.raises(ParseError):
        Circle.from_element(el('<circle x="1" y="2" width="0" layer="21"/>'))


def test_dimension_ignores_content():
    assert Dimension.from_element(el('<dimension x1="0"/>')) == Dimension()


def test_frame():
    frame = Frame.from_element(
        el('<frame x1="0" y1="0" x2="100" y2="50" columns="6" rows="4" layer="94"/>')
    )
    assert frame.layer == 94
    assert frame.p1 == Point(0.0, 0.0)
    assert frame.p2 == Point(100.0, 50.0)
    assert frame.columns == 6
    assert frame.rows == 4


def test_frame_bad_int_raises():
    with pytest.raises(ParseError):
        Frame.from_element(
            el('<frame x1="0" y1="0" x2="1" y2="1" columns="a" rows="4" layer="94"/>')
        )


def test_grid_defaults():
    grid = Grid.from_element(el("<grid/>"))
    assert grid == Grid()
    assert grid.style is GridStyle.LINES
    assert grid.multiple == 1
    assert grid.unit is GridUnit.UNKNOWN


def test_grid_full():
    errors = []
    grid = Grid.from_element(
        el(
            '<grid distance="0.1" unitdist="inch" unit="mm" style="dots" '
            'multiple="2" display="yes" altdistance="0.01" altunitdist="mil" '
            'altunit="mic"/>'
        ),
        errors,
    )
    assert grid.distance == 0.1
    assert grid.unit_distance is GridUnit.INCHES
    assert grid.unit is GridUnit.MILLIMETERS
    assert grid.style is GridStyle.DOTS
    assert grid.multiple == 2
    assert grid.display is True
    assert grid.alt_distance == 0.01
    assert grid.alt_unit_distance is GridUnit.MILS
    assert grid.alt_unit is GridUnit.MICROMETERS
    assert errors == []


def test_grid_unknown_unit_reported():
    errors = []
    grid = Grid.from_element(el('<grid unit="furlong"/>'), errors)
    assert grid.unit is GridUnit.UNKNOWN
    assert errors == ["Unknown grid unit: furlong"]


def test_vertex():
    vertex = Vertex.from_element(el('<vertex x="1" y="2" curve="-90"/>'))
    assert vertex.position == Point(1.0, 2.0)
    assert vertex.curve == -90.0
    assert Vertex.from_element(el('<vertex x="0" y="0"/>')).curve == 0.0


def test_polygon_with_vertices():
    polygon = Polygon.from_element(
        el(
            '<polygon width="0.2" layer="1" pour="hatch" spacing="0.5" '
            'isolate="0.3" orphans="yes" thermals="no" rank="2">'
            '<vertex x="0" y="0"/><vertex x="1" y="0"/><vertex x="1" y="1"/>'
            "</polygon>"
        )
    )
    assert polygon.layer == 1
    assert polygon.width == 0.2
    assert polygon.pour is PolygonPour.HATCH
    assert polygon.spacing == 0.5
    assert polygon.isolate == 0.3
    assert polygon.orphans is True
    assert polygon.thermals is False
    assert polygon.rank == 2
    assert [v.position for v in polygon.vertices] == [
        Point(0.0, 0.0),
        Point(1.0, 0.0),
        Point(1.0, 1.0),
    ]


def test_polygon_defaults():
    polygon = Polygon.from_element(el('<polygon width="0" layer="1"/>'))
    assert polygon.pour is PolygonPour.SOLID
    assert polygon.thermals is True
    assert polygon.orphans is False
    assert polygon.vertices == ()


def test_polygon_bad_vertex_raises():
    with pytest.raises(ParseError):
        Polygon.from_element(el('<polygon width="0" layer="1"><vertex x="0"/></polygon>'))


def test_rectangle():
    rect = Rectangle.from_element(
        el('<rectangle x1="-1" y1="-2" x2="3" y2="4" layer="51" rot="MR180"/>')
    )
    assert rect.layer == 51
    assert rect.p1 == Point(-1.0, -2.0)
    assert rect.p2 == Point(3.0, 4.0)
    assert rect.rotation == Rotation(spin=False, mirror=True, angle=180.0)


def test_rectangle_without_rotation():
    rect = Rectangle.from_element(el('<rectangle x1="0" y1="0" x2="1" y2="1" layer="1"/>'))
    assert rect.rotation == Rotation()


def test_text_defaults_and_value():
    text = Text.from_element(el('<text x="1" y="2" size="1.778" layer="25">&gt;NAME</text>'))
    assert text.value == ">NAME"
    assert text.layer == 25
    assert text.size == 1.778
    assert text.position == Point(1.0, 2.0)
    assert text.font is Font.PROPORTIONAL
    assert text.ratio == 8
    assert text.alignment is Alignment.BOTTOM_LEFT


def test_text_full():
    errors = []
    text = Text.from_element(
        el(
            '<text x="0" y="0" size="2" layer="27" font="fixed" ratio="12" '
            'rot="SR270" align="center">v</text>'
        ),
        errors,
    )
    assert text.font is Font.FIXED
    assert text.ratio == 12
    assert text.rotation == Rotation(spin=True, mirror=False, angle=270.0)
    assert text.alignment is Alignment.CENTER
    assert errors == []


def test_text_unknown_alignment_reported():
    errors = []
    text = Text.from_element(
        el('<text x="0" y="0" size="2" layer="27" align="middle"/>'), errors
    )
    assert text.alignment is Alignment.UNKNOWN
    assert errors == ["Unknown alignment: middle"]


def test_text_missing_size_raises():
    with pytest.raises(ParseError):
        Text.from_element(el('<text x="0" y="0" layer="27">x</text>'))


def test_wire_defaults():
    wire = Wire.from_element(
        el('<wire x1="0" y1="0" x2="5" y2="5" width="0.254" layer="94"/>')
    )
    assert wire.layer == 94
    assert wire.width == 0.254
    assert wire.p1 == Point(0.0, 0.0)
    assert wire.p2 == Point(5.0, 5.0)
    assert wire.style is WireStyle.CONTINUOUS
    assert wire.curve == 0.0
    assert wire.cap is WireCap.ROUND


def test_wire_full():
    errors = []
    wire = Wire.from_element(
        el(
            '<wire x1="0" y1="0" x2="1" y2="0" width="0.1" layer="21" '
            'style="dashdot" curve="90" cap="flat"/>'
        ),
        errors,
    )
    assert wire.style is WireStyle.DASH_DOT
    assert wire.curve == 90.0
    assert wire.cap is WireCap.FLAT
    assert errors == []


def test_wire_unknown_style_and_cap_reported():
    errors = []
    wire = Wire.from_element(
        el(
            '<wire x1="0" y1="0" x2="1" y2="0" width="0.1" layer="21" '
            'style="dotted" cap="square"/>'
        ),
        errors,
    )
    assert wire.style is WireStyle.UNKNOWN
    assert wire.cap is WireCap.UNKNOWN
    assert errors == ["Unknown wire style: dotted", "Unknown wire cap: square"]


def test_wire_bad_layer_raises():
    with pytest.raises(ParseError):
        Wire.from_element(el('<wire x1="0" y1="0" x2="1" y2="0" width="0.1" layer="x"/>'))