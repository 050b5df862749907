"""
Test Hole Geometry
==================

Length parsing, size normalization, anchor resolution and boundary
computation, without any container until pixel resolution.

Usage:
    pytest test_geometry.py
"""

import sys

import pytest

from holemask import (
    AnchorKind,
    CircleBoundary,
    Difference,
    ExtentSize,
    HoleDescriptor,
    InvalidSizeArity,
    Length,
    Literal,
    MalformedLength,
    RectangleSize,
    RectBoundary,
    ShapeKind,
    Sum,
    Unit,
    UnsupportedShape,
    compute_boundary,
    normalize_size,
    parse_length,
    to_pixels,
)
from holemask.geometry import expression_from_dict

CORNER_ANCHORS = [
    AnchorKind.TOP_LEFT,
    AnchorKind.TOP_RIGHT,
    AnchorKind.BOTTOM_LEFT,
    AnchorKind.BOTTOM_RIGHT,
]
CONTAINERS = [(1000, 800), (320, 240), (1920, 1080)]


# ========== Length Parser ==========

@pytest.mark.parametrize("text, magnitude, unit", [
    ("200px", 200, Unit.PX),
    ("0px", 0, Unit.PX),
    ("50%", 50, Unit.PERCENT),
    ("12.5%", 12.5, Unit.PERCENT),
    ("0.25px", 0.25, Unit.PX),
])
def test_parse_length_valid(text, magnitude, unit):
    """Valid lengths recover their exact magnitude and unit."""
    length = parse_length(text)
    assert length.magnitude == magnitude
    assert length.unit is unit


@pytest.mark.parametrize("text", [
    "200", "px", "-5px", "5PX", "5 px", " 5px", "5px ", "5px\n",
    "5.px", ".5px", "5em", "", "5px 10px",
])
def test_parse_length_malformed(text):
    """Anything outside '<digits>[.<digits>](px|%)' is rejected."""
    with pytest.raises(MalformedLength) as excinfo:
        parse_length(text)
    assert excinfo.value.text == text
    assert "px|%" in excinfo.value.expected


@pytest.mark.parametrize("text", ["\uff12\uff10\uff10px", "\u0663px", "1\u0665%"])
def test_parse_length_rejects_non_ascii_digits(text):
    """Full-width and Arabic-Indic digits are not part of the grammar."""
    with pytest.raises(MalformedLength):
        parse_length(text)


def test_parse_length_rejects_non_strings():
    with pytest.raises(MalformedLength):
        parse_length(200)
    with pytest.raises(MalformedLength):
        parse_length(None)


def test_malformed_length_is_value_error():
    with pytest.raises(ValueError):
        parse_length("abc")


def test_length_invariants():
    """Magnitude must be finite and non-negative."""
    with pytest.raises(MalformedLength):
        Length(-1, Unit.PX)
    with pytest.raises(MalformedLength):
        Length(float("inf"), Unit.PX)
    with pytest.raises(MalformedLength):
        Length(float("nan"), Unit.PERCENT)


def test_length_textual_form():
    assert str(Length(200, Unit.PX)) == "200px"
    assert str(Length(100.0, Unit.PX)) == "100px"
    assert str(Length(12.5, Unit.PERCENT)) == "12.5%"
    assert str(parse_length("7.5%")) == "7.5%"
    assert parse_length("25px").half() == Length(12.5, Unit.PX)


def test_length_dict_round_trip():
    length = parse_length("33.5%")
    assert Length.from_dict(length.to_dict()) == length
    with pytest.raises(ValueError):
        Length.from_dict({'magnitude': 3})


# ========== Pixel Resolver ==========

def test_to_pixels():
    """Absolute passes through; percentage scales the container extent."""
    assert to_pixels(parse_length("120px"), 1000) == 120
    assert to_pixels(parse_length("50%"), 1000) == 500
    assert to_pixels(parse_length("12.5%"), 800) == 100
    assert to_pixels(parse_length("50%"), 0) == 0


def test_to_pixels_rejects_bad_extent():
    with pytest.raises(ValueError):
        to_pixels(parse_length("50%"), -1)
    with pytest.raises(ValueError):
        to_pixels(parse_length("50%"), float("nan"))


def test_expressions_resolve_operands_independently():
    """A percentage reference and a pixel delta combine only in pixels."""
    reference, delta = parse_length("50%"), parse_length("100px")

    assert Literal(reference).resolve(1000) == 500
    assert Sum(reference, delta).resolve(1000) == 600
    assert Difference(reference, delta).resolve(1000) == 400
    assert Difference(reference, delta).resolve(100) == -50

    assert Sum(reference, delta).to_css() == "calc(50% + 100px)"
    assert Difference(reference, delta).to_css() == "calc(50% - 100px)"
    assert Literal(reference).to_css() == "50%"


def test_expression_from_dict():
    expression = Difference(parse_length("50%"), parse_length("12.5px"))
    assert expression_from_dict(expression.to_dict()) == expression
    with pytest.raises(ValueError):
        expression_from_dict({'op': 'product'})


# ========== Size Normalizer ==========

def test_rectangle_single_value_duplicates():
    assert normalize_size(ShapeKind.RECTANGLE, "200px") == RectangleSize(
        width=Length(200, Unit.PX), height=Length(200, Unit.PX)
    )


def test_rectangle_two_values():
    size = normalize_size(ShapeKind.RECTANGLE, "200px 100px")
    assert size == RectangleSize(width=Length(200, Unit.PX), height=Length(100, Unit.PX))


def test_rectangle_mixed_units():
    size = normalize_size(ShapeKind.RECTANGLE, "10% 100px")
    assert size.width == Length(10, Unit.PERCENT)
    assert size.height == Length(100, Unit.PX)


@pytest.mark.parametrize("size_text, count", [
    ("", 0),
    ("   ", 0),
    ("1px 2px 3px", 3),
])
def test_rectangle_invalid_arity(size_text, count):
    with pytest.raises(InvalidSizeArity) as excinfo:
        normalize_size(ShapeKind.RECTANGLE, size_text)
    assert excinfo.value.token_count == count


@pytest.mark.parametrize("shape", [ShapeKind.SQUARE, ShapeKind.CIRCLE])
def test_square_and_circle_keep_first_value(shape):
    """Extra values are dropped silently, even ones that would not parse."""
    assert normalize_size(shape, "200px 400px") == ExtentSize(extent=Length(200, Unit.PX))
    assert normalize_size(shape, "200px") == ExtentSize(extent=Length(200, Unit.PX))
    assert normalize_size(shape, "200px nonsense") == ExtentSize(extent=Length(200, Unit.PX))


@pytest.mark.parametrize("shape", [ShapeKind.SQUARE, ShapeKind.CIRCLE])
def test_square_and_circle_require_a_value(shape):
    with pytest.raises(InvalidSizeArity):
        normalize_size(shape, "")


def test_normalize_size_propagates_parse_errors():
    with pytest.raises(MalformedLength):
        normalize_size(ShapeKind.RECTANGLE, "200px abc")
    with pytest.raises(MalformedLength):
        normalize_size(ShapeKind.SQUARE, "abc 200px")


def test_normalize_size_unknown_shape():
    with pytest.raises(UnsupportedShape):
        normalize_size("SHAPE_TRIANGLE", "10px")


def test_extent_size_exposes_width_and_height():
    size = ExtentSize(extent=Length(80, Unit.PX))
    assert size.width == size.height == Length(80, Unit.PX)


# ========== Enumerations & Descriptor ==========

def test_shape_parse_spellings():
    assert ShapeKind.parse("SHAPE_CIRCLE") is ShapeKind.CIRCLE
    assert ShapeKind.parse("circle") is ShapeKind.CIRCLE
    assert ShapeKind.parse(ShapeKind.SQUARE) is ShapeKind.SQUARE
    with pytest.raises(UnsupportedShape):
        ShapeKind.parse("SHAPE_TRIANGLE")
    with pytest.raises(UnsupportedShape):
        ShapeKind.parse(None)


def test_anchor_parse_spellings_and_fallback():
    assert AnchorKind.parse("ANCHOR_TOP_LEFT") is AnchorKind.TOP_LEFT
    assert AnchorKind.parse("bottom-right") is AnchorKind.BOTTOM_RIGHT
    assert AnchorKind.parse(None) is AnchorKind.MIDDLE
    assert AnchorKind.parse("ANCHOR_CENTER") is AnchorKind.MIDDLE


def test_descriptor_parses_text_fields():
    hole = HoleDescriptor(x="50%", y="10px", size="200px", anchor="ANCHOR_TOP_LEFT", shape="SHAPE_SQUARE")
    assert hole.position == (Length(50, Unit.PERCENT), Length(10, Unit.PX))
    assert hole.anchor is AnchorKind.TOP_LEFT
    assert hole.shape is ShapeKind.SQUARE
    assert hole.normalized_size() == ExtentSize(extent=Length(200, Unit.PX))


def test_descriptor_defaults():
    hole = HoleDescriptor(x="0px", y="0px", size="10px")
    assert hole.anchor is AnchorKind.MIDDLE
    assert hole.shape is ShapeKind.RECTANGLE


def test_descriptor_fails_fast():
    with pytest.raises(MalformedLength):
        HoleDescriptor(x="50", y="50%", size="200px")
    with pytest.raises(InvalidSizeArity):
        HoleDescriptor(x="50%", y="50%", size="1px 2px 3px")
    with pytest.raises(UnsupportedShape):
        HoleDescriptor(x="50%", y="50%", size="200px", shape="SHAPE_STAR")


def test_descriptor_dict_round_trip():
    data = {'x': '50%', 'y': '25%', 'size': '200px 100px',
            'anchor': 'ANCHOR_BOTTOM_LEFT', 'shape': 'SHAPE_RECTANGLE'}
    hole = HoleDescriptor.from_dict(data)
    assert hole.to_dict() == data
    with pytest.raises(ValueError):
        HoleDescriptor.from_dict({'x': '50%', 'y': '50%'})


# ========== Boundary Engine: boxes ==========

def test_middle_rectangle_symbolic_edges():
    boundary = compute_boundary(HoleDescriptor(x="50%", y="50%", size="200px 100px"))
    assert isinstance(boundary, RectBoundary)
    assert boundary.to_css() == {
        'left': 'calc(50% - 100px)',
        'top': 'calc(50% - 50px)',
        'right': 'calc(50% + 100px)',
        'bottom': 'calc(50% + 50px)',
    }


@pytest.mark.parametrize("anchor, expected", [
    (AnchorKind.TOP_LEFT, {
        'left': '10%', 'top': '20px',
        'right': 'calc(10% + 200px)', 'bottom': 'calc(20px + 100px)'}),
    (AnchorKind.TOP_RIGHT, {
        'left': 'calc(10% - 200px)', 'top': '20px',
        'right': '10%', 'bottom': 'calc(20px + 100px)'}),
    (AnchorKind.BOTTOM_LEFT, {
        'left': '10%', 'top': 'calc(20px - 100px)',
        'right': 'calc(10% + 200px)', 'bottom': '20px'}),
    (AnchorKind.BOTTOM_RIGHT, {
        'left': 'calc(10% - 200px)', 'top': 'calc(20px - 100px)',
        'right': '10%', 'bottom': '20px'}),
])
def test_corner_anchor_edges(anchor, expected):
    hole = HoleDescriptor(x="10%", y="20px", size="200px 100px", anchor=anchor)
    assert compute_boundary(hole).to_css() == expected


def test_unknown_anchor_falls_back_to_middle():
    fallback = compute_boundary(HoleDescriptor(x="50%", y="50%", size="200px", anchor="ANCHOR_CENTER"))
    middle = compute_boundary(HoleDescriptor(x="50%", y="50%", size="200px"))
    assert fallback == middle


@pytest.mark.parametrize("anchor", [AnchorKind.MIDDLE] + CORNER_ANCHORS)
@pytest.mark.parametrize("container_wh", CONTAINERS)
def test_box_extent_matches_size_for_every_anchor(anchor, container_wh):
    """right - left == w and bottom - top == h after pixel resolution."""
    hole = HoleDescriptor(x="30%", y="120px", size="15% 90px", anchor=anchor)
    box = compute_boundary(hole).resolve(container_wh)
    width, height = container_wh
    assert box.width == pytest.approx(width * 0.15)
    assert box.height == pytest.approx(90)


@pytest.mark.parametrize("container_wh", CONTAINERS)
def test_middle_anchor_centers_box(container_wh):
    hole = HoleDescriptor(x="40%", y="25%", size="120px 10%")
    box = compute_boundary(hole).resolve(container_wh)
    width, height = container_wh
    assert (box.left + box.right) / 2 == pytest.approx(width * 0.40)
    assert (box.top + box.bottom) / 2 == pytest.approx(height * 0.25)


def test_scenario_rectangle_centered():
    """50%/50% 200x100 rectangle in a 1000x800 container."""
    hole = HoleDescriptor(x="50%", y="50%", size="200px 100px",
                          anchor="ANCHOR_MIDDLE", shape="SHAPE_RECTANGLE")
    box = compute_boundary(hole).resolve((1000, 800))
    assert (box.left, box.top, box.right, box.bottom) == (400, 350, 600, 450)


def test_scenario_square_ignores_second_value():
    """'200px 400px' square -> 200x200 box centered in the container."""
    hole = HoleDescriptor(x="50%", y="50%", size="200px 400px",
                          anchor="ANCHOR_MIDDLE", shape="SHAPE_SQUARE")
    assert hole.normalized_size().extent == Length(200, Unit.PX)

    box = compute_boundary(hole).resolve((1000, 800))
    assert (box.left, box.top, box.right, box.bottom) == (400, 300, 600, 500)
    assert box.center.x == 500 and box.center.y == 400


# ========== Boundary Engine: circles ==========

def test_scenario_circle_top_left():
    """100px circle anchored top-left at the origin: center (50, 50), radius 50."""
    hole = HoleDescriptor(x="0px", y="0px", size="100px",
                          anchor="ANCHOR_TOP_LEFT", shape="SHAPE_CIRCLE")
    boundary = compute_boundary(hole)
    assert isinstance(boundary, CircleBoundary)
    assert boundary.radius == Length(50, Unit.PX)

    circle = boundary.resolve((1000, 800))
    assert (circle.center.x, circle.center.y) == (50, 50)
    assert circle.radius == 50


def test_circle_middle_center_is_reference():
    boundary = compute_boundary(HoleDescriptor(x="50%", y="30%", size="200px 50px", shape="SHAPE_CIRCLE"))
    assert boundary.center_x == Literal(Length(50, Unit.PERCENT))
    assert boundary.center_y == Literal(Length(30, Unit.PERCENT))
    assert boundary.radius == Length(100, Unit.PX)


@pytest.mark.parametrize("anchor, center", [
    (AnchorKind.TOP_LEFT, (550, 450)),
    (AnchorKind.TOP_RIGHT, (450, 450)),
    (AnchorKind.BOTTOM_LEFT, (550, 350)),
    (AnchorKind.BOTTOM_RIGHT, (450, 350)),
    (AnchorKind.MIDDLE, (500, 400)),
])
def test_circle_center_shifts_inward_by_radius(anchor, center):
    hole = HoleDescriptor(x="50%", y="50%", size="100px", anchor=anchor, shape=ShapeKind.CIRCLE)
    circle = compute_boundary(hole).resolve((1000, 800))
    assert (circle.center.x, circle.center.y) == center


def test_circle_corner_center_is_symbolic():
    hole = HoleDescriptor(x="100%", y="0px", size="10%", anchor="ANCHOR_TOP_RIGHT", shape="SHAPE_CIRCLE")
    assert compute_boundary(hole).to_css() == {
        'center_x': 'calc(100% - 5%)',
        'center_y': 'calc(0px + 5%)',
        'radius': '5%',
    }


def test_circle_percentage_radius_uses_smaller_side():
    hole = HoleDescriptor(x="50%", y="50%", size="20%", shape="SHAPE_CIRCLE")
    circle = compute_boundary(hole).resolve((1000, 800))
    assert circle.radius == pytest.approx(80)


@pytest.mark.parametrize("anchor, x, y, corner", [
    ("ANCHOR_TOP_LEFT", "0px", "0px", (0, 0)),
    ("ANCHOR_TOP_RIGHT", "100%", "0px", (1000, 0)),
    ("ANCHOR_BOTTOM_LEFT", "0px", "100%", (0, 800)),
    ("ANCHOR_BOTTOM_RIGHT", "100%", "100%", (1000, 800)),
])
def test_percentage_circle_touches_its_corner_anchor(anchor, x, y, corner):
    """The inward shift uses the same pixel radius as the circle itself."""
    hole = HoleDescriptor(x=x, y=y, size="20%", anchor=anchor, shape="SHAPE_CIRCLE")
    circle = compute_boundary(hole).resolve((1000, 800))

    assert circle.radius == pytest.approx(80)
    assert abs(circle.center.x - corner[0]) == pytest.approx(80)
    assert abs(circle.center.y - corner[1]) == pytest.approx(80)


def test_percentage_circle_top_left_center():
    hole = HoleDescriptor(x="0px", y="0px", size="20%", anchor="ANCHOR_TOP_LEFT", shape="SHAPE_CIRCLE")
    circle = compute_boundary(hole).resolve((1000, 800))
    assert (circle.center.x, circle.center.y) == (80, 80)


def test_resolve_rejects_bad_container():
    boundary = compute_boundary(HoleDescriptor(x="50%", y="50%", size="200px"))
    with pytest.raises(ValueError):
        boundary.resolve((1000, -1))
    with pytest.raises(ValueError):
        boundary.resolve((1000,))


def test_boundary_to_dict():
    data = compute_boundary(HoleDescriptor(x="0px", y="0px", size="10px", shape="SHAPE_CIRCLE")).to_dict()
    assert data['kind'] == 'circle'
    assert data['radius'] == {'magnitude': 5.0, 'unit': 'px'}
    assert data['center_x']['op'] == 'literal'


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
