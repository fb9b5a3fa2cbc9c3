"""
Visitor Double Dispatch Tests
=============================

Circle formulas are swapped between the two visitors on purpose:
AreaVisitor adds 2*r*pi and PerimeterVisitor adds pi*r*r.

Usage:
    pytest test_visitors.py
"""

import math

import pytest

from shapevisit import (
    AreaVisitor,
    Circle,
    PerimeterVisitor,
    ShapeVisitor,
    Square,
    VisitorStats,
)


def test_fresh_visitors_start_at_zero():
    assert AreaVisitor().result() == 0.0
    assert PerimeterVisitor().result() == 0.0
    assert AreaVisitor().visit_count == 0


def test_unit_circle_area():
    visitor = AreaVisitor()
    Circle(1.0).accept(visitor)
    assert visitor.result() == pytest.approx(2 * math.pi)


def test_unit_square_area():
    visitor = AreaVisitor()
    Square(1.0).accept(visitor)
    assert visitor.result() == 1.0


def test_unit_circle_perimeter():
    visitor = PerimeterVisitor()
    Circle(1.0).accept(visitor)
    assert visitor.result() == pytest.approx(math.pi)


def test_unit_square_perimeter():
    visitor = PerimeterVisitor()
    Square(1.0).accept(visitor)
    assert visitor.result() == 4.0


def test_area_accumulates_circle_then_square():
    visitor = AreaVisitor()
    Circle(1.0).accept(visitor)
    Square(1.0).accept(visitor)
    assert visitor.result() == pytest.approx(2 * math.pi + 1.0)
    assert visitor.visit_count == 2


@pytest.mark.parametrize("radius", [0.5, 2.0, 3.25])
def test_circle_formulas_for_other_radii(radius):
    area = AreaVisitor()
    perimeter = PerimeterVisitor()
    shape = Circle(radius)
    shape.accept(area)
    shape.accept(perimeter)

    assert area.result() == pytest.approx(2 * radius * math.pi)
    assert perimeter.result() == pytest.approx(math.pi * radius * radius)


@pytest.mark.parametrize("side", [0.5, 2.0, 7.0])
def test_square_formulas_for_other_sides(side):
    area = AreaVisitor()
    perimeter = PerimeterVisitor()
    shape = Square(side)
    shape.accept(area)
    shape.accept(perimeter)

    assert area.result() == pytest.approx(side * side)
    assert perimeter.result() == pytest.approx(4 * side)


def test_accumulation_is_order_independent():
    shapes = [Circle(1.5), Square(2.0), Circle(0.25)]

    forward = PerimeterVisitor()
    for shape in shapes:
        shape.accept(forward)

    backward = PerimeterVisitor()
    for shape in reversed(shapes):
        shape.accept(backward)

    assert forward.result() == pytest.approx(backward.result())


def test_visiting_does_not_mutate_shape():
    circle = Circle(2.0)
    square = Square(3.0)
    for visitor in (AreaVisitor(), PerimeterVisitor()):
        circle.accept(visitor)
        square.accept(visitor)

    assert circle == Circle(2.0)
    assert square == Square(3.0)


def test_shape_fields_are_mutable():
    circle = Circle(1.0)
    circle.radius = 2.0

    visitor = AreaVisitor()
    circle.accept(visitor)
    assert visitor.result() == pytest.approx(4 * math.pi)


def test_unvalidated_inputs_propagate():
    negative = AreaVisitor()
    Circle(-1.0).accept(negative)
    assert negative.result() == pytest.approx(-2 * math.pi)

    zero = PerimeterVisitor()
    Square(0.0).accept(zero)
    assert zero.result() == 0.0

    nan = AreaVisitor()
    Square(float("nan")).accept(nan)
    assert math.isnan(nan.result())

    inf = PerimeterVisitor()
    Circle(float("inf")).accept(inf)
    assert inf.result() == math.inf


def test_accept_selects_method_by_shape_variant():
    class RecordingVisitor(ShapeVisitor):
        operation = "recording"

        def __init__(self):
            super().__init__()
            self.calls = []

        def visit_circle(self, circle):
            self.calls.append(("circle", circle))

        def visit_square(self, square):
            self.calls.append(("square", square))

    circle, square = Circle(1.0), Square(1.0)
    visitor = RecordingVisitor()
    circle.accept(visitor)
    square.accept(visitor)

    assert visitor.calls[0][0] == "circle" and visitor.calls[0][1] is circle
    assert visitor.calls[1][0] == "square" and visitor.calls[1][1] is square


def test_get_stats_is_snapshot():
    visitor = AreaVisitor()
    Square(2.0).accept(visitor)
    stats = visitor.get_stats()

    Square(1.0).accept(visitor)

    assert stats == VisitorStats(operation="area", total=4.0, visit_count=1)
    assert visitor.get_stats().total == 5.0
    assert str(stats) == "area: 4.000000 (1 shapes)"


def test_abstract_classes_cannot_be_instantiated():
    from shapevisit import Shape

    with pytest.raises(TypeError):
        Shape()
    with pytest.raises(TypeError):
        ShapeVisitor()
