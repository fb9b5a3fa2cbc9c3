"""
Geometric Shapes Module
========================

Shape variants that take part in double dispatch.

Design:
- Each shape knows only its own variant
- accept() is the first dispatch, the visitor method the second
- Mutable numeric fields, no validation (values propagate into formulas)
- Visiting never mutates the shape
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapevisit.analytics.visitors import ShapeVisitor


class Shape(ABC):
    """
    Element of the shape hierarchy.

    Subclasses forward accept() to the visitor method matching their
    own variant. Adding a shape variant means adding a visit_* method
    to every visitor.
    """

    @abstractmethod
    def accept(self, visitor: "ShapeVisitor") -> None:
        """
        Dispatch to the visitor method for this shape variant.

        Args:
            visitor: Any ShapeVisitor
        """


@dataclass
class Circle(Shape):
    """
    Circle with a mutable radius.

    Attributes:
        radius: Unit-less radius (expected positive, not validated)
    """

    radius: float

    def accept(self, visitor: "ShapeVisitor") -> None:
        visitor.visit_circle(self)


@dataclass
class Square(Shape):
    """
    Square with a mutable side length.

    Attributes:
        side_length: Unit-less side length (expected positive, not validated)
    """

    side_length: float

    def accept(self, visitor: "ShapeVisitor") -> None:
        visitor.visit_square(self)
