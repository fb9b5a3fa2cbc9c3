"""
Shape Dispatcher Module
=======================

Stateless batch dispatch - applies visitors to sequences of shapes.

Design:
- All methods are static (no instance state)
- Visitor state is owned by the caller (injected and returned)
- Per-shape contributions as numpy arrays
"""

from typing import Callable, Iterable, TYPE_CHECKING

import numpy as np

from shapevisit.geometry.shapes import Shape

if TYPE_CHECKING:
    from shapevisit.analytics.visitors import ShapeVisitor


class ShapeDispatcher:
    """
    Stateless helper for running visitors over many shapes.

    Usage:
        visitor = ShapeDispatcher.dispatch([Circle(1.0), Square(1.0)], AreaVisitor())
        visitor.result()  # 2*pi + 1.0

        ShapeDispatcher.contributions(shapes, PerimeterVisitor)  # array([pi, 4.0])
    """

    @staticmethod
    def dispatch(
        shapes: Iterable[Shape],
        visitor: "ShapeVisitor",
    ) -> "ShapeVisitor":
        """
        Let every shape accept the same visitor, in order.

        Args:
            shapes: Shapes to visit
            visitor: Accumulating visitor (mutated in place)

        Returns:
            The same visitor, for chaining
        """
        for shape in shapes:
            shape.accept(visitor)
        return visitor

    @staticmethod
    def contributions(
        shapes: Iterable[Shape],
        factory: Callable[[], "ShapeVisitor"],
    ) -> np.ndarray:
        """
        Measure each shape with its own fresh visitor.

        The sum of the returned array equals the result of a single
        visitor dispatched over all shapes (modulo rounding).

        Args:
            shapes: Shapes to measure
            factory: Zero-argument visitor constructor

        Returns:
            float64 array of shape (N,), one contribution per shape
        """
        values = []
        for shape in shapes:
            visitor = factory()
            shape.accept(visitor)
            values.append(visitor.result())

        return np.array(values, dtype=np.float64)
