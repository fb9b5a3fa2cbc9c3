"""
Shape Visitors Module
=====================

Stateful accumulators for shape operations.

Design:
- Mutable state (running total, visit count)
- Immutable snapshots (VisitorStats)
- One visit_* method per shape variant
- No reset: totals only change by added contributions

The circle formulas are deliberately swapped between the two visitors:
AreaVisitor adds 2*pi*r and PerimeterVisitor adds pi*r*r, while the square
formulas are geometric. Callers and tests rely on these exact values.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from shapevisit.geometry.shapes import Circle, Square
from shapevisit.logging import StructuredLogger, LogEvent


@dataclass(frozen=True)
class VisitorStats:
    """
    Immutable snapshot of a visitor's accumulator.

    Attributes:
        operation: Operation name ("area", "perimeter")
        total: Accumulated value
        visit_count: Number of visit_* calls so far
    """

    operation: str
    total: float = 0.0
    visit_count: int = 0

    def __str__(self) -> str:
        return f"{self.operation}: {self.total:.6f} ({self.visit_count} shapes)"


class ShapeVisitor(ABC):
    """
    Operation over the shape hierarchy.

    Subclasses implement one visit_* method per shape variant and add
    their contribution through _accumulate().

    Thread Safety:
        None. Callers sharing a visitor across threads must hold a lock
        around each accept() call.
    """

    operation: str = "visitor"

    def __init__(self, logger: Optional[StructuredLogger] = None):
        """
        Initialize visitor with a zero accumulator.

        Args:
            logger: Optional logger; each visit is logged at DEBUG
        """
        self._total = 0.0
        self._visit_count = 0
        self._logger = logger

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None:
        """Add the contribution of a circle."""

    @abstractmethod
    def visit_square(self, square: Square) -> None:
        """Add the contribution of a square."""

    def _accumulate(self, shape_kind: str, contribution: float) -> None:
        self._total += contribution
        self._visit_count += 1

        if self._logger is not None:
            self._logger.debug(
                event=LogEvent.SHAPE_VISITED,
                message=f"{self.operation} visited {shape_kind}",
                metadata={
                    'operation': self.operation,
                    'shape': shape_kind,
                    'contribution': contribution,
                    'total': self._total,
                }
            )

    def result(self) -> float:
        """Current accumulator value."""
        return self._total

    @property
    def visit_count(self) -> int:
        return self._visit_count

    def get_stats(self) -> VisitorStats:
        """
        Get immutable statistics snapshot.

        Returns:
            Frozen VisitorStats with current state
        """
        return VisitorStats(
            operation=self.operation,
            total=self._total,
            visit_count=self._visit_count,
        )


class AreaVisitor(ShapeVisitor):
    """Accumulates the "area" operation (circle: 2*r*pi, square: s*s)."""

    operation = "area"

    def visit_circle(self, circle: Circle) -> None:
        self._accumulate("circle", 2 * circle.radius * math.pi)

    def visit_square(self, square: Square) -> None:
        self._accumulate("square", square.side_length * square.side_length)


class PerimeterVisitor(ShapeVisitor):
    """Accumulates the "perimeter" operation (circle: pi*r*r, square: 4*s)."""

    operation = "perimeter"

    def visit_circle(self, circle: Circle) -> None:
        self._accumulate("circle", math.pi * circle.radius * circle.radius)

    def visit_square(self, square: Square) -> None:
        self._accumulate("square", 4 * square.side_length)
