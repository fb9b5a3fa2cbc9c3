"""
Analytics Layer
===============

Bounded Context: Stateful operations over shapes.

Responsibilities:
- Accumulate per-operation totals (mutable state)
- Second half of double dispatch (visit_circle, visit_square)
- Generate immutable statistics snapshots
"""

from shapevisit.analytics.visitors import (
    ShapeVisitor,
    AreaVisitor,
    PerimeterVisitor,
    VisitorStats,
)

__all__ = [
    "ShapeVisitor",
    "AreaVisitor",
    "PerimeterVisitor",
    "VisitorStats",
]
