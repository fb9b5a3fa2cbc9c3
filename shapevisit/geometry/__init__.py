"""
Geometry Layer
==============

Bounded Context: Shape variants and the first half of double dispatch.

Responsibilities:
- Shape representation (one numeric field per variant)
- accept(visitor) forwarding
- Batch dispatch helpers (ShapeDispatcher)
- NO accumulation, NO logging

Design Philosophy:
- Shapes know nothing about operations
- Visitors know every shape variant
"""

from shapevisit.geometry.shapes import Shape, Circle, Square
from shapevisit.geometry.dispatcher import ShapeDispatcher

__all__ = [
    "Shape",
    "Circle",
    "Square",
    "ShapeDispatcher",
]
