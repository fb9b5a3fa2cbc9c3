"""
shapevisit
==========

Bounded Context: Operations over shapes via double dispatch.

Design Philosophy:
- Shapes know only themselves; visitors know every shape
- New operations need no change to shapes
- New shapes need a visit_* method on every visitor

Architecture:

    shapevisit/
    ├── geometry/          # Shape variants (first dispatch)
    │   ├── shapes.py      # Shape, Circle, Square
    │   └── dispatcher.py  # ShapeDispatcher (stateless batch dispatch)
    │
    ├── analytics/         # Accumulating operations (second dispatch)
    │   └── visitors.py    # ShapeVisitor, AreaVisitor, PerimeterVisitor, VisitorStats
    │
    ├── logging/           # Structured JSON logging
    ├── registry.py        # OperationRegistry (name -> visitor factory)
    ├── config.py          # SurveyConfig (YAML)
    └── survey.py          # ShapeSurvey, SurveyBuilder (orchestration)

Usage:

    # 1. Double dispatch
    from shapevisit import Circle, Square, AreaVisitor

    visitor = AreaVisitor()
    Circle(1.0).accept(visitor)
    Square(1.0).accept(visitor)
    visitor.result()  # 2*pi + 1.0

    # 2. Or survey a batch by operation name
    from shapevisit import SurveyBuilder

    survey = SurveyBuilder().with_operations(["area", "perimeter"]).build()
    stats = survey.run([Circle(1.0), Square(1.0)])
"""

# Geometry Layer
from shapevisit.geometry.shapes import Shape, Circle, Square
from shapevisit.geometry.dispatcher import ShapeDispatcher

# Analytics Layer
from shapevisit.analytics.visitors import (
    ShapeVisitor,
    AreaVisitor,
    PerimeterVisitor,
    VisitorStats,
)

# Setup
from shapevisit.registry import OperationRegistry, OperationNotAvailableError, default_registry
from shapevisit.config import SurveyConfig, LoggingConfig, load_survey_config

# Orchestration
from shapevisit.survey import ShapeSurvey, SurveyBuilder

__all__ = [
    # Geometry
    "Shape",
    "Circle",
    "Square",
    "ShapeDispatcher",
    # Analytics
    "ShapeVisitor",
    "AreaVisitor",
    "PerimeterVisitor",
    "VisitorStats",
    # Setup
    "OperationRegistry",
    "OperationNotAvailableError",
    "default_registry",
    "SurveyConfig",
    "LoggingConfig",
    "load_survey_config",
    # Orchestration
    "ShapeSurvey",
    "SurveyBuilder",
]

__version__ = "0.1.0"
