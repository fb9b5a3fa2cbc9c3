"""
OperationRegistry - Explicit operation registration pattern

Bounded Context: Operation lookup by name
Responsibilities:
  - Register visitor factories under operation names
  - Validate operation existence before creating visitors
  - Provide introspection (available_operations, get_help)

Threading: Thread-safe for registration (uses lock for write operations).
Visitors created by the registry are not thread-safe.
"""

from typing import Callable, Dict, Optional, Set
import threading

from shapevisit.analytics.visitors import ShapeVisitor, AreaVisitor, PerimeterVisitor
from shapevisit.logging import StructuredLogger, LogEvent


class OperationNotAvailableError(Exception):
    """Raised when requesting an operation that is not registered"""
    pass


VisitorFactory = Callable[[], ShapeVisitor]


class OperationRegistry:
    """
    Registry of shape operations with explicit registration.

    Example:
        registry = OperationRegistry()
        registry.register('area', AreaVisitor, "Area of each shape")

        visitor = registry.create('area')
        Circle(1.0).accept(visitor)
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._factories: Dict[str, VisitorFactory] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._logger = logger

    def register(self, operation: str, factory: VisitorFactory, description: str) -> None:
        """
        Register a visitor factory under an operation name.

        Args:
            operation: Operation name (lowercase, no spaces)
            factory: Zero-argument callable returning a fresh visitor
            description: Human-readable description for help text

        Raises:
            ValueError: If operation already registered
        """
        with self._lock:
            if operation in self._factories:
                raise ValueError(f"Operation '{operation}' already registered")

            self._factories[operation] = factory
            self._descriptions[operation] = description

        if self._logger is not None:
            self._logger.debug(
                event=LogEvent.OPERATION_REGISTERED,
                message=f"Registered operation '{operation}'",
                metadata={'operation': operation}
            )

    def create(self, operation: str) -> ShapeVisitor:
        """
        Create a fresh visitor for an operation.

        Raises:
            OperationNotAvailableError: If operation not registered
        """
        if operation not in self._factories:
            raise OperationNotAvailableError(
                f"Operation '{operation}' not available. "
                f"Available operations: {', '.join(sorted(self.available_operations))}"
            )

        visitor = self._factories[operation]()

        if self._logger is not None:
            self._logger.debug(
                event=LogEvent.VISITOR_CREATED,
                message=f"Created {type(visitor).__name__}",
                metadata={'operation': operation}
            )

        return visitor

    def factory(self, operation: str) -> VisitorFactory:
        """Return the registered factory (fails like create())."""
        if operation not in self._factories:
            raise OperationNotAvailableError(
                f"Operation '{operation}' not available. "
                f"Available operations: {', '.join(sorted(self.available_operations))}"
            )
        return self._factories[operation]

    def is_available(self, operation: str) -> bool:
        return operation in self._factories

    @property
    def available_operations(self) -> Set[str]:
        """Snapshot of registered operation names."""
        return set(self._factories.keys())

    def get_help(self) -> Dict[str, str]:
        """Snapshot of operation descriptions."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._factories)


def default_registry(logger: Optional[StructuredLogger] = None) -> OperationRegistry:
    """
    Registry with the built-in operations.

    Returns:
        OperationRegistry with "area" and "perimeter"
    """
    registry = OperationRegistry(logger=logger)
    registry.register('area', AreaVisitor, "Area visitor (circle: 2*r*pi, square: s*s)")
    registry.register('perimeter', PerimeterVisitor, "Perimeter visitor (circle: pi*r*r, square: 4*s)")
    return registry
