"""
Shape Survey Module
===================

Bounded Context: Batch orchestration of operations over shapes.

Design:
- Orchestrator: combines registry, dispatcher and visitors
- Builder pattern: fluent configuration
- Fail Fast: unknown operations rejected at build time
- One fresh visitor per operation per survey (no shared accumulators)
"""

from typing import Dict, List, Optional, Sequence

import numpy as np

from shapevisit.analytics.visitors import VisitorStats
from shapevisit.config import SurveyConfig
from shapevisit.geometry.dispatcher import ShapeDispatcher
from shapevisit.geometry.shapes import Shape
from shapevisit.logging import StructuredLogger, LogEvent, create_logger
from shapevisit.registry import OperationRegistry, OperationNotAvailableError, default_registry


class ShapeSurvey:
    """
    Runs every configured operation over a batch of shapes.

    Usage:
        survey = (
            SurveyBuilder()
            .with_operations(["area"])
            .build()
        )

        stats = survey.run([Circle(1.0), Square(1.0)])
        stats["area"].total  # 2*pi + 1.0
    """

    def __init__(
        self,
        config: SurveyConfig,
        registry: OperationRegistry,
        logger: StructuredLogger,
    ):
        self.config = config
        self.registry = registry
        self.logger = logger
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate operations against the registry (fail fast)."""
        missing = [op for op in self.config.operations if not self.registry.is_available(op)]
        if missing:
            error = OperationNotAvailableError(
                f"Operations not available: {', '.join(missing)}. "
                f"Available operations: {', '.join(sorted(self.registry.available_operations))}"
            )
            self.logger.error(
                event=LogEvent.OPERATION_NOT_AVAILABLE,
                message="Survey configured with unknown operations",
                metadata={'missing': missing},
                exc_info=error,
            )
            raise error

    @property
    def operations(self) -> List[str]:
        return list(self.config.operations)

    def run(self, shapes: Sequence[Shape]) -> Dict[str, VisitorStats]:
        """
        Visit every shape with one fresh visitor per operation.

        Args:
            shapes: Shapes to survey (not mutated)

        Returns:
            {operation: VisitorStats}, in configured order
        """
        self.logger.info(
            event=LogEvent.SURVEY_STARTED,
            message=f"Surveying {len(shapes)} shapes",
            metadata={'shape_count': len(shapes), 'operations': self.operations}
        )

        results: Dict[str, VisitorStats] = {}
        for operation in self.config.operations:
            visitor = self.registry.create(operation)
            ShapeDispatcher.dispatch(shapes, visitor)
            results[operation] = visitor.get_stats()

        self.logger.info(
            event=LogEvent.SURVEY_COMPLETED,
            message=f"Survey completed for {len(shapes)} shapes",
            metadata={op: stats.total for op, stats in results.items()}
        )
        return results

    def contributions(self, shapes: Sequence[Shape]) -> Dict[str, np.ndarray]:
        """
        Per-shape contributions for every configured operation.

        Returns:
            {operation: float64 array of shape (N,)}
        """
        return {
            operation: ShapeDispatcher.contributions(shapes, self.registry.factory(operation))
            for operation in self.config.operations
        }


class SurveyBuilder:
    """
    Fluent builder for ShapeSurvey.

    Defaults: built-in registry, both operations, logger from config.
    """

    def __init__(self):
        self._config: SurveyConfig = SurveyConfig()
        self._operations: Optional[List[str]] = None
        self._registry: Optional[OperationRegistry] = None
        self._logger: Optional[StructuredLogger] = None

    def with_config(self, config: SurveyConfig) -> "SurveyBuilder":
        self._config = config
        return self

    def with_operations(self, operations: Sequence[str]) -> "SurveyBuilder":
        self._operations = list(operations)
        return self

    def with_registry(self, registry: OperationRegistry) -> "SurveyBuilder":
        self._registry = registry
        return self

    def with_logger(self, logger: StructuredLogger) -> "SurveyBuilder":
        self._logger = logger
        return self

    def build(self) -> ShapeSurvey:
        """
        Build survey.

        Raises:
            ValueError: If operations are empty or duplicated
            OperationNotAvailableError: If an operation is not registered
        """
        config = self._config
        if self._operations is not None:
            config = SurveyConfig(operations=self._operations, logging=config.logging)

        logger = self._logger or create_logger(
            config.logging.component,
            level=config.logging.level_number,
        )
        registry = self._registry or default_registry(logger=logger)

        return ShapeSurvey(config=config, registry=registry, logger=logger)
