"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: shape, visitor, survey, config, operation, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.* / visitor.*: Dispatch and accumulation
    - survey.*: Batch survey lifecycle
    - config.* / operation.*: Setup
    - error.*: Error conditions
    """

    # ========== Dispatch Events ==========
    SHAPE_VISITED = "shape.visited"
    """A visitor accumulated the contribution of one shape."""

    VISITOR_CREATED = "visitor.created"
    """A visitor was created from the operation registry."""

    # ========== Survey Events ==========
    SURVEY_STARTED = "survey.started"
    """A batch of shapes is about to be surveyed."""

    SURVEY_COMPLETED = "survey.completed"
    """All configured operations finished for a batch."""

    # ========== Setup Events ==========
    CONFIG_LOADED = "config.loaded"
    """Survey configuration loaded from YAML."""

    OPERATION_REGISTERED = "operation.registered"
    """Visitor factory registered under an operation name."""

    # ========== Error Events ==========
    OPERATION_NOT_AVAILABLE = "error.operation_not_available"
    """Requested operation is not registered."""

    CONFIG_INVALID = "error.config_invalid"
    """Configuration failed validation."""


DISPATCH_EVENTS = {
    LogEvent.SHAPE_VISITED,
    LogEvent.VISITOR_CREATED,
}

SURVEY_EVENTS = {
    LogEvent.SURVEY_STARTED,
    LogEvent.SURVEY_COMPLETED,
}

SETUP_EVENTS = {
    LogEvent.CONFIG_LOADED,
    LogEvent.OPERATION_REGISTERED,
}

ERROR_EVENTS = {
    LogEvent.OPERATION_NOT_AVAILABLE,
    LogEvent.CONFIG_INVALID,
}
