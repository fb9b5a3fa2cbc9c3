"""Operation registry tests."""

import pytest

from shapevisit import (
    AreaVisitor,
    OperationNotAvailableError,
    OperationRegistry,
    PerimeterVisitor,
    default_registry,
)


def test_default_registry_operations():
    registry = default_registry()

    assert registry.available_operations == {"area", "perimeter"}
    assert registry.count() == 2
    assert isinstance(registry.create("area"), AreaVisitor)
    assert isinstance(registry.create("perimeter"), PerimeterVisitor)


def test_create_returns_fresh_visitors():
    registry = default_registry()
    first = registry.create("area")
    second = registry.create("area")

    assert first is not second
    assert second.result() == 0.0


def test_unknown_operation_lists_available():
    registry = default_registry()

    with pytest.raises(OperationNotAvailableError) as ei:
        registry.create("volume")

    assert "volume" in str(ei.value)
    assert "area, perimeter" in str(ei.value)
    assert not registry.is_available("volume")

    with pytest.raises(OperationNotAvailableError):
        registry.factory("volume")


def test_double_registration_rejected():
    registry = OperationRegistry()
    registry.register("area", AreaVisitor, "Area")

    with pytest.raises(ValueError):
        registry.register("area", PerimeterVisitor, "Again")


def test_help_is_snapshot():
    registry = default_registry()
    help_text = registry.get_help()
    help_text.pop("area")

    assert set(registry.get_help()) == {"area", "perimeter"}
