"""
Test Shape Calculators
======================

Summation, capability checking, atomic failure and purity of
AreaCalculator / VolumeCalculator.

Usage:
    pytest test_calculator.py
"""

import itertools
import math
from dataclasses import dataclass

import pytest

from shapekit_geometry import AreaCapable, Circle, Cuboid, Polygon, Sphere, Square
from shapekit_calculator import (
    AreaCalculator,
    InvalidShapeError,
    LogEvent,
    ShapekitError,
    VolumeCalculator,
    create_logger,
)


@dataclass(frozen=True)
class Triangle(AreaCapable):
    """Variant unknown to the calculator module; implements area() only."""

    base: float
    height: float

    def area(self) -> float:
        return self.base * self.height / 2


class DuckSquare:
    """Has area() but never declares AreaCapable."""

    def area(self):
        return 1


def scenario_shapes():
    return [Circle(radius=2), Square(length=5), Square(length=6)]


def test_scenario_sum():
    """Circle(2) + Square(5) + Square(6) = 61 + 4*pi."""
    calculator = AreaCalculator(scenario_shapes())
    assert calculator.sum() == pytest.approx(61 + 4 * math.pi)
    assert calculator.sum() == pytest.approx(73.566, abs=1e-3)


def test_empty_sum_is_zero():
    assert AreaCalculator([]).sum() == 0
    assert AreaCalculator().sum() == 0
    assert VolumeCalculator().sum() == 0


def test_sum_is_idempotent():
    calculator = AreaCalculator(scenario_shapes())
    results = {calculator.sum() for _ in range(5)}
    assert len(results) == 1


def test_sum_is_order_independent():
    shapes = scenario_shapes() + [Polygon.from_points([(0, 0), (4, 0), (4, 3)])]
    expected = 61 + 4 * math.pi + 6
    for ordering in itertools.permutations(shapes):
        assert AreaCalculator(ordering).sum() == pytest.approx(expected)


def test_invalid_element_aborts_calculation():
    calculator = AreaCalculator([Square(length=5), "not-a-shape"])

    with pytest.raises(InvalidShapeError) as exc_info:
        calculator.sum()

    error = exc_info.value
    assert error.index == 1
    assert error.value == "not-a-shape"
    assert error.capability == "AreaCapable"
    assert "index 1" in str(error)
    assert isinstance(error, ShapekitError)


@pytest.mark.parametrize("bad", [None, 42, object(), DuckSquare(), {"kind": "square"}])
def test_non_shapes_rejected(bad):
    """Anything not implementing AreaCapable fails, even with an area() method."""
    with pytest.raises(InvalidShapeError) as exc_info:
        AreaCalculator([Circle(radius=1), Square(length=2), bad]).sum()
    assert exc_info.value.index == 2


def test_first_invalid_position_reported():
    with pytest.raises(InvalidShapeError) as exc_info:
        AreaCalculator(["a", Square(length=1), "b"]).sum()
    assert exc_info.value.index == 0


def test_new_variant_needs_no_calculator_change():
    calculator = AreaCalculator([Triangle(base=4, height=3), Square(length=2)])
    assert calculator.sum() == pytest.approx(10)


def test_collection_is_a_snapshot():
    shapes = [Square(length=2)]
    calculator = AreaCalculator(shapes)

    shapes.append("not-a-shape")

    assert len(calculator) == 1
    assert calculator.sum() == 4
    assert calculator.shapes == (Square(length=2),)


def test_with_shapes_returns_new_calculator():
    calculator = AreaCalculator([Square(length=2)])
    extended = calculator.with_shapes(Square(length=3), Circle(radius=1))

    assert isinstance(extended, AreaCalculator)
    assert len(calculator) == 1
    assert len(extended) == 3
    assert calculator.sum() == 4
    assert extended.sum() == pytest.approx(13 + math.pi)


def test_volume_calculator():
    calculator = VolumeCalculator([Cuboid(length=2, width=3, height=4), Sphere(radius=1)])
    assert calculator.sum() == pytest.approx(24 + 4 / 3 * math.pi)


def test_volume_calculator_rejects_flat_shapes():
    calculator = VolumeCalculator([Cuboid(length=1, width=1, height=1), Square(length=5)])

    with pytest.raises(InvalidShapeError) as exc_info:
        calculator.sum()

    assert exc_info.value.index == 1
    assert exc_info.value.capability == "VolumeCapable"


def test_solids_count_surface_area_in_area_sum():
    calculator = AreaCalculator([Cuboid(length=1, width=1, height=1), Square(length=1)])
    assert calculator.sum() == 7


def test_sum_logs_structured_event(caplog):
    logger = create_logger("test-calculator")
    AreaCalculator([Square(length=5)], logger=logger).sum()

    records = [r for r in caplog.records if r.name == "shapekit.test-calculator"]
    assert records[-1].event == LogEvent.SUM_COMPUTED.value
    assert records[-1].metadata == {'shape_count': 1, 'sum': 25}


def test_rejection_logs_warning(caplog):
    logger = create_logger("test-rejection")
    with pytest.raises(InvalidShapeError):
        AreaCalculator([object()], logger=logger).sum()

    records = [r for r in caplog.records if r.name == "shapekit.test-rejection"]
    assert [r.event for r in records] == [LogEvent.SHAPE_REJECTED.value]
    assert records[0].levelname == "WARNING"
    assert records[0].metadata['index'] == 0
