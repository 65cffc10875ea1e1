"""Shared test fixtures."""

from __future__ import annotations

import pytest

from shapereport.i18n import ENGLISH, SPANISH
from shapereport.report import ShapeReportGenerator
from shapereport.shapes import Circle, EquilateralTriangle, Square, Trapezoid


def mixed_shapes() -> list:
    """Two squares, two circles, three triangles, interleaved."""
    return [
        Square(5),
        Circle(3),
        EquilateralTriangle(4),
        Square(2),
        EquilateralTriangle(9),
        Circle(2.75),
        EquilateralTriangle(4.2),
    ]


def shapes_with_trapezoid() -> list:
    return [
        Square(5),
        Trapezoid(4, 6, 10, 5),
        Circle(3),
    ]


@pytest.fixture
def spanish_generator() -> ShapeReportGenerator:
    return ShapeReportGenerator(SPANISH)


@pytest.fixture
def english_generator() -> ShapeReportGenerator:
    return ShapeReportGenerator(ENGLISH)


@pytest.fixture
def mixed() -> list:
    return mixed_shapes()


@pytest.fixture
def with_trapezoid() -> list:
    return shapes_with_trapezoid()
