"""Equilateral triangle: area = (√3/4)·side², perimeter = 3·side."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

from shapereport.shapes.base import Shape
from shapereport.shapes.registry import ShapeKind, shape_kind
from shapereport.utils.numbers import SQRT3

if TYPE_CHECKING:
    from shapereport.i18n.base import LanguageStrategy


@shape_kind(measurements=["side"], description="Equilateral triangle with the given side length")
class EquilateralTriangle(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.EQUILATERAL_TRIANGLE

    def calculate_area(self) -> Decimal:
        return (SQRT3 / 4) * self.side * self.side

    def calculate_perimeter(self) -> Decimal:
        return self.side * 3

    def get_name(self, language: LanguageStrategy, count: int) -> str:
        return language.triangle_name(count)
