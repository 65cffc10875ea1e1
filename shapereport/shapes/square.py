"""Square: area = side², perimeter = 4·side."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

from shapereport.shapes.base import Shape
from shapereport.shapes.registry import ShapeKind, shape_kind

if TYPE_CHECKING:
    from shapereport.i18n.base import LanguageStrategy


@shape_kind(measurements=["side"], description="Square with the given side length")
class Square(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.SQUARE

    def calculate_area(self) -> Decimal:
        return self.side * self.side

    def calculate_perimeter(self) -> Decimal:
        return self.side * 4

    def get_name(self, language: LanguageStrategy, count: int) -> str:
        return language.square_name(count)
