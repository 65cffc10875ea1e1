"""Circle measured by its diameter.

The single ``side`` measurement is the diameter, so the perimeter is the
circumference π·side and the area uses radius side/2.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

from shapereport.shapes.base import Shape
from shapereport.shapes.registry import ShapeKind, shape_kind
from shapereport.utils.numbers import PI

if TYPE_CHECKING:
    from shapereport.i18n.base import LanguageStrategy


@shape_kind(measurements=["side"], description="Circle with the given diameter")
class Circle(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    @property
    def radius(self) -> Decimal:
        return self.side / 2

    def calculate_area(self) -> Decimal:
        return PI * self.radius * self.radius

    def calculate_perimeter(self) -> Decimal:
        return PI * self.side

    def get_name(self, language: LanguageStrategy, count: int) -> str:
        return language.circle_name(count)
