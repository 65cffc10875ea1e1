"""Isosceles trapezoid.

Constructed as ``Trapezoid(height, top_side, bottom_side, side)`` where
``side`` is the length of each of the two equal legs.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar

from shapereport.shapes.base import Shape
from shapereport.shapes.registry import ShapeKind, shape_kind

if TYPE_CHECKING:
    from shapereport.i18n.base import LanguageStrategy


@shape_kind(
    measurements=["height", "top_side", "bottom_side", "side"],
    description="Isosceles trapezoid: height, parallel sides, leg length",
)
class Trapezoid(Shape):
    kind: ClassVar[ShapeKind] = ShapeKind.TRAPEZOID

    height: Decimal
    top_side: Decimal
    bottom_side: Decimal

    def __init__(self, height: Any, top_side: Any, bottom_side: Any, side: Any, **data: Any) -> None:
        super().__init__(
            side,
            height=height,
            top_side=top_side,
            bottom_side=bottom_side,
            **data,
        )

    def calculate_area(self) -> Decimal:
        return self.height * (self.top_side + self.bottom_side) / 2

    def calculate_perimeter(self) -> Decimal:
        return self.top_side + self.bottom_side + 2 * self.side

    def get_name(self, language: LanguageStrategy, count: int) -> str:
        return language.trapezoid_name(count)
