"""LanguageStrategy — vocabulary, pluralization and number format for one language.

Concrete languages only fill in the class-level tables; every lookup and the
pluralization rule (count == 1 → singular, otherwise plural) live here.
"""

from __future__ import annotations

from abc import ABC
from decimal import Decimal
from typing import ClassVar

from shapereport.shapes.registry import ShapeKind
from shapereport.utils.numbers import format_decimal


class LanguageStrategy(ABC):
    """Stateless localization provider. Use the module-level singletons."""

    code: ClassVar[str]
    report_header_text: ClassVar[str]
    empty_list_text: ClassVar[str]
    # kind → (singular, plural)
    shape_names: ClassVar[dict[ShapeKind, tuple[str, str]]]
    # Not pluralized by count in either language
    shapes_text: ClassVar[str]
    perimeter_text: ClassVar[str]
    area_text: ClassVar[str]
    decimal_separator: ClassVar[str]

    def get_report_header(self) -> str:
        return self.report_header_text

    def get_empty_list_message(self) -> str:
        return self.empty_list_text

    def shape_name(self, kind: ShapeKind, count: int) -> str:
        singular, plural = self.shape_names[kind]
        return singular if count == 1 else plural

    def square_name(self, count: int) -> str:
        return self.shape_name(ShapeKind.SQUARE, count)

    def circle_name(self, count: int) -> str:
        return self.shape_name(ShapeKind.CIRCLE, count)

    def triangle_name(self, count: int) -> str:
        return self.shape_name(ShapeKind.EQUILATERAL_TRIANGLE, count)

    def trapezoid_name(self, count: int) -> str:
        return self.shape_name(ShapeKind.TRAPEZOID, count)

    def get_shapes_word(self, count: int) -> str:
        return self.shapes_text

    def get_perimeter_word(self) -> str:
        return self.perimeter_text

    def get_area_word(self) -> str:
        return self.area_text

    def format_number(self, value: Decimal) -> str:
        return format_decimal(value, self.decimal_separator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
