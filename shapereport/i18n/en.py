"""English strings. Must cover the same keys as es.py."""

from __future__ import annotations

from shapereport.i18n.base import LanguageStrategy
from shapereport.shapes.registry import ShapeKind


class EnglishLanguageStrategy(LanguageStrategy):
    code = "en"
    report_header_text = "Shapes report"
    empty_list_text = "Empty list of shapes!"
    shape_names = {
        ShapeKind.SQUARE: ("Square", "Squares"),
        ShapeKind.CIRCLE: ("Circle", "Circles"),
        ShapeKind.EQUILATERAL_TRIANGLE: ("Triangle", "Triangles"),
        ShapeKind.TRAPEZOID: ("Trapezoid", "Trapezoids"),
    }
    shapes_text = "shapes"
    perimeter_text = "Perimeter"
    area_text = "Area"
    decimal_separator = "."
