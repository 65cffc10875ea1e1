"""Spanish strings. Must cover the same keys as en.py."""

from __future__ import annotations

from shapereport.i18n.base import LanguageStrategy
from shapereport.shapes.registry import ShapeKind


class SpanishLanguageStrategy(LanguageStrategy):
    code = "es"
    report_header_text = "Reporte de Formas"
    empty_list_text = "Lista vacía de formas!"
    shape_names = {
        ShapeKind.SQUARE: ("Cuadrado", "Cuadrados"),
        ShapeKind.CIRCLE: ("Círculo", "Círculos"),
        ShapeKind.EQUILATERAL_TRIANGLE: ("Triángulo", "Triángulos"),
        ShapeKind.TRAPEZOID: ("Trapecio", "Trapecios"),
    }
    shapes_text = "formas"
    perimeter_text = "Perimetro"
    area_text = "Area"
    decimal_separator = ","
