"""Localized area/perimeter reports for mixed shape collections."""

from shapereport.i18n import Language, LanguageStrategy, get_language
from shapereport.main import create_generator
from shapereport.report import ShapeGroup, ShapeReportGenerator, generate_report, group_shapes
from shapereport.shapes import Circle, EquilateralTriangle, Shape, ShapeKind, Square, Trapezoid, build_shape

__all__ = [
    "Shape",
    "Square",
    "Circle",
    "EquilateralTriangle",
    "Trapezoid",
    "ShapeKind",
    "build_shape",
    "Language",
    "LanguageStrategy",
    "get_language",
    "ShapeGroup",
    "ShapeReportGenerator",
    "generate_report",
    "group_shapes",
    "create_generator",
]
