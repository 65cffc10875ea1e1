"""Tests for language strategies and selection."""

from decimal import Decimal

import pytest

from shapereport.i18n import (
    ENGLISH,
    SPANISH,
    EnglishLanguageStrategy,
    Language,
    SpanishLanguageStrategy,
    get_language,
)
from shapereport.shapes import ShapeKind


def test_get_language_by_id():
    assert get_language(Language.SPANISH) is SPANISH
    assert get_language(Language.ENGLISH) is ENGLISH
    assert get_language(1) is SPANISH
    assert get_language(2) is ENGLISH


@pytest.mark.parametrize("identifier", [0, -1, 3, 99, None, "fr", "", True])
def test_unknown_language_falls_back_to_english(identifier):
    assert isinstance(get_language(identifier), EnglishLanguageStrategy)


@pytest.mark.parametrize("code", ["es", "ES", " spanish ", "1"])
def test_get_language_by_code(code):
    assert isinstance(get_language(code), SpanishLanguageStrategy)


def test_get_language_english_codes():
    assert get_language("en") is ENGLISH
    assert get_language("2") is ENGLISH


def test_spanish_vocabulary():
    assert SPANISH.get_report_header() == "Reporte de Formas"
    assert SPANISH.get_empty_list_message() == "Lista vacía de formas!"
    assert SPANISH.get_perimeter_word() == "Perimetro"
    assert SPANISH.get_area_word() == "Area"


def test_english_vocabulary():
    assert ENGLISH.get_report_header() == "Shapes report"
    assert ENGLISH.get_empty_list_message() == "Empty list of shapes!"
    assert ENGLISH.get_perimeter_word() == "Perimeter"
    assert ENGLISH.get_area_word() == "Area"


def test_pluralization():
    assert SPANISH.square_name(1) == "Cuadrado"
    assert SPANISH.circle_name(2) == "Círculos"
    assert SPANISH.triangle_name(0) == "Triángulos"
    assert SPANISH.trapezoid_name(1) == "Trapecio"
    assert ENGLISH.square_name(3) == "Squares"
    assert ENGLISH.circle_name(1) == "Circle"
    assert ENGLISH.trapezoid_name(5) == "Trapezoids"


def test_shapes_word_ignores_count():
    for count in (0, 1, 2, 10):
        assert SPANISH.get_shapes_word(count) == "formas"
        assert ENGLISH.get_shapes_word(count) == "shapes"


def test_every_kind_has_names():
    for lang in (SPANISH, ENGLISH):
        for kind in ShapeKind:
            assert lang.shape_name(kind, 1) != lang.shape_name(kind, 2)


def test_number_format_separator():
    assert ENGLISH.format_number(Decimal("18.0642")) == "18.06"
    assert SPANISH.format_number(Decimal("18.0642")) == "18,06"
    assert SPANISH.format_number(Decimal("25.000")) == "25"
