"""Shape report generator — groups shapes by kind and renders the localized summary.

Output shape (no newlines):
  <h1>{header}</h1>
  {count} {name} | {Area} {area} | {Perimeter} {perimeter} <br/>   (one per kind)
  TOTAL:<br/>
  {n} {shapes} {Perimeter} {total perimeter} {Area} {total area}

An empty input renders only <h1>{empty message}</h1>.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from shapereport.i18n.base import LanguageStrategy
from shapereport.shapes.base import Shape
from shapereport.shapes.registry import ShapeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeGroup:
    """Aggregate of all input shapes sharing one kind."""

    kind: ShapeKind
    exemplar: Shape
    count: int
    area: Decimal
    perimeter: Decimal

    def name(self, language: LanguageStrategy) -> str:
        return self.exemplar.get_name(language, self.count)


def group_shapes(shapes: Iterable[Shape]) -> list[ShapeGroup]:
    """Group by kind discriminant, in order of first occurrence."""
    members: dict[ShapeKind, list[Shape]] = {}
    for shape in shapes:
        members.setdefault(shape.kind, []).append(shape)

    return [
        ShapeGroup(
            kind=kind,
            exemplar=items[0],
            count=len(items),
            area=sum((s.calculate_area() for s in items), Decimal(0)),
            perimeter=sum((s.calculate_perimeter() for s in items), Decimal(0)),
        )
        for kind, items in members.items()
    ]


class ShapeReportGenerator:
    """Renders reports in one language. Holds no state besides the strategy."""

    def __init__(self, language: LanguageStrategy) -> None:
        self.language = language

    def generate_report(self, shapes: Iterable[Shape]) -> str:
        shapes = list(shapes)
        lang = self.language

        if not shapes:
            return f"<h1>{lang.get_empty_list_message()}</h1>"

        parts = [f"<h1>{lang.get_report_header()}</h1>"]

        groups = group_shapes(shapes)
        for group in groups:
            parts.append(
                f"{group.count} {group.name(lang)} | "
                f"{lang.get_area_word()} {lang.format_number(group.area)} | "
                f"{lang.get_perimeter_word()} {lang.format_number(group.perimeter)} <br/>"
            )

        # Footer
        parts.append("TOTAL:<br/>")
        total_shapes = len(shapes)
        total_perimeter = sum((s.calculate_perimeter() for s in shapes), Decimal(0))
        total_area = sum((s.calculate_area() for s in shapes), Decimal(0))

        parts.append(
            f"{total_shapes} {lang.get_shapes_word(total_shapes)} "
            f"{lang.get_perimeter_word()} {lang.format_number(total_perimeter)} "
            f"{lang.get_area_word()} {lang.format_number(total_area)}"
        )

        logger.debug(
            "Report (%s): %d shapes in %d groups",
            getattr(lang, "code", type(lang).__name__),
            total_shapes,
            len(groups),
        )
        return "".join(parts)


def generate_report(shapes: Iterable[Shape], language: LanguageStrategy) -> str:
    """Render the grouped report for ``shapes`` in ``language``."""
    return ShapeReportGenerator(language).generate_report(shapes)
