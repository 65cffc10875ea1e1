"""Generator factory — wires settings and logging into a ShapeReportGenerator."""

from __future__ import annotations

import logging

from shapereport.config import Settings, settings
from shapereport.i18n import Language, get_language
from shapereport.report import ShapeReportGenerator


def configure_logging(level: str | None = None) -> None:
    """basicConfig with the package format; unknown level names mean INFO."""
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_generator(
    language: Language | int | str | None = None,
    config: Settings | None = None,
) -> ShapeReportGenerator:
    """Build a generator for ``language``, or the configured default language."""
    config = config or settings
    if language is None:
        language = config.default_language
    return ShapeReportGenerator(get_language(language))
