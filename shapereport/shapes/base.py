"""Shape — immutable measurements plus the area/perimeter/name capability set."""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, field_validator

from shapereport.shapes.registry import ShapeKind
from shapereport.utils.numbers import to_decimal

if TYPE_CHECKING:
    from shapereport.i18n.base import LanguageStrategy


class Shape(BaseModel):
    """Base for all shape kinds. ``side`` is the single defining length."""

    kind: ClassVar[ShapeKind]

    side: Decimal

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, side: Any, **data: Any) -> None:
        super().__init__(side=side, **data)

    @field_validator("*", mode="before")
    @classmethod
    def coerce_float(cls, value: Any) -> Any:
        return to_decimal(value)

    @abstractmethod
    def calculate_area(self) -> Decimal: ...

    @abstractmethod
    def calculate_perimeter(self) -> Decimal: ...

    @abstractmethod
    def get_name(self, language: LanguageStrategy, count: int) -> str:
        """Localized kind name, singular for count == 1."""
