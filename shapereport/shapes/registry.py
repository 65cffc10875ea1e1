"""Shape kind registry — every shape class registers itself via decorator.

Usage:
    @shape_kind(measurements=["side"], description="Square with side length")
    class Square(Shape):
        kind: ClassVar[ShapeKind] = ShapeKind.SQUARE
        ...

The registry maps each ShapeKind discriminant to its class so shapes can be
built from a kind identifier (see ``build_shape``).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapereport.shapes.base import Shape

logger = logging.getLogger(__name__)


class ShapeKind(str, enum.Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    EQUILATERAL_TRIANGLE = "equilateral_triangle"
    TRAPEZOID = "trapezoid"


@dataclass
class ShapeSpec:
    kind: ShapeKind
    cls: type["Shape"]
    measurements: list[str] = field(default_factory=list)
    description: str = ""


class ShapeRegistry:
    """Singleton registry of all shape kinds."""

    def __init__(self) -> None:
        self._kinds: dict[ShapeKind, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.kind in self._kinds:
            raise ValueError(f"Duplicate shape kind: {spec.kind.value}")
        self._kinds[spec.kind] = spec
        logger.debug("Registered shape kind %s (%s)", spec.kind.value, spec.cls.__name__)

    def get(self, kind: ShapeKind | str) -> ShapeSpec:
        try:
            key = ShapeKind(kind)
        except ValueError:
            raise KeyError(kind) from None
        return self._kinds[key]

    def all(self) -> list[ShapeSpec]:
        return list(self._kinds.values())

    @property
    def count(self) -> int:
        return len(self._kinds)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape_kind(*, measurements: list[str] | None = None, description: str = ""):
    """Decorator to register a shape class under its ``kind`` discriminant."""

    def decorator(cls: type["Shape"]) -> type["Shape"]:
        spec = ShapeSpec(
            kind=cls.kind,
            cls=cls,
            measurements=measurements or [],
            description=description,
        )
        _registry.register(spec)
        return cls

    return decorator
