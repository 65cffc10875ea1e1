"""Shape kinds. Importing this package registers all four built-in kinds."""

from __future__ import annotations

from typing import Any

from shapereport.shapes.base import Shape
from shapereport.shapes.circle import Circle
from shapereport.shapes.registry import ShapeKind, ShapeRegistry, ShapeSpec, get_registry, shape_kind
from shapereport.shapes.square import Square
from shapereport.shapes.trapezoid import Trapezoid
from shapereport.shapes.triangle import EquilateralTriangle


def build_shape(kind: ShapeKind | str, *measurements: Any) -> Shape:
    """Build a shape from its kind and positional measurements.

    ``build_shape("trapezoid", 4, 6, 10, 5)`` is ``Trapezoid(4, 6, 10, 5)``.
    Raises KeyError for an unknown kind and TypeError for a wrong arity.
    """
    spec = get_registry().get(kind)
    if len(measurements) != len(spec.measurements):
        raise TypeError(
            f"{spec.kind.value} ({spec.description}) takes {len(spec.measurements)} "
            f"measurement(s): {', '.join(spec.measurements)}; got {len(measurements)}"
        )
    return spec.cls(*measurements)


__all__ = [
    "Shape",
    "Square",
    "Circle",
    "EquilateralTriangle",
    "Trapezoid",
    "ShapeKind",
    "ShapeSpec",
    "ShapeRegistry",
    "get_registry",
    "shape_kind",
    "build_shape",
]
