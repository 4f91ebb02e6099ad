"""Single-argument operations: the involutions and the dual.

The involutions change the sign of selected grades:

* reverse() flips the order of vector factors, changing the sign of
  bivector and trivector grades.
* oddverse() reflects basis vectors through the origin, changing the sign
  of the odd (vector and trivector) grades.
* dirverse() flips spatially directed quantities, changing the sign of the
  vector and bivector grades.

Each is its own inverse, they commute with each other, and composing any
two of them gives the third.  The dual multiplies by the unit trivector,
mapping grade g onto grade 3 - g.
"""

from __future__ import annotations

from numbers import Real

from .types import (
    BiVector,
    ComPlex,
    DirPlex,
    GaEntity,
    ImSpin,
    MultiVector,
    Scalar,
    Spinor,
    TriVector,
    Vector,
)

_REVERSE_SIGNS = {0: 1.0, 1: 1.0, 2: -1.0, 3: -1.0}
_ODDVERSE_SIGNS = {0: 1.0, 1: -1.0, 2: 1.0, 3: -1.0}
_DIRVERSE_SIGNS = {0: 1.0, 1: -1.0, 2: -1.0, 3: 1.0}

# Sign applied to grade g when it moves to grade 3 - g under the dual.
_DUAL_SIGNS = {0: 1.0, 1: 1.0, 2: -1.0, 3: -1.0}

_DUAL_KIND: dict[type, type] = {
    Scalar: TriVector,
    Vector: BiVector,
    BiVector: Vector,
    TriVector: Scalar,
    Spinor: ImSpin,
    ImSpin: Spinor,
    ComPlex: ComPlex,
    DirPlex: DirPlex,
    MultiVector: MultiVector,
}


def _require_entity(item, operation: str) -> GaEntity:
    if not isinstance(item, GaEntity):
        raise TypeError(f"{operation}() is not defined for {type(item).__name__}")
    return item


def _apply_signs(item: GaEntity, signs: dict[int, float]):
    parts = {
        grade: tuple(signs[grade] * value for value in values)
        for grade, values in item._parts().items()
    }
    return type(item)._from_parts(parts)


def reverse(item):
    """Reverse: same scalar and vector grades, negated bivector and trivector."""
    if isinstance(item, Real):
        return float(item)
    return _apply_signs(_require_entity(item, "reverse"), _REVERSE_SIGNS)


def oddverse(item):
    """Oddverse: negated vector and trivector grades, others unchanged."""
    return _apply_signs(_require_entity(item, "oddverse"), _ODDVERSE_SIGNS)


def dirverse(item):
    """Dirverse: negated vector and bivector grades, others unchanged."""
    return _apply_signs(_require_entity(item, "dirverse"), _DIRVERSE_SIGNS)


def dual(item):
    """Entity dual to item (the unit trivector times item)."""
    if isinstance(item, Real):
        return TriVector(float(item))
    entity = _require_entity(item, "dual")
    kind = _DUAL_KIND.get(type(entity))
    if kind is None:
        raise TypeError(f"dual() is not defined for {type(entity).__name__}")
    parts = {
        3 - grade: tuple(_DUAL_SIGNS[grade] * value for value in values)
        for grade, values in entity._parts().items()
    }
    return kind._from_parts(parts)