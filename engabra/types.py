"""Entity types of the three-dimensional geometric algebra and their arithmetic.

Blades hold one grade each (Scalar, Vector, BiVector, TriVector).  Composite
types combine blades of several grades (Spinor, ImSpin, ComPlex, DirPlex and
the fully general MultiVector).

Addition and subtraction produce the type whose grades are the union of the
operand grades.  Combinations whose union is not one of the types raise
TypeError.  Multiplication by a real number scales every component, and
multiplication of two entities is the geometric product, returned as the
type that holds exactly the grades the product can have.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from itertools import islice
from numbers import Real
from typing import Any, ClassVar, Iterator

#: Classic value of pi.
pi = 3.141592653589793
#: Mnemonic for pi/2.
pi_half = 0.5 * pi
#: Mnemonic for pi/4.
pi_qtr = 0.5 * pi_half
#: Angle of a full turn [rad].
turn_full = 2.0 * pi
#: Angle of a half turn [rad].
turn_half = pi
#: Angle of a quarter turn [rad].
turn_qtr = pi_half
#: Not-a-number used for null components.
nan = math.nan

_GRADE_SIZE = {0: 1, 1: 3, 2: 3, 3: 1}

Parts = dict[int, tuple[float, ...]]


class GaEntity(ABC):
    """Common behaviour of every geometric algebra entity."""

    grades: ClassVar[tuple[int, ...]] = ()

    @abstractmethod
    def _parts(self) -> Parts:
        """Components of this entity keyed by grade."""

    @classmethod
    @abstractmethod
    def _from_parts(cls, parts: Parts) -> Any:
        """Build an instance from grade-keyed components (missing grades are zero)."""

    @property
    def components(self) -> tuple[float, ...]:
        """All components in ascending grade order."""
        parts = self._parts()
        return tuple(value for grade in self.grades for value in parts[grade])

    @classmethod
    def from_components(cls, values):
        """Build an instance from a flat sequence of components in grade order."""
        numbers = [float(value) for value in values]
        expected = sum(_GRADE_SIZE[grade] for grade in cls.grades)
        if len(numbers) != expected:
            raise ValueError(
                f"{cls.__name__} needs {expected} components, got {len(numbers)}"
            )
        source = iter(numbers)
        parts = {
            grade: tuple(islice(source, _GRADE_SIZE[grade])) for grade in cls.grades
        }
        return cls._from_parts(parts)

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index):
        return self.components[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def _map(self, func):
        parts = {
            grade: tuple(func(value) for value in values)
            for grade, values in self._parts().items()
        }
        return type(self)._from_parts(parts)

    def __neg__(self):
        return self._map(lambda value: -value)

    def __pos__(self):
        return self

    def __add__(self, other):
        if not isinstance(other, GaEntity):
            return NotImplemented
        kind = _sum_kind(type(self), type(other))
        left, right = self._parts(), other._parts()
        combined: Parts = {}
        for grade in kind.grades:
            if grade in left and grade in right:
                combined[grade] = tuple(
                    a + b for a, b in zip(left[grade], right[grade])
                )
            elif grade in left:
                combined[grade] = left[grade]
            else:
                combined[grade] = right[grade]
        return kind._from_parts(combined)

    def __sub__(self, other):
        if not isinstance(other, GaEntity):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        if isinstance(other, Real):
            factor = float(other)
            return self._map(lambda value: factor * value)
        if isinstance(other, GaEntity):
            return _geometric_product(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            factor = float(other)
            return self._map(lambda value: factor * value)
        return NotImplemented


class _Blade(GaEntity):
    """Entity of a single grade whose dataclass fields are its components."""

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if not isinstance(value, Real):
                raise TypeError(
                    f"{type(self).__name__}.{item.name} must be a real number"
                )
            object.__setattr__(self, item.name, float(value))

    def _parts(self) -> Parts:
        return {self.grades[0]: tuple(getattr(self, f.name) for f in fields(self))}

    @classmethod
    def _from_parts(cls, parts: Parts):
        values = parts.get(cls.grades[0])
        return cls() if values is None else cls(*values)


@dataclass(frozen=True)
class Scalar(_Blade):
    """Grade 0 entity."""

    value: float = 0.0

    grades = (0,)


@dataclass(frozen=True)
class Vector(_Blade):
    """Grade 1 entity with components along e1, e2, e3."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    grades = (1,)


@dataclass(frozen=True)
class BiVector(_Blade):
    """Grade 2 entity with components along e23, e31, e12."""

    yz: float = 0.0
    zx: float = 0.0
    xy: float = 0.0

    grades = (2,)


@dataclass(frozen=True)
class TriVector(_Blade):
    """Grade 3 entity (pseudo-scalar)."""

    value: float = 0.0

    grades = (3,)


def _coerce(value, kind, owner: str, name: str):
    if isinstance(value, kind):
        return value
    if kind in (Scalar, TriVector) and isinstance(value, Real):
        return kind(float(value))
    raise TypeError(f"{owner}.{name} must be a {kind.__name__}")


class _Composite(GaEntity):
    """Entity built from blades of several grades."""

    _members: ClassVar[tuple[tuple[str, type], ...]] = ()

    def __post_init__(self) -> None:
        for name, kind in self._members:
            value = _coerce(getattr(self, name), kind, type(self).__name__, name)
            object.__setattr__(self, name, value)

    def _parts(self) -> Parts:
        parts: Parts = {}
        for name, _ in self._members:
            parts.update(getattr(self, name)._parts())
        return parts

    @classmethod
    def _from_parts(cls, parts: Parts):
        return cls(*(kind._from_parts(parts) for _, kind in cls._members))


@dataclass(frozen=True)
class Spinor(_Composite):
    """Scalar plus bivector (even grades)."""

    sca: Scalar = field(default_factory=Scalar)
    biv: BiVector = field(default_factory=BiVector)

    grades = (0, 2)
    _members = (("sca", Scalar), ("biv", BiVector))


@dataclass(frozen=True)
class ImSpin(_Composite):
    """Vector plus trivector (odd grades)."""

    vec: Vector = field(default_factory=Vector)
    tri: TriVector = field(default_factory=TriVector)

    grades = (1, 3)
    _members = (("vec", Vector), ("tri", TriVector))


@dataclass(frozen=True)
class ComPlex(_Composite):
    """Scalar plus trivector (complex-number-like)."""

    sca: Scalar = field(default_factory=Scalar)
    tri: TriVector = field(default_factory=TriVector)

    grades = (0, 3)
    _members = (("sca", Scalar), ("tri", TriVector))


@dataclass(frozen=True)
class DirPlex(_Composite):
    """Vector plus bivector (spatially directed grades)."""

    vec: Vector = field(default_factory=Vector)
    biv: BiVector = field(default_factory=BiVector)

    grades = (1, 2)
    _members = (("vec", Vector), ("biv", BiVector))


@dataclass(frozen=True)
class MultiVector(_Composite):
    """General entity holding all four grades."""

    sca: Scalar = field(default_factory=Scalar)
    vec: Vector = field(default_factory=Vector)
    biv: BiVector = field(default_factory=BiVector)
    tri: TriVector = field(default_factory=TriVector)

    grades = (0, 1, 2, 3)
    _members = (
        ("sca", Scalar),
        ("vec", Vector),
        ("biv", BiVector),
        ("tri", TriVector),
    )


_KIND_BY_GRADES: dict[frozenset[int], type] = {
    frozenset(kind.grades): kind
    for kind in (
        Scalar,
        Vector,
        BiVector,
        TriVector,
        Spinor,
        ImSpin,
        ComPlex,
        DirPlex,
        MultiVector,
    )
}


def _sum_kind(left: type, right: type) -> type:
    union = frozenset(left.grades) | frozenset(right.grades)
    kind = _KIND_BY_GRADES.get(union)
    if kind is None:
        raise TypeError(
            f"no entity type holds the sum of {left.__name__} and {right.__name__}"
        )
    return kind


def _product_kind(left: type, right: type) -> type:
    grades = set()
    for ga in left.grades:
        for gb in right.grades:
            low = abs(ga - gb)
            high = min(ga + gb, 6 - ga - gb)
            grades.update(range(low, high + 1, 2))
    return _KIND_BY_GRADES.get(frozenset(grades), MultiVector)


def _full(item: GaEntity) -> tuple[float, ...]:
    parts = item._parts()
    return tuple(
        value
        for grade in range(4)
        for value in parts.get(grade, (0.0,) * _GRADE_SIZE[grade])
    )


def _geometric_product(left: GaEntity, right: GaEntity):
    aS, aV0, aV1, aV2, aB0, aB1, aB2, aT = _full(left)
    bS, bV0, bV1, bV2, bB0, bB1, bB2, bT = _full(right)
    sca = (aS * bS + aV0 * bV0 + aV1 * bV1 + aV2 * bV2) - (
        aB0 * bB0 + aB1 * bB1 + aB2 * bB2 + aT * bT
    )
    v0 = (aV0 * bS + aS * bV0 + aB2 * bV1 + aV2 * bB1) - (
        aB1 * bV2 + aT * bB0 + aV1 * bB2 + aB0 * bT
    )
    v1 = (aV1 * bS + aS * bV1 + aB0 * bV2 + aV0 * bB2) - (
        aB2 * bV0 + aV2 * bB0 + aT * bB1 + aB1 * bT
    )
    v2 = (aV2 * bS + aB1 * bV0 + aS * bV2 + aV1 * bB0) - (
        aB0 * bV1 + aV0 * bB1 + aT * bB2 + aB2 * bT
    )
    b0 = (aB0 * bS + aT * bV0 + aV1 * bV2 + aS * bB0 + aB2 * bB1 + aV0 * bT) - (
        aV2 * bV1 + aB1 * bB2
    )
    b1 = (aB1 * bS + aV2 * bV0 + aT * bV1 + aS * bB1 + aB0 * bB2 + aV1 * bT) - (
        aV0 * bV2 + aB2 * bB0
    )
    b2 = (aB2 * bS + aV0 * bV1 + aT * bV2 + aB1 * bB0 + aS * bB2 + aV2 * bT) - (
        aV1 * bV0 + aB0 * bB1
    )
    tri = (
        aT * bS
        + aB0 * bV0
        + aB1 * bV1
        + aB2 * bV2
        + aV0 * bB0
        + aV1 * bB1
        + aV2 * bB2
        + aS * bT
    )
    parts = {0: (sca,), 1: (v0, v1, v2), 2: (b0, b1, b2), 3: (tri,)}
    return _product_kind(type(left), type(right))._from_parts(parts)


def _filled(kind, value: float):
    if kind is float:
        return value
    if isinstance(kind, type) and issubclass(kind, GaEntity):
        return kind._from_parts(
            {grade: (value,) * _GRADE_SIZE[grade] for grade in kind.grades}
        )
    raise TypeError(f"unsupported kind: {kind!r}")


def null(kind):
    """Instance of kind with every component set to NaN."""
    return _filled(kind, nan)


def zero(kind):
    """Instance of kind with every component zero."""
    return _filled(kind, 0.0)


def one(kind):
    """Unit value of kind (the multiplicative identity where one exists)."""
    if kind is float:
        return 1.0
    if kind in (Scalar, TriVector):
        return kind(1.0)
    if kind in (Vector, BiVector):
        return zero(kind)
    if kind in (Spinor, ComPlex, MultiVector):
        return kind._from_parts({0: (1.0,)})
    raise TypeError(f"no unit value defined for {kind!r}")


def is_valid(item) -> bool:
    """True when no component of item is NaN."""
    if isinstance(item, Real):
        return not math.isnan(float(item))
    if isinstance(item, GaEntity):
        return not any(math.isnan(value) for value in item.components)
    raise TypeError(f"cannot check validity of {type(item).__name__}")


#: Scalar basis element.
e0 = Scalar(1.0)
#: Vector basis elements (dextral, mutually orthogonal, unitary).
e1 = Vector(1.0, 0.0, 0.0)
e2 = Vector(0.0, 1.0, 0.0)
e3 = Vector(0.0, 0.0, 1.0)
#: BiVector basis elements (duals of e1, e2, e3).
e23 = BiVector(1.0, 0.0, 0.0)
e31 = BiVector(0.0, 1.0, 0.0)
e12 = BiVector(0.0, 0.0, 1.0)
#: Unit trivector (pseudo-scalar).
e123 = TriVector(1.0)