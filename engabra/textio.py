"""Text encodings of entities and of real numbers, and reading them back.

fixed() gives fixed-point text with control over the number of digits
before and after the decimal point, which suits aligned tabular displays.
enote() gives scientific notation carrying (by default) the full precision
of a double, which suits storing values as text.

parse() reads whitespace-separated numbers into an entity.  It follows the
null pattern.  If a value of a grade is missing, is not a number, or is
NaN, that whole grade comes back null (all NaN).  Every grade after it also
comes back null.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .types import _GRADE_SIZE, GaEntity, nan

_SIGN_WIDTH = 1
_POINT_WIDTH = 1
_GRADE_SEPARATOR = "  "


@dataclass(frozen=True)
class DoubleFormat:
    """Layout of one fixed-point number: <sign><lead digits>.<frac digits>."""

    num_dig_lead: int = 3
    num_dig_frac: int = 6

    def __post_init__(self) -> None:
        for name in ("num_dig_lead", "num_dig_frac"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer")

    def field_wide(self) -> int:
        """Total width taken by a number in this format."""
        return _SIGN_WIDTH + self.num_dig_lead + _POINT_WIDTH + self.num_dig_frac

    def _render(self, value: float) -> str:
        # A forced leading space, then the number right-aligned in its field.
        return " " + f"{value:>{self.field_wide()}.{self.num_dig_frac}f}"


def _check_digits(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return value


def _enote_number(value: float, dig_after: int) -> str:
    width = 1 + 1 + 1 + 1 + 1 + 2 + dig_after  # sign, lead, point, e, sign, exp
    return f"{value:>{width}.{dig_after}e}"


def _grade_groups(item: GaEntity) -> list[tuple[float, ...]]:
    parts = item._parts()
    return [parts[grade] for grade in item.grades]


def fixed(item, dig_before=3, dig_after=6) -> str:
    """Fixed-point text for a real number or an entity.

    Each number is preceded by a space; grades of a composite entity are
    separated by two further spaces.
    """
    fmt = DoubleFormat(
        _check_digits("dig_before", dig_before),
        _check_digits("dig_after", dig_after),
    )
    if isinstance(item, Real):
        return fmt._render(float(item))
    if isinstance(item, GaEntity):
        return _GRADE_SEPARATOR.join(
            "".join(fmt._render(value) for value in values)
            for values in _grade_groups(item)
        )
    raise TypeError(f"cannot format {type(item).__name__}")


def enote(item, dig_after=15) -> str:
    """Scientific-notation text for a real number or an entity.

    Numbers within a grade are separated by one space, grades of a
    composite entity by two.
    """
    digits = _check_digits("dig_after", dig_after)
    if isinstance(item, Real):
        return _enote_number(float(item), digits)
    if isinstance(item, GaEntity):
        return _GRADE_SEPARATOR.join(
            " ".join(_enote_number(value, digits) for value in values)
            for values in _grade_groups(item)
        )
    raise TypeError(f"cannot format {type(item).__name__}")


def _read_number(tokens) -> float | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    return None if math.isnan(value) else value


def parse(kind, text: str):
    """Read an instance of kind (float or an entity type) from text."""
    tokens = iter(text.split())
    if kind is float:
        value = _read_number(tokens)
        return nan if value is None else value
    if not (isinstance(kind, type) and issubclass(kind, GaEntity)):
        raise TypeError(f"cannot parse into {kind!r}")
    failed = False
    parts: dict[int, tuple[float, ...]] = {}
    for grade in kind.grades:
        size = _GRADE_SIZE[grade]
        values: list[float] = []
        if not failed:
            for _ in range(size):
                value = _read_number(tokens)
                if value is None:
                    failed = True
                    break
                values.append(value)
        parts[grade] = tuple(values) if not failed else (nan,) * size
    return kind._from_parts(parts)