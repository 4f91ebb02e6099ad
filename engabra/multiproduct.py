"""The general product of two multivectors.

Any entity, or a real number, can be widened to a MultiVector.  The product
of two multivectors is the most general product of the algebra: it holds
every pairwise combination of grades.  For entities with an unusual mix of
grades it is a simple way to get their product; the per-grade parts can
then be picked off the result.
"""

from __future__ import annotations

from numbers import Real

from .types import GaEntity, MultiVector, Scalar


def to_multivector(item) -> MultiVector:
    """MultiVector holding the components of item (missing grades are zero)."""
    if isinstance(item, MultiVector):
        return item
    if isinstance(item, GaEntity):
        return MultiVector._from_parts(item._parts())
    if isinstance(item, Real):
        return MultiVector(sca=Scalar(float(item)))
    raise TypeError(f"cannot convert {type(item).__name__} to a MultiVector")


def multivector_product(mva, mvb) -> MultiVector:
    """Geometric product of mva and mvb, both widened to MultiVector."""
    result = to_multivector(mva) * to_multivector(mvb)
    return to_multivector(result)