"""Geometric product of entities and real numbers.

The product of two entities holds exactly the grades that their pairwise
grade products can produce, and comes back as the type holding those
grades. For example:

* Vector * Vector gives a Spinor (dot plus wedge).
* Vector * BiVector and BiVector * Vector give an ImSpin.
* BiVector * BiVector gives a Spinor.
* Vector * TriVector gives a BiVector, and BiVector * TriVector a Vector.
* Vector * ComPlex and BiVector * ComPlex give a DirPlex.
* Any product with a MultiVector gives a MultiVector.

A real number factor scales every component. The product of two real
numbers is their ordinary product.
"""

from __future__ import annotations

from numbers import Real

from .types import GaEntity


def product(a, b):
    """Geometric product a * b of two entities or real numbers."""
    a_real = isinstance(a, Real)
    b_real = isinstance(b, Real)
    a_entity = isinstance(a, GaEntity)
    b_entity = isinstance(b, GaEntity)
    if a_real and b_real:
        return float(a) * float(b)
    if a_entity and b_real:
        return a * float(b)
    if a_real and b_entity:
        return float(a) * b
    if a_entity and b_entity:
        return a * b
    raise TypeError(
        f"no product defined for {type(a).__name__} and {type(b).__name__}"
    )