# engabra

Geometric algebra in three dimensions (G3) for engineering computation.

The package provides the blade types of the algebra and the composite types
built from them. It also provides the full geometric product between any
pair of them.

## Types

The types live in `engabra.types`.

| Type          | Grades held   | Members                 |
|---------------|---------------|-------------------------|
| `Scalar`      | 0             | `value`                 |
| `Vector`      | 1             | `x`, `y`, `z`           |
| `BiVector`    | 2             | `yz`, `zx`, `xy`        |
| `TriVector`   | 3             | `value`                 |
| `Spinor`      | 0 + 2         | `sca`, `biv`            |
| `ImSpin`      | 1 + 3         | `vec`, `tri`            |
| `ComPlex`     | 0 + 3         | `sca`, `tri`            |
| `DirPlex`     | 1 + 2         | `vec`, `biv`            |
| `MultiVector` | 0 + 1 + 2 + 3 | `sca`, `vec`, `biv`, `tri` |

All of these are frozen dataclasses that share the base class `GaEntity`.

Composite members accept the blade type they hold. `Scalar` and `TriVector`
members also accept a plain real number. For example,
`ComPlex(2.0, 3.0)` is the same value as `ComPlex(Scalar(2.0), TriVector(3.0))`.

Every entity offers the following access to its components:

- `components` gives a flat tuple of all components, in ascending grade order.
- Indexing, iteration and `len()` work on that same flat tuple.
- `Kind.from_components(values)` builds an instance from such a sequence.
  It raises `ValueError` when the count is wrong.

## Arithmetic

- `a + b` and `a - b` give the type that holds the union of the operands'
  grades.
  - For example, `Vector + BiVector` gives a `DirPlex`, and
    `Scalar - TriVector` gives a `ComPlex`.
  - When no type holds that union, a `TypeError` is raised. This happens for
    `Scalar + Vector` and `Vector + ComPlex`.
- `-a` negates every component.
- `a * b` between two entities is the geometric product.
  - The result is the type that holds exactly the grades the product can
    have. For example, `Vector * Vector` gives a `Spinor`,
    `BiVector * Vector` gives an `ImSpin`, and `Vector * TriVector` gives a
    `BiVector`.
  - Products that fit no narrower type give a `MultiVector`.
- `a * 2.0` and `2.0 * a` scale every component.

## Constants and special values

`engabra.types` defines the following constants:

- Angles: `pi`, `pi_half`, `pi_qtr`, `turn_full`, `turn_half` and `turn_qtr`.
- Not-a-number: `nan`.
- Basis elements: `e0`, `e1`, `e2`, `e3`, `e23`, `e31`, `e12` and `e123`.

It also provides functions that build special values. Each accepts `float`
or any entity type:

- `zero(kind)` gives an instance with every component zero.
- `null(kind)` gives an instance with every component NaN.
- `one(kind)` gives the unit value.
  - For `Scalar`, `TriVector`, `Spinor`, `ComPlex` and `MultiVector`, the
    scalar (or trivector) part is 1.
  - For `Vector` and `BiVector`, it is all zeros.
  - Other kinds raise `TypeError`.

`is_valid(item)` is true when no component of a number or entity is NaN.
NaN components carry through arithmetic, so results built from a null
value are reported as not valid.

## Operations

`engabra.involutions` provides four operations:

- `reverse(item)` negates the bivector and trivector grades.
- `oddverse(item)` negates the vector and trivector grades.
- `dirverse(item)` negates the vector and bivector grades.
- `dual(item)` multiplies by the unit trivector, mapping grade g onto
  grade 3 − g.

`reverse` and `dual` also accept a real number. The dual of a real number
is a `TriVector`.

`engabra.multiproduct` provides two functions:

- `to_multivector(item)` widens an entity or a real number to a
  `MultiVector`.
- `multivector_product(mva, mvb)` forms the product of the two widened
  arguments. The result is always a `MultiVector`.

`engabra.products` provides `product(a, b)`, the geometric product of any
two entities or real numbers.

## Text

`engabra.textio` writes numbers and entities as text and reads them back.

- `fixed(item, dig_before=3, dig_after=6)` writes fixed-point text.
  - Each number is preceded by a space and right-aligned in a field of
    `DoubleFormat(dig_before, dig_after).field_wide()` characters.
  - Grades are separated by two further spaces.
- `enote(item, dig_after=15)` writes scientific notation.
  - Numbers within a grade are separated by one space.
  - Grades are separated by two spaces.
- `parse(kind, text)` reads whitespace-separated numbers into `float` or
  an entity type.
  - If a value is missing, unreadable or NaN, the grade it belongs to comes
    back all NaN. So does every later grade.

## Example

```python
from engabra.types import Vector
from engabra.textio import fixed

a = Vector(2.0, 3.0, 0.0)
b = Vector(0.0, 5.0, 0.25)
spin = a * b                 # Spinor: dot part plus wedge part
print(spin.sca.value)        # 15.0
print(spin.biv)              # BiVector(yz=0.75, zx=-0.5, xy=10.0)
print(fixed(spin))
```

## Version

- `engabra.version.project_version()` returns `"0.2.1"`.
- `engabra.version.source_identity()` returns the value of the
  `ENGABRA_SOURCE_IDENTITY` environment variable. When that variable is not
  set, it returns a marker string for an unknown source.

## What is not included

The package covers the types, their sums and products, the involutions,
the dual and text conversion. It does not provide any of the following:

- magnitudes or norms
- inverses
- exponentials or logarithms
- tolerance-based comparison of entities
- a command-line tool

## Tests

```
pip install .[test]
pytest
```