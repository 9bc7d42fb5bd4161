# conicfit

Fit an implicit conic

    c0 + c1·x + c2·y + c3·x² + c4·xy + c5·y² = 0

to a 2D polyline, evaluate it, approximate the distance to it and tell what
kind of curve it is (no curve, line, two lines, ellipse, parabola or
hyperbola).

The fit minimises the algebraic error normalised by the gradient (Taubin's
method), solved as a reduced generalized eigenproblem
(`conicfit.solver.solve`).

## Installation

    pip install .

## Library use

```python
import math

from conicfit.conic import Conic, ConicType
from conicfit.fitter import FitType

# Points on the ellipse x^2 + 4 y^2 = 1
points = [(math.cos(t), 0.5 * math.sin(t))
          for t in (k * math.pi / 8 for k in range(16))]

conic = Conic()
conic.fit(points, FitType.CLOSED)
print(conic.coeffs)                # six coefficients c0 .. c5
print(conic.classify())            # ConicType.ELLIPSE
print(conic.eval((0.5, 0.2)))      # algebraic value
print(conic.grad((0.5, 0.2)))      # gradient, as a numpy array
print(conic.distance((2.0, 0.0)))  # approximate Euclidean distance
```

A conic can also be built directly from its coefficients, in the order
`1, x, y, x², xy, y²`:

```python
Conic([-1, 0, 0, 1, 0, 2]).classify()   # ConicType.ELLIPSE
```

`Conic.matrix_form()` returns `(Q, P, R)` with `x·Q·x + P·x + R` equal to the
conic's value. `Conic.classify(tolerance=1e-8)` uses the tolerance for all of
its zero tests. `Conic.distance` is Taubin's second-order distance estimate;
it is `nan` when the conic has no quadratic part.

`conicfit.fitter.fit_coefficients(polyline, fit_type, tolerance=1e-8)` returns
the fitted coefficients as a tuple without building a `Conic`. It raises
`ValueError` for a polyline of zero length.

### Fit options

`FitType` values are flags and can be combined with `|`:

- `FitType.SIMPLE` – each point is used once; the polyline is treated as
  closed.
- `FitType.CLOSED` – the last point connects back to the first.
- `FitType.ORIGIN` – the curve is forced through the origin (`c0 = 0`).
- `FitType.MIDPOINT` – each segment is integrated approximately from its two
  endpoints and its midpoint, weighted by its length.
- `FitType.SEGMENT` – each segment is integrated exactly, weighted by its
  length.

Without `CLOSED`, `MIDPOINT` and `SEGMENT` fits use only the segments between
consecutive points.

## Command line

    conicfit points.txt

reads whitespace-separated `x y` pairs, fits a conic with `FitType.CLOSED`,
prints its coefficients and type, and writes two OBJ triangle meshes over a
square around the points' bounding box: `algebraic.obj` (the algebraic value)
and `distance.obj` (the approximate distance), both in the system's temporary
directory (for example `/tmp`).

    conicfit 6

uses one of the built-in conics instead, drawn over the square of radius 4
around the origin: 1 single line, 2 double line, 3 parallel lines,
4 intersecting lines, 5 parabola, 6 ellipse, 7 hyperbola.

The command exits with status 1 and a message on standard error when it is
given the wrong number of arguments or when the input file cannot be read or
fitted.

## Tests

    pip install .[test]
    pytest