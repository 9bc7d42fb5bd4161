"""Command line tool: fit or pick a conic, classify it and write distance meshes."""

import re
import sys
import tempfile
from pathlib import Path

import numpy as np

from .conic import Conic, ConicType
from .fitter import FitType

TYPE_NAMES = {
    ConicType.NO_CURVE: "no curve",
    ConicType.LINE: "line",
    ConicType.TWO_LINES: "two lines",
    ConicType.ELLIPSE: "ellipse",
    ConicType.PARABOLA: "parabola",
    ConicType.HYPERBOLA: "hyperbola",
}

# Coefficients of 1, x, y, x^2, xy, y^2 for the built-in curves 1-7.
CANONICAL_COEFFS = {
    1: (0, 0, 1, 0, 0, 0),  # single line
    2: (0, 0, 0, 0, 0, 1),  # double line
    3: (-1, 0, 0, 1, 0, 0),  # parallel lines
    4: (0, 0, 0, 0, 1, 0),  # intersecting lines
    5: (0, 0, -1, 1, 0, 0),  # parabola
    6: (-1, 0, 0, 1, 0, 2),  # ellipse
    7: (1, 0, 0, 1, 0, -1),  # hyperbola
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def bbox(polyline):
    """Corners (min, max) of the axis-aligned bounding box of the points."""
    points = np.asarray(polyline, dtype=float)
    if points.size == 0:
        raise ValueError("empty polyline has no bounding box")
    return points.min(axis=0), points.max(axis=0)


def read_txt(path):
    """Points read as whitespace-separated x y pairs from a text file."""
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: no points")
    if len(tokens) % 2:
        raise ValueError(f"{path}: odd number of coordinates")
    try:
        values = [float(t) for t in tokens]
    except ValueError as error:
        raise ValueError(f"{path}: {error}") from error
    return [np.array(pair) for pair in zip(values[::2], values[1::2])]


def write_distances(f, center, radius, resolution, path):
    """Write the graph of f over a square grid as a triangle mesh in OBJ format."""
    if resolution < 2:
        raise ValueError("resolution must be at least 2")
    cx, cy = center
    steps = [i / (resolution - 1) * 2 - 1 for i in range(resolution)]
    lines = []
    for u in steps:
        x = cx + u * radius
        for v in steps:
            y = cy + v * radius
            lines.append(f"v {x!r} {y!r} {float(f((x, y)))!r}")
    for i in range(1, resolution):
        for j in range(1, resolution):
            a = (i - 1) * resolution + j - 1
            b = (i - 1) * resolution + j
            c = i * resolution + j
            d = i * resolution + j - 1
            lines.append(f"f {a + 1} {b + 1} {c + 1}")
            lines.append(f"f {a + 1} {c + 1} {d + 1}")
    Path(path).write_text("\n".join(lines) + "\n")


def _leading_int(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _usage(program):
    print("Usage: ", file=sys.stderr)
    print(f"  {program} <input.txt>", file=sys.stderr)
    print("Or:", file=sys.stderr)
    print(f"  {program} <default curve # (1-7)>", file=sys.stderr)


def main(argv=None):
    """Run the tool; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        _usage("conicfit")
        return 1
    argument = argv[0]

    center = np.zeros(2)
    radius = 4.0
    canonical = _leading_int(argument)
    if canonical in CANONICAL_COEFFS:
        conic = Conic(list(CANONICAL_COEFFS[canonical]))
    else:
        try:
            polyline = read_txt(argument)
            conic = Conic()
            conic.fit(polyline, FitType.CLOSED)
        except (OSError, ValueError) as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        low, high = bbox(polyline)
        center = (low + high) / 2
        radius = float(np.linalg.norm(high - low)) / 2 * 1.2

    print("Conic:" + "".join(f" {c:g}" for c in conic.coeffs))
    print(f"Its type seems to be: {TYPE_NAMES[conic.classify()]}")

    directory = Path(tempfile.gettempdir())
    algebraic = directory / "algebraic.obj"
    distance = directory / "distance.obj"
    resolution = 100
    write_distances(conic.eval, center, radius, resolution, algebraic)
    write_distances(conic.distance, center, radius, resolution, distance)
    print(f"Surface written to {algebraic}.")
    print(f"Approximate distances written to {distance}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())