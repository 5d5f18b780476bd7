# Smith Explorer — Interactive Smith Chart Tool
# Copyright (C) 2026 Insyght B.V.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Smith chart mathematics:
- mapping between reflection coefficient r and normalized impedance z
- constant-resistance / constant-reactance loci in the r-plane

Points are (x, y) pairs of floats; whether a pair is an r or a z value is
up to the caller. The chart's point at infinity (r = 1 or z = -1) is
returned as INFINITE_POINT rather than as IEEE infinities/NaN.
"""

import math
from collections import namedtuple

from config import REACTANCE_LINE_TOLERANCE


Circle = namedtuple('Circle', ['cx', 'cy', 'radius'])
Line = namedtuple('Line', ['x0', 'y0', 'x1', 'y1'])

INFINITE_POINT = (math.inf, 0.0)

# Locus collapsed onto the open-circuit point r = 1
_POINT_CIRCLE = Circle(1.0, 0.0, 0.0)
# Re(z) = -1: tangent to the unit circle at r = 1
_VERTICAL_LINE = Line(1.0, -1.0, 1.0, 1.0)
# Im(z) = 0: the real axis
_REAL_AXIS = Line(-1.0, 0.0, 1.0, 0.0)


def is_infinite(point):
    """True if *point* is the chart's point at infinity."""
    return math.isinf(point[0]) or math.isinf(point[1])


def is_line(geometry):
    """True if a locus is the degenerate straight-line variant."""
    return isinstance(geometry, Line)


def _as_point(point):
    try:
        x, y = point
        x, y = float(x), float(y)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Expected an (x, y) pair of numbers, got {point!r}") from exc
    if math.isnan(x) or math.isnan(y):
        raise ValueError(f"Point has NaN coordinates: {point!r}")
    return x, y


def _as_param(k):
    k = float(k)
    if math.isnan(k):
        raise ValueError("Circle parameter is NaN")
    return k


# ============================================================
# r <-> z mapping
# ============================================================

def map_r_to_z(r):
    """Normalized impedance z = (1 + r) / (1 - r)."""
    rx, ry = _as_point(r)
    if is_infinite((rx, ry)):
        return (-1.0, 0.0)
    # factored forms keep precision next to r = 1
    denom = (1 - rx)**2 + ry**2
    if denom == 0:
        return INFINITE_POINT
    return (
        ((1 - rx) * (1 + rx) - ry**2) / denom,
        2 * ry / denom,
    )


def map_z_to_r(z):
    """Reflection coefficient r = (z - 1) / (z + 1)."""
    zx, zy = _as_point(z)
    if is_infinite((zx, zy)):
        return (1.0, 0.0)
    denom = (zx + 1)**2 + zy**2
    if denom == 0:
        return INFINITE_POINT
    return (
        ((zx - 1) * (zx + 1) + zy**2) / denom,
        2 * zy / denom,
    )


# ============================================================
# Guide loci
# ============================================================

def resistance_circle(k):
    """Locus of Re(z) = k in the r-plane.

    Centre (k/(k+1), 0), radius 1/|k+1|. Returns a vertical Line for
    k = -1 and a zero-radius circle at r = 1 for infinite k.
    """
    k = _as_param(k)
    if math.isinf(k):
        return _POINT_CIRCLE
    if k == -1:
        return _VERTICAL_LINE
    return Circle(k / (k + 1), 0.0, 1 / abs(k + 1))


def reactance_circle(k):
    """Locus of Im(z) = k in the r-plane.

    Centre (1, 1/k), radius |1/k|. For k = 0 the locus is the real axis,
    returned as a Line.
    """
    k = _as_param(k)
    if math.isinf(k):
        return _POINT_CIRCLE
    if abs(k) <= REACTANCE_LINE_TOLERANCE:
        return _REAL_AXIS
    return Circle(1.0, 1 / k, abs(1 / k))


def circles_at(z):
    """Resistance and reactance loci that intersect at normalized impedance z."""
    zx, zy = z
    return resistance_circle(zx), reactance_circle(zy)
