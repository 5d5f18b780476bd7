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

"""Conversions between device (pointer), viewport and logical coordinates.

Device coordinates come from the windowing layer. The viewport is the
square drawing surface spanning [-VIEWBOX_EXTENT, VIEWBOX_EXTENT] with y
pointing down. Logical coordinates are the unit-disk space used by
smith_math, with y pointing up.
"""

import numpy as np

from config import LOGICAL_SCALE


def device_to_viewport(pointer_x, pointer_y, viewport_transform):
    """Map a pointer position into viewport coordinates.

    Args:
        pointer_x, pointer_y: device (display) coordinates of the event.
        viewport_transform: display -> viewport transform. Either a
            matplotlib Transform (e.g. ``ax.transData.inverted()``) or a
            3x3 affine matrix.

    Returns:
        (vx, vy) tuple of floats.
    """
    if hasattr(viewport_transform, 'transform'):
        vx, vy = viewport_transform.transform((pointer_x, pointer_y))
        return float(vx), float(vy)

    m = np.asarray(viewport_transform, dtype=float)
    if m.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 affine matrix, got shape {m.shape}")
    vx, vy, w = m @ np.array([pointer_x, pointer_y, 1.0])
    return float(vx / w), float(vy / w)


def viewport_to_logical(vx, vy):
    """Viewport -> logical. The y axis is flipped; nothing is clamped."""
    return (vx / LOGICAL_SCALE, -vy / LOGICAL_SCALE)


def logical_to_viewport(x, y):
    return (x * LOGICAL_SCALE, -y * LOGICAL_SCALE)


def device_to_logical(pointer_x, pointer_y, viewport_transform):
    vx, vy = device_to_viewport(pointer_x, pointer_y, viewport_transform)
    return viewport_to_logical(vx, vy)
