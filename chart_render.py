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

"""Drawing of the Smith chart onto a matplotlib Axes.

Everything is drawn in viewport coordinates: the axes span
[-VIEWBOX_EXTENT, VIEWBOX_EXTENT] with the y axis inverted, so the picture
matches the top-down drawing surface the pointer transform works against.
"""

from collections import namedtuple

from matplotlib.patches import Circle

from config import (LOGICAL_SCALE, VIEWBOX_EXTENT, HOVER_COLOR, SELECT_COLOR,
                    GUIDE_COLOR, GUIDE_LW, GUIDE_ALPHA, GUIDE_ALPHA_EMPHASIS,
                    AXIS_LW, AXIS_ALPHA, CURSOR_LW, MARKER_RADIUS)
from guides import RESISTANCE_GUIDES, REACTANCE_GUIDES
from smith_math import map_r_to_z, circles_at, is_line, is_infinite
from transform import logical_to_viewport


# r/z: active point (locked point, or the hover cursor)
# resistance/reactance: loci through the active point
# marker: locked r-point, None while unlocked
ChartFrame = namedtuple('ChartFrame', ['r', 'z', 'resistance', 'reactance',
                                       'locked', 'marker'])


def make_frame(locked_r, locked_z, cursor_pos):
    """Build the per-render snapshot from the chart state."""
    if locked_r is None:
        r = tuple(cursor_pos)
        z = map_r_to_z(r)
    else:
        r, z = locked_r, locked_z
    resistance, reactance = circles_at(z)
    return ChartFrame(
        r=r,
        z=z,
        resistance=resistance,
        reactance=reactance,
        locked=locked_r is not None,
        marker=locked_r,
    )


def format_point(label, point, digits=3):
    """Readout text, e.g. 'z = 1.000 + j0.500'."""
    if point is None:
        return f'{label} = --'
    if is_infinite(point):
        return f'{label} = ∞'
    x, y = point
    sign = '-' if y < 0 else '+'
    return f'{label} = {x:.{digits}f} {sign} j{abs(y):.{digits}f}'


# ------------------------------------------------------------------
# Primitives
# ------------------------------------------------------------------

def setup_viewport(ax):
    e = VIEWBOX_EXTENT
    ax.set_xlim(-e, e)
    ax.set_ylim(e, -e)  # top-down, y grows downwards
    ax.set_aspect('equal', adjustable='box')
    ax.axis('off')


def unit_clip(ax):
    """Clip patch for the unit circle, in the axes' data coordinates."""
    return Circle((0, 0), LOGICAL_SCALE, transform=ax.transData)


def add_locus(ax, geometry, clip=None, **style):
    """Add a Circle or Line locus (logical coordinates) to *ax*."""
    if is_line(geometry):
        x0, y0 = logical_to_viewport(geometry.x0, geometry.y0)
        x1, y1 = logical_to_viewport(geometry.x1, geometry.y1)
        artist, = ax.plot([x0, x1], [y0, y1], **style)
    else:
        cx, cy = logical_to_viewport(geometry.cx, geometry.cy)
        artist = Circle((cx, cy), geometry.radius * LOGICAL_SCALE,
                        fill=False, **style)
        ax.add_patch(artist)
    if clip is not None:
        artist.set_clip_path(clip)
    return artist


# ------------------------------------------------------------------
# Chart layers
# ------------------------------------------------------------------

def draw_background(ax):
    """Coordinate axes and the static guide circles."""
    s = LOGICAL_SCALE
    ax.plot([-s, s], [0, 0], color='black', lw=AXIS_LW, alpha=AXIS_ALPHA)
    ax.plot([0, 0], [-s, s], color='black', lw=AXIS_LW, alpha=AXIS_ALPHA)

    for entry in RESISTANCE_GUIDES:
        add_locus(ax, entry.geometry, color=GUIDE_COLOR, lw=GUIDE_LW,
                  alpha=GUIDE_ALPHA_EMPHASIS if entry.emphasized else GUIDE_ALPHA)

    clip = unit_clip(ax)
    for entry in REACTANCE_GUIDES:
        add_locus(ax, entry.geometry, clip=clip, color=GUIDE_COLOR, lw=GUIDE_LW,
                  alpha=GUIDE_ALPHA_EMPHASIS if entry.emphasized else GUIDE_ALPHA)


def draw_cursor(ax, frame, hover_color=HOVER_COLOR, select_color=SELECT_COLOR):
    """Cursor loci and the locked-point marker.

    Returns a list of the added artists so callers can remove them on the
    next update.
    """
    color = select_color if frame.locked else hover_color
    clip = unit_clip(ax)

    artists = [
        add_locus(ax, frame.resistance, clip=clip, color=color, lw=CURSOR_LW),
        add_locus(ax, frame.reactance,
                  clip=None if is_line(frame.reactance) else clip,
                  color=color, lw=CURSOR_LW),
    ]

    if frame.locked and not is_infinite(frame.marker):
        dot = Circle(logical_to_viewport(*frame.marker), MARKER_RADIUS,
                     color=color, zorder=5)
        ax.add_patch(dot)
        artists.append(dot)
    return artists


def draw_chart(ax, frame, hover_color=HOVER_COLOR, select_color=SELECT_COLOR):
    """Draw a complete chart for *frame* onto a fresh axes."""
    ax.clear()
    setup_viewport(ax)
    draw_background(ax)
    return draw_cursor(ax, frame, hover_color=hover_color,
                       select_color=select_color)
