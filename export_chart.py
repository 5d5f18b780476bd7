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
Headless export of the Smith chart to SVG/PNG.

Renders one frame (unlocked cursor at the centre, or locked on a given
r or z point) through matplotlib's Agg canvas, no window needed.
"""

import os

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from chart_render import make_frame, draw_chart, format_point
from config import FIGURE_SIZE, HOVER_COLOR, SELECT_COLOR
from smith_math import map_r_to_z, map_z_to_r


def frame_for(lock_r=None, lock_z=None):
    """Frame locked on *lock_r* or *lock_z*, or an unlocked centred cursor."""
    if lock_r is not None and lock_z is not None:
        raise ValueError("Give either lock_r or lock_z, not both")
    if lock_r is not None:
        return make_frame(tuple(lock_r), map_r_to_z(lock_r), (0.0, 0.0))
    if lock_z is not None:
        return make_frame(map_z_to_r(lock_z), tuple(lock_z), (0.0, 0.0))
    return make_frame(None, None, (0.0, 0.0))


def export_chart(path, frame=None, hover_color=HOVER_COLOR,
                 select_color=SELECT_COLOR, dpi=150):
    """Render *frame* and save it; the format follows the file extension."""
    if frame is None:
        frame = frame_for()
    fig = Figure(figsize=FIGURE_SIZE)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(1, 1, 1)
    draw_chart(ax, frame, hover_color=hover_color, select_color=select_color)

    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig.savefig(path, dpi=dpi)
    return path


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Export a Smith chart as SVG/PNG')
    parser.add_argument('--output', default='export/smith_chart.svg',
                        help='Output file path (.svg or .png)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--lock-r', nargs=2, type=float, metavar=('RX', 'RY'),
                       help='Lock on a reflection coefficient')
    group.add_argument('--lock-z', nargs=2, type=float, metavar=('ZX', 'ZY'),
                       help='Lock on a normalized impedance')
    parser.add_argument('--hover-color', default=HOVER_COLOR)
    parser.add_argument('--select-color', default=SELECT_COLOR)
    args = parser.parse_args()

    frame = frame_for(lock_r=args.lock_r, lock_z=args.lock_z)
    if frame.locked:
        print(format_point('Γ', frame.r))
        print(format_point('z', frame.z))

    export_chart(args.output, frame, hover_color=args.hover_color,
                 select_color=args.select_color)
    print(f"  Saved: {args.output}")
