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
Central configuration for the interactive Smith chart.
Logical coordinates are unit-disk based, viewport coordinates are the
fixed-size square drawing surface (y pointing down).
"""

# --- Viewport ---
LOGICAL_SCALE = 100.0        # viewport units per logical unit
VIEWBOX_EXTENT = 102.0       # viewport spans [-102, 102] on both axes
FIGURE_SIZE = (6, 6)         # inches

# --- Guide circles ---
RESISTANCE_MIN = 0.0
RESISTANCE_MAX = 10.0
REACTANCE_MIN = -5.0
REACTANCE_MAX = 5.0
GUIDE_STEP = 0.2
GUIDE_EMPHASIS_PERIOD = 5    # every 5th guide is drawn heavier

# Reactance parameters this close to zero give the real-axis line
REACTANCE_LINE_TOLERANCE = 1e-12

# --- Colors / strokes (line widths in points) ---
HOVER_COLOR = 'red'
SELECT_COLOR = 'blue'
GUIDE_COLOR = 'black'
GUIDE_LW = 0.6
GUIDE_ALPHA = 0.3
GUIDE_ALPHA_EMPHASIS = 0.6
AXIS_LW = 1.0
AXIS_ALPHA = 0.5
CURSOR_LW = 1.6
MARKER_RADIUS = 1.5        # viewport units
