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

"""Background guide circles, computed once at import and never mutated."""

from collections import namedtuple

import numpy as np

from config import (RESISTANCE_MIN, RESISTANCE_MAX, REACTANCE_MIN,
                    REACTANCE_MAX, GUIDE_STEP, GUIDE_EMPHASIS_PERIOD)
from smith_math import resistance_circle, reactance_circle


GuideEntry = namedtuple('GuideEntry', ['geometry', 'emphasized'])


def _param_grid(start, stop, step):
    """Inclusive, ascending grid snapped to the step size.

    Snapping keeps e.g. the reactance 0 entry at exactly 0.0 instead of a
    float residue like 8.9e-16.
    """
    n = int(round((stop - start) / step)) + 1
    grid = np.round(start + np.arange(n) * step, 10)
    grid[grid == 0] = 0.0  # no -0.0
    return tuple(float(v) for v in grid)


def _build(values, locus):
    return tuple(
        GuideEntry(locus(k), i % GUIDE_EMPHASIS_PERIOD == 0)
        for i, k in enumerate(values)
    )


_RESISTANCE_VALUES = _param_grid(RESISTANCE_MIN, RESISTANCE_MAX, GUIDE_STEP)
_REACTANCE_VALUES = _param_grid(REACTANCE_MIN, REACTANCE_MAX, GUIDE_STEP)

RESISTANCE_GUIDES = _build(_RESISTANCE_VALUES, resistance_circle)
REACTANCE_GUIDES = _build(_REACTANCE_VALUES, reactance_circle)
