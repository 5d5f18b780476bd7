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

"""Cursor / lock state model for the Smith chart GUI."""

from PySide6.QtCore import QObject, Signal

from chart_render import make_frame
from smith_math import map_r_to_z, map_z_to_r


class ChartState(QObject):
    """Holds the locked r/z pair and the live hover cursor.

    The lock pair is only written through set_r() / set_z(), each of which
    recomputes the other half, so r and z can never drift apart.

    Signals:
        changed  -- once per lock/unlock transition triggered by toggle()
        updated  -- after any property write; panels redraw on it
    """

    changed = Signal()
    updated = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._r = None
        self._z = None
        self._cursor_pos = (0.0, 0.0)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def locked_r(self):
        return self._r

    @locked_r.setter
    def locked_r(self, value):
        self.set_r(value)

    @property
    def locked_z(self):
        return self._z

    @locked_z.setter
    def locked_z(self, value):
        self.set_z(value)

    @property
    def cursor_pos(self):
        return self._cursor_pos

    @cursor_pos.setter
    def cursor_pos(self, value):
        x, y = value
        self._cursor_pos = (float(x), float(y))
        self.updated.emit()

    @property
    def is_locked(self):
        return self._r is not None

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_r(self, value):
        """Set the locked reflection coefficient (None unlocks)."""
        if value is None:
            self._r = self._z = None
        else:
            z = map_r_to_z(value)
            self._r = tuple(float(v) for v in value)
            self._z = z
        self.updated.emit()

    def set_z(self, value):
        """Set the locked normalized impedance (None unlocks)."""
        if value is None:
            self._r = self._z = None
        else:
            r = map_z_to_r(value)
            self._z = tuple(float(v) for v in value)
            self._r = r
        self.updated.emit()

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def hover(self, point):
        """Track the pointer. Ignored while locked; returns True if applied."""
        if self.is_locked:
            return False
        self.cursor_pos = point
        return True

    def toggle(self, point):
        """Lock at *point* when unlocked, unlock otherwise."""
        if self.is_locked:
            self.set_r(None)
        else:
            self.set_r(point)
        self.changed.emit()

    def reset(self):
        was_locked = self.is_locked
        self._cursor_pos = (0.0, 0.0)
        self.set_r(None)
        if was_locked:
            self.changed.emit()

    def frame(self):
        """Snapshot for the renderer."""
        return make_frame(self._r, self._z, self._cursor_pos)
