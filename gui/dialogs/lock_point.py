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

"""Dialog for locking the chart at a typed-in normalized impedance."""

from PySide6.QtWidgets import (QDialog, QFormLayout, QDoubleSpinBox,
                                QDialogButtonBox)


class LockPointDialog(QDialog):
    """Modal dialog to enter z = R + jX (normalized).

    Pre-filled from ChartState.locked_z when locked, otherwise from the
    impedance under the cursor. Writes back through ChartState.set_z on
    accept, which also derives the reflection coefficient.
    """

    def __init__(self, state, parent=None):
        super().__init__(parent)
        self.state = state
        self.setWindowTitle('Lock at Impedance')
        self.setMinimumWidth(300)

        self._spinboxes = {}
        self._build_ui()

    def _build_ui(self):
        layout = QFormLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        z = self.state.frame().z
        fields = [
            ('R', 'Resistance (R/Z0)', (0.0, 1000.0), z[0]),
            ('X', 'Reactance (X/Z0)', (-1000.0, 1000.0), z[1]),
        ]

        for key, label, (lo, hi), current in fields:
            spin = QDoubleSpinBox()
            spin.setRange(lo, hi)
            spin.setSingleStep(0.1)
            spin.setDecimals(3)
            # Cursor may sit outside the disk or on the infinite point
            spin.setValue(min(max(current, lo), hi))
            layout.addRow(label, spin)
            self._spinboxes[key] = spin

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

    def impedance(self):
        return (self._spinboxes['R'].value(), self._spinboxes['X'].value())

    def _on_accept(self):
        self.state.set_z(self.impedance())
        self.accept()
