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

"""Main window for the Smith Explorer GUI."""

from PySide6.QtWidgets import (
    QMainWindow, QLabel, QFileDialog, QMessageBox,
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QKeySequence

from chart_render import format_point
from export_chart import export_chart
from gui.state import ChartState
from gui.panels.smith_view import SmithView
from gui.dialogs.lock_point import LockPointDialog


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle('Smith Explorer')
        self.resize(700, 760)

        self.state = ChartState()

        self._build_ui()
        self._connect_signals()
        self._update_readout()

    def _build_ui(self):
        # --- Menu Bar ---
        menubar = self.menuBar()

        file_menu = menubar.addMenu('&File')
        self._add_action(file_menu, '&Export Chart...', self._on_export, QKeySequence.Save)
        file_menu.addSeparator()
        self._add_action(file_menu, '&Quit', self.close, QKeySequence.Quit)

        chart_menu = menubar.addMenu('&Chart')
        self._add_action(chart_menu, '&Lock at Impedance...', self._on_lock_point)
        self._add_action(chart_menu, '&Unlock', self._on_unlock)
        self._add_action(chart_menu, '&Reset', self.state.reset)

        help_menu = menubar.addMenu('&Help')
        self._add_action(help_menu, '&About', self._on_about)

        # --- Central chart ---
        self.smith_view = SmithView(self.state, self)
        self.setCentralWidget(self.smith_view)

        # --- Status Bar ---
        self.statusBar().showMessage('Ready')
        self._lbl_r = QLabel()
        self._lbl_z = QLabel()
        self._lbl_lock = QLabel()
        self.statusBar().addPermanentWidget(self._lbl_r)
        self.statusBar().addPermanentWidget(self._lbl_z)
        self.statusBar().addPermanentWidget(self._lbl_lock)

    def _add_action(self, menu, text, slot, shortcut=None):
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(shortcut)
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def _connect_signals(self):
        self.state.updated.connect(self._update_readout)
        self.state.changed.connect(self._on_lock_changed)

    # ---- Readout ----

    @Slot()
    def _update_readout(self):
        frame = self.state.frame()
        self._lbl_r.setText(format_point('Γ', frame.r))
        self._lbl_z.setText(format_point('z', frame.z))
        self._lbl_lock.setText('Locked' if frame.locked else 'Hover')

    @Slot()
    def _on_lock_changed(self):
        if self.state.is_locked:
            self.statusBar().showMessage(
                f"Locked at {format_point('z', self.state.locked_z)}")
        else:
            self.statusBar().showMessage('Unlocked')

    # ---- Chart ----

    @Slot()
    def _on_lock_point(self):
        dlg = LockPointDialog(self.state, self)
        if dlg.exec():
            self._on_lock_changed()

    @Slot()
    def _on_unlock(self):
        if self.state.is_locked:
            self.state.toggle(self.state.cursor_pos)

    # ---- File Operations ----

    @Slot()
    def _on_export(self):
        path, _ = QFileDialog.getSaveFileName(self, 'Export Chart', 'smith_chart.svg',
                                               'SVG Files (*.svg);;PNG Files (*.png)')
        if path:
            try:
                export_chart(path, self.state.frame())
                self.statusBar().showMessage(f'Exported: {path}')
            except (OSError, ValueError) as e:
                QMessageBox.warning(self, 'Export Error', str(e))

    # ---- Dialogs ----

    @Slot()
    def _on_about(self):
        QMessageBox.about(self, 'About Smith Explorer',
                          'Smith Explorer v1.0\n\n'
                          'Interactive Smith chart.\n\n'
                          'Move the mouse to trace the resistance and reactance\n'
                          'circles through a point; click to lock or unlock it.')
