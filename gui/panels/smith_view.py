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

"""Interactive Smith chart panel."""

from PySide6.QtWidgets import QWidget, QVBoxLayout
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from chart_render import setup_viewport, draw_background, draw_cursor
from config import FIGURE_SIZE, HOVER_COLOR, SELECT_COLOR
from transform import device_to_logical


class SmithView(QWidget):
    """Smith chart canvas: hover moves the cursor, click toggles the lock."""

    def __init__(self, state, parent=None, hover_color=HOVER_COLOR,
                 select_color=SELECT_COLOR):
        super().__init__(parent)
        self._state = state
        self._hover_color = hover_color
        self._select_color = select_color

        self._fig = Figure(figsize=FIGURE_SIZE, tight_layout=True)
        self._canvas = FigureCanvasQTAgg(self._fig)
        self._ax = self._fig.add_subplot(1, 1, 1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._canvas)

        self._cursor_artists = []

        setup_viewport(self._ax)
        draw_background(self._ax)
        self._redraw_cursor()

        self._canvas.mpl_connect('motion_notify_event', self._on_mouse_move)
        self._canvas.mpl_connect('button_press_event', self._on_mouse_press)
        self._state.updated.connect(self._redraw_cursor)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def _logical_point(self, event):
        if event.inaxes != self._ax:
            return None
        return device_to_logical(event.x, event.y,
                                 self._ax.transData.inverted())

    def _on_mouse_move(self, event):
        point = self._logical_point(event)
        if point is not None:
            self._state.hover(point)

    def _on_mouse_press(self, event):
        if event.button != 1:
            return
        point = self._logical_point(event)
        if point is not None:
            self._state.toggle(point)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _redraw_cursor(self):
        for artist in self._cursor_artists:
            artist.remove()
        self._cursor_artists = draw_cursor(
            self._ax, self._state.frame(),
            hover_color=self._hover_color, select_color=self._select_color)
        self._canvas.draw_idle()
