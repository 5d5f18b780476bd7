import pytest
from matplotlib.backend_bases import MouseButton, MouseEvent

from gui.panels.smith_view import SmithView
from transform import logical_to_viewport


# One device pixel is about 0.005 in logical units at the default size
PIXEL_TOL = 0.01


@pytest.fixture
def view(chart_state):
    return SmithView(chart_state)


def _device_xy(view, logical):
    ax = view._ax
    x, y = ax.transData.transform(logical_to_viewport(*logical))
    return x, y


def _send(view, name, x, y, button=None):
    event = MouseEvent(name, view._canvas, x, y, button=button)
    view._canvas.callbacks.process(name, event)


def _move(view, logical):
    _send(view, 'motion_notify_event', *_device_xy(view, logical))


def _click(view, logical, button=MouseButton.LEFT):
    _send(view, 'button_press_event', *_device_xy(view, logical), button=button)


def test_hover_moves_cursor(view, chart_state):
    _move(view, (0.5, 0.3))
    assert chart_state.cursor_pos == pytest.approx((0.5, 0.3), abs=PIXEL_TOL)
    assert not chart_state.is_locked


def test_hover_below_real_axis(view, chart_state):
    _move(view, (-0.4, -0.6))
    x, y = chart_state.cursor_pos
    assert x == pytest.approx(-0.4, abs=PIXEL_TOL)
    assert y == pytest.approx(-0.6, abs=PIXEL_TOL)


def test_left_click_locks_and_unlocks(view, chart_state, signal_log):
    _click(view, (0.5, 0.3))
    assert chart_state.is_locked
    assert chart_state.locked_r == pytest.approx((0.5, 0.3), abs=PIXEL_TOL)

    _move(view, (-0.2, 0.1))
    assert chart_state.locked_r == pytest.approx((0.5, 0.3), abs=PIXEL_TOL)

    _click(view, (-0.2, 0.1))
    assert not chart_state.is_locked
    assert signal_log.count('changed') == 2


def test_right_click_ignored(view, chart_state, signal_log):
    _click(view, (0.5, 0.3), button=MouseButton.RIGHT)
    assert not chart_state.is_locked
    assert signal_log.count('changed') == 0


def test_events_outside_axes_ignored(view, chart_state, signal_log):
    _send(view, 'motion_notify_event', -50, -50)
    _send(view, 'button_press_event', -50, -50, button=MouseButton.LEFT)
    assert chart_state.cursor_pos == (0.0, 0.0)
    assert not chart_state.is_locked
    assert signal_log.events == []


def test_cursor_artists_replaced_on_update(view, chart_state):
    before = list(view._cursor_artists)
    _click(view, (0.5, 0.3))
    assert len(view._cursor_artists) == 3
    for artist in before:
        assert artist not in view._ax.patches and artist not in view._ax.lines
