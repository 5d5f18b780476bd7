import math

import pytest

from smith_math import map_r_to_z, map_z_to_r, is_line, INFINITE_POINT


P = (0.3, -0.4)


def test_initial_state(chart_state):
    assert chart_state.locked_r is None
    assert chart_state.locked_z is None
    assert chart_state.cursor_pos == (0.0, 0.0)
    assert not chart_state.is_locked


def test_hover_lock_hover_unlock_sequence(chart_state, signal_log):
    assert chart_state.hover(P)
    assert chart_state.cursor_pos == P
    assert chart_state.locked_r is None
    assert signal_log.count('changed') == 0

    chart_state.toggle(P)
    assert chart_state.is_locked
    assert chart_state.locked_r == pytest.approx(P)
    assert chart_state.locked_z == pytest.approx(map_r_to_z(P))
    assert signal_log.count('changed') == 1

    assert not chart_state.hover((0.9, 0.1))
    assert chart_state.cursor_pos == P

    chart_state.toggle((0.9, 0.1))
    assert chart_state.locked_r is None
    assert chart_state.locked_z is None
    assert signal_log.count('changed') == 2


def test_ignored_hover_emits_nothing(chart_state, signal_log):
    chart_state.toggle(P)
    before = list(signal_log.events)
    chart_state.hover((0.1, 0.1))
    assert signal_log.events == before


def test_hover_emits_update(chart_state, signal_log):
    chart_state.hover(P)
    assert signal_log.events == ['updated']


@pytest.mark.parametrize("locked_first", [False, True])
def test_set_z_derives_r(chart_state, locked_first):
    if locked_first:
        chart_state.toggle(P)
    q = (2.0, -1.5)
    chart_state.locked_z = q
    assert chart_state.locked_z == q
    assert chart_state.locked_r == pytest.approx(map_z_to_r(q))


def test_set_r_derives_z(chart_state):
    chart_state.locked_r = (-0.2, 0.6)
    assert chart_state.is_locked
    assert chart_state.locked_z == pytest.approx(map_r_to_z((-0.2, 0.6)))


@pytest.mark.parametrize("attr", ['locked_r', 'locked_z'])
def test_setting_none_clears_both(chart_state, attr):
    chart_state.set_r(P)
    setattr(chart_state, attr, None)
    assert chart_state.locked_r is None
    assert chart_state.locked_z is None


def test_direct_writes_notify_but_do_not_signal_change(chart_state, signal_log):
    chart_state.set_z((1.0, 1.0))
    chart_state.set_r(None)
    assert signal_log.events == ['updated', 'updated']


def test_invalid_point_leaves_state_untouched(chart_state):
    chart_state.set_r(P)
    with pytest.raises(ValueError):
        chart_state.set_r((math.nan, 0.0))
    assert chart_state.locked_r == pytest.approx(P)
    assert chart_state.locked_z == pytest.approx(map_r_to_z(P))


def test_reset(chart_state, signal_log):
    chart_state.hover(P)
    chart_state.toggle(P)
    signal_log.events.clear()
    chart_state.reset()
    assert chart_state.locked_r is None
    assert chart_state.cursor_pos == (0.0, 0.0)
    assert signal_log.count('changed') == 1

    signal_log.events.clear()
    chart_state.reset()
    assert signal_log.count('changed') == 0


def test_frame_follows_cursor_when_unlocked(chart_state):
    chart_state.hover((0.5, 0.0))
    frame = chart_state.frame()
    assert not frame.locked
    assert frame.marker is None
    assert frame.r == (0.5, 0.0)
    assert frame.z == pytest.approx((3.0, 0.0))
    assert is_line(frame.reactance)


def test_frame_uses_locked_point(chart_state):
    chart_state.toggle(P)
    chart_state.hover((0.0, 0.0))
    frame = chart_state.frame()
    assert frame.locked
    assert frame.r == pytest.approx(P)
    assert frame.marker == pytest.approx(P)
    assert frame.z == pytest.approx(chart_state.locked_z)
    assert not is_line(frame.reactance)


def test_lock_on_open_circuit_is_not_nan(chart_state):
    chart_state.toggle((1.0, 0.0))
    assert chart_state.locked_z == INFINITE_POINT
    frame = chart_state.frame()
    assert frame.resistance.radius == 0.0
    assert is_line(frame.reactance)


def test_reset_emits_single_update(chart_state, signal_log):
    chart_state.toggle(P)
    signal_log.events.clear()
    chart_state.reset()
    assert signal_log.events == ['updated', 'changed']

    signal_log.events.clear()
    chart_state.reset()
    assert signal_log.events == ['updated']


def test_reset_unlocks_through_set_r(chart_state, monkeypatch):
    calls = []
    original = chart_state.set_r
    monkeypatch.setattr(chart_state, 'set_r',
                        lambda value: (calls.append(value), original(value)))
    chart_state.toggle(P)
    calls.clear()
    chart_state.reset()
    assert calls == [None]
    assert chart_state.locked_z is None
