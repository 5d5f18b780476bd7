import os
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import matplotlib
matplotlib.use('Agg')

import pytest
from PySide6.QtWidgets import QApplication


class SignalLog:
    """Records emissions of no-argument Qt signals by name."""

    def __init__(self):
        self.events = []

    def watch(self, signal, name):
        signal.connect(lambda: self.events.append(name))

    def count(self, name):
        return self.events.count(name)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def chart_state(qapp):
    from gui.state import ChartState
    return ChartState()


@pytest.fixture
def signal_log(chart_state):
    log = SignalLog()
    log.watch(chart_state.changed, 'changed')
    log.watch(chart_state.updated, 'updated')
    return log
