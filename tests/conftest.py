# Shared test setup: headless Qt platform, a fallback 'qtbot' fixture when
# pytest-qt is not installed, and per-test reset of process-wide chart state
# (service locator, reduced motion flag).

import contextlib
import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    from PyQt6.QtWidgets import QApplication

    @pytest.fixture
    def qtbot():  # type: ignore
        app = QApplication.instance() or QApplication(sys.argv)
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            def wait(self, ms):
                app.processEvents()

            def waitUntil(self, callback, timeout=5000):
                from PyQt6.QtCore import QElapsedTimer

                timer = QElapsedTimer()
                timer.start()
                while not callback():
                    if timer.elapsed() > timeout:
                        raise AssertionError("waitUntil timed out")
                    app.processEvents()

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.close()


@pytest.fixture(autouse=True)
def _reset_chart_state():
    from linechart.design import reduced_motion
    from linechart.services.service_locator import services

    prev_motion = reduced_motion.is_reduced_motion()
    services.clear()
    yield
    services.clear()
    reduced_motion.set_reduced_motion(prev_motion)


@pytest.fixture
def quarterly():
    from linechart.charting.types import ChartData

    return ChartData.from_values(
        [("Q1 2020", 10), ("Q2 2020", 25), ("Q3 2020", 28), ("Q4 2020", 18)]
    )
