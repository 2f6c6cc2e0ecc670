import os

# Qt sin pantalla para los tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


class RecordingSurface:
    def __init__(self):
        self.lines = []
        self.leaves = []

    def draw_line(self, start, end, width, color):
        self.lines.append((start, end, width, color))

    def draw_leaf(self, center, diameter, color):
        self.leaves.append((center, diameter, color))


class FixedRandom:
    """Devuelve siempre el mismo valor en random()."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def surface():
    return RecordingSurface()
