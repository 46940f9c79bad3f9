"""
Shared pytest fixtures for hypergrid tests.
"""

import pytest
from pubsub import pub

from hypergrid.config import HypergridConfig
from hypergrid.geometry import Area


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a compositor")


@pytest.fixture(autouse=True)
def reset_bus():
    """Drop every bus subscription a test made."""
    yield
    pub.unsubAll()


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""

    class MockWindow:
        def __init__(self, object_id=1, title="test", width=800, height=600):
            self.object_id = object_id
            self.title = title
            self.width = width
            self.height = height
            self.app_id = "test_app"

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockWindow):
                return False
            return self.object_id == other.object_id

        def __repr__(self):
            return f"MockWindow({self.object_id})"

    return MockWindow


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000.0


@pytest.fixture
def clock():
    """Clock that only moves when a test advances it."""
    return FakeClock()


@pytest.fixture
def square_area():
    """Square 1000x1000 workspace."""
    return Area(0, 0, 1000, 1000)


@pytest.fixture
def standard_area():
    """Standard 1920x1080 workspace."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def config():
    """Default gaps (5 in, 10 out) and a linear 300ms animation."""
    return HypergridConfig(gaps_in=5, gaps_out=10, bezier=(0.0, 0.0, 1.0, 1.0))
