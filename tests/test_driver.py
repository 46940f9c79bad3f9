"""
Unit tests for the animation driver and per-window frames.
"""

import pytest
from pubsub import pub

from hypergrid import topics
from hypergrid.driver import AnimationDriver, Frame, WindowFrame
from hypergrid.geometry import Area
from hypergrid.tiling import TileTree


class Recorder(list):
    """List that can also hold the listeners it records for."""


@pytest.fixture
def events():
    """Record driver bus events."""
    received = Recorder()

    def on_started():
        received.append("started")

    def on_finished():
        received.append("finished")

    def on_ready(frame):
        received.append(frame)

    pub.subscribe(on_started, topics.ANIMATION_STARTED)
    pub.subscribe(on_finished, topics.ANIMATION_FINISHED)
    pub.subscribe(on_ready, topics.FRAME_READY)
    # Keep listeners alive, pubsub only holds weak references
    received.listeners = (on_started, on_finished, on_ready)
    return received


@pytest.fixture
def tree(config, square_area, clock):
    return TileTree(config, square_area, clock)


@pytest.fixture
def driver(tree):
    return AnimationDriver(lambda: [tree], lambda: tree)


@pytest.mark.unit
class TestWindowFrame:
    """Test transform and placement math."""

    def test_transform_identity_at_goal(self):
        frame = WindowFrame("w", Area(0, 0, 100, 100), Area(0, 0, 100, 100))

        transform = frame.transform()

        assert transform.translation_x == 0.0
        assert transform.translation_y == 0.0
        assert transform.scale_x == 1.0
        assert transform.scale_y == 1.0
        assert transform.alpha == 1.0

    def test_transform_combines_size_and_pop_scale(self):
        frame = WindowFrame(
            "w", Area(0, 0, 50, 50), Area(0, 0, 100, 100), scale=0.5, alpha=0.3
        )

        transform = frame.transform()

        assert transform.scale_x == pytest.approx(0.25)
        assert transform.scale_y == pytest.approx(0.25)
        assert transform.translation_x == pytest.approx(-25.0)
        assert transform.translation_y == pytest.approx(-25.0)
        assert transform.alpha == pytest.approx(0.3)

    def test_transform_clamps_size_ratio(self):
        tiny = WindowFrame("w", Area(0, 0, 1, 1), Area(0, 0, 1000, 1000))
        huge = WindowFrame("w", Area(0, 0, 5000, 5000), Area(0, 0, 100, 100))

        assert tiny.transform().scale_x == pytest.approx(0.1)
        assert huge.transform().scale_y == pytest.approx(10.0)

    def test_placement_without_pseudo_is_goal(self):
        frame = WindowFrame(
            "w",
            Area(0, 0, 10, 10),
            Area(100, 100, 1000, 500),
            preferred_size=Area(0, 0, 400, 300),
        )

        assert frame.placement() == Area(100, 100, 1000, 500)

    def test_pseudo_placement_centers_preferred_size(self):
        frame = WindowFrame(
            "w",
            Area(100, 100, 1000, 500),
            Area(100, 100, 1000, 500),
            pseudotiled=True,
            preferred_size=Area(0, 0, 400, 300),
        )

        assert frame.placement() == Area(400, 200, 400, 300)

    def test_pseudo_placement_never_exceeds_tile(self):
        frame = WindowFrame(
            "w",
            Area(0, 0, 300, 200),
            Area(0, 0, 300, 200),
            pseudotiled=True,
            preferred_size=Area(0, 0, 800, 100),
        )

        assert frame.placement() == Area(0, 50, 300, 100)

    def test_frame_get(self):
        first = WindowFrame("a", Area(), Area(0, 0, 1, 1))
        frame = Frame([first])

        assert frame.get("a") is first
        assert frame.get("b") is None


@pytest.mark.unit
class TestAnimationDriver:
    """Test the edge-triggered frame loop."""

    def test_start_is_edge_triggered(self, driver, events):
        assert driver.start() is True
        assert driver.start() is False

        assert driver.active
        assert events == ["started"]

    def test_stop_only_when_active(self, driver, events):
        driver.stop()
        assert events == []

        driver.start()
        driver.stop()
        assert events == ["started", "finished"]
        assert not driver.active

    def test_tick_reports_animating_windows(self, driver, tree, mock_window, clock, events):
        w1 = mock_window(1)
        tree.add_view(w1)
        driver.start()

        clock.advance(150)
        frame = driver.tick()

        assert frame.animating
        assert not frame.final
        window_frame = frame.get(w1)
        assert window_frame.goal == Area(10, 10, 980, 980)
        assert window_frame.scale == pytest.approx(0.9)
        assert window_frame.alpha == pytest.approx(0.5)
        assert not window_frame.closing
        assert events[-1] is frame
        assert driver.active

    def test_tick_settles_and_stops(self, driver, tree, mock_window, clock, events):
        w1, w2 = mock_window(1), mock_window(2)
        tree.add_view(w1)
        tree.add_view(w2)
        driver.start()

        clock.advance(400)
        frame = driver.tick()

        assert frame.final
        assert not frame.animating
        assert not driver.active
        assert frame.get(w1).current == Area(10, 10, 980, 487)
        assert frame.get(w2).current == frame.get(w2).goal
        assert frame.get(w2).transform().scale_x == 1.0
        assert events[-2:] == ["finished", frame]

    def test_frame_topic_drives_ticks(self, driver, tree, mock_window, clock, events):
        tree.add_view(mock_window(1))

        pub.sendMessage(topics.FRAME)
        assert not any(isinstance(event, Frame) for event in events)

        driver.start()
        clock.advance(400)
        pub.sendMessage(topics.FRAME)

        frames = [event for event in events if isinstance(event, Frame)]
        assert len(frames) == 1
        assert frames[0].final
        assert not driver.active

    def test_closing_windows_are_reported(self, driver, tree, mock_window, clock):
        w1, w2 = mock_window(1), mock_window(2)
        tree.add_view(w1)
        tree.add_view(w2)
        clock.advance(400)
        driver.tick()

        tree.remove_view(w2)
        driver.start()
        clock.advance(100)
        frame = driver.tick()

        closing = frame.get(w2)
        assert closing.closing
        assert closing.alpha < 1.0
        assert not frame.get(w1).closing

    def test_degenerate_goals_are_skipped(self, config, clock, mock_window):
        tree = TileTree(config, Area(0, 0, 24, 24), clock)
        tree.add_view(mock_window(1))
        tree.add_view(mock_window(2))
        driver = AnimationDriver(lambda: [tree], lambda: tree)

        assert driver.snapshot(tree) == []
        assert driver.settle(tree).windows == []

    def test_only_active_tree_is_reported(self, config, square_area, clock, mock_window):
        visible = TileTree(config, square_area, clock)
        hidden = TileTree(config, square_area, clock)
        visible.add_view(mock_window(1))
        hidden.add_view(mock_window(2))
        driver = AnimationDriver(lambda: [visible, hidden], lambda: visible)

        clock.advance(100)
        frame = driver.tick()

        assert frame.get(mock_window(1)) is not None
        assert frame.get(mock_window(2)) is None
        assert hidden.view_scale_alpha(mock_window(2))[1] == pytest.approx(1 / 3, abs=1e-3)

    def test_no_active_tree(self, clock):
        driver = AnimationDriver(lambda: [], lambda: None)

        frame = driver.tick()

        assert frame.final
        assert frame.windows == []
