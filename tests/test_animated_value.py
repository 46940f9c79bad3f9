"""
Unit tests for animated values.
"""

import pytest
from hypergrid.animation import AnimatedValue, AnimationConfig, LINEAR


def linear(duration_ms=100.0):
    return AnimationConfig(curve=LINEAR, duration_ms=duration_ms)


@pytest.mark.unit
class TestAnimatedValue:
    """Test set, warp and tick."""

    def test_initial_state(self, clock):
        """A new value is idle at its initial value."""
        value = AnimatedValue(5.0, linear(), clock=clock)

        assert value.value == 5.0
        assert value.goal == 5.0
        assert value.start == 5.0
        assert not value.is_animating()
        assert value.tick() is False

    def test_set_without_animation_snaps(self, clock):
        """animate=False jumps straight to the goal."""
        value = AnimatedValue(0.0, linear(), clock=clock)

        value.set(42.0, animate=False)

        assert value.value == 42.0
        assert value.start == 42.0
        assert value.goal == 42.0
        assert not value.is_animating()

    @pytest.mark.parametrize("duration", [0.0, -50.0])
    def test_non_positive_duration_snaps(self, clock, duration):
        """Zero or negative duration disables the animation."""
        value = AnimatedValue(0.0, linear(duration), clock=clock)

        value.set(10.0)

        assert value.value == 10.0
        assert not value.is_animating()

    def test_disabled_config_snaps(self, clock):
        """A disabled animation type snaps."""
        config = AnimationConfig(curve=LINEAR, duration_ms=100.0, enabled=False)
        value = AnimatedValue(0.0, config, clock=clock)

        value.set(10.0)

        assert value.value == 10.0
        assert not value.is_animating()

    def test_interpolates_halfway(self, clock):
        """Halfway through a linear animation the value is halfway."""
        value = AnimatedValue(0.0, linear(100.0), clock=clock)
        value.set(100.0)

        clock.advance(50)

        assert value.tick() is True
        assert value.value == 50.0
        assert value.is_animating()

    def test_completes_exactly_on_goal(self, clock):
        """Finishing snaps value and start to the goal."""
        value = AnimatedValue(0.0, linear(100.0), clock=clock)
        value.set(7.25)

        clock.advance(150)

        assert value.tick() is False
        assert value.value == 7.25
        assert value.start == 7.25
        assert value.goal == 7.25
        assert not value.is_animating()

    def test_integral_truncates_while_animating(self, clock):
        """Integer values truncate mid-animation."""
        value = AnimatedValue(0, linear(100.0), integral=True, clock=clock)
        value.set(10)

        clock.advance(33)
        value.tick()

        assert value.value == 3
        assert isinstance(value.value, int)

        clock.advance(100)
        value.tick()
        assert value.value == 10

    def test_retarget_starts_from_current_value(self, clock):
        """Setting a new goal mid-animation starts from the interpolated value."""
        value = AnimatedValue(0.0, linear(100.0), clock=clock)
        value.set(100.0)
        clock.advance(50)
        value.tick()

        value.set(0.0)

        assert value.start == 50.0
        assert value.goal == 0.0
        assert value.is_animating()

        clock.advance(50)
        value.tick()
        assert value.value == 25.0

    def test_tick_is_idempotent_within_an_instant(self, clock):
        """Ticking twice at the same time gives the same value."""
        value = AnimatedValue(0.0, linear(100.0), clock=clock)
        value.set(80.0)
        clock.advance(25)

        value.tick()
        first = value.value
        value.tick()

        assert value.value == first

    def test_converges_with_increasing_time(self, clock):
        """Regular frame ticks finish the animation once duration has passed."""
        value = AnimatedValue(0.0, AnimationConfig(duration_ms=300.0), clock=clock)
        value.set(1.0)

        seen = []
        frames = 0
        while value.tick():
            seen.append(value.value)
            clock.advance(16)
            frames += 1
            assert frames < 100

        assert value.value == 1.0
        assert not value.is_animating()
        assert seen == sorted(seen)
        assert clock.now * 1000 >= 300 - 16

    def test_warp_cancels_animation(self, clock):
        """warp pins the value with no transition."""
        value = AnimatedValue(0.0, linear(100.0), clock=clock)
        value.set(100.0)

        value.warp(3.0)

        assert value.value == 3.0
        assert value.goal == 3.0
        assert not value.is_animating()

    def test_config_change_to_zero_duration_snaps_on_tick(self, clock):
        """An animation whose duration drops to zero finishes on the next tick."""
        value = AnimatedValue(0.0, linear(100.0), clock=clock)
        value.set(100.0)

        value.set_config(linear(0.0))

        assert value.tick() is False
        assert value.value == 100.0
