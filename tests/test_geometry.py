"""Tests for angle helpers and the angular snapping grid."""

import math
import pytest

from vastu_align.core.geometry import (
    MAX_SPOKES,
    angle_of,
    angular_difference,
    angular_grid,
    distance,
    grid_angles,
    point_from_polar,
    snap_angle,
    wrap_360,
)
from vastu_align.core.models.point import Point


ORIGIN = Point(0.0, 0.0)


class TestWrap360:
    """Tests for wrap_360 normalization."""

    @pytest.mark.parametrize(
        "angle, expected",
        [(0.0, 0.0), (360.0, 0.0), (-90.0, 270.0), (450.0, 90.0), (-720.0, 0.0), (359.5, 359.5)],
    )
    def test_wraps_into_range(self, angle, expected):
        assert wrap_360(angle) == pytest.approx(expected)

    def test_tiny_negative_does_not_return_360(self):
        """-1e-20 % 360 is 360.0 in float arithmetic; result must stay below 360."""
        result = wrap_360(-1e-20)
        assert 0.0 <= result < 360.0

    def test_angular_difference(self):
        assert angular_difference(10.0, 350.0) == pytest.approx(20.0)
        assert angular_difference(350.0, 10.0) == pytest.approx(-20.0)
        assert angular_difference(180.0, 0.0) == pytest.approx(180.0)


class TestAngleOf:
    """Tests for angle_of in the canvas convention (y down, clockwise)."""

    @pytest.mark.parametrize(
        "target, expected",
        [
            (Point(10, 0), 0.0),     # screen right
            (Point(0, 10), 90.0),    # screen down
            (Point(-10, 0), 180.0),  # screen left
            (Point(0, -10), 270.0),  # screen up
            (Point(10, 10), 45.0),
        ],
    )
    def test_axis_directions(self, target, expected):
        assert angle_of(ORIGIN, target) == pytest.approx(expected)

    def test_result_in_range(self):
        """Results always lie in [0, 360)."""
        for i in range(72):
            rad = math.radians(i * 5 + 0.3)
            target = Point(math.cos(rad) * 50, math.sin(rad) * 50)
            a = angle_of(ORIGIN, target)
            assert 0.0 <= a < 360.0

    def test_reverse_direction_is_opposite(self):
        """(angle_of(a, b) + 180) mod 360 == angle_of(b, a)."""
        pairs = [
            (Point(0, 0), Point(3, 4)),
            (Point(10, -5), Point(-7, 2)),
            (Point(100, 100), Point(100, 50)),
            (Point(-1, -1), Point(-20, 30)),
        ]
        for a, b in pairs:
            forward = angle_of(a, b)
            backward = angle_of(b, a)
            assert abs(angular_difference((forward + 180.0) % 360.0, backward)) < 1e-9

    def test_coincident_points(self):
        """atan2(0, 0) gives a direction of 0."""
        assert angle_of(Point(5, 5), Point(5, 5)) == 0.0


class TestDistance:
    """Tests for Euclidean distance."""

    def test_3_4_5(self):
        assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)

    def test_symmetric_and_non_negative(self):
        a, b = Point(-2, 7), Point(5, -1)
        assert distance(a, b) == distance(b, a)
        assert distance(a, a) == 0.0


class TestSnapAngle:
    """Tests for snapping to an interval."""

    def test_half_way_rounds_up(self):
        """45 / 10 = 4.5 rounds up to 5, giving 50."""
        assert snap_angle(45.0, 10.0) == 50.0

    def test_rounds_to_nearest(self):
        assert snap_angle(44.9, 10.0) == pytest.approx(40.0)
        assert snap_angle(13.1, 2.0) == pytest.approx(14.0)
        assert snap_angle(12.9, 2.0) == pytest.approx(12.0)

    def test_may_reach_360(self):
        """Snapping is not wrapped."""
        assert snap_angle(359.5, 2.0) == pytest.approx(360.0)

    @pytest.mark.parametrize("interval", [0.5, 1.0, 2.0, 7.0, 10.0, 22.5, 0.3])
    def test_idempotent(self, interval):
        """snap(snap(x)) == snap(x)."""
        for i in range(0, 720):
            x = i * 0.5 + 0.13
            once = snap_angle(x, interval)
            assert snap_angle(once, interval) == pytest.approx(once)

    @pytest.mark.parametrize("interval", [0.0, -2.0])
    def test_non_positive_interval_raises(self, interval):
        with pytest.raises(ValueError):
            snap_angle(10.0, interval)

    def test_overflowing_quotient_returns_angle(self):
        """An interval too fine to divide by leaves the angle as it was."""
        assert snap_angle(45.0, 1e-310) == 45.0


class TestPointFromPolar:
    """Tests for point_from_polar and its inverse relation to angle_of."""

    def test_axis_points(self):
        p = point_from_polar(Point(10, 20), 90.0, 5.0)
        assert p.x == pytest.approx(10.0)
        assert p.y == pytest.approx(25.0)

    def test_round_trip(self):
        """angle_of(O, point_from_polar(O, t, r)) == t."""
        origin = Point(123.4, -56.7)
        for i in range(0, 360 * 4):
            theta = i * 0.25
            for radius in (0.5, 10.0, 1000.0):
                p = point_from_polar(origin, theta, radius)
                assert abs(angular_difference(angle_of(origin, p), theta)) < 1e-7
                assert distance(origin, p) == pytest.approx(radius)


class TestAngularGrid:
    """Tests for the snapping guide spokes."""

    def test_default_interval_spokes(self):
        spokes = angular_grid(2)
        assert len(spokes) == 180
        assert spokes[0].angle == 0.0
        assert spokes[-1].angle == pytest.approx(358.0)
        assert sum(1 for s in spokes if s.is_major) == 36

    def test_uneven_interval(self):
        """A 7 degree grid stops below 360; majors are multiples of 10."""
        spokes = angular_grid(7)
        assert len(spokes) == 52
        assert spokes[-1].angle == pytest.approx(357.0)
        majors = [s.angle for s in spokes if s.is_major]
        assert majors == pytest.approx([0.0, 70.0, 140.0, 210.0, 280.0, 350.0])

    def test_fractional_interval_has_no_drift(self):
        """Spokes are index * interval, so 0.1 degree steps still hit 10 degree majors."""
        angles = grid_angles(0.1)
        assert len(angles) == 3600
        spokes = angular_grid(0.1)
        assert sum(1 for s in spokes if s.is_major) == 36

    @pytest.mark.parametrize("interval", ["abc", 0, -5, None])
    def test_invalid_interval_falls_back_to_two(self, interval):
        assert len(angular_grid(interval)) == 180

    def test_all_angles_below_360(self):
        for interval in (2, 7, 22.5, 45, 100):
            assert all(0.0 <= a < 360.0 for a in grid_angles(interval))

    @pytest.mark.parametrize("interval", [1e-4, 0.05, 1e-310])
    def test_too_fine_interval_falls_back_to_two(self, interval):
        """Intervals finer than the minimum never build a huge grid."""
        assert len(grid_angles(interval)) == 180

    def test_spoke_count_is_bounded(self):
        for interval in (0.1, 0.25, 1.0, 2.0):
            assert len(grid_angles(interval)) <= MAX_SPOKES
