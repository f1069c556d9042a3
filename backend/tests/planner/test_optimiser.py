import pytest
from pydantic_extra_types.coordinate import Coordinate

from navigator.models import OptimizedRoute, TravelMode
from navigator.planner import InvalidInputError
from navigator.planner.distance import estimate_segment, haversine_distance
from navigator.planner.optimiser import (nearest_neighbour_order,
                                         optimize_waypoint_order)


def coord(lat, lng):
    return Coordinate(latitude=lat, longitude=lng)  # type: ignore


def equator(*longitudes):
    return [coord(0, lng) for lng in longitudes]


class TestNearestNeighbourOrder:
    """Tests for nearest_neighbour_order function"""

    def test_campus_scenario(self, campus_waypoints):
        """Test that the closer of the two remaining points is visited first"""
        assert nearest_neighbour_order(campus_waypoints) == [0, 2, 1]

    def test_first_waypoint_is_fixed_start(self):
        """Test that index 0 starts the route even when it is an outlier"""
        waypoints = equator(10, 0, 1, 2)

        assert nearest_neighbour_order(waypoints) == [0, 3, 2, 1]

    def test_ties_go_to_lowest_index(self):
        """Test that equidistant candidates resolve to the lower index"""
        assert nearest_neighbour_order(equator(0, 1, -1)) == [0, 1, 2]
        assert nearest_neighbour_order(equator(0, -1, 1)) == [0, 1, 2]

    def test_duplicate_points(self):
        """Test that duplicated waypoints are each visited once"""
        waypoints = equator(0, 2, 0, 2)

        assert nearest_neighbour_order(waypoints) == [0, 2, 1, 3]

    def test_greedy_is_not_always_shortest(self):
        """Test the heuristic picks the nearest point even when it costs more overall"""
        waypoints = equator(0, 1, -1.1, 3)

        order = nearest_neighbour_order(waypoints)

        def length(indices):
            return sum(
                haversine_distance(waypoints[a], waypoints[b])
                for a, b in zip(indices, indices[1:])
            )

        assert order == [0, 1, 3, 2]
        assert length(order) > length([0, 2, 1, 3])

    def test_returns_permutation_for_ten_points(self):
        """Test a full ten-waypoint list"""
        waypoints = [coord(34.72 + i * 0.0007, -79.02 + (i % 3) * 0.001) for i in range(10)]

        order = nearest_neighbour_order(waypoints)

        assert order[0] == 0
        assert sorted(order) == list(range(10))


class TestOptimizeWaypointOrder:
    """Tests for optimize_waypoint_order function"""

    def test_campus_scenario(self, campus_waypoints):
        """Test order, segments and totals for three campus waypoints"""
        result = optimize_waypoint_order(campus_waypoints, TravelMode.WALKING)

        assert isinstance(result, OptimizedRoute)
        assert result.order == [0, 2, 1]
        assert result.mode == TravelMode.WALKING
        assert len(result.segments) == 2
        assert result.segments[0].from_ == campus_waypoints[0]
        assert result.segments[0].to == campus_waypoints[2]
        assert result.segments[1].from_ == campus_waypoints[2]
        assert result.segments[1].to == campus_waypoints[1]

    def test_segments_match_estimates(self, campus_waypoints):
        """Test that each segment uses the distance estimator"""
        result = optimize_waypoint_order(campus_waypoints, TravelMode.CYCLING)

        for segment, (a, b) in zip(result.segments, [(0, 2), (2, 1)]):
            estimate = estimate_segment(
                campus_waypoints[a], campus_waypoints[b], TravelMode.CYCLING
            )
            assert segment.distance_meters == pytest.approx(estimate.distance_meters)
            assert segment.duration_seconds == estimate.duration_seconds

    def test_totals_are_segment_sums(self):
        """Test that totals equal the sum of the segment values"""
        waypoints = [coord(34.72 + i * 0.0013, -79.02 + (i % 4) * 0.002) for i in range(8)]

        result = optimize_waypoint_order(waypoints, TravelMode.DRIVING)

        assert result.total_distance_meters == pytest.approx(
            sum(s.distance_meters for s in result.segments), rel=1e-6
        )
        assert result.total_duration_seconds == sum(
            s.duration_seconds for s in result.segments
        )
        assert len(result.segments) == len(waypoints) - 1

    def test_two_waypoints(self, student_center, library):
        """Test the trivial two-waypoint route"""
        result = optimize_waypoint_order([library, student_center])

        assert result.order == [0, 1]
        assert len(result.segments) == 1
        assert result.segments[0].from_ == library
        assert result.mode == TravelMode.WALKING

    def test_identical_waypoints(self, student_center):
        """Test that repeated points give zero-length segments"""
        result = optimize_waypoint_order([student_center] * 3)

        assert result.order == [0, 1, 2]
        assert result.total_distance_meters == 0
        assert result.total_duration_seconds == 0

    def test_keeps_original_waypoints(self, campus_waypoints):
        """Test that the input list is returned in its original order"""
        result = optimize_waypoint_order(campus_waypoints)

        assert result.waypoints == campus_waypoints

    def test_is_deterministic(self, campus_waypoints):
        """Test that repeated calls give identical output"""
        first = optimize_waypoint_order(campus_waypoints, TravelMode.CYCLING)
        second = optimize_waypoint_order(campus_waypoints, TravelMode.CYCLING)

        assert first.model_dump() == second.model_dump()

    @pytest.mark.parametrize("count", [0, 1])
    def test_too_few_waypoints(self, student_center, count):
        """Test that fewer than two waypoints is rejected"""
        with pytest.raises(InvalidInputError) as exc_info:
            optimize_waypoint_order([student_center] * count)

        assert "At least 2 waypoints" in str(exc_info.value)

    def test_serializes_segment_origin_as_from(self, campus_waypoints):
        """Test that segments dump their origin under the 'from' key"""
        result = optimize_waypoint_order(campus_waypoints)

        dumped = result.model_dump(by_alias=True)

        assert "from" in dumped["segments"][0]
        assert "from_" not in dumped["segments"][0]

    def test_result_is_independent_of_inputs(self, campus_waypoints):
        """Test that changing an input waypoint afterwards leaves the result alone"""
        result = optimize_waypoint_order(campus_waypoints)

        campus_waypoints[0].latitude = 50

        assert result.waypoints[0].latitude == 34.7270
        assert result.segments[0].from_.latitude == 34.7270
