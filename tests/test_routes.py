from __future__ import annotations

import random

import pytest

from ecoroute.domain.models import TravelMode
from ecoroute.graph import (
    Graph,
    aggregate_time,
    alternative_route,
    driving_time,
    restricted_route,
    segments_of,
    shortest_path,
    walking_time,
)


class TestShortestPath:
    def test_scenario_route_and_time(self, scenario_graph):
        path = shortest_path(scenario_graph, "A", "D")

        assert path == ["A", "C", "D"]
        assert driving_time(scenario_graph, path) == 10

    def test_source_equals_destination(self, scenario_graph):
        assert shortest_path(scenario_graph, "B", "B") == ["B"]

    def test_isolated_node_is_unreachable(self, scenario_graph):
        assert shortest_path(scenario_graph, "A", "E") == []


class TestAlternativeRoute:
    def test_scenario_alternative(self, scenario_graph):
        main = shortest_path(scenario_graph, "A", "D")
        alt = alternative_route(scenario_graph, "A", "D", main)

        assert alt == ["A", "B", "D"]
        assert driving_time(scenario_graph, alt) == 20

    def test_main_path_computed_when_omitted(self, scenario_graph):
        assert alternative_route(scenario_graph, "A", "D") == ["A", "B", "D"]

    def test_no_alternative_when_main_path_is_trivial(self, scenario_graph):
        assert alternative_route(scenario_graph, "A", "A", ["A"]) == []
        assert alternative_route(scenario_graph, "A", "E", []) == []

    def test_direct_segment_cannot_be_reused(self):
        graph = Graph()
        graph.add_edge("A", "B", 1, 1)

        assert alternative_route(graph, "A", "B") == []

    def test_alternative_may_be_impossible(self):
        main = ["A", "C", "D"]
        # Without B there is no second way.
        graph = Graph()
        graph.add_edge("A", "C", 5, None)
        graph.add_edge("C", "D", 5, 15)

        assert alternative_route(graph, "A", "D", main) == []

    @pytest.mark.parametrize("seed", range(20))
    def test_alternative_is_disjoint_from_main(self, seed, random_graph):
        graph = random_graph(random.Random(seed), size=7)
        nodes = graph.nodes()

        for source in nodes:
            for dest in nodes:
                main = shortest_path(graph, source, dest)
                alt = alternative_route(graph, source, dest, main)
                if not alt:
                    continue
                assert alt[0] == source and alt[-1] == dest
                assert not set(alt[1:-1]) & set(main[1:-1])
                assert not segments_of(alt) & segments_of(main)


class TestRestrictedRoute:
    def test_empty_exclusions_equal_shortest_path(self, scenario_graph):
        for source in scenario_graph:
            for dest in scenario_graph:
                assert restricted_route(scenario_graph, source, dest) == shortest_path(
                    scenario_graph, source, dest
                )

    def test_avoid_node(self, scenario_graph):
        assert restricted_route(scenario_graph, "A", "D", {"C"}) == ["A", "B", "D"]

    def test_avoid_segment_reversed(self, scenario_graph):
        path = restricted_route(scenario_graph, "A", "D", avoid_segments={("D", "C")})

        assert path == ["A", "B", "D"]

    def test_everything_avoided(self, scenario_graph):
        assert restricted_route(scenario_graph, "A", "D", {"B", "C"}) == []

    def test_waypoint_split(self, scenario_graph):
        path = restricted_route(scenario_graph, "A", "D", include_node="B")

        assert path == ["A", "B", "D"]
        assert path.count("B") == 1
        assert driving_time(scenario_graph, path) == 20

    def test_waypoint_may_force_a_detour(self, scenario_graph):
        path = restricted_route(scenario_graph, "C", "D", include_node="B")

        assert path == ["C", "A", "B", "D"]
        assert driving_time(scenario_graph, path) == 25

    def test_waypoint_respects_exclusions(self, scenario_graph):
        path = restricted_route(
            scenario_graph, "A", "D", avoid_segments={("A", "B")}, include_node="B"
        )

        # A -> B must go around through C and D, then back to D.
        assert path == ["A", "C", "D", "B", "D"]
        assert driving_time(scenario_graph, path) == 30

    def test_unreachable_waypoint_gives_empty_route(self, scenario_graph):
        assert restricted_route(scenario_graph, "A", "D", include_node="E") == []

    def test_excluded_waypoint_gives_empty_route(self, scenario_graph):
        assert restricted_route(scenario_graph, "A", "D", {"B"}, include_node="B") == []

    def test_waypoint_equal_to_source(self, scenario_graph):
        assert restricted_route(scenario_graph, "A", "D", include_node="A") == [
            "A",
            "C",
            "D",
        ]

    @pytest.mark.parametrize("seed", range(20))
    def test_waypoint_time_is_sum_of_legs(self, seed, random_graph):
        rng = random.Random(500 + seed)
        graph = random_graph(rng, size=7)
        source, waypoint, dest = rng.sample(graph.nodes(), 3)

        first = restricted_route(graph, source, waypoint)
        second = restricted_route(graph, waypoint, dest)
        joined = restricted_route(graph, source, dest, include_node=waypoint)

        if not first or not second:
            assert joined == []
            return
        assert joined.count(waypoint) == 1
        assert driving_time(graph, joined) == driving_time(graph, first) + driving_time(
            graph, second
        )

    def test_walking_mode(self, scenario_graph):
        path = restricted_route(scenario_graph, "A", "D", mode=TravelMode.WALKING)

        assert path == ["A", "B", "D"]


class TestAggregateTime:
    def test_driving_and_walking(self, scenario_graph):
        assert aggregate_time(scenario_graph, ["A", "B", "D"], TravelMode.DRIVING) == 20
        assert aggregate_time(scenario_graph, ["A", "B", "D"], TravelMode.WALKING) == 40

    def test_short_paths_are_zero(self, scenario_graph):
        assert aggregate_time(scenario_graph, []) == 0
        assert aggregate_time(scenario_graph, ["A"]) == 0

    def test_missing_segment_is_invalid(self, scenario_graph):
        assert aggregate_time(scenario_graph, ["A", "D"]) is None

    def test_unavailable_mode_is_invalid(self, scenario_graph):
        assert walking_time(scenario_graph, ["A", "C", "D"]) is None
        assert driving_time(scenario_graph, ["A", "C", "D"]) == 10

    def test_invalid_is_distinct_from_zero(self, scenario_graph):
        assert walking_time(scenario_graph, ["A", "C"]) is None
        assert walking_time(scenario_graph, ["C"]) == 0


def test_segments_of_path():
    assert segments_of(["A", "B", "C"]) == {
        ("A", "B"),
        ("B", "A"),
        ("B", "C"),
        ("C", "B"),
    }
    assert segments_of(["A"]) == frozenset()
