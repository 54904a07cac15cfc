"""Shared fixtures: a small network with a known answer for every policy.

    A --(10/20)-- B --(10/20)-- D
    |                          |
    +--(5/X)--- C ---(5/15)----+        E is isolated, C has parking
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Callable, Iterator

import pytest

from ecoroute.adapters.graph import CSVGraphRepository
from ecoroute.config import GraphConfig
from ecoroute.graph import Graph
from ecoroute.logging_setup import ROOT_LOGGER_NAME
from ecoroute.services import RoutePlannerService

LOCATIONS_CSV = """Location,Id,Code,Parking
Alpha,1,A,0
Bravo,2,B,0
Charlie,3,C,1
Delta,4,D,0
Echo,5,E,0
"""

DISTANCES_CSV = """Location1,Location2,Driving,Walking
A,B,10,20
B,D,10,20
A,C,5,X
C,D,5,15
"""


def build_scenario_graph() -> Graph:
    graph = Graph()
    graph.add_edge("A", "B", 10, 20)
    graph.add_edge("B", "D", 10, 20)
    graph.add_edge("A", "C", 5, None)
    graph.add_edge("C", "D", 5, 15)
    graph.add_node("E")
    return graph


@pytest.fixture
def scenario_graph() -> Graph:
    return build_scenario_graph()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "Locations.csv").write_text(LOCATIONS_CSV, encoding="utf-8")
    (tmp_path / "Distances.csv").write_text(DISTANCES_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def graph_config(data_dir: Path) -> GraphConfig:
    return GraphConfig(data_dir=data_dir)


@pytest.fixture
def repository(graph_config: GraphConfig) -> CSVGraphRepository:
    return CSVGraphRepository(graph_config)


@pytest.fixture
def planner(repository: CSVGraphRepository) -> RoutePlannerService:
    return RoutePlannerService(graph_repository=repository, directory=repository)


def make_random_graph(rng: random.Random, size: int = 6) -> Graph:
    """Random network where about half of the pairs are connected."""
    nodes = [f"N{i}" for i in range(size)]
    graph = Graph()
    for code in nodes:
        graph.add_node(code)
    for i, a in enumerate(nodes):
        for b in nodes[i + 1 :]:
            if rng.random() < 0.5:
                driving = rng.choice([None, 1, 2, 3, 5, 8])
                walking = rng.choice([None, 2, 4, 6, 10])
                graph.add_edge(a, b, driving, walking)
    return graph


@pytest.fixture
def random_graph() -> Callable[..., Graph]:
    return make_random_graph


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging so every test starts with a bare logger."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger._configured = False  # type: ignore[attr-defined]
