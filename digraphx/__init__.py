"""Public package exports for :mod:`digraphx`."""

from __future__ import annotations

from .cache import LRUCache
from .dijkstra import DijkstraResult, PathResult, dijkstra, shortest_path
from .exceptions import (
    ConfigError,
    DigraphXError,
    GraphFormatError,
    InvalidArgumentError,
)
from .frontier import PathFrontier
from .generator import make_graph, spanning_tree
from .graph import Graph
from .logger import Logger, NoopLogger, StdLogger
from .matrix import distance_matrix, to_weight_matrix
from .metrics import (
    MetricsConfig,
    MetricsEngine,
    diameter,
    distance_weight,
    eccentricity,
    edge_count_weight,
    radius,
)
from .visualize import draw_graph, show_graph, to_networkx

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "make_graph",
    "spanning_tree",
    "dijkstra",
    "shortest_path",
    "DijkstraResult",
    "PathResult",
    "PathFrontier",
    "eccentricity",
    "radius",
    "diameter",
    "edge_count_weight",
    "distance_weight",
    "MetricsConfig",
    "MetricsEngine",
    "LRUCache",
    "distance_matrix",
    "to_weight_matrix",
    "to_networkx",
    "draw_graph",
    "show_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "DigraphXError",
    "InvalidArgumentError",
    "GraphFormatError",
    "ConfigError",
]
