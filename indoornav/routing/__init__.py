"""Routing core — graph building, availability rules and shortest paths."""

from indoornav.routing.access import AccessibilityEvaluator, is_gate_available, is_path_available
from indoornav.routing.dijkstra import ShortestPath, shortest_path
from indoornav.routing.engine import RoutingEngine
from indoornav.routing.errors import GateNotFound, NoPathFound, RoomNotFound, RoutingError
from indoornav.routing.graph import RoutingGraph, build_adjacency, build_graph

__all__ = [
    "AccessibilityEvaluator",
    "GateNotFound",
    "NoPathFound",
    "RoomNotFound",
    "RoutingEngine",
    "RoutingError",
    "RoutingGraph",
    "ShortestPath",
    "build_adjacency",
    "build_graph",
    "is_gate_available",
    "is_path_available",
    "shortest_path",
]
