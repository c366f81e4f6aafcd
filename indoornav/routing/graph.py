"""Graph builder — floor plan to weighted, undirected adjacency map."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from indoornav.models.floorplan import FloorPlan, Path

logger = logging.getLogger(__name__)

AdjacencyMap = dict[str, dict[str, float]]
"""gate id -> {neighbour id -> edge weight}."""


@dataclass
class RoutingGraph:
    """Adjacency map plus the path each edge came from."""

    adjacency: AdjacencyMap = field(default_factory=dict)
    edges: dict[frozenset[str], Path] = field(default_factory=dict)
    nodes: frozenset[str] = frozenset()
    """Declared gate and special-area ids; the only routable nodes."""

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_between(self, a: str, b: str) -> Path | None:
        """Direction-agnostic lookup of the path joining two nodes."""
        return self.edges.get(frozenset((a, b)))


def build_graph(floor_plan: FloorPlan) -> RoutingGraph:
    """Build the routing graph for *floor_plan*.

    Every gate and special area becomes a node, even if isolated.  Each
    path that is not blocked and joins two declared nodes adds an edge in
    both directions weighted by its distance.  When two paths join the
    same pair of nodes the later one wins.
    """
    declared = frozenset(
        [g.id for g in floor_plan.gates] + [a.id for a in floor_plan.special_areas]
    )
    graph = RoutingGraph(adjacency={node: {} for node in declared}, nodes=declared)

    skipped = 0
    for path in floor_plan.paths:
        if path.is_blocked:
            skipped += 1
            continue

        unknown = [e for e in (path.from_, path.to) if e not in declared]
        if unknown:
            logger.debug(
                "Path %s references unknown node %s; not routable",
                path.id, ", ".join(unknown),
            )
            skipped += 1
            continue

        graph.adjacency[path.from_][path.to] = path.distance
        graph.adjacency[path.to][path.from_] = path.distance
        graph.edges[path.endpoints] = path

    logger.debug(
        "Built graph for %s: %d nodes, %d edges, %d paths skipped",
        floor_plan.id, graph.node_count, len(graph.edges), skipped,
    )
    return graph


def build_adjacency(floor_plan: FloorPlan) -> AdjacencyMap:
    """Return only the adjacency map of :func:`build_graph`."""
    return build_graph(floor_plan).adjacency
