"""Dijkstra shortest path over an adjacency map.

Linear-scan selection (O(V^2)) is fine for building-scale graphs of a few
dozen nodes.  Ties between equally distant nodes go to the lowest node id
so results are deterministic.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from indoornav.routing.graph import AdjacencyMap

logger = logging.getLogger(__name__)

EdgeFilter = Callable[[str, str], bool]
"""(from node, to node) -> whether the edge may be relaxed."""


@dataclass
class _NodeState:
    distance: float = math.inf
    previous: Optional[str] = None
    visited: bool = False


@dataclass
class ShortestPath:
    """Result of a single search."""

    distance: float = math.inf
    gates: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.gates)


def shortest_path(
    adjacency: AdjacencyMap,
    source: str,
    target: str,
    edge_filter: EdgeFilter | None = None,
    nodes: Iterable[str] | None = None,
) -> ShortestPath:
    """Find the minimum-distance node sequence from *source* to *target*.

    Parameters
    ----------
    adjacency:
        Graph as built by :func:`indoornav.routing.graph.build_adjacency`.
    source, target:
        Node ids.
    edge_filter:
        Optional predicate; edges for which it returns False are skipped
        during relaxation.
    nodes:
        Optional set of routable node ids.  Nodes outside it get no search
        state, so edges leading to them are never relaxed.  Defaults to
        every key of *adjacency*.

    Returns
    -------
    ShortestPath
        With ``gates == []`` and infinite distance when *target* is
        unreachable or either endpoint is not in the graph.
    """
    routable = set(adjacency) if nodes is None else set(nodes) & set(adjacency)
    if source not in routable or target not in routable:
        logger.debug("Endpoint missing from graph: %s -> %s", source, target)
        return ShortestPath()

    states = {node: _NodeState() for node in routable}
    states[source].distance = 0.0
    unvisited = set(routable)

    # At most one node is settled per iteration
    for _ in range(len(states)):
        current = min(
            unvisited,
            key=lambda n: (states[n].distance, n),
            default=None,
        )
        if current is None or math.isinf(states[current].distance):
            break

        node = states[current]
        node.visited = True
        unvisited.discard(current)

        if current == target:
            break

        for neighbour, weight in adjacency[current].items():
            other = states.get(neighbour)
            if other is None or other.visited:
                continue
            if edge_filter is not None and not edge_filter(current, neighbour):
                continue
            candidate = node.distance + weight
            if candidate < other.distance:
                other.distance = candidate
                other.previous = current

    end = states[target]
    if math.isinf(end.distance):
        return ShortestPath()

    gates: list[str] = []
    step: Optional[str] = target
    while step is not None and len(gates) <= len(states):
        gates.append(step)
        step = states[step].previous
    gates.reverse()

    if gates[0] != source:
        logger.warning("Predecessor chain for %s does not reach %s", target, source)
        return ShortestPath()

    return ShortestPath(distance=end.distance, gates=gates)
