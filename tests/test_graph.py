"""Tests for the graph builder."""

from __future__ import annotations

from indoornav.models.floorplan import FloorPlan, Path
from indoornav.routing.graph import build_adjacency, build_graph


class TestBuildGraph:
    def test_every_gate_is_a_node(self, plan: FloorPlan) -> None:
        adjacency = build_adjacency(plan)
        assert set(adjacency) == {"gate-1", "gate-2", "gate-corridor", "gate-library"}

    def test_edges_are_symmetric(self, plan: FloorPlan) -> None:
        adjacency = build_adjacency(plan)
        for node, neighbours in adjacency.items():
            for other, weight in neighbours.items():
                assert adjacency[other][node] == weight

    def test_weights_are_distances(self, plan: FloorPlan) -> None:
        adjacency = build_adjacency(plan)
        assert adjacency["gate-1"] == {"gate-corridor": 25}
        assert adjacency["gate-corridor"] == {"gate-1": 25, "gate-2": 30, "gate-library": 280}

    def test_blocked_path_adds_no_edge(self, plan: FloorPlan, block_path) -> None:
        graph = build_graph(block_path(plan, "path-3"))
        assert "gate-library" in graph.adjacency
        assert graph.adjacency["gate-library"] == {}
        assert "gate-library" not in graph.adjacency["gate-corridor"]
        assert graph.edge_between("gate-corridor", "gate-library") is None

    def test_isolated_gate_is_kept(self, plan: FloorPlan) -> None:
        extra = plan.gates[0].model_copy(update={"id": "gate-lonely"})
        graph = build_graph(plan.model_copy(update={"gates": [*plan.gates, extra]}))
        assert graph.adjacency["gate-lonely"] == {}

    def test_duplicate_edge_last_write_wins(self, plan: FloorPlan) -> None:
        dup = Path(id="path-1b", from_="gate-corridor", to="gate-1", distance=7)
        graph = build_graph(plan.model_copy(update={"paths": [*plan.paths, dup]}))
        assert graph.adjacency["gate-1"]["gate-corridor"] == 7
        assert graph.adjacency["gate-corridor"]["gate-1"] == 7
        edge = graph.edge_between("gate-1", "gate-corridor")
        assert edge is not None and edge.id == "path-1b"

    def test_edge_lookup_is_direction_agnostic(self, plan: FloorPlan) -> None:
        graph = build_graph(plan)
        assert graph.edge_between("gate-corridor", "gate-2") is graph.edge_between("gate-2", "gate-corridor")

    def test_special_area_endpoint_becomes_node(self, plan: FloorPlan) -> None:
        doc = plan.model_dump(by_alias=True)
        doc["specialAreas"] = [{"id": "compound", "isFastTravel": True}]
        doc["paths"].append({"id": "p-ft", "from": "gate-2", "to": "compound", "distance": 12, "type": "fast-travel"})
        graph = build_graph(FloorPlan.model_validate(doc))
        assert graph.adjacency["compound"] == {"gate-2": 12}
        assert graph.node_count == 5

    def test_undeclared_endpoint_is_not_routable(self, plan: FloorPlan) -> None:
        stray = [
            Path(id="p-in", from_="gate-1", to="ghost", distance=1),
            Path(id="p-out", from_="ghost", to="gate-2", distance=1),
        ]
        graph = build_graph(plan.model_copy(update={"paths": [*plan.paths, *stray]}))
        assert "ghost" not in graph.nodes
        assert "ghost" not in graph.adjacency
        assert "ghost" not in graph.adjacency["gate-1"]
        assert graph.edge_between("gate-1", "ghost") is None
        assert graph.node_count == 4
