"""
Unit tests for the Graph model.
"""

import math

import numpy as np
import pytest

from pathviz.graph import Edge, Graph, GraphIntegrityError, Node, UnknownNodeError


class TestValidation:
    """Structural checks at construction time."""

    def test_duplicate_node_id_rejected(self):
        """Two nodes sharing an id should fail fast."""
        with pytest.raises(GraphIntegrityError, match="Duplicate"):
            Graph([Node("A", "A", 0, 0), Node("A", "Other", 1, 1)])

    def test_dangling_edge_rejected(self, graph_factory):
        """An edge to a missing node is a structural error, not silently ignored."""
        with pytest.raises(GraphIntegrityError, match="unknown node 'Z'"):
            graph_factory({"A": (0, 0)}, [("A", "Z", 1)])

    def test_negative_weight_rejected(self, graph_factory):
        with pytest.raises(GraphIntegrityError, match="invalid weight"):
            graph_factory({"A": (0, 0), "B": (1, 0)}, [("A", "B", -1)])

    def test_non_finite_weight_rejected(self, graph_factory):
        with pytest.raises(GraphIntegrityError):
            graph_factory({"A": (0, 0), "B": (1, 0)}, [("A", "B", math.nan)])
        with pytest.raises(GraphIntegrityError):
            graph_factory({"A": (0, 0), "B": (1, 0)}, [("A", "B", math.inf)])

    def test_non_finite_position_rejected(self):
        with pytest.raises(GraphIntegrityError, match="position"):
            Graph([Node("A", "A", math.nan, 0)])

    @pytest.mark.parametrize("x,y", [("1", 0.0), (0.0, None)])
    def test_non_numeric_position_rejected(self, x, y):
        """Bad coordinate types fail as integrity errors, not bare TypeErrors."""
        with pytest.raises(GraphIntegrityError, match="position"):
            Graph([Node("A", "A", x, y)])

    def test_non_numeric_weight_rejected(self):
        nodes = [Node("A", "A", 0, 0), Node("B", "B", 1, 0)]
        with pytest.raises(GraphIntegrityError, match="invalid weight"):
            Graph(nodes, [Edge("A", "B", "3")])

    def test_zero_weight_and_self_loop_allowed(self, loopy_graph):
        """Self-loops and zero weights are tolerated."""
        assert len(loopy_graph.edges) == 5

    def test_empty_graph(self):
        graph = Graph([])
        assert len(graph) == 0
        assert graph.positions.shape == (0, 2)
        assert graph.node_at(0, 0) is None


class TestLookups:
    """Node lookup by id."""

    def test_get_node(self, cities_graph):
        node = cities_graph.get_node("A")
        assert node is not None
        assert node.label == "Mumbai"
        assert (node.x, node.y) == (150, 300)

    def test_get_node_unknown(self, cities_graph):
        assert cities_graph.get_node("Z") is None
        assert cities_graph.has_node("Z") is False
        assert "Z" not in cities_graph

    def test_require_node_unknown_raises(self, cities_graph):
        """require_node raises a KeyError subclass naming the id."""
        with pytest.raises(UnknownNodeError) as excinfo:
            cities_graph.require_node("Z")
        assert isinstance(excinfo.value, KeyError)
        assert excinfo.value.node_id == "Z"
        assert "Z" in str(excinfo.value)

    def test_label_of(self, cities_graph):
        assert cities_graph.label_of("B") == "Delhi"
        assert cities_graph.label_of("missing") == "missing"

    def test_node_ids_in_declaration_order(self, complex_graph):
        assert complex_graph.node_ids == list("ABCDEFGH")


class TestAdjacency:
    """Undirected neighbor lookup."""

    def test_neighbors_follow_edge_declaration_order(self, simple_graph):
        """B appears in A-B, B-D, B-C, in that order."""
        assert [n for n, _ in simple_graph.neighbors("B")] == ["A", "D", "C"]

    def test_edges_traversable_both_ways(self, simple_graph):
        """D is only ever the 'to' end, but still has neighbors."""
        assert [n for n, _ in simple_graph.neighbors("D")] == ["B", "C"]

    def test_incident_edges(self, simple_graph):
        edges = simple_graph.incident_edges("C")
        assert [(e.from_id, e.to_id, e.weight) for e in edges] == [
            ("A", "C", 2),
            ("C", "D", 3),
            ("B", "C", 1),
        ]

    def test_self_loop_listed_once(self, loopy_graph):
        """A self-loop is incident once and points back at the node."""
        neighbors = loopy_graph.neighbors("A")
        assert neighbors[0][0] == "A"
        assert [n for n, _ in neighbors] == ["A", "B", "B"]

    def test_unknown_node_has_no_neighbors(self, simple_graph):
        assert simple_graph.neighbors("Z") == []

    def test_edge_between_either_orientation(self, simple_graph):
        assert simple_graph.edge_between("A", "C").weight == 2
        assert simple_graph.edge_between("C", "A").weight == 2
        assert simple_graph.edge_between("A", "D") is None

    def test_edge_between_returns_first_declared(self, loopy_graph):
        assert loopy_graph.edge_between("B", "A").weight == 2

    def test_path_cost(self, simple_graph):
        assert simple_graph.path_cost(["A", "C", "B", "D"]) == 8
        assert simple_graph.path_cost(["A"]) == 0
        assert simple_graph.path_cost(["A", "D"]) is None

    def test_edge_other(self):
        edge = Edge("A", "B", 1)
        assert edge.other("A") == "B"
        assert edge.other("B") == "A"


class TestSpatialQueries:
    """Positions and click hit-testing."""

    def test_positions_array(self, simple_graph):
        positions = simple_graph.positions
        assert positions.shape == (4, 2)
        np.testing.assert_array_equal(positions[0], [150, 200])

    def test_positions_is_a_copy(self, simple_graph):
        positions = simple_graph.positions
        positions[0] = [0, 0]
        np.testing.assert_array_equal(simple_graph.positions[0], [150, 200])

    def test_node_at_hit(self, cities_graph):
        """A click within 30 units of Delhi (250, 100) selects it."""
        assert cities_graph.node_at(260, 110).id == "B"

    def test_node_at_boundary_inclusive(self, cities_graph):
        assert cities_graph.node_at(250, 130).id == "B"

    def test_node_at_miss(self, cities_graph):
        assert cities_graph.node_at(0, 0) is None

    def test_node_at_first_declared_wins(self, graph_factory):
        graph = graph_factory({"P": (0, 0), "Q": (5, 0)}, [])
        assert graph.node_at(4, 0).id == "P"

    def test_node_at_custom_radius(self, cities_graph):
        assert cities_graph.node_at(260, 110, radius=5) is None


class TestSerialization:
    """Plain-data form."""

    def test_to_dict_shape(self, simple_graph):
        data = simple_graph.to_dict()
        assert data["nodes"][0] == {"id": "A", "label": "A", "x": 150, "y": 200}
        assert data["edges"][0] == {"from": "A", "to": "B", "weight": 4}

    def test_from_dict_inverse(self, cities_graph):
        assert Graph.from_dict(cities_graph.to_dict()) == cities_graph

    def test_from_dict_label_defaults_to_id(self):
        graph = Graph.from_dict({"nodes": [{"id": "X", "x": 1, "y": 2}]})
        assert graph.get_node("X").label == "X"
        assert graph.edges == ()

    def test_from_dict_missing_field(self):
        with pytest.raises(GraphIntegrityError, match="Malformed"):
            Graph.from_dict({"nodes": [{"id": "X", "x": 1}]})

    def test_from_dict_not_a_mapping(self):
        with pytest.raises(GraphIntegrityError):
            Graph.from_dict(["not", "a", "graph"])
