"""Tests for hypercube topology generation."""

import pytest
import numpy as np

from tesseract4d import InvalidConfiguration, initialize
from tesseract4d.shapes import Edge, generate_edges, generate_vertices


class TestVertices:
    """Vertex layout follows the 4-bit index encoding."""

    def test_sixteen_vertices(self):
        """Every edge length produces 16 corners."""
        for edge_length in (0.5, 1.0, 3.0):
            assert initialize(edge_length).vertex_count == 16

    def test_index_bits_select_axes(self):
        """Bit k of the index puts axis k at edge_length."""
        edge_length = 2.5
        vertices = generate_vertices(edge_length)
        for index, vertex in enumerate(vertices):
            expected = [edge_length if index >> k & 1 else 0.0 for k in range(4)]
            np.testing.assert_array_equal(vertex, expected)

    def test_end_to_end_corners(self):
        """Unit tesseract runs from the origin to (1, 1, 1, 1)."""
        t = initialize(1)
        np.testing.assert_array_equal(t.vertices[0], [0, 0, 0, 0])
        np.testing.assert_array_equal(t.vertices[15], [1, 1, 1, 1])


class TestEdges:
    """Edges connect vertices one bit apart."""

    def test_thirty_two_edges(self):
        """Positive and negative edge lengths both give 32 edges."""
        for edge_length in (1.0, 7.25, -1.0):
            assert initialize(edge_length).edge_count == 32

    def test_xor_adjacency(self):
        """An edge exists iff the index XOR has exactly one bit set."""
        t = initialize(1)
        edge_set = set(t.edges)
        for i in range(16):
            for j in range(i + 1, 16):
                one_bit = bin(i ^ j).count("1") == 1
                assert (Edge(i, j) in edge_set) == one_bit

    def test_edge_zero_one_exists(self):
        """(0, 1) differs only in x; (0, 3) differs in two axes."""
        t = initialize(1)
        assert Edge(0, 1) in t.edges
        assert Edge(0, 3) not in t.edges

    def test_edges_ordered(self):
        """Each edge stores the lower index first."""
        for edge in initialize(1).edges:
            assert edge.start < edge.end

    def test_label(self):
        assert Edge(3, 7).label == "Edge_3_7"

    def test_zero_edge_length_collapses(self):
        """A zero edge length puts every corner at the origin."""
        t = initialize(0.0)
        assert t.vertex_count == 16
        assert not np.any(t.vertices)
        assert t.edges == []

    def test_generate_edges_from_vertices(self):
        """Edges come from coordinate differences, not a fixed table."""
        edges = generate_edges(generate_vertices(1.0))
        assert len(edges) == 32
        assert edges[0] == Edge(0, 1)


class TestDeterminism:
    """Repeated initialization is reproducible."""

    def test_same_result_twice(self):
        a = initialize(1.5)
        b = initialize(1.5)
        np.testing.assert_array_equal(a.vertices, b.vertices)
        assert set(a.edges) == set(b.edges)

    def test_instances_do_not_share_vertices(self):
        a = initialize(1.0)
        b = initialize(1.0)
        a.vertices[0] = [9, 9, 9, 9]
        np.testing.assert_array_equal(b.vertices[0], [0, 0, 0, 0])

    def test_reset_restores_corners(self):
        """reset() undoes any rotation while keeping the edge list."""
        t = initialize(1.0)
        edges = list(t.edges)
        t.vertices *= -3
        t.reset()
        np.testing.assert_array_equal(t.vertices, generate_vertices(1.0))
        assert t.edges == edges


class TestInvalidConfiguration:
    """Non-finite edge lengths are rejected."""

    @pytest.mark.parametrize("edge_length", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, edge_length):
        with pytest.raises(InvalidConfiguration):
            initialize(edge_length)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            initialize(float("nan"))
