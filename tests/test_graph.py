import random
import unittest

from catan_board.domain.graph import build_board_graph, snap_point
from catan_board.domain.layout import AXIAL_DIRECTIONS, axial_to_pixel, hex_corners, standard_axials


class BoardGraphTests(unittest.TestCase):
    def setUp(self) -> None:
        self.axials = standard_axials()
        self.graph = build_board_graph(self.axials, 80.0)

    def test_standard_board_vertex_and_edge_count(self) -> None:
        self.assertEqual(len(self.graph.vertices), 54)
        self.assertEqual(len(self.graph.edges), 72)

    def test_counts_do_not_depend_on_tile_order(self) -> None:
        for seed in range(5):
            shuffled = list(self.axials)
            random.Random(seed).shuffle(shuffled)
            graph = build_board_graph(shuffled, 80.0)
            self.assertEqual(len(graph.vertices), 54, msg=f"seed {seed}")
            self.assertEqual(len(graph.edges), 72, msg=f"seed {seed}")

    def test_unit_hexes_dedupe_the_same_way(self) -> None:
        graph = build_board_graph(self.axials, 1.0, precision=6)
        self.assertEqual(len(graph.vertices), 54)
        self.assertEqual(len(graph.edges), 72)

    def test_edge_id_is_order_independent(self) -> None:
        for edge in self.graph.edges:
            self.assertLess(edge.a, edge.b)
            self.assertEqual(self.graph.edge_id(edge.a, edge.b), edge.id)
            self.assertEqual(self.graph.edge_id(edge.b, edge.a), edge.id)
        first, second = self.graph.edges[0].key
        self.assertEqual(
            self.graph.normalize_edge_key(first, second),
            self.graph.normalize_edge_key(second, first),
        )

    def test_vertex_adjacency_is_symmetric(self) -> None:
        for vertex in self.graph.vertices:
            neighbors = self.graph.vertex_neighbors[vertex.id]
            self.assertNotIn(vertex.id, neighbors)
            self.assertIn(len(neighbors), (2, 3))
            self.assertEqual(len(neighbors), len(self.graph.vertex_edges[vertex.id]))
            for neighbor_id in neighbors:
                self.assertIn(vertex.id, self.graph.vertex_neighbors[neighbor_id])

    def test_vertex_edges_touch_their_vertex(self) -> None:
        for vertex in self.graph.vertices:
            for edge_id in self.graph.vertex_edges[vertex.id]:
                self.assertIn(vertex.id, self.graph.edges[edge_id].key)

    def test_tile_membership_bounds(self) -> None:
        for vertex in self.graph.vertices:
            self.assertGreaterEqual(len(vertex.tile_ids), 1)
            self.assertLessEqual(len(vertex.tile_ids), 3)
        for edge in self.graph.edges:
            self.assertIn(len(edge.tile_ids), (1, 2))
        outer_edges = [edge for edge in self.graph.edges if len(edge.tile_ids) == 1]
        self.assertEqual(len(outer_edges), 30)

    def test_every_tile_has_six_distinct_corners_and_sides(self) -> None:
        for tile_id in range(len(self.axials)):
            self.assertEqual(len(set(self.graph.tile_vertices[tile_id])), 6)
            self.assertEqual(len(set(self.graph.tile_edges(tile_id))), 6)

    def test_tile_adjacency_matches_axial_neighbors(self) -> None:
        index_by_axial = {axial: tile_id for tile_id, axial in enumerate(self.axials)}
        tile_neighbors = self.graph.tile_neighbors()
        for tile_id, (q, r) in enumerate(self.axials):
            expected = {
                index_by_axial[(q + dq, r + dr)]
                for dq, dr in AXIAL_DIRECTIONS
                if (q + dq, r + dr) in index_by_axial
            }
            self.assertEqual(set(tile_neighbors[tile_id]), expected)

    def test_vertex_lookup_by_point(self) -> None:
        for vertex in self.graph.vertices:
            self.assertEqual(self.graph.vertex_at(vertex.point), vertex.id)
        self.assertIsNone(self.graph.vertex_at((10_000.0, 10_000.0)))

    def test_vertex_points_are_snapped_corners(self) -> None:
        for vertex in self.graph.vertices:
            self.assertEqual(snap_point(vertex.point, self.graph.precision), vertex.point)
        for tile_id, axial in enumerate(self.axials):
            corners = hex_corners(axial_to_pixel(axial, 80.0), 80.0)
            for corner, vertex_id in zip(corners, self.graph.tile_vertices[tile_id]):
                self.assertEqual(self.graph.vertices[vertex_id].point, snap_point(corner))

    def test_edge_exists_matches_adjacency(self) -> None:
        vertex_id = 0
        neighbor_id = self.graph.vertex_neighbors[vertex_id][0]
        self.assertTrue(self.graph.edge_exists(vertex_id, neighbor_id))
        far_vertex = next(
            other.id
            for other in self.graph.vertices
            if other.id != vertex_id and other.id not in self.graph.vertex_neighbors[vertex_id]
        )
        self.assertFalse(self.graph.edge_exists(vertex_id, far_vertex))


if __name__ == "__main__":
    unittest.main()
