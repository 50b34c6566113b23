from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from .layout import Axial, Point, axial_to_pixel, hex_corners

logger = logging.getLogger(__name__)

EdgeKey = Tuple[int, int]
PointKey = Tuple[float, float]

CORNER_PRECISION = 3


@dataclass(frozen=True)
class Vertex:
    id: int
    point: Point
    tile_ids: FrozenSet[int]


@dataclass(frozen=True)
class Edge:
    id: int
    a: int
    b: int
    tile_ids: FrozenSet[int]

    @property
    def key(self) -> EdgeKey:
        return (self.a, self.b)

    def other_vertex(self, vertex_id: int) -> int:
        if self.a == vertex_id:
            return self.b
        return self.a


@dataclass(frozen=True)
class BoardGraph:
    vertices: Tuple[Vertex, ...]
    edges: Tuple[Edge, ...]
    vertex_neighbors: Tuple[Tuple[int, ...], ...]
    vertex_edges: Tuple[Tuple[int, ...], ...]
    tile_vertices: Tuple[Tuple[int, ...], ...]
    precision: int = CORNER_PRECISION
    _edge_lookup: Dict[EdgeKey, int] = field(default_factory=dict, repr=False, compare=False)
    _vertex_lookup: Dict[PointKey, int] = field(default_factory=dict, repr=False, compare=False)

    @staticmethod
    def normalize_edge_key(vertex_a: int, vertex_b: int) -> EdgeKey:
        first, second = int(vertex_a), int(vertex_b)
        if first > second:
            first, second = second, first
        return (first, second)

    def edge_id(self, vertex_a: int, vertex_b: int) -> Optional[int]:
        return self._edge_lookup.get(self.normalize_edge_key(vertex_a, vertex_b))

    def edge_exists(self, vertex_a: int, vertex_b: int) -> bool:
        return self.edge_id(vertex_a, vertex_b) is not None

    def vertex_at(self, point: Point) -> Optional[int]:
        return self._vertex_lookup.get(snap_point(point, self.precision))

    def tile_count(self) -> int:
        return len(self.tile_vertices)

    def tile_neighbors(self) -> Tuple[FrozenSet[int], ...]:
        """Tiles sharing at least one vertex with each tile, indexed by tile id."""
        neighbors: List[set[int]] = [set() for _ in self.tile_vertices]
        for vertex in self.vertices:
            for tile_id in vertex.tile_ids:
                neighbors[tile_id].update(vertex.tile_ids)
        for tile_id, tile_neighbors in enumerate(neighbors):
            tile_neighbors.discard(tile_id)
        return tuple(frozenset(tile_neighbors) for tile_neighbors in neighbors)

    def tile_edges(self, tile_id: int) -> List[int]:
        vertex_ids = self.tile_vertices[tile_id]
        edge_ids = []
        for first, second in zip(vertex_ids, vertex_ids[1:] + vertex_ids[:1]):
            edge_ids.append(self._edge_lookup[self.normalize_edge_key(first, second)])
        return edge_ids


def snap_point(point: Point, precision: int = CORNER_PRECISION) -> PointKey:
    return (round(point[0], precision), round(point[1], precision))


def build_board_graph(
    axials: Sequence[Axial],
    hex_size: float,
    *,
    precision: int = CORNER_PRECISION,
) -> BoardGraph:
    vertex_lookup: Dict[PointKey, int] = {}
    vertex_points: List[Point] = []
    vertex_tiles: List[set[int]] = []
    edge_lookup: Dict[EdgeKey, int] = {}
    edge_tiles: List[set[int]] = []
    tile_vertices: List[Tuple[int, ...]] = []

    for tile_id, axial in enumerate(axials):
        corners = hex_corners(axial_to_pixel(axial, hex_size), hex_size)
        corner_ids: List[int] = []
        for corner_point in corners:
            key = snap_point(corner_point, precision)
            vertex_id = vertex_lookup.get(key)
            if vertex_id is None:
                vertex_id = len(vertex_points)
                vertex_lookup[key] = vertex_id
                vertex_points.append(key)
                vertex_tiles.append(set())
            vertex_tiles[vertex_id].add(tile_id)
            corner_ids.append(vertex_id)
        tile_vertices.append(tuple(corner_ids))

        for first, second in zip(corner_ids, corner_ids[1:] + corner_ids[:1]):
            edge_key = BoardGraph.normalize_edge_key(first, second)
            edge_id = edge_lookup.get(edge_key)
            if edge_id is None:
                edge_id = len(edge_tiles)
                edge_lookup[edge_key] = edge_id
                edge_tiles.append(set())
            edge_tiles[edge_id].add(tile_id)

    vertices = tuple(
        Vertex(id=vertex_id, point=point, tile_ids=frozenset(vertex_tiles[vertex_id]))
        for vertex_id, point in enumerate(vertex_points)
    )

    edges_by_id: List[Edge] = []
    neighbors: List[set[int]] = [set() for _ in vertices]
    incident: List[List[int]] = [[] for _ in vertices]
    # edge ids were handed out in insertion order
    for (first, second), edge_id in edge_lookup.items():
        edges_by_id.append(Edge(id=edge_id, a=first, b=second, tile_ids=frozenset(edge_tiles[edge_id])))
        neighbors[first].add(second)
        neighbors[second].add(first)
        incident[first].append(edge_id)
        incident[second].append(edge_id)

    graph = BoardGraph(
        vertices=vertices,
        edges=tuple(edges_by_id),
        vertex_neighbors=tuple(tuple(sorted(ids)) for ids in neighbors),
        vertex_edges=tuple(tuple(sorted(ids)) for ids in incident),
        tile_vertices=tuple(tile_vertices),
        precision=precision,
        _edge_lookup=edge_lookup,
        _vertex_lookup=vertex_lookup,
    )
    logger.debug(
        "Built board graph: %d tiles, %d vertices, %d edges",
        len(tile_vertices),
        len(vertices),
        len(edges_by_id),
    )
    return graph
