from __future__ import annotations

from typing import Iterable, List

from catan_board.domain.graph import BoardGraph

from .ownership import Ownership


def blocked_vertices(graph: BoardGraph, occupied_vertices: Iterable[int]) -> set[int]:
    occupied = set(occupied_vertices)
    blocked = set(occupied)
    for vertex_id in occupied:
        blocked.update(graph.vertex_neighbors[vertex_id])
    return blocked


def legal_setup_settlement_vertices(graph: BoardGraph, occupied_vertices: Iterable[int]) -> List[int]:
    blocked = blocked_vertices(graph, occupied_vertices)
    return [vertex.id for vertex in graph.vertices if vertex.id not in blocked]


def legal_setup_road_edges(
    graph: BoardGraph,
    occupied_edges: Iterable[int],
    settlement_vertex_id: int,
) -> List[int]:
    occupied = set(occupied_edges)
    return [edge_id for edge_id in graph.vertex_edges[settlement_vertex_id] if edge_id not in occupied]


def legal_settlement_vertices(
    graph: BoardGraph,
    occupied_vertices: Iterable[int],
    player_edges: Iterable[int],
) -> List[int]:
    blocked = blocked_vertices(graph, occupied_vertices)
    own_edges = set(player_edges)
    return [
        vertex.id
        for vertex in graph.vertices
        if vertex.id not in blocked and own_edges.intersection(graph.vertex_edges[vertex.id])
    ]


def legal_road_edges(
    graph: BoardGraph,
    occupied_edges: Iterable[int],
    network_vertices: Iterable[int],
) -> List[int]:
    occupied = set(occupied_edges)
    network = set(network_vertices)
    return [
        edge.id
        for edge in graph.edges
        if edge.id not in occupied and (edge.a in network or edge.b in network)
    ]


def legal_city_vertices(settlements: Iterable[int]) -> List[int]:
    return sorted(set(settlements))


def setup_settlement_targets(graph: BoardGraph, ownership: Ownership) -> List[int]:
    return legal_setup_settlement_vertices(graph, ownership.occupied_vertices())


def setup_road_targets(graph: BoardGraph, ownership: Ownership, settlement_vertex_id: int) -> List[int]:
    return legal_setup_road_edges(graph, ownership.occupied_edges(), settlement_vertex_id)


def settlement_targets(graph: BoardGraph, ownership: Ownership, player_id: int) -> List[int]:
    return legal_settlement_vertices(
        graph,
        ownership.occupied_vertices(),
        ownership.pieces_of(player_id).roads,
    )


def road_targets(graph: BoardGraph, ownership: Ownership, player_id: int) -> List[int]:
    return legal_road_edges(
        graph,
        ownership.occupied_edges(),
        ownership.network_vertices(graph, player_id),
    )


def city_targets(ownership: Ownership, player_id: int) -> List[int]:
    return legal_city_vertices(ownership.pieces_of(player_id).settlements)
