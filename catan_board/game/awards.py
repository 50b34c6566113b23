from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from catan_board.config import LONGEST_ROAD_MINIMUM
from catan_board.domain.graph import BoardGraph

from .ownership import Ownership

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LongestRoadResult:
    lengths: Dict[int, int]
    holder: Optional[int]
    length: int


@dataclass(frozen=True)
class LongestRoadUpdate:
    result: LongestRoadResult
    previous_holder: Optional[int]
    previous_length: int

    @property
    def changed(self) -> bool:
        return self.result.holder != self.previous_holder or self.result.length != self.previous_length


def longest_road_length_for_player(
    graph: BoardGraph,
    player_id: int,
    player_edges: Iterable[int],
    vertex_owners: Mapping[int, int],
) -> int:
    """Longest trail over the player's roads.

    A vertex holding another player's settlement or city may end a trail but
    never join two of its roads.
    """
    edges = {int(edge_id) for edge_id in player_edges if 0 <= int(edge_id) < len(graph.edges)}
    if not edges:
        return 0

    incident_edges: Dict[int, List[int]] = defaultdict(list)
    for edge_id in edges:
        edge = graph.edges[edge_id]
        incident_edges[edge.a].append(edge_id)
        incident_edges[edge.b].append(edge_id)

    def passable(vertex_id: int) -> bool:
        owner = vertex_owners.get(vertex_id)
        return owner is None or owner == player_id

    best = 0
    for start_edge_id in sorted(edges):
        start_edge = graph.edges[start_edge_id]
        stack: List[Tuple[int, FrozenSet[int]]] = [
            (start_edge.a, frozenset((start_edge_id,))),
            (start_edge.b, frozenset((start_edge_id,))),
        ]
        while stack:
            vertex_id, used_edges = stack.pop()
            best = max(best, len(used_edges))
            if not passable(vertex_id):
                continue
            for edge_id in incident_edges[vertex_id]:
                if edge_id in used_edges:
                    continue
                next_vertex_id = graph.edges[edge_id].other_vertex(vertex_id)
                stack.append((next_vertex_id, used_edges | {edge_id}))
    return best


def compute_longest_road(
    graph: BoardGraph,
    roads_by_player: Mapping[int, Iterable[int]],
    vertex_owners: Mapping[int, int],
    *,
    minimum: int = LONGEST_ROAD_MINIMUM,
) -> LongestRoadResult:
    lengths = {
        player_id: longest_road_length_for_player(graph, player_id, roads, vertex_owners)
        for player_id, roads in roads_by_player.items()
    }
    if not lengths:
        return LongestRoadResult(lengths={}, holder=None, length=0)

    max_length = max(lengths.values())
    contenders = [player_id for player_id, length in lengths.items() if length == max_length]
    holder = contenders[0] if len(contenders) == 1 and max_length >= minimum else None
    return LongestRoadResult(lengths=lengths, holder=holder, length=max_length)


def longest_road_for(
    graph: BoardGraph,
    ownership: Ownership,
    *,
    minimum: int = LONGEST_ROAD_MINIMUM,
) -> LongestRoadResult:
    return compute_longest_road(
        graph,
        ownership.roads_by_player(),
        ownership.vertex_owners(),
        minimum=minimum,
    )


def update_longest_road(
    previous: Optional[LongestRoadResult],
    graph: BoardGraph,
    ownership: Ownership,
    *,
    minimum: int = LONGEST_ROAD_MINIMUM,
) -> LongestRoadUpdate:
    result = longest_road_for(graph, ownership, minimum=minimum)
    update = LongestRoadUpdate(
        result=result,
        previous_holder=previous.holder if previous is not None else None,
        previous_length=previous.length if previous is not None else 0,
    )
    if update.changed:
        logger.debug(
            "Longest road: holder %s -> %s, length %d -> %d",
            update.previous_holder,
            result.holder,
            update.previous_length,
            result.length,
        )
    return update
