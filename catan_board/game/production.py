from __future__ import annotations

from typing import Dict, Mapping, Optional

from catan_board.domain.generator import DESERT_TOKEN, BoardLayout
from catan_board.domain.graph import BoardGraph
from catan_board.domain.types import PRODUCING_RESOURCES, Resource

from .ownership import Ownership

SETTLEMENT_YIELD = 1
CITY_YIELD = 2


def producing_tiles(layout: BoardLayout, roll: int, robber_tile_id: Optional[int]) -> list[int]:
    if roll == DESERT_TOKEN:
        return []
    return [
        tile_id
        for tile_id, tile in enumerate(layout.tiles)
        if tile.token == roll and not tile.is_desert and tile_id != robber_tile_id
    ]


def distribute_resources(
    roll: int,
    layout: BoardLayout,
    graph: BoardGraph,
    ownership: Ownership,
    robber_tile_id: Optional[int],
) -> Dict[int, Dict[Resource, int]]:
    gains = {
        player_id: {resource: 0 for resource in PRODUCING_RESOURCES}
        for player_id in ownership.players
    }
    tiles = producing_tiles(layout, roll, robber_tile_id)
    if not tiles:
        return gains

    for player_id, pieces in ownership.players.items():
        for tile_id in tiles:
            resource = layout.tiles[tile_id].resource
            for vertex_id in graph.tile_vertices[tile_id]:
                if vertex_id in pieces.cities:
                    gains[player_id][resource] += CITY_YIELD
                elif vertex_id in pieces.settlements:
                    gains[player_id][resource] += SETTLEMENT_YIELD
    return gains


def summarize_gains(gains: Mapping[int, Mapping[Resource, int]]) -> str:
    parts = []
    for player_id in sorted(gains):
        earned = [f"{amount} {resource.value}" for resource, amount in gains[player_id].items() if amount > 0]
        if earned:
            parts.append(f"P{player_id}: " + ", ".join(earned))
    if not parts:
        return "No one produced."
    return "Resources: " + " | ".join(parts)
