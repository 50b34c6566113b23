"""Placement rules, awards and production over a built board."""

from .awards import (
    LongestRoadResult,
    LongestRoadUpdate,
    compute_longest_road,
    longest_road_for,
    longest_road_length_for_player,
    update_longest_road,
)
from .legality import (
    blocked_vertices,
    city_targets,
    legal_city_vertices,
    legal_road_edges,
    legal_settlement_vertices,
    legal_setup_road_edges,
    legal_setup_settlement_vertices,
    road_targets,
    settlement_targets,
    setup_road_targets,
    setup_settlement_targets,
)
from .ownership import Ownership, PlayerPieces
from .production import distribute_resources, producing_tiles, summarize_gains
from .score import ScoreLine, compute_scores, largest_army_holder, winner

__all__ = [
    "LongestRoadResult",
    "LongestRoadUpdate",
    "Ownership",
    "PlayerPieces",
    "ScoreLine",
    "blocked_vertices",
    "city_targets",
    "compute_longest_road",
    "compute_scores",
    "distribute_resources",
    "largest_army_holder",
    "legal_city_vertices",
    "legal_road_edges",
    "legal_settlement_vertices",
    "legal_setup_road_edges",
    "legal_setup_settlement_vertices",
    "longest_road_for",
    "longest_road_length_for_player",
    "producing_tiles",
    "road_targets",
    "settlement_targets",
    "setup_road_targets",
    "setup_settlement_targets",
    "summarize_gains",
    "update_longest_road",
    "winner",
]
