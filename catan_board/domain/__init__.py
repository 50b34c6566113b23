"""Board geometry, graph construction and layout generation."""

from .coast import CoastEdge, Coastline, angle_to_side, compute_coast_edges
from .generator import (
    HOT_TOKENS,
    NUMBER_TOKENS,
    RESOURCE_COUNTS,
    BoardLayout,
    LayoutFormatError,
    TileAssignment,
    generate_board_layout,
    has_adjacent_hot_tokens,
    validate_standard_counts,
)
from .graph import BoardGraph, Edge, EdgeKey, Vertex, build_board_graph
from .layout import AXIAL_DIRECTIONS, axial_to_pixel, hex_corners, standard_axials
from .ports import Port, assign_ports, trade_ratios
from .types import PortType, Resource

__all__ = [
    "AXIAL_DIRECTIONS",
    "BoardGraph",
    "BoardLayout",
    "CoastEdge",
    "Coastline",
    "Edge",
    "EdgeKey",
    "HOT_TOKENS",
    "LayoutFormatError",
    "NUMBER_TOKENS",
    "Port",
    "PortType",
    "RESOURCE_COUNTS",
    "Resource",
    "TileAssignment",
    "Vertex",
    "angle_to_side",
    "assign_ports",
    "axial_to_pixel",
    "build_board_graph",
    "compute_coast_edges",
    "generate_board_layout",
    "has_adjacent_hot_tokens",
    "hex_corners",
    "standard_axials",
    "trade_ratios",
    "validate_standard_counts",
]
