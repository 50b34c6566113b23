from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .coast import Coastline
from .graph import BoardGraph
from .layout import Point
from .types import PRODUCING_RESOURCES, PortType, Resource

BANK_TRADE_RATIO = 4

STANDARD_PORT_TYPES: Tuple[PortType, ...] = (
    PortType.ANY_3TO1,
    PortType.BRICK_2TO1,
    PortType.ANY_3TO1,
    PortType.ORE_2TO1,
    PortType.ANY_3TO1,
    PortType.SHEEP_2TO1,
    PortType.ANY_3TO1,
    PortType.WHEAT_2TO1,
    PortType.WOOD_2TO1,
)
STANDARD_PORT_COAST_INDICES: Tuple[int, ...] = (0, 3, 6, 10, 13, 16, 20, 23, 26)


@dataclass(frozen=True)
class Port:
    id: int
    coast_index: int
    port_type: PortType
    vertex_ids: Tuple[int, int]
    midpoint: Point
    normal: Point


def preferred_port_indices(coastal_edge_count: int, port_count: int = len(STANDARD_PORT_TYPES)) -> List[int]:
    if coastal_edge_count <= 0:
        return []

    template = list(STANDARD_PORT_COAST_INDICES[:port_count])
    if coastal_edge_count <= max(STANDARD_PORT_COAST_INDICES) or len(template) < port_count:
        step = coastal_edge_count / float(port_count)
        template = [int(round(step * index)) % coastal_edge_count for index in range(port_count)]

    indices: List[int] = []
    used: set[int] = set()
    for raw_index in template[:coastal_edge_count]:
        index = raw_index % coastal_edge_count
        while index in used:
            index = (index + 1) % coastal_edge_count
        used.add(index)
        indices.append(index)
    return indices


def assign_ports(
    coast: Coastline,
    graph: BoardGraph,
    port_types: Sequence[PortType] = STANDARD_PORT_TYPES,
) -> List[Port]:
    ports: List[Port] = []
    for port_id, (index, port_type) in enumerate(zip(preferred_port_indices(len(coast), len(port_types)), port_types)):
        edge = coast[index]
        first = graph.vertex_at(edge.v1)
        second = graph.vertex_at(edge.v2)
        if first is None or second is None:
            raise ValueError(f"Coast edge {index} does not match the board graph.")
        ports.append(
            Port(
                id=port_id,
                coast_index=edge.index,
                port_type=port_type,
                vertex_ids=graph.normalize_edge_key(first, second),
                midpoint=edge.midpoint,
                normal=edge.normal,
            )
        )
    return ports


def port_types_for_vertices(ports: Iterable[Port], vertex_ids: Iterable[int]) -> set[PortType]:
    owned = set(vertex_ids)
    return {port.port_type for port in ports if owned.intersection(port.vertex_ids)}


def trade_ratios(ports: Iterable[Port], vertex_ids: Iterable[int]) -> Dict[Resource, int]:
    """Best bank ratio per resource for a player holding `vertex_ids`."""
    available = port_types_for_vertices(ports, vertex_ids)
    generic = BANK_TRADE_RATIO - 1 if PortType.ANY_3TO1 in available else BANK_TRADE_RATIO
    ratios = {resource: generic for resource in PRODUCING_RESOURCES}
    for port_type in available:
        if port_type.resource is not None:
            ratios[port_type.resource] = min(ratios[port_type.resource], port_type.ratio)
    return ratios
