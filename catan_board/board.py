from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from catan_board.config import BoardConfig
from catan_board.domain.coast import Coastline, compute_coast_edges
from catan_board.domain.generator import BoardLayout, LayoutFormatError, generate_board_layout
from catan_board.domain.graph import BoardGraph, build_board_graph
from catan_board.domain.layout import Axial, Point, axial_to_pixel, hex_corners, standard_axials
from catan_board.domain.ports import Port, assign_ports
from catan_board.domain.types import Resource


@dataclass(frozen=True)
class HexTile:
    id: int
    q: int
    r: int
    resource: Resource
    token: int
    center: Point
    corner_points: Tuple[Point, ...]


@dataclass(frozen=True)
class BoardState:
    axials: Tuple[Axial, ...]
    hex_size: float
    graph: BoardGraph
    layout: BoardLayout
    coast: Coastline
    ports: Tuple[Port, ...]
    tiles: Tuple[HexTile, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.layout) != len(self.axials):
            raise ValueError(f"Layout has {len(self.layout)} tiles, board has {len(self.axials)}.")
        tiles = []
        for tile_id, (axial, assignment) in enumerate(zip(self.axials, self.layout.tiles)):
            center = axial_to_pixel(axial, self.hex_size)
            tiles.append(
                HexTile(
                    id=tile_id,
                    q=axial[0],
                    r=axial[1],
                    resource=assignment.resource,
                    token=assignment.token,
                    center=center,
                    corner_points=hex_corners(center, self.hex_size),
                )
            )
        object.__setattr__(self, "tiles", tuple(tiles))

    def get_tile(self, tile_id: int) -> HexTile:
        return self.tiles[tile_id]

    def vertex_adjacent_tiles(self, vertex_id: int) -> List[HexTile]:
        return [self.tiles[tile_id] for tile_id in sorted(self.graph.vertices[vertex_id].tile_ids)]

    @property
    def desert_tile_id(self) -> Optional[int]:
        deserts = self.layout.desert_tile_ids()
        return deserts[0] if deserts else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "axials": [list(axial) for axial in self.axials],
            "hex_size": self.hex_size,
            "layout": self.layout.to_dict(),
        }


def build_board(
    config: Optional[BoardConfig] = None,
    *,
    rng: Optional[random.Random] = None,
    axials: Optional[Sequence[Axial]] = None,
) -> BoardState:
    """Build the graph, roll a resource/token layout and place the ports."""
    config = (config or BoardConfig()).validate()
    coords = tuple(axials) if axials is not None else tuple(standard_axials())
    rng = rng if rng is not None else random.Random(config.seed)

    graph = build_board_graph(coords, config.hex_size, precision=config.corner_precision)
    layout = generate_board_layout(
        graph.tile_neighbors(),
        rng,
        max_attempts=config.max_token_attempts,
    )
    return _assemble_board(coords, config, graph, layout)


def restore_board(payload: Mapping[str, Any], config: Optional[BoardConfig] = None) -> BoardState:
    """Rebuild a board from a saved layout; geometry is recomputed, never loaded."""
    config = (config or BoardConfig()).validate()
    if not isinstance(payload, Mapping):
        raise LayoutFormatError("Saved board must be a JSON object.")
    layout_payload = payload.get("layout", payload)
    layout = BoardLayout.from_dict(layout_payload)

    raw_axials = payload.get("axials")
    if raw_axials is None:
        coords = tuple(standard_axials())
    else:
        try:
            coords = tuple((int(q), int(r)) for q, r in raw_axials)
        except (TypeError, ValueError) as exc:
            raise LayoutFormatError(f"Saved axials are malformed: {exc}") from exc
    if "hex_size" in payload:
        try:
            hex_size = float(payload["hex_size"])
        except (TypeError, ValueError) as exc:
            raise LayoutFormatError(f"Saved hex_size is malformed: {exc}") from exc
        config = replace(config, hex_size=hex_size).validate()

    graph = build_board_graph(coords, config.hex_size, precision=config.corner_precision)
    return _assemble_board(coords, config, graph, layout)


def _assemble_board(
    coords: Tuple[Axial, ...],
    config: BoardConfig,
    graph: BoardGraph,
    layout: BoardLayout,
) -> BoardState:
    coast = compute_coast_edges(coords, config.hex_size)
    ports = assign_ports(coast, graph)
    return BoardState(
        axials=coords,
        hex_size=config.hex_size,
        graph=graph,
        layout=layout,
        coast=coast,
        ports=tuple(ports),
    )
