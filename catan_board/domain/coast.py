from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .layout import Axial, Point, axial_neighbors, axial_to_pixel, board_centroid, hex_corners


@dataclass(frozen=True)
class CoastEdge:
    tile_id: int
    axial: Axial
    side: int
    v1: Point
    v2: Point
    midpoint: Point
    normal: Point
    angle: float
    index: int


@dataclass(frozen=True)
class Coastline:
    edges: Tuple[CoastEdge, ...]
    board_center: Point

    def __len__(self) -> int:
        return len(self.edges)

    def __getitem__(self, index: int) -> CoastEdge:
        return self.edges[index]


def angle_to_side(angle_rad: float) -> int:
    """Map a direction to the hex side facing it; side 0 faces east, counting every 60 degrees."""
    degrees = math.degrees(angle_rad)
    if degrees < 0:
        degrees += 360
    return int(round(degrees / 60)) % 6


def compute_coast_edges(axials: Sequence[Axial], hex_size: float) -> Coastline:
    occupied = set(axials)
    board_center = board_centroid(axials, hex_size)
    raw_edges: List[Tuple[float, int, Axial, int, Point, Point, Point, Point]] = []

    for tile_id, axial in enumerate(axials):
        center = axial_to_pixel(axial, hex_size)
        corners = hex_corners(center, hex_size)
        has_neighbor = [False] * 6

        for neighbor in axial_neighbors(axial):
            if neighbor not in occupied:
                continue
            neighbor_center = axial_to_pixel(neighbor, hex_size)
            side = angle_to_side(math.atan2(neighbor_center[1] - center[1], neighbor_center[0] - center[0]))
            has_neighbor[side] = True

        for side in range(6):
            if has_neighbor[side]:
                continue
            v1 = corners[side]
            v2 = corners[(side + 1) % 6]
            midpoint = ((v1[0] + v2[0]) / 2, (v1[1] + v2[1]) / 2)
            dx = midpoint[0] - center[0]
            dy = midpoint[1] - center[1]
            length = math.hypot(dx, dy) or 1.0
            normal = (dx / length, dy / length)
            angle = math.atan2(midpoint[1] - board_center[1], midpoint[0] - board_center[0])
            raw_edges.append((angle, tile_id, axial, side, v1, v2, midpoint, normal))

    raw_edges.sort(key=lambda item: item[0])
    edges = tuple(
        CoastEdge(
            tile_id=tile_id,
            axial=axial,
            side=side,
            v1=v1,
            v2=v2,
            midpoint=midpoint,
            normal=normal,
            angle=angle,
            index=index,
        )
        for index, (angle, tile_id, axial, side, v1, v2, midpoint, normal) in enumerate(raw_edges)
    )
    return Coastline(edges=edges, board_center=board_center)
