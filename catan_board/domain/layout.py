from __future__ import annotations

import math
from typing import List, Sequence, Tuple

Point = Tuple[float, float]
Axial = Tuple[int, int]

BOARD_RADIUS = 2
DEFAULT_HEX_SIZE = 80.0

# E, NE, NW, W, SW, SE
AXIAL_DIRECTIONS: Tuple[Axial, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


def standard_axials() -> List[Axial]:
    """Return the 19 tiles of the base board, row by row (3-4-5-4-3), left to right."""
    return generate_axial_coords(BOARD_RADIUS)


def generate_axial_coords(radius: int) -> List[Axial]:
    coords: List[Axial] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, -q + radius)
        for r in range(r_min, r_max + 1):
            coords.append((q, r))
    coords.sort(key=lambda item: (item[1], item[0]))
    return coords


def axial_to_pixel(axial: Axial, size: float) -> Point:
    q, r = axial
    x = size * (math.sqrt(3) * q + math.sqrt(3) / 2 * r)
    y = size * 1.5 * r
    return (x, y)


def hex_corner(center: Point, size: float, corner_index: int) -> Point:
    # pointy-top: corner 0 sits at -30 degrees, side i faces 60 * i degrees
    angle_rad = math.radians(60 * corner_index - 30)
    return (
        center[0] + size * math.cos(angle_rad),
        center[1] + size * math.sin(angle_rad),
    )


def hex_corners(center: Point, size: float) -> Tuple[Point, ...]:
    return tuple(hex_corner(center, size, corner_index) for corner_index in range(6))


def axial_neighbors(axial: Axial) -> List[Axial]:
    q, r = axial
    return [(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def board_centroid(axials: Sequence[Axial], size: float) -> Point:
    centers = [axial_to_pixel(axial, size) for axial in axials]
    if not centers:
        return (0.0, 0.0)
    return (
        sum(center[0] for center in centers) / len(centers),
        sum(center[1] for center in centers) / len(centers),
    )
