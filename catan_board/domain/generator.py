from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .types import Resource

logger = logging.getLogger(__name__)

RESOURCE_COUNTS: Dict[Resource, int] = {
    Resource.WOOD: 4,
    Resource.BRICK: 3,
    Resource.SHEEP: 4,
    Resource.WHEAT: 4,
    Resource.ORE: 3,
    Resource.DESERT: 1,
}

NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]
HOT_TOKENS = frozenset({6, 8})
DESERT_TOKEN = 7
MAX_RANDOMIZATION_ATTEMPTS = 10_000


class LayoutFormatError(ValueError):
    """Raised when a saved board layout cannot be read back."""


@dataclass(frozen=True)
class TileAssignment:
    resource: Resource
    token: int

    @property
    def is_desert(self) -> bool:
        return self.resource is Resource.DESERT

    @property
    def is_hot(self) -> bool:
        return not self.is_desert and self.token in HOT_TOKENS


@dataclass(frozen=True)
class BoardLayout:
    tiles: Tuple[TileAssignment, ...]
    attempts: int = 0
    used_fallback: bool = False

    def __len__(self) -> int:
        return len(self.tiles)

    def desert_tile_ids(self) -> List[int]:
        return [tile_id for tile_id, tile in enumerate(self.tiles) if tile.is_desert]

    def resource_counts(self) -> Dict[Resource, int]:
        counts: Dict[Resource, int] = {}
        for tile in self.tiles:
            counts[tile.resource] = counts.get(tile.resource, 0) + 1
        return counts

    def tokens(self) -> List[int]:
        return [tile.token for tile in self.tiles if not tile.is_desert]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tiles": [{"resource": tile.resource.value, "token": tile.token} for tile in self.tiles],
            "attempts": self.attempts,
            "used_fallback": self.used_fallback,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BoardLayout":
        raw_tiles = payload.get("tiles") if isinstance(payload, Mapping) else None
        if not isinstance(raw_tiles, list) or not raw_tiles:
            raise LayoutFormatError("Layout payload must contain a non-empty 'tiles' list.")

        tiles: List[TileAssignment] = []
        for index, raw_tile in enumerate(raw_tiles):
            if not isinstance(raw_tile, Mapping):
                raise LayoutFormatError(f"Tile {index} is not a mapping.")
            try:
                resource = Resource(raw_tile["resource"])
                token = int(raw_tile["token"])
            except (KeyError, TypeError, ValueError) as exc:
                raise LayoutFormatError(f"Tile {index} is malformed: {exc}") from exc
            if resource is Resource.DESERT and token != DESERT_TOKEN:
                raise LayoutFormatError(f"Desert tile {index} must carry token {DESERT_TOKEN}, got {token}.")
            if resource is not Resource.DESERT and (token < 2 or token > 12 or token == DESERT_TOKEN):
                raise LayoutFormatError(f"Tile {index} has invalid number token {token}.")
            tiles.append(TileAssignment(resource=resource, token=token))

        try:
            attempts = int(payload.get("attempts", 0))
        except (TypeError, ValueError) as exc:
            raise LayoutFormatError(f"Layout attempts is malformed: {exc}") from exc
        return cls(
            tiles=tuple(tiles),
            attempts=attempts,
            used_fallback=bool(payload.get("used_fallback", False)),
        )


def resource_pool(resource_counts: Mapping[Resource, int]) -> List[Resource]:
    pool: List[Resource] = []
    for resource, count in resource_counts.items():
        pool.extend([resource] * count)
    return pool


def generate_board_layout(
    tile_neighbors: Sequence[Iterable[int]],
    rng: random.Random,
    *,
    resource_counts: Optional[Mapping[Resource, int]] = None,
    number_tokens: Optional[Sequence[int]] = None,
    max_attempts: int = MAX_RANDOMIZATION_ATTEMPTS,
) -> BoardLayout:
    """Shuffle resources and number tokens onto tiles.

    Resources are shuffled once. Tokens are reshuffled up to `max_attempts`
    times until no two neighbouring tiles both hold a 6 or an 8; if that never
    happens, hot tokens go to the least connected tiles instead. The fallback
    only reduces clustering, it does not rule it out.
    """
    counts = dict(resource_counts) if resource_counts is not None else dict(RESOURCE_COUNTS)
    tokens = list(number_tokens) if number_tokens is not None else list(NUMBER_TOKENS)
    neighbors = [frozenset(ids) for ids in tile_neighbors]
    tile_count = len(neighbors)

    resources = resource_pool(counts)
    if len(resources) != tile_count:
        raise ValueError(f"Expected {tile_count} resources, received {len(resources)}.")

    desert_count = counts.get(Resource.DESERT, 0)
    if len(tokens) != tile_count - desert_count:
        raise ValueError(f"Expected {tile_count - desert_count} number tokens, received {len(tokens)}.")

    rng.shuffle(resources)
    producing_tile_ids = [tile_id for tile_id, resource in enumerate(resources) if resource is not Resource.DESERT]

    for attempt in range(1, max_attempts + 1):
        shuffled = tokens[:]
        rng.shuffle(shuffled)
        token_by_tile = dict(zip(producing_tile_ids, shuffled))
        if not _hot_tiles_touch(token_by_tile, neighbors):
            logger.debug("Accepted token layout after %d attempt(s)", attempt)
            return _assemble(resources, token_by_tile, attempts=attempt, used_fallback=False)

    logger.warning(
        "No token layout without adjacent 6/8 found in %d attempts; ranking tiles by adjacency instead",
        max_attempts,
    )
    token_by_tile = _fallback_token_placement(producing_tile_ids, tokens, neighbors, rng)
    return _assemble(resources, token_by_tile, attempts=max_attempts, used_fallback=True)


def _fallback_token_placement(
    producing_tile_ids: Sequence[int],
    tokens: Sequence[int],
    neighbors: Sequence[frozenset[int]],
    rng: random.Random,
) -> Dict[int, int]:
    slots = sorted(producing_tile_ids, key=lambda tile_id: (len(neighbors[tile_id]), tile_id))
    shuffled = list(tokens)
    rng.shuffle(shuffled)
    hot = [token for token in shuffled if token in HOT_TOKENS]
    cold = [token for token in shuffled if token not in HOT_TOKENS]
    return dict(zip(slots, hot + cold))


def _hot_tiles_touch(token_by_tile: Mapping[int, int], neighbors: Sequence[frozenset[int]]) -> bool:
    hot_tile_ids = {tile_id for tile_id, token in token_by_tile.items() if token in HOT_TOKENS}
    for tile_id in hot_tile_ids:
        if hot_tile_ids & neighbors[tile_id]:
            return True
    return False


def _assemble(
    resources: Sequence[Resource],
    token_by_tile: Mapping[int, int],
    *,
    attempts: int,
    used_fallback: bool,
) -> BoardLayout:
    tiles = tuple(
        TileAssignment(
            resource=resource,
            token=DESERT_TOKEN if resource is Resource.DESERT else token_by_tile[tile_id],
        )
        for tile_id, resource in enumerate(resources)
    )
    return BoardLayout(tiles=tiles, attempts=attempts, used_fallback=used_fallback)


def has_adjacent_hot_tokens(layout: BoardLayout, tile_neighbors: Sequence[Iterable[int]]) -> bool:
    token_by_tile = {tile_id: tile.token for tile_id, tile in enumerate(layout.tiles) if not tile.is_desert}
    return _hot_tiles_touch(token_by_tile, [frozenset(ids) for ids in tile_neighbors])


def validate_standard_counts(
    layout: BoardLayout,
    resource_counts: Optional[Mapping[Resource, int]] = None,
    number_tokens: Optional[Sequence[int]] = None,
) -> bool:
    expected_counts = dict(resource_counts) if resource_counts is not None else dict(RESOURCE_COUNTS)
    expected_tokens = list(number_tokens) if number_tokens is not None else list(NUMBER_TOKENS)

    actual_counts = {resource: 0 for resource in expected_counts}
    for tile in layout.tiles:
        if tile.resource not in actual_counts:
            return False
        actual_counts[tile.resource] += 1
        if tile.is_desert and tile.token != DESERT_TOKEN:
            return False

    if actual_counts != expected_counts:
        return False

    return sorted(layout.tokens()) == sorted(expected_tokens)
