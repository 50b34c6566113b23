from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from catan_board.domain.generator import MAX_RANDOMIZATION_ATTEMPTS
from catan_board.domain.graph import CORNER_PRECISION
from catan_board.domain.layout import DEFAULT_HEX_SIZE

LONGEST_ROAD_MINIMUM = 5
LARGEST_ARMY_MINIMUM = 3
WIN_POINTS = 10


@dataclass(frozen=True)
class BoardConfig:
    hex_size: float = DEFAULT_HEX_SIZE
    corner_precision: int = CORNER_PRECISION
    max_token_attempts: int = MAX_RANDOMIZATION_ATTEMPTS
    longest_road_minimum: int = LONGEST_ROAD_MINIMUM
    largest_army_minimum: int = LARGEST_ARMY_MINIMUM
    win_points: int = WIN_POINTS
    seed: Optional[int] = None

    def validate(self) -> "BoardConfig":
        if self.hex_size <= 0:
            raise ValueError(f"hex_size must be positive, got {self.hex_size}.")
        if self.corner_precision < 0:
            raise ValueError(f"corner_precision must be >= 0, got {self.corner_precision}.")
        if self.max_token_attempts < 0:
            raise ValueError(f"max_token_attempts must be >= 0, got {self.max_token_attempts}.")
        if self.longest_road_minimum < 1:
            raise ValueError(f"longest_road_minimum must be >= 1, got {self.longest_road_minimum}.")
        if self.largest_army_minimum < 1:
            raise ValueError(f"largest_army_minimum must be >= 1, got {self.largest_army_minimum}.")
        if self.win_points < 1:
            raise ValueError(f"win_points must be >= 1, got {self.win_points}.")
        return self
