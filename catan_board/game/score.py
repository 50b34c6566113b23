from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from catan_board.config import LARGEST_ARMY_MINIMUM, WIN_POINTS

from .ownership import Ownership

AWARD_POINTS = 2


@dataclass(frozen=True)
class ScoreLine:
    player_id: int
    settlements: int
    cities: int
    victory_cards: int
    has_longest_road: bool
    has_largest_army: bool
    total: int


def largest_army_holder(
    knights_played: Mapping[int, int],
    *,
    minimum: int = LARGEST_ARMY_MINIMUM,
) -> Optional[int]:
    if not knights_played:
        return None
    most = max(knights_played.values())
    contenders = [player_id for player_id, count in knights_played.items() if count == most]
    if most < minimum or len(contenders) != 1:
        return None
    return contenders[0]


def compute_scores(
    ownership: Ownership,
    *,
    longest_road_holder: Optional[int] = None,
    knights_played: Optional[Mapping[int, int]] = None,
    victory_cards: Optional[Mapping[int, int]] = None,
    largest_army_minimum: int = LARGEST_ARMY_MINIMUM,
) -> List[ScoreLine]:
    army_holder = largest_army_holder(knights_played or {}, minimum=largest_army_minimum)
    cards = victory_cards or {}

    lines = []
    for player_id in sorted(ownership.players):
        pieces = ownership.players[player_id]
        settlements = len(pieces.settlements)
        cities = len(pieces.cities)
        card_points = int(cards.get(player_id, 0))
        has_road = longest_road_holder == player_id
        has_army = army_holder == player_id
        total = settlements + 2 * cities + card_points
        if has_road:
            total += AWARD_POINTS
        if has_army:
            total += AWARD_POINTS
        lines.append(
            ScoreLine(
                player_id=player_id,
                settlements=settlements,
                cities=cities,
                victory_cards=card_points,
                has_longest_road=has_road,
                has_largest_army=has_army,
                total=total,
            )
        )
    return lines


def winner(
    scores: Sequence[ScoreLine],
    *,
    current_player: Optional[int] = None,
    minimum: int = WIN_POINTS,
) -> Optional[int]:
    """Player who has reached `minimum` points.

    With `current_player` only the player whose turn it is can win. Without it
    the highest total wins, lowest player id first.
    """
    if current_player is not None:
        for line in scores:
            if line.player_id == current_player and line.total >= minimum:
                return current_player
        return None

    best: Optional[ScoreLine] = None
    for line in sorted(scores, key=lambda item: item.player_id):
        if line.total >= minimum and (best is None or line.total > best.total):
            best = line
    return best.player_id if best is not None else None
