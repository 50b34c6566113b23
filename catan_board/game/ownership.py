from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from catan_board.domain.graph import BoardGraph


@dataclass
class PlayerPieces:
    player_id: int
    settlements: set[int] = field(default_factory=set)
    cities: set[int] = field(default_factory=set)
    roads: set[int] = field(default_factory=set)

    def clone(self) -> "PlayerPieces":
        return PlayerPieces(
            player_id=self.player_id,
            settlements=set(self.settlements),
            cities=set(self.cities),
            roads=set(self.roads),
        )

    def buildings(self) -> set[int]:
        return self.settlements | self.cities

    def upgrade_to_city(self, vertex_id: int) -> None:
        if vertex_id not in self.settlements:
            raise ValueError(f"Player {self.player_id} has no settlement at vertex {vertex_id}.")
        self.settlements.remove(vertex_id)
        self.cities.add(vertex_id)


@dataclass
class Ownership:
    """Settlements, cities and roads held by each player; the board graph itself never changes."""

    players: Dict[int, PlayerPieces] = field(default_factory=dict)

    @classmethod
    def for_players(cls, player_ids: Iterable[int]) -> "Ownership":
        return cls(players={player_id: PlayerPieces(player_id=player_id) for player_id in player_ids})

    def clone(self) -> "Ownership":
        return Ownership(players={player_id: pieces.clone() for player_id, pieces in self.players.items()})

    def player(self, player_id: int) -> PlayerPieces:
        if player_id not in self.players:
            self.players[player_id] = PlayerPieces(player_id=player_id)
        return self.players[player_id]

    def pieces_of(self, player_id: int) -> PlayerPieces:
        return self.players.get(player_id) or PlayerPieces(player_id=player_id)

    def vertex_owners(self) -> Dict[int, int]:
        owners: Dict[int, int] = {}
        for player_id, pieces in self.players.items():
            for vertex_id in pieces.buildings():
                owners[vertex_id] = player_id
        return owners

    def occupied_vertices(self) -> set[int]:
        occupied: set[int] = set()
        for pieces in self.players.values():
            occupied.update(pieces.settlements)
            occupied.update(pieces.cities)
        return occupied

    def occupied_edges(self) -> set[int]:
        occupied: set[int] = set()
        for pieces in self.players.values():
            occupied.update(pieces.roads)
        return occupied

    def roads_by_player(self) -> Dict[int, set[int]]:
        return {player_id: set(pieces.roads) for player_id, pieces in self.players.items()}

    def network_vertices(self, graph: BoardGraph, player_id: int) -> set[int]:
        pieces = self.players.get(player_id)
        if pieces is None:
            return set()
        network = set(pieces.buildings())
        for edge_id in pieces.roads:
            edge = graph.edges[edge_id]
            network.add(edge.a)
            network.add(edge.b)
        return network
