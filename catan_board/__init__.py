"""Hex board graph, layout generation and placement rules."""

from .board import BoardState, HexTile, build_board, restore_board
from .config import BoardConfig

__all__ = ["BoardConfig", "BoardState", "HexTile", "build_board", "restore_board"]
