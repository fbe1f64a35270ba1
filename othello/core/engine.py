"""
Functional surface of the engine for drivers.

Each call works on the Board it is given and never keeps state between calls.
"""

from typing import List, Optional

from .board import Board, Move
from .enums import CellState, Player
from .movegen import legal_moves as _legal_moves
from .solver import Solver


def construct_board(description: str) -> Board:
    return Board.from_string(description)


def legal_moves(board: Board, player: Player) -> List[Move]:
    return _legal_moves(board, player)


def place_and_flip(board: Board, move: Move, player: Player) -> Board:
    """Returns the position after `player` plays `move`. `board` is left unchanged."""
    return board.play(move, player)


def best_move(board: Board, player: Player, depth: int) -> Optional[Move]:
    """Best move under NegaScout, or None if `player` has no legal move."""
    return Solver().best_move(board, player, depth)


def piece_at(board: Board, r: int, c: int) -> CellState:
    return board.piece_at(r, c)
