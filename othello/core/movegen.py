from typing import List, TYPE_CHECKING

from .constants import BOARD_SIZE

if TYPE_CHECKING:
    from .board import Board, Move
    from .enums import Player


def legal_moves(board: "Board", player: "Player") -> List["Move"]:
    """
    Returns every legal placement for `player` in row-major scan order.
    A move is legal when placing on a throwaway copy succeeds, i.e. the
    cell is empty and touches an occupied cell. It need not capture anything.
    """
    from .board import Move

    moves = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if board.is_empty(r, c):
                temp_board = board.copy()
                if temp_board.place(r, c, player):
                    moves.append(Move(r, c))
    return moves
