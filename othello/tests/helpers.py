from othello.core.board import Board
from othello.core.constants import BOARD_SIZE

# 5 empty cells: (1,4), (2,2), (3,1), (4,4), (5,2)
ENDGAME = "XXOOXX" "XOXO+X" "OO+XXO" "X+OXOX" "XOXX+O" "OX+OXX"
# 7 empty cells
LATE_MIDGAME = "XXOO+X" "O+XOXX" "XOX+OO" "+XOOX+" "OXX+XO" "X+OOXX"


def make_board(cells: dict) -> Board:
    """Builds a board from {(row, col): 'X' | 'O'}, everything else empty."""
    symbols = ["+"] * (BOARD_SIZE * BOARD_SIZE)
    for (r, c), symbol in cells.items():
        symbols[r * BOARD_SIZE + c] = symbol
    return Board.from_string("".join(symbols))
