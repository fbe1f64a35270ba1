from typing import List, NamedTuple

from .constants import BOARD_SIZE, BOARD_CELLS, DIRECTIONS
from .enums import CellState, Player
from .movegen import legal_moves


class Move(NamedTuple):
    """(row, col), 0-indexed. Row is the vertical index."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class Board:
    def __init__(self, grid: List[List[CellState]] = None):
        """
        Board uses (row, col) indexing, row 0 at the top.
        Every cell holds exactly one CellState.
        """
        if grid is None:
            grid = [[CellState.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        self.grid = grid

    @classmethod
    def from_string(cls, description: str) -> "Board":
        """
        Builds a board from a 36-symbol row-major description.
        'X' = Black, 'O' = White, any other symbol = Empty.
        """
        if len(description) != BOARD_CELLS:
            raise ValueError(
                f"Board description must have {BOARD_CELLS} symbols, got {len(description)}"
            )

        grid = [
            [CellState.from_symbol(description[r * BOARD_SIZE + c]) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]
        return cls(grid)

    def copy(self) -> "Board":
        """Independent copy: no row list is shared with the source."""
        return Board([list(row) for row in self.grid])

    # --- Queries ---

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE

    def is_empty(self, r: int, c: int) -> bool:
        return self.grid[r][c] == CellState.EMPTY

    def piece_at(self, r: int, c: int) -> CellState:
        return self.grid[r][c]

    def has_neighbor(self, r: int, c: int) -> bool:
        """True if any of the 8 surrounding cells is on the board and occupied."""
        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc) and not self.is_empty(nr, nc):
                return True
        return False

    def count(self, cell: CellState) -> int:
        return sum(row.count(cell) for row in self.grid)

    # --- Move mechanics ---

    def place(self, r: int, c: int, player: Player) -> bool:
        """
        Places a stone if the cell is empty and touches an occupied cell.
        No capture is required. Returns False and leaves the board alone otherwise.
        """
        if not self.is_empty(r, c) or not self.has_neighbor(r, c):
            return False

        self.grid[r][c] = player.cell
        return True

    def flip(self, r: int, c: int, player: Player) -> int:
        """
        Line captures around a stone just placed at (r, c).
        A run of opponent stones is flipped only if it is closed by one of the
        player's own stones. Returns the number of flipped cells.
        """
        own = player.cell
        enemy = player.opponent.cell
        flipped = 0

        for dr, dc in DIRECTIONS:
            nr, nc = r + dr, c + dc
            while self.in_bounds(nr, nc) and self.grid[nr][nc] == enemy:
                nr += dr
                nc += dc

            if not (self.in_bounds(nr, nc) and self.grid[nr][nc] == own):
                continue

            tr, tc = r + dr, c + dc
            while (tr, tc) != (nr, nc):
                self.grid[tr][tc] = own
                flipped += 1
                tr += dr
                tc += dc

        return flipped

    def play(self, move: Move, player: Player) -> "Board":
        """
        Returns a NEW Board with the move placed and flipped.
        The current board is not modified.
        """
        child = self.copy()
        if not child.place(move.row, move.col, player):
            raise ValueError(f"Illegal placement {move} for {player}")
        child.flip(move.row, move.col, player)
        return child

    # --- Evaluation ---

    def evaluate(self, player: Player) -> int:
        """Material count: own stones minus opponent stones."""
        return self.count(player.cell) - self.count(player.opponent.cell)

    def is_game_over(self) -> bool:
        return not legal_moves(self, Player.BLACK) and not legal_moves(self, Player.WHITE)

    # --- Formatting ---

    def to_string(self) -> str:
        """36-symbol row-major description, empty cells as '+'."""
        return "".join(cell.value for row in self.grid for cell in row)

    def render(self) -> str:
        """Six text lines, one per row."""
        return "\n".join("".join(cell.value for cell in row) for row in self.grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __hash__(self) -> int:
        return hash(self.to_string())

    def __repr__(self) -> str:
        return f"Board('{self.to_string()}')"
