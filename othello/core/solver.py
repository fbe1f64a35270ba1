import logging
from typing import Callable, Dict, List, Optional

from .constants import MAX_SCORE, MIN_SCORE, RESEARCH_HORIZON
from .board import Board, Move
from .enums import Player
from .movegen import legal_moves

logger = logging.getLogger(__name__)

MoveGenerator = Callable[[Board, Player], List[Move]]


class Solver:
    def __init__(self, move_generator: MoveGenerator = legal_moves, research_horizon: int = RESEARCH_HORIZON):
        """
        move_generator: returns the moves for a side in search order.
        research_horizon: at or below this depth a null-window fail high is
        taken as the new alpha without a full-window re-search. 0 disables it.
        """
        self.move_generator = move_generator
        self.research_horizon = research_horizon
        self.nodes = 0

    def solve(self, board: Board, player: Player, depth: int) -> dict:
        """
        Root Entry Point.
        Scores every legal move with a full window and picks the best one.
        Ties go to the move generated first.
        """
        self.nodes = 0

        move_scores: Dict[Move, int] = {}
        best_score = MIN_SCORE - 1
        best_move: Optional[Move] = None

        for move in self.move_generator(board, player):
            child = board.play(move, player)
            score = -self.negascout(child, depth - 1, MIN_SCORE, MAX_SCORE, player.opponent)
            move_scores[move] = score

            if score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            logger.debug("No legal move for %s", player)
            best_score = None
        else:
            logger.debug(
                "Best move for %s at depth %d: %s (score %d, %d nodes)",
                player, depth, best_move, best_score, self.nodes
            )

        return {
            "best_move": best_move,
            "best_score": best_score,
            "scores": move_scores,
            "nodes_explored": self.nodes
        }

    def best_move(self, board: Board, player: Player, depth: int) -> Optional[Move]:
        """The selected move, or None when `player` cannot move."""
        return self.solve(board, player, depth)["best_move"]

    def is_game_over(self, board: Board) -> bool:
        return not self.move_generator(board, Player.BLACK) and not self.move_generator(board, Player.WHITE)

    def negascout(self, board: Board, depth: int, alpha: int, beta: int, player: Player) -> int:
        self.nodes += 1

        # 1. Horizon or finished game
        if depth <= 0 or self.is_game_over(board):
            return board.evaluate(player)

        moves = self.move_generator(board, player)

        # 2. Pass: same board, other side, one ply spent
        if not moves:
            return -self.negascout(board, depth - 1, -beta, -alpha, player.opponent)

        # 3. First child gets the full window, the rest a null window
        b = beta
        for move in moves:
            child = board.play(move, player)
            score = -self.negascout(child, depth - 1, -b, -alpha, player.opponent)

            if score > alpha:
                if b == beta or depth <= self.research_horizon:
                    alpha = score
                else:
                    # Fail high on the null window: re-search for the real score
                    alpha = -self.negascout(child, depth - 1, -beta, -score, player.opponent)

            if alpha >= beta:
                return alpha  # Beta Cutoff

            b = alpha + 1

        return alpha

    def negamax(self, board: Board, depth: int, player: Player) -> int:
        """Plain negamax over the same rules. No pruning."""
        self.nodes += 1

        if depth <= 0 or self.is_game_over(board):
            return board.evaluate(player)

        moves = self.move_generator(board, player)
        if not moves:
            return -self.negamax(board, depth - 1, player.opponent)

        best = MIN_SCORE
        for move in moves:
            score = -self.negamax(board.play(move, player), depth - 1, player.opponent)
            if score > best:
                best = score
        return best
