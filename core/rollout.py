"""
Random rollouts for the MCTS engine.

A rollout plays random pseudo-legal moves on a SimBoard until a king has been
captured, the side to move has no moves, or the depth limit is reached, and
then scores the final grid from both sides' perspectives.

The side to move alternates after every simulated move. This differs from
the simpler rollout that keeps generating moves for the side to move at the
simulated node, where one side makes every move and the other never replies.
"""

import chess
import random
import logging
from typing import List, Optional

from .evaluation import Evaluation
from .move_generator import MoveGenerator
from .sim_board import SimBoard

logger = logging.getLogger(__name__)


def is_terminal(sim_board: SimBoard) -> bool:
    """
    Check whether a rollout grid is finished.

    Only king capture counts: checkmate and stalemate are not detected here.

    Returns:
        True if either king is missing from the grid.
    """
    return not sim_board.has_king(chess.WHITE) or not sim_board.has_king(chess.BLACK)


class RolloutSimulator:
    """
    Plays one random, rule-light game per call and scores the result.
    """

    def __init__(self, move_generator: MoveGenerator, evaluation: Evaluation,
                 playout_depth_limit: int, rng: Optional[random.Random] = None):
        """
        Initialize the simulator.

        Args:
            move_generator: Source of pseudo-legal rollout moves.
            evaluation: Static evaluator for the final grid.
            playout_depth_limit: Maximum number of simulated moves per rollout.
            rng: Random source owned by the calling search. Not thread-safe;
                never share it between concurrent searches.
        """
        self.move_generator = move_generator
        self.evaluation = evaluation
        self.playout_depth_limit = playout_depth_limit
        self.rng = rng or random.Random()
        self.last_depth = 0

    def simulate(self, board: chess.Board) -> List[int]:
        """
        Run one rollout from a position.

        Args:
            board: Starting position. It is not modified.

        Returns:
            ``[white_score, black_score]``, each from that side's perspective.
        """
        sim_board = SimBoard.from_board(board)
        color = board.turn
        depth = 0

        while not is_terminal(sim_board) and depth < self.playout_depth_limit:
            moves = self.move_generator.pseudo_moves(sim_board, color)
            if not moves:
                break
            sim_board.make_move(moves[self.rng.randrange(len(moves))])
            color = not color
            depth += 1

        self.last_depth = depth
        return self.score(sim_board)

    def score(self, sim_board: SimBoard) -> List[int]:
        return [
            self.evaluation.evaluate_sim_board(sim_board, True),
            self.evaluation.evaluate_sim_board(sim_board, False),
        ]
