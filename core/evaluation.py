"""
Static evaluation of rollout positions.

Scores a SimBoard from one side's perspective using material and simple
piece-square tables, in centipawns.
"""

import chess
import numpy as np
import logging
from typing import Dict, Any, Optional

from .sim_board import SimBoard

logger = logging.getLogger(__name__)

# Defaults (centipawns)
PIECE_VALUES = {
    "PAWN": 100,
    "KNIGHT": 300,
    "BISHOP": 320,
    "ROOK": 500,
    "QUEEN": 900,
    "KING": 0,
}

# Tables are laid out as seen from white's side, a8 first.
PAWN_TABLE = np.array([
     0,  0,  0,  0,  0,  0,  0,  0,
    50, 50, 50, 50, 50, 50, 50, 50,
    10, 10, 20, 30, 30, 20, 10, 10,
     5,  5, 10, 25, 25, 10,  5,  5,
     0,  0,  0, 20, 20,  0,  0,  0,
     5, -5,-10,  0,  0,-10, -5,  5,
     5, 10, 10,-20,-20, 10, 10,  5,
     0,  0,  0,  0,  0,  0,  0,  0,
], dtype=np.int32)

KNIGHT_TABLE = np.array([
    -50,-40,-30,-30,-30,-30,-40,-50,
    -40,-20,  0,  0,  0,  0,-20,-40,
    -30,  0, 10, 15, 15, 10,  0,-30,
    -30,  5, 15, 20, 20, 15,  5,-30,
    -30,  0, 15, 20, 20, 15,  0,-30,
    -30,  5, 10, 15, 15, 10,  5,-30,
    -40,-20,  0,  5,  5,  0,-20,-40,
    -50,-40,-30,-30,-30,-30,-40,-50,
], dtype=np.int32)

BISHOP_TABLE = np.array([
    -20,-10,-10,-10,-10,-10,-10,-20,
    -10,  0,  0,  0,  0,  0,  0,-10,
    -10,  0,  5, 10, 10,  5,  0,-10,
    -10,  5,  5, 10, 10,  5,  5,-10,
    -10,  0, 10, 10, 10, 10,  0,-10,
    -10, 10, 10, 10, 10, 10, 10,-10,
    -10,  5,  0,  0,  0,  0,  5,-10,
    -20,-10,-10,-10,-10,-10,-10,-20,
], dtype=np.int32)

ROOK_TABLE = np.array([
     0,  0,  0,  0,  0,  0,  0,  0,
     5, 10, 10, 10, 10, 10, 10,  5,
    -5,  0,  0,  0,  0,  0,  0, -5,
    -5,  0,  0,  0,  0,  0,  0, -5,
    -5,  0,  0,  0,  0,  0,  0, -5,
    -5,  0,  0,  0,  0,  0,  0, -5,
    -5,  0,  0,  0,  0,  0,  0, -5,
     0,  0,  0,  5,  5,  0,  0,  0,
], dtype=np.int32)

QUEEN_TABLE = np.array([
    -20,-10,-10, -5, -5,-10,-10,-20,
    -10,  0,  0,  0,  0,  0,  0,-10,
    -10,  0,  5,  5,  5,  5,  0,-10,
     -5,  0,  5,  5,  5,  5,  0, -5,
      0,  0,  5,  5,  5,  5,  0, -5,
    -10,  5,  5,  5,  5,  5,  0,-10,
    -10,  0,  5,  0,  0,  0,  0,-10,
    -20,-10,-10, -5, -5,-10,-10,-20,
], dtype=np.int32)

KING_TABLE = np.array([
    -30,-40,-40,-50,-50,-40,-40,-30,
    -30,-40,-40,-50,-50,-40,-40,-30,
    -30,-40,-40,-50,-50,-40,-40,-30,
    -30,-40,-40,-50,-50,-40,-40,-30,
    -20,-30,-30,-40,-40,-30,-30,-20,
    -10,-20,-20,-20,-20,-20,-20,-10,
     20, 20,  0,  0,  0,  0, 20, 20,
     20, 30, 10,  0,  0, 10, 30, 20,
], dtype=np.int32)

PIECE_SQUARE_TABLES = {
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE,
    chess.ROOK: ROOK_TABLE,
    chess.QUEEN: QUEEN_TABLE,
    chess.KING: KING_TABLE,
}


class Evaluation:
    """
    Material plus piece-square evaluation for rollout grids.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the evaluator.

        Args:
            config: Configuration parameters. Reads the optional ``evaluation``
                section (``piece_values``, ``use_piece_square_tables``).
        """
        eval_config = (config or {}).get('evaluation', {})
        values = PIECE_VALUES.copy()
        values.update({name.upper(): value for name, value in eval_config.get('piece_values', {}).items()})
        self.piece_values = {
            piece_type: values[chess.piece_name(piece_type).upper()]
            for piece_type in chess.PIECE_TYPES
        }
        self.use_piece_square_tables = eval_config.get('use_piece_square_tables', True)

    def evaluate_sim_board(self, sim_board: SimBoard, for_white: bool) -> int:
        """
        Evaluate a rollout grid.

        Args:
            sim_board: Grid to evaluate.
            for_white: Perspective of the score.

        Returns:
            Score in centipawns; positive is good for the requested side.
        """
        white_score = self._side_score(sim_board, chess.WHITE)
        black_score = self._side_score(sim_board, chess.BLACK)
        score = white_score - black_score
        return score if for_white else -score

    def _side_score(self, sim_board: SimBoard, color: chess.Color) -> int:
        score = 0
        for piece_type in chess.PIECE_TYPES:
            piece_list = sim_board.piece_list(color, piece_type)
            score += self.piece_values[piece_type] * piece_list.count
            if self.use_piece_square_tables:
                table = PIECE_SQUARE_TABLES[piece_type]
                for square in piece_list:
                    # Tables are stored rank 8 first, so white squares are mirrored.
                    index = chess.square_mirror(square) if color == chess.WHITE else square
                    score += int(table[index])
        return score
