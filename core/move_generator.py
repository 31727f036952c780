"""
Move generation for the MCTS engine.

Legal moves for tree expansion come straight from python-chess. Rollouts use
cheap pseudo-legal moves generated on the SimBoard from python-chess attack
tables: plain piece movement only, with no check filtering, castling,
promotion or en passant.
"""

import chess
import logging
from typing import Iterable, List, Optional

from .sim_board import SimBoard, SimMove

logger = logging.getLogger(__name__)

ALL_PROMOTIONS = (chess.QUEEN, chess.ROOK, chess.BISHOP, chess.KNIGHT)


class MoveGenerator:
    """
    Generates legal moves on a python-chess board and pseudo-legal moves on a SimBoard.
    """

    def __init__(self, promotions_to_generate: Optional[Iterable[chess.PieceType]] = None):
        """
        Initialize the move generator.

        Args:
            promotions_to_generate: Promotion piece types to keep when generating
                legal moves. Defaults to all four.
        """
        self.promotions_to_generate = frozenset(
            ALL_PROMOTIONS if promotions_to_generate is None else promotions_to_generate
        )

    def legal_moves(self, board: chess.Board, include_quiet: bool = True,
                    include_promotions: bool = True) -> List[chess.Move]:
        """
        Get the legal moves in a position, in python-chess generation order.

        Args:
            board: Position to generate moves for.
            include_quiet: If False, only captures are returned.
            include_promotions: If False, promotions are dropped entirely.

        Returns:
            List of legal moves.
        """
        moves = []
        for move in board.generate_legal_moves():
            if move.promotion is not None:
                if not include_promotions or move.promotion not in self.promotions_to_generate:
                    continue
            if not include_quiet and not board.is_capture(move):
                continue
            moves.append(move)
        return moves

    def pseudo_moves(self, sim_board: SimBoard, color: chess.Color) -> List[SimMove]:
        """
        Get material-only moves for one side on the rollout grid.

        Moves are ordered by piece type, then piece list slot, then destination
        square, so the result only depends on the grid contents.
        """
        moves = []
        occupied = sim_board.occupied
        own = sim_board.occupied_co[color]
        enemy = sim_board.occupied_co[not color]

        for from_square in sim_board.piece_list(color, chess.PAWN):
            self._add_moves(moves, from_square, self._pawn_targets(from_square, color, occupied, enemy))

        for piece_type in (chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN, chess.KING):
            for from_square in sim_board.piece_list(color, piece_type):
                targets = self._attacks(piece_type, from_square, occupied) & ~own
                self._add_moves(moves, from_square, targets)

        return moves

    @staticmethod
    def _add_moves(moves: List[SimMove], from_square: chess.Square, targets: chess.Bitboard) -> None:
        for to_square in chess.scan_forward(targets):
            moves.append(SimMove(from_square, to_square))

    @staticmethod
    def _pawn_targets(square: chess.Square, color: chess.Color,
                      occupied: chess.Bitboard, enemy: chess.Bitboard) -> chess.Bitboard:
        targets = chess.BB_PAWN_ATTACKS[color][square] & enemy

        step = 8 if color == chess.WHITE else -8
        start_rank = 1 if color == chess.WHITE else 6
        single = square + step
        # Pawns on the last rank stay there: promotion is not simulated.
        if 0 <= single < 64 and not occupied & chess.BB_SQUARES[single]:
            targets |= chess.BB_SQUARES[single]
            double = single + step
            if chess.square_rank(square) == start_rank and not occupied & chess.BB_SQUARES[double]:
                targets |= chess.BB_SQUARES[double]
        return targets

    @staticmethod
    def _attacks(piece_type: chess.PieceType, square: chess.Square, occupied: chess.Bitboard) -> chess.Bitboard:
        if piece_type == chess.KNIGHT:
            return chess.BB_KNIGHT_ATTACKS[square]
        if piece_type == chess.KING:
            return chess.BB_KING_ATTACKS[square]

        attacks = 0
        if piece_type in (chess.BISHOP, chess.QUEEN):
            attacks |= chess.BB_DIAG_ATTACKS[square][chess.BB_DIAG_MASKS[square] & occupied]
        if piece_type in (chess.ROOK, chess.QUEEN):
            attacks |= (chess.BB_RANK_ATTACKS[square][chess.BB_RANK_MASKS[square] & occupied] |
                        chess.BB_FILE_ATTACKS[square][chess.BB_FILE_MASKS[square] & occupied])
        return attacks
