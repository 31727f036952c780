"""
Lightweight board used by the rollout simulator.

The SimBoard is a plain 8x8 grid of optional pieces with a piece list per
piece category and an occupancy bitboard per side. It knows nothing about
check, castling, promotion or en passant: moving a piece just relocates it and
overwrites whatever stands on the destination square.
"""

import chess
from typing import Dict, List, NamedTuple, Optional, Tuple

from .piece_list import PieceList


class SimPiece(NamedTuple):
    """A piece on the rollout grid."""
    color: chess.Color
    piece_type: chess.PieceType

    def symbol(self) -> str:
        symbol = chess.piece_symbol(self.piece_type)
        return symbol.upper() if self.color == chess.WHITE else symbol


class SimMove(NamedTuple):
    """A material-only move on the rollout grid."""
    from_square: chess.Square
    to_square: chess.Square


class SimBoard:
    """
    Destructively mutated grid for one rollout.

    Cells are indexed by python-chess square numbers (``rank * 8 + file``).
    """

    def __init__(self):
        self.cells: List[Optional[SimPiece]] = [None] * 64
        self.piece_lists: Dict[Tuple[chess.Color, chess.PieceType], PieceList] = {
            (color, piece_type): PieceList()
            for color in chess.COLORS
            for piece_type in chess.PIECE_TYPES
        }
        self.occupied_co: Dict[chess.Color, chess.Bitboard] = {chess.WHITE: 0, chess.BLACK: 0}

    @classmethod
    def from_board(cls, board: chess.Board) -> 'SimBoard':
        """
        Take a lightweight snapshot of a python-chess board.

        Squares are visited in ascending order so that piece list slots (and
        therefore pseudo-move ordering) only depend on the position.
        """
        sim_board = cls()
        for square, piece in sorted(board.piece_map().items()):
            sim_board.set_piece(square, piece.color, piece.piece_type)
        return sim_board

    @property
    def occupied(self) -> chess.Bitboard:
        return self.occupied_co[chess.WHITE] | self.occupied_co[chess.BLACK]

    def set_piece(self, square: chess.Square, color: chess.Color, piece_type: chess.PieceType) -> None:
        """Place a piece on an empty square."""
        self.cells[square] = SimPiece(color, piece_type)
        self.piece_lists[(color, piece_type)].add_piece_at_square(square)
        self.occupied_co[color] |= chess.BB_SQUARES[square]

    def piece_at(self, square: chess.Square) -> Optional[SimPiece]:
        return self.cells[square]

    def piece_list(self, color: chess.Color, piece_type: chess.PieceType) -> PieceList:
        return self.piece_lists[(color, piece_type)]

    def has_king(self, color: chess.Color) -> bool:
        return self.piece_lists[(color, chess.KING)].count > 0

    def make_move(self, move: SimMove) -> Optional[SimPiece]:
        """
        Relocate the piece on ``move.from_square``.

        Whatever stands on the destination is captured. Returns the captured
        piece, if any.
        """
        piece = self.cells[move.from_square]
        captured = self.cells[move.to_square]
        from_bb = chess.BB_SQUARES[move.from_square]
        to_bb = chess.BB_SQUARES[move.to_square]

        if captured is not None:
            self.piece_lists[(captured.color, captured.piece_type)].remove_piece_at_square(move.to_square)
            self.occupied_co[captured.color] &= ~to_bb

        self.piece_lists[(piece.color, piece.piece_type)].move_piece(move.from_square, move.to_square)
        self.occupied_co[piece.color] = (self.occupied_co[piece.color] & ~from_bb) | to_bb
        self.cells[move.to_square] = piece
        self.cells[move.from_square] = None
        return captured

    def piece_count(self) -> int:
        return sum(piece_list.count for piece_list in self.piece_lists.values())

    def __str__(self) -> str:
        rows = []
        for rank in reversed(range(8)):
            row = []
            for file in range(8):
                piece = self.cells[chess.square(file, rank)]
                row.append(piece.symbol() if piece else '.')
            rows.append(' '.join(row))
        return '\n'.join(rows)
