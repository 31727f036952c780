"""
Piece list for the lightweight rollout board.

A PieceList tracks the squares occupied by one piece category (colour and
piece type) so that pieces can be added, removed and moved in O(1) without
scanning the board.
"""

import numpy as np
from typing import Iterator


class PieceList:
    """
    Dense list of occupied squares for a single piece category.

    Only the first ``count`` entries of ``occupied_squares`` are valid; the rest
    are stale. ``_map`` goes from a square index (0-63) to the slot in
    ``occupied_squares`` holding that square, so for every live slot ``i``
    ``_map[occupied_squares[i]] == i``.

    The capacity is fixed at construction. Adding beyond it, or removing or
    moving a square that is not tracked, is a caller error and is not checked.
    """

    def __init__(self, max_piece_count: int = 16):
        """
        Initialize an empty piece list.

        Args:
            max_piece_count: Maximum number of pieces this list can hold.
        """
        self.occupied_squares = np.zeros(max_piece_count, dtype=np.int8)
        self._map = np.zeros(64, dtype=np.int8)
        self._num_pieces = 0

    @property
    def count(self) -> int:
        """Number of pieces currently tracked."""
        return self._num_pieces

    @property
    def capacity(self) -> int:
        return len(self.occupied_squares)

    def add_piece_at_square(self, square: int) -> None:
        self.occupied_squares[self._num_pieces] = square
        self._map[square] = self._num_pieces
        self._num_pieces += 1

    def remove_piece_at_square(self, square: int) -> None:
        """
        Remove the piece on ``square`` by swapping the last entry into its slot.

        Relative order of the remaining squares is not preserved.
        """
        piece_index = int(self._map[square])
        last_square = self.occupied_squares[self._num_pieces - 1]
        self.occupied_squares[piece_index] = last_square
        self._map[last_square] = piece_index
        self._num_pieces -= 1

    def move_piece(self, start_square: int, target_square: int) -> None:
        """
        Move a tracked piece without changing its slot.

        Unlike remove + add, the slot index stays the same, so callers holding
        a slot index across the move still point at the same piece.
        """
        piece_index = int(self._map[start_square])
        self.occupied_squares[piece_index] = target_square
        self._map[target_square] = piece_index

    def slot_of(self, square: int) -> int:
        """Slot holding ``square``. Only meaningful for tracked squares."""
        return int(self._map[square])

    def __getitem__(self, index: int) -> int:
        return int(self.occupied_squares[index])

    def __len__(self) -> int:
        return self._num_pieces

    def __iter__(self) -> Iterator[int]:
        for i in range(self._num_pieces):
            yield int(self.occupied_squares[i])

    def __repr__(self) -> str:
        return f"PieceList({list(self)})"
