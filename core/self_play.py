"""
Self-play games for the MCTS engine.

This module plays the engine against itself from a given position and records
the game as PGN.
"""

import os
import time
import chess
import chess.pgn
import logging
from tqdm import tqdm
from typing import Any, Dict, Optional, Tuple

from config.config import MCTSSettings
from .evaluation import Evaluation
from .mcts import INVALID_MOVE
from .search import MCTSSearch

logger = logging.getLogger(__name__)


class SelfPlay:
    """
    Plays the engine against itself.

    Every move is chosen by a fresh MCTSSearch request. When a seed is given,
    move ``n`` uses ``seed + n`` so a whole game is reproducible.
    """

    def __init__(self, config: Dict[str, Any], settings: Optional[MCTSSettings] = None,
                 seed: Optional[int] = None):
        """
        Initialize the self-play manager.

        Args:
            config: Configuration parameters.
            settings: Search settings; built from ``config`` if None.
            seed: Base seed for the per-move searches.
        """
        self.config = config
        self.settings = settings or MCTSSettings.from_config(config)
        self.evaluation = Evaluation(config)
        self.seed = seed

        self_play_config = config.get('self_play', {})
        self.max_moves = self_play_config.get('max_moves', 200)

        logger.info(f"Initialized self-play with a limit of {self.max_moves} moves")

    def play_game(self, fen: Optional[str] = None,
                  show_progress: bool = True) -> Tuple[chess.pgn.Game, Dict[str, Any]]:
        """
        Play one game from a position.

        Args:
            fen: Starting position; the standard start position if None.
            show_progress: Whether to show a progress bar.

        Returns:
            Tuple of:
                - The game as a PGN game object
                - Game metadata (moves, result, termination, final FEN)
        """
        board = chess.Board(fen) if fen else chess.Board()
        start_time = time.time()

        for ply in tqdm(range(self.max_moves), desc="Self-play", unit="move", disable=not show_progress):
            if board.is_game_over():
                break

            seed = None if self.seed is None else self.seed + ply
            search = MCTSSearch(board, self.settings, evaluation=self.evaluation, seed=seed)
            move = search.start_search().result()

            if move == INVALID_MOVE:
                logger.warning(f"No move found at ply {ply}, stopping game")
                break

            logger.debug(f"Ply {ply + 1}: {board.san(move)} "
                         f"({search.diagnostics.num_playouts} playouts)")
            board.push(move)

        elapsed = time.time() - start_time
        result = board.result(claim_draw=True) if board.is_game_over(claim_draw=True) else "*"

        metadata = {
            'moves': [m.uci() for m in board.move_stack],
            'result': result,
            'termination': self._get_termination_reason(board),
            'final_fen': board.fen(),
        }
        logger.info(f"Game completed in {elapsed:.1f}s: "
                    f"{len(metadata['moves'])} moves, result: {metadata['result']}")

        game = chess.pgn.Game.from_board(board)
        game.headers["Event"] = "Self-play Game"
        game.headers["Site"] = "Local Machine"
        game.headers["Date"] = time.strftime('%Y.%m.%d')
        game.headers["White"] = "MCTS"
        game.headers["Black"] = "MCTS"
        game.headers["Result"] = result
        game.headers["Termination"] = metadata['termination']

        return game, metadata

    def _get_termination_reason(self, board: chess.Board) -> str:
        """
        Get a string describing how the game ended.

        Args:
            board: Board at the end of the game.

        Returns:
            String describing the termination reason.
        """
        if board.is_checkmate():
            return "checkmate"
        elif board.is_stalemate():
            return "stalemate"
        elif board.is_insufficient_material():
            return "insufficient material"
        elif board.can_claim_fifty_moves():
            return "fifty-move rule"
        elif board.can_claim_threefold_repetition():
            return "threefold repetition"
        else:
            return "move limit exceeded"

    def save_game_record(self, game: chess.pgn.Game, output_path: str) -> None:
        """
        Save a game record to disk as PGN.

        Args:
            game: Game to save.
            output_path: Destination file.
        """
        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
        with open(output_path, 'w') as f:
            print(game, file=f, end="\n\n")

        logger.debug(f"Game record saved to {output_path}")
