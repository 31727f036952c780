"""
Core Chess Engine Package.

This package contains the fundamental components of the MCTS chess engine,
including the piece lists and lightweight board used by rollouts, the
Monte Carlo Tree Search implementation, and the search controller.
"""

from .piece_list import PieceList
from .sim_board import SimBoard, SimMove, SimPiece
from .move_generator import MoveGenerator
from .evaluation import Evaluation
from .rollout import RolloutSimulator, is_terminal
from .mcts import MCTS, MCTSNode, SearchTree, INVALID_MOVE
from .search import MCTSSearch, SearchDiagnostics
from .self_play import SelfPlay

__all__ = [
    'PieceList', 'SimBoard', 'SimMove', 'SimPiece', 'MoveGenerator', 'Evaluation',
    'RolloutSimulator', 'is_terminal', 'MCTS', 'MCTSNode', 'SearchTree', 'INVALID_MOVE',
    'MCTSSearch', 'SearchDiagnostics', 'SelfPlay',
]
