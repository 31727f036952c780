"""
Monte Carlo Tree Search implementation for the chess engine.

This module implements the MCTS algorithm used to search for the best move in a
chess position, guided by random rollouts on a lightweight board and a static
evaluation of where those rollouts end.

Two behaviours differ from the textbook algorithm and are kept on purpose:

* The tree policy expands a leaf and then returns *that leaf* for simulation,
  not one of its new children. The first rollout after every expansion is
  therefore spent on a position that already has statistics.
* The final move is picked with ``best_child(root, 0)``. Because any unvisited
  child is returned before scores are compared, a root child that never got a
  playout wins outright over a well explored one. With small playout budgets
  this makes the chosen move unstable.
"""

import chess
import math
import time
import random
import logging
from typing import Callable, Dict, Iterator, List, Optional, Any

from config.config import MCTSSettings
from .evaluation import Evaluation
from .move_generator import MoveGenerator
from .rollout import RolloutSimulator

logger = logging.getLogger(__name__)

INVALID_MOVE = chess.Move.null()
ROOT = 0


class MCTSNode:
    """
    Node in the Monte Carlo Tree Search.

    Each node represents a position and stores statistics from the search
    process. Nodes live in a SearchTree and refer to each other by integer
    handle; ``parent`` is only used to walk back up during backup.
    """

    __slots__ = ('index', 'parent', 'children', 'move', 'visits', 'value', 'board')

    def __init__(self, index: int, board: chess.Board, parent: Optional[int] = None,
                 move: chess.Move = INVALID_MOVE):
        """
        Initialize a new MCTS node.

        Args:
            index: Handle of this node in its tree.
            board: Position at this node. The node owns it.
            parent: Handle of the parent node, None for the root.
            move: Move that led to this node from the parent.
        """
        self.index = index
        self.parent = parent
        self.children: List[int] = []
        self.move = move
        self.visits = 0
        # Summed from the perspective of the side to move at this node.
        self.value = 0
        self.board = board

    @property
    def white_to_move(self) -> bool:
        return self.board.turn == chess.WHITE

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def mean_value(self) -> float:
        if self.visits == 0:
            return 0.0
        return self.value / self.visits

    def __repr__(self) -> str:
        return (f"MCTSNode(index={self.index}, move={self.move.uci()}, "
                f"visits={self.visits}, value={self.value}, children={len(self.children)})")


class SearchTree:
    """
    Arena of MCTS nodes for one search request.

    Node handles are list indices and never change; the root is handle 0.
    """

    def __init__(self, board: chess.Board):
        self.nodes: List[MCTSNode] = [MCTSNode(ROOT, board.copy())]

    @property
    def root(self) -> MCTSNode:
        return self.nodes[ROOT]

    def add_child(self, parent: MCTSNode, board: chess.Board, move: chess.Move) -> MCTSNode:
        child = MCTSNode(len(self.nodes), board, parent.index, move)
        self.nodes.append(child)
        parent.children.append(child.index)
        return child

    def children(self, node: MCTSNode) -> List[MCTSNode]:
        return [self.nodes[index] for index in node.children]

    def path_to_root(self, node: MCTSNode) -> Iterator[MCTSNode]:
        """Yield ``node`` and each of its ancestors, ending with the root."""
        current: Optional[MCTSNode] = node
        while current is not None:
            yield current
            current = self.nodes[current.parent] if current.parent is not None else None

    def __getitem__(self, index: int) -> MCTSNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)


class MCTS:
    """
    Monte Carlo Tree Search implementation.

    Runs playouts (selection, expansion, rollout, backup) until the playout
    budget is spent, the time limit passes, or ``should_stop`` returns True.
    Stop conditions are checked once per completed playout, so stopping can
    lag by up to one playout.

    An MCTS instance and its random source belong to a single search at a time.
    """

    def __init__(self, settings: MCTSSettings,
                 move_generator: Optional[MoveGenerator] = None,
                 evaluation: Optional[Evaluation] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the MCTS algorithm.

        Args:
            settings: Search settings.
            move_generator: Move generator; built from the settings if None.
            evaluation: Evaluator for rollout end positions.
            rng: Random source for rollouts. Pass a seeded instance for
                reproducible searches.
        """
        self.settings = settings
        self.move_generator = move_generator or MoveGenerator(settings.promotions_to_search)
        self.evaluation = evaluation or Evaluation()
        self.rng = rng or random.Random()
        self.rollout = RolloutSimulator(self.move_generator, self.evaluation,
                                        settings.playout_depth_limit, self.rng)

        self.tree: Optional[SearchTree] = None
        self.playout_count = 0
        # Handle of the node simulated in each playout, in order.
        self.simulated_nodes: List[int] = []

    def search(self, board: chess.Board,
               should_stop: Optional[Callable[[], bool]] = None) -> chess.Move:
        """
        Run MCTS from a position and return the chosen move.

        Args:
            board: Root position. It is copied, never modified.
            should_stop: Polled once per playout; returning True ends the search.

        Returns:
            The chosen move, or INVALID_MOVE if there is nothing to choose.
        """
        self.tree = SearchTree(board)
        self.playout_count = 0
        self.simulated_nodes = []

        if not self.move_generator.legal_moves(board, True, True):
            logger.info("No legal moves in root position, skipping search")
            return INVALID_MOVE

        deadline = None
        if self.settings.use_time_limit:
            deadline = time.perf_counter() + self.settings.time_limit_ms / 1000.0

        logger.debug("Starting MCTS search")

        while not self._should_stop(should_stop, deadline):
            leaf = self._tree_policy(self.tree.root)
            score = self.rollout.simulate(leaf.board)
            self._backup(leaf, score)
            self.simulated_nodes.append(leaf.index)
            self.playout_count += 1

        logger.debug(f"MCTS search completed with {self.playout_count} playouts, "
                     f"{len(self.tree)} nodes")

        best_child = self.best_child(self.tree.root, 0)
        if best_child is None:
            return INVALID_MOVE
        return best_child.move

    def best_evaluation(self) -> int:
        """Mean value of the chosen root child, from the side to move at that child."""
        if self.tree is None:
            return 0
        best_child = self.best_child(self.tree.root, 0)
        if best_child is None:
            return 0
        return int(best_child.mean_value())

    def _should_stop(self, should_stop: Optional[Callable[[], bool]], deadline: Optional[float]) -> bool:
        if should_stop is not None and should_stop():
            return True
        if self.settings.limit_num_of_playouts and self.playout_count >= self.settings.max_num_of_playouts:
            return True
        if deadline is not None and time.perf_counter() >= deadline:
            return True
        return False

    def _tree_policy(self, node: MCTSNode) -> MCTSNode:
        """
        Descend to a leaf by UCB1, expand it, and return the expanded leaf itself.
        """
        while not node.is_leaf():
            node = self.best_child(node, self.settings.exploration_constant)
        self._expand(node)
        return node

    def _expand(self, node: MCTSNode) -> None:
        """
        Add one child per legal move. Positions without legal moves stay leaves.
        """
        for move in self.move_generator.legal_moves(node.board, True, True):
            child_board = node.board.copy(stack=False)
            child_board.push(move)
            self.tree.add_child(node, child_board, move)

    def best_child(self, node: MCTSNode, exploration_constant: float) -> Optional[MCTSNode]:
        """
        Select a child of ``node`` by UCB1.

        The first child with no visits is returned immediately. Otherwise the
        child with the highest ``value / visits + c * sqrt(ln(N) / visits)``
        wins, ties going to the earliest child. All children share the same
        perspective, so no sign flip is needed between siblings.

        Returns:
            The selected child, or None if ``node`` has no children.
        """
        best = None
        best_value = -math.inf
        for child in self.tree.children(node):
            if child.visits == 0:
                return child

            ucb_value = (child.value / child.visits +
                         exploration_constant * math.sqrt(math.log(node.visits) / child.visits))
            if ucb_value > best_value:
                best = child
                best_value = ucb_value
        return best

    def _backup(self, node: MCTSNode, score: List[int]) -> None:
        """
        Add one visit and the matching score to ``node`` and every ancestor.

        ``score`` is ``[white_score, black_score]``; each node takes the entry
        for the side to move in its own position.
        """
        for current in self.tree.path_to_root(node):
            current.visits += 1
            current.value += score[0] if current.white_to_move else score[1]

    def root_statistics(self) -> List[Dict[str, Any]]:
        """
        Statistics for each root child, in move generation order.

        Returns:
            List of dictionaries with ``move``, ``visits``, ``value`` and
            ``mean_value``.
        """
        if self.tree is None:
            return []
        return [
            {
                'move': child.move,
                'visits': child.visits,
                'value': child.value,
                'mean_value': child.mean_value(),
            }
            for child in self.tree.children(self.tree.root)
        ]
