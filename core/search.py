"""
Search controller for the MCTS engine.

MCTSSearch owns one search request at a time: it builds a fresh engine and
tree per request, runs it inline or on a worker thread, and delivers the
chosen move exactly once through a future and any registered callbacks.
"""

import chess
import time
import random
import logging
import threading
import itertools
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, List, Optional

from config.config import MCTSSettings
from utils.logger import LoggerAdapter
from .evaluation import Evaluation
from .mcts import MCTS, INVALID_MOVE

logger = logging.getLogger(__name__)

_search_ids = itertools.count(1)


@dataclass(frozen=True)
class SearchDiagnostics:
    """Read-only summary of a finished search."""
    search_time_ms: float = 0.0
    num_playouts: int = 0
    num_nodes: int = 0
    best_move: chess.Move = INVALID_MOVE
    best_eval: int = 0
    cancelled: bool = False


class MCTSSearch:
    """
    Entry point for running MCTS searches.

    Cancellation is cooperative: ``end_search`` sets a flag that the engine
    reads once per completed playout, so a running rollout is never cut short
    and the search stops at most one playout after the request.
    """

    def __init__(self, board: chess.Board, settings: MCTSSettings,
                 evaluation: Optional[Evaluation] = None, seed: Optional[int] = None):
        """
        Initialize the search controller.

        Args:
            board: Position to search. Copied when each request starts, so
                later changes to it do not affect a running search.
            settings: Search settings.
            evaluation: Evaluator shared by this controller's requests.
            seed: Seed for the rollout random source. Each request gets its
                own generator seeded with this value.
        """
        self.board = board
        self.settings = settings
        self.evaluation = evaluation or Evaluation()
        self.seed = seed

        self.diagnostics = SearchDiagnostics()
        self.engine: Optional[MCTS] = None
        self._on_search_complete: List[Callable[[chess.Move], None]] = []
        self._abort_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._future: Optional[Future] = None
        self._lock = threading.Lock()

    def on_search_complete(self, callback: Callable[[chess.Move], None]) -> None:
        """Register a callback called once with the chosen move of every request."""
        self._on_search_complete.append(callback)

    @property
    def is_searching(self) -> bool:
        return self._future is not None and not self._future.done()

    def start_search(self) -> Future:
        """
        Start a search request.

        Runs inline unless ``settings.use_threading`` is set, in which case the
        request runs on a worker thread and this returns immediately.

        Returns:
            Future resolving to the chosen move, or INVALID_MOVE.

        Raises:
            RuntimeError: If a search is already running on this controller.
        """
        with self._lock:
            if self.is_searching:
                raise RuntimeError("A search is already running")
            self._abort_event.clear()
            future: Future = Future()
            future.set_running_or_notify_cancel()
            self._future = future
            board = self.board.copy()

        search_id = next(_search_ids)
        if self.settings.use_threading:
            self._thread = threading.Thread(target=self._run, args=(future, search_id, board),
                                            name=f"mcts-search-{search_id}", daemon=True)
            self._thread.start()
        else:
            self._run(future, search_id, board)
        return future

    def end_search(self) -> None:
        """Ask the running search to stop after its current playout."""
        self._abort_event.set()

    cancel = end_search

    def wait(self, timeout: Optional[float] = None) -> chess.Move:
        """
        Block until the current request finishes.

        Raises:
            RuntimeError: If no search has been started.
        """
        if self._future is None:
            raise RuntimeError("No search has been started")
        move = self._future.result(timeout)
        if self._thread is not None:
            self._thread.join()
        return move

    def _run(self, future: Future, search_id: int, board: chess.Board) -> None:
        try:
            search_logger = LoggerAdapter(logger, f"search {search_id}")
            search_logger.info(f"Searching {board.fen()}")
            rng = random.Random(self.seed)
            self.engine = MCTS(self.settings, evaluation=self.evaluation, rng=rng)
            start_time = time.perf_counter()

            best_move = self.engine.search(board, should_stop=self._abort_event.is_set)
            best_eval = self.engine.best_evaluation()
        except Exception as e:
            logger.error(f"[search {search_id}] Search failed: {e}")
            future.set_exception(e)
            return

        elapsed_ms = (time.perf_counter() - start_time) * 1000.0
        self.diagnostics = SearchDiagnostics(
            search_time_ms=elapsed_ms,
            num_playouts=self.engine.playout_count,
            num_nodes=len(self.engine.tree),
            best_move=best_move,
            best_eval=best_eval,
            cancelled=self._abort_event.is_set(),
        )

        search_logger.info(f"Best move: {best_move.uci()} (eval {best_eval}, "
                           f"{self.engine.playout_count} playouts in {elapsed_ms:.0f} ms)")

        try:
            for callback in self._on_search_complete:
                callback(best_move)
        except Exception as e:
            search_logger.error(f"Search completion callback failed: {e}")
            future.set_exception(e)
            return

        future.set_result(best_move)
