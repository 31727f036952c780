"""
Unit tests for the core chess engine components.

This module contains tests for the piece lists, the rollout board, move
generation, evaluation, rollouts and the MCTS engine.
"""

import unittest
import os
import sys
import math
import random
import chess
from unittest.mock import MagicMock, patch

# Add the project root to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.config import MCTSSettings
from core.piece_list import PieceList
from core.sim_board import SimBoard, SimMove, SimPiece
from core.move_generator import MoveGenerator
from core.evaluation import Evaluation
from core.rollout import RolloutSimulator, is_terminal
from core.mcts import MCTS, MCTSNode, SearchTree, INVALID_MOVE

# White to move, only legal move is Kxb2
SINGLE_MOVE_FEN = "k7/8/8/8/8/8/1q6/K7 w - - 0 1"
# White to move, stalemate
STALEMATE_FEN = "7k/8/8/8/8/8/5q2/7K w - - 0 1"


def assert_slot_invariant(test, piece_list):
    for slot in range(piece_list.count):
        test.assertEqual(piece_list.slot_of(piece_list[slot]), slot)


class TestPieceList(unittest.TestCase):
    """Tests for the piece list."""

    def setUp(self):
        """Set up test environment."""
        self.pieces = PieceList()
        for square in (10, 20, 30):
            self.pieces.add_piece_at_square(square)

    def test_initialization(self):
        """Test an empty piece list."""
        pieces = PieceList(8)
        self.assertEqual(pieces.count, 0)
        self.assertEqual(pieces.capacity, 8)
        self.assertEqual(list(pieces), [])

    def test_add(self):
        """Test adding pieces appends them in order."""
        self.assertEqual(self.pieces.count, 3)
        self.assertEqual(list(self.pieces), [10, 20, 30])
        self.assertEqual(self.pieces.slot_of(20), 1)
        assert_slot_invariant(self, self.pieces)

    def test_remove_swaps_last_into_slot(self):
        """Test removing a piece moves the last entry into its slot."""
        self.pieces.remove_piece_at_square(10)
        self.assertEqual(self.pieces.count, 2)
        self.assertEqual(list(self.pieces), [30, 20])
        self.assertEqual(self.pieces.slot_of(30), 0)
        assert_slot_invariant(self, self.pieces)

    def test_remove_last(self):
        """Test removing the last entry."""
        self.pieces.remove_piece_at_square(30)
        self.assertEqual(list(self.pieces), [10, 20])
        assert_slot_invariant(self, self.pieces)

    def test_add_then_remove_restores_count(self):
        """Test add followed by remove leaves the list consistent."""
        for square in (5, 63, 0):
            before = self.pieces.count
            self.pieces.add_piece_at_square(square)
            self.pieces.remove_piece_at_square(square)
            self.assertEqual(self.pieces.count, before)
            assert_slot_invariant(self, self.pieces)
        self.assertEqual(sorted(self.pieces), [10, 20, 30])

    def test_move_piece_keeps_slot(self):
        """Test moving a piece rewrites its slot in place."""
        slot = self.pieces.slot_of(20)
        self.pieces.move_piece(20, 45)
        self.assertEqual(self.pieces.count, 3)
        self.assertEqual(self.pieces[slot], 45)
        self.assertEqual(self.pieces.slot_of(45), slot)
        self.assertNotIn(20, list(self.pieces))
        assert_slot_invariant(self, self.pieces)

    def test_fill_to_capacity(self):
        """Test a list can be filled to its capacity."""
        pieces = PieceList(16)
        for square in range(16):
            pieces.add_piece_at_square(square * 4)
        self.assertEqual(len(pieces), 16)
        assert_slot_invariant(self, pieces)


class TestSimBoard(unittest.TestCase):
    """Tests for the lightweight rollout board."""

    def setUp(self):
        """Set up test environment."""
        self.sim_board = SimBoard.from_board(chess.Board())

    def test_from_start_position(self):
        """Test snapshot of the starting position."""
        self.assertEqual(self.sim_board.piece_count(), 32)
        self.assertEqual(self.sim_board.piece_list(chess.WHITE, chess.PAWN).count, 8)
        self.assertEqual(self.sim_board.piece_at(chess.E1), SimPiece(chess.WHITE, chess.KING))
        self.assertIsNone(self.sim_board.piece_at(chess.E4))
        self.assertTrue(self.sim_board.has_king(chess.WHITE))
        self.assertTrue(self.sim_board.has_king(chess.BLACK))
        self.assertEqual(self.sim_board.occupied, chess.Board().occupied)

    def test_str(self):
        """Test the text rendering."""
        lines = str(self.sim_board).splitlines()
        self.assertEqual(lines[0], "r n b q k b n r")
        self.assertEqual(lines[7], "R N B Q K B N R")

    def test_quiet_move(self):
        """Test moving a piece to an empty square."""
        captured = self.sim_board.make_move(SimMove(chess.E2, chess.E4))
        self.assertIsNone(captured)
        self.assertIsNone(self.sim_board.piece_at(chess.E2))
        self.assertEqual(self.sim_board.piece_at(chess.E4), SimPiece(chess.WHITE, chess.PAWN))
        self.assertIn(chess.E4, list(self.sim_board.piece_list(chess.WHITE, chess.PAWN)))
        self.assertTrue(self.sim_board.occupied_co[chess.WHITE] & chess.BB_E4)
        self.assertFalse(self.sim_board.occupied_co[chess.WHITE] & chess.BB_E2)

    def test_capture(self):
        """Test capturing overwrites the destination."""
        sim_board = SimBoard.from_board(chess.Board("n3k3/8/8/8/8/8/8/R3K3 w - - 0 1"))
        captured = sim_board.make_move(SimMove(chess.A1, chess.A8))
        self.assertEqual(captured, SimPiece(chess.BLACK, chess.KNIGHT))
        self.assertEqual(sim_board.piece_list(chess.BLACK, chess.KNIGHT).count, 0)
        self.assertEqual(list(sim_board.piece_list(chess.WHITE, chess.ROOK)), [chess.A8])
        self.assertFalse(sim_board.occupied_co[chess.BLACK] & chess.BB_A8)
        self.assertTrue(sim_board.occupied_co[chess.WHITE] & chess.BB_A8)
        self.assertEqual(sim_board.piece_count(), 3)

    def test_king_capture(self):
        """Test capturing a king removes it from the board."""
        sim_board = SimBoard.from_board(chess.Board("4k3/3Q4/8/8/8/8/8/4K3 w - - 0 1"))
        sim_board.make_move(SimMove(chess.D7, chess.E8))
        self.assertFalse(sim_board.has_king(chess.BLACK))
        self.assertTrue(sim_board.has_king(chess.WHITE))


class TestMoveGenerator(unittest.TestCase):
    """Tests for legal and pseudo-legal move generation."""

    def setUp(self):
        """Set up test environment."""
        self.generator = MoveGenerator()

    def test_legal_moves_start_position(self):
        """Test legal moves in the starting position."""
        moves = self.generator.legal_moves(chess.Board())
        self.assertEqual(len(moves), 20)
        self.assertEqual(moves, list(chess.Board().generate_legal_moves()))

    def test_legal_moves_without_quiet(self):
        """Test that excluding quiet moves leaves only captures."""
        self.assertEqual(self.generator.legal_moves(chess.Board(), include_quiet=False), [])
        board = chess.Board("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        self.assertEqual(self.generator.legal_moves(board, include_quiet=False),
                         [chess.Move.from_uci("e4d5")])

    def test_promotion_filter(self):
        """Test promotion kinds are filtered."""
        board = chess.Board("8/P7/8/8/8/8/8/k6K w - - 0 1")
        self.assertEqual(len(self.generator.legal_moves(board)), 7)

        queen_only = MoveGenerator([chess.QUEEN])
        moves = queen_only.legal_moves(board)
        self.assertEqual(len(moves), 4)
        self.assertIn(chess.Move.from_uci("a7a8q"), moves)
        self.assertNotIn(chess.Move.from_uci("a7a8n"), moves)

        self.assertEqual(len(self.generator.legal_moves(board, include_promotions=False)), 3)

    def test_pseudo_moves_start_position(self):
        """Test pseudo-legal moves in the starting position."""
        sim_board = SimBoard.from_board(chess.Board())
        moves = self.generator.pseudo_moves(sim_board, chess.WHITE)
        self.assertEqual(len(moves), 20)
        self.assertEqual(moves[0], SimMove(chess.A2, chess.A3))
        self.assertEqual(moves[1], SimMove(chess.A2, chess.A4))

        black_moves = self.generator.pseudo_moves(sim_board, chess.BLACK)
        self.assertEqual(len(black_moves), 20)
        self.assertIn(SimMove(chess.G8, chess.F6), black_moves)

    def test_sliding_pieces(self):
        """Test rook moves stop at blockers and include captures."""
        sim_board = SimBoard.from_board(chess.Board("k7/8/3p4/8/3R4/8/3P4/7K w - - 0 1"))
        rook_moves = [m for m in self.generator.pseudo_moves(sim_board, chess.WHITE)
                      if m.from_square == chess.D4]
        self.assertEqual(len(rook_moves), 10)
        self.assertIn(SimMove(chess.D4, chess.D6), rook_moves)
        self.assertNotIn(SimMove(chess.D4, chess.D7), rook_moves)
        self.assertNotIn(SimMove(chess.D4, chess.D2), rook_moves)

    def test_pawn_moves(self):
        """Test pawn pushes, double pushes and captures."""
        sim_board = SimBoard.from_board(chess.Board("4k3/4p3/3N4/8/8/4p3/4P3/4K3 b - - 0 1"))
        moves = self.generator.pseudo_moves(sim_board, chess.BLACK)
        e7_moves = {m.to_square for m in moves if m.from_square == chess.E7}
        self.assertEqual(e7_moves, {chess.E6, chess.E5, chess.D6})

        # White e2 pawn is blocked by the black pawn on e3
        white_moves = self.generator.pseudo_moves(sim_board, chess.WHITE)
        self.assertFalse([m for m in white_moves if m.from_square == chess.E2])

    def test_pawn_on_last_rank_does_not_move(self):
        """Test that promotion is not simulated."""
        sim_board = SimBoard()
        sim_board.set_piece(chess.A8, chess.WHITE, chess.PAWN)
        sim_board.set_piece(chess.H1, chess.WHITE, chess.KING)
        sim_board.set_piece(chess.H8, chess.BLACK, chess.KING)
        moves = self.generator.pseudo_moves(sim_board, chess.WHITE)
        self.assertFalse([m for m in moves if m.from_square == chess.A8])

    def test_no_castling(self):
        """Test the king never castles on the rollout board."""
        sim_board = SimBoard.from_board(chess.Board("4k3/8/8/8/8/8/8/4K2R w K - 0 1"))
        king_moves = {m.to_square for m in self.generator.pseudo_moves(sim_board, chess.WHITE)
                      if m.from_square == chess.E1}
        self.assertNotIn(chess.G1, king_moves)
        self.assertEqual(king_moves, {chess.D1, chess.F1, chess.D2, chess.E2, chess.F2})


class TestEvaluation(unittest.TestCase):
    """Tests for the static evaluator."""

    def setUp(self):
        """Set up test environment."""
        self.evaluation = Evaluation()

    def test_start_position_is_balanced(self):
        """Test the starting position scores zero for both sides."""
        sim_board = SimBoard.from_board(chess.Board())
        self.assertEqual(self.evaluation.evaluate_sim_board(sim_board, True), 0)
        self.assertEqual(self.evaluation.evaluate_sim_board(sim_board, False), 0)

    def test_perspectives_are_opposite(self):
        """Test white and black scores are negatives of each other."""
        sim_board = SimBoard.from_board(chess.Board("4k3/8/8/3q4/8/2N5/PP6/4K3 w - - 0 1"))
        white = self.evaluation.evaluate_sim_board(sim_board, True)
        black = self.evaluation.evaluate_sim_board(sim_board, False)
        self.assertEqual(white, -black)
        self.assertLess(white, 0)

    def test_material_only(self):
        """Test material scoring with piece-square tables disabled."""
        evaluation = Evaluation({'evaluation': {'use_piece_square_tables': False}})
        sim_board = SimBoard.from_board(chess.Board("4k3/8/8/8/8/8/8/3QK3 w - - 0 1"))
        self.assertEqual(evaluation.evaluate_sim_board(sim_board, True), 900)
        self.assertEqual(evaluation.evaluate_sim_board(sim_board, False), -900)

    def test_piece_value_override(self):
        """Test piece values from configuration."""
        evaluation = Evaluation({'evaluation': {'use_piece_square_tables': False,
                                                'piece_values': {'queen': 1000}}})
        sim_board = SimBoard.from_board(chess.Board("4k3/8/8/8/8/8/8/3QK3 w - - 0 1"))
        self.assertEqual(evaluation.evaluate_sim_board(sim_board, True), 1000)


class TestRollout(unittest.TestCase):
    """Tests for the rollout simulator."""

    def setUp(self):
        """Set up test environment."""
        self.evaluation = Evaluation()

    def test_is_terminal(self):
        """Test terminal detection by king presence."""
        self.assertFalse(is_terminal(SimBoard.from_board(chess.Board())))

        no_black_king = SimBoard()
        no_black_king.set_piece(chess.E1, chess.WHITE, chess.KING)
        self.assertTrue(is_terminal(no_black_king))

        no_white_king = SimBoard()
        no_white_king.set_piece(chess.E8, chess.BLACK, chess.KING)
        self.assertTrue(is_terminal(no_white_king))

        self.assertTrue(is_terminal(SimBoard()))

    def test_depth_zero_evaluates_initial_grid(self):
        """Test a zero depth limit plays no moves."""
        board = chess.Board("4k3/8/8/3q4/8/2N5/PP6/4K3 w - - 0 1")
        move_generator = MagicMock()
        simulator = RolloutSimulator(move_generator, self.evaluation, 0, random.Random(1))

        score = simulator.simulate(board)

        move_generator.pseudo_moves.assert_not_called()
        expected = SimBoard.from_board(board)
        self.assertEqual(score, [self.evaluation.evaluate_sim_board(expected, True),
                                 self.evaluation.evaluate_sim_board(expected, False)])
        self.assertEqual(simulator.last_depth, 0)

    def test_stops_without_moves(self):
        """Test the rollout stops when the side to move has no moves."""
        move_generator = MagicMock()
        move_generator.pseudo_moves.return_value = []
        simulator = RolloutSimulator(move_generator, self.evaluation, 10, random.Random(1))
        simulator.simulate(chess.Board())
        self.assertEqual(move_generator.pseudo_moves.call_count, 1)
        self.assertEqual(simulator.last_depth, 0)

    def test_stops_on_king_capture(self):
        """Test the rollout stops once a king is captured."""
        move_generator = MagicMock()
        move_generator.pseudo_moves.return_value = [SimMove(chess.D7, chess.E8)]
        simulator = RolloutSimulator(move_generator, self.evaluation, 10, random.Random(1))

        white_score, black_score = simulator.simulate(chess.Board("4k3/3Q4/8/8/8/8/8/4K3 w - - 0 1"))

        self.assertEqual(simulator.last_depth, 1)
        self.assertGreater(white_score, 0)
        self.assertEqual(white_score, -black_score)

    def test_sides_alternate(self):
        """Test the side to move alternates during a rollout."""
        move_generator = MagicMock(wraps=MoveGenerator())
        simulator = RolloutSimulator(move_generator, self.evaluation, 3, random.Random(5))
        simulator.simulate(chess.Board())
        colors = [c.args[1] for c in move_generator.pseudo_moves.call_args_list]
        self.assertEqual(colors, [chess.WHITE, chess.BLACK, chess.WHITE])
        self.assertEqual(simulator.last_depth, 3)

    def test_does_not_modify_board(self):
        """Test the input board is left untouched."""
        board = chess.Board()
        simulator = RolloutSimulator(MoveGenerator(), self.evaluation, 20, random.Random(3))
        simulator.simulate(board)
        self.assertEqual(board.fen(), chess.STARTING_FEN)

    def test_seeded_rollouts_repeat(self):
        """Test identical seeds give identical rollouts."""
        scores = []
        for _ in range(2):
            simulator = RolloutSimulator(MoveGenerator(), self.evaluation, 30, random.Random(11))
            scores.append([simulator.simulate(chess.Board()) for _ in range(5)])
        self.assertEqual(scores[0], scores[1])


class TestMCTSNode(unittest.TestCase):
    """Tests for the MCTS node and tree."""

    def test_initialization(self):
        """Test node initialization."""
        tree = SearchTree(chess.Board())
        root = tree.root
        self.assertEqual(root.index, 0)
        self.assertEqual(root.visits, 0)
        self.assertEqual(root.value, 0)
        self.assertIsNone(root.parent)
        self.assertEqual(root.move, INVALID_MOVE)
        self.assertTrue(root.is_leaf())
        self.assertTrue(root.white_to_move)
        self.assertEqual(root.mean_value(), 0.0)

    def test_root_board_is_a_copy(self):
        """Test the tree owns its own copy of the root position."""
        board = chess.Board()
        tree = SearchTree(board)
        board.push_uci("e2e4")
        self.assertEqual(tree.root.board.fen(), chess.STARTING_FEN)

    def test_add_child(self):
        """Test adding children and walking back to the root."""
        tree = SearchTree(chess.Board())
        board = chess.Board()
        board.push_uci("e2e4")
        child = tree.add_child(tree.root, board, chess.Move.from_uci("e2e4"))

        self.assertEqual(child.index, 1)
        self.assertEqual(child.parent, 0)
        self.assertEqual(tree.root.children, [1])
        self.assertFalse(child.white_to_move)
        self.assertEqual([n.index for n in tree.path_to_root(child)], [1, 0])
        self.assertEqual(len(tree), 2)

    def test_mean_value(self):
        """Test mean value calculation."""
        node = MCTSNode(0, chess.Board())
        node.visits = 4
        node.value = 10
        self.assertEqual(node.mean_value(), 2.5)


class TestMCTS(unittest.TestCase):
    """Tests for the MCTS algorithm."""

    def setUp(self):
        """Set up test environment."""
        self.settings = MCTSSettings(max_num_of_playouts=30, playout_depth_limit=6)
        self.mcts = MCTS(self.settings, rng=random.Random(0))

    def _tree_with_children(self, stats, parent_visits):
        board = chess.Board()
        tree = SearchTree(board)
        tree.root.visits = parent_visits
        for move, (visits, value) in zip(list(board.legal_moves), stats):
            child_board = board.copy()
            child_board.push(move)
            child = tree.add_child(tree.root, child_board, move)
            child.visits = visits
            child.value = value
        self.mcts.tree = tree
        return tree

    def test_best_child_prefers_first_unvisited(self):
        """Test an unvisited child is returned before scores are compared."""
        tree = self._tree_with_children([(5, 500), (0, 0), (0, 0)], 5)
        best = self.mcts.best_child(tree.root, 0.7)
        self.assertEqual(best.index, tree.root.children[1])

    def test_best_child_exploitation(self):
        """Test pure exploitation picks the best mean value."""
        tree = self._tree_with_children([(9, 18), (1, 1)], 10)
        best = self.mcts.best_child(tree.root, 0)
        self.assertEqual(best.index, tree.root.children[0])

    def test_best_child_exploration(self):
        """Test a large exploration constant favours the less visited child."""
        tree = self._tree_with_children([(9, 18), (1, 1)], 10)
        # 2 + 2 * sqrt(ln 10 / 9) < 1 + 2 * sqrt(ln 10)
        self.assertLess(2 + 2 * math.sqrt(math.log(10) / 9), 1 + 2 * math.sqrt(math.log(10)))
        best = self.mcts.best_child(tree.root, 2.0)
        self.assertEqual(best.index, tree.root.children[1])

    def test_best_child_tie_goes_to_first(self):
        """Test ties resolve to the first child."""
        tree = self._tree_with_children([(3, 6), (3, 6), (3, 6)], 9)
        best = self.mcts.best_child(tree.root, 1.0)
        self.assertEqual(best.index, tree.root.children[0])

    def test_best_child_without_children(self):
        """Test a node with no children has no best child."""
        self.mcts.tree = SearchTree(chess.Board())
        self.assertIsNone(self.mcts.best_child(self.mcts.tree.root, 0))

    def test_backup_uses_side_to_move(self):
        """Test backup adds the score of each node's side to move."""
        self.mcts.tree = SearchTree(chess.Board())
        root = self.mcts.tree.root
        board = chess.Board()
        board.push_uci("e2e4")
        child = self.mcts.tree.add_child(root, board, chess.Move.from_uci("e2e4"))

        self.mcts._backup(child, [7, -3])

        self.assertEqual(child.visits, 1)
        self.assertEqual(child.value, -3)
        self.assertEqual(root.visits, 1)
        self.assertEqual(root.value, 7)

    def test_root_visits_equal_playouts(self):
        """Test the root is visited once per playout."""
        move = self.mcts.search(chess.Board())
        root = self.mcts.tree.root
        self.assertEqual(self.mcts.playout_count, 30)
        self.assertEqual(root.visits, 30)
        self.assertEqual(len(self.mcts.simulated_nodes), 30)
        self.assertIn(move, chess.Board().legal_moves)

    def test_first_playout_simulates_the_expanded_node(self):
        """Test the tree policy returns the expanded node, not a new child."""
        mcts = MCTS(MCTSSettings(max_num_of_playouts=2, playout_depth_limit=2), rng=random.Random(0))
        mcts.search(chess.Board())
        root = mcts.tree.root
        self.assertEqual(mcts.simulated_nodes, [0, root.children[0]])
        # The root's first playout is not shared with any child
        self.assertEqual(sum(child.visits for child in mcts.tree.children(root)), root.visits - 1)

    def test_budget_of_one(self):
        """Test a single playout expands the root and visits it once."""
        mcts = MCTS(MCTSSettings(max_num_of_playouts=1, playout_depth_limit=4), rng=random.Random(0))
        move = mcts.search(chess.Board())
        root = mcts.tree.root

        self.assertEqual(root.visits, 1)
        self.assertEqual(len(root.children), 20)
        self.assertTrue(all(child.visits == 0 for child in mcts.tree.children(root)))
        # With no visited children the first one wins
        self.assertEqual(move, next(iter(chess.Board().generate_legal_moves())))

    def test_single_legal_move(self):
        """Test the only legal move is reported for any budget."""
        for playouts in (1, 5):
            mcts = MCTS(MCTSSettings(max_num_of_playouts=playouts, playout_depth_limit=4),
                        rng=random.Random(0))
            move = mcts.search(chess.Board(SINGLE_MOVE_FEN))
            self.assertEqual(move, chess.Move.from_uci("a1b2"))

    def test_no_legal_moves(self):
        """Test a position without legal moves reports the invalid move."""
        with patch.object(self.mcts.rollout, 'simulate') as mock_simulate:
            move = self.mcts.search(chess.Board(STALEMATE_FEN))
        self.assertEqual(move, INVALID_MOVE)
        mock_simulate.assert_not_called()
        self.assertEqual(self.mcts.playout_count, 0)
        self.assertEqual(self.mcts.tree.root.visits, 0)
        self.assertEqual(self.mcts.best_evaluation(), 0)

    def test_seeded_searches_are_identical(self):
        """Test identical seeds give identical playout paths and moves."""
        runs = []
        for _ in range(2):
            mcts = MCTS(MCTSSettings(max_num_of_playouts=40, playout_depth_limit=6),
                        rng=random.Random(42))
            move = mcts.search(chess.Board())
            runs.append((move, mcts.simulated_nodes,
                         [(n.visits, n.value) for n in mcts.tree.nodes]))
        self.assertEqual(runs[0], runs[1])

    def test_should_stop_is_polled_per_playout(self):
        """Test the stop callback ends the search between playouts."""
        should_stop = MagicMock(side_effect=[False, False, False, True])
        self.mcts.search(chess.Board(), should_stop=should_stop)
        self.assertEqual(self.mcts.playout_count, 3)
        self.assertEqual(should_stop.call_count, 4)

    def test_time_limit(self):
        """Test a time-limited search finishes on its own."""
        settings = MCTSSettings(limit_num_of_playouts=False, use_time_limit=True,
                                time_limit_ms=50, playout_depth_limit=4)
        mcts = MCTS(settings, rng=random.Random(0))
        move = mcts.search(chess.Board())
        self.assertGreaterEqual(mcts.playout_count, 1)
        self.assertIn(move, chess.Board().legal_moves)

    def test_root_statistics(self):
        """Test statistics of the root children."""
        self.mcts.search(chess.Board())
        stats = self.mcts.root_statistics()
        self.assertEqual(len(stats), 20)
        self.assertEqual(sum(s['visits'] for s in stats), 29)
        for s in stats:
            self.assertIn('move', s)
            self.assertIn('mean_value', s)


if __name__ == '__main__':
    unittest.main()
