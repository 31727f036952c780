"""
Main entry point for the MCTS chess engine.

This script provides a command-line interface for searching a single position
or letting the engine play a game against itself.
"""

import os
import sys
import time
import argparse
import logging
import chess

# Add the project root to the Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.config import load_config, validate_config, MCTSSettings
from core.evaluation import Evaluation
from core.mcts import INVALID_MOVE
from core.search import MCTSSearch
from core.self_play import SelfPlay
from utils.logger import setup_logger, log_system_info, log_config, log_exception
from utils.visualization import plot_root_statistics

logger = logging.getLogger(__name__)


def run_search(config, board, settings, seed=None, plot=False):
    """
    Search one position and report the chosen move.

    Args:
        config: Configuration dictionary
        board: Position to search
        settings: Search settings
        seed: Optional seed for the rollout random source
        plot: Whether to save a plot of the root statistics

    Returns:
        The chosen move, or INVALID_MOVE
    """
    search = MCTSSearch(board, settings, evaluation=Evaluation(config), seed=seed)
    move = search.start_search().result()

    stats = sorted(search.engine.root_statistics(), key=lambda s: s['visits'], reverse=True)
    logger.info("Top moves:")
    for s in stats[:5]:
        logger.info(f"  {s['move'].uci()}: {s['visits']} visits, mean {s['mean_value']:.1f}")

    diagnostics = search.diagnostics
    logger.info(f"Search time: {diagnostics.search_time_ms:.0f} ms, "
                f"{diagnostics.num_playouts} playouts, {diagnostics.num_nodes} nodes")

    if plot and stats:
        timestamp = time.strftime("%Y%m%d-%H%M%S")
        plot_path = os.path.join(config.get('plot_dir', './logs/plots'), f"root_{timestamp}.png")
        plot_root_statistics(stats, output_path=plot_path)
        logger.info(f"Root statistics plot saved to {plot_path}")

    if move == INVALID_MOVE:
        logger.info("No legal move available")
    return move


def run_self_play(config, fen, settings, seed=None, output=None):
    """
    Play one self-play game and print it as PGN.

    Returns:
        Game metadata dictionary
    """
    self_play = SelfPlay(config, settings, seed=seed)
    game, metadata = self_play.play_game(fen)
    print(game)
    if output:
        self_play.save_game_record(game, output)
        logger.info(f"Game saved to {output}")
    return metadata


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Monte Carlo Tree Search chess engine")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to configuration file")
    parser.add_argument("--mode", type=str, choices=["search", "selfplay"],
                        default="search", help="Operation mode")
    parser.add_argument("--fen", type=str, default=chess.STARTING_FEN,
                        help="Position to start from")
    parser.add_argument("--playouts", type=int, default=None,
                        help="Override the playout limit")
    parser.add_argument("--time-limit", type=int, default=None,
                        help="Search time limit in milliseconds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible searches")
    parser.add_argument("--plot", action="store_true",
                        help="Save a plot of the root move statistics")
    parser.add_argument("--output", type=str, default=None,
                        help="Where to save the self-play PGN")
    parser.add_argument("--no-log-file", action="store_true",
                        help="Only log to the console")

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logger(config, log_to_file=not args.no_log_file)
    log_system_info()
    log_config(config)

    if not validate_config(config):
        logger.error("Invalid configuration")
        return 1

    overrides = {}
    if args.playouts is not None:
        overrides['limit_num_of_playouts'] = True
        overrides['max_num_of_playouts'] = args.playouts
    if args.time_limit is not None:
        overrides['use_time_limit'] = True
        overrides['time_limit_ms'] = args.time_limit

    seed = args.seed if args.seed is not None else config.get('mcts', {}).get('seed')

    try:
        settings = MCTSSettings.from_config(config, **overrides)
        board = chess.Board(args.fen)
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    try:
        if args.mode == "selfplay":
            run_self_play(config, args.fen, settings, seed=seed, output=args.output)
        else:
            move = run_search(config, board, settings, seed=seed, plot=args.plot)
            print(move.uci() if move != INVALID_MOVE else "(none)")
    except Exception as e:
        log_exception(e, logger)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
