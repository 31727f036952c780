"""
Visualization utilities for the MCTS chess engine.

Plots the statistics of the root children after a search.
"""

import os
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

def plot_root_statistics(root_stats: List[Dict[str, Any]],
                         num_moves: int = 10,
                         output_path: Optional[str] = None) -> Optional[str]:
    """
    Plot visit counts and mean values of the most visited root moves.

    Args:
        root_stats: Records as returned by ``MCTS.root_statistics``
        num_moves: Number of top moves to show
        output_path: Path to save the plot, if provided

    Returns:
        Path to the saved image if output_path is provided, None otherwise
    """
    # Most visited first, stable for equal counts
    top_stats = sorted(root_stats, key=lambda s: s['visits'], reverse=True)[:num_moves]

    moves = [s['move'].uci() for s in top_stats]
    visits = np.array([s['visits'] for s in top_stats])
    mean_values = np.array([s['mean_value'] for s in top_stats])

    fig, (ax_visits, ax_values) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    ax_visits.bar(range(len(moves)), visits, align='center')
    ax_visits.set_ylabel('Visits')
    ax_visits.set_title('Root Move Statistics')
    ax_visits.grid(axis='y', linestyle='--', alpha=0.7)

    colors = ['tab:green' if v >= 0 else 'tab:red' for v in mean_values]
    ax_values.bar(range(len(moves)), mean_values, align='center', color=colors)
    ax_values.set_ylabel('Mean value (cp)')
    ax_values.set_xlabel('Move')
    ax_values.grid(axis='y', linestyle='--', alpha=0.7)
    ax_values.set_xticks(range(len(moves)))
    ax_values.set_xticklabels(moves, rotation=45)

    fig.tight_layout()

    saved_path = None
    if output_path:
        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
        fig.savefig(output_path, dpi=150)
        logger.debug(f"Root statistics plot saved to {output_path}")
        saved_path = output_path

    plt.close(fig)
    return saved_path
