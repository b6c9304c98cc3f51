"""
Plotting functions for visualizing a headless run.
"""

from typing import Any, Dict

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


def plot_run_summary(summary: Dict[str, Any]) -> bool:
    """
    Show score and flock spread over time for one run.

    Args:
        summary: Results from HeadlessSimulation.run

    Returns:
        True if a plot was shown
    """
    if not MATPLOTLIB_AVAILABLE:
        print("Warning: matplotlib not available. Skipping plot.")
        return False

    scores = summary["score_over_time"]
    spreads = summary["spread_over_time"]
    ticks = list(range(1, len(scores) + 1))

    fig, (ax_score, ax_spread) = plt.subplots(2, 1, figsize=(12, 7), sharex=True)

    ax_score.plot(ticks, scores, linewidth=2, color='#4ECDC4')
    ax_score.set_ylabel('Sheep in pen', fontsize=12, fontweight='bold')
    ax_score.set_title(f"Flock of {summary['flock_size']}: best score {summary['best_score']}",
                       fontsize=14, fontweight='bold', pad=20)
    ax_score.grid(True, alpha=0.3, linestyle='--')

    ax_spread.plot(ticks, spreads, linewidth=2, color='#FF6B6B')
    ax_spread.set_xlabel('Tick', fontsize=12, fontweight='bold')
    ax_spread.set_ylabel('Mean distance to centroid', fontsize=12, fontweight='bold')
    ax_spread.grid(True, alpha=0.3, linestyle='--')

    if summary["first_score_tick"] is not None:
        ax_score.axvline(summary["first_score_tick"], color='#95E1D3', linestyle=':')

    fig.tight_layout()
    plt.show()
    return True
