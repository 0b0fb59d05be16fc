"""
Sequency Plots

Matplotlib view of how sequency is distributed over the matrix rows.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from typing import Optional

from walsh.codes import WalshMatrix
from walsh.utils import ensure_parent_dir

COLORS = {
    'sequency': '#2E86AB',  # Blue
    'ideal': '#3A3A3A',     # Dark gray
}


def plot_sequency_profile(
    matrix: WalshMatrix,
    output_path: Optional[str] = None,
    show: bool = False,
) -> plt.Figure:
    """
    Bar chart of the sequency of each row.

    For a sequency-ordered Walsh matrix of order N the bars climb one step
    per row from 0 to N - 1, which is drawn as a reference line.

    Args:
        matrix: Matrix to plot
        output_path: If provided, save figure to this path
        show: If True, display the figure

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(6, 4))

    seqs = matrix.sequencies()
    indices = list(range(len(seqs)))

    ax.bar(indices, seqs, color=COLORS['sequency'], label='Sequency')
    if seqs:
        ax.plot(indices, indices, color=COLORS['ideal'], linestyle=':',
                linewidth=1.5, label='Walsh order')

    ax.set_xlabel('Row')
    ax.set_ylabel('Sequency')
    ax.set_title('Sequency per Row')
    ax.legend(loc='upper left')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        ensure_parent_dir(output_path)
        fig.savefig(output_path)

    if show:
        plt.show()

    return fig
