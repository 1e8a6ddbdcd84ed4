import logging
from typing import Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import to_rgba
from matplotlib.patches import Patch, Rectangle

from patterns.checks import check_cluster, check_npat, check_reserved, check_vrb, verify_data
from patterns.constants import (
    ALL_VARIABLES,
    ALPHA_RANGE,
    FILL_COLORS,
    TILE_EDGE_COLOR,
    XLAB_BOTTOM,
    XLAB_TOP,
    YLAB_LEFT,
    YLAB_RIGHT,
    Where,
)
from patterns.md_pattern import md_pattern
from .theme import theme_minimice
from .utils import cluster_opacity, filter_top_patterns, pattern_to_long

logger = logging.getLogger(__name__)


def _tile_alpha(opacity):
    # 0.1 + opacity / 2 rescaled onto the alpha range over limits 0..1
    lo, hi = ALPHA_RANGE
    return lo + (hi - lo) * (0.1 + opacity / 2)


def plot_pattern(
    data,
    vrb: Union[str, Sequence[str]] = ALL_VARIABLES,
    square: bool = True,
    rotate: bool = False,
    cluster: Optional[str] = None,
    npat: Optional[int] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Plot the missing data pattern of an incomplete dataset.

    Each row of tiles is one missing data pattern, each column one variable.
    Tiles are blue where the variable is observed and red where it is missing.
    The left axis shows how often each pattern occurs, the right axis how many
    entries are missing in the pattern, the bottom axis how many entries are
    missing per variable.

    Parameters
    ----------
    data : pd.DataFrame or np.ndarray
        Incomplete dataset
    vrb : Union[str, Sequence[str]], default="all"
        Variables to plot, "all" or two or more column names
    square : bool, default=True
        Draw square tiles, like ``mice::md.pattern``
    rotate : bool, default=False
        Rotate the variable name labels by 90 degrees
    cluster : str, optional
        Cluster variable (e.g. for multilevel data). Tiles of patterns that
        occur in fewer clusters are drawn more transparent.
    npat : int, optional
        Number of most frequent patterns to show, defaults to all patterns
    ax : plt.Axes, optional
        Axes to draw into. If None a new figure is created.

    Returns
    -------
    plt.Axes
        The axes holding the plot

    Raises
    ------
    TypeError
        If data is not a DataFrame or numpy array
    ValueError
        If fewer than two variables are selected, a variable is named ".x" or
        ".y", the cluster variable is not one of the selected variables or
        npat is lower than one

    Examples
    --------
    >>> from patterns import load_nhanes
    >>> ax = plot_pattern(load_nhanes())  # doctest: +SKIP
    """
    data = verify_data(data)
    vrb = check_vrb(data, vrb)
    check_reserved(vrb)
    check_cluster(cluster, vrb)
    npat = check_npat(npat)

    # get missing data pattern
    pat = md_pattern(data[vrb])

    # filter npat most frequent patterns
    if npat is not None:
        pat = filter_top_patterns(pat, npat)

    # extract pattern info
    vrb = list(pat.columns[:-1])
    frq = [str(f) for f in pat.index[:-1]]
    na_row = [str(n) for n in pat.iloc[:-1, -1]]
    na_col = [str(n) for n in pat.iloc[-1, :-1]]
    rws, cls = len(frq), len(vrb)

    # add opacity for clustering
    if cluster is None:
        opacity = np.ones(rws)
    else:
        opacity = cluster_opacity(data[vrb], pat, cluster)

    long = pattern_to_long(pat, opacity)
    logger.debug(f"Plotting {rws} missing data patterns of {cls} variables")

    with plt.rc_context(theme_minimice()):
        if ax is None:
            _, ax = plt.subplots(figsize=(max(4.0, 0.8 * cls + 3), max(3.0, 0.5 * rws + 2.5)))

        for x, y, where, op in zip(long[".x"], long[".y"], long[".where"], long[".opacity"]):
            ax.add_patch(Rectangle(
                (x - 0.5, y - 0.5), 1, 1,
                facecolor=to_rgba(FILL_COLORS[where], alpha=_tile_alpha(op)),
                edgecolor=TILE_EDGE_COLOR,
                linewidth=0.5,
            ))

        # no expansion, y reversed so the first pattern is on top
        ax.set_xlim(0.5, cls + 0.5)
        ax.set_ylim(rws + 0.5, 0.5)
        xticks = np.arange(1, cls + 1)
        yticks = np.arange(1, rws + 1)

        ax.set_xticks(xticks, labels=na_col)
        ax.set_yticks(yticks, labels=frq)
        ax.set_xlabel(XLAB_BOTTOM)
        ax.set_ylabel(YLAB_LEFT)

        top = ax.secondary_xaxis("top")
        top.set_ticks(xticks, labels=vrb)
        top.set_xlabel(XLAB_TOP)
        right = ax.secondary_yaxis("right")
        right.set_ticks(yticks, labels=na_row)
        right.set_ylabel(YLAB_RIGHT)

        shown = [w.value for w in (Where.MISSING, Where.OBSERVED) if (long[".where"] == w.value).any()]
        handles = [Patch(facecolor=FILL_COLORS[w], edgecolor=TILE_EDGE_COLOR, label=w) for w in shown]
        ax.legend(handles=handles, loc="upper right", bbox_to_anchor=(1.0, -0.25), ncol=len(handles))

        ax.set_aspect("equal" if square else "auto")
        if rotate:
            ax.tick_params(axis="x", labelrotation=90)
            top.tick_params(axis="x", labelrotation=90)

    return ax
