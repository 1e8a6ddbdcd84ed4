import seaborn as sns


def theme_minimice() -> dict:
    """
    Minimal plot style for missing data plots.

    Returns
    -------
    dict
        matplotlib rc parameters, seaborn's "white" style without axis lines
        or grid. Use with ``matplotlib.rc_context``.
    """
    rc = dict(sns.axes_style("white"))
    rc.update({
        "axes.grid": False,
        "axes.spines.left": False,
        "axes.spines.right": False,
        "axes.spines.top": False,
        "axes.spines.bottom": False,
        "axes.labelcolor": "black",
        "axes.labelsize": 10,
        "xtick.color": "#4D4D4D",
        "ytick.color": "#4D4D4D",
        "xtick.labelsize": 9,
        "ytick.labelsize": 9,
        "legend.frameon": False,
    })
    return rc
