import logging
import warnings
from typing import Sequence

import numpy as np
import pandas as pd

from patterns.constants import Where
from patterns.md_pattern import md_pattern, pattern_to_chr

logger = logging.getLogger(__name__)


def filter_top_patterns(pat: pd.DataFrame, npat: int) -> pd.DataFrame:
    """
    Keep the npat most frequent missing data patterns.

    Every pattern whose frequency is among the npat largest frequencies is
    kept, so ties can show more than npat patterns. The summary row with the
    per-column missing counts is kept unchanged.

    Parameters
    ----------
    pat : pd.DataFrame
        Output of :func:`patterns.md_pattern`
    npat : int
        Number of patterns requested

    Returns
    -------
    pd.DataFrame
        The filtered pattern table, or pat itself if npat is not smaller than
        the number of patterns
    """
    n_patterns = len(pat) - 1
    if npat >= n_patterns:
        warnings.warn(
            "Number of patterns specified is equal to or greater than the total number of patterns. "
            "All missing data patterns are shown."
        )
        return pat

    freqs = np.asarray(pat.index[:-1], dtype=int)
    top = np.sort(freqs)[::-1][:npat]
    keep = np.flatnonzero(np.isin(freqs, top))
    filtered = pat.iloc[np.append(keep, n_patterns)]
    logger.info(
        f"{npat} missing data patterns were requested and {len(filtered) - 1} missing data patterns are shown. "
        f"{len(pat) - len(filtered)} missing data patterns are hidden."
    )
    return filtered


def cluster_opacity(data: pd.DataFrame, pat: pd.DataFrame, cluster: str) -> np.ndarray:
    """
    Share of clusters in which each missing data pattern occurs.

    Parameters
    ----------
    data : pd.DataFrame
        The incomplete dataset, restricted to the variables in pat
    pat : pd.DataFrame
        Pattern table of the full dataset
    cluster : str
        Name of the cluster variable, must be one of the variables in pat

    Returns
    -------
    np.ndarray
        One value in [0, 1] per pattern
    """
    vrb = list(pat.columns[:-1])
    patterns = pattern_to_chr(pat)
    #rows with a missing cluster value belong to no cluster
    groups = [group for _, group in data.groupby(cluster, sort=True, observed=True)]
    if not groups:
        logger.warning(f"Cluster variable {cluster} has no observed values, all patterns are drawn opaque")
        return np.ones(len(patterns))
    logger.debug(f"Computing missing data patterns for {len(groups)} clusters of {cluster}")

    used = np.zeros((len(groups), len(patterns)), dtype=bool)
    for i, group in enumerate(groups):
        group_patterns = set(pattern_to_chr(md_pattern(group[vrb]), order=vrb))
        used[i] = [p in group_patterns for p in patterns]
    return used.mean(axis=0)


def pattern_to_long(pat: pd.DataFrame, opacity: Sequence[float]) -> pd.DataFrame:
    """
    Reshape a pattern table to one row per pattern and variable.

    Parameters
    ----------
    pat : pd.DataFrame
        Output of :func:`patterns.md_pattern`, possibly filtered
    opacity : Sequence[float]
        One opacity value per pattern

    Returns
    -------
    pd.DataFrame
        Columns ``.y`` (pattern position, starting at 1), ``x`` (variable
        name), ``.x`` (variable position, starting at 1), ``.where``
        (categorical, "missing" or "observed") and ``.opacity``. Rows are
        ordered by pattern, then variable.
    """
    vrb = list(pat.columns[:-1])
    body = pat.iloc[:-1][vrb].reset_index(drop=True)
    if len(opacity) != len(body):
        raise ValueError(f"Expected {len(body)} opacity values, got {len(opacity)}")

    wide = body.copy()
    wide.insert(0, ".opacity", np.asarray(opacity, dtype=float))
    wide.insert(0, ".y", np.arange(1, len(body) + 1))
    long = wide.melt(id_vars=[".y", ".opacity"], value_vars=vrb, var_name="x", value_name=".where")

    long[".x"] = long["x"].map({v: i + 1 for i, v in enumerate(vrb)}).astype(int)
    long[".where"] = pd.Categorical.from_codes(
        long[".where"].astype(int), categories=[Where.MISSING.value, Where.OBSERVED.value]
    )
    long = long.sort_values([".y", ".x"]).reset_index(drop=True)
    return long[[".y", "x", ".x", ".where", ".opacity"]]
