import logging
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .checks import verify_data
from .constants import SUMMARY_LABEL

logger = logging.getLogger(__name__)


def md_pattern(data) -> pd.DataFrame:
    """
    Tabulate the missing data patterns of an incomplete dataset.

    Rows of the dataset are grouped by which variables are observed and which
    are missing, in the same layout as ``mice::md.pattern`` in R.

    Parameters
    ----------
    data : pd.DataFrame or np.ndarray
        Incomplete dataset with at least two columns

    Returns
    -------
    pd.DataFrame
        One row per distinct pattern, 1 where the variable is observed and 0
        where it is missing. The index holds the pattern frequencies. Variables
        are ordered by increasing number of missing values; patterns are
        ordered so that the fully observed pattern comes first. The last
        column (named "") counts the missing entries per pattern and the last
        row (labelled "") counts the missing entries per column, with the
        total number of missing cells in the corner.

    Raises
    ------
    ValueError
        If data has fewer than two columns or no rows

    Examples
    --------
    >>> df = pd.DataFrame({"a": [1, None, 3], "b": [None, None, 6]})
    >>> md_pattern(df)  # doctest: +SKIP
       a  b
    1  1  1  0
    1  1  0  1
    1  0  0  2
       1  2  3
    """
    data = verify_data(data)
    if data.shape[1] < 2:
        raise ValueError("Data should have at least two columns")
    if data.shape[0] == 0:
        raise ValueError("Data should have at least one row")

    r = data.isna()
    nmis = r.sum().to_numpy()
    #stable sort keeps input order for ties
    order = np.argsort(nmis, kind="stable")
    r = r.iloc[:, order]
    nmis = nmis[order]
    columns = list(data.columns[order])

    # "1" marks a missing cell
    pat = r.astype(int).astype(str).agg("".join, axis=1)
    counts = pat.value_counts().sort_index()
    logger.debug(f"Found {len(counts)} distinct missing data patterns in {len(data)} rows")
    if nmis.sum() == 0:
        logger.info("No missing values, data set is completely observed")

    mis = np.array([[int(c) for c in s] for s in counts.index], dtype=int)
    body = np.column_stack([1 - mis, mis.sum(axis=1)])
    summary = np.append(nmis, nmis.sum())

    return pd.DataFrame(
        np.vstack([body, summary]).astype(int),
        index=pd.Index(list(counts.to_numpy()) + [SUMMARY_LABEL], dtype=object),
        columns=columns + [SUMMARY_LABEL],
    )


def pattern_to_chr(pat: pd.DataFrame, order: Optional[Sequence[str]] = None) -> List[str]:
    """
    Encode the rows of a pattern table as strings of 0s and 1s.

    Parameters
    ----------
    pat : pd.DataFrame
        Output of :func:`md_pattern`
    order : Sequence[str], optional
        Variable order to encode in. Defaults to the column order of ``pat``.

    Returns
    -------
    List[str]
        One string per pattern, the summary row is left out
    """
    if order is None:
        order = list(pat.columns[:-1])
    body = pat.iloc[:-1][list(order)]
    return body.astype(int).astype(str).agg("".join, axis=1).tolist()
