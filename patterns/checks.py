import numbers
import logging
from typing import List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .constants import ALL_VARIABLES, RESERVED_NAMES

logger = logging.getLogger(__name__)


def verify_data(data) -> pd.DataFrame:
    """
    Check and convert the incomplete dataset.

    Parameters
    ----------
    data : Any
        Input data, a pandas DataFrame or a 1-D or 2-D numpy array

    Returns
    -------
    pd.DataFrame
        The data as a DataFrame. Arrays get the column names V1, V2, ...

    Raises
    ------
    TypeError
        If data is neither a DataFrame nor a numpy array
    """
    if isinstance(data, np.ndarray) and data.ndim in (1, 2):
        if data.ndim == 1:
            data = data.reshape(-1, 1)
        columns = [f"V{i + 1}" for i in range(data.shape[1])]
        data = pd.DataFrame(data, columns=columns)
        logger.debug(f"Converted array input to DataFrame with columns {columns}")
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            "The 'data' argument requires an object of class 'DataFrame' or 'ndarray'. "
            "Input arguments should be provided in the order required by the function."
        )
    return data


def check_vrb(data: pd.DataFrame, vrb: Union[str, Sequence[str]] = ALL_VARIABLES) -> List[str]:
    """
    Resolve the variables to compute missing data patterns for.

    Parameters
    ----------
    data : pd.DataFrame
        The incomplete dataset
    vrb : Union[str, Sequence[str]], default="all"
        "all" for every column, otherwise two or more column names

    Returns
    -------
    List[str]
        Selected column names, in the order given

    Raises
    ------
    ValueError
        If fewer than two variables are given, a name is not a column of data
        or a name occurs twice
    """
    duplicate_cols = data.columns[data.columns.duplicated()].tolist()
    if duplicate_cols:
        raise ValueError(f"DataFrame contains duplicate column names: {duplicate_cols}")
    if isinstance(vrb, str):
        if vrb == ALL_VARIABLES:
            return list(data.columns)
        vrb = [vrb]
    vrb = list(vrb)
    if len(vrb) < 2:
        raise ValueError("The number of variables should be two or more to compute missing data patterns.")
    unknown = [v for v in vrb if v not in data.columns]
    if unknown:
        raise ValueError(f"Columns not found in data: {unknown}")
    if len(set(vrb)) < len(vrb):
        raise ValueError(f"Variables are selected more than once: {vrb}")
    return vrb


def check_reserved(vrb: Sequence[str]) -> None:
    """Raise if a selected variable uses a name reserved for the long-form pattern table."""
    clash = [v for v in vrb if v in RESERVED_NAMES]
    if clash:
        reserved = ", ".join(repr(name) for name in RESERVED_NAMES)
        raise ValueError(
            f"The variable names {reserved} are used internally to produce the missing data pattern plot. "
            f"Please exclude or rename your variable(s): {clash}"
        )


def check_cluster(cluster: Optional[str], vrb: Sequence[str]) -> None:
    if cluster is None:
        return
    if not isinstance(cluster, str) or cluster not in vrb:
        raise ValueError("Cluster variable not recognized, please provide the variable name as a character string.")


def check_npat(npat) -> Optional[int]:
    """
    Check the number of patterns to display.

    Parameters
    ----------
    npat : int, optional
        Number of most frequent patterns to show. None shows all patterns.

    Returns
    -------
    Optional[int]
        npat rounded down to an integer, or None

    Raises
    ------
    ValueError
        If npat is not a number or is lower than one
    """
    if npat is None:
        return None
    if isinstance(npat, bool) or not isinstance(npat, numbers.Real) or npat < 1:
        raise ValueError("The minimum number of patterns to display is one. Please provide a positive integer.")
    return int(np.floor(npat))
