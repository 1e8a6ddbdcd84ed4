import logging
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from scipy.stats import binom

logger = logging.getLogger(__name__)


def mcar(
    data: pd.DataFrame,
    miss: float,
    columns: Optional[Sequence[str]] = None,
    random_state: Optional[int] = None,
) -> pd.DataFrame:
    """
    Introduces Missing Completely at Random (MCAR) missingness into a DataFrame.

    Every cell of the selected columns is set to NaN independently with
    probability `miss`.

    :param data: Complete (or incomplete) DataFrame.
    :param miss: Probability of a cell to be set as missing (float in [0, 1)).
    :param columns: Columns to make incomplete. Defaults to all columns.
    :param random_state: Seed for the Bernoulli draws.

    :return: A copy of `data` with MCAR-induced missing values.
    :rtype: pandas.DataFrame

    :raises ValueError: If `miss` is not in [0, 1) or a column is unknown.
    """
    if not 0 <= miss < 1:
        raise ValueError("miss must be a proportion in [0, 1)")
    if columns is None:
        columns = list(data.columns)
    unknown = [c for c in columns if c not in data.columns]
    if unknown:
        raise ValueError(f"Columns not found in data: {unknown}")

    rng = np.random.default_rng(random_state)
    amputed = data.copy()
    for col in columns:
        mask = binom(1, miss).rvs(len(amputed), random_state=rng) == 1
        if not mask.any():
            continue
        #integer and bool columns cannot hold NaN
        if pd.api.types.is_integer_dtype(amputed[col]) or pd.api.types.is_bool_dtype(amputed[col]):
            amputed[col] = amputed[col].astype(float)
        amputed.loc[mask, col] = np.nan
        logger.debug(f"Set {mask.sum()} values of {col} to missing")
    return amputed
