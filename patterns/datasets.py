from importlib import resources

import pandas as pd


def load_nhanes() -> pd.DataFrame:
    """
    Load the small NHANES example dataset.

    25 rows with age group (``age``), body mass index (``bmi``),
    hypertension (``hyp``) and serum cholesterol (``chl``). Only ``age`` is
    fully observed.
    """
    with resources.files("patterns").joinpath("data").joinpath("nhanes.csv").open("r") as f:
        return pd.read_csv(f)
