"""
Pytest configuration file providing shared fixtures.
"""
import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from patterns import load_nhanes


@pytest.fixture
def nhanes():
    """Fixture that loads the NHANES example dataset."""
    return load_nhanes()


@pytest.fixture
def complete_data():
    return pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0]})


@pytest.fixture
def clustered_data():
    """
    Two clusters: the fully observed pattern occurs in both, the other two
    patterns in one cluster each.
    """
    return pd.DataFrame({
        "cl": [1, 1, 2, 2],
        "a": [1.0, np.nan, 1.0, 1.0],
        "b": [1.0, 1.0, np.nan, 1.0],
    })


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
