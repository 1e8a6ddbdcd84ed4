import numpy as np
import pandas as pd
import pytest

from patterns import load_nhanes, mcar


@pytest.fixture
def complete_frame():
    rng = np.random.default_rng(1)
    return pd.DataFrame({
        "id": np.arange(5000),
        "x": rng.normal(size=5000),
        "y": rng.normal(size=5000),
    })


def test_mcar_proportion(complete_frame):
    amputed = mcar(complete_frame, miss=0.3, random_state=42)
    share = amputed.isna().mean()
    assert ((share > 0.25) & (share < 0.35)).all()


def test_mcar_does_not_modify_input(complete_frame):
    mcar(complete_frame, miss=0.3, random_state=42)
    assert not complete_frame.isna().any().any()


def test_mcar_selected_columns(complete_frame):
    amputed = mcar(complete_frame, miss=0.5, columns=["x"], random_state=3)
    assert amputed["x"].isna().any()
    assert not amputed["y"].isna().any()
    # integer column is left untouched
    assert amputed["id"].dtype == complete_frame["id"].dtype


def test_mcar_integer_column_becomes_float(complete_frame):
    amputed = mcar(complete_frame, miss=0.5, columns=["id"], random_state=3)
    assert amputed["id"].dtype == float
    assert amputed["id"].isna().any()


def test_mcar_reproducible(complete_frame):
    a = mcar(complete_frame, miss=0.2, random_state=7)
    b = mcar(complete_frame, miss=0.2, random_state=7)
    pd.testing.assert_frame_equal(a, b)


def test_mcar_zero_probability(complete_frame):
    amputed = mcar(complete_frame, miss=0.0, random_state=7)
    pd.testing.assert_frame_equal(amputed, complete_frame)


@pytest.mark.parametrize("miss", [-0.1, 1.0, 1.5])
def test_mcar_invalid_probability(complete_frame, miss):
    with pytest.raises(ValueError, match="proportion"):
        mcar(complete_frame, miss=miss)


def test_mcar_unknown_column(complete_frame):
    with pytest.raises(ValueError, match="not found"):
        mcar(complete_frame, miss=0.1, columns=["z"])


def test_load_nhanes():
    nhanes = load_nhanes()
    assert nhanes.shape == (25, 4)
    assert list(nhanes.columns) == ["age", "bmi", "hyp", "chl"]
    assert nhanes.isna().sum().to_dict() == {"age": 0, "bmi": 9, "hyp": 8, "chl": 10}
