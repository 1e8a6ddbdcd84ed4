import logging

import numpy as np
import pandas as pd
import pytest

from patterns import md_pattern, pattern_to_chr


def test_nhanes_pattern(nhanes):
    pat = md_pattern(nhanes)

    assert list(pat.columns) == ["age", "hyp", "bmi", "chl", ""]
    assert list(pat.index) == [13, 3, 1, 1, 7, ""]
    expected = np.array([
        [1, 1, 1, 1, 0],
        [1, 1, 1, 0, 1],
        [1, 1, 0, 1, 1],
        [1, 0, 0, 1, 2],
        [1, 0, 0, 0, 3],
        [0, 8, 9, 10, 27],
    ])
    np.testing.assert_array_equal(pat.to_numpy(), expected)


def test_frequencies_sum_to_rows(nhanes):
    pat = md_pattern(nhanes)
    assert sum(pat.index[:-1]) == len(nhanes)


def test_complete_data_single_pattern(complete_data, caplog):
    with caplog.at_level(logging.INFO, logger="patterns.md_pattern"):
        pat = md_pattern(complete_data)

    assert list(pat.index) == [3, ""]
    np.testing.assert_array_equal(pat.to_numpy(), [[1, 1, 0], [0, 0, 0]])
    assert "completely observed" in caplog.text


def test_columns_sorted_stable_on_ties():
    df = pd.DataFrame({
        "a": [np.nan, 1.0, 2.0],
        "b": [1.0, 2.0, 3.0],
        "c": [1.0, np.nan, 3.0],
    })
    pat = md_pattern(df)
    assert list(pat.columns) == ["b", "a", "c", ""]


def test_single_row():
    df = pd.DataFrame({"a": [np.nan], "b": [1.0]})
    pat = md_pattern(df)
    assert list(pat.columns) == ["b", "a", ""]
    np.testing.assert_array_equal(pat.to_numpy(), [[1, 0, 1], [0, 1, 1]])


def test_array_input():
    arr = np.array([[1.0, np.nan], [2.0, 3.0]])
    pat = md_pattern(arr)
    assert list(pat.columns) == ["V1", "V2", ""]
    assert list(pat.index) == [1, 1, ""]


def test_one_column_raises():
    with pytest.raises(ValueError, match="at least two columns"):
        md_pattern(pd.DataFrame({"a": [1.0, np.nan]}))


def test_no_rows_raises():
    with pytest.raises(ValueError, match="at least one row"):
        md_pattern(pd.DataFrame({"a": [], "b": []}))


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        md_pattern([[1, 2], [3, 4]])


def test_pattern_to_chr(nhanes):
    pat = md_pattern(nhanes)
    assert pattern_to_chr(pat) == ["1111", "1110", "1101", "1001", "1000"]
    assert pattern_to_chr(pat, order=["chl", "bmi", "hyp", "age"]) == ["1111", "0111", "1011", "1001", "0001"]


def test_empty_array_raises():
    with pytest.raises(ValueError, match="at least one row"):
        md_pattern(np.empty((0, 2)))
