from __future__ import annotations

import pytest

from dupblocks.core import LineRange, RangeLengthMismatchError
from dupblocks.similarity import line_similarity, mean_range_similarity, range_similarity


@pytest.mark.parametrize(
    "a, b",
    [("martha", "marhta"), ("abc", "deg"), ("def", "deg"), ("dixon", "dicksonx"), ("", "abc")],
)
def test_line_similarity_symmetric(a, b):
    assert line_similarity(a, b) == line_similarity(b, a)


@pytest.mark.parametrize("text", ["abc", "x", "    indented line", "tab\tseparated"])
def test_line_similarity_identical(text):
    assert line_similarity(text, text) == 1.0


def test_line_similarity_trims_surrounding_whitespace():
    assert line_similarity("   return x  ", "\treturn x") == 1.0


def test_line_similarity_bounds():
    assert line_similarity("aaaa", "bbbb") == 0.0
    assert line_similarity("", "abc") == 0.0
    assert 0.0 < line_similarity("def", "deg") < 1.0


def test_line_similarity_jaro_value():
    # Two of three characters match with no transpositions.
    assert line_similarity("def", "deg") == pytest.approx((2 / 3 + 2 / 3 + 1) / 3)


def test_range_similarity_example(example_lines):
    assert range_similarity(LineRange(0, 1), LineRange(2, 3), example_lines, 0.8)


def test_mean_range_similarity_is_average(example_lines):
    mean = mean_range_similarity(LineRange(0, 1), LineRange(2, 3), example_lines)
    assert mean == pytest.approx((1.0 + line_similarity("def", "deg")) / 2)


@pytest.mark.parametrize("threshold", [0.0, 0.5, 0.99, 0.999999])
def test_range_similarity_identical_content_passes_below_one(threshold):
    lines = ["x = 1", "y = 2", "z = 3", "x = 1", "y = 2", "z = 3"]
    assert range_similarity(LineRange(0, 2), LineRange(3, 5), lines, threshold)


def test_range_similarity_is_strict():
    lines = ["same", "same"]
    assert not range_similarity(LineRange(0, 0), LineRange(1, 1), lines, 1.0)


def test_range_similarity_rejects_unequal_lengths(example_lines):
    with pytest.raises(RangeLengthMismatchError):
        range_similarity(LineRange(0, 1), LineRange(2, 2), example_lines, 0.5)
