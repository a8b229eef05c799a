import math
import numpy as np
import pandas as pd
import suite
from dgen import random_numbers
from hof import sum_, average, min_, max_

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# sum_() tests

@test("sum_ of integers")
def test_sum_ints():
    cases = [([1, 2, 3, 4, 5], 15), ([-1, -2, -3], -6), ([0, 0, 0], 0),
             ([100], 100), ([], 0), ([-5, 5, -10, 10], 0)]
    for source, expected in cases:
        assert_that(sum_(source) == expected, f"sum_({source}) should be {expected}")


@test("sum_ of floats")
def test_sum_floats():
    cases = [([1.5, 2.5, 3.0], 7.0), ([-1.1, -2.2, -3.3], -6.6), ([3.14], 3.14), ([], 0.0)]
    for source, expected in cases:
        got = sum_(source)
        assert_that(math.isclose(got, expected, abs_tol=1e-9), f"sum_({source}) = {got}")


@test("sum_ of an array stays in its dtype")
def test_sum_dtype():
    got = sum_(np.array([1, 2, 3], dtype=np.int32))
    assert_that(got == 6 and isinstance(got, np.int32), f"got {got!r}")
    with np.errstate(over='ignore'):
        wrapped = sum_(np.array([200, 100], dtype=np.uint8))
    assert_that(wrapped == 44, f"uint8 sum should wrap to 44, got {wrapped}")


@test("sum_ of a pandas series stays in its dtype")
def test_sum_series_dtype():
    with np.errstate(over='ignore'):
        wrapped = sum_(pd.Series([200, 100], dtype=np.uint8))
    assert_that(wrapped == 44 and isinstance(wrapped, np.uint8), f"uint8 series sum should wrap to 44, got {wrapped!r}")
    zero = min_(pd.Series([], dtype=np.float64))
    assert_that(isinstance(zero, np.float64) and zero == 0.0, f"empty float series should give a float zero, got {zero!r}")


@test("sum_ matches python on generated data")
def test_sum_generated():
    values = random_numbers(200, seed=11)
    assert_that(sum_(values) == sum(values.tolist()), "array sum should match python sum")


# average() tests

@test("average of integers and floats")
def test_average():
    cases = [([1, 2, 3, 4, 5], 3.0), ([-2, -4, -6], -4.0), ([100], 100.0), ([10, 20], 15.0),
             ([1.0, 2.0, 3.0], 2.0), ([-1.5, -2.5], -2.0), ([0.1, 0.2, 0.3], 0.2),
             ([10.5, 20.5, 30.0], 20.333333333333332)]
    for source, expected in cases:
        got = average(source)
        assert_that(isinstance(got, float), "average is always a float")
        assert_that(math.isclose(got, expected, abs_tol=1e-9), f"average({source}) = {got}")


@test("average of empty input is 0.0")
def test_average_empty():
    assert_that(average([]) == 0.0, "empty average defaults to zero")
    assert_that(average(np.array([], dtype=np.int64)) == 0.0, "empty array average defaults to zero")


# min_() / max_() tests

@test("min_ and max_ of integers")
def test_min_max_ints():
    for source, lo, hi in [([1, 2, 3, 4, 5], 1, 5), ([5, 4, 3, 2, 1], 1, 5), ([-1, -2, -3], -3, -1),
                           ([0, -5, 10], -5, 10), ([100], 100, 100), ([7, 7, 7], 7, 7)]:
        assert_that(min_(source) == lo, f"min_({source}) should be {lo}")
        assert_that(max_(source) == hi, f"max_({source}) should be {hi}")


@test("min_ and max_ of floats")
def test_min_max_floats():
    assert_that(min_([1.5, 2.5, 0.5]) == 0.5, "min of floats")
    assert_that(max_([-1.1, -2.2, -0.5]) == -0.5, "max of floats")
    assert_that(min_([3.14]) == max_([3.14]) == 3.14, "single element")


@test("min_ and max_ of empty input return the zero value")
def test_min_max_empty():
    assert_that(min_([]) == 0 and max_([]) == 0, "plain sequences default to 0")
    zero = max_(np.array([], dtype=np.float32))
    assert_that(zero == 0.0 and isinstance(zero, np.float32), f"array default should be float32 zero, got {zero!r}")


@test("min_ and max_ agree with numpy on generated arrays")
def test_min_max_generated():
    values = random_numbers(100, low=-1000, high=1000, seed=3, dtype=np.int16)
    assert_that(min_(values) == values.min(), "min should match numpy")
    assert_that(max_(values) == values.max(), "max should match numpy")


@test("numeric aggregates reject non-numeric input")
def test_numeric_rejects():
    for fn in (sum_, average, min_, max_):
        assert_raises(TypeError, fn, [1, '2'])
    assert_raises(TypeError, sum_, np.array(['x']))


if __name__ == "__main__":
    suite.run(title="hof numeric test suite")
