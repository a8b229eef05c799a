import io
import math
import operator
import suite
from collections import namedtuple
from hof import reduce_, for_each, find, some, every, contains

test = suite.test
assert_that = suite.assert_that

Person = namedtuple('Person', ['name', 'age'])
people = [Person('a', 20), Person('b', 25), Person('c', 30)]


# reduce_() tests

@test("reduce_ sums ints")
def test_reduce_sum():
    assert_that(reduce_([1, 2, 3, 4], operator.add, 0) == 10, "1+2+3+4 should be 10")
    assert_that(reduce_([1, 2, 3, 4, 5], lambda acc, v: acc + v, 0) == 15, "1..5 should be 15")


@test("reduce_ sums floats")
def test_reduce_floats():
    got = reduce_([1.2, 2.3, 3.4], operator.add, 0.0)
    assert_that(math.isclose(got, 6.9, abs_tol=1e-9), f"got {got}")


@test("reduce_ with strings and products")
def test_reduce_other_accumulators():
    assert_that(reduce_(["go", " ", "is", " ", "fun"], operator.add, "") == "go is fun", "concat")
    assert_that(reduce_([1, 2, 3, 4], operator.mul, 1) == 24, "product")


@test("reduce_ accumulates into a different type")
def test_reduce_to_other_type():
    total_age = reduce_(people, lambda acc, p: acc + p.age, 0)
    assert_that(total_age == 75, f"ages should sum to 75, got {total_age}")

    def tally(acc, fruit):
        acc[fruit] = acc.get(fruit, 0) + 1
        return acc

    counts = reduce_(["apple", "banana", "apple", "orange"], tally, {})
    assert_that(counts == {"apple": 2, "banana": 1, "orange": 1}, f"got {counts}")


@test("reduce_ on an empty source returns the initial value")
def test_reduce_empty():
    assert_that(reduce_([], operator.add, 10) == 10, "should return initial")
    sentinel = object()
    assert_that(reduce_([], lambda acc, v: None, sentinel) is sentinel, "initial is returned unchanged")


# for_each() tests

@test("for_each visits every element in order")
def test_for_each():
    buf = io.StringIO()
    result = for_each([1, 2, 3, 4, 5], lambda x: buf.write(f"{x}\n"))
    assert_that(buf.getvalue() == "1\n2\n3\n4\n5\n", repr(buf.getvalue()))
    assert_that(result is None, "for_each returns nothing")


# find() tests

@test("find returns the first match with a found flag")
def test_find_hit():
    item, found = find(["banana", "apple", "cherry", "orange"], lambda f: f == "cherry")
    assert_that(found, "cherry should be found")
    assert_that(item == "cherry", f"got {item}")

    first_even, _ = find([1, 3, 4, 6], lambda x: x % 2 == 0)
    assert_that(first_even == 4, "should return the first match only")


@test("find reports a miss")
def test_find_miss():
    item, found = find(["banana", "apple", "orange"], lambda f: f == "cherry")
    assert_that(not found, "nothing should be found")
    assert_that(item is None, "missing item is None")
    assert_that(find([], bool) == (None, False), "empty source is a miss")


# some() / every() / contains() tests

@test("some detects any match")
def test_some():
    assert_that(some([1, 2, 3, 6, 7], lambda x: x > 5), "6 is greater than 5")
    assert_that(not some([1, 2, 3, 4], lambda x: x > 5), "nothing is greater than 5")
    assert_that(not some([], lambda x: True), "empty source has no match")


@test("every requires all matches")
def test_every():
    assert_that(every([6, 6, 7, 8], lambda x: x > 5), "all greater than 5")
    assert_that(not every([5, 7, 8, 1, 3], lambda x: x > 5), "5 fails")
    assert_that(every([], lambda x: False), "every is vacuously true on empty input")


@test("some and every stop at the deciding element")
def test_short_circuit():
    calls = []
    some([1, 2, 3, 4], lambda x: calls.append(x) or x == 2)
    assert_that(calls == [1, 2], f"some should stop at the first match, got {calls}")
    calls.clear()
    every([1, 2, 3, 4], lambda x: calls.append(x) or x < 2)
    assert_that(calls == [1, 2], f"every should stop at the first failure, got {calls}")


@test("contains tests membership by equality")
def test_contains():
    assert_that(contains([1, 2, 3], 2), "2 is a member")
    assert_that(not contains([1, 2, 3], 9), "9 is not")
    assert_that(contains([Person('a', 20)], Person('a', 20)), "equal records match")
    assert_that(not contains([], 1), "empty source contains nothing")


if __name__ == "__main__":
    suite.run(title="hof fold and search test suite")
