import suite
from chainy import from_items, from_range, generate

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

ones = from_items(1, 1, 1, 2, 1, 1)


@test("as_long_as stops at the first failing item")
def test_as_long_as():
    assert_equal(ones.as_long_as(lambda x: x == 1).to.list(), [1, 1, 1])
    assert_equal(ones.take_while(lambda x: x == 1).to.list(), [1, 1, 1])


@test("before excludes the stopping item and never resumes")
def test_before():
    assert_equal(from_items(1, 2, 1, 3).before(lambda x: x == 2).to.list(), [1])
    assert_equal(from_items(1, 2).before(lambda x: x == 1).to.list(), [])
    assert_equal(from_items(1, 2).before(lambda x: x == 9).to.list(), [1, 2])


@test("not_before starts at the first matching item")
def test_not_before():
    assert_equal(from_items(1, 2, 1, 3).not_before(lambda x: x == 2).to.list(), [2, 1, 3])
    assert_equal(from_items(1, 1).not_before(lambda x: x == 2).to.list(), [])


@test("not_after includes the stopping item")
def test_not_after():
    assert_equal(from_items(1, 2, 1, 3).not_after(lambda x: x == 2).to.list(), [1, 2])
    assert_equal(from_items(1, 3).not_after(lambda x: x == 2).to.list(), [1, 3])


@test("not_as_long_as skips the leading run")
def test_not_as_long_as():
    assert_equal(ones.not_as_long_as(lambda x: x == 1).to.list(), [2, 1, 1])
    assert_equal(ones.skip_while(lambda x: x == 1).to.list(), [2, 1, 1])


@test("value forms compare with ==")
def test_value_forms():
    letters = from_items("a", "b", "c", "b")
    assert_equal(letters.before_value("c").to.list(), ["a", "b"])
    assert_equal(letters.not_before_value("c").to.list(), ["c", "b"])
    assert_equal(ones.as_long_as_value(1).to.list(), [1, 1, 1])
    assert_equal(ones.not_as_long_as_value(1).to.list(), [2, 1, 1])


@test("windows end infinite sequences")
def test_windows_on_infinite():
    naturals = generate(0, lambda x: x + 1)
    assert_equal(naturals.before(lambda x: x > 3).to.list(), [0, 1, 2, 3])
    assert_equal(naturals.not_after(lambda x: x == 3).to.list(), [0, 1, 2, 3])
    assert_equal(naturals.not_before(lambda x: x >= 5).take(2).to.list(), [5, 6])


@test("a None condition leaves the sequence unchanged")
def test_window_none_condition():
    en = from_range(0, 3)
    assert_that(en.before(None) is en, "before(None)")
    assert_that(en.not_before(None) is en, "not_before(None)")
    assert_that(en.not_after(None) is en, "not_after(None)")
    assert_that(en.as_long_as(None) is en, "as_long_as(None)")


@test("each traversal re-evaluates the window from scratch")
def test_window_replay():
    window = from_items(1, 2, 3).before(lambda x: x == 3)
    assert_equal(window.to.list(), [1, 2])
    assert_equal(window.to.list(), [1, 2])


if __name__ == "__main__":
    suite.main(title="chainy window tests")
