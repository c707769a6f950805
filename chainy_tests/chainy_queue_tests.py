import suite
from chainy import EnumerableQueue, from_items, from_cursor_factory, to_queue

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

letters = ["a", "b", "c", "d", "e"]


def drain(queue):
    removed = []
    while queue.to.any():
        removed.append(queue.remove_first())
    return "".join(removed)


@test("items appended to a seeded queue follow the seed")
def test_queue_with_last():
    queue = from_items("a").util.to_queue().with_last("b").with_last("c")
    assert_that(isinstance(queue, EnumerableQueue), "to_queue should return a queue")
    assert_equal(queue.to.join(), "abc", "reading should not remove anything")
    assert_equal(drain(queue), "abc")
    assert_that(queue.to.is_empty(), "queue should be empty after draining")


@test("appends and removals interleave without skips or duplicates")
def test_queue_interleaved():
    queue = to_queue(letters[:1])
    for item in letters[1:]:
        queue.with_last(item)
    assert_equal(queue.to.join(), "abcde")
    assert_equal(drain(queue), "abcde")

    removed = []
    for item in letters:
        queue.with_last(item)
        if queue.to.any():
            removed.append(queue.remove_first())
    assert_equal("".join(removed), "abcde")

    queue.with_last(*letters).with_last_all(letters)
    assert_equal(drain(queue), "abcdeabcde")


@test("a larger seed drains before the appended items")
def test_queue_larger_seed():
    queue = to_queue(["a", "b"])
    removed = []
    for item in letters[2:]:
        queue.with_last(item)
        removed.append(queue.remove_first())
    removed.append(drain(queue))
    assert_equal("".join(removed), "abcde")


@test("n seed items and m appended items come out in order")
def test_queue_n_plus_m():
    queue = to_queue(range(4)).with_last_all([10, 11, 12])
    out = [queue.remove_first() for _ in range(7)]
    assert_equal(out, [0, 1, 2, 3, 10, 11, 12])
    assert_that(queue.to.is_empty(), "queue should be empty after n+m removals")
    assert_raises(IndexError, queue.remove_first)


@test("the seed is read once and dropped when drained")
def test_queue_seed_read_once():
    calls = []

    def factory():
        calls.append(1)
        return iter(["x", "y"])

    queue = to_queue(from_cursor_factory(factory)).with_last("z")
    assert_that(queue.has_seed, "queue should start seeded")
    assert_equal(queue.to.list(), ["x", "y", "z"])
    assert_equal(queue.remove_first(), "x")
    assert_equal(queue.to.list(), ["y", "z"])
    assert_equal(queue.remove_first(), "y")
    assert_equal(queue.remove_first(), "z")
    assert_that(not queue.has_seed, "seed should be dropped")
    assert_equal(len(calls), 1, "the seed should never be re-driven")


@test("a paused cursor sees removals made after it was created")
def test_queue_paused_cursor():
    queue = to_queue(["a", "b", "c"])
    cursor = iter(queue)
    assert_equal(next(cursor), "a")
    queue.remove_first()
    queue.remove_first()
    assert_equal(list(cursor), ["c"])


@test("an empty queue")
def test_queue_empty():
    queue = to_queue()
    assert_that(queue.to.is_empty(), "new queue should be empty")
    assert_equal(queue.to.count(), 0)
    assert_raises(IndexError, queue.remove_first)
    queue.with_last(1).with_last_all(None)
    assert_equal(queue.to.count(), 1)
    assert_equal(queue.to.get(0), 1)


@test("a drained queue composes like any sequence")
def test_queue_composes():
    queue = to_queue([3, 1, 2]).with_last(5, 4)
    assert_equal(queue.where(lambda x: x > 2).ascending().to.list(), [3, 4, 5])
    queue.remove_first()
    assert_equal(queue.to.list(), [1, 2, 5, 4])


@test("iterating a seeded queue reads nothing until the first item is asked for")
def test_queue_iter_is_lazy():
    calls = []

    def factory():
        calls.append(1)
        return iter(["x", "y"])

    queue = to_queue(from_cursor_factory(factory))
    cursor = iter(queue)
    assert_equal(calls, [])
    assert_equal(next(cursor), "x")
    assert_equal(len(calls), 1)
    assert_equal(queue.to.list(), ["x", "y"])
    assert_equal(len(calls), 1)


if __name__ == "__main__":
    suite.main(title="chainy queue tests")
