import random
import threading
import suite
from chainy import MemoizedEnumerable, from_items, from_cursor_factory, generate, NOTHING

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


def counted_source(size: int):
    """a sequence that records each time it is traversed from the start"""
    calls = []

    def factory():
        calls.append(1)
        return range(size)

    return from_cursor_factory(factory), calls


@test("a memoized sequence drives its source only once")
def test_memoize_single_source_traversal():
    source, calls = counted_source(5)
    memo = source.util.memoize()
    assert_that(isinstance(memo, MemoizedEnumerable), "memoize should return a MemoizedEnumerable")
    assert_equal(memo.to.list(), [0, 1, 2, 3, 4])
    assert_equal(memo.to.list(), [0, 1, 2, 3, 4])
    assert_equal(len(calls), 1, "second traversal should read the buffer")
    assert_that(memo.is_cached, "buffer should be published")


@test("a partial traversal never publishes")
def test_memoize_partial():
    source, calls = counted_source(10)
    memo = source.util.memoize()
    assert_equal(memo.take(3).to.list(), [0, 1, 2])
    assert_that(not memo.is_cached, "partial traversal published a buffer")
    assert_equal(memo.to.count(), 10)
    assert_that(memo.is_cached, "full traversal should publish")
    assert_equal(len(calls), 2)


@test("random values stay fixed after the first full traversal")
def test_memoize_random():
    rolls = generate(NOTHING, lambda last: random.randint(0, 100)).take(10).util.memoize()
    full = rolls.to.list()
    assert_equal(rolls.to.list(), full)
    assert_equal(rolls.take(5).to.list(), full[:5])


@test("the first cursor to finish owns the buffer")
def test_memoize_first_finisher_wins():
    calls = []

    def factory():
        calls.append(1)
        base = len(calls) * 10
        return [base, base + 1]

    memo = from_cursor_factory(factory).util.memoize()
    slow, fast = iter(memo), iter(memo)
    assert_equal(next(slow), 10)
    assert_equal(list(fast), [20, 21])
    assert_equal(list(slow), [11], "an in-flight cursor keeps its own state")
    assert_equal(memo.to.list(), [20, 21])
    assert_equal(len(calls), 2)


@test("concurrent full traversals publish exactly one buffer")
def test_memoize_threads():
    calls = []
    lock = threading.Lock()

    def factory():
        with lock:
            calls.append(1)
            run = len(calls)
        return [(run, i) for i in range(200)]

    memo = from_cursor_factory(factory).util.memoize()
    results = [None] * 8

    def traverse(slot):
        results[slot] = memo.to.list()

    threads = [threading.Thread(target=traverse, args=(slot,)) for slot in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    canonical = memo.to.list()
    runs_so_far = len(calls)
    assert_that(canonical in results, "the buffer should be one of the traversals")
    assert_equal(memo.to.list(), canonical)
    assert_equal(len(calls), runs_so_far, "reads after publication should not drive the source")


@test("memoizing a memoized sequence returns it unchanged")
def test_memoize_idempotent():
    memo = from_items(1, 2).select(lambda x: x).util.memoize()
    assert_that(memo.util.memoize() is memo, "memoize should not wrap twice")


@test("lookups use the published buffer")
def test_memoize_buffer_lookups():
    source, calls = counted_source(6)
    memo = source.util.memoize()
    assert_equal(memo.to.get(4), 4, "lookup before publication walks the source")
    assert_equal(len(calls), 1)
    memo.to.list()
    assert_equal(len(calls), 2)
    assert_equal(memo.to.get(4), 4)
    assert_equal(memo.to.get(10), None)
    assert_equal(memo.to.count(), 6)
    assert_equal(memo.to.last(), 5)
    assert_that(not memo.to.is_empty(), "memo should not be empty")
    assert_equal(len(calls), 2, "lookups after publication should not drive the source")


if __name__ == "__main__":
    suite.main(title="chainy memoize tests")
