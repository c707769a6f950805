import suite
from dgen import Generator, RecordStream, from_schema

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

order_schema = {
    'order_id': 'uuid4',
    'customer': 'name',
    'lines': [{
        '_dgen_count': [1, 4],
        '_dgen_items': {
            'qty': {'_dgen_provider': 'range', 'between': [1, 9]},
            'status': {'_dgen_provider': 'choice', 'from': ['open', 'shipped']}
        }
    }],
    'channel': {'_dgen_provider': 'literal', 'value': 'web'}
}


@test("from_schema returns an endless record stream")
def test_from_schema_stream():
    stream = from_schema(order_schema, seed=1)
    assert_that(isinstance(stream, RecordStream), "from_schema should return a RecordStream")
    assert_equal(stream.take(25).to.count(), 25)


@test("records follow the schema")
def test_record_shape():
    for order in from_schema(order_schema, seed=2).take(10):
        assert_equal(set(order), {'order_id', 'customer', 'lines', 'channel'})
        assert_equal(order['channel'], 'web')
        assert_that(1 <= len(order['lines']) <= 4, f"line count out of range: {len(order['lines'])}")
        for line in order['lines']:
            assert_that(1 <= line['qty'] <= 9, "qty out of range")
            assert_that(line['status'] in ('open', 'shipped'), "unexpected status")


@test("a seeded stream replays the same records")
def test_seeded_replay():
    stream = from_schema(order_schema, seed=4)
    assert_equal(stream.take(3).to.list(), stream.take(3).to.list())


@test("references see earlier fields")
def test_ref_provider():
    schema = {'city': 'city', 'home': {'_dgen_provider': 'ref', 'key': 'city'}}
    record = from_schema(schema, seed=6).to.first()
    assert_equal(record['home'], record['city'])


@test("schema errors are reported")
def test_schema_errors():
    generator = Generator(seed=0)
    assert_raises(ValueError, generator.create, {'_dgen_provider': 'nope'})
    assert_raises(ValueError, generator.create, {'_dgen_provider': 'ref', 'key': 'missing'})
    assert_raises(ValueError, generator.create, {'_dgen_provider': 'literal'})
    assert_raises(ValueError, generator.create, ('no_such_provider', {}))


if __name__ == "__main__":
    suite.main(title="dgen tests")
