import pytest

from content_collections.errors import QueryError
from content_collections.host.query import run_query

RECORDS = [
    (1, {'type': 'post', 'title': 'Banana', 'rank': 2}),
    (2, {'type': 'page', 'title': 'About'}),
    (3, {'type': 'post', 'title': 'Apple', 'rank': 1}),
    (5, {'type': 'post', 'title': 'Cherry'}),
]


def query(**args):
    return run_query(iter(RECORDS), args)


def test_no_args_returns_everything_in_storage_order():
    assert query() == [1, 2, 3, 5]


def test_field_filters():
    assert query(type='post') == [1, 3, 5]
    assert query(type=['page', 'missing']) == [2]
    assert query(rank='2') == [1]


def test_include_and_exclude():
    assert query(include=[5, '3', 'x']) == [3, 5]
    assert query(include='1,2', exclude=[2]) == [1]
    assert query(include=[]) == [1, 2, 3, 5]


def test_include_without_usable_ids_is_no_restriction():
    assert query(include=0) == [1, 2, 3, 5]
    assert query(include=[0]) == [1, 2, 3, 5]
    assert query(include='abc') == [1, 2, 3, 5]
    assert query(include=[0, 3]) == [3]


def test_order_by_field_puts_missing_values_last():
    assert query(type='post', orderby='rank') == [3, 1, 5]
    assert query(type='post', orderby='rank', order='desc') == [1, 3, 5]
    assert query(orderby='title') == [2, 3, 1, 5]


def test_order_by_id_descending():
    assert query(orderby='id', order='DESC') == [5, 3, 2, 1]
    assert query(order='DESC') == [5, 3, 2, 1]


def test_paging():
    assert query(limit=2) == [1, 2]
    assert query(limit='2', offset='1') == [2, 3]
    assert query(limit=-1, offset=3) == [5]
    assert query(limit=0) == []


@pytest.mark.parametrize('args', [
    {'order': 'sideways'},
    {'limit': 'many'},
    {'limit': -2},
    {'offset': -1},
    {'offset': 1.5},
])
def test_invalid_arguments(args):
    with pytest.raises(QueryError):
        query(**args)


def test_uncomparable_order_values():
    records = [(1, {'v': 1}), (2, {'v': 'a'})]
    with pytest.raises(QueryError) as excinfo:
        run_query(records, {'orderby': 'v'})
    assert excinfo.value.arg == 'orderby'
