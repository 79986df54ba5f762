import unittest.mock as mock

import pytest

from content_collections import ObjectCollection, TypedCollection
from content_collections.errors import QueryError
from content_collections.host import MemoryBackend, set_host


@pytest.fixture
def host():
    backend = MemoryBackend()
    backend.add({'type': 'post', 'title': 'Banana'})
    backend.add({'type': 'page', 'title': 'About'})
    backend.add({'type': 'post', 'title': 'Apple'})
    backend.add({'type': 'post', 'title': 'Cherry', 'status': 'draft'})
    return backend


class Posts(TypedCollection):
    kind = 'post'
    default_args = {'orderby': 'title'}


class Published(Posts):

    @property
    def required_args(self):
        return dict(super().required_args, status=None)


class TestObjectCollection(object):

    def test_lazy_fetch_uses_default_query(self, host):
        with mock.patch.object(host, 'query', wraps=host.query) as query:
            collection = ObjectCollection(host=host)
            assert query.call_count == 0
            assert collection.ids() == []
            assert collection.count() == 4
            assert list(collection) == [host.load(i) for i in (1, 2, 3, 4)]
            assert query.call_count == 1
            query.assert_called_once_with({})

    def test_constructor_args_fetch_immediately(self, host):
        collection = ObjectCollection('type=page', host=host)
        assert collection.populated
        assert collection.ids() == [2]

    def test_objects(self, host):
        collection = ObjectCollection({'include': [3, 1]}, host=host)
        assert [obj.get('title') for obj in collection.objects()] == ['Banana', 'Apple']

    def test_missing_objects_transform_to_none(self, host):
        collection = ObjectCollection(host=host)
        collection.populate([1, 42])
        assert list(collection) == [host.load(1), None]

    def test_iteration_reflects_current_host_data(self, host):
        collection = ObjectCollection(host=host)
        first = [obj.get('title') for obj in collection]
        host.add({'type': 'post', 'title': 'Blueberry'}, 1)
        second = [obj.get('title') for obj in collection]
        assert first[0] == 'Banana'
        assert second[0] == 'Blueberry'
        assert len(first) == len(second)

    def test_host_errors_propagate(self, host):
        with pytest.raises(QueryError):
            ObjectCollection({'limit': 'lots'}, host=host)

    def test_default_host(self, host):
        set_host(host)
        try:
            assert ObjectCollection().host is host
        finally:
            set_host(None)


class TestTypedCollection(object):

    def test_kind_and_defaults(self, host):
        posts = Posts(host=host)
        assert [obj.get('title') for obj in posts] == ['Apple', 'Banana', 'Cherry']
        assert posts.ids() == [3, 1, 4]

    def test_required_args_win(self, host):
        posts = Posts({'type': 'page', 'order': 'DESC'}, host=host)
        assert posts.ids() == [4, 1, 3]

    def test_query_args_merge(self, host):
        posts = Posts(host=host)
        assert posts.query_args('limit=1') == {'orderby': 'title', 'limit': '1', 'type': 'post'}

    def test_extended_required_args(self, host):
        assert Published(host=host).ids() == [3, 1]

    def test_no_kind_means_no_restriction(self, host):
        class Anything(TypedCollection):
            pass

        assert Anything(host=host).count() == 4
