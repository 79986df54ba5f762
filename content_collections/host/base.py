import logging
from typing import NamedTuple

from ..errors import QueryError
from ..utilities.query_args import parse_args
from ..utilities.sanitize import to_id
from .query import run_query


class ContentObject(NamedTuple):
    id: int
    data: dict

    def get(self, key, default=None):
        return self.data.get(key, default)


class HostBackend(object):
    """Storage for content objects, queried by argument mappings.

    Subclasses provide `records`, `load_data`, `store_data` and
    `delete_data`; querying and loading are shared.
    """

    KIND = None

    def query(self, args=None):
        try:
            return run_query(self.records(), parse_args(args))
        except QueryError as e:
            logging.warning('%s backend rejected query: %s', self.KIND, e)
            raise

    def load(self, object_id):
        object_id = to_id(object_id)
        if not object_id:
            return None
        data = self.load_data(object_id)
        if data is None:
            return None
        return ContentObject(object_id, data)

    def add(self, data, object_id=None):
        data = dict(data)
        data.pop('id', None)
        object_id = to_id(object_id) or self.next_id()
        self.store_data(object_id, data)
        return object_id

    def remove(self, object_id):
        self.delete_data(to_id(object_id))

    def all_ids(self):
        return [object_id for object_id, _ in self.records()]

    def reset(self):
        for object_id in self.all_ids():
            self.delete_data(object_id)

    def records(self):
        raise NotImplementedError()

    def load_data(self, object_id):
        raise NotImplementedError()

    def store_data(self, object_id, data):
        raise NotImplementedError()

    def delete_data(self, object_id):
        raise NotImplementedError()

    def next_id(self):
        return max(self.all_ids(), default=0) + 1
