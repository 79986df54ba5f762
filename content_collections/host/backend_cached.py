import copy

import cachetools

from .base import HostBackend


class CachedBackend(HostBackend):
    """Keeps recently loaded objects of another backend in an LRU cache."""

    def __init__(self, backend, maxsize=1024):
        self.backend = backend
        self.cache = cachetools.LRUCache(maxsize)

    @property
    def KIND(self):
        return self.backend.KIND

    def records(self):
        return self.backend.records()

    def all_ids(self):
        return self.backend.all_ids()

    def load_data(self, object_id):
        try:
            return copy.deepcopy(self.cache[object_id])
        except KeyError:
            pass
        data = self.backend.load_data(object_id)
        if data is not None:
            self.cache[object_id] = copy.deepcopy(data)
        return data

    def store_data(self, object_id, data):
        self.cache.pop(object_id, None)
        self.backend.store_data(object_id, data)

    def delete_data(self, object_id):
        self.cache.pop(object_id, None)
        self.backend.delete_data(object_id)

    def reset(self):
        self.cache.clear()
        self.backend.reset()

    def next_id(self):
        return self.backend.next_id()
