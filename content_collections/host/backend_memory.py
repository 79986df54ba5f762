import copy

from .base import HostBackend


class MemoryBackend(HostBackend):

    KIND = 'memory'

    def __init__(self):
        self.objects = {}

    def records(self):
        for object_id in sorted(self.objects):
            yield object_id, self.objects[object_id]

    def load_data(self, object_id):
        data = self.objects.get(object_id)
        if data is not None:
            return copy.deepcopy(data)

    def store_data(self, object_id, data):
        self.objects[object_id] = copy.deepcopy(data)

    def delete_data(self, object_id):
        self.objects.pop(object_id, None)

    def reset(self):
        self.objects.clear()
