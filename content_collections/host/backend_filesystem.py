import os

import ujson

from ..utilities.extended_json import decode_markers, encode_markers
from .base import HostBackend


class FilesystemBackend(HostBackend):

    KIND = 'filesystem'

    def __init__(self, root_dir='.'):
        cc_dirname = os.environ.get('CC_DB_DIRNAME', '.cc')
        self.base_dir = os.path.join(root_dir, cc_dirname)
        os.makedirs(self.base_dir, exist_ok=True)

    def fn(self, object_id):
        return os.path.join(self.base_dir, '{}.json'.format(object_id))

    def all_ids(self):
        ids = []
        for name in os.listdir(self.base_dir):
            stem, ext = os.path.splitext(name)
            if ext == '.json' and stem.isdigit():
                ids.append(int(stem))
        return sorted(ids)

    def records(self):
        for object_id in self.all_ids():
            data = self.load_data(object_id)
            if data is not None:
                yield object_id, data

    def load_data(self, object_id):
        try:
            with open(self.fn(object_id)) as f:
                return decode_markers(ujson.load(f))
        except FileNotFoundError:
            pass
        except ValueError:
            pass

    def store_data(self, object_id, data):
        fn = self.fn(object_id)
        try:
            with open(fn+'.tmp', 'w') as f:
                ujson.dump(encode_markers(data), f)
            os.rename(fn+'.tmp', fn)
        finally:
            if os.path.exists(fn+'.tmp'):
                os.unlink(fn+'.tmp')

    def delete_data(self, object_id):
        try:
            os.unlink(self.fn(object_id))
        except FileNotFoundError:
            pass
