import logging

from .collection_base import CollectionBase
from .host import host_mgr
from .utilities.query_args import merge_args


class ObjectCollection(CollectionBase):
    """Collection of content objects stored in a host backend.

    Query arguments are merged as defaults < caller arguments < required
    arguments before the backend is queried.
    """

    def __init__(self, args=None, host=None):
        self.host = host if host is not None else host_mgr()
        super().__init__(args)

    def query_args(self, args=None):
        return merge_args(args, self.default_args, self.required_args)

    def fetch(self, args=None):
        args = self.query_args(args)
        logging.debug('%s: querying %s host with %r',
                      type(self).__name__, self.host.KIND, args)
        self.populate(self.host.query(args))

    def objects(self):
        return super().objects()

    def _transform(self, object_id):
        return self.host.load(object_id)


class TypedCollection(ObjectCollection):
    """Collection restricted to objects whose `type` is `kind`."""

    kind = None

    @property
    def required_args(self):
        if self.kind is None:
            return {}
        return {'type': self.kind}
