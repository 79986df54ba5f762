import abc
import logging
import threading
from collections.abc import Iterable, Sized

from .utilities.sanitize import sanitize_ids


class CollectionBase(Sized, Iterable):
    """Lazily populated collection of object ids.

    Ids are fetched from the host on first demand (or right away when
    query arguments are passed to the constructor) and iterating the
    collection yields the objects the ids stand for, transformed one at a
    time.

    Note that `ids()` does not trigger a fetch: on a fresh instance it
    returns an empty list until something populates the collection.
    """

    default_args = {}
    required_args = {}

    def __init__(self, args=None):
        self._collection = []
        self._populated = False
        self._lock = threading.RLock()

        if args is not None:
            self.fetch(args)

    @property
    def populated(self):
        return self._populated

    def collection(self):
        """The list of ids, fetched with default arguments if needed."""
        if not self._populated:
            with self._lock:
                if not self._populated:
                    logging.debug('%s: fetching on first access',
                                  type(self).__name__)
                    self.fetch()
        return list(self._collection)

    def count(self):
        return len(self.collection())

    def __len__(self):
        return self.count()

    @abc.abstractmethod
    def fetch(self, args=None):
        """Query the host with `args` and populate the collection."""

    def populate(self, ids):
        """Populate the collection from existing ids.

        Values that do not amount to a positive integer are dropped.
        """
        with self._lock:
            self._collection = sanitize_ids(ids)
            self._populated = True
        logging.debug('%s: populated with %d id(s)',
                      type(self).__name__, len(self._collection))

    def ids(self):
        return list(self._collection)

    @abc.abstractmethod
    def objects(self):
        """All objects in the collection, in id order."""
        return list(self)

    def __iter__(self):
        for object_id in self.collection():
            yield self._transform(object_id)

    @abc.abstractmethod
    def _transform(self, object_id):
        """Turn a single id into its object."""
