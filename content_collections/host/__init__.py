import logging
import os

from .base import ContentObject, HostBackend
from .backend_cached import CachedBackend
from .backend_filesystem import FilesystemBackend
from .backend_memory import MemoryBackend
from .backend_sqlite import SqliteBackend

BACKENDS = {
    'memory': MemoryBackend,
    'sqlite': SqliteBackend,
    'filesystem': FilesystemBackend,
}


def create_backend(kind=None, cache_size=None):
    kind = kind or os.environ.get('CC_HOST_BACKEND', 'memory')
    if cache_size is None:
        cache_size = int(os.environ.get('CC_CACHE_SIZE', 1024))
    try:
        backend = BACKENDS[kind]()
    except KeyError:
        raise ValueError('Unknown host backend %r, expected one of %s'
                         % (kind, ', '.join(sorted(BACKENDS))))
    logging.debug('Using %s host backend', backend.KIND)
    if cache_size > 0:
        backend = CachedBackend(backend, maxsize=cache_size)
    return backend


_host = None


def host_mgr() -> HostBackend:
    global _host

    if _host is None:
        _host = create_backend()
    return _host


def set_host(backend):
    global _host
    _host = backend
