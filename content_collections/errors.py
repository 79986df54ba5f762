class HostError(Exception):
    """Raised by a host backend when it cannot serve a request."""


class QueryError(HostError):

    def __init__(self, arg, value, reason):
        super().__init__(arg, value, reason)
        self.arg = arg
        self.value = value
        self.reason = reason

    def __str__(self):
        return 'Invalid query argument {}={!r}: {}'.format(self.arg, self.value, self.reason)
