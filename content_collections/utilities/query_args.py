from collections.abc import Mapping
from urllib.parse import parse_qsl


def _parse_query_string(args):
    parsed = {}
    for key, value in parse_qsl(args, keep_blank_values=True):
        if key.endswith('[]'):
            key = key[:-2]
            parsed.setdefault(key, [])
        if key in parsed:
            current = parsed[key]
            if not isinstance(current, list):
                current = parsed[key] = [current]
            current.append(value)
        else:
            parsed[key] = value
    return parsed


def parse_args(args):
    """Normalize query arguments into a fresh dict.

    Accepts None, a mapping, a query string ('type=post&limit=5') or any
    object carrying attributes.
    """
    if args is None:
        return {}
    if isinstance(args, Mapping):
        return dict(args)
    if isinstance(args, str):
        return _parse_query_string(args)
    if hasattr(args, '__dict__'):
        return dict((k, v)
                    for k, v in vars(args).items()
                    if not k.startswith('_'))
    raise TypeError('Unsupported query arguments: %r' % (args,))


def merge_args(args, default_args=None, required_args=None):
    merged = dict(default_args or {})
    merged.update(parse_args(args))
    merged.update(required_args or {})
    return merged
