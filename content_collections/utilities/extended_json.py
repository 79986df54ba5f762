import datetime
import json as _json

import decimal
import isodate


def encode_value(obj):
    """Marker mapping for values plain JSON cannot hold.

    Usable as the `default` hook of any JSON encoder.
    """
    if isinstance(obj, decimal.Decimal):
        return {'$decimal': str(obj)}
    elif isinstance(obj, datetime.datetime):
        return {'$datetime': obj.isoformat()}
    elif isinstance(obj, datetime.date):
        return {'$date': obj.isoformat()}
    elif isinstance(obj, (isodate.Duration, datetime.timedelta)):
        return {'$duration': isodate.duration_isoformat(obj)}
    elif isinstance(obj, (set, frozenset)):
        return {'$set': sorted(obj, key=repr)}
    raise TypeError('%r is not JSON serializable' % (obj,))


PARSERS = (
    ('$decimal', decimal.Decimal),
    ('$datetime', datetime.datetime.fromisoformat),
    ('$date', datetime.date.fromisoformat),
    ('$duration', isodate.parse_duration),
    ('$set', set),
)


def decode_value(obj):
    if len(obj) != 1:
        return obj
    for marker, parser in PARSERS:
        if marker in obj:
            try:
                return parser(obj[marker])
            except (ValueError, TypeError, decimal.InvalidOperation,
                    isodate.ISO8601Error):
                return obj
    return obj


def encode_markers(obj):
    """Replace values plain JSON cannot hold with their markers, innermost first."""
    if isinstance(obj, dict):
        return dict((k, encode_markers(v)) for k, v in obj.items())
    if isinstance(obj, (list, tuple)):
        return [encode_markers(v) for v in obj]
    if isinstance(obj, (set, frozenset)):
        return {'$set': sorted((encode_markers(v) for v in obj), key=repr)}
    if isinstance(obj, (decimal.Decimal, datetime.date, datetime.timedelta,
                        isodate.Duration)):
        return encode_value(obj)
    return obj


def decode_markers(obj):
    """Decode markers in an already parsed document, innermost first."""
    if isinstance(obj, dict):
        return decode_value(dict((k, decode_markers(v)) for k, v in obj.items()))
    if isinstance(obj, list):
        return [decode_markers(v) for v in obj]
    return obj


class ObjectDataDecoder(_json.JSONDecoder):
    """
    Decodes object data written by ObjectDataEncoder
    json.loads(myString, cls=ObjectDataDecoder)
    """

    def __init__(self, **kwargs):
        kwargs['object_hook'] = decode_value
        super(ObjectDataDecoder, self).__init__(**kwargs)


class ObjectDataEncoder(_json.JSONEncoder):

    def default(self, obj):
        try:
            return encode_value(obj)
        except TypeError:
            return super().default(obj)


def _dumps(*args, **kwargs):
    kwargs['cls'] = ObjectDataEncoder
    return _json.dumps(*args, **kwargs)


def _loads(*args, **kwargs):
    kwargs['cls'] = ObjectDataDecoder
    return _json.loads(*args, **kwargs)


class json(object):
    dumps = _dumps
    loads = _loads
    JSONDecodeError = _json.JSONDecodeError
