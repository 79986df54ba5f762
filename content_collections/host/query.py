import logging

from ..errors import QueryError
from ..utilities.sanitize import sanitize_ids, intval

RESERVED_ARGS = ('include', 'exclude', 'orderby', 'order', 'offset', 'limit')


def _as_list(value):
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    if isinstance(value, str):
        return value.split(',')
    return [value]


def _matches(actual, expected):
    if isinstance(expected, (list, tuple, set, frozenset)):
        return any(_matches(actual, e) for e in expected)
    if actual == expected:
        return True
    if actual is None or expected is None:
        return False
    return str(actual) == str(expected)


def _to_int(arg, value, minimum):
    if isinstance(value, int) and not isinstance(value, bool):
        ret = value
    elif isinstance(value, str) and value.strip().lstrip('+-').isdigit():
        ret = intval(value)
    else:
        raise QueryError(arg, value, 'not an integer')
    if ret < minimum:
        raise QueryError(arg, value, 'must be at least {}'.format(minimum))
    return ret


def _order(selected, orderby, descending):
    if orderby == 'id':
        return sorted(selected, key=lambda r: r[0], reverse=descending)
    present = [r for r in selected if r[1].get(orderby) is not None]
    missing = [r for r in selected if r[1].get(orderby) is None]
    try:
        present.sort(key=lambda r: r[1][orderby], reverse=descending)
    except TypeError:
        raise QueryError('orderby', orderby, 'values are not comparable')
    return present + missing


def run_query(records, args):
    """Select ids out of `(id, data)` records.

    `include`/`exclude` restrict by id, `orderby`/`order` sort (storage
    order is kept otherwise), `offset`/`limit` page the result and every
    other argument filters on the object data.
    """
    filters = dict((k, v) for k, v in args.items() if k not in RESERVED_ARGS)
    # No usable id in `include` means no restriction
    include = set(sanitize_ids(_as_list(args.get('include') or []))) or None
    exclude = set(sanitize_ids(_as_list(args.get('exclude') or [])))

    selected = [
        (object_id, data)
        for object_id, data in records
        if (include is None or object_id in include) and
        object_id not in exclude and
        all(_matches(data.get(k), v) for k, v in filters.items())
    ]

    orderby = args.get('orderby')
    order = str(args.get('order') or 'ASC').upper()
    if order not in ('ASC', 'DESC'):
        raise QueryError('order', args.get('order'), 'expected ASC or DESC')
    if orderby:
        selected = _order(selected, orderby, order == 'DESC')
    elif order == 'DESC':
        selected.reverse()

    offset = _to_int('offset', args.get('offset', 0), 0)
    limit = args.get('limit')
    if limit is not None:
        limit = _to_int('limit', limit, -1)
    if limit is None or limit < 0:
        selected = selected[offset:]
    else:
        selected = selected[offset:offset + limit]

    ret = [object_id for object_id, _ in selected]
    logging.debug('Query %r matched %d object(s)', args, len(ret))
    return ret
