# Copyright (c) 2013-2025 NASK. All rights reserved.

import json


def ascii_str(obj):

    r"""
    Safely convert the given object to an ASCII-only :class:`str`.

    This function does its best to obtain a string representation
    (possibly :class:`str`-like or :class:`bytes`-like converted to str,
    though :func:`repr` can also be used as the last-resort fallback)
    and then escaping any non-ASCII characters -- *not raising* any
    encoding/decoding exceptions.

    >>> ascii_str('')
    ''
    >>> ascii_str('Ala ma kota\nA kot?\n2=2 ')   # pure ASCII str => unchanged
    'Ala ma kota\nA kot?\n2=2 '
    >>> ascii_str(b'Ala ma kota')
    'Ala ma kota'

    >>> ascii_str('Ech, ale błąd!')       # non-pure-ASCII-str => escaped
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'Ech, ale b\xc5\x82\xc4\x85d!')   # UTF-8 bytes => decoded + escaped
    'Ech, ale b\\u0142\\u0105d!'

    >>> ascii_str(ValueError('Ech, ale błąd!'))
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(42)
    '42'

    >>> class Nasty(object):
    ...     def __str__(self): raise ValueError
    ...     def __repr__(self): return 'really nasŧy!!!'
    ...
    >>> ascii_str(Nasty())
    'really nas\\u0167y!!!'
    """
    if isinstance(obj, str):
        s = obj
    else:
        if isinstance(obj, memoryview):
            obj = bytes(obj)
        if isinstance(obj, (bytes, bytearray)):
            s = obj.decode('utf-8', 'surrogateescape')
        else:
            try:
                s = str(obj)
            except ValueError:
                s = repr(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def format_path(path):

    r"""
    Format a sequence of key/index segments as a human-readable path.

    Keys are joined with dots, indexes are put into square brackets:

    >>> format_path(['order', 'items', 2, 'sku'])
    'order.items[2].sku'
    >>> format_path([0, 'name'])
    '[0].name'
    >>> format_path(['tags', 0, 1])
    'tags[0][1]'
    >>> format_path(['Zażółć'])
    'Za\\u017c\\xf3\\u0142\\u0107'

    The empty path denotes the top-level value:

    >>> format_path(())
    '(root)'
    """
    parts = []
    for segment in path:
        if isinstance(segment, int):
            parts.append('[{}]'.format(segment))
        elif parts:
            parts.append('.' + ascii_str(segment))
        else:
            parts.append(ascii_str(segment))
    return ''.join(parts) or '(root)'


def str_to_bool(s):
    """
    Return True or False, given one of the known strings (see examples below).

    >>> str_to_bool('true')
    True
    >>> str_to_bool('TRUE')  # note: checks are case-insensitive
    True
    >>> str_to_bool('False')
    False

    Other string values cause ValueError:

    >>> str_to_bool('yes')            # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> str_to_bool('')               # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...

    Non-str values cause TypeError:

    >>> str_to_bool(True)             # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    >>> str_to_bool(1)                # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """
    if not isinstance(s, str):
        raise TypeError('{!a} is not a str'.format(s))
    s_lowercased = s.lower()
    try:
        return str_to_bool.LOWERCASE_TO_BOOL[s_lowercased]
    except KeyError:
        raise ValueError(str_to_bool.MESSAGE_PATTERN.format(
            ascii_str(s))) from None

str_to_bool.LOWERCASE_TO_BOOL = {
    'true': True,
    'false': False,
}

str_to_bool.MESSAGE_PATTERN = (
    '"{}" is not a valid boolean literal (expected "true" or "false", '
    'case-insensitively)')


def number_to_text(number):
    """
    Get the canonical (JSON) textual representation of a number.

    >>> number_to_text(30)
    '30'
    >>> number_to_text(-1.5)
    '-1.5'
    >>> number_to_text(1e100)
    '1e+100'
    """
    return json.dumps(number)
