# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections.abc as collections_abc


def is_seq(obj):
    """
    Check if the given object is a *non-string sequence*.

    >>> is_seq([1, 2])
    True
    >>> is_seq(())
    True
    >>> is_seq('abc')
    False
    >>> is_seq(b'abc')
    False
    >>> is_seq(bytearray(b'abc'))
    False
    >>> is_seq({'a': 1})
    False
    """
    return (isinstance(obj, collections_abc.Sequence)
            and not isinstance(obj, (str, bytes, bytearray)))


def is_mapping(obj):
    """
    >>> is_mapping({})
    True
    >>> is_mapping([])
    False
    """
    return isinstance(obj, collections_abc.Mapping)


def is_number(obj):
    """
    Check if the given object is a number in the JSON sense (note that
    :class:`bool` objects are *not* considered numbers).

    >>> is_number(42)
    True
    >>> is_number(-0.5)
    True
    >>> is_number(True)
    False
    >>> is_number('42')
    False
    """
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)
