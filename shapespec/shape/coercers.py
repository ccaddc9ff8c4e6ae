# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
Scalar coercers.

Each coercer takes a data value and returns it converted to the type
declared by the *sample shape*, or raises :exc:`~exceptions.ValueError`
or :exc:`~exceptions.TypeError` if that is not possible (the matcher
turns such an exception into :exc:`~shapespec.exceptions.TypeMismatchError`).

The coercers never modify the given value in-place.
"""


import math

from shapespec.class_helpers import is_number
from shapespec.encoding_helpers import (
    ascii_str,
    number_to_text,
    str_to_bool,
)
from shapespec.regexes import DECIMAL_NUMBER_REGEX
from shapespec.shape.nodes import (
    BOOLEAN,
    NUMBER,
    STRING,
)


#: The maximum number of digits in the integral part of a number
#: string (the same as the default limit of :func:`int` conversion
#: since Python 3.11).
MAX_INTEGRAL_DIGITS = 4300


def coerce_string(value):
    """
    Any scalar is accepted; numbers, booleans and :obj:`None` are
    converted to their canonical JSON text.

    >>> coerce_string('Jane Doe')
    'Jane Doe'
    >>> coerce_string(30)
    '30'
    >>> coerce_string(2.5)
    '2.5'
    >>> coerce_string(True)
    'true'
    >>> coerce_string(None)
    'null'

    Containers are not scalars to be stringified:

    >>> coerce_string({'a': 1})  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    >>> coerce_string(['a'])     # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """
    if isinstance(value, str):
        return value
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_number(value):
        return number_to_text(value)
    raise TypeError('{!a} is not a scalar value'.format(value))


def coerce_number(value):
    """
    Numbers are passed unchanged; a string is accepted if it fully
    matches a decimal number notation (optional sign, optional
    fractional part).

    >>> coerce_number(30)
    30
    >>> coerce_number(-0.25)
    -0.25
    >>> coerce_number('30')
    30
    >>> coerce_number('+7')
    7
    >>> coerce_number('-12.50')
    -12.5

    >>> coerce_number('30 years')  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> coerce_number('')          # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> coerce_number(True)        # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...

    The result is always a finite number, and the integral part of a
    number string may not be longer than :data:`MAX_INTEGRAL_DIGITS`:

    >>> coerce_number('1' + 400 * '0' + '.5')   # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> coerce_number(float('inf'))            # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> coerce_number(5000 * '1')              # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """
    if is_number(value):
        number = value
    elif isinstance(value, str):
        match = DECIMAL_NUMBER_REGEX.match(value)
        if match is None:
            raise ValueError('"{}" is not a decimal number'.format(ascii_str(value)))
        if len(match.group('integral')) > MAX_INTEGRAL_DIGITS:
            raise ValueError('"{}..." has more than {} integral digits'.format(
                ascii_str(value[:20]), MAX_INTEGRAL_DIGITS))
        if match.group('fraction') is None:
            number = int(value)
        else:
            number = float(value)
    else:
        raise TypeError('{!a} is neither a number nor a str'.format(value))
    if isinstance(number, float) and not math.isfinite(number):
        raise ValueError('"{}" is not a finite number'.format(
            ascii_str(value)[:40]))
    return number


def coerce_boolean(value):
    """
    Booleans are passed unchanged; the strings ``"true"``/``"false"``
    (case-insensitive) and the numbers ``1``/``0`` are converted.

    >>> coerce_boolean(False)
    False
    >>> coerce_boolean('TRUE')
    True
    >>> coerce_boolean(1)
    True
    >>> coerce_boolean(0)
    False

    >>> coerce_boolean('yes')      # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> coerce_boolean(2)          # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    >>> coerce_boolean([])         # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    TypeError: ...
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return str_to_bool(value)
    if is_number(value):
        if value == 1:
            return True
        if value == 0:
            return False
        raise ValueError('{!a} is neither 1 nor 0'.format(value))
    raise TypeError('{!a} is neither a bool, nor a str, nor a number'.format(value))


#: Maps scalar shape tags to the corresponding coercers.
TAG_TO_COERCER = {
    STRING: coerce_string,
    NUMBER: coerce_number,
    BOOLEAN: coerce_boolean,
}
