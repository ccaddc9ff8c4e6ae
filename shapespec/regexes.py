# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
This module contains regular expression objects used in other parts
of the *shapespec* library.
"""


import re


#: Decimal number: optional sign, digits, optional fractional part.
#:
#: Used by :func:`shapespec.shape.coercers.coerce_number`.
DECIMAL_NUMBER_REGEX = re.compile(r'''
    \A
    (?P<sign>
        [+\-]
    )?
    (?P<integral>
        [0-9]+
    )
    (?:
        \.
        (?P<fraction>
            [0-9]+
        )
    )?
    \Z
''', re.ASCII | re.VERBOSE)
