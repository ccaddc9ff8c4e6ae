# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
.. note::

   The central piece is :class:`SampleShape`; the :func:`validate_schema`
   function is a convenience wrapper producing the error envelope
   instead of raising exceptions.
"""


from shapespec.shape._sample_shape import (
    SampleShape,
    validate_schema,
)
from shapespec.shape._matcher import (
    Fail,
    OMIT,
    Ok,
    SafeParsePolicy,
    ShapeMatcher,
    StrictPolicy,
)
from shapespec.shape.nodes import (
    MISSING,
    ShapeNode,
    classify,
)


__all__ = [
    'SampleShape',
    'validate_schema',

    'Fail',
    'OMIT',
    'Ok',
    'SafeParsePolicy',
    'ShapeMatcher',
    'StrictPolicy',

    'MISSING',
    'ShapeNode',
    'classify',
]
