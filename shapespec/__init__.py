# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
*shapespec* -- validation and normalization of JSON data against
*sample shapes* (schemas expressed as example values).
"""


from shapespec.shape import (
    SampleShape,
    validate_schema,
)


__all__ = [
    'SampleShape',
    'validate_schema',
]
