# Copyright (c) 2013-2025 NASK. All rights reserved.

import logging

from shapespec.encoding_helpers import ascii_str
from shapespec.exceptions import ShapeMismatchError
from shapespec.shape._matcher import (
    Fail,
    SAFE_PARSE_MATCHER,
    STRICT_MATCHER,
)
from shapespec.shape.nodes import classify


LOGGER = logging.getLogger(__name__)



class SampleShape(object):

    """
    A classified *sample shape* (schema) ready to clean data with.

    The schema is classified once, on instance initialization (so a
    :exc:`~shapespec.exceptions.SchemaError` is raised early if it
    contains anything not JSON-representable); then the instance can
    be used to clean any number of data values (also concurrently --
    it holds no mutable state).

    >>> shape = SampleShape({'name': 'string', 'age': 0, 'middle': None})
    >>> shape.clean({'name': 'Jane', 'age': '30', 'extra': 1})
    {'name': 'Jane', 'age': 30}
    >>> shape.clean({'name': 'Jane'})    # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    RequiredFieldMissingError: Field 'age' expected required field
    >>> shape.clean_safely({'name': 'Jane'})
    {}
    """

    def __init__(self, raw_schema):
        self.root = classify(raw_schema)

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__qualname__, self.root.tag)


    #
    # public methods

    def clean(self, data):
        """
        Validate and normalize `data` in the *strict* mode.

        Returns:
            A new, normalized value (never the given object itself).

        Raises:
            :exc:`~shapespec.exceptions.ShapeMismatchError` (more
            precisely: an instance of one of its subclasses) for the
            first mismatch encountered (in the schema order).
        """
        outcome = STRICT_MATCHER.match(self.root, data)
        if isinstance(outcome, Fail):
            raise outcome.error
        return outcome.value

    def clean_safely(self, data):
        """
        Validate and normalize `data` in the *safe-parse* mode.

        Never raises data-related exceptions: an object containing a
        failing field collapses to ``{}``, a failing object element of
        an array is dropped, and if even the top-level value cannot be
        cleaned, an empty container of the schema's kind (``{}`` or
        ``[]``; :obj:`None` for a scalar schema) is returned.
        """
        outcome = SAFE_PARSE_MATCHER.match(self.root, data)
        if isinstance(outcome, Fail):
            LOGGER.debug('Top-level value discarded (%s)',
                         ascii_str(outcome.error.public_message))
            return self.root.empty_container
        return outcome.value


def validate_schema(schema, data, safe_parse=False):

    """
    Validate and normalize `data` against the *sample shape* `schema`.

    Args:
        `schema`:
            A JSON-decoded value acting as the structural template.
        `data`:
            A JSON-decoded value to be validated/normalized.
        `safe_parse` (default: :obj:`False`):
            Select the *safe-parse* (best effort) mode instead of the
            *strict* one.

    Returns:
        The normalized data -- or, if strict validation failed, the
        error envelope: ``{"error": {"code": 959, "text": <message>}}``.

    Raises:
        :exc:`~shapespec.exceptions.SchemaError` if `schema` is not
        JSON-representable.

    >>> schema = {'name': 'string', 'age': 0, 'isStudent': False}
    >>> validate_schema(schema, {'name': 'Timmy', 'isStudent': 'true'})
    {'error': {'code': 959, 'text': "Field 'age' expected required field"}}
    >>> validate_schema(schema, {'name': 'Timmy', 'isStudent': 'true'},
    ...                 safe_parse=True)
    {}
    >>> validate_schema(schema, {'name': 'Jane Doe', 'age': '30', 'isStudent': 1})
    {'name': 'Jane Doe', 'age': 30, 'isStudent': True}
    """

    shape = SampleShape(schema)
    if safe_parse:
        return shape.clean_safely(data)
    try:
        return shape.clean(data)
    except ShapeMismatchError as exc:
        LOGGER.debug('Strict validation failed: %r', exc)
        return exc.as_envelope()
