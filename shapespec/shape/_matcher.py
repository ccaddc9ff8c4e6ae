# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections
import copy
import logging

from shapespec.class_helpers import (
    is_mapping,
    is_seq,
)
from shapespec.encoding_helpers import format_path
from shapespec.exceptions import (
    RequiredFieldMissingError,
    TypeMismatchError,
)
from shapespec.shape.coercers import TAG_TO_COERCER
from shapespec.shape.nodes import (
    ARRAY,
    MISSING,
    OBJECT,
    OPTIONAL,
    SCALAR_TAGS,
    _Marker,
)


LOGGER = logging.getLogger(__name__)



#
# Outcomes

class Ok(collections.namedtuple('Ok', 'value')):
    """Successful outcome: carries the normalized value."""
    __slots__ = ()


class Fail(collections.namedtuple('Fail', 'error')):
    """Failed outcome: carries a ShapeMismatchError instance."""
    __slots__ = ()


#: The outcome for an optional key absent from the data (the key is
#: to be omitted in the output; it is *not* a failure).
OMIT = _Marker('OMIT')



#
# Recovery policies

class StrictPolicy(object):

    """
    No recovery: every failure propagates up to the top.
    """

    def recover_object(self, path, fail):
        return fail

    def recover_element(self, template, path, fail):
        return fail


class SafeParsePolicy(StrictPolicy):

    """
    Best-effort recovery:

    * an object whose construction encountered a failing field is
      replaced with an empty object;
    * an array element whose template is an object is dropped if it
      fails (other element failures still fail the whole array).
    """

    def recover_object(self, path, fail):
        LOGGER.debug('Discarding object %s (%s)',
                     format_path(path), fail.error.public_message)
        return Ok({})

    def recover_element(self, template, path, fail):
        if template.tag == OBJECT:
            LOGGER.debug('Dropping array element %s (%s)',
                         format_path(path), fail.error.public_message)
            return OMIT
        return fail



#
# The matcher

class ShapeMatcher(object):

    """
    Walks a classified schema and data in lock-step.

    The :meth:`match` method never raises data-related exceptions;
    instead, it returns an :class:`Ok`, a :class:`Fail` or the
    :data:`OMIT` marker.  How failures are handled at object/array
    boundaries is decided by the `policy` (see: :class:`StrictPolicy`
    and :class:`SafeParsePolicy`).
    """

    def __init__(self, policy):
        self.policy = policy

    def match(self, node, value, path=(), recover=True):
        """
        Args:
            `node`:
                A :class:`~shapespec.shape.nodes.ShapeNode`.
            `value`:
                The corresponding data value or
                :data:`~shapespec.shape.nodes.MISSING`.
            `path` (default: empty tuple):
                A tuple of key/index segments leading to `value`.
            `recover` (default: :obj:`True`):
                Whether the policy's object recovery may be applied to
                this very node (it is not when the node is the template
                of an array element -- then the element recovery is
                applied by the array).

        Returns:
            :class:`Ok`, :class:`Fail` or :data:`OMIT`.
        """
        tag = node.tag
        if tag == OPTIONAL:
            return self._match_optional(value)
        elif tag in SCALAR_TAGS:
            return self._match_scalar(node, value, path)
        elif tag == OBJECT:
            return self._match_object(node, value, path, recover)
        elif tag == ARRAY:
            return self._match_array(node, value, path)
        raise ValueError('unknown shape tag: {!a}'.format(tag))

    def _match_optional(self, value):
        if value is MISSING:
            return OMIT
        return Ok(copy.deepcopy(value))

    def _match_scalar(self, node, value, path):
        if value is MISSING:
            return self._missing(path)
        coerce = TAG_TO_COERCER[node.tag]
        try:
            return Ok(coerce(value))
        except (TypeError, ValueError):
            return self._mismatch(node, value, path)

    def _match_object(self, node, value, path, recover):
        if value is MISSING:
            return self._missing(path)
        if not is_mapping(value):
            return self._mismatch(node, value, path)
        result = {}
        for key, subnode in node.children.items():
            outcome = self.match(subnode, value.get(key, MISSING), path + (key,))
            if outcome is OMIT:
                continue
            if isinstance(outcome, Fail):
                if recover:
                    return self.policy.recover_object(path, outcome)
                return outcome
            result[key] = outcome.value
        return Ok(result)

    def _match_array(self, node, value, path):
        if value is MISSING:
            return self._missing(path)
        if not is_seq(value):
            return self._mismatch(node, value, path)
        template = node.children
        if template is None:
            return Ok(copy.deepcopy(list(value)))
        result = []
        for index, element in enumerate(value):
            element_path = path + (index,)
            outcome = self.match(template, element, element_path, recover=False)
            if isinstance(outcome, Fail):
                outcome = self.policy.recover_element(template, element_path, outcome)
                if outcome is OMIT:
                    continue
                if isinstance(outcome, Fail):
                    return outcome
            result.append(outcome.value)
        return Ok(result)

    @staticmethod
    def _missing(path):
        return Fail(RequiredFieldMissingError(path=path))

    @staticmethod
    def _mismatch(node, value, path):
        return Fail(TypeMismatchError(path=path,
                                      expected=node.tag,
                                      checked_value=value))


STRICT_MATCHER = ShapeMatcher(StrictPolicy())
SAFE_PARSE_MATCHER = ShapeMatcher(SafeParsePolicy())
