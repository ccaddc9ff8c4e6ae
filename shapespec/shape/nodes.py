# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
Classification of *sample shape* (schema) literals.

A *sample shape* is an example value: the type of each literal in it
defines the type expected at the corresponding place of the data.
:func:`classify` turns such a raw value into a tree of :class:`ShapeNode`
objects.
"""


import collections

from shapespec.class_helpers import (
    is_mapping,
    is_number,
    is_seq,
)
from shapespec.encoding_helpers import ascii_str
from shapespec.exceptions import SchemaError



#
# Shape tags

STRING = 'string'
NUMBER = 'number'
BOOLEAN = 'boolean'
OPTIONAL = 'optional'
OBJECT = 'object'
ARRAY = 'array'

SCALAR_TAGS = (STRING, NUMBER, BOOLEAN)
CONTAINER_TAGS = (OBJECT, ARRAY)
SHAPE_TAGS = SCALAR_TAGS + (OPTIONAL,) + CONTAINER_TAGS



#
# Markers

class _Marker(object):

    def __init__(self, name):
        self._name = name

    def __repr__(self):
        return self._name


#: Stands for a key that is absent from the data.
MISSING = _Marker('MISSING')



#
# Nodes

class ShapeNode(collections.namedtuple('ShapeNode', 'tag, children')):

    """
    A classified schema node.

    * `tag` -- one of the :data:`SHAPE_TAGS`;
    * `children` -- for :data:`OBJECT`: a :class:`dict` that maps keys
      to :class:`ShapeNode` objects (in the schema declaration order);
      for :data:`ARRAY`: the *element template* (a :class:`ShapeNode`)
      or :obj:`None` if the schema array was empty; otherwise
      :obj:`None`.

    >>> ShapeNode(STRING)
    ShapeNode(tag='string', children=None)
    >>> ShapeNode('foo')      # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    ValueError: ...
    """

    __slots__ = ()

    def __new__(cls, tag, children=None):
        if tag not in SHAPE_TAGS:
            raise ValueError('{!a} is not one of: {}'.format(
                tag, ', '.join(SHAPE_TAGS)))
        return super(ShapeNode, cls).__new__(cls, tag, children)

    @property
    def empty_container(self):
        """
        A new empty container of the node's kind (or :obj:`None` for
        non-container nodes).

        >>> ShapeNode(OBJECT, {}).empty_container
        {}
        >>> ShapeNode(ARRAY).empty_container
        []
        >>> ShapeNode(NUMBER).empty_container is None
        True
        """
        if self.tag == OBJECT:
            return {}
        if self.tag == ARRAY:
            return []
        return None


def classify(raw_schema):

    """
    Classify a raw schema value (recursively).

    >>> classify('some text')
    ShapeNode(tag='string', children=None)
    >>> classify(0)
    ShapeNode(tag='number', children=None)
    >>> classify(1.5).tag
    'number'
    >>> classify(False).tag       # (bool is checked before numbers)
    'boolean'
    >>> classify(None).tag
    'optional'

    Objects keep the declaration order of keys:

    >>> node = classify({'name': 'string', 'age': 0, 'middle': None})
    >>> node.tag
    'object'
    >>> list(node.children)
    ['name', 'age', 'middle']
    >>> node.children['age']
    ShapeNode(tag='number', children=None)

    Only the first element of an array is used as the *element template*:

    >>> classify([{'sku': 'string'}, 42]).children.children['sku'].tag
    'string'
    >>> classify([]) == ShapeNode(ARRAY, None)
    True

    Non-JSON-representable objects are rejected:

    >>> classify({'when': object()})      # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    SchemaError: ...
    """

    if raw_schema is None:
        return ShapeNode(OPTIONAL)
    if isinstance(raw_schema, bool):
        return ShapeNode(BOOLEAN)
    if is_number(raw_schema):
        return ShapeNode(NUMBER)
    if isinstance(raw_schema, str):
        return ShapeNode(STRING)
    if is_mapping(raw_schema):
        children = {}
        for key, raw_subschema in raw_schema.items():
            if not isinstance(key, str):
                raise SchemaError(public_message=(
                    'Schema object key {!a} is not a string.'.format(key)))
            children[key] = classify(raw_subschema)
        return ShapeNode(OBJECT, children)
    if is_seq(raw_schema):
        element_template = (
            classify(raw_schema[0]) if raw_schema
            else None)
        return ShapeNode(ARRAY, element_template)
    raise SchemaError(public_message=(
        'Schema value "{}" (of type {}) is not '
        'JSON-representable.'.format(ascii_str(raw_schema),
                                     type(raw_schema).__qualname__)))
