# Copyright (c) 2013-2025 NASK. All rights reserved.

import collections
import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from shapespec.exceptions import SchemaError
from shapespec.shape.nodes import (
    ARRAY,
    BOOLEAN,
    NUMBER,
    OBJECT,
    OPTIONAL,
    STRING,
    ShapeNode,
    classify,
)
from shapespec.tests._generic_helpers import TestCaseMixin


@expand
class Test_classify(TestCaseMixin, unittest.TestCase):

    @foreach(
        param('string', STRING),
        param('', STRING),
        param(0, NUMBER),
        param(-3, NUMBER),
        param(2.5, NUMBER),
        param(False, BOOLEAN),
        param(True, BOOLEAN),
        param(None, OPTIONAL),
    )
    def test_literals(self, raw_schema, expected_tag):
        node = classify(raw_schema)
        self.assertEqual(node, ShapeNode(expected_tag))
        self.assertIsNone(node.children)

    def test_object(self):
        node = classify({'name': 'string', 'age': 0, 'middle': None})
        self.assertEqual(node.tag, OBJECT)
        self.assertEqual(list(node.children), ['name', 'age', 'middle'])
        self.assertEqual(node.children['name'], ShapeNode(STRING))
        self.assertEqual(node.children['age'], ShapeNode(NUMBER))
        self.assertEqual(node.children['middle'], ShapeNode(OPTIONAL))

    def test_object_keeps_declaration_order(self):
        raw_schema = collections.OrderedDict([('z', 0), ('a', 0), ('m', 0)])
        node = classify(raw_schema)
        self.assertEqual(list(node.children), ['z', 'a', 'm'])

    def test_empty_object(self):
        self.assertEqual(classify({}), ShapeNode(OBJECT, {}))

    def test_nested_object(self):
        node = classify({'address': {'city': 'string', 'zip': 0}})
        address = node.children['address']
        self.assertEqual(address.tag, OBJECT)
        self.assertEqual(address.children, {
            'city': ShapeNode(STRING),
            'zip': ShapeNode(NUMBER),
        })

    def test_array_uses_first_element_only(self):
        node = classify([{'sku': 'string'}, 'ignored', 42])
        self.assertEqual(node.tag, ARRAY)
        self.assertEqual(node.children, ShapeNode(OBJECT, {'sku': ShapeNode(STRING)}))

    def test_array_of_arrays(self):
        node = classify([[0]])
        self.assertEqual(node, ShapeNode(ARRAY, ShapeNode(ARRAY, ShapeNode(NUMBER))))

    def test_tuple_is_an_array(self):
        self.assertEqual(classify(('string',)), ShapeNode(ARRAY, ShapeNode(STRING)))

    def test_empty_array(self):
        node = classify([])
        self.assertEqual(node.tag, ARRAY)
        self.assertIsNone(node.children)

    @foreach(
        param(object()),
        param(b'bytes'),
        param({1, 2}),
        param({'a': {'b': [object()]}}),
        param({42: 'string'}),
    )
    def test_not_json_representable(self, raw_schema):
        with self.assertRaises(SchemaError) as cm:
            classify(raw_schema)
        self.assertIsInstance(cm.exception, TypeError)

    def test_does_not_modify_given_schema(self):
        raw_schema = {'a': [{'b': None}], 'c': 'string'}
        classify(raw_schema)
        self.assertEqual(raw_schema, {'a': [{'b': None}], 'c': 'string'})


class TestShapeNode(unittest.TestCase):

    def test_illegal_tag(self):
        with self.assertRaises(ValueError):
            ShapeNode('integer')

    def test_empty_container(self):
        self.assertEqual(ShapeNode(OBJECT, {}).empty_container, {})
        self.assertEqual(ShapeNode(ARRAY).empty_container, [])
        self.assertIsNone(ShapeNode(STRING).empty_container)
        self.assertIsNone(ShapeNode(OPTIONAL).empty_container)

    def test_empty_container_is_new_each_time(self):
        node = ShapeNode(OBJECT, {})
        self.assertIsNot(node.empty_container, node.empty_container)
