# Copyright (c) 2015-2025 NASK. All rights reserved.

import io
import json
import os.path
import tempfile
import unittest
from unittest.mock import patch

from unittest_expander import (
    expand,
    foreach,
    param,
)

from shapespec._cli import (
    EXIT_BAD_INPUT,
    EXIT_MISMATCH,
    EXIT_OK,
    get_config,
    iter_config_base_lines,
    main,
)


STUDENT_SCHEMA = {'name': 'string', 'age': 0, 'isStudent': False}


class _CLITestBase(unittest.TestCase):

    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp_dir.cleanup)
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        patcher = patch('sys.stderr', self.stderr)
        patcher.start()
        self.addCleanup(patcher.stop)

    def write_file(self, name, content):
        path = os.path.join(self._tmp_dir.name, name)
        if not isinstance(content, str):
            content = json.dumps(content)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def run_main(self, *argv, stdin_content=None):
        stdin = io.StringIO(stdin_content) if stdin_content is not None else None
        return main(list(argv), stdin=stdin, stdout=self.stdout)

    def get_output_json(self):
        return json.loads(self.stdout.getvalue())


@expand
class Test_main(_CLITestBase):

    def test_ok_with_data_file(self):
        schema_path = self.write_file('schema.json', STUDENT_SCHEMA)
        data_path = self.write_file('data.json', {
            'name': 'John Doe',
            'age': 30,
            'isStudent': False,
            'extraField': 'should be removed',
        })
        exit_status = self.run_main('-s', schema_path, '-d', data_path)
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.get_output_json(), {
            'name': 'John Doe',
            'age': 30,
            'isStudent': False,
        })

    def test_ok_with_data_from_stdin(self):
        schema_path = self.write_file('schema.json', STUDENT_SCHEMA)
        exit_status = self.run_main(
            '--schema', schema_path,
            stdin_content='{"name": "Jane Doe", "age": "30", "isStudent": 1}')
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.get_output_json(), {
            'name': 'Jane Doe',
            'age': 30,
            'isStudent': True,
        })

    def test_strict_failure(self):
        schema_path = self.write_file('schema.json', STUDENT_SCHEMA)
        exit_status = self.run_main(
            '-s', schema_path, '-d', '-',
            stdin_content='{"name": "Timmy", "isStudent": "true"}')
        self.assertEqual(exit_status, EXIT_MISMATCH)
        self.assertEqual(self.get_output_json(), {
            'error': {
                'code': 959,
                'text': "Field 'age' expected required field",
            },
        })

    def test_safe_parse_flag(self):
        schema_path = self.write_file('schema.json', STUDENT_SCHEMA)
        exit_status = self.run_main(
            '-s', schema_path, '--safe-parse',
            stdin_content='{"name": "Timmy", "isStudent": "true"}')
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.get_output_json(), {})

    def test_safe_parse_from_config(self):
        schema_path = self.write_file('schema.json', STUDENT_SCHEMA)
        config_path = self.write_file('shapespec.conf', (
            '[shapespec]\n'
            'safe_parse = yes\n'))
        exit_status = self.run_main(
            '-s', schema_path, '-c', config_path,
            stdin_content='{"name": "Timmy", "isStudent": "true"}')
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.get_output_json(), {})

    def test_strict_flag_overrides_config(self):
        schema_path = self.write_file('schema.json', STUDENT_SCHEMA)
        config_path = self.write_file('shapespec.conf', (
            '[shapespec]\n'
            'safe_parse = yes\n'))
        exit_status = self.run_main(
            '-s', schema_path, '-c', config_path, '--strict',
            stdin_content='{"name": "Timmy", "isStudent": "true"}')
        self.assertEqual(exit_status, EXIT_MISMATCH)
        self.assertEqual(self.get_output_json(), {
            'error': {
                'code': 959,
                'text': "Field 'age' expected required field",
            },
        })

    def test_safe_parse_and_strict_exclusive(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main('-s', 'schema.json', '--safe-parse', '--strict')
        self.assertEqual(cm.exception.code, 2)

    def test_compact_output_from_config(self):
        schema_path = self.write_file('schema.json', {'a': 0, 'b': 'string'})
        config_path = self.write_file('shapespec.conf', (
            '[shapespec]\n'
            'indent = 0\n'))
        exit_status = self.run_main(
            '-s', schema_path, '-c', config_path,
            stdin_content='{"b": "\\u017c", "a": "1"}')
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), '{"a": 1, "b": "ż"}\n')

    def test_indented_output_by_default(self):
        schema_path = self.write_file('schema.json', {'a': 0})
        exit_status = self.run_main('-s', schema_path, stdin_content='{"a": 1}')
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue(), '{\n  "a": 1\n}\n')

    @foreach(
        param(schema_content='{"a": ', data_content='{}').label('schema not JSON'),
        param(schema_content='{"a": 0}', data_content='{"a": ').label('data not JSON'),
        param(schema_content='{"a": 0}', data_content='').label('data empty'),
    )
    def test_bad_input(self, schema_content, data_content):
        schema_path = self.write_file('schema.json', schema_content)
        exit_status = self.run_main('-s', schema_path, stdin_content=data_content)
        self.assertEqual(exit_status, EXIT_BAD_INPUT)
        self.assertEqual(self.stdout.getvalue(), '')

    def test_schema_file_not_found(self):
        exit_status = self.run_main(
            '-s', os.path.join(self._tmp_dir.name, 'no-such-file.json'),
            stdin_content='{}')
        self.assertEqual(exit_status, EXIT_BAD_INPUT)
        self.assertEqual(self.stdout.getvalue(), '')

    def test_config_file_not_found(self):
        schema_path = self.write_file('schema.json', {})
        exit_status = self.run_main(
            '-s', schema_path,
            '-c', os.path.join(self._tmp_dir.name, 'no-such-file.conf'),
            stdin_content='{}')
        self.assertEqual(exit_status, EXIT_BAD_INPUT)
        self.assertIn('Cannot load the config', self.stderr.getvalue())

    def test_config_with_bad_log_level(self):
        schema_path = self.write_file('schema.json', {})
        config_path = self.write_file('shapespec.conf', (
            '[shapespec]\n'
            'log_level = LOUD\n'))
        exit_status = self.run_main(
            '-s', schema_path, '-c', config_path,
            stdin_content='{}')
        self.assertEqual(exit_status, EXIT_BAD_INPUT)
        self.assertIn('log_level', self.stderr.getvalue())

    def test_generate_config(self):
        exit_status = self.run_main('--generate-config')
        self.assertEqual(exit_status, EXIT_OK)
        self.assertEqual(self.stdout.getvalue().splitlines(),
                         list(iter_config_base_lines()))

    def test_schema_or_generate_config_required(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main('-d', '-')
        self.assertEqual(cm.exception.code, 2)

    def test_schema_and_generate_config_exclusive(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main('--generate-config', '-s', 'schema.json')
        self.assertEqual(cm.exception.code, 2)


class Test_get_config(_CLITestBase):

    def test_defaults(self):
        self.assertEqual(get_config(), {
            'safe_parse': False,
            'indent': 2,
            'log_level': 'WARNING',
        })

    def test_generated_config_gives_defaults(self):
        path = self.write_file('shapespec.conf',
                               '\n'.join(iter_config_base_lines()))
        self.assertEqual(get_config(path), get_config())

    def test_given_values(self):
        path = self.write_file('shapespec.conf', (
            '[shapespec]\n'
            'safe_parse = true\n'
            'indent = 4\n'
            'log_level = debug\n'))
        self.assertEqual(get_config(path), {
            'safe_parse': True,
            'indent': 4,
            'log_level': 'DEBUG',
        })

    def test_other_section_only(self):
        path = self.write_file('shapespec.conf', (
            '[something_else]\n'
            'safe_parse = true\n'))
        self.assertEqual(get_config(path), get_config())

    def test_illegal_values(self):
        path = self.write_file('shapespec.conf', (
            '[shapespec]\n'
            'indent = many\n'))
        with self.assertRaises(ValueError):
            get_config(path)
