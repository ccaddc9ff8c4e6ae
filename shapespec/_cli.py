#!/usr/bin/env python

# Copyright (c) 2015-2025 NASK. All rights reserved.

"""
This tool is a part of *shapespec*.  It validates/normalizes a JSON
document against a *sample shape* read from another JSON document, and
prints the result (or the error envelope) to the standard output.
"""

import argparse
import configparser
import json
import logging
import sys

from shapespec.exceptions import ShapeMismatchError
from shapespec.shape import SampleShape


LOGGER = logging.getLogger(__name__)


CONFIG_SECTION = 'shapespec'

CONFIG_BASE = '''\
[shapespec]

# use the safe-parse (best effort) mode by default?
safe_parse = false

# indentation of the printed JSON (0 means: compact, single-line output)
indent = 2

# one of: DEBUG, INFO, WARNING, ERROR
log_level = WARNING
'''

CONFIG_DEFAULTS = {
    'safe_parse': 'false',
    'indent': '2',
    'log_level': 'WARNING',
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2


def iter_config_base_lines():
    yield from CONFIG_BASE.splitlines()


def get_config(path=None):
    config = configparser.ConfigParser(defaults=CONFIG_DEFAULTS)
    if path is not None:
        with open(path, encoding='utf-8') as f:
            config.read_file(f)
    if not config.has_section(CONFIG_SECTION):
        config.add_section(CONFIG_SECTION)
    section = config[CONFIG_SECTION]
    log_level = section.get('log_level').upper()
    if log_level not in LOG_LEVELS:
        raise ValueError('log_level {!a} is not one of: {}'.format(
            log_level, ', '.join(LOG_LEVELS)))
    return {
        'safe_parse': section.getboolean('safe_parse'),
        'indent': section.getint('indent'),
        'log_level': log_level,
    }


def load_json(path, stdin=None):
    if path == '-':
        return json.load(stdin if stdin is not None else sys.stdin)
    with open(path, encoding='utf-8') as f:
        return json.load(f)


def dump_json(obj, indent):
    return json.dumps(obj, indent=(indent or None), ensure_ascii=False)


def make_arg_parser():
    parser = argparse.ArgumentParser(
        description=(
            'Validate and normalize a JSON document '
            'against a sample shape (schema).'))
    excl_args = parser.add_mutually_exclusive_group(required=True)
    excl_args.add_argument(
        '--generate-config',
        action='store_true',
        help='generate the config file template, then exit')
    excl_args.add_argument(
        '-s', '--schema',
        help='the JSON file containing the sample shape')
    parser.add_argument(
        '-d', '--data',
        default='-',
        help='the JSON file containing the data ("-" means: '
             'the standard input; this is the default)')
    parser.add_argument(
        '-c', '--config',
        help='the config file (see: --generate-config)')
    mode_args = parser.add_mutually_exclusive_group()
    mode_args.add_argument(
        '--safe-parse',
        dest='safe_parse',
        action='store_true',
        default=None,
        help='use the safe-parse (best effort) mode instead of the strict one')
    mode_args.add_argument(
        '--strict',
        dest='safe_parse',
        action='store_false',
        default=None,
        help='use the strict mode (even if the config says otherwise)')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='be more descriptive')
    return parser


def main(argv=None, stdin=None, stdout=None):
    if stdout is None:
        stdout = sys.stdout
    parser = make_arg_parser()
    args = parser.parse_args(argv)

    if args.generate_config:
        for line in iter_config_base_lines():
            print(line, file=stdout)
        return EXIT_OK

    try:
        config = get_config(args.config)
    except (OSError, configparser.Error, ValueError) as exc:
        print('Cannot load the config: {}'.format(exc), file=sys.stderr)
        return EXIT_BAD_INPUT

    logging.basicConfig(
        level=(logging.DEBUG if args.verbose else config['log_level']),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    safe_parse = (args.safe_parse if args.safe_parse is not None
                  else config['safe_parse'])

    try:
        schema = load_json(args.schema)
        data = load_json(args.data, stdin)
        shape = SampleShape(schema)
    except (OSError, ValueError, TypeError) as exc:
        LOGGER.error('Cannot load the input: %s', exc)
        return EXIT_BAD_INPUT

    LOGGER.info('Cleaning %s with %r (safe-parse: %s)',
                args.data, shape, safe_parse)
    exit_status = EXIT_OK
    if safe_parse:
        result = shape.clean_safely(data)
    else:
        try:
            result = shape.clean(data)
        except ShapeMismatchError as exc:
            LOGGER.info('Strict validation failed: %s', exc)
            result = exc.as_envelope()
            exit_status = EXIT_MISMATCH
    print(dump_json(result, config['indent']), file=stdout)
    return exit_status


if __name__ == '__main__':
    sys.exit(main())
