# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for makernotes

Describes makernote tag values that were decoded elsewhere. Values come
either from JSON dump files:

    {"vendor": "apple", "tags": {"0x000a": 3, "0x000b": "A1B2"}}

or from TAG=VALUE assignments for a single vendor:

    makernotes -vendor apple 0x000a=3

Byte values are written in JSON as {"hex": "01ff"} and rationals as
{"rational": [1, 250]}. On the command line a value may be an integer
(decimal or 0x hex), a float, a rational "n/d", a comma-separated list of
those, or any other text.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from makernotes import __version__
from makernotes.config import get_config, load_config, set_config
from makernotes.directory import Directory
from makernotes.exceptions import InvalidTagError, MakernoteError
from makernotes.rational import Rational
from makernotes.registry import create_directory, get_directory_class, load_vendor_module
from makernotes.report import describe_directory, format_report
from makernotes.tag_lister import TagLister

logger = logging.getLogger('makernotes')

_RATIONAL_PATTERN = re.compile(r'^(-?\d+)/(-?\d+)$')
_handler: Optional[logging.Handler] = None


def setup_logger(verbose: int = 0, quiet: bool = False) -> None:
    """
    Configure the package logger for command-line use.

    Args:
        verbose: 0 for warnings, 1 for progress messages, 2+ for debug output
        quiet: Only report errors
    """
    global _handler
    if quiet:
        log_level = logging.ERROR
        log_format = '%(message)s'
    elif verbose and verbose >= 2:
        log_level = logging.DEBUG
        log_format = '%(levelname)-5s  %(name)s: %(message)s'
    elif verbose:
        log_level = logging.INFO
        log_format = '%(message)s'
    else:
        log_level = logging.WARNING
        log_format = '%(message)s'

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(log_format))
    _handler.setLevel(log_level)
    logger.setLevel(log_level)
    logger.addHandler(_handler)


def parse_tag_id(text: str) -> int:
    """
    Parse a decimal or 0x-prefixed hexadecimal tag id.

    Raises:
        InvalidTagError: If the id is malformed or negative
    """
    text = text.strip()
    try:
        if text.lower().startswith('0x'):
            tag_id = int(text, 16)
        else:
            tag_id = int(text, 10)
    except ValueError:
        raise InvalidTagError(f"Invalid tag id '{text}'")
    if tag_id < 0:
        raise InvalidTagError(f"Tag id must not be negative: '{text}'")
    return tag_id


def parse_value(text: str) -> Any:
    """
    Convert command-line text to a tag value.

    Tries, in order: integer (decimal or 0x hex), float, rational "n/d",
    comma-separated list of those; anything else is kept as a string.
    """
    stripped = text.strip()
    try:
        return int(stripped, 0)
    except ValueError:
        pass
    try:
        return int(stripped, 10)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        pass
    match = _RATIONAL_PATTERN.match(stripped)
    if match:
        return Rational(int(match.group(1)), int(match.group(2)))
    if ',' in stripped:
        items = [parse_value(part) for part in stripped.split(',')]
        if not any(isinstance(item, str) for item in items):
            return items
    return text


def parse_tag_assignments(args: List[str]) -> Dict[int, Any]:
    """
    Parse TAG=VALUE arguments.

    Args:
        args: Assignment strings; a leading dash is ignored

    Returns:
        Dictionary of tag id to value, in argument order

    Raises:
        InvalidTagError: If an argument has no '=' or a bad tag id
    """
    tags = {}
    for arg in args:
        if '=' not in arg:
            raise InvalidTagError(f"Expected TAG=VALUE, got '{arg}'")
        key, value = arg.lstrip('-').split('=', 1)
        tags[parse_tag_id(key)] = parse_value(value)
    return tags


def convert_json_value(value: Any) -> Any:
    """
    Convert a JSON tag value to a stored value.

    Raises:
        InvalidTagError: For null values and unsupported objects
    """
    if value is None:
        raise InvalidTagError("Tag values must not be null")
    if isinstance(value, list):
        return [convert_json_value(item) for item in value]
    if isinstance(value, dict):
        if 'hex' in value:
            try:
                return bytes.fromhex(str(value['hex']))
            except ValueError:
                raise InvalidTagError(f"Invalid hex byte string: {value['hex']!r}")
        if 'rational' in value:
            pair = value['rational']
            if not (isinstance(pair, list) and len(pair) == 2 and all(isinstance(n, int) for n in pair)):
                raise InvalidTagError(f"Rational must be [numerator, denominator]: {pair!r}")
            return Rational(pair[0], pair[1])
        raise InvalidTagError(f"Unsupported value object: {value!r}")
    return value


def directory_from_json(entry: Any) -> Directory:
    """
    Build a directory from one JSON dump entry.

    Raises:
        MakernoteError: If the entry is malformed or names an unknown vendor
    """
    if not isinstance(entry, dict) or 'vendor' not in entry:
        raise InvalidTagError("Each dump entry must be an object with a 'vendor' key")
    directory = create_directory(str(entry['vendor']))
    tags = entry.get('tags', {})
    if not isinstance(tags, dict):
        raise InvalidTagError("'tags' must be an object mapping tag id to value")
    for key, value in tags.items():
        directory.set(parse_tag_id(key), convert_json_value(value))
    for message in entry.get('errors', []):
        directory.add_error(str(message))
    return directory


def load_dump(path: Path) -> List[Directory]:
    """
    Read a JSON dump holding one entry or a list of entries.

    Raises:
        MakernoteError: If the file cannot be read or parsed
    """
    logger.info("Reading %s", path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except OSError as e:
        raise MakernoteError(f"Cannot read {path}: {e}")
    except ValueError as e:
        raise MakernoteError(f"Invalid JSON in {path}: {e}")

    entries = document if isinstance(document, list) else [document]
    return [directory_from_json(entry) for entry in entries]


def list_output(vendor: str) -> str:
    """Output for ``-list``: all vendors, or one vendor's tag table."""
    if not vendor:
        lines = []
        for vendor_id in TagLister.list_vendors():
            lines.append(f"{vendor_id}: {get_directory_class(vendor_id).SCHEMA.directory_name}")
        return "\n".join(lines)
    described = set(TagLister.list_described_tags(vendor))
    lines = []
    for tag_id, name in TagLister.list_tags(vendor):
        marker = '*' if tag_id in described else ' '
        lines.append(f"0x{tag_id:04x} {marker} {name}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='makernotes',
        description='Describe decoded camera makernote tag values',
    )
    parser.add_argument('inputs', nargs='*', help='JSON dump file(s), or TAG=VALUE assignments with -vendor')
    parser.add_argument('-list', type=str, nargs='?', const='', metavar='VENDOR',
                        help='List vendors, or the tags of VENDOR (* marks interpreted tags)')
    parser.add_argument('-vendor', type=str, help='Vendor of the TAG=VALUE assignments')
    parser.add_argument('-j', '--json', action='store_true', help='Output in JSON format')
    parser.add_argument('-csv', action='store_true', help='Output in CSV format')
    parser.add_argument('-H', '--hex', action='store_true', help='Show tag ID numbers in hexadecimal')
    parser.add_argument('-config', type=str, metavar='FILE', help='Load formatting options from FILE')
    parser.add_argument('-use', type=str, action='append', metavar='MODULE',
                        help='Load a module registering additional vendors')
    parser.add_argument('-q', '--quiet', action='store_true', help='Quiet mode')
    parser.add_argument('-v', '--verbose', type=int, nargs='?', const=1, default=0,
                        help='Verbose output (1-2 levels)')
    parser.add_argument('-V', '--version', action='store_true', help='Print version number')
    return parser


def _run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.config:
        set_config(load_config(args.config))
    for module_name in args.use or []:
        load_vendor_module(module_name)
        logger.info("Loaded vendor module: %s", module_name)

    if args.list is not None:
        print(list_output(args.list))
        return 0

    if args.vendor:
        directory = create_directory(args.vendor)
        for tag_id, value in parse_tag_assignments(args.inputs).items():
            directory.set(tag_id, value)
        directories = [directory]
    elif args.inputs:
        directories = []
        for name in args.inputs:
            directories.extend(load_dump(Path(name)))
    else:
        parser.print_usage(sys.stderr)
        print("Error: no input given", file=sys.stderr)
        return 1

    reports = []
    for directory in directories:
        for message in directory.errors:
            logger.warning("%s: %s", directory.name, message)
        reports.extend(describe_directory(directory))

    if args.json:
        format_type = 'json'
    elif args.csv:
        format_type = 'csv'
    else:
        format_type = 'text'
    output = format_report(reports, format_type, show_ids=args.hex)
    if output:
        print(output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Returns:
        Exit status: 0 on success, 1 on any input error
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.verbose, args.quiet)

    if args.version:
        print(f"makernotes {__version__}")
        return 0

    previous_config = get_config()
    try:
        return _run(args, parser)
    except MakernoteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        set_config(previous_config)


if __name__ == "__main__":
    sys.exit(main())
