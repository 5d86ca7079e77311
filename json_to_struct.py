#!/usr/bin/env python3

import argparse
import json
import os
import sys
from dotenv import load_dotenv

from languages import DEFAULT_LANGUAGE, UnsupportedLanguageError, get_language_formatter, supported_languages
from type_inference import generate_types, root_first


def _env_flag(name):
    """Returns True when an environment variable is set to a truthy value."""
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def load_json(source):
    """Parse JSON from a file path, or from stdin when source is None or '-'."""
    if source is None or source == '-':
        return json.load(sys.stdin)
    with open(source, 'r', encoding='utf-8') as f:
        return json.load(f)


def format_output(structs):
    """Join type definitions with one blank line between them."""
    return '\n\n'.join(structs)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='json-to-struct',
        description="Generate struct/class definitions from an example JSON document.",
        epilog="Pipe JSON in (some_command | json-to-struct) or pass a FILE.",
    )
    parser.add_argument("file", nargs='?', help="Path to the input JSON file (reads stdin if omitted or '-').")
    parser.add_argument("-l", "--language", help="Output programming language (default is from .env file or 'go').")
    parser.add_argument("--list-languages", action="store_true", help="List the supported languages and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output on stderr")
    return parser.parse_args(argv)


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)
    verbose = args.verbose or _env_flag('JSON2STRUCT_VERBOSE')

    if args.list_languages:
        for language in supported_languages():
            print(language)
        return 0

    language = args.language or os.getenv('JSON2STRUCT_LANGUAGE') or DEFAULT_LANGUAGE
    try:
        formatter = get_language_formatter(language)
    except UnsupportedLanguageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    source = args.file if args.file else '-'
    if verbose:
        print(f"Reading JSON from {'stdin' if source == '-' else source}...", file=sys.stderr)
        print(f"Language: {formatter.name}", file=sys.stderr)

    try:
        value = load_json(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f"Error: Invalid JSON in '{source}': {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print(f"Error: JSON in '{source}' is nested too deeply", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading '{source}': {e}", file=sys.stderr)
        return 1

    try:
        structs = generate_types(value, formatter)
    except RecursionError:
        print(f"Error: JSON in '{source}' is nested too deeply", file=sys.stderr)
        return 1

    if verbose:
        print(f"Generated {len(structs)} type definition(s)", file=sys.stderr)

    if structs:
        print(format_output(root_first(structs)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
