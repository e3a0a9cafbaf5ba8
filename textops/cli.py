#!/usr/bin/env python3
"""Command-line interface for TEXTOPS.

Usage:
    textops abbreviate "This is a long string" --lower 10 --upper 15 --suffix "..."
    textops initials "John A. Doe" --delimiters " ."
    textops swapcase "Hello World"
    echo "some long text" | textops wrap --width 20 --wrap-long-words
    textops --config ./textops.yaml wrap "text to wrap"
"""

import argparse
import logging
import re
import sys
from typing import Any, Dict, Optional, TextIO

import yaml

from config import get_config_value, load_config
from textops.abbreviator import abbreviate
from textops.case import swap_case
from textops.exceptions import TextOpsError
from textops.initials import initials
from textops.wrapper import wrap


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def setup_argparser() -> argparse.ArgumentParser:
    """Set up the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog='textops',
        description='Abbreviate, extract initials, swap case or wrap text.',
        epilog='Example: textops wrap "The quick brown fox" --width 10',
    )

    parser.add_argument(
        '--config',
        help='YAML file merged over the default configuration',
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output',
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    abbreviate_parser = subparsers.add_parser(
        'abbreviate',
        help='Abbreviate text at a word boundary',
    )
    abbreviate_parser.add_argument('text', nargs='?', help='Text (default: stdin)')
    abbreviate_parser.add_argument(
        '--lower', '-l',
        type=int,
        help='Position from which to look for a space',
    )
    abbreviate_parser.add_argument(
        '--upper', '-u',
        type=int,
        help='Maximum number of characters to keep, -1 for no limit',
    )
    abbreviate_parser.add_argument(
        '--suffix', '-s',
        help='String appended when the text is abbreviated',
    )

    initials_parser = subparsers.add_parser(
        'initials',
        help='Extract the first character of each word',
    )
    initials_parser.add_argument('text', nargs='?', help='Text (default: stdin)')
    delimiter_group = initials_parser.add_mutually_exclusive_group()
    delimiter_group.add_argument(
        '--delimiters', '-d',
        help='Delimiter characters (default: any whitespace)',
    )
    delimiter_group.add_argument(
        '--no-delimiters',
        action='store_true',
        help='Accept no delimiters at all',
    )

    swapcase_parser = subparsers.add_parser(
        'swapcase',
        help='Swap upper and lower case',
    )
    swapcase_parser.add_argument('text', nargs='?', help='Text (default: stdin)')

    wrap_parser = subparsers.add_parser(
        'wrap',
        help='Wrap text to a maximum line length',
    )
    wrap_parser.add_argument('text', nargs='?', help='Text (default: stdin)')
    wrap_parser.add_argument(
        '--width', '-w',
        type=int,
        help='Maximum line length',
    )
    wrap_parser.add_argument(
        '--newline',
        help='Line separator to insert',
    )
    wrap_parser.add_argument(
        '--wrap-long-words',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Cut words longer than the line length',
    )
    wrap_parser.add_argument(
        '--wrap-on',
        help='Regular expression for break points',
    )

    return parser


def read_text(args: argparse.Namespace, stdin: TextIO) -> str:
    """Get the input text from the arguments or standard input.

    A single trailing newline from standard input is dropped.

    Args:
        args: Parsed command-line arguments.
        stdin: Stream to read from when no text argument is given.

    Returns:
        The input text.
    """
    if args.text is not None:
        return args.text

    text = stdin.read()
    if text.endswith('\n'):
        text = text[:-1]
    return text


def option(args: argparse.Namespace, name: str, config: Dict[str, Any], key_path: str) -> Any:
    """Return a command-line option, falling back to configuration."""
    value = getattr(args, name)
    if value is None:
        value = get_config_value(config, key_path)
    return value


def run_command(args: argparse.Namespace, config: Dict[str, Any], text: str) -> Optional[str]:
    """Run the selected text operation.

    Args:
        args: Parsed command-line arguments.
        config: Loaded configuration.
        text: Input text.

    Returns:
        The operation result.
    """
    if args.command == 'abbreviate':
        return abbreviate(
            text,
            option(args, 'lower', config, 'abbreviate.lower'),
            option(args, 'upper', config, 'abbreviate.upper'),
            option(args, 'suffix', config, 'abbreviate.suffix'),
        )

    if args.command == 'initials':
        if args.no_delimiters:
            return initials(text, '')
        return initials(text, option(args, 'delimiters', config, 'initials.delimiters'))

    if args.command == 'swapcase':
        return swap_case(text)

    return wrap(
        text,
        option(args, 'width', config, 'wrap.width'),
        option(args, 'newline', config, 'wrap.newline'),
        bool(option(args, 'wrap_long_words', config, 'wrap.wrap_long_words')),
        option(args, 'wrap_on', config, 'wrap.wrap_on'),
    )


def main(argv: Optional[list] = None, stdin: Optional[TextIO] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).
        stdin: Input stream (default: sys.stdin).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = setup_argparser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        # Configure logging level
        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        else:
            level = get_config_value(config, 'logging.level', 'WARNING')
            logging.getLogger().setLevel(str(level).upper())
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (yaml.YAMLError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        text = read_text(args, stdin or sys.stdin)
        logger.debug(f"Running '{args.command}' on {len(text)} characters")
        result = run_command(args, config, text)
        print(result)
        return 0

    except TextOpsError as e:
        print(f"Invalid argument: {e}", file=sys.stderr)
        return 1
    except re.error as e:
        print(f"Invalid wrap-on pattern: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
