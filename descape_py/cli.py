#!/usr/bin/env python3
"""
descape

Command-line interface for unescaping backslash escape sequences.

Usage:
    descape [TEXT ...]
    descape -f FILE
    descape -h | --help
    descape --version

Arguments:
    TEXT               Strings to unescape, one result per line. With no TEXT
                       and no --file, standard input is read.

Options:
    -f --file FILE     Unescape the contents of FILE
    --config PATH      Path to config.json
    --no-extended      Do not recognise \\a, \\v and \\e
    --lenient          Keep unknown escapes instead of failing
    -v --verbose       Log debug output
    -h --help          Show this help message
    --version          Show version
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Config
from .errors import UnescapeError
from .escapes.resolver import DefaultResolver
from .engine.unescaper import unescape_with

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='descape',
        description="Unescape backslash escape sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('text', nargs='*', help='Strings to unescape')
    parser.add_argument('-f', '--file', type=str, help='Unescape the contents of a file')
    parser.add_argument('--version', action='version', version=f'descape {__version__}')
    parser.add_argument('--config', type=str, help='Path to config.json')
    parser.add_argument('--no-extended', action='store_true', help='Do not recognise \\a, \\v and \\e')
    parser.add_argument('--lenient', action='store_true', help='Keep unknown escapes instead of failing')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output')
    return parser


def load_resolver(args: argparse.Namespace) -> DefaultResolver:
    """
    Build the resolver from the config file and command-line overrides.

    Args:
        args: Parsed arguments

    Returns:
        Configured DefaultResolver
    """
    config_path = Path(args.config) if args.config else None
    config = Config.load(config_path)

    if args.no_extended:
        config.extended_escapes = False
    if args.lenient:
        config.lenient = True

    logger.debug("Using %s", config)
    return DefaultResolver.from_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    resolver = load_resolver(args)

    try:
        if args.text:
            for text in args.text:
                print(unescape_with(text, resolver))
        else:
            if args.file:
                data = Path(args.file).read_text(encoding='utf-8')
            else:
                data = sys.stdin.read()
            sys.stdout.write(unescape_with(data, resolver).into_owned())
    except UnescapeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
