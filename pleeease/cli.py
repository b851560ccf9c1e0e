#!/usr/bin/env python3
"""
Command-line interface for Pleeease.
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from pleeease.core.processor import compile_file
from pleeease.utils.config import PREPROCESSORS, VERSION
from pleeease.utils.error import PleeeaseError
from pleeease.utils.file import find_config_file, load_config_file
from pleeease.utils.logging import setup_logging

logger = logging.getLogger('pleeease.cli')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='pleeease',
        description='Process CSS files with Pleeease'
    )

    parser.add_argument(
        'input',
        help='CSS file to process'
    )
    parser.add_argument(
        '-o', '--output',
        help='Output file, stdout when omitted'
    )

    # Configuration
    parser.add_argument(
        '-c', '--config',
        help='JSON configuration file (default: .pleeeaserc in the current directory)'
    )
    parser.add_argument(
        '--no-config',
        help='Ignore any configuration file',
        action='store_true'
    )

    # Options
    parser.add_argument(
        '-b', '--browsers',
        help='Browser query, may be repeated',
        action='append'
    )
    parser.add_argument(
        '--no-autoprefixer',
        help='Disable autoprefixer',
        action='store_true'
    )
    parser.add_argument(
        '--no-minifier',
        help='Disable the minifier',
        action='store_true'
    )
    parser.add_argument(
        '--sourcemaps',
        help='Enable sourcemaps',
        action='store_true'
    )
    for name in PREPROCESSORS:
        parser.add_argument(
            f'--{name}',
            help=f'Preprocess input with {name}',
            action='store_true'
        )

    # Other options
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '--log-file',
        help='Also write the log to this file'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the options given on the command line."""
    options: Dict[str, Any] = {}
    if args.browsers:
        options['browsers'] = args.browsers
    if args.no_autoprefixer:
        options['autoprefixer'] = False
    if args.no_minifier:
        options['minifier'] = False
    if args.sourcemaps:
        options['sourcemaps'] = True
    for name in PREPROCESSORS:
        if getattr(args, name):
            options[name] = True
    return options


def load_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Load the configuration file named on the command line, or the rc file."""
    if args.no_config:
        return {}
    path = args.config or find_config_file(os.getcwd())
    if not path:
        return {}
    logger.debug(f"Using configuration file {path}")
    return load_config_file(path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = load_config(args)
        options = build_options(args)
        css = asyncio.run(compile_file(args.input, args.output, options=options, config=config))
        if not args.output:
            sys.stdout.write(css)
        return 0

    except (PleeeaseError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
