import os
import sys
import argparse
import logging

from typing import List, Optional

from stepcase.cli import cli
from stepcase.constants import LOG_FILE, ENV_LOG_FILE


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='stepcase')

    parser.add_argument(
        '--verbose',
        action='store_true',
        required=False,
        default=False,
        help='verbose output, also written to log file',
    )

    parser.add_argument(
        '--no-verbose',
        nargs='+',
        type=str,
        default=None,
        help='name of loggers to disable',
    )

    parser.add_argument(
        '--version',
        action='store_true',
        required=False,
        default=False,
        help='print version and exit',
    )

    subparsers = parser.add_subparsers(dest='command')

    list_parser = subparsers.add_parser('list', description='print the test cases in feature files')
    list_parser.add_argument(
        'files',
        nargs='+',
        type=str,
        help='feature files or directories with feature files, `.` for current directory',
    )

    lint_parser = subparsers.add_parser('lint', description='report feature files that cannot be parsed')
    lint_parser.add_argument(
        'files',
        nargs='+',
        type=str,
        help='feature files or directories with feature files, `.` for current directory',
    )

    args = parser.parse_args()

    if args.version:
        from stepcase import __version__

        print(__version__, file=sys.stderr)

        raise SystemExit(0)

    if args.command is None:
        parser.error('a command is required')

    return args


def setup_logging(args: argparse.Namespace) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    level = logging.WARNING if not args.verbose else logging.DEBUG

    if level < logging.INFO:
        handlers.append(logging.FileHandler(os.environ.get(ENV_LOG_FILE, LOG_FILE)))

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        handlers=handlers,
    )

    no_verbose: Optional[List[str]] = args.no_verbose

    if no_verbose is None:
        no_verbose = []

    for logger_name in no_verbose:
        if logger_name in logging.Logger.manager.loggerDict:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.ERROR)
        else:
            print(f'!! logger "{logger_name}" does not exist', file=sys.stderr)


def main() -> int:
    args = parse_arguments()

    setup_logging(args)

    return cli(args)


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
