import logging

from typing import List
from argparse import Namespace as Arguments
from pathlib import Path

from colorama import init, Fore

from stepcase.constants import FEATURE_FILE_PATTERN
from stepcase.errors import StepcaseError
from stepcase.model import TestCase
from stepcase.parser import parse_feature_file


logger = logging.getLogger(__name__)


def find_feature_files(arguments: List[str]) -> List[Path]:
    files: List[Path]

    if arguments == ['.']:
        return list(Path.cwd().rglob(FEATURE_FILE_PATTERN))

    files = []
    for argument in arguments:
        file = Path(argument)

        if file.is_dir():
            files.extend(list(file.rglob(FEATURE_FILE_PATTERN)))
        else:
            files.append(file)

    return files


def relative_filename(file: Path) -> str:
    return file.as_posix().replace(Path.cwd().as_posix(), '').lstrip('/\\')


def testcase_to_text(filename: str, index: int, testcase: TestCase) -> str:
    lines = [f'{Fore.CYAN}{filename}:#{index}{Fore.RESET}']
    lines.extend([f'    {step}' for step in testcase])

    return '\n'.join(lines)


def error_to_text(filename: str, error: StepcaseError) -> str:
    line = error.line if error.line is not None else 1
    message = ': '.join(error.message.split('\n'))

    return '\t'.join(
        [
            f'{filename}:{line}:1',
            f'{Fore.RED}error{Fore.RESET}',
            message,
        ]
    )


def _parse(file: Path, filename: str) -> List[TestCase]:
    try:
        testcases = parse_feature_file(file)
    except OSError as e:
        raise StepcaseError(f'unable to read file: {e.strerror or e}', filename=filename) from e
    except UnicodeDecodeError as e:
        raise StepcaseError(f'unable to read file: {e}', filename=filename) from e

    logger.info(f'{filename}: {len(testcases)} test cases')

    return list(testcases)


def cli(args: Arguments) -> int:
    # init colorama for ansi colors
    init()

    files = find_feature_files(args.files)

    rc: int = 0
    for file in files:
        filename = relative_filename(file)

        try:
            testcases = _parse(file, filename)
        except StepcaseError as e:
            logger.error(str(e))
            print(error_to_text(filename, e))
            rc = 1
            continue

        if args.command == 'list':
            for index, testcase in enumerate(testcases, start=1):
                print(testcase_to_text(filename, index, testcase))

    return rc
