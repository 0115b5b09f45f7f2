import logging

from typing import Iterable, Optional, Union
from pathlib import Path

from stepcase.errors import StepcaseError
from stepcase.factory import StateFactory
from stepcase.model import TestcaseCollection
from stepcase.states import ParserState


logger = logging.getLogger(__name__)


class FeatureParser:
    """Feeds lines to the current parser state, and switches state when told to.

    A transition with `redispatch` set hands the very same line to the new
    state before the next line is read.
    """

    testcases: TestcaseCollection
    factory: StateFactory
    state: ParserState
    filename: Optional[str]
    lineno: int

    def __init__(self, testcases: Optional[TestcaseCollection] = None, filename: Optional[str] = None) -> None:
        self.testcases = testcases if testcases is not None else TestcaseCollection()
        self.factory = StateFactory(self.testcases)
        self.state = self.factory.create_initial_state()
        self.filename = filename
        self.lineno = 0

    def parse_line(self, line: str) -> None:
        """`line` must already be stripped of leading and trailing whitespace."""
        self.lineno += 1

        self._dispatch(line)

    def _dispatch(self, line: str) -> None:
        try:
            while True:
                transition = self.state.parse_line(line)
                if transition is None:
                    break

                logger.debug(f'line {self.lineno}: {self.state.__class__.__name__} -> {transition.state.__class__.__name__}')
                self.state = transition.state

                if not transition.redispatch:
                    break
        except StepcaseError as e:
            e.locate(self.lineno, line, self.filename)
            raise

    def parse_lines(self, lines: Iterable[str]) -> TestcaseCollection:
        for line in lines:
            self.parse_line(line.strip())

        self.finish()

        return self.testcases

    def finish(self) -> None:
        # an empty line ends whatever block is open, so a scenario at the very end of the input is not lost.
        # it is not a line of the input, lineno stays at the last line
        self._dispatch('')
        logger.debug(f'{self.filename or "<string>"}: {len(self.testcases)} test cases')


def parse_feature(source: str, filename: Optional[str] = None) -> TestcaseCollection:
    parser = FeatureParser(filename=filename)

    return parser.parse_lines(source.splitlines())


def parse_feature_file(path: Union[str, Path]) -> TestcaseCollection:
    file = Path(path)

    return parse_feature(file.read_text(encoding='utf-8'), filename=file.as_posix())
