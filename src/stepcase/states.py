"""The states of the feature parser.

Each state consumes one trimmed line at a time through `parse_line`, which
returns `None` if the parser should stay in the current state, or a
`Transition` to the state that should handle the following lines. When a
transition has `redispatch` set, the line that triggered it has not been
consumed and must be given to the new state as well. That is done by the
driver in `stepcase.parser`, never by a state calling another state.

`InitialState` never asks for a redispatch, so a single line visits at most
two states.
"""
from __future__ import annotations

from typing import List, Optional, Union, TYPE_CHECKING
from dataclasses import dataclass

from stepcase.constants import KEYWORD_SCENARIO, KEYWORD_OUTLINE_PREFIX, KEYWORD_OUTLINE, KEYWORD_BACKGROUND
from stepcase.errors import RowColumnMismatchError
from stepcase.model import Steps
from stepcase.text import (
    get_step_parts,
    get_step_text,
    is_table_line,
    remove_whitespace,
    split_table_line,
    replace_placeholders,
)


if TYPE_CHECKING:  # pragma: no cover
    from stepcase.factory import StateFactory
    from stepcase.model import TestcaseCollection


@dataclass(frozen=True)
class Transition:
    state: ParserState
    redispatch: bool = False


class InitialState:
    factory: StateFactory
    background_steps: Steps

    def __init__(self, factory: StateFactory, background_steps: Steps) -> None:
        self.factory = factory
        self.background_steps = background_steps

    def parse_line(self, line: str) -> Optional[Transition]:
        first_word, remainder = get_step_parts(line)

        if first_word == KEYWORD_OUTLINE_PREFIX:
            second_word, _ = get_step_parts(remainder or '')
            if second_word == KEYWORD_OUTLINE:
                return Transition(self.factory.create_scenario_outline_state(self.background_steps))
        elif first_word == KEYWORD_SCENARIO:
            return Transition(self.factory.create_scenario_state(self.background_steps))
        elif first_word == KEYWORD_BACKGROUND:
            return Transition(self.factory.create_background_state())

        # feature title, description, comments, empty lines...
        return None


class BackgroundState:
    factory: StateFactory
    steps: List[str]

    def __init__(self, factory: StateFactory) -> None:
        self.factory = factory
        self.steps = []

    def parse_line(self, line: str) -> Optional[Transition]:
        text = get_step_text(line)

        if text is not None:
            self.steps.append(text)
            return None

        return Transition(self.factory.create_initial_state(tuple(self.steps)), redispatch=True)


class ScenarioState:
    factory: StateFactory
    background_steps: Steps
    testcases: TestcaseCollection
    steps: List[str]

    def __init__(self, factory: StateFactory, background_steps: Steps, testcases: TestcaseCollection) -> None:
        self.factory = factory
        self.background_steps = background_steps
        self.testcases = testcases
        self.steps = list(background_steps)

    def parse_line(self, line: str) -> Optional[Transition]:
        text = get_step_text(line)

        if text is not None:
            self.steps.append(text)
            return None

        self.testcases.append_test(self.steps)

        # only the background is carried over to the next block
        return Transition(self.factory.create_initial_state(self.background_steps), redispatch=True)


class ScenarioOutlineState:
    factory: StateFactory
    background_steps: Steps
    steps: List[str]

    def __init__(self, factory: StateFactory, background_steps: Steps) -> None:
        self.factory = factory
        self.background_steps = background_steps
        self.steps = list(background_steps)

    def parse_line(self, line: str) -> Optional[Transition]:
        text = get_step_text(line)

        if text is not None:
            self.steps.append(text)
            return None

        # the line ending the outline, normally `Examples:`, only marks the start of the table and is consumed
        return Transition(self.factory.create_examples_state(tuple(self.steps), self.background_steps))


class ExamplesState:
    factory: StateFactory
    steps: Steps
    background_steps: Steps
    testcases: TestcaseCollection
    header: List[str]
    is_header: bool

    def __init__(
        self,
        factory: StateFactory,
        steps: Steps,
        background_steps: Steps,
        testcases: TestcaseCollection,
    ) -> None:
        self.factory = factory
        self.steps = steps
        self.background_steps = background_steps
        self.testcases = testcases
        self.header = []
        self.is_header = True

    def parse_line(self, line: str) -> Optional[Transition]:
        if not is_table_line(line):
            return Transition(self.factory.create_initial_state(self.background_steps), redispatch=True)

        cells = split_table_line(remove_whitespace(line))

        if self.is_header:
            self.is_header = False
            self.header = cells
            return None

        if len(cells) != len(self.header):
            raise RowColumnMismatchError(len(self.header), len(cells))

        self.testcases.append_test([replace_placeholders(step, self.header, cells) for step in self.steps])

        return None


ParserState = Union[InitialState, BackgroundState, ScenarioState, ScenarioOutlineState, ExamplesState]
