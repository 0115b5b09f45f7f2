from stepcase.model import Steps, TestcaseCollection
from stepcase.states import (
    InitialState,
    BackgroundState,
    ScenarioState,
    ScenarioOutlineState,
    ExamplesState,
)


class StateFactory:
    """Creates parser states, and gives the states that produce test cases
    access to the collection they should be added to."""

    testcases: TestcaseCollection

    def __init__(self, testcases: TestcaseCollection) -> None:
        self.testcases = testcases

    def create_initial_state(self, background_steps: Steps = ()) -> InitialState:
        return InitialState(self, background_steps)

    def create_background_state(self) -> BackgroundState:
        return BackgroundState(self)

    def create_scenario_state(self, background_steps: Steps) -> ScenarioState:
        return ScenarioState(self, background_steps, self.testcases)

    def create_scenario_outline_state(self, background_steps: Steps) -> ScenarioOutlineState:
        return ScenarioOutlineState(self, background_steps)

    def create_examples_state(self, steps: Steps, background_steps: Steps) -> ExamplesState:
        return ExamplesState(self, steps, background_steps, self.testcases)
