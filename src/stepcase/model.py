from typing import Iterable, Iterator, List, Tuple, Union, overload
from dataclasses import dataclass, field


Steps = Tuple[str, ...]


@dataclass(frozen=True)
class TestCase:
    steps: Steps = field(default_factory=tuple)

    __test__ = False  # not a pytest test class

    def __iter__(self) -> Iterator[str]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> str:
        return self.steps[index]


class TestcaseCollection:
    """Ordered sink for finished test cases, in the order they were completed in the source."""

    __test__ = False  # not a pytest test class

    _testcases: List[TestCase]

    def __init__(self) -> None:
        self._testcases = []

    def append_test(self, steps: Iterable[str]) -> None:
        self._testcases.append(TestCase(tuple(steps)))

    def __len__(self) -> int:
        return len(self._testcases)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._testcases)

    @overload
    def __getitem__(self, index: int) -> TestCase: ...

    @overload
    def __getitem__(self, index: slice) -> List[TestCase]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[TestCase, List[TestCase]]:
        return self._testcases[index]
