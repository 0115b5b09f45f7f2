from typing import Optional


class StepcaseError(Exception):
    """Base class for everything that aborts parsing of a feature.

    Position information is unknown where most errors are detected (deep inside
    placeholder substitution), it is attached by the parser as the error passes
    through it, see `StepcaseError.locate`.
    """

    message: str
    line: Optional[int]
    line_text: Optional[str]
    filename: Optional[str]

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        line_text: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_text = line_text
        self.filename = filename

    def locate(self, line: int, line_text: str, filename: Optional[str] = None) -> None:
        if self.line is None:
            self.line = line
            self.line_text = line_text

        if self.filename is None:
            self.filename = filename

    def __str__(self) -> str:
        message = self.message
        if self.line is not None:
            message = f'{message} at line {self.line}'
            if self.line_text:
                message = f'{message}: "{self.line_text.strip()}"'

        source = f'"{self.filename}"' if self.filename is not None else '<string>'

        return f'Failed to parse {source}: {message}'


class MalformedPlaceholderError(StepcaseError):
    step: str

    def __init__(self, step: str) -> None:
        super().__init__(f"found '<' but no matching '>' in step \"{step}\"")
        self.step = step


class UnknownPlaceholderError(StepcaseError):
    name: str

    def __init__(self, name: str, step: str) -> None:
        super().__init__(f'placeholder <{name}> in step "{step}" is not a column in the examples table')
        self.name = name


class RowColumnMismatchError(StepcaseError):
    expected: int
    actual: int

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f'examples row has {actual} values, but the table header has {expected} columns')
        self.expected = expected
        self.actual = actual


class RecursivePlaceholderError(StepcaseError):
    step: str
    replacements: int

    def __init__(self, step: str, replacements: int) -> None:
        super().__init__(f'placeholders in step "{step}" did not resolve after {replacements} replacements')
        self.step = step
        self.replacements = replacements
