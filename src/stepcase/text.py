from typing import List, Optional, Sequence, Tuple

from stepcase.constants import (
    STEP_KEYWORDS,
    TABLE_DELIMITER,
    PLACEHOLDER_BEGIN,
    PLACEHOLDER_END,
    MAX_PLACEHOLDER_REPLACEMENTS,
)
from stepcase.errors import (
    MalformedPlaceholderError,
    UnknownPlaceholderError,
    RowColumnMismatchError,
    RecursivePlaceholderError,
)


def get_step_parts(line: str) -> Tuple[Optional[str], Optional[str]]:
    """Split a trimmed line in its first word and whatever follows the first
    whitespace character after it.

    Unlike the keyword, the remainder is kept verbatim, including any repeated
    whitespace.
    """
    if len(line) < 1:
        return None, None

    for index, char in enumerate(line):
        if char.isspace():
            return line[:index], line[index + 1 :]

    return line, None


def is_step_keyword(word: Optional[str]) -> bool:
    return word is not None and word.lower() in STEP_KEYWORDS


def get_step_text(line: str) -> Optional[str]:
    keyword, text = get_step_parts(line)

    if not is_step_keyword(keyword):
        return None

    return text if text is not None else ''


def is_table_line(line: str) -> bool:
    return len(line) > 0 and line[0] == TABLE_DELIMITER


def remove_whitespace(line: str) -> str:
    return ''.join(line.split())


def split_table_line(line: str) -> List[str]:
    """Split a table line on `|`.

    A leading delimiter results in an empty first cell, a trailing delimiter
    does not result in an empty last cell, so `|a|b|` is `['', 'a', 'b']`. The
    header and all rows goes through here, which keeps cell `i` of a row
    aligned with column `i` of the header.
    """
    if len(line) < 1:
        return []

    cells = line.split(TABLE_DELIMITER)

    if cells[-1] == '':
        cells.pop()

    return cells


def replace_placeholders(step: str, header: Sequence[str], row: Sequence[str]) -> str:
    output = step
    replacements = 0

    while True:
        start = output.find(PLACEHOLDER_BEGIN)
        if start < 0:
            return output

        end = output.find(PLACEHOLDER_END, start)
        if end < 0:
            raise MalformedPlaceholderError(step)

        name = output[start + 1 : end]

        try:
            index = list(header).index(name)
        except ValueError:
            raise UnknownPlaceholderError(name, step) from None

        if index >= len(row):
            raise RowColumnMismatchError(len(header), len(row))

        value = row[index]

        # only values that bring in new placeholders can keep the scan from ending
        if PLACEHOLDER_BEGIN in value:
            replacements += 1
            if replacements > MAX_PLACEHOLDER_REPLACEMENTS:
                raise RecursivePlaceholderError(step, MAX_PLACEHOLDER_REPLACEMENTS)

        # start over from the beginning, the value might contain placeholders as well
        output = f'{output[:start]}{value}{output[end + 1:]}'
