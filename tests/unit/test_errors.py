from stepcase.errors import (
    StepcaseError,
    MalformedPlaceholderError,
    UnknownPlaceholderError,
    RowColumnMismatchError,
    RecursivePlaceholderError,
)


class TestStepcaseError:
    def test___str__(self) -> None:
        error = StepcaseError('something is wrong')
        assert str(error) == 'Failed to parse <string>: something is wrong'

        error = StepcaseError('something is wrong', filename='test.feature')
        assert str(error) == 'Failed to parse "test.feature": something is wrong'

        error = StepcaseError('something is wrong', line=10, line_text='  | a | b |  ', filename='test.feature')
        assert str(error) == 'Failed to parse "test.feature": something is wrong at line 10: "| a | b |"'

        error = StepcaseError('something is wrong', line=10, line_text='')
        assert str(error) == 'Failed to parse <string>: something is wrong at line 10'

    def test_locate(self) -> None:
        error = StepcaseError('something is wrong')

        error.locate(3, '| 1 |', 'test.feature')

        assert error.line == 3
        assert error.line_text == '| 1 |'
        assert error.filename == 'test.feature'

        # first location wins
        error.locate(4, '| 2 |', 'other.feature')

        assert error.line == 3
        assert error.line_text == '| 1 |'
        assert error.filename == 'test.feature'

        error = StepcaseError('something is wrong', filename='test.feature')
        error.locate(1, 'foo')
        assert error.filename == 'test.feature'


def test_subclasses() -> None:
    error: StepcaseError = MalformedPlaceholderError('I eat <n cucumbers')
    assert isinstance(error, StepcaseError)
    assert error.message == 'found \'<\' but no matching \'>\' in step "I eat <n cucumbers"'

    error = UnknownPlaceholderError('missing', 'I eat <missing> cucumbers')
    assert isinstance(error, StepcaseError)
    assert error.message == 'placeholder <missing> in step "I eat <missing> cucumbers" is not a column in the examples table'

    error = RowColumnMismatchError(3, 2)
    assert isinstance(error, StepcaseError)
    assert error.message == 'examples row has 2 values, but the table header has 3 columns'

    error = RecursivePlaceholderError('<n>', 1000)
    assert isinstance(error, StepcaseError)
    assert error.step == '<n>'
    assert error.replacements == 1000
    assert error.message == 'placeholders in step "<n>" did not resolve after 1000 replacements'
