from tests.conftest import PROJECT
from tests.helpers import run_command


def test_cli_list() -> None:
    rc, output = run_command(
        ['stepcase', 'list', 'features/login.feature'],
        cwd=PROJECT.as_posix(),
    )

    try:
        assert rc == 0
        assert output == [
            'features/login.feature:#1',
            '    a user "alice" with password "secret"',
            '    the user logs in with password "secret"',
            '    the user is logged in',
            'features/login.feature:#2',
            '    a user "alice" with password "secret"',
            '    the user logs in with password "wrong"',
            '    the user is not logged in',
        ]
    except AssertionError:
        print('\n'.join(output))
        raise


def test_cli_lint() -> None:
    rc, output = run_command(
        ['stepcase', 'lint', '.'],
        cwd=(PROJECT / 'features').as_posix(),
    )

    try:
        assert rc == 0
        assert output == []
    except AssertionError:
        print('\n'.join(output))
        raise

    rc, output = run_command(
        ['stepcase', 'lint', 'features', 'broken'],
        cwd=PROJECT.as_posix(),
    )

    try:
        assert rc == 1
        assert 'broken/unbalanced.feature:6:1\terror\tfound \'<\' but no matching \'>\' in step "I eat <n cucumbers"' in output
    except AssertionError:
        print('\n'.join(output))
        raise
