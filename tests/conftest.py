from pathlib import Path

import pytest


PROJECT = (Path(__file__).parent / 'project').resolve()

assert PROJECT.is_dir()


@pytest.fixture
def feature_file(tmp_path: Path) -> Path:
    return tmp_path / 'test.feature'
