import pytest

from house_extractor.utils import close_logging
from streams import SCENARIO_BYTES


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "scenario.otbm"
    path.write_bytes(SCENARIO_BYTES)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    close_logging()
