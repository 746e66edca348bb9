import os
import pytest

from bibliotheque.library import Library, SharedLibrary
from bibliotheque.app import App
from bibliotheque.utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def lib():
    # Fresh in-memory library for each test
    return Library()

@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "bibliotheque.json")

@pytest.fixture
def app(data_file):
    return App(shared=SharedLibrary(), data_file=data_file)

@pytest.fixture(autouse=True)
def _plain_output():
    # The CLI output mode lives in an environment variable; reset it between tests
    previous = os.environ.pop(OUTPUT_MODE_ENV, None)
    yield
    os.environ.pop(OUTPUT_MODE_ENV, None)
    if previous is not None:
        os.environ[OUTPUT_MODE_ENV] = previous
