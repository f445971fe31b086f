import os

import pytest

import constants

CASES = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), constants.TEST_CASE_FOLDER)


@pytest.fixture
def case_path():
    def _path(name):
        return os.path.join(CASES, name)
    return _path
