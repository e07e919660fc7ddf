# type: ignore
import pytest

from unit_utils import OutputSink


@pytest.fixture
def sink():
    yield OutputSink()
