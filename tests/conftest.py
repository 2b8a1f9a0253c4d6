import pytest

from pbtxt_tensor.util import reset_warnings


@pytest.fixture(autouse=True)
def clear_emitted_warnings():
    """Allow each test to observe warnings that an earlier test emitted."""
    reset_warnings()
    yield
    reset_warnings()
