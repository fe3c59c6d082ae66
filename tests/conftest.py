import pytest

CLASSIC_FREQUENCIES = {"c": 5, "d": 9, "a": 12, "b": 13, "e": 16, "f": 45}
SAMPLE_TEXT = "aaaaaaaaaabbbbbbbbbbccccddddef"


@pytest.fixture
def classic_frequencies():
    return dict(CLASSIC_FREQUENCIES)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT
