import numpy as np
import pytest

from huffman_coding.FrequencyCounter import FrequencyCounter, check_frequencies
from huffman_coding.HuffmanErrors import EmptyInputError, InvalidFrequencyError, HuffmanError


def test_count_sample_text(sample_text):
    assert FrequencyCounter().count(sample_text) == {"a": 10, "b": 10, "c": 4, "d": 4, "e": 1, "f": 1}


def test_count_empty_text_gives_empty_table():
    assert FrequencyCounter().count("") == {}


def test_count_keeps_control_characters():
    assert FrequencyCounter().count("a\n\ta\n") == {"a": 2, "\n": 2, "\t": 1}


def test_check_returns_copy():
    table = {"a": 3}
    checked = check_frequencies(table)
    assert checked == table
    assert checked is not table


def test_check_accepts_numpy_integers():
    checked = check_frequencies({"a": np.int64(4)})
    assert checked == {"a": 4}
    assert type(checked["a"]) is int


def test_check_empty_table():
    with pytest.raises(EmptyInputError):
        check_frequencies({})


@pytest.mark.parametrize("count", [0, -3, 1.5, "2", None, True])
def test_check_rejects_bad_counts(count):
    with pytest.raises(InvalidFrequencyError) as excinfo:
        check_frequencies({"a": 1, "x": count})
    assert excinfo.value.symbol == "x"
    assert excinfo.value.count == count


def test_check_rejects_non_mapping():
    with pytest.raises(InvalidFrequencyError):
        check_frequencies([("a", 1)])


def test_errors_are_value_errors():
    assert issubclass(EmptyInputError, HuffmanError)
    assert issubclass(InvalidFrequencyError, ValueError)
