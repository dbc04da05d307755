import os

import pytest

from entest.sc import SerialCorrelationCoefficientCalculation as SCC


def test_empty_input_is_nan():
    assert SCC.test(b"").is_nan()


def test_all_equal_bytes_is_nan():
    calc = SCC().update(b"\x07" * 100)
    assert calc.all_equals() is True
    assert calc.finalize().is_nan()


def test_single_byte_is_nan():
    assert SCC.test(b"\x05").is_nan()


def test_differing_byte_clears_all_equals():
    calc = SCC().update(b"\x03\x03\x03")
    assert calc.all_equals() is True
    calc.update(b"\x04")
    assert calc.all_equals() is False


def test_two_bytes_worked_example():
    assert SCC.test(b"\x00\x01") == -1


def test_all_zero_is_nan():
    assert SCC.test(bytes(1024)).is_nan()


@pytest.mark.parametrize("split", [1, 2, 7, 500, 4095])
def test_chunked_update_matches_oneshot(split):
    data = os.urandom(4096)
    calc = SCC().update(data[:split]).update(data[split:])
    assert calc.finalize() == SCC.test(data)


def test_empty_chunks_do_not_change_state():
    data = os.urandom(512)
    calc = SCC().update(b"").update(data).update(b"")
    assert calc.finalize() == SCC.test(data)


def test_random_data_is_small():
    result = SCC.test(os.urandom(100_000))
    assert abs(result) < 0.05


def test_rejects_text():
    with pytest.raises(TypeError):
        SCC().update("abc")