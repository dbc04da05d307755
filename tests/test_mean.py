from decimal import Decimal

import pytest

from entest.mean import MeanCalculation

LEN = 10240


def test_zero_data():
    assert MeanCalculation.test(bytes(LEN)) == 0


def test_empty_is_nan():
    assert MeanCalculation.test(b"").is_nan()


def test_uniform_data_is_random_mean():
    assert MeanCalculation.test(bytes(range(256))) == Decimal("127.5")


def test_constant_data():
    assert MeanCalculation.test(bytes([7]) * 100) == 7


def test_incremental_matches_oneshot_and_counts_samples():
    data = bytes((i * 53 + 3) % 256 for i in range(1234))
    calc = MeanCalculation()
    calc.update(data[:500]).update(bytearray(data[500:]))
    assert calc.finalize() == MeanCalculation.test(data)
    assert calc.samples() == len(data)


def test_mean_within_byte_range():
    data = bytes((i * 97) % 256 for i in range(999))
    assert 0 <= MeanCalculation.test(data) <= 255


def test_rejects_integer():
    with pytest.raises(TypeError):
        MeanCalculation().update(5)