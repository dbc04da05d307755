"""Shared decimal arithmetic and the common interface of the entropy tests."""

from __future__ import annotations

import decimal
from abc import ABC, abstractmethod
from collections import Counter
from decimal import Decimal
from typing import TypeVar, Union

PRECISION = 20
"""Number of significant digits carried by every calculation."""

DEC_CONTEXT = decimal.Context(prec=PRECISION, rounding=decimal.ROUND_HALF_EVEN)

NAN = Decimal("NaN")

Number = Union[Decimal, int, float, str]
BytesLike = Union[bytes, bytearray, memoryview]

_T = TypeVar("_T", bound="EntropyTest")


def dec(value: Number) -> Decimal:
    """Create a decimal rounded to the package precision."""
    if isinstance(value, float):
        value = repr(value)
    return DEC_CONTEXT.create_decimal(value)


def error_ratio(correct: Number, actual: Number) -> Decimal:
    """Relative error of ``actual`` against the expected value ``correct``."""
    correct = dec(correct)
    actual = dec(actual)
    with decimal.localcontext(DEC_CONTEXT):
        return abs(actual - correct) / abs(correct)


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, (str, int)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)


class EntropyTest(ABC):
    """A streaming test of the entropy of a byte sequence."""

    @abstractmethod
    def update(self: _T, data: BytesLike) -> _T:
        """Feed more bytes into the test and return the test itself."""

    @abstractmethod
    def finalize(self) -> Decimal:
        """Return the result of the test for the bytes seen so far."""

    @classmethod
    def test(cls, data: BytesLike) -> Decimal:
        """Run the test once over ``data``."""
        return cls().update(data).finalize()


class _ByteHistogram(EntropyTest):
    """Counts how often each byte value occurs."""

    def __init__(self) -> None:
        self.buckets: list[int] = [0] * 256
        self.total_buckets = 0

    def update(self, data: BytesLike):
        data = _as_bytes(data)
        for value, count in Counter(data).items():
            self.buckets[value] += count
        self.total_buckets += len(data)
        return self

    def samples(self) -> int:
        """Number of bytes seen so far."""
        return self.total_buckets