"""The serial correlation coefficient test."""

from __future__ import annotations

from decimal import Decimal, localcontext

from .base import DEC_CONTEXT, NAN, BytesLike, EntropyTest, _as_bytes


class SerialCorrelationCoefficientCalculation(EntropyTest):
    """Correlation between each byte and the byte that follows it.

    The result is NaN when no bytes were seen or when every byte is equal.
    """

    def __init__(self) -> None:
        self._all_equals = True
        self._first = True
        self._t1 = 0
        self._t2 = 0
        self._t3 = 0
        self._last = 0
        self._u0 = 0
        self._total = 0

    def update(self, data: BytesLike) -> "SerialCorrelationCoefficientCalculation":
        data = _as_bytes(data)
        if not data:
            return self

        body = memoryview(data)
        if self._first:
            self._first = False
            self._last = 0
            self._u0 = data[0]
            body = body[1:]

        for value in body:
            if self._all_equals and value != self._u0:
                self._all_equals = False
            self._t1 += self._last * value
            self._t2 += value
            self._t3 += value * value
            self._last = value

        self._total += len(data)
        return self

    def all_equals(self) -> bool:
        """Whether every byte seen so far is equal to the first one."""
        return self._all_equals

    def finalize(self) -> Decimal:
        if self._total == 0 or self._all_equals:
            return NAN
        with localcontext(DEC_CONTEXT):
            total = Decimal(self._total)
            t1 = Decimal(self._last) * Decimal(self._u0) + Decimal(self._t1)
            t2 = Decimal(self._t2) ** 2
            scc = total * Decimal(self._t3) - t2
            if scc == 0:
                return scc
            return (total * t1 - t2) / scc