"""The Monte Carlo estimate of pi."""

from __future__ import annotations

from decimal import Decimal, localcontext

from .base import DEC_CONTEXT, NAN, BytesLike, EntropyTest, _as_bytes, dec

MONTE_LEN = 6
_HALF = MONTE_LEN // 2

IN_CIRCLE_DISTANCE = 281_474_943_156_225
"""``((256 ** 3) - 1) ** 2``."""


class MonteCarloCalculation(EntropyTest):
    """Estimates pi from 24-bit coordinate pairs taken from the byte stream."""

    def __init__(self) -> None:
        self._pending = b""
        self.tries = 0
        self.in_count = 0

    def update(self, data: BytesLike) -> "MonteCarloCalculation":
        stream = self._pending + _as_bytes(data)
        whole = len(stream) - len(stream) % MONTE_LEN
        for start in range(0, whole, MONTE_LEN):
            x = int.from_bytes(stream[start : start + _HALF], "big")
            y = int.from_bytes(stream[start + _HALF : start + MONTE_LEN], "big")
            self.tries += 1
            if x * x + y * y < IN_CIRCLE_DISTANCE:
                self.in_count += 1
        self._pending = stream[whole:]
        return self

    def finalize(self) -> Decimal:
        if self.tries == 0:
            return NAN
        with localcontext(DEC_CONTEXT):
            return dec("4.0") * (Decimal(self.in_count) / Decimal(self.tries))