"""The arithmetic mean of the byte values."""

from __future__ import annotations

from decimal import Decimal, localcontext

from .base import DEC_CONTEXT, NAN, BytesLike, _ByteHistogram, dec


class MeanCalculation(_ByteHistogram):
    """Arithmetic mean of the bytes seen so far."""

    def update(self, data: BytesLike) -> MeanCalculation:
        """Count the bytes of ``data``."""
        super().update(data)
        return self

    def samples(self) -> int:
        """Number of bytes seen so far."""
        return self.total_buckets

    def finalize(self) -> Decimal:
        if self.total_buckets == 0:
            return NAN
        with localcontext(DEC_CONTEXT):
            total = dec("0.0")
            for value, count in enumerate(self.buckets):
                total += Decimal(value) * Decimal(count)
            return total / Decimal(self.total_buckets)