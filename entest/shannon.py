"""The Shannon entropy test."""

from __future__ import annotations

from decimal import Decimal, localcontext

from .base import DEC_CONTEXT, NAN, BytesLike, _ByteHistogram, dec

_ZERO = dec("0.0")
_ONE = dec("1.0")


class ShannonCalculation(_ByteHistogram):
    """Shannon entropy of the byte distribution, in bits per byte."""

    def update(self, data: BytesLike) -> ShannonCalculation:
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
            length = Decimal(self.total_buckets)
            ln2 = Decimal(2).ln()
            entropy = _ZERO
            for count in self.buckets:
                probability = Decimal(count) / length
                if probability > _ZERO:
                    entropy += probability * ((_ONE / probability).ln() / ln2)
            return entropy