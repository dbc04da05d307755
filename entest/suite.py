"""Running every entropy test over one byte stream."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal, localcontext

from .base import DEC_CONTEXT, BytesLike, dec, error_ratio
from .chisqr import ChiSquareCalculation
from .mc import MonteCarloCalculation
from .mean import MeanCalculation
from .sc import SerialCorrelationCoefficientCalculation
from .shannon import ShannonCalculation

PI = dec("3.14159265358979323846264338327950288")

MAX_CHUNK = 1024 * 256
"""Largest block requested from a byte source at once."""

_HUNDRED = dec("100.0")
_EIGHT = dec("8")


def _trim(value: Decimal) -> str:
    """Render with at most 20 fractional digits and no trailing zeros."""
    text = format(value, ".30f")
    if "." not in text:
        return text
    whole, fraction = text.split(".", 1)
    fraction = fraction[:20].rstrip("0")
    return f"{whole}.{fraction}" if fraction else whole


@dataclass(frozen=True)
class EntestResult:
    """Results of all entropy tests over one byte stream."""

    samples: int
    chi: Decimal
    chi_prob: Decimal
    mc: Decimal
    mean: Decimal
    sc: Decimal
    shannon: Decimal

    def __str__(self) -> str:
        with localcontext(DEC_CONTEXT):
            chi_prob = self.chi_prob * _HUNDRED
            mc_error = error_ratio(PI, self.mc) * _HUNDRED
            compress_ratio = _HUNDRED * (_EIGHT - self.shannon) / _EIGHT
        return (
            f"\nEntropy = {_trim(self.shannon)} bits per byte.\n"
            f"Optimum compression would reduce the size of this {self.samples} "
            f"byte file by {compress_ratio:.2f} percent.\n"
            f"\n"
            f"Chi square distribution for {self.samples} samples is {_trim(self.chi)},\n"
            f"and randomly would exceed this value {chi_prob:.2f} percent of the times.\n"
            f"\n"
            f"Arithmetic mean value of data bytes is {_trim(self.mean)} (127.5 = random).\n"
            f"\n"
            f"Monte Carlo value for Pi is {_trim(self.mc)} (error {mc_error:.2f} percent).\n"
            f"\n"
            f"(serial correlation is not accurate for small inputs)\n"
            f"Serial correlation coefficient is {_trim(self.sc)} "
            f"(totally uncorrelated = 0.0).\n"
        )


@dataclass
class Entest:
    """Runs the chi-square, Monte Carlo, mean, serial correlation and Shannon tests."""

    chi: ChiSquareCalculation = field(default_factory=ChiSquareCalculation)
    mc: MonteCarloCalculation = field(default_factory=MonteCarloCalculation)
    mean: MeanCalculation = field(default_factory=MeanCalculation)
    sc: SerialCorrelationCoefficientCalculation = field(
        default_factory=SerialCorrelationCoefficientCalculation
    )
    shannon: ShannonCalculation = field(default_factory=ShannonCalculation)

    def update(self, data: BytesLike) -> "Entest":
        """Feed more bytes into every test."""
        self.chi.update(data)
        self.mc.update(data)
        self.sc.update(data)
        return self

    def finalize(self) -> EntestResult:
        """Collect the results of every test."""
        # The mean and Shannon tests share the chi-square histogram.
        for histogram in (self.mean, self.shannon):
            histogram.buckets = list(self.chi.buckets)
            histogram.total_buckets = self.chi.total_buckets

        chi, chi_prob = self.chi.finalize_probability()
        return EntestResult(
            samples=self.chi.samples(),
            chi=chi,
            chi_prob=chi_prob,
            mc=self.mc.finalize(),
            mean=self.mean.finalize(),
            sc=self.sc.finalize(),
            shannon=self.shannon.finalize(),
        )

    @classmethod
    def test(cls, data: BytesLike) -> EntestResult:
        """Run every test once over ``data``."""
        return cls().update(data).finalize()

    @classmethod
    def test_rng(
        cls,
        fill_bytes: Callable[[int], bytes],
        size: int,
        chunk_size: int = MAX_CHUNK,
    ) -> EntestResult:
        """Test ``size`` bytes drawn from ``fill_bytes(n)``, which returns ``n`` bytes."""
        suite = cls()
        if size == 0:
            return suite.finalize()
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        chunk = min(chunk_size, MAX_CHUNK)
        remaining = size
        while remaining > 0:
            wanted = min(chunk, remaining)
            block = fill_bytes(wanted)
            if len(block) != wanted:
                raise ValueError(
                    f"byte source returned {len(block)} bytes, expected {wanted}"
                )
            suite.update(block)
            remaining -= wanted
        return suite.finalize()