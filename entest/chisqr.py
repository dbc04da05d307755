"""The chi-square test."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, localcontext

from .base import DEC_CONTEXT, NAN, BytesLike, Number, _ByteHistogram, dec

DEFAULT_DF = 127

MAX_X = dec("20.0")
NEG_MAX_X = -MAX_X

LOG_SQRT_PI = dec("0.5723649429247000870")
"""``log(sqrt(pi))``."""

I_SQRT_PI = dec("0.5641895835477562870")
"""``1 / sqrt(pi)``."""

ZERO = dec("0.0")
HALF_ONE = dec("0.5")
ONE = dec("1.0")
TWO = dec("2.0")
MAX_Z = dec("6.0")
HALF_MAX_Z = MAX_Z / TWO

_POZ_SMALL = tuple(
    dec(c)
    for c in (
        "0.000124818987",
        "-0.001075204047",
        "0.005198775019",
        "-0.019198292004",
        "0.059054035642",
        "-0.151968751364",
        "0.319152932694",
        "-0.531923007300",
        "0.797884560593",
    )
)

_POZ_LARGE = tuple(
    dec(c)
    for c in (
        "-0.000045255659",
        "0.000152529290",
        "-0.000019538132",
        "-0.000676904986",
        "0.001390604284",
        "-0.000794620820",
        "-0.002034254874",
        "0.006549791214",
        "-0.010557625006",
        "0.011630447319",
        "-0.009279453341",
        "0.005353579108",
        "-0.002141268741",
        "0.000535310849",
        "0.999936657524",
    )
)


def _horner(coefficients: Sequence[Decimal], x: Decimal) -> Decimal:
    first, *rest = coefficients
    acc = first
    for coefficient in rest:
        acc = acc * x + coefficient
    return acc


def chi_statistic(buckets: Sequence[int], total_buckets: int) -> Decimal:
    """Compute the chi-square statistic of 256 byte counts."""
    if total_buckets == 0:
        return NAN
    with localcontext(DEC_CONTEXT):
        expected = Decimal(total_buckets) / dec("256.0")
        chi_sq = ZERO
        for count in buckets:
            diff = Decimal(count) - expected
            chi_sq += diff * diff / expected
        return chi_sq


def ex(x: Number) -> Decimal:
    """``e ** x``, flushed to zero below ``-MAX_X``."""
    x = dec(x)
    if x < NEG_MAX_X:
        return ZERO
    with localcontext(DEC_CONTEXT):
        return x.exp()


def poz(z: Number) -> Decimal:
    """Probability of a normal z value (cumulative from minus infinity)."""
    z = dec(z)
    with localcontext(DEC_CONTEXT):
        if z == ZERO:
            x = ZERO
        else:
            y = HALF_ONE * abs(z)
            if y >= HALF_MAX_Z:
                x = ONE
            elif y < ONE:
                w = y * y
                x = _horner(_POZ_SMALL, w) * y * TWO
            else:
                x = _horner(_POZ_LARGE, y - TWO)
        if z > ZERO:
            return (x + ONE) * HALF_ONE
        return (ONE - x) * HALF_ONE


def probability_chi_sq(chi_sq: Number, df: int = DEFAULT_DF) -> Decimal:
    """Probability that a random data set exceeds the given chi-square value."""
    chi_sq = dec(chi_sq)
    if chi_sq.is_nan():
        return chi_sq
    with localcontext(DEC_CONTEXT):
        if chi_sq <= ZERO:
            return ONE

        a = HALF_ONE * chi_sq
        s = TWO * poz(-chi_sq.sqrt())
        limit = Decimal(df)
        z = HALF_ONE

        if a > MAX_X:
            e = LOG_SQRT_PI
            c = a.ln()
            while z <= limit:
                e += z.ln()
                s += ex(c * z - a - e)
                z += ONE
            return s

        e = I_SQRT_PI / a.sqrt()
        c = ZERO
        while z <= limit:
            e *= a / z
            c += e
            z += ONE
        return c * ex(-a) + s


class ChiSquareCalculation(_ByteHistogram):
    """Chi-square statistic of the byte distribution."""

    def update(self, data: BytesLike) -> ChiSquareCalculation:
        """Count the bytes of ``data``."""
        super().update(data)
        return self

    def samples(self) -> int:
        """Number of bytes seen so far."""
        return self.total_buckets

    def finalize(self) -> Decimal:
        return chi_statistic(self.buckets, self.total_buckets)

    def finalize_probability(self) -> tuple[Decimal, Decimal]:
        """Return the statistic and the probability of a value this extreme."""
        chi = self.finalize()
        return chi, probability_chi_sq(chi, DEFAULT_DF)

    @classmethod
    def test_probability(cls, data: BytesLike) -> tuple[Decimal, Decimal]:
        """Run the test once over ``data``, returning statistic and probability."""
        return cls().update(data).finalize_probability()