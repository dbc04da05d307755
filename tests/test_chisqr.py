from decimal import Decimal

import pytest

from entest.chisqr import (
    I_SQRT_PI,
    LOG_SQRT_PI,
    ChiSquareCalculation,
    chi_statistic,
    ex,
    poz,
    probability_chi_sq,
)

LEN = 10240


def test_zero_data_statistic_and_probability():
    chi, prob = ChiSquareCalculation.test_probability(bytes(LEN))
    assert chi == Decimal("2611200.0")
    assert prob == 0


def test_empty_input_is_nan():
    chi, prob = ChiSquareCalculation.test_probability(b"")
    assert chi.is_nan()
    assert prob.is_nan()


def test_chi_statistic_of_no_samples_is_nan():
    assert chi_statistic([0] * 256, 0).is_nan()


def test_uniform_distribution():
    chi, prob = ChiSquareCalculation.test_probability(bytes(range(256)) * 4)
    assert chi == 0
    assert prob == 1


def test_test_classmethod_returns_statistic():
    assert ChiSquareCalculation.test(bytes(LEN)) == Decimal("2611200.0")


def test_incremental_updates_match_oneshot():
    data = bytes((i * 37 + 11) % 256 for i in range(3000))
    calc = ChiSquareCalculation()
    calc.update(data[:1000]).update(data[1000:1777]).update(data[1777:])
    assert calc.finalize() == ChiSquareCalculation.test(data)
    assert calc.samples() == len(data)


def test_update_rejects_text():
    with pytest.raises(TypeError):
        ChiSquareCalculation().update("abc")


def test_probability_reference_value():
    prob = probability_chi_sq(Decimal("293.0"), 127)
    assert abs(prob - Decimal("0.05104028823948067937")) < Decimal("1e-10")


def test_probability_non_positive_is_one():
    assert probability_chi_sq(Decimal(0), 127) == 1
    assert probability_chi_sq(Decimal(-5), 127) == 1


def test_poz_at_zero_is_half():
    assert poz(Decimal(0)) == Decimal("0.5")


@pytest.mark.parametrize("z", ["0.3", "1.5", "2.9", "4.2", "7.0"])
def test_poz_is_symmetric(z):
    total = poz(Decimal(z)) + poz(-Decimal(z))
    assert abs(total - 1) < Decimal("1e-15")


def test_poz_saturates():
    assert poz(Decimal(10)) == 1
    assert poz(Decimal(-10)) == 0


def test_poz_is_monotone():
    values = [poz(Decimal(z) / 4) for z in range(-30, 31)]
    assert values == sorted(values)


def test_ex_flushes_to_zero():
    assert ex(Decimal("-20.5")) == 0
    assert ex(Decimal(0)) == 1


def test_constants_match_square_root_of_pi():
    assert abs(LOG_SQRT_PI - Decimal("0.5723649429247000870717135")) < Decimal("1e-18")
    assert abs(I_SQRT_PI - Decimal("0.5641895835477562869480795")) < Decimal("1e-18")
    assert abs(ex(LOG_SQRT_PI) * I_SQRT_PI - 1) < Decimal("1e-15")