import math

import pytest

from mcpricer.montecarlo import MonteCarlo, PriceNotCalculatedError
from mcpricer.option import Option, OptionType


def call_option():
    return Option(OptionType.CALL, 100.0, 105.0, 1.0, 0.05, 0.20)


def put_option():
    return Option(OptionType.PUT, 100.0, 105.0, 1.0, 0.05, 0.20)


def test_defaults():
    mc = MonteCarlo(call_option())
    assert mc.num_simulations == 100000
    assert mc.option == call_option()
    assert mc.price_calculated is False
    assert mc.last_run_duration == 0.0


@pytest.mark.parametrize("count", [0, -5])
def test_rejects_non_positive_simulations(count):
    with pytest.raises(ValueError, match="Number of simulations must be positive."):
        MonteCarlo(call_option(), count, seed=1)


@pytest.mark.parametrize(
    "method",
    ["confidence_interval", "standard_error", "value_at_risk"],
)
def test_statistics_require_price(method):
    mc = MonteCarlo(call_option(), 100, seed=1)
    with pytest.raises(PriceNotCalculatedError) as excinfo:
        getattr(mc, method)()
    assert str(excinfo.value).startswith("Price must be calculated first")
    assert mc.price_calculated is False


def test_run_more_requires_price():
    mc = MonteCarlo(call_option(), 100, seed=1)
    with pytest.raises(PriceNotCalculatedError):
        mc.run_more_simulations(10)
    assert mc.num_simulations == 100


def test_seed_makes_results_reproducible():
    a = MonteCarlo(call_option(), 2000, seed=42).calculate_price()
    b = MonteCarlo(call_option(), 2000, seed=42).calculate_price()
    assert a == b


def test_price_is_cached():
    mc = MonteCarlo(call_option(), 2000, seed=7)
    first = mc.calculate_price()
    assert mc.price_calculated is True
    assert mc.calculate_price() == first
    assert first >= 0.0
    assert mc.last_run_duration >= 0.0


def test_put_call_parity_holds_within_error():
    n = 20000
    call_mc = MonteCarlo(call_option(), n, seed=3)
    put_mc = MonteCarlo(put_option(), n, seed=3)
    diff = call_mc.calculate_price() - put_mc.calculate_price()
    forward = 100.0 - 105.0 * math.exp(-0.05)
    tolerance = 5 * (call_mc.standard_error() + put_mc.standard_error())
    assert abs(diff - forward) < tolerance


def test_confidence_interval_centred_on_price():
    mc = MonteCarlo(call_option(), 5000, seed=11)
    price = mc.calculate_price()
    lower, upper = mc.confidence_interval()
    se = mc.standard_error()
    assert lower < price < upper
    assert (lower + upper) / 2 == pytest.approx(price)
    assert upper - lower == pytest.approx(2 * 1.96 * se)


def test_standard_error_shrinks_with_more_paths():
    mc = MonteCarlo(call_option(), 2000, seed=5)
    mc.calculate_price()
    small = mc.standard_error()
    mc.run_more_simulations(30000)
    assert mc.standard_error() < small


def test_standard_error_nan_for_single_path():
    mc = MonteCarlo(call_option(), 1, seed=5)
    price = mc.calculate_price()
    se = mc.standard_error()
    assert math.isnan(se) is True
    lower, upper = mc.confidence_interval()
    assert math.isnan(lower) is True
    assert math.isnan(upper) is True
    assert price >= 0.0


def test_run_more_simulations_updates_count_and_price():
    mc = MonteCarlo(call_option(), 1000, seed=9)
    mc.calculate_price()
    updated = mc.run_more_simulations(500)
    assert mc.num_simulations == 1500
    assert mc.calculate_price() == updated
    assert updated >= 0.0


def test_run_more_with_zero_keeps_price():
    mc = MonteCarlo(call_option(), 1000, seed=9)
    price = mc.calculate_price()
    assert mc.run_more_simulations(0) == pytest.approx(price)
    assert mc.num_simulations == 1000


def test_run_more_rejects_negative():
    mc = MonteCarlo(call_option(), 100, seed=9)
    mc.calculate_price()
    with pytest.raises(ValueError):
        mc.run_more_simulations(-1)


def test_value_at_risk_of_out_of_money_call_is_zero():
    mc = MonteCarlo(call_option(), 5000, seed=13)
    mc.calculate_price()
    assert mc.value_at_risk() == 0.0


def test_value_at_risk_is_below_mean_payoff():
    mc = MonteCarlo(put_option(), 5000, seed=13)
    price = mc.calculate_price()
    mean_payoff = price / math.exp(-0.05)
    var = mc.value_at_risk()
    assert 0.0 <= var <= mean_payoff