# mcpricer

Prices European call and put options by Monte Carlo simulation. The pricer
models the terminal stock price with geometric Brownian motion. It also reports
a 95% confidence interval, the standard error and the 5% Value at Risk of the
simulated payoff distribution. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
mcpricer
```

The command prices a fixed sample European call with S=100, K=105, T=1 year,
r=5% and σ=20%. It prints the option, the price, the 95% confidence interval,
the standard error and the 5% VaR. It then simulates more paths and prints the
updated price and the time that second run took in seconds. Last, it builds an
invalid put with a negative stock price and prints the error that comes back.

Options:

- `--simulations N`: number of paths in the first run (default 100000)
- `--extra N`: number of paths added in the second run (default 50000)
- `--seed N`: random seed for reproducible output (default: unseeded)

The command exits with status 1 and writes `Error: ...` to standard error if
pricing fails, for example when `--simulations` is zero or negative.

`python -m mcpricer.cli` does the same thing.

## Library use

```python
from mcpricer.option import Option, OptionType
from mcpricer.montecarlo import MonteCarlo, PriceNotCalculatedError

call = Option(OptionType.CALL, 100.0, 105.0, 1.0, 0.05, 0.20)
print(call)
print(call.payoff(120.0))  # 15.0

pricer = MonteCarlo(call, 100_000, seed=42)
price = pricer.calculate_price()
low, high = pricer.confidence_interval()
print(price, low, high, pricer.standard_error(), pricer.value_at_risk())

# Add paths to the existing estimate
price = pricer.run_more_simulations(50_000)
print(price, pricer.num_simulations, pricer.last_run_duration)
```

### `Option`

`Option(type, stock_price, strike_price, maturity_time, risk_free_rate, volatility)`
is a frozen dataclass. `type` is `OptionType.CALL` or `OptionType.PUT`, and
`maturity_time` is in years. The stock price, strike, maturity and volatility
must all be positive, or `ValueError` is raised. The risk-free rate may be
negative.

- `payoff(final_price)` returns `max(final_price - strike, 0)` for a call and
  `max(strike - final_price, 0)` for a put.
- `str(option)` gives a multi-line summary with two decimals. The rate and the
  volatility are shown as percentages.

### `MonteCarlo`

`MonteCarlo(option, num_simulations=100_000, seed=None)` raises `ValueError`
if `num_simulations` is zero or negative. If you pass a seed, the results are
reproducible.

- `calculate_price()` simulates the paths and returns the discounted mean
  payoff. Later calls return the cached value and do not simulate again.
- `confidence_interval()` returns `(lower, upper)`, which is the price ±1.96
  standard errors.
- `standard_error()` returns the Bessel-corrected standard error of the mean
  payoff. It returns `nan` when fewer than two paths were simulated.
- `value_at_risk()` returns the payoff at the 5% quantile of the sorted
  simulated payoffs.
- `run_more_simulations(additional_simulations)` simulates further paths and
  folds them into the estimate. It returns the new price. A negative count
  raises `ValueError`.
- The read-only properties are `option`, `num_simulations`,
  `last_run_duration` (wall-clock seconds of the last run) and
  `price_calculated`.

`confidence_interval()`, `standard_error()`, `value_at_risk()` and
`run_more_simulations()` raise `PriceNotCalculatedError`, a subclass of
`RuntimeError`, until `calculate_price()` has been called.

## What it does not do

- It prices European options only. There is no early exercise and no
  closed-form Black-Scholes price to compare against.
- It simulates only the terminal stock price. It does not generate or store
  full price paths over time.
- The command line always prices the same built-in sample call. You cannot
  pass option parameters to it. To price other contracts, use the library.