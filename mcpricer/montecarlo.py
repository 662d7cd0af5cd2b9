"""Monte Carlo pricing of European options under geometric Brownian motion."""

from __future__ import annotations

import math
import random
import time

from mcpricer.option import Option

_Z_95 = 1.96
_VAR_LEVEL = 0.05


class PriceNotCalculatedError(RuntimeError):
    """Raised when statistics are requested before a price was calculated."""


class MonteCarlo:
    """Prices a European option by simulating terminal stock prices.

    Results are cached: the first call to ``calculate_price`` runs the
    simulation, later calls return the stored estimate. More paths can be
    added with ``run_more_simulations``.
    """

    def __init__(
        self,
        option: Option,
        num_simulations: int = 100_000,
        seed: int | None = None,
    ) -> None:
        if num_simulations <= 0:
            raise ValueError("Number of simulations must be positive.")
        self._option = option
        self._num_simulations = num_simulations
        self._rng = random.Random(seed)
        self._payoffs: list[float] = []
        self._last_run_duration = 0.0
        self._price: float | None = None

        self._stock_price = option.stock_price
        self._drift = (
            option.risk_free_rate - 0.5 * option.volatility**2
        ) * option.maturity_time
        self._vol_sqrt_t = option.volatility * math.sqrt(option.maturity_time)
        self._discount = math.exp(-option.risk_free_rate * option.maturity_time)

    @property
    def option(self) -> Option:
        """The option being priced."""
        return self._option

    @property
    def num_simulations(self) -> int:
        """The number of simulated paths."""
        return self._num_simulations

    @property
    def last_run_duration(self) -> float:
        """Wall-clock seconds taken by the last simulation run."""
        return self._last_run_duration

    @property
    def price_calculated(self) -> bool:
        """Whether a price estimate is available."""
        return self._price is not None

    def calculate_price(self) -> float:
        """Return the discounted mean payoff, simulating on first use."""
        if self._price is not None:
            return self._price
        start = time.perf_counter()
        self._payoffs = list(self._simulate_payoffs(self._num_simulations))
        self._price = math.fsum(self._payoffs) / self._num_simulations * self._discount
        self._last_run_duration = time.perf_counter() - start
        return self._price

    def confidence_interval(self) -> tuple[float, float]:
        """Return the 95% confidence interval (lower, upper) of the price."""
        price = self._require_price()
        margin = _Z_95 * self.standard_error()
        return price - margin, price + margin

    def run_more_simulations(self, additional_simulations: int) -> float:
        """Simulate further paths and return the updated price estimate."""
        price = self._require_price()
        if additional_simulations < 0:
            raise ValueError("Number of additional simulations must not be negative.")
        old_count = self._num_simulations
        old_sum = price * old_count / self._discount
        self._num_simulations += additional_simulations

        start = time.perf_counter()
        new_payoffs = list(self._simulate_payoffs(additional_simulations))
        self._payoffs.extend(new_payoffs)
        self._price = (
            (old_sum + math.fsum(new_payoffs)) / self._num_simulations * self._discount
        )
        self._last_run_duration = time.perf_counter() - start
        return self._price

    def standard_error(self) -> float:
        """Return the standard error of the mean payoff (Bessel-corrected)."""
        self._require_price()
        n = len(self._payoffs)
        if n < 2:
            return math.nan
        mean = math.fsum(self._payoffs) / n
        variance = math.fsum((p - mean) ** 2 for p in self._payoffs) / (n - 1)
        return math.sqrt(variance / n)

    def value_at_risk(self) -> float:
        """Return the 5% quantile of the simulated payoff distribution."""
        self._require_price()
        index = int(_VAR_LEVEL * len(self._payoffs))
        return sorted(self._payoffs)[index]

    def _simulate_payoffs(self, count: int):
        payoff = self._option.payoff
        for _ in range(count):
            z = self._rng.gauss(0.0, 1.0)
            yield payoff(self._stock_price * math.exp(self._drift + self._vol_sqrt_t * z))

    def _require_price(self) -> float:
        if self._price is None:
            raise PriceNotCalculatedError(
                "Price must be calculated first. Call calculate_price()"
            )
        return self._price