"""European option contracts and their payoffs at maturity."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class OptionType(enum.Enum):
    """The two standard kinds of option."""

    CALL = "call"
    PUT = "put"


@dataclass(frozen=True)
class Option:
    """A European option described by its Black-Scholes parameters.

    Stock price, strike, time to maturity (in years) and volatility must be
    positive. The risk-free rate may be negative.
    """

    type: OptionType
    stock_price: float
    strike_price: float
    maturity_time: float
    risk_free_rate: float
    volatility: float

    def __post_init__(self) -> None:
        if (
            self.stock_price <= 0
            or self.strike_price <= 0
            or self.maturity_time <= 0
            or self.volatility <= 0
        ):
            raise ValueError("Parameters S, K, T, and sigma must be positive.")

    def payoff(self, final_price: float) -> float:
        """Return the payoff at maturity for the given underlying price."""
        if self.type is OptionType.CALL:
            return max(final_price - self.strike_price, 0.0)
        return max(self.strike_price - final_price, 0.0)

    def __str__(self) -> str:
        kind = "Call" if self.type is OptionType.CALL else "Put"
        return (
            "Option:\n"
            f"Type: {kind}\n"
            f"Stock Price: {self.stock_price:.2f}\n"
            f"Strike Price: {self.strike_price:.2f}\n"
            f"Time to Maturity: {self.maturity_time:.2f} years\n"
            f"Risk Free Rate: {self.risk_free_rate * 100:.2f}%\n"
            f"Volatility: {self.volatility * 100:.2f}%\n"
        )