"""Command-line demonstration of the Monte Carlo option pricer."""

from __future__ import annotations

import argparse
import sys

from mcpricer.montecarlo import MonteCarlo
from mcpricer.option import Option, OptionType


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mcpricer",
        description="Price a sample European call option by Monte Carlo simulation.",
    )
    parser.add_argument(
        "--simulations",
        type=int,
        default=100_000,
        help="number of simulated paths (default: 100000)",
    )
    parser.add_argument(
        "--extra",
        type=int,
        default=50_000,
        help="additional paths for the refinement run (default: 50000)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and return the process exit status."""
    args = _parse_args(argv)
    try:
        call = Option(OptionType.CALL, 100.0, 105.0, 1.0, 0.05, 0.20)
        print(call)

        pricer = MonteCarlo(call, args.simulations, seed=args.seed)
        price = pricer.calculate_price()
        print(f"Option Price: ${price:.2f}")

        lower, upper = pricer.confidence_interval()
        print(f"95% Confidence Interval: [${lower:.2f}, ${upper:.2f}]")
        print(f"Standard Error: ${pricer.standard_error():.2f}")
        print(f"5% VaR: ${pricer.value_at_risk():.2f}")

        print(f"\nRunning {args.extra:,} more simulations...")
        new_price = pricer.run_more_simulations(args.extra)
        print(f"Updated Price: ${new_price:.2f}")
        print(f"Last run took: {pricer.last_run_duration:.2f} seconds")

        print("\nDemonstrating error handling...")
        try:
            Option(OptionType.PUT, -100, 50, 1, 0.05, 0.20)
        except ValueError as exc:
            print(f"Caught error: {exc}")
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())