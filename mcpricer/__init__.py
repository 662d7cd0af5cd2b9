"""Monte Carlo pricing of European options, with a command-line demonstration."""

__version__ = "0.1.0"
__all__ = ["option", "montecarlo", "cli"]