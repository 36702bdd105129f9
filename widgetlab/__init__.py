"""State, rules and geometry for an egg timer, a teleprompter, pivot tables, a button grid and an eclipse sketch."""

__version__ = "0.1.0"
__all__ = ["__version__"]