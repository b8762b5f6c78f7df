"""Runtime-configurable state machines with traffic light and elevator simulations."""

__version__ = "1.0.0"