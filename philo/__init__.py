"""Dining philosophers simulation with threads, fork locks and a monitor."""

__version__ = "1.0.0"

__all__ = ["actions", "config", "monitoring", "routine", "simulation", "table"]