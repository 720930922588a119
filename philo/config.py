"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

MAX_PHILOSOPHERS = 200

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot start a simulation.

    ``message`` is the error line to show (or ``None`` when only the usage
    text applies) and ``show_usage`` tells whether the usage text follows it.
    """

    def __init__(self, message: Optional[str], show_usage: bool = True) -> None:
        super().__init__(message or "invalid arguments")
        self.message = message
        self.show_usage = show_usage


@dataclass(frozen=True)
class Settings:
    """Simulation parameters; times are in milliseconds.

    ``num_must_eat`` is ``None`` when no meal limit was given.
    """

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    num_must_eat: Optional[int] = None


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way: skip whitespace, take one sign,
    then as many decimal digits as follow. Anything else yields 0 digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return sign * value


def usage_text() -> str:
    """Return the two-line usage message."""
    return (
        "Usage: ./philo number_of_philosophers time_to_die time_to_eat "
        "time_to_sleep [number_of_times_each_philosopher_must_eat]\n"
        "All time arguments should be in milliseconds."
    )


def parse_args(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from the arguments after the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError(None, show_usage=True)
    num_philos, time_to_die, time_to_eat, time_to_sleep = (
        parse_int(arg) for arg in args[:4]
    )
    num_must_eat = parse_int(args[4]) if len(args) == 5 else None
    if (
        num_philos <= 0
        or time_to_die <= 0
        or time_to_eat <= 0
        or time_to_sleep <= 0
        or (num_must_eat is not None and num_must_eat <= 0)
    ):
        raise ArgumentError("Error: Invalid arguments.", show_usage=True)
    if num_philos > MAX_PHILOSOPHERS:
        raise ArgumentError(
            f"Error: Number of philosophers cannot exceed {MAX_PHILOSOPHERS}.",
            show_usage=False,
        )
    return Settings(num_philos, time_to_die, time_to_eat, time_to_sleep, num_must_eat)