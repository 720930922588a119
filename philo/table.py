"""Shared state of the simulation: philosophers, forks and the locks guarding them."""

from __future__ import annotations

import enum
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from philo.config import Settings


def get_time_ms() -> int:
    """Current wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class State(enum.Enum):
    EATING = enum.auto()
    SLEEPING = enum.auto()
    THINKING = enum.auto()
    DEAD = enum.auto()
    FULL = enum.auto()


@dataclass(eq=False)
class Philosopher:
    """One seat at the table. ``right_fork`` is ``None`` for a lone philosopher."""

    id: int
    table: "Table" = field(repr=False)
    left_fork: threading.Lock = field(repr=False)
    right_fork: Optional[threading.Lock] = field(repr=False)
    meals_eaten: int = 0
    last_meal_time: int = 0
    state: State = State.THINKING
    thread: Optional[threading.Thread] = field(default=None, repr=False)


class Table:
    """Forks, philosophers and synchronisation for one simulation run."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = 0
        self.forks: List[threading.Lock] = [
            threading.Lock() for _ in range(settings.num_philos)
        ]
        self.print_lock = threading.Lock()
        self.end_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self._should_end = False
        count = settings.num_philos
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=index + 1,
                table=self,
                left_fork=fork,
                right_fork=None if count == 1 else self.forks[(index + 1) % count],
            )
            for index, fork in enumerate(self.forks)
        ]

    def is_over(self) -> bool:
        """Whether the simulation has been told to stop."""
        with self.end_lock:
            return self._should_end

    def end(self) -> bool:
        """Mark the simulation as over; return True if this call ended it."""
        with self.end_lock:
            if self._should_end:
                return False
            self._should_end = True
            return True

    def print_status(
        self, philosopher: Philosopher, status: str, override: bool = False
    ) -> None:
        """Write a timestamped status line unless the simulation is over.

        With ``override`` the line is written even after the end (used for deaths).
        """
        if self.is_over() and not override:
            return
        elapsed = get_time_ms() - self.start_time
        with self.print_lock:
            if override or not self.is_over():
                self.out.write(f"{elapsed} {philosopher.id} {status}\n")
                self.out.flush()

    def sleep(self, time_ms: int) -> None:
        """Sleep for ``time_ms`` milliseconds, waking early if the simulation ends."""
        start = get_time_ms()
        remaining_us = time_ms * 1000
        while remaining_us > 0 and not self.is_over():
            elapsed = get_time_ms() - start
            remaining_us = time_ms * 1000 - elapsed * 1000
            if remaining_us > 100_000:
                time.sleep(remaining_us / 2 / 1_000_000)
            elif remaining_us > 0:
                time.sleep(remaining_us / 1_000_000)