"""The watcher that ends the simulation on a death or when everyone is full."""

from __future__ import annotations

import time

from philo.table import Philosopher, State, Table, get_time_ms

_POLL_SECONDS = 0.001


def check_death(philo: Philosopher) -> bool:
    """Return True if the philosopher starved or the simulation already ended.

    The first death ends the simulation and is announced.
    """
    table = philo.table
    with table.meal_lock:
        since_last_meal = get_time_ms() - philo.last_meal_time
    if since_last_meal > table.settings.time_to_die:
        if table.end():
            table.print_status(philo, "died", True)
            philo.state = State.DEAD
        return True
    return False


def _still_hungry(philo: Philosopher) -> bool:
    """Whether the philosopher has eaten fewer meals than required.

    A philosopher who is full is marked FULL while the simulation runs.
    """
    table = philo.table
    with table.meal_lock:
        if philo.meals_eaten < table.settings.num_must_eat:
            return True
    if not table.is_over():
        philo.state = State.FULL
    return False


def check_all_full(table: Table) -> bool:
    """End the simulation and return True once every philosopher ate enough.

    Always False when no meal limit was set.
    """
    if table.settings.num_must_eat is None:
        return False
    if any(_still_hungry(philo) for philo in table.philosophers):
        return False
    table.end()
    return True


def monitoring_routine(table: Table) -> None:
    """Watch the table until someone dies, everyone is full, or it is stopped."""
    while True:
        for philo in table.philosophers:
            if check_death(philo) or check_all_full(table):
                return
        time.sleep(_POLL_SECONDS)
        if table.is_over():
            return