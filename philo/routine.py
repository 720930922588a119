"""The life of one philosopher thread."""

from __future__ import annotations

from philo.actions import FORK_TAKEN, drop_forks, eat, sleep_philo, take_forks, think
from philo.table import Philosopher


def _handle_single_philosopher(philo: Philosopher) -> None:
    """A lone philosopher holds one fork and waits, unable to eat."""
    table = philo.table
    table.print_status(philo, FORK_TAKEN)
    table.sleep(table.settings.time_to_die * 2)


def _perform_cycle(philo: Philosopher) -> bool:
    """Run one take-eat-sleep-think cycle; return True when the simulation ended."""
    table = philo.table
    take_forks(philo)
    if table.is_over():
        drop_forks(philo)
        return True
    eat(philo)
    if table.is_over():
        return True
    sleep_philo(philo)
    if table.is_over():
        return True
    think(philo)
    return False


def philosopher_routine(philo: Philosopher) -> None:
    """Cycle through the philosopher's actions until the simulation ends."""
    table = philo.table
    if philo.id % 2 == 0:
        table.sleep(table.settings.time_to_eat // 10)
    if table.settings.num_philos == 1:
        _handle_single_philosopher(philo)
        return
    while not table.is_over():
        if _perform_cycle(philo):
            break