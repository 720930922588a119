"""What a philosopher does at the table: take forks, eat, sleep and think."""

from __future__ import annotations

from philo.table import Philosopher, State, get_time_ms

FORK_TAKEN = "has taken a fork"


def drop_forks(philo: Philosopher) -> None:
    """Release the right fork (when there is one), then the left fork."""
    if philo.right_fork is not None:
        philo.right_fork.release()
    philo.left_fork.release()


def take_forks(philo: Philosopher) -> None:
    """Acquire both forks.

    Even-numbered philosophers reach left first and odd-numbered ones right
    first, which keeps the table from deadlocking.
    """
    if philo.id % 2 == 0:
        first, second = philo.left_fork, philo.right_fork
    else:
        first, second = philo.right_fork, philo.left_fork
    table = philo.table
    for fork in (first, second):
        fork.acquire()
        table.print_status(philo, FORK_TAKEN)


def eat(philo: Philosopher) -> None:
    """Eat for ``time_to_eat`` ms, record the meal, then put the forks down."""
    table = philo.table
    if table.is_over():
        return
    table.print_status(philo, "is eating")
    philo.state = State.EATING
    with table.meal_lock:
        philo.last_meal_time = get_time_ms()
        philo.meals_eaten += 1
    table.sleep(table.settings.time_to_eat)
    drop_forks(philo)
    philo.state = State.SLEEPING


def sleep_philo(philo: Philosopher) -> None:
    """Sleep for ``time_to_sleep`` ms."""
    table = philo.table
    if table.is_over():
        return
    table.print_status(philo, "is sleeping")
    table.sleep(table.settings.time_to_sleep)


def think(philo: Philosopher) -> None:
    """Think, pausing briefly when eating takes longer than sleeping.

    The pause is skipped if it would bring the philosopher to starvation.
    """
    table = philo.table
    if table.is_over():
        return
    table.print_status(philo, "is thinking")
    philo.state = State.THINKING
    settings = table.settings
    if settings.num_philos > 1 and settings.time_to_eat > settings.time_to_sleep:
        think_time = max((settings.time_to_eat - settings.time_to_sleep) // 2, 1)
        with table.meal_lock:
            since_last_meal = get_time_ms() - philo.last_meal_time
        if since_last_meal + think_time < settings.time_to_die:
            table.sleep(think_time)