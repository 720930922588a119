"""Starting, running and tearing down a dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
from typing import Optional, Sequence, TextIO

from philo.config import ArgumentError, Settings, parse_args, usage_text
from philo.monitoring import monitoring_routine
from philo.routine import philosopher_routine
from philo.table import Table, get_time_ms


def _report(table: Table, message: str) -> None:
    with table.print_lock:
        table.out.write(message + "\n")
        table.out.flush()


def join_philosophers(table: Table) -> None:
    """Wait for every philosopher thread that was started."""
    for philo in table.philosophers:
        if philo.thread is not None:
            philo.thread.join()


def _start_philosophers(table: Table, start_time: int) -> None:
    for philo in table.philosophers:
        philo.last_meal_time = start_time
        thread = threading.Thread(
            target=philosopher_routine,
            args=(philo,),
            name=f"philosopher-{philo.id}",
            daemon=True,
        )
        try:
            thread.start()
        except RuntimeError:
            _report(table, f"Error: could not start thread for philo {philo.id}")
            table.end()
            join_philosophers(table)
            raise
        philo.thread = thread


def _start_monitor(table: Table) -> threading.Thread:
    monitor = threading.Thread(
        target=monitoring_routine, args=(table,), name="monitor", daemon=True
    )
    try:
        monitor.start()
    except RuntimeError:
        _report(table, "Error: could not start monitor thread")
        table.end()
        raise
    return monitor


def launch_threads(table: Table) -> threading.Thread:
    """Start the clock, every philosopher and the monitor; return the monitor thread.

    Raises ``RuntimeError`` if a thread cannot be started; the simulation is
    then marked as over.
    """
    start_time = get_time_ms()
    table.start_time = start_time
    _start_philosophers(table, start_time)
    return _start_monitor(table)


def run(settings: Settings, out: Optional[TextIO] = None) -> Table:
    """Run a whole simulation to its end and return the finished table."""
    table = Table(settings, out)
    try:
        monitor = launch_threads(table)
        monitor.join()
    finally:
        table.end()
        join_philosophers(table)
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as error:
        if error.message:
            print(error.message)
        if error.show_usage:
            print(usage_text())
        return 1
    try:
        run(settings)
    except RuntimeError:
        return 1
    return 0