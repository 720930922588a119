import io
import threading
import time

from philo.config import Settings
from philo.table import Philosopher, State, Table, get_time_ms


def make_table(count=3):
    out = io.StringIO()
    return Table(Settings(count, 800, 200, 200), out), out


def test_get_time_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    now = get_time_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_philosophers_are_numbered_from_one():
    table, _ = make_table(4)
    assert [p.id for p in table.philosophers] == [1, 2, 3, 4]
    assert all(p.state is State.THINKING for p in table.philosophers)
    assert all(p.meals_eaten == 0 and p.last_meal_time == 0 for p in table.philosophers)
    assert all(p.thread is None for p in table.philosophers)


def test_forks_are_shared_around_the_table():
    table, _ = make_table(5)
    assert len(table.forks) == 5
    for index, philo in enumerate(table.philosophers):
        assert philo.left_fork is table.forks[index]
        assert philo.right_fork is table.forks[(index + 1) % 5]
        assert philo.table is table
    assert table.philosophers[-1].right_fork is table.philosophers[0].left_fork


def test_lone_philosopher_has_one_fork():
    table, _ = make_table(1)
    (philo,) = table.philosophers
    assert philo.left_fork is table.forks[0]
    assert philo.right_fork is None


def test_end_is_reported_once():
    table, _ = make_table()
    assert table.is_over() is False
    assert table.end() is True
    assert table.is_over() is True
    assert table.end() is False


def test_print_status_format():
    table, out = make_table()
    table.start_time = get_time_ms()
    table.print_status(table.philosophers[1], "is eating")
    elapsed, ident, status = out.getvalue().rstrip("\n").split(" ", 2)
    assert ident == "2"
    assert status == "is eating"
    assert 0 <= int(elapsed) < 1000
    assert out.getvalue().endswith("\n")


def test_print_status_silent_after_end():
    table, out = make_table()
    table.start_time = get_time_ms()
    table.end()
    table.print_status(table.philosophers[0], "is thinking")
    assert out.getvalue() == ""


def test_print_status_override_after_end():
    table, out = make_table()
    table.start_time = get_time_ms()
    table.end()
    table.print_status(table.philosophers[0], "died", True)
    assert out.getvalue().rstrip("\n").split(" ", 2)[1:] == ["1", "died"]


def test_sleep_waits_roughly_requested_time():
    table, _ = make_table()
    start = get_time_ms()
    table.sleep(30)
    elapsed = get_time_ms() - start
    assert elapsed >= 29
    assert table.is_over() is False


def test_sleep_returns_at_once_when_over():
    table, _ = make_table()
    assert table.end() is True
    start = get_time_ms()
    table.sleep(10_000)
    elapsed = get_time_ms() - start
    assert elapsed < 500
    assert table.is_over() is True


def test_sleep_wakes_when_ended_from_another_thread():
    table, _ = make_table()
    timer = threading.Timer(0.05, table.end)
    timer.start()
    start = get_time_ms()
    table.sleep(2_000)
    elapsed = get_time_ms() - start
    timer.join()
    assert elapsed < 1500
    assert table.is_over() is True


def test_philosopher_repr_omits_table():
    table, _ = make_table(2)
    text = repr(table.philosophers[0])
    assert isinstance(table.philosophers[0], Philosopher)
    assert "table" not in text
    assert "id=1" in text