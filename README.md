# philo

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. The forks between neighbours are locks. A monitor thread watches
for starvation. It ends the run when a philosopher dies or when everyone has
eaten enough.

## Installation

```
pip install .
```

## Command

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Every value has to come out as a positive
integer. There can be no more than 200 philosophers. Numbers are read
leniently:

- leading whitespace and one `+` or `-` sign are accepted;
- reading stops at the first character that is not a digit, so `12ms` counts
  as 12;
- text with no digits counts as 0, and 0 is rejected.

Each event is printed on one line. The line holds the milliseconds since the
start, then the philosopher's number (counting from 1), then the event:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
```

The events are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. Once the run is over, no more lines are printed, except the single
`died` line.

A philosopher takes both forks before eating. Even-numbered philosophers take
the left fork first, and odd-numbered ones the right fork first. They also
start a little later than the odd-numbered ones.

A lone philosopher has only one fork. That philosopher takes it and then waits
until starving.

The run ends when a philosopher goes more than `time_to_die` ms without
starting a meal. If the fifth argument is given, the run also ends once every
philosopher has eaten at least that many times. If no limit is given and nobody
starves, the run goes on until it is interrupted.

Invalid arguments print an error line and usually the usage text, to standard
output. The command then exits with status 1. It also exits with status 1 if a
thread cannot be started. In every other case it exits with status 0.

Examples:

```
philo 1 800 200 200        # one fork only: the philosopher dies
philo 5 800 200 200        # nobody should die; runs until interrupted
philo 5 800 200 200 7      # stops once everyone has eaten 7 times
philo 4 310 200 100        # a philosopher dies
```

## Use from Python

```python
import io
from philo.config import parse_args
from philo.simulation import run

settings = parse_args(["5", "800", "200", "200", "3"])
buffer = io.StringIO()
table = run(settings, buffer)
print(buffer.getvalue())
print([p.meals_eaten for p in table.philosophers])
```

The modules are:

- `philo.config`
  - `parse_args(args)` takes the arguments after the program name and returns
    a frozen `Settings`. When no meal limit is given, its `num_must_eat` is
    `None`.
  - `parse_args` raises `ArgumentError` (a `ValueError`) for bad arguments.
    The error has a `message` and a `show_usage` flag.
  - `parse_int(text)` is the lenient number reader.
  - `usage_text()` returns the usage message.
- `philo.table`
  - `Table(settings, out=None)` holds the forks, the `Philosopher` seats and
    the locks. It writes to `out`, which defaults to standard output.
  - It provides `print_status`, `is_over`, `end` and `sleep`. The `sleep`
    method wakes early once the run is over.
  - `State` lists a philosopher's states.
  - `get_time_ms()` gives the wall-clock time in milliseconds.
- `philo.actions`
  - `take_forks`, `drop_forks`, `eat`, `sleep_philo` and `think`.
- `philo.routine`
  - `philosopher_routine(philo)` is the body of a philosopher thread.
- `philo.monitoring`
  - `check_death(philo)`, `check_all_full(table)` and `monitoring_routine(table)`.
- `philo.simulation`
  - `launch_threads(table)` starts the clock, the philosophers and the
    monitor, and returns the monitor thread.
  - `join_philosophers(table)` waits for the philosopher threads.
  - `run(settings, out=None)` runs a whole simulation and returns the
    finished `Table`.
  - `main(argv=None)` is the command.

## What it does not do

The simulation only prints text lines. It does not draw the table or keep
statistics beyond each philosopher's `meals_eaten`, `last_meal_time` and
`state`. It has no time limit of its own.