# philosophers

This package simulates the dining philosophers problem. Each philosopher
runs in its own thread. A fork sits between every pair of neighbours, and
each fork is a lock. A philosopher takes two forks, eats, sleeps and then
thinks. A monitor thread watches for starvation and stops the run when a
philosopher dies.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

You can also run it with `python -m philosophers.cli` and the same arguments.

- `number_of_philosophers`: from 1 to 250.
- `time_to_die`, `time_to_eat`, `time_to_sleep`: times in milliseconds.
- `meals`: optional. When it is set, each philosopher stops after eating
  this many times. The monitor stops watching as soon as it sees one
  philosopher who has eaten that many times.

Each event prints as one line. A line holds the milliseconds since the
start, a tab, the philosopher's number and the action:

```
0	1 has taken a fork
0	1 has taken a fork
0	1 is eating
200	1 is sleeping
...
410	3 died
```

The actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Nothing is printed after the first death.

With a single philosopher, the program prints that philosopher taking a
fork at time 0. It then prints the death at `time_to_die`.

### Argument rules

Each number can have leading whitespace and a `+` sign. Any text after
the digits is ignored. An argument with no digits counts as 0.

The program writes `Invalid argument` for any of these:

- a `-` sign;
- a value larger than 2147483647;
- a philosopher count outside 1 to 250.

The program writes `Wrong number of arguments` when it gets fewer than 4
or more than 5 arguments.

In both cases the message goes to standard error and the exit status is 1.

## Library use

```python
import sys
from philosophers.parsing import parse_args
from philosophers.simulation import simulate

config = parse_args(["5", "800", "200", "200", "3"])
died = simulate(config, sys.stdout)
```

- `parsing.parse_args(args)` takes the arguments that follow the program
  name and returns a frozen `Config`. The fields of `Config` are
  `nb_philo`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
  `max_eat`. When no meal count is given, `max_eat` is `None`.
- `parse_args` raises `ArgumentError` when the arguments are invalid.
- `parsing.parse_number(text)` parses a single argument.
- `simulation.simulate(config, out=None)` writes events to `out`, which
  defaults to standard output. It returns `True` if a philosopher died.
- `simulation.Simulation(config, out)` runs a table of two or more
  philosophers. Its `run()` method starts the threads and monitors them,
  and it returns `True` if a philosopher died.
- `simulation.run_single(config, out)` handles the lone philosopher.
- `timing.now_ms()` returns the wall-clock time in milliseconds.
- `timing.sleep_ms(duration)` blocks for at least `duration`
  milliseconds.

## Running the tests

```
pip install .[test]
pytest
```