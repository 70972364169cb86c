"""Command-line argument parsing for the simulation."""

from dataclasses import dataclass
import re

MAX_PHILOSOPHERS = 250
_INT_MAX = 2**31 - 1
_NUMBER = re.compile(r"[ \f\n\r\t\v]*([+-]?)([0-9]*)")


class ArgumentError(Exception):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation run; times are in milliseconds."""

    nb_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_eat: int | None = None


def parse_number(text):
    """Parse a leading non-negative integer, ignoring trailing text.

    Leading whitespace and a ``+`` sign are accepted; text without digits
    yields 0. A ``-`` sign or a value too large for an int is rejected.
    """
    match = _NUMBER.match(text)
    sign, digits = match.groups()
    if sign == "-":
        raise ArgumentError("Invalid argument")
    value = int(digits) if digits else 0
    if value > _INT_MAX:
        raise ArgumentError("Invalid argument")
    return value


def parse_args(args):
    """Build a Config from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError("Wrong number of arguments")
    nb_philo, time_to_die, time_to_eat, time_to_sleep = (
        parse_number(arg) for arg in args[:4]
    )
    max_eat = parse_number(args[4]) if len(args) == 5 else None
    if nb_philo < 1 or nb_philo > MAX_PHILOSOPHERS:
        raise ArgumentError("Invalid argument")
    return Config(nb_philo, time_to_die, time_to_eat, time_to_sleep, max_eat)