"""Command-line entry point: philosophers N die eat sleep [meals]."""

import sys

from .parsing import ArgumentError, parse_args
from .simulation import simulate


def main(argv=None):
    """Parse arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ArgumentError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    simulate(config, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())