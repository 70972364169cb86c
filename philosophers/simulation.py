"""The dining philosophers: one thread per philosopher plus a death monitor."""

import sys
import threading
import time

from .timing import now_ms, sleep_ms


class Philosopher:
    """One diner at the table, run in its own thread."""

    def __init__(self, table, position):
        self.table = table
        self.index = position + 1
        self.nb_eat = 0
        self.last_meal = 0
        forks = table.forks
        own = forks[position]
        neighbour = forks[(position + 1) % len(forks)]
        if position % 2 == 0:
            self.left_fork, self.right_fork = own, neighbour
        else:
            self.left_fork, self.right_fork = neighbour, own

    def run(self):
        """Alternate eating, sleeping and thinking until done or someone dies."""
        config = self.table.config
        self._wait_for_start()
        if self.index % 2 == 0:
            self._sleep()
        while True:
            with self.table.message:
                if self.table.dead:
                    break
            self._eat()
            if self.nb_eat == config.max_eat:
                break
            self._sleep()

    def _wait_for_start(self):
        table = self.table
        with table.message:
            if self.index == 1:
                sleep_ms(table.config.nb_philo)
                table.start = now_ms()

    def _sleep(self):
        config = self.table.config
        self.table._announce(self.index, "is sleeping")
        sleep_ms(config.time_to_sleep)
        self.table._announce(self.index, "is thinking")
        if config.nb_philo % 2 == 1:
            sleep_ms(5)

    def _eat(self):
        table = self.table
        with self.left_fork:
            table._announce(self.index, "has taken a fork")
            with self.right_fork:
                table._announce(self.index, "has taken a fork")
                table._announce(self.index, "is eating")
                with table.message:
                    self.last_meal = now_ms()
                    self.nb_eat += 1
                sleep_ms(table.config.time_to_eat)


class Simulation:
    """A table of two or more philosophers sharing forks."""

    def __init__(self, config, out=None):
        if config.nb_philo < 2:
            raise ValueError("a simulation needs at least two philosophers")
        self.config = config
        self.out = sys.stdout if out is None else out
        self.message = threading.Lock()
        self.forks = [threading.Lock() for _ in range(config.nb_philo)]
        self.dead = False
        self.start = now_ms()
        self.philosophers = [
            Philosopher(self, position) for position in range(config.nb_philo)
        ]

    def _announce(self, index, text):
        with self.message:
            if not self.dead:
                self.out.write(f"{now_ms() - self.start}\t{index} {text}\n")

    def _check_death(self, position, philosopher):
        with self.message:
            if (
                philosopher.last_meal == 0
                or philosopher.nb_eat == self.config.max_eat
            ):
                return
        with self.message:
            if now_ms() - philosopher.last_meal > self.config.time_to_die:
                if not self.dead:
                    elapsed = now_ms() - self.start
                    self.out.write(f"{elapsed}\t{position + 1} died\n")
                self.dead = True

    def monitor(self):
        """Watch for starvation until someone dies or a diner is sated."""
        while not self.dead:
            for position, philosopher in enumerate(self.philosophers):
                self._check_death(position, philosopher)
                with self.message:
                    if philosopher.nb_eat == self.config.max_eat:
                        return
            time.sleep(0)

    def run(self):
        """Run all philosophers to completion; return True if one died."""
        threads = [
            threading.Thread(target=philosopher.run, name=f"philo-{philosopher.index}")
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.monitor()
        for thread in threads:
            thread.join()
        return self.dead


def run_single(config, out):
    """A lone philosopher holds one fork and starves; always returns True."""
    out.write("0\t1 has taken a fork\n")
    time.sleep(config.time_to_die / 1_000_000)
    out.write(f"{config.time_to_die}\t1 died\n")
    return True


def simulate(config, out=None):
    """Run the simulation for ``config``; return True if a philosopher died."""
    out = sys.stdout if out is None else out
    if config.nb_philo == 1:
        return run_single(config, out)
    return Simulation(config, out).run()