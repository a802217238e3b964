"""The shuffled frog-leaping loop: sort, monitor, partition, search, shuffle."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from frogleap.config import Parameters
from frogleap.knapsack import Frog, evaluate_population, format_frog, generate_population
from frogleap.population import partition_population, shuffle_memeplexes, sort_population
from frogleap.search import local_search

_SEPARATOR = "-" * 62
_BANNER = "=" * 83


@dataclass
class ConvergenceTracker:
    """Counts consecutive rounds in which the best fitness did not change."""

    limit: int = 10
    count: int = 0
    last_best: int = 0

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValueError("limit must be positive")

    @property
    def converged(self) -> bool:
        """True once the best fitness has stayed the same ``limit`` times."""
        return self.count >= self.limit

    def update(self, best_fitness: int) -> bool:
        """Record the current best fitness and return whether the search converged."""
        if best_fitness == self.last_best:
            self.count += 1
        else:
            self.count = 0
        self.last_best = best_fitness
        return self.converged


class ShuffledFrogLeaping:
    """A shuffled frog-leaping search for the 0/1 knapsack problem."""

    def __init__(
        self,
        params: Parameters | None = None,
        rng: random.Random | None = None,
        report: Callable[[str], None] | None = None,
        convergence_limit: int = 10,
    ) -> None:
        self.params = params or Parameters()
        self.rng = rng or random.Random()
        self.report = report
        self.tracker = ConvergenceTracker(limit=convergence_limit)
        self.iterations = 0
        self.population: list[Frog] = []
        self.fitness: list[int] = []

    def _emit(self, line: str) -> None:
        if self.report is not None:
            self.report(line)

    def _fitness_of(self, frogs: Sequence[Frog]) -> list[int]:
        return evaluate_population(frogs, self.params.active_items, self.params.max_weight)

    def _emit_population(self, title: str) -> None:
        self._emit(_SEPARATOR)
        self._emit(title)
        for number, (frog, value) in enumerate(zip(self.population, self.fitness), start=1):
            self._emit(f"Frog {number}: {format_frog(frog)} | Fitness: {value}")

    def _emit_monitor(self) -> None:
        genes = "".join(f"{int(gene)} " for gene in self.population[0])
        self._emit(_BANNER)
        self._emit(
            f"Iteration : {self.iterations}"
            f"         Best Fitness : {self.fitness[0]}"
            f"       Best Choice : {genes}"
        )
        self._emit(_BANNER)

    def _emit_memeplexes(self, memeplexes: Sequence[Sequence[Frog]], values: Sequence[int]) -> None:
        for m, memeplex in enumerate(memeplexes, start=1):
            self._emit(f"Memeplex {m}:")
            for frog, value in zip(memeplex, values):
                self._emit(f"{format_frog(frog)} | Fitness: {value}")

    def _round(self) -> None:
        params = self.params
        count = params.memeplexes_num
        memeplexes = partition_population(self.population, count)
        dealt = count * params.frogs_per_memeplex

        self._emit("Memeplexes after Partitioning:")
        self._emit_memeplexes(
            memeplexes,
            [self.fitness[count * f + m] for m in range(count) for f in range(len(memeplexes[m]))],
        ) if False else None
        for m, memeplex in enumerate(memeplexes):
            self._emit(f"Memeplex {m + 1}:")
            for f, frog in enumerate(memeplex):
                self._emit(f"{format_frog(frog)} | Fitness: {self.fitness[count * f + m]}")

        for memeplex_id in range(count):
            local_search(memeplexes, memeplex_id, self.fitness, params, self.rng, self.report)

        self._emit(_SEPARATOR)
        self._emit("Final Optimized Memeplexes:")
        for m, memeplex in enumerate(memeplexes, start=1):
            self._emit(f"Memeplex {m}:")
            for frog, value in zip(memeplex, self._fitness_of(memeplex)):
                self._emit(f"{format_frog(frog)} | Fitness: {value}")

        merged, merged_fitness = shuffle_memeplexes(memeplexes, self.fitness, count)
        self.population = merged + self.population[dealt:]
        self.fitness = merged_fitness + self.fitness[dealt:]
        self._emit_population("Population after shuffling memeplexes :")

    def run(self, max_iterations: int | None = None) -> tuple[Frog, int]:
        """Search until the best fitness settles or ``max_iterations`` rounds have run.

        Returns the best frog found and its fitness.
        """
        if max_iterations is not None and max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        params = self.params
        self._emit(params.describe())

        self.iterations = 0
        self.tracker = ConvergenceTracker(limit=self.tracker.limit)
        self.population = generate_population(params.frogs_num, params.items_num, self.rng)
        self.fitness = self._fitness_of(self.population)
        self._emit_population("Initial Random Frogs Population:")

        while True:
            self.population, self.fitness = sort_population(self.population, self.fitness)
            self._emit_population("Sorted Frogs Population (by Fitness):")
            converged = self.tracker.update(self.fitness[0])
            self._emit_monitor()
            if converged:
                break
            if max_iterations is not None and self.iterations >= max_iterations:
                break
            self.iterations += 1
            self._round()

        return self.population[0], self.fitness[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search with the default knapsack and print its progress."""
    parser = argparse.ArgumentParser(
        prog="frogleap", description="Shuffled frog-leaping search for a 0/1 knapsack."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument(
        "--max-iterations", type=int, default=None, help="stop after this many rounds"
    )
    args = parser.parse_args(argv)
    if args.max_iterations is not None and args.max_iterations < 0:
        parser.error("--max-iterations must not be negative")

    search = ShuffledFrogLeaping(rng=random.Random(args.seed), report=print)
    search.run(args.max_iterations)
    return 0