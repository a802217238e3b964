"""Ordering the population and moving frogs between it and the memeplexes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def sort_population(
    population: Sequence[T], fitness: Sequence[int]
) -> tuple[list[T], list[int]]:
    """Return the population and its fitness ordered from the fittest frog down."""
    if len(population) != len(fitness):
        raise ValueError(
            f"population has {len(population)} frogs but {len(fitness)} fitness values"
        )
    ranked = sorted(zip(population, fitness), key=lambda pair: pair[1], reverse=True)
    return [frog for frog, _ in ranked], [value for _, value in ranked]


def partition_population(population: Sequence[T], memeplexes_num: int) -> list[list[T]]:
    """Deal the frogs out to memeplexes in turn.

    Frog ``memeplexes_num * f + m`` becomes frog ``f`` of memeplex ``m``; frogs left
    over after every memeplex holds the same number are not dealt.
    """
    if memeplexes_num <= 0:
        raise ValueError("memeplexes_num must be positive")
    per_memeplex = len(population) // memeplexes_num
    return [
        list(population[m::memeplexes_num][:per_memeplex]) for m in range(memeplexes_num)
    ]


def shuffle_memeplexes(
    memeplexes: Sequence[Sequence[T]], fitness: Sequence[int], memeplexes_num: int
) -> tuple[list[T], list[int]]:
    """Merge the memeplexes back into one population, memeplex after memeplex.

    ``fitness`` is laid out as the population was when it was partitioned, so the
    fitness of frog ``f`` of memeplex ``m`` is ``fitness[memeplexes_num * f + m]``.
    The returned fitness list follows the merged population.
    """
    if len(memeplexes) != memeplexes_num:
        raise ValueError(
            f"expected {memeplexes_num} memeplexes but {len(memeplexes)} were given"
        )
    population: list[T] = []
    merged_fitness: list[int] = []
    for m, memeplex in enumerate(memeplexes):
        for f, frog in enumerate(memeplex):
            population.append(frog)
            merged_fitness.append(fitness[memeplexes_num * f + m])
    return population, merged_fitness