"""Frog encoding, random population generation and knapsack fitness."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

from frogleap.config import Item

Frog = tuple[bool, ...]


def evaluate_fitness(frog: Sequence[bool], items: Sequence[Item], max_weight: int) -> int:
    """Total price of the chosen items, or 0 when their weight exceeds the limit."""
    if len(frog) > len(items):
        raise ValueError(f"frog has {len(frog)} genes but only {len(items)} items exist")
    chosen = [item for gene, item in zip(frog, items) if gene]
    total_weight = sum(item.weight for item in chosen)
    if total_weight > max_weight:
        return 0
    return sum(item.price for item in chosen)


def generate_random_frog(size: int, rng: random.Random | None = None) -> Frog:
    """A frog of ``size`` genes, each chosen uniformly from 0 and 1."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = rng or random.Random()
    return tuple(bool(rng.randint(0, 1)) for _ in range(size))


def generate_population(
    frogs_num: int, items_num: int, rng: random.Random | None = None
) -> list[Frog]:
    """A list of ``frogs_num`` random frogs with ``items_num`` genes each."""
    if frogs_num < 0:
        raise ValueError("frogs_num must not be negative")
    rng = rng or random.Random()
    return [generate_random_frog(items_num, rng) for _ in range(frogs_num)]


def evaluate_population(
    population: Iterable[Sequence[bool]], items: Sequence[Item], max_weight: int
) -> list[int]:
    """Fitness of every frog in the population, in order."""
    return [evaluate_fitness(frog, items, max_weight) for frog in population]


def format_frog(frog: Iterable[bool]) -> str:
    """The frog's genes as a string of 0 and 1 characters."""
    return "".join("1" if gene else "0" for gene in frog)