"""Local search inside a memeplex: choosing frogs and leaping toward better ones."""

from __future__ import annotations

import random
from collections.abc import Callable, MutableSequence, Sequence

from frogleap.config import Parameters
from frogleap.knapsack import Frog, evaluate_fitness, format_frog, generate_random_frog

FitnessFunction = Callable[[Sequence[bool]], int]

_SEPARATOR = "-" * 62


def select_q_frogs(n: int, q: int, rng: random.Random | None = None) -> list[int]:
    """Choose ``q`` distinct frog positions out of ``n``, favouring the lower ones.

    Position ``j`` is weighted ``n - j``, and once a position is chosen it is
    removed from the pool.
    """
    if q < 0:
        raise ValueError("q must not be negative")
    if q > n:
        raise ValueError(f"cannot select {q} frogs out of {n}")
    rng = rng or random.Random()
    pool = [j for j in range(n) for _ in range(n - j)]
    selected: list[int] = []
    for _ in range(q):
        chosen = rng.choice(pool)
        selected.append(chosen)
        pool = [position for position in pool if position != chosen]
    return selected


def find_best_frog(
    memeplex: Sequence[Sequence[bool]], selected: Sequence[int], fitness: FitnessFunction
) -> int:
    """Position of the fittest selected frog; the first one wins a tie."""
    if not selected:
        raise ValueError("no frogs selected")
    return max(selected, key=lambda position: fitness(memeplex[position]))


def find_worst_frog(
    memeplex: Sequence[Sequence[bool]], selected: Sequence[int], fitness: FitnessFunction
) -> int:
    """Position of the least fit selected frog; the first one wins a tie."""
    if not selected:
        raise ValueError("no frogs selected")
    return min(selected, key=lambda position: fitness(memeplex[position]))


def find_global_best_frog(
    memeplexes: Sequence[Sequence[Sequence[bool]]], fitness: FitnessFunction
) -> Sequence[bool] | None:
    """The fittest frog of all memeplexes, or None when no frog has positive fitness."""
    best_frog: Sequence[bool] | None = None
    best_fitness = 0
    for memeplex in memeplexes:
        for frog in memeplex:
            value = fitness(frog)
            if value > best_fitness:
                best_frog, best_fitness = frog, value
    return best_frog


def leap(frog: Sequence[bool], target: Sequence[bool], r: float, s_max: float) -> Frog:
    """Move ``frog`` toward ``target`` with step factor ``r``.

    Each gene's step ``r * (target - gene)`` is clamped to ``[-s_max, s_max]`` and
    the gene flips when the step exceeds 0.5.
    """
    if len(frog) != len(target):
        raise ValueError("frog and target must have the same number of genes")
    moved = []
    for gene, goal in zip(frog, target):
        step = max(min(r * (int(goal) - int(gene)), s_max), -s_max)
        moved.append(not gene if step > 0.5 else bool(gene))
    return tuple(moved)


def local_search(
    memeplexes: MutableSequence[list[Frog]],
    memeplex_id: int,
    fitness_values: MutableSequence[int],
    params: Parameters,
    rng: random.Random | None = None,
    report: Callable[[str], None] | None = None,
) -> list[Frog]:
    """Improve the worst selected frogs of one memeplex.

    ``memeplexes`` and ``fitness_values`` are shared by all memeplexes and are
    updated in place; ``fitness_values`` uses the partition layout, where frog
    ``f`` of memeplex ``m`` sits at ``memeplexes_num * f + m``. Progress lines are
    passed to ``report``. Returns the updated memeplex.
    """
    if not 0 <= memeplex_id < len(memeplexes):
        raise IndexError(f"memeplex {memeplex_id} does not exist")
    rng = rng or random.Random()

    def emit(line: str) -> None:
        if report is not None:
            report(line)

    def fitness(frog: Sequence[bool]) -> int:
        return evaluate_fitness(frog, params.active_items, params.max_weight)

    selected = select_q_frogs(len(memeplexes[memeplex_id]), params.q_frogs, rng)
    emit(_SEPARATOR)
    emit("Selected Frogs: " + "".join(f"{position}  " for position in selected))

    updated = list(memeplexes[memeplex_id])
    for iteration in range(1, params.max_local_iterations_num + 1):
        best = find_best_frog(updated, selected, fitness)
        worst = find_worst_frog(updated, selected, fitness)
        previous_fitness = fitness(memeplexes[memeplex_id][worst])

        candidate = leap(updated[worst], updated[best], rng.random(), params.s_max)
        if fitness(candidate) <= previous_fitness:
            global_best = find_global_best_frog(memeplexes, fitness)
            if global_best is not None:
                candidate = leap(candidate, global_best, rng.random(), params.s_max)
            if global_best is None or fitness(candidate) <= previous_fitness:
                candidate = generate_random_frog(params.items_num, rng)

        updated[worst] = candidate
        fitness_values[params.memeplexes_num * worst + memeplex_id] = fitness(candidate)
        memeplexes[memeplex_id] = list(updated)

        emit(f"Iteration {iteration}  Memeplex {memeplex_id + 1}:")
        for frog in memeplexes[memeplex_id]:
            emit(f"{format_frog(frog)} | Fitness: {fitness(frog)}")

    return memeplexes[memeplex_id]