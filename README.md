# frogleap

A shuffled frog-leaping search for a small 0/1 knapsack problem.

Each frog is a tuple of booleans that says which items go into the knapsack.
A frog's fitness is the total price of its chosen items, or 0 when their
total weight is over the capacity. The search works like this:

1. Make a random population and work out each frog's fitness.
2. Sort the population by fitness, best first.
3. Check for convergence. The run stops once the best fitness has been the
   same for a set number of checks in a row (10 by default). Before the first
   round the last best fitness counts as 0.
4. Deal the frogs out to the memeplexes in turn: frog `memeplexes_num * f + m`
   becomes frog `f` of memeplex `m`.
5. In each memeplex, pick `q_frogs` distinct frogs. Frogs nearer the front
   are more likely to be picked. Then, for `max_local_iterations_num` steps:
   - move the worst picked frog towards the best picked frog;
   - if that does not improve it, move it towards the best frog of all
     memeplexes;
   - if that still does not help, or no frog has positive fitness, replace it
     with a random frog.
6. Merge the memeplexes back into one population, one memeplex after another,
   and go back to step 2.

## Default problem

| Setting (`Parameters` field)         | Default |
|--------------------------------------|---------|
| `frogs_num`                          | 20      |
| `items_num`                          | 9       |
| `memeplexes_num`                     | 5       |
| `q_frogs`                            | 3       |
| `max_local_iterations_num`           | 5       |
| `max_weight` (knapsack capacity)     | 25      |
| `s_max` (largest step)               | 1.0     |

The nine default items, as (price, weight), are:
(6, 2), (5, 3), (8, 6), (9, 7), (6, 5), (7, 9), (3, 3), (6, 4), (8, 5).
They are available as `frogleap.config.DEFAULT_ITEMS`.

`Parameters` raises `ValueError` in these cases:

- a count is not positive;
- `max_local_iterations_num` is negative;
- `items_num` is larger than the number of items;
- there are more memeplexes than frogs;
- `q_frogs` is larger than the number of frogs in a memeplex.

## Installation

```
pip install .
```

## Command line

```
frogleap [--seed SEED] [--max-iterations N]
```

- `--seed` seeds the random generator, so a run can be repeated.
- `--max-iterations` stops the run after N rounds even if it has not
  converged. It must not be negative.

The command always uses the default problem. It prints:

- the settings and the initial population;
- for every round:
  - the sorted population;
  - a monitor block with the iteration number, the best fitness and the best
    choice of items;
  - the memeplexes after partitioning;
  - the selected frogs and each local search step;
  - the final optimized memeplexes;
  - the population after shuffling.

## Library use

```python
import random

from frogleap.algorithm import ShuffledFrogLeaping
from frogleap.config import Parameters

search = ShuffledFrogLeaping(Parameters(max_weight=20), rng=random.Random(1))
best_frog, best_fitness = search.run(max_iterations=50)
```

`ShuffledFrogLeaping` takes these arguments:

- `params`: a `Parameters`; the defaults are used when it is left out.
- `rng`: a `random.Random`.
- `report`: a callable that receives each progress line. Pass `print` to see
  the progress. When it is left out, the search prints nothing.
- `convergence_limit`: the number of unchanged checks that ends the run.

`run()` returns the best frog and its fitness. After a run, the sorted
population, its fitness list and the number of rounds are available as
`population`, `fitness` and `iterations`.

The building blocks can also be used on their own:

- `frogleap.config`: `Item`, `Parameters` (with `describe()`,
  `frogs_per_memeplex` and `active_items`).
- `frogleap.knapsack`: `evaluate_fitness`, `evaluate_population`,
  `generate_random_frog`, `generate_population`, `format_frog`.
- `frogleap.population`: `sort_population`, `partition_population`,
  `shuffle_memeplexes`.
- `frogleap.search`: `select_q_frogs`, `find_best_frog`, `find_worst_frog`,
  `find_global_best_frog`, `leap`, `local_search`.
- `frogleap.algorithm`: `ConvergenceTracker`, `ShuffledFrogLeaping`, `main`.

## Limits

The command line cannot change the items or the other settings, and it does
not save results. To run a different problem, use the library with your own
`Parameters`.

## Tests

```
pip install .[test]
pytest
```