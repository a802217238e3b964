import random

import pytest

from frogleap.config import DEFAULT_ITEMS, Item
from frogleap.knapsack import (
    evaluate_fitness,
    evaluate_population,
    format_frog,
    generate_population,
    generate_random_frog,
)


def test_empty_selection_has_zero_fitness():
    assert evaluate_fitness((False,) * 9, DEFAULT_ITEMS, 25) == 0


def test_single_item_fitness_is_its_price():
    frog = (True,) + (False,) * 8
    assert evaluate_fitness(frog, DEFAULT_ITEMS, 25) == DEFAULT_ITEMS[0].price


def test_overweight_selection_scores_zero():
    assert evaluate_fitness((True,) * 9, DEFAULT_ITEMS, 25) == 0


def test_weight_exactly_at_limit_is_allowed():
    items = [Item(4, 10), Item(7, 15)]
    assert evaluate_fitness((True, True), items, 25) == 11


def test_weight_one_over_limit_scores_zero():
    items = [Item(4, 10), Item(7, 15)]
    assert evaluate_fitness((True, True), items, 24) == 0


def test_shorter_frog_uses_leading_items():
    items = [Item(3, 1), Item(5, 1), Item(9, 1)]
    assert evaluate_fitness((True, True), items, 10) == items[0].price + items[1].price


def test_frog_longer_than_items_raises():
    with pytest.raises(ValueError):
        evaluate_fitness((True,) * 10, DEFAULT_ITEMS, 25)


def test_random_frog_shape_and_genes():
    frog = generate_random_frog(9, random.Random(1))
    assert len(frog) == 9
    assert all(isinstance(gene, bool) for gene in frog)


def test_random_frog_is_reproducible_with_seed():
    first = generate_random_frog(30, random.Random(7))
    second = generate_random_frog(30, random.Random(7))
    assert len(first) == 30
    assert set(first) == {True, False}
    assert tuple(first) == tuple(second)


def test_random_frog_negative_size_raises():
    with pytest.raises(ValueError):
        generate_random_frog(-1)


def test_generate_population_shape():
    population = generate_population(20, 9, random.Random(3))
    assert len(population) == 20
    assert {len(frog) for frog in population} == {9}


def test_generate_population_uses_both_gene_values():
    population = generate_population(20, 9, random.Random(3))
    genes = {gene for frog in population for gene in frog}
    assert genes == {True, False}


def test_generate_population_negative_raises():
    with pytest.raises(ValueError):
        generate_population(-1, 9)


def test_evaluate_population_matches_individual_fitness():
    population = generate_population(20, 9, random.Random(5))
    fitness = evaluate_population(population, DEFAULT_ITEMS, 25)
    assert fitness == [evaluate_fitness(frog, DEFAULT_ITEMS, 25) for frog in population]
    assert all(value >= 0 for value in fitness)


def test_evaluate_population_never_exceeds_total_price():
    population = generate_population(50, 9, random.Random(11))
    total = sum(item.price for item in DEFAULT_ITEMS)
    assert max(evaluate_population(population, DEFAULT_ITEMS, 25)) <= total


def test_format_frog():
    assert format_frog((True, False, True, True)) == "1011"


def test_format_frog_round_trip():
    frog = generate_random_frog(12, random.Random(2))
    assert tuple(ch == "1" for ch in format_frog(frog)) == frog