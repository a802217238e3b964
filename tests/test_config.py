import dataclasses

import pytest

from frogleap.config import DEFAULT_ITEMS, Item, Parameters


def test_default_parameters_match_source():
    params = Parameters()
    assert (
        params.frogs_num,
        params.items_num,
        params.memeplexes_num,
        params.q_frogs,
        params.max_local_iterations_num,
        params.max_weight,
        params.s_max,
    ) == (20, 9, 5, 3, 5, 25, 1.0)


def test_default_items_match_source():
    pairs = [(item.price, item.weight) for item in Parameters().items]
    assert pairs == [(6, 2), (5, 3), (8, 6), (9, 7), (6, 5), (7, 9), (3, 3), (6, 4), (8, 5)]


def test_frogs_per_memeplex_uses_integer_division():
    params = Parameters(frogs_num=22, memeplexes_num=5, q_frogs=3)
    assert params.frogs_per_memeplex == 22 // 5


def test_active_items_truncated_to_items_num():
    params = Parameters(items_num=4)
    assert params.active_items == DEFAULT_ITEMS[:4]


def test_items_list_is_stored_as_tuple():
    items = [Item(1, 1), Item(2, 2)]
    params = Parameters(items_num=2, items=items)
    assert params.items == tuple(items)


def test_describe_lines():
    lines = Parameters().describe().splitlines()
    assert lines == [
        "Frogs: 20",
        "Memeplexes: 5",
        "Max Local Iterations: 5",
        "Items: 9",
        "Q Frogs: 3",
    ]


def test_describe_reflects_custom_values():
    text = Parameters(frogs_num=30, memeplexes_num=6, q_frogs=2).describe()
    assert "Frogs: 30" in text
    assert "Memeplexes: 6" in text
    assert "Q Frogs: 2" in text


def test_parameters_are_frozen():
    params = Parameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.frogs_num = 3  # type: ignore[misc]
    assert params.frogs_num == 20


@pytest.mark.parametrize(
    "kwargs",
    [
        {"frogs_num": 0},
        {"items_num": 0},
        {"memeplexes_num": 0},
        {"q_frogs": 0},
        {"max_local_iterations_num": -1},
        {"items_num": 10},
        {"frogs_num": 4, "memeplexes_num": 5},
        {"q_frogs": 5},
    ],
)
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(ValueError):
        Parameters(**kwargs)