"""Problem data and run parameters for the shuffled frog-leaping knapsack search."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """A knapsack item with a price and a weight."""

    price: int
    weight: int


DEFAULT_ITEMS: tuple[Item, ...] = (
    Item(6, 2),
    Item(5, 3),
    Item(8, 6),
    Item(9, 7),
    Item(6, 5),
    Item(7, 9),
    Item(3, 3),
    Item(6, 4),
    Item(8, 5),
)


@dataclass(frozen=True)
class Parameters:
    """Settings of one run: population layout, search limits and the knapsack."""

    frogs_num: int = 20
    items_num: int = 9
    memeplexes_num: int = 5
    q_frogs: int = 3
    max_local_iterations_num: int = 5
    max_weight: int = 25
    s_max: float = 1.0
    items: tuple[Item, ...] = field(default=DEFAULT_ITEMS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        for name in ("frogs_num", "items_num", "memeplexes_num", "q_frogs"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.max_local_iterations_num < 0:
            raise ValueError("max_local_iterations_num must not be negative")
        if self.items_num > len(self.items):
            raise ValueError(
                f"items_num is {self.items_num} but only {len(self.items)} items are defined"
            )
        if self.memeplexes_num > self.frogs_num:
            raise ValueError("memeplexes_num must not exceed frogs_num")
        if self.q_frogs > self.frogs_per_memeplex:
            raise ValueError("q_frogs must not exceed the number of frogs in a memeplex")

    @property
    def frogs_per_memeplex(self) -> int:
        """Number of frogs placed in each memeplex."""
        return self.frogs_num // self.memeplexes_num

    @property
    def active_items(self) -> tuple[Item, ...]:
        """The items a frog chooses from."""
        return self.items[: self.items_num]

    def describe(self) -> str:
        """Return the summary of the main settings, one per line."""
        return "\n".join(
            [
                f"Frogs: {self.frogs_num}",
                f"Memeplexes: {self.memeplexes_num}",
                f"Max Local Iterations: {self.max_local_iterations_num}",
                f"Items: {self.items_num}",
                f"Q Frogs: {self.q_frogs}",
            ]
        )