"""Greedy solution of the fractional knapsack problem."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    name: str
    value: int
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"Item weight must be positive: {self.weight}")

    @property
    def ratio(self) -> float:
        return self.value / self.weight


def fractional_knapsack(items, capacity) -> list[tuple[Item, float]]:
    """Fill a knapsack of *capacity* greedily by value per unit of weight.

    Returns every item paired with the fraction of it taken, in decreasing
    order of value-to-weight ratio.
    """
    remaining = float(capacity)
    result: list[tuple[Item, float]] = []
    for item in sorted(items, key=lambda i: i.ratio, reverse=True):
        if remaining <= 0:
            fraction = 0.0
        elif item.weight <= remaining:
            fraction = 1.0
        else:
            fraction = remaining / item.weight
        remaining -= fraction * item.weight
        result.append((item, fraction))
    return result


_SAMPLE_CAPACITY = 50
_SAMPLE = [Item("a", 60, 10), Item("b", 100, 20), Item("c", 120, 30)]


def main(argv=None) -> int:
    """Print the fractions taken of the sample items and their total value."""
    parser = argparse.ArgumentParser(
        description="Solve a sample fractional knapsack problem."
    )
    parser.parse_args(argv)
    total = 0.0
    print("Items taken (fractions):")
    for item, fraction in fractional_knapsack(_SAMPLE, _SAMPLE_CAPACITY):
        if fraction > 0:
            gained = fraction * item.value
            print(f"Item {item.name}: {fraction:.2f} (value: {gained:.2f})")
            total += gained
    print(f"Total value: {total:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())