"""Greedy selection of a largest set of mutually compatible activities."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class Activity:
    """An activity occupying [start, finish); start must precede finish."""

    name: str
    start: int
    finish: int

    def __post_init__(self) -> None:
        if self.finish <= self.start:
            raise ValueError("Start time must be before finish time")


def activity_selector(activities) -> list[Activity]:
    """Return a maximum set of non-overlapping activities, earliest finish first."""
    selected: list[Activity] = []
    for activity in sorted(activities, key=lambda a: a.finish):
        if not selected or selected[-1].finish <= activity.start:
            selected.append(activity)
    return selected


_SAMPLE = [
    Activity("a", 1, 4), Activity("b", 3, 5), Activity("c", 5, 7),
    Activity("d", 3, 8), Activity("e", 6, 10), Activity("f", 8, 11),
    Activity("g", 1, 6), Activity("h", 8, 12), Activity("i", 2, 13),
    Activity("j", 12, 14), Activity("k", 5, 9),
]


def main(argv=None) -> int:
    """Print the activities selected from the sample set."""
    parser = argparse.ArgumentParser(
        description="Select compatible activities from a sample set."
    )
    parser.parse_args(argv)
    for activity in activity_selector(_SAMPLE):
        print(
            f"Activity {activity.name}: "
            f"{{start: {activity.start}, finish: {activity.finish}}}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())