"""Minimum number of classrooms needed to hold a set of lectures."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

from algokit.minheap import MinHeap


@dataclass(frozen=True)
class Lecture:
    """A lecture occupying the half-open time interval [start, finish)."""

    name: str
    start: int
    finish: int


def _by_start(lectures: Iterable[Lecture]) -> list[Lecture]:
    return sorted(lectures, key=lambda lecture: lecture.start)


def lectures_partitioning(lectures) -> int:
    """Classrooms needed, keeping the last finish time of each room: O(n^2)."""
    room_finish_times: list[int] = []
    for lecture in _by_start(lectures):
        for room, finish in enumerate(room_finish_times):
            if lecture.start >= finish:
                room_finish_times[room] = lecture.finish
                break
        else:
            room_finish_times.append(lecture.finish)
    return len(room_finish_times)


def lectures_partitioning_heap(lectures) -> int:
    """Classrooms needed, keeping room finish times in a min-heap: O(n log n)."""
    ordered = _by_start(lectures)
    heap = MinHeap(len(ordered))
    for lecture in ordered:
        if len(heap) > 0 and heap.top() <= lecture.start:
            heap.pop()
        heap.push(lecture.finish)
    return len(heap)


_SAMPLE = [
    Lecture("A", 9, 11), Lecture("B", 9, 13), Lecture("C", 9, 11),
    Lecture("D", 11, 13), Lecture("E", 11, 14), Lecture("F", 13, 15),
    Lecture("G", 13, 15), Lecture("H", 14, 16), Lecture("I", 15, 17),
    Lecture("J", 15, 17),
]


def main(argv=None) -> int:
    """Print the classrooms needed for the sample lectures with both methods."""
    parser = argparse.ArgumentParser(
        description="Compute the minimum number of classrooms for sample lectures."
    )
    parser.parse_args(argv)
    print(f"Minimum amount of classrooms needed: {lectures_partitioning(_SAMPLE)}")
    print(
        "Minimum amount of classrooms needed: "
        f"{lectures_partitioning_heap(_SAMPLE)} (min heap)"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())