# algokit

Small, readable implementations of classic graph and greedy algorithms, with
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra and then run `pytest`:

```
pip install ".[test]"
pytest
```

## Graphs (`algokit.graph`)

`Graph(num_vertices, oriented)` stores a graph as adjacency lists on the
vertices `0 .. num_vertices - 1`. `num_vertices` must be between 1 and 100
(`MAX_VERTICES`); anything else raises `ValueError`. With `oriented=True` an
edge `src -> dest` is stored on `src` only; otherwise it is stored both ways.

- `add_edge(src, dest)` adds an edge and returns `True`. It returns `False` for
  a self loop or an edge that is already there, and raises `ValueError` for a
  vertex outside the graph.
- `has_edge(src, dest)` reports whether `dest` is in the adjacency list of
  `src`; out-of-range vertices give `False`.
- `neighbors(vertex)` lists the neighbours of `vertex`, most recently added
  first. Every traversal visits neighbours in this order.
- `bfs(start)`, `dfs(start)` and `recursive_dfs(start)` return the vertices
  reachable from `start` as a list, in breadth-first, iterative depth-first and
  recursive depth-first order.
- `reversed()` returns a new oriented graph with every edge turned around; on
  an undirected graph it raises `ValueError`.
- `is_strongly_connected()` tells whether every vertex of an oriented graph
  reaches every other one. An undirected graph always gives `False`.
- `num_vertices` and `oriented` are read-only properties.

```python
from algokit.graph import Graph

g = Graph(6, oriented=False)
for src, dest in [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]:
    g.add_edge(src, dest)

print(g.bfs(0))
print(g.dfs(2))
print(g.recursive_dfs(0))
```

`algokit.graph_cli.build_demo_graph()` returns exactly this six-vertex graph.

## Min-heap (`algokit.minheap`)

`MinHeap(capacity)` is a binary min-heap that holds at most `capacity` values.
`push(value)` raises `OverflowError` when the heap is full; `pop()` removes and
returns the smallest value and `top()` returns it without removing it, both
raising `IndexError` on an empty heap. `len(heap)` gives the number of values
held, and `capacity` is a read-only property. A negative capacity raises
`ValueError`.

`heap_sort(values)` returns the values as a new list in ascending order.

## Greedy algorithms

- `algokit.interval_scheduling.activity_selector(activities)` returns a largest
  set of non-overlapping `Activity(name, start, finish)` objects, ordered by
  finish time. An activity whose finish is not after its start raises
  `ValueError`.
- `algokit.interval_partitioning.lectures_partitioning(lectures)` and
  `lectures_partitioning_heap(lectures)` return the smallest number of
  classrooms that can hold every `Lecture(name, start, finish)` without
  overlap; the first keeps a list of room finish times, the second a
  `MinHeap`.
- `algokit.knapsack.fractional_knapsack(items, capacity)` fills a knapsack
  greedily by value per unit of weight. It returns every `Item(name, value,
  weight)` paired with the fraction taken of it (between 0.0 and 1.0), in
  decreasing order of `item.ratio`. An item whose weight is not positive
  raises `ValueError`.

```python
from algokit.knapsack import Item, fractional_knapsack

items = [Item("a", 60, 10), Item("b", 100, 20), Item("c", 120, 30)]
for item, fraction in fractional_knapsack(items, 50):
    print(item.name, fraction)
```

## Command-line demos

Each algorithm comes with a command that runs it on a fixed example and prints
the result. The commands take no options besides `--help`:

```
algokit-graph          # BFS from 0, DFS from 2 and recursive DFS from 0 on the six-vertex graph
algokit-scheduling     # activities selected from eleven sample activities
algokit-partitioning   # classrooms needed for ten sample lectures, with both methods
algokit-knapsack       # fractions taken of three sample items, capacity 50
```

## What it does not do

The commands only run their built-in examples; they do not read graphs,
activities, lectures or items from files or from the command line. For your
own data, call the functions from Python.