"""Graph traversals, a bounded min-heap and greedy scheduling and knapsack algorithms."""

__version__ = "0.1.0"

__all__ = [
    "graph",
    "graph_cli",
    "minheap",
    "interval_partitioning",
    "interval_scheduling",
    "knapsack",
]