"""Command that builds a small sample graph and prints its traversals."""

from __future__ import annotations

import argparse

from algokit.graph import Graph

_DEMO_EDGES = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]


def build_demo_graph() -> Graph:
    """The undirected six-vertex sample graph."""
    graph = Graph(6, False)
    for src, dest in _DEMO_EDGES:
        graph.add_edge(src, dest)
    return graph


def _line(label: str, start: int, order: list[int]) -> str:
    return f"{label} traversal starting from vertex {start}: " + " ".join(
        str(v) for v in order
    )


def main(argv=None) -> int:
    """Print BFS from 0, DFS from 2 and recursive DFS from 0."""
    parser = argparse.ArgumentParser(
        description="Print traversals of a sample graph."
    )
    parser.parse_args(argv)

    graph = build_demo_graph()
    print(_line("BFS", 0, graph.bfs(0)))
    print(_line("DFS", 2, graph.dfs(2)))
    print(_line("Recursive DFS", 0, graph.recursive_dfs(0)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())