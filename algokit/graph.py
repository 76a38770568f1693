"""Adjacency-list graphs with breadth- and depth-first traversals."""

from __future__ import annotations

from collections import deque

MAX_VERTICES = 100


class Graph:
    """A graph on the vertices ``0 .. num_vertices - 1``.

    When *oriented* is true the graph is directed and an edge ``src -> dest``
    is stored only on ``src``; otherwise every edge is stored both ways.
    Neighbours are visited most recently added first.
    """

    def __init__(self, num_vertices, oriented):
        if not 0 < num_vertices <= MAX_VERTICES:
            raise ValueError(f"Invalid input for number of vertices: {num_vertices}")
        self._num_vertices = num_vertices
        self._oriented = bool(oriented)
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def oriented(self) -> bool:
        return self._oriented

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self._num_vertices}, oriented={self._oriented})"

    def _is_valid(self, vertex: int) -> bool:
        return 0 <= vertex < self._num_vertices

    def _require(self, vertex: int) -> None:
        if not self._is_valid(vertex):
            raise ValueError(
                f"Vertex {vertex} is outside 0..{self._num_vertices - 1}"
            )

    def add_edge(self, src, dest) -> bool:
        """Add an edge; return False for a self-loop or an edge already present."""
        self._require(src)
        self._require(dest)
        if src == dest or self.has_edge(src, dest):
            return False
        self._adjacency[src].append(dest)
        if not self._oriented:
            self._adjacency[dest].append(src)
        return True

    def has_edge(self, src, dest) -> bool:
        """Whether ``dest`` is in the adjacency list of ``src``."""
        if not (self._is_valid(src) and self._is_valid(dest)):
            return False
        return dest in self._adjacency[src]

    def neighbors(self, vertex) -> list[int]:
        """Neighbours of *vertex*, most recently added first."""
        self._require(vertex)
        return list(reversed(self._adjacency[vertex]))

    def bfs(self, start) -> list[int]:
        """Vertices reachable from *start* in breadth-first order."""
        self._require(start)
        discovered = {start}
        queue = deque([start])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for vertex in self.neighbors(current):
                if vertex not in discovered:
                    discovered.add(vertex)
                    queue.append(vertex)
        return order

    def dfs(self, start) -> list[int]:
        """Vertices reachable from *start* in iterative depth-first order."""
        self._require(start)
        explored: set[int] = set()
        stack = [start]
        order = []
        while stack:
            current = stack.pop()
            if current in explored:
                continue
            explored.add(current)
            order.append(current)
            stack.extend(v for v in self.neighbors(current) if v not in explored)
        return order

    def recursive_dfs(self, start) -> list[int]:
        """Vertices reachable from *start* in recursive depth-first order."""
        self._require(start)
        explored: set[int] = set()
        order: list[int] = []

        def visit(vertex: int) -> None:
            explored.add(vertex)
            order.append(vertex)
            for neighbor in self.neighbors(vertex):
                if neighbor not in explored:
                    visit(neighbor)

        visit(start)
        return order

    def reversed(self) -> Graph:
        """A new directed graph with every edge turned around."""
        if not self._oriented:
            raise ValueError("Cannot reverse an undirected graph")
        result = Graph(self._num_vertices, True)
        for vertex in range(self._num_vertices):
            for neighbor in self.neighbors(vertex):
                result.add_edge(neighbor, vertex)
        return result

    def is_strongly_connected(self) -> bool:
        """Whether every vertex of a directed graph reaches every other one.

        Undirected graphs are never reported as strongly connected.
        """
        if not self._oriented:
            return False
        forward = set(self.bfs(0))
        backward = set(self.reversed().bfs(0))
        return forward == backward and len(forward) == self._num_vertices