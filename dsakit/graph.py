"""Undirected graph stored as an adjacency list, with DFS and BFS."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable


class Graph:
    """An undirected graph; parallel edges and self-loops are kept as added."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list] = {}

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, []).append(u)

    def neighbors(self, node: Hashable) -> list:
        """Neighbours of ``node`` in the order their edges were added."""
        return list(self._adjacency.get(node, ()))

    def dfs(self, start: Hashable) -> list:
        """Nodes reachable from ``start`` in depth-first visiting order."""
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency.get(start, ()))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adjacency.get(neighbor, ())))
                    break
            else:
                stack.pop()
        return order

    def bfs(self, start: Hashable) -> list:
        """Nodes reachable from ``start`` in breadth-first visiting order."""
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._adjacency.get(node, ()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def format(self) -> str:
        """Render the adjacency list, one node per line."""
        lines = ["Adjacency List:"]
        for node, neighbors in self._adjacency.items():
            lines.append(f"{node} -> [{' '.join(map(str, neighbors))}]")
        return "\n".join(lines)