"""Directed graph of users and whom they follow."""

from __future__ import annotations


class FollowGraph:
    """Nodes identified by integers, each with an ordered list of successors."""

    def __init__(self, first: int):
        self._adjacency: dict[int, list[int]] = {first: []}

    def add_node(self, node_id: int) -> None:
        """Add a node with no successors as the last node."""
        if node_id in self._adjacency:
            raise ValueError(f"node {node_id} already exists")
        self._adjacency[node_id] = []

    def add_edge(self, source: int, target: int) -> None:
        """Append ``target`` to the successors of ``source``."""
        try:
            self._adjacency[source].append(target)
        except KeyError:
            raise KeyError(f"no node {source}") from None

    def successors(self, node_id: int) -> list[int]:
        """Return the successors of a node in insertion order."""
        try:
            return list(self._adjacency[node_id])
        except KeyError:
            raise KeyError(f"no node {node_id}") from None

    def nodes(self) -> list[int]:
        """Return the node ids in insertion order."""
        return list(self._adjacency)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adjacency

    def __str__(self) -> str:
        lines = []
        for node_id, targets in self._adjacency.items():
            succ = "".join(f"{target} " for target in targets)
            lines.append(f"{node_id} > {succ}\n")
        return "".join(lines)