"""Tree topology: edges, adjacency, cut partitions and tree paths."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence


class TopologyError(ValueError):
    """Raised when a topology violates the tree invariants or is misused."""


@dataclass(frozen=True, order=True)
class EdgeId:
    """Stable handle to an edge: an index into the topology's edge list."""

    index: int


@dataclass(frozen=True)
class Edge:
    """Undirected edge between two qubits."""

    a: int
    b: int

    def other(self, frm: int) -> int:
        """Return the endpoint opposite ``frm``."""
        if self.a == frm:
            return self.b
        if self.b == frm:
            return self.a
        raise TopologyError(f"vertex {frm} is not an endpoint of edge ({self.a}, {self.b})")


def _as_edge(e: Edge | Sequence[int]) -> Edge:
    if isinstance(e, Edge):
        return e
    a, b = e
    return Edge(a, b)


class Topology:
    """Tree topology over ``n_qubits`` qubits.

    The tree invariants (n-1 edges, endpoints in range, no self-loops, no
    duplicates, connected) are validated at construction. Adjacency and,
    unless built lightweight, the cut partition of every edge are cached.
    """

    __slots__ = ("_n_qubits", "_edges", "_neighbours", "_cut_partitions")

    def __init__(
        self,
        n_qubits: int,
        edges: Iterable[Edge | Sequence[int]],
        *,
        compute_cuts: bool = True,
    ) -> None:
        edge_list = tuple(_as_edge(e) for e in edges)
        if n_qubits <= 0:
            raise TopologyError("Topology requires n_qubits ≥ 1")
        if len(edge_list) + 1 != n_qubits:
            raise TopologyError(
                f"tree on {n_qubits} qubits must have exactly {n_qubits - 1} edges, "
                f"got {len(edge_list)}"
            )
        for i, e in enumerate(edge_list):
            if not (0 <= e.a < n_qubits and 0 <= e.b < n_qubits):
                raise TopologyError(
                    f"edge {i} ({e.a}, {e.b}) has endpoint out of range [0, {n_qubits})"
                )
            if e.a == e.b:
                raise TopologyError(f"edge {i} is a self-loop on vertex {e.a}")

        seen_pairs: set[tuple[int, int]] = set()
        for i, e in enumerate(edge_list):
            canonical = (min(e.a, e.b), max(e.a, e.b))
            if canonical in seen_pairs:
                raise TopologyError(f"duplicate edge at index {i}: ({e.a}, {e.b})")
            seen_pairs.add(canonical)

        neighbours: list[list[EdgeId]] = [[] for _ in range(n_qubits)]
        for i, e in enumerate(edge_list):
            neighbours[e.a].append(EdgeId(i))
            neighbours[e.b].append(EdgeId(i))

        reached = self._reachable(0, edge_list, neighbours, excluded=None)
        if len(reached) != n_qubits:
            missing = [v for v in range(n_qubits) if v not in reached]
            raise TopologyError(f"disconnected vertices: {missing}")

        cut_partitions: tuple[tuple[tuple[int, ...], tuple[int, ...]], ...] = ()
        if compute_cuts:
            parts = []
            for e_idx, e in enumerate(edge_list):
                side_a = self._reachable(e.a, edge_list, neighbours, excluded=e_idx)
                a_side = tuple(sorted(side_a))
                b_side = tuple(v for v in range(n_qubits) if v not in side_a)
                parts.append((a_side, b_side))
            cut_partitions = tuple(parts)

        self._n_qubits = n_qubits
        self._edges = edge_list
        self._neighbours = tuple(tuple(n) for n in neighbours)
        self._cut_partitions = cut_partitions

    @staticmethod
    def _reachable(
        start: int,
        edges: Sequence[Edge],
        neighbours: Sequence[Sequence[EdgeId]],
        excluded: int | None,
    ) -> set[int]:
        seen = {start}
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for eid in neighbours[v]:
                if eid.index == excluded:
                    continue
                w = edges[eid.index].other(v)
                if w not in seen:
                    seen.add(w)
                    queue.append(w)
        return seen

    @classmethod
    def linear_chain(cls, n_qubits: int) -> "Topology":
        """Chain with edges (0,1), (1,2), …, (n-2, n-1)."""
        if n_qubits < 1:
            raise TopologyError("Topology.linear_chain requires n_qubits ≥ 1")
        return cls(n_qubits, (Edge(i, i + 1) for i in range(n_qubits - 1)))

    @classmethod
    def from_edges(cls, n_qubits: int, edges: Iterable[Edge | Sequence[int]]) -> "Topology":
        """General tree, with every cut partition precomputed."""
        return cls(n_qubits, edges, compute_cuts=True)

    @classmethod
    def from_edges_lightweight(
        cls, n_qubits: int, edges: Iterable[Edge | Sequence[int]]
    ) -> "Topology":
        """General tree without the quadratic cut-partition precomputation."""
        return cls(n_qubits, edges, compute_cuts=False)

    @property
    def has_cut_partitions(self) -> bool:
        return bool(self._cut_partitions)

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @property
    def n_edges(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    def edge(self, edge_id: EdgeId) -> Edge:
        return self._edges[edge_id.index]

    def neighbours(self, v: int) -> tuple[EdgeId, ...]:
        """Edges incident on vertex ``v``."""
        return self._neighbours[v]

    def degree(self, v: int) -> int:
        return len(self._neighbours[v])

    def cut_partition(self, edge_id: EdgeId) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """The two sorted vertex sets left by removing an edge; the side holding ``a`` first."""
        if not self._cut_partitions:
            raise TopologyError(
                "cut_partition called on a lightweight topology (built with "
                "from_edges_lightweight); use from_edges for small topologies"
            )
        return self._cut_partitions[edge_id.index]

    def path(self, frm: int, to: int) -> list[EdgeId]:
        """Edges of the unique tree path from ``frm`` to ``to``; empty when equal."""
        if not (0 <= frm < self._n_qubits and 0 <= to < self._n_qubits):
            raise TopologyError("path: vertex out of range")
        if frm == to:
            return []
        parent: dict[int, tuple[int, EdgeId]] = {}
        seen = {frm}
        queue = deque([frm])
        while queue:
            v = queue.popleft()
            if v == to:
                break
            for eid in self._neighbours[v]:
                w = self._edges[eid.index].other(v)
                if w not in seen:
                    seen.add(w)
                    parent[w] = (v, eid)
                    queue.append(w)
        result: list[EdgeId] = []
        cur = to
        while cur != frm:
            prev, eid = parent[cur]
            result.append(eid)
            cur = prev
        result.reverse()
        return result

    def is_linear_chain(self) -> bool:
        """True if the topology is the chain 0—1—…—(n-1)."""
        if len(self._edges) + 1 != self._n_qubits:
            return False
        return all(
            {e.a, e.b} == {i, i + 1} for i, e in enumerate(self._edges)
        )

    def __repr__(self) -> str:
        return f"Topology(n_qubits={self._n_qubits}, edges={list(self._edges)!r})"