# huoma

Building blocks for tree-tensor-network (TTN) quantum simulation: validated
tree topologies over qubits and row-major site tensors.

## Modules

### `huoma.topology`

- `Topology.linear_chain(n)` builds the chain `0—1—…—(n-1)`.
- `Topology.from_edges(n, edges)` builds a general tree. Edges may be given
  as `Edge(a, b)` or as `(a, b)` pairs. The tree invariants are checked: a
  tree on `n` qubits has exactly `n - 1` edges, every endpoint is in
  `[0, n)`, there are no self-loops, no duplicate edges, and the graph is
  connected. Any violation raises `TopologyError` (a `ValueError`).
- `Topology.from_edges_lightweight(n, edges)` performs the same checks but
  skips precomputing cut partitions, which costs quadratic memory on large
  trees. `has_cut_partitions` tells the two kinds apart; calling
  `cut_partition` on a lightweight topology raises `TopologyError`.

A topology offers `n_qubits`, `n_edges` and `edges` (properties), and the
methods `edge(edge_id)`, `neighbours(v)` (incident `EdgeId`s), `degree(v)`,
`cut_partition(edge_id)` (the two sorted vertex sets left when the edge is
removed, the side holding the edge's `a` endpoint first), `path(frm, to)`
(the `EdgeId`s of the unique tree path, empty when `frm == to`) and
`is_linear_chain()`.

`EdgeId` is a stable, ordered handle wrapping an index into `edges`.
`Edge.other(v)` returns the opposite endpoint.

### `huoma.site`

- `TtnSite` holds a flat `complex128` numpy array `data`, a `shape` tuple and
  the `edges` its virtual axes belong to. The first `len(edges)` axes are
  virtual legs in the order of `edges`; the last axis is the physical leg.
- `TtnSite.product_zero(edges)` gives the |0⟩ site with every bond of
  dimension 1.
- `rank`, `physical_axis`, `axis_for_edge(e)`, `dim_for_edge(e)` and
  `len(site)` describe the tensor; `axis_for_edge` raises `ValueError` for an
  edge not incident on the site.
- `flatten_to_matrix(row_axes, col_axes)` and the free function
  `flatten_tensor_raw(data, shape, row_axes, col_axes)` group axes into a
  row-major matrix and return `(matrix, rows, cols)`. The axis lists must
  cover every axis exactly once.
- `TtnSite.unflatten_from_matrix(data, new_shape, new_edges)` wraps an
  already laid-out buffer, checking only the rank and the data length.

## What this package does not do

It has no state evolution: there is no gate application, truncation,
observable evaluation or time stepping. Nor does it partition a tree by
frequency or split it into sub-trees for separate simulation. It provides the
topology and site-tensor layers such a simulator would be built on.

## Installation

```
pip install .
```

## Example

```python
from huoma.topology import Edge, EdgeId, Topology

tree = Topology.from_edges(4, [Edge(0, 1), Edge(0, 2), Edge(0, 3)])
tree.degree(0)                # 3
tree.path(1, 2)               # [EdgeId(index=0), EdgeId(index=1)]
tree.cut_partition(EdgeId(0)) # ((0, 2, 3), (1,))

from huoma.site import TtnSite

site = TtnSite.product_zero([EdgeId(0), EdgeId(1)])
site.shape                    # (1, 1, 2)
site.rank                     # 3
```

## Tests

```
pip install .[test]
pytest
```