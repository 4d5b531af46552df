"""TTN site tensors stored flat in row-major order with an edge-to-axis map.

A site tensor with ``k`` incident edges has rank ``k + 1``: the first ``k``
axes are virtual legs in the order of ``edges`` and the last axis is the
physical leg of dimension 2.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from huoma.topology import EdgeId


def _check_axes(nd: int, row_axes: Sequence[int], col_axes: Sequence[int]) -> None:
    order = list(row_axes) + list(col_axes)
    if len(order) != nd:
        raise ValueError("row+col axis lists must cover every axis exactly once")
    seen: set[int] = set()
    for ax in order:
        if not 0 <= ax < nd:
            raise ValueError(f"axis {ax} out of range")
        if ax in seen:
            raise ValueError(f"axis {ax} appears twice")
        seen.add(ax)


def flatten_tensor_raw(
    data: Sequence[complex] | np.ndarray,
    shape: Sequence[int],
    row_axes: Sequence[int],
    col_axes: Sequence[int],
) -> tuple[np.ndarray, int, int]:
    """Group ``row_axes`` into rows and ``col_axes`` into columns of a row-major tensor.

    Returns the flat row-major matrix together with its row and column counts.
    """
    shape = tuple(shape)
    _check_axes(len(shape), row_axes, col_axes)
    flat = np.asarray(data, dtype=np.complex128).ravel()
    if flat.size != math.prod(shape):
        raise ValueError(
            f"data length {flat.size} does not match shape {shape}"
        )
    rows = math.prod(shape[ax] for ax in row_axes)
    cols = math.prod(shape[ax] for ax in col_axes)
    order = tuple(row_axes) + tuple(col_axes)
    matrix = flat.reshape(shape).transpose(order).reshape(rows * cols)
    return np.ascontiguousarray(matrix), rows, cols


@dataclass(eq=False)
class TtnSite:
    """A single TTN site tensor."""

    data: np.ndarray
    shape: tuple[int, ...]
    edges: tuple[EdgeId, ...]

    def __post_init__(self) -> None:
        self.data = np.asarray(self.data, dtype=np.complex128).ravel()
        self.shape = tuple(int(d) for d in self.shape)
        self.edges = tuple(self.edges)

    @classmethod
    def product_zero(cls, edges: Iterable[EdgeId]) -> "TtnSite":
        """The |0⟩ site for a vertex with the given edges, all bonds of dimension 1."""
        edges = tuple(edges)
        shape = (1,) * len(edges) + (2,)
        data = np.zeros(math.prod(shape), dtype=np.complex128)
        data[0] = 1.0
        return cls(data=data, shape=shape, edges=edges)

    @property
    def rank(self) -> int:
        """Number of axes, virtual and physical."""
        return len(self.shape)

    @property
    def physical_axis(self) -> int:
        """Index of the physical axis, always the last."""
        return len(self.shape) - 1

    def axis_for_edge(self, e: EdgeId) -> int:
        """Axis index of the virtual leg belonging to edge ``e``."""
        try:
            return self.edges.index(e)
        except ValueError:
            raise ValueError(f"edge {e!r} is not incident on this site") from None

    def dim_for_edge(self, e: EdgeId) -> int:
        """Dimension of the virtual leg belonging to edge ``e``."""
        return self.shape[self.axis_for_edge(e)]

    def __len__(self) -> int:
        return int(self.data.size)

    def flatten_to_matrix(
        self, row_axes: Sequence[int], col_axes: Sequence[int]
    ) -> tuple[np.ndarray, int, int]:
        """Flatten into a row-major matrix; see :func:`flatten_tensor_raw`."""
        return flatten_tensor_raw(self.data, self.shape, row_axes, col_axes)

    @classmethod
    def unflatten_from_matrix(
        cls,
        data: Sequence[complex] | np.ndarray,
        new_shape: Sequence[int],
        new_edges: Iterable[EdgeId],
    ) -> "TtnSite":
        """Wrap an already laid-out flat buffer in a site.

        Only checks that the rank is ``len(edges) + 1`` and that the data
        length matches the shape.
        """
        new_shape = tuple(new_shape)
        new_edges = tuple(new_edges)
        if len(new_shape) != len(new_edges) + 1:
            raise ValueError("new_shape rank must be virtual legs + 1 physical")
        flat = np.asarray(data, dtype=np.complex128).ravel()
        if flat.size != math.prod(new_shape):
            raise ValueError(
                f"data length {flat.size} does not match shape {new_shape}"
            )
        return cls(data=flat, shape=new_shape, edges=new_edges)