import pytest

from huoma.topology import Edge, EdgeId, Topology, TopologyError


def y_junction() -> Topology:
    return Topology.from_edges(4, [Edge(0, 1), Edge(0, 2), Edge(0, 3)])


def test_linear_chain_basic():
    t = Topology.linear_chain(5)
    assert t.n_qubits == 5
    assert t.n_edges == 4
    assert t.is_linear_chain()
    assert [(e.a, e.b) for e in t.edges] == [(i, i + 1) for i in range(4)]


def test_linear_chain_single_qubit():
    t = Topology.linear_chain(1)
    assert t.n_qubits == 1
    assert t.n_edges == 0
    assert t.path(0, 0) == []


def test_linear_chain_zero_rejected():
    with pytest.raises(TopologyError, match="n_qubits"):
        Topology.linear_chain(0)


def test_y_junction_construction():
    t = y_junction()
    assert t.n_qubits == 4
    assert t.n_edges == 3
    assert not t.is_linear_chain()
    assert [t.degree(v) for v in range(4)] == [3, 1, 1, 1]


def test_y_junction_cut_partitions():
    t = y_junction()
    assert t.cut_partition(EdgeId(0)) == ((0, 2, 3), (1,))
    assert t.cut_partition(EdgeId(1)) == ((0, 1, 3), (2,))


def test_linear_chain_cut_partitions_are_prefixes():
    t = Topology.linear_chain(5)
    for b in range(4):
        left, right = t.cut_partition(EdgeId(b))
        assert left == tuple(range(b + 1))
        assert right == tuple(range(b + 1, 5))


def test_path_in_linear_chain():
    t = Topology.linear_chain(5)
    assert t.path(0, 3) == [EdgeId(0), EdgeId(1), EdgeId(2)]
    assert t.path(4, 1) == [EdgeId(3), EdgeId(2), EdgeId(1)]
    assert t.path(2, 2) == []


def test_path_in_y_junction():
    t = y_junction()
    assert t.path(1, 2) == [EdgeId(0), EdgeId(1)]
    assert t.path(1, 3) == [EdgeId(0), EdgeId(2)]
    assert t.path(2, 3) == [EdgeId(1), EdgeId(2)]


def test_path_out_of_range():
    with pytest.raises(TopologyError, match="out of range"):
        Topology.linear_chain(3).path(0, 5)


def test_disconnected_rejected():
    with pytest.raises(TopologyError, match="disconnected vertices"):
        Topology.from_edges(4, [Edge(0, 1), Edge(1, 2), Edge(0, 2)])


def test_wrong_edge_count_rejected():
    with pytest.raises(TopologyError, match="must have exactly"):
        Topology.from_edges(4, [Edge(0, 1)])


def test_self_loop_rejected():
    with pytest.raises(TopologyError, match="self-loop"):
        Topology.from_edges(4, [Edge(0, 0), Edge(0, 1), Edge(1, 2)])


def test_duplicate_edge_rejected():
    with pytest.raises(TopologyError, match="duplicate edge"):
        Topology.from_edges(4, [Edge(0, 1), Edge(1, 0), Edge(2, 3)])


def test_out_of_range_vertex_rejected():
    with pytest.raises(TopologyError, match="endpoint out of range"):
        Topology.from_edges(4, [Edge(0, 1), Edge(1, 2), Edge(2, 7)])


def test_lightweight_has_no_cut_partitions():
    t = Topology.from_edges_lightweight(4, [Edge(0, 1), Edge(1, 2), Edge(2, 3)])
    assert not t.has_cut_partitions
    assert t.is_linear_chain()
    assert t.path(0, 3) == [EdgeId(0), EdgeId(1), EdgeId(2)]
    with pytest.raises(TopologyError, match="lightweight"):
        t.cut_partition(EdgeId(0))


def test_full_topology_has_cut_partitions():
    assert y_junction().has_cut_partitions


def test_neighbours_and_edge_lookup():
    t = y_junction()
    assert t.neighbours(0) == (EdgeId(0), EdgeId(1), EdgeId(2))
    assert t.neighbours(3) == (EdgeId(2),)
    assert t.edge(EdgeId(1)) == Edge(0, 2)


def test_edge_other():
    e = Edge(3, 7)
    assert e.other(3) == 7
    assert e.other(7) == 3
    with pytest.raises(TopologyError):
        e.other(5)


def test_reversed_chain_edges_count_as_linear():
    t = Topology.from_edges(3, [Edge(1, 0), Edge(2, 1)])
    assert t.is_linear_chain()
    assert t.cut_partition(EdgeId(0)) == ((1, 2), (0,))


def test_tuple_edges_accepted():
    t = Topology.from_edges(3, [(0, 1), (1, 2)])
    assert t.edges == (Edge(0, 1), Edge(1, 2))