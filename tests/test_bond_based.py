import pytest

from ghostfrag.bond_based import bond_based, frag_nodes, graph_to_frags
from ghostfrag.nuclear_graph import NuclearGraph
from ghostfrag.structures import ConnectivityTable, FragmentedNuclei, Nucleus


def _water_nuclei(n):
    nuclei = []
    for k in range(n):
        nuclei.append(Nucleus("O", 8, 29164.39, 0.0, 0.0, 3.0 * k))
        nuclei.append(Nucleus("H", 1, 1837.289, 1.0, 0.0, 3.0 * k))
        nuclei.append(Nucleus("H", 1, 1837.289, 0.0, 1.0, 3.0 * k))
    return nuclei


def _water_graph(n, bonds=()):
    nodes = FragmentedNuclei(
        _water_nuclei(n), [range(3 * k, 3 * k + 3) for k in range(n)]
    )
    edges = ConnectivityTable(n)
    for i, j in bonds:
        edges.add_bond(i, j)
    return NuclearGraph(nodes, edges)


def test_empty_graph_gives_no_fragments():
    result = bond_based(_water_graph(0), 2)
    assert len(result) == 0
    assert result.supersystem == ()


def test_zero_bonds_gives_each_node():
    graph = _water_graph(3, [(0, 1), (1, 2)])
    result = bond_based(graph)
    assert result.fragments == tuple(graph.node_indices(i) for i in range(3))
    assert result.supersystem == graph.nuclei()


def test_chain_with_one_bond_radius():
    graph = _water_graph(4, [(0, 1), (1, 2), (2, 3)])
    assert graph_to_frags(graph, 1) == [
        (0, 1, 2, 3, 4, 5, 6, 7, 8),
        (3, 4, 5, 6, 7, 8, 9, 10, 11),
    ]


def test_frag_nodes_zero_radius_is_root_node():
    graph = _water_graph(3, [(0, 1), (1, 2)])
    for i in range(3):
        assert frag_nodes(graph, i, 0) == graph.node_indices(i)


def test_frag_nodes_large_radius_covers_component_only():
    graph = _water_graph(4, [(0, 1), (1, 2)])
    expected = tuple(
        sorted(set(graph.node_indices(0)) | set(graph.node_indices(1))
               | set(graph.node_indices(2)))
    )
    assert frag_nodes(graph, 2, 10) == expected
    assert frag_nodes(graph, 3, 10) == graph.node_indices(3)


def test_fragments_are_not_subsets_of_each_other():
    graph = _water_graph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)])
    for nbonds in range(4):
        frags = graph_to_frags(graph, nbonds)
        for a in frags:
            for b in frags:
                if a is not b:
                    assert not set(a) <= set(b)


def test_every_nucleus_is_covered():
    graph = _water_graph(4, [(0, 1), (2, 3)])
    result = bond_based(graph, 1)
    covered = set().union(*result.fragments)
    assert covered == set(range(len(graph.nuclei())))


def test_full_radius_on_connected_graph_gives_single_fragment():
    graph = _water_graph(3, [(0, 1), (1, 2)])
    assert graph_to_frags(graph, 5) == [tuple(range(9))]


def test_bad_root_raises():
    graph = _water_graph(2)
    with pytest.raises(IndexError):
        frag_nodes(graph, 5, 1)


def test_negative_radius_raises():
    with pytest.raises(ValueError):
        bond_based(_water_graph(2), -1)