"""Fragments built from every node and the nodes within a bond radius of it."""

from __future__ import annotations

from ghostfrag.nuclear_graph import NuclearGraph
from ghostfrag.structures import FragmentedNuclei


def frag_nodes(graph: NuclearGraph, root_node: int, nbonds: int) -> tuple[int, ...]:
    """The sorted nuclear indices of all nodes at most ``nbonds`` bonds from ``root_node``.

    The search is depth-first. A node is revisited whenever a shorter path to
    it turns up, so every node within the radius is found.
    """
    bonds = graph.edge_list()
    distance: dict[int, int] = {root_node: 0}
    stack: list[tuple[int, int]] = [(root_node, 0)]

    while stack:
        current, current_distance = stack.pop()
        if current_distance >= nbonds:
            continue
        next_distance = current_distance + 1
        for a, b in bonds:
            for here, there in ((a, b), (b, a)):
                if here != current:
                    continue
                if there not in distance or distance[there] > next_distance:
                    distance[there] = next_distance
                    stack.append((there, next_distance))

    nuclei: set[int] = set()
    for node in distance:
        nuclei.update(graph.node_indices(node))
    return tuple(sorted(nuclei))


def graph_to_frags(graph: NuclearGraph, nbonds: int) -> list[tuple[int, ...]]:
    """One fragment per node, keeping only those not contained in another.

    A new fragment replaces every earlier fragment it contains; it is dropped
    if an earlier fragment already contains it and it replaced none.
    """
    fragments: list[tuple[int, ...]] = []
    for i in range(graph.nodes_size()):
        current = frag_nodes(graph, i, nbonds)
        current_set = set(current)
        supersets = 0
        subsets = 0
        kept: list[tuple[int, ...]] = []
        for existing in fragments:
            existing_set = set(existing)
            if current_set <= existing_set:
                supersets += 1
            if existing_set <= current_set:
                subsets += 1
                continue
            kept.append(existing)
        if supersets == 0 or subsets > 0:
            kept.append(current)
        fragments = kept
    return fragments


def bond_based(graph: NuclearGraph, nbonds: int = 0) -> FragmentedNuclei:
    """Fragment ``graph`` by grouping each node with the nodes within ``nbonds`` bonds."""
    if nbonds < 0:
        raise ValueError(f"nbonds must be non-negative, got {nbonds}")
    if graph.nodes_size() == 0:
        return FragmentedNuclei()
    return FragmentedNuclei(graph.nuclei(), graph_to_frags(graph, nbonds))