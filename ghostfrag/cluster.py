"""Partition a nuclear graph into its connected components."""

from __future__ import annotations

from typing import Iterable

from ghostfrag.nuclear_graph import NuclearGraph
from ghostfrag.structures import FragmentedNuclei


def assign_bonds(bonds: Iterable[tuple[int, int]], atoms: Iterable[int]) -> set[int]:
    """Grow ``atoms`` along ``bonds`` until no bonded partner is missing."""
    bonds = list(bonds)
    found = set(atoms)
    while True:
        grown = set(found)
        for i, j in bonds:
            if i in grown or j in grown:
                grown.update((i, j))
        if grown == found:
            return grown
        found = grown


def cluster(graph: NuclearGraph) -> FragmentedNuclei:
    """One fragment per connected group of nodes, in order of their lowest node."""
    npatoms = graph.nodes_size()
    if npatoms == 0:
        return FragmentedNuclei()

    bonds = graph.edge_list()
    components: list[set[int]] = []
    seen: set[int] = set()
    for i in range(npatoms):
        if i in seen:
            continue
        component = assign_bonds(bonds, {i})
        components.append(component)
        seen |= component

    fragments = FragmentedNuclei(graph.nuclei())
    for component in components:
        nuclei: set[int] = set()
        for patom in component:
            nuclei.update(graph.node_indices(patom))
        fragments.insert(nuclei)
    return fragments