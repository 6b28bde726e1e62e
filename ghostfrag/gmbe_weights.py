"""Generalized many-body expansion weights for a set of subsystems."""

from __future__ import annotations

from ghostfrag.structures import FragmentedNuclei


def gmbe_weights(fragments: FragmentedNuclei) -> list[float]:
    """The GMBE weight of every fragment (or intersection) in ``fragments``.

    The weight of a subsystem is one minus the sum of the weights of its
    proper supersets. Subsystems are handled from the largest down, so every
    superset's weight is known before it is needed. No intersections are
    added to the input. When two entries hold the same nuclei, only the later
    one gets a weight; the earlier keeps 0.0.
    """
    by_size: dict[int, dict[tuple[int, ...], int]] = {}
    for i in range(len(fragments)):
        indices = fragments.nuclear_indices(i)
        by_size.setdefault(len(indices), {})[indices] = i

    ordered = {
        size: [(frozenset(key), i) for key, i in sorted(members.items())]
        for size, members in by_size.items()
    }
    sizes = sorted(ordered, reverse=True)

    weights = [0.0] * len(fragments)
    for position, size in enumerate(sizes):
        for subset, i in ordered[size]:
            weight = 1.0
            for parent_size in sizes[:position]:
                for superset, j in ordered[parent_size]:
                    if subset <= superset:
                        weight -= weights[j]
            weights[i] = weight
    return weights