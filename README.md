# ghostfrag

Building blocks for fragment-based methods in quantum chemistry. Starting
from a set of nuclei and the connectivity among groups of them, `ghostfrag`
forms fragments and works out the weights that the generalized many-body
expansion (GMBE) gives each subsystem.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The package has no runtime dependencies beyond the standard library.

## Data structures

`ghostfrag.structures` holds the basic containers:

- `Nucleus` – a frozen dataclass with `name`, `atomic_number`, `mass` and
  position `x`, `y`, `z`; `Z` is the atomic number.
- `ConnectivityTable(natoms)` – undirected bonds among `natoms` atoms.
  `add_bond(i, j)` records a bond (an index outside `[0, natoms)` raises
  `IndexError`, a bond of an atom to itself raises `ValueError`);
  `bonds()` returns the sorted `(i, j)` pairs with `i < j`, `nbonds()`
  counts them and `bonded_atoms(i)` gives the set of neighbours of atom `i`.
- `FragmentedNuclei(supersystem, fragments)` – a tuple of nuclei together
  with a list of fragments, each stored as the sorted, de-duplicated
  nuclear indices it holds. `insert(indices)` adds a fragment (indices
  outside the supersystem raise `IndexError`); `nuclear_indices(i)` gives
  the indices of fragment `i`. `len()`, indexing and iteration give the
  fragments as tuples of `Nucleus` objects. Two instances are equal when
  their supersystems and fragments, in order, are equal.

```python
from ghostfrag.structures import ConnectivityTable

conns = ConnectivityTable(3)
conns.add_bond(0, 1)
conns.add_bond(0, 2)
conns.nbonds()          # 2
conns.bonded_atoms(0)   # {1, 2}
```

`ghostfrag.nuclear_graph.NuclearGraph(nodes, edges)` joins a
`FragmentedNuclei` (the nodes; each node may hold several nuclei) with a
`ConnectivityTable` among those nodes (the edges). Pass both or neither;
passing only one raises `TypeError`. It reports `nodes_size()`,
`edges_size()`, `edge_list()`, `edges()`, `nuclei()`, `node(i)` and
`node_indices(i)`. Asking for a node outside `[0, nodes_size())` raises
`IndexError`; asking for the nuclei or edges of a graph built without any
raises `RuntimeError`, while its sizes are 0 and its edge list is empty.
`str(graph)` lists each node's nuclei on a line, followed by the bonds.

## Fragmenters

| Function | Module | What it does |
|---|---|---|
| `cluster(graph)` | `ghostfrag.cluster` | One fragment per connected group of nodes, ordered by their lowest node index; an empty graph gives no fragments. |
| `bond_based(graph, nbonds=0)` | `ghostfrag.bond_based` | For every node, a fragment of all nodes within `nbonds` bonds of it; a fragment contained in an earlier one is dropped and replaces those it contains, so each distinct fragment appears once. A negative `nbonds` raises `ValueError`; an empty graph gives no fragments. |

The helpers behind them are public too:

- `frag_nodes(graph, root_node, nbonds)` – the sorted nuclear indices of
  every node within `nbonds` bonds of `root_node`.
- `graph_to_frags(graph, nbonds)` – the list of index tuples that
  `bond_based` turns into fragments.
- `assign_bonds(bonds, atoms)` – grows a set of atoms along the bonds until
  it is closed under bonding.

## Weights

`ghostfrag.gmbe_weights.gmbe_weights(fragments)` gives the weight of each
subsystem in a `FragmentedNuclei`: a subsystem's weight is one minus the
sum of the weights of its proper supersets, worked out from the largest
subsystems down. No intersections are added; if two entries hold the same
nuclei, only the later one gets a weight and the earlier stays at 0.0.

```python
from ghostfrag.gmbe_weights import gmbe_weights
from ghostfrag.structures import FragmentedNuclei, Nucleus

nuclei = [Nucleus("H", 1) for _ in range(12)]
frags = FragmentedNuclei(
    nuclei,
    [[0, 1, 2, 3, 4, 5], [0, 1, 2, 6, 7, 8], [0, 1, 2, 9, 10, 11], [0, 1, 2]],
)
gmbe_weights(frags)   # [1.0, 1.0, 1.0, -2.0]
```

## What the package does not do

`ghostfrag` does not decide which atoms are bonded; connectivity tables
are built by the caller. It has no fragmenter that works directly on
atoms by element, does not compute the intersections of fragments for
you, does not build n-mers, and has no registry or command-line program
that wires these steps into a pipeline. It runs no energy calculations.