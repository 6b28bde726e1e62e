"""A graph whose nodes are groups of nuclei and whose edges are bonds."""

from __future__ import annotations

from ghostfrag.structures import ConnectivityTable, FragmentedNuclei, Nucleus


class NuclearGraph:
    """Nodes are fragments of a set of nuclei; edges connect node indices.

    A graph built without arguments is empty and holds no nuclei at all;
    asking it for its nuclei or edge table raises ``RuntimeError``.
    """

    def __init__(
        self,
        nodes: FragmentedNuclei | None = None,
        edges: ConnectivityTable | None = None,
    ) -> None:
        if (nodes is None) != (edges is None):
            raise TypeError("NuclearGraph needs both nodes and edges, or neither")
        self._nodes = nodes
        self._edges = edges

    def _require_state(self) -> tuple[FragmentedNuclei, ConnectivityTable]:
        if self._nodes is None or self._edges is None:
            raise RuntimeError(
                "Instance holds no nodes or edges. Was it default constructed?"
            )
        return self._nodes, self._edges

    def nuclei(self) -> tuple[Nucleus, ...]:
        """The nuclei the nodes are drawn from."""
        nodes, _ = self._require_state()
        return nodes.supersystem

    def nodes_size(self) -> int:
        """The number of nodes."""
        return len(self._nodes) if self._nodes is not None else 0

    def edges_size(self) -> int:
        """The number of edges."""
        return self._edges.nbonds() if self._edges is not None else 0

    def edge_list(self) -> list[tuple[int, int]]:
        """The edges as sorted ``(i, j)`` pairs of node indices."""
        return self._edges.bonds() if self._edges is not None else []

    def edges(self) -> ConnectivityTable:
        """The connectivity table among the nodes."""
        _, edges = self._require_state()
        return edges

    def _check_node(self, i: int) -> FragmentedNuclei:
        if self._nodes is None or not 0 <= i < self.nodes_size():
            raise IndexError(
                f"{i} is not in the range [0, nnodes) where nnodes == "
                f"{self.nodes_size()}"
            )
        return self._nodes

    def node_indices(self, i: int) -> tuple[int, ...]:
        """The nuclear indices making up node ``i``."""
        return self._check_node(i).nuclear_indices(i)

    def node(self, i: int) -> tuple[Nucleus, ...]:
        """The nuclei making up node ``i``."""
        return self._check_node(i)[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NuclearGraph):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._nodes, self._edges))

    def __repr__(self) -> str:
        return f"NuclearGraph(nodes={self._nodes!r}, edges={self._edges!r})"

    def __str__(self) -> str:
        if self._nodes is None or self._edges is None:
            return ""
        lines = "".join(
            " ".join(str(nucleus) for nucleus in node) + "\n" for node in self._nodes
        )
        return lines + str(self._edges)