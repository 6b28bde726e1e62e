"""Basic chemical containers: nuclei, connectivity tables and fragments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Nucleus:
    """A point nucleus with a symbol, atomic number, mass and position."""

    name: str
    atomic_number: int
    mass: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def Z(self) -> int:  # noqa: N802 - conventional chemistry notation
        """The atomic number."""
        return self.atomic_number

    def __str__(self) -> str:
        return (
            f"{self.name} {self.atomic_number} {self.mass} "
            f"{self.x} {self.y} {self.z}"
        )


class ConnectivityTable:
    """Undirected bonds among a fixed number of atoms."""

    def __init__(self, natoms: int = 0) -> None:
        if natoms < 0:
            raise ValueError(f"Number of atoms must be non-negative, got {natoms}")
        self.natoms = natoms
        self._bonds: set[tuple[int, int]] = set()

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.natoms:
            raise IndexError(
                f"{i} is not in the range [0, natoms) where natoms == {self.natoms}"
            )

    def add_bond(self, i: int, j: int) -> None:
        """Record a bond between atoms ``i`` and ``j``."""
        self._check_index(i)
        self._check_index(j)
        if i == j:
            raise ValueError(f"An atom cannot be bonded to itself ({i})")
        self._bonds.add((min(i, j), max(i, j)))

    def bonds(self) -> list[tuple[int, int]]:
        """All bonds as ``(i, j)`` pairs with ``i < j``, lexicographically sorted."""
        return sorted(self._bonds)

    def nbonds(self) -> int:
        """The number of bonds."""
        return len(self._bonds)

    def bonded_atoms(self, i: int) -> set[int]:
        """The indices of the atoms bonded to atom ``i``."""
        self._check_index(i)
        return {b if a == i else a for a, b in self._bonds if i in (a, b)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConnectivityTable):
            return NotImplemented
        return self.natoms == other.natoms and self._bonds == other._bonds

    def __hash__(self) -> int:
        return hash((self.natoms, frozenset(self._bonds)))

    def __repr__(self) -> str:
        return f"ConnectivityTable(natoms={self.natoms}, bonds={self.bonds()})"

    def __str__(self) -> str:
        return "".join(f"{i} {j}\n" for i, j in self.bonds())


class FragmentedNuclei:
    """A set of nuclei (the supersystem) and fragments given by nuclear indices."""

    def __init__(
        self,
        supersystem: Iterable[Nucleus] = (),
        fragments: Iterable[Iterable[int]] | None = None,
    ) -> None:
        self.supersystem: tuple[Nucleus, ...] = tuple(supersystem)
        self._fragments: list[tuple[int, ...]] = []
        for fragment in fragments or ():
            self.insert(fragment)

    def insert(self, indices: Iterable[int]) -> None:
        """Add a fragment made of the nuclei with the given indices."""
        fragment = tuple(sorted(set(indices)))
        for i in fragment:
            if not 0 <= i < len(self.supersystem):
                raise IndexError(
                    f"{i} is not in the range [0, {len(self.supersystem)})"
                )
        self._fragments.append(fragment)

    def nuclear_indices(self, i: int) -> tuple[int, ...]:
        """The sorted nuclear indices of fragment ``i``."""
        if not 0 <= i < len(self._fragments):
            raise IndexError(
                f"{i} is not in the range [0, {len(self._fragments)})"
            )
        return self._fragments[i]

    def __len__(self) -> int:
        return len(self._fragments)

    def __getitem__(self, i: int) -> tuple[Nucleus, ...]:
        return tuple(self.supersystem[j] for j in self.nuclear_indices(i))

    def __iter__(self) -> Iterator[tuple[Nucleus, ...]]:
        for fragment in self._fragments:
            yield tuple(self.supersystem[j] for j in fragment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FragmentedNuclei):
            return NotImplemented
        return (
            self.supersystem == other.supersystem
            and self._fragments == other._fragments
        )

    def __hash__(self) -> int:
        return hash((self.supersystem, tuple(self._fragments)))

    def __repr__(self) -> str:
        return (
            f"FragmentedNuclei(supersystem={self.supersystem!r}, "
            f"fragments={self._fragments!r})"
        )

    @property
    def fragments(self) -> Sequence[tuple[int, ...]]:
        """The fragments as tuples of nuclear indices."""
        return tuple(self._fragments)