"""
Default molecular graph types.

Atom, Bond and Molecule are the graph that MoleculeSink builds. The parser
itself never touches them; any other graph backend can be plugged in through
the Sink protocol instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .elements import (
    STEREO_BOND_SYMBOLS,
    BondOrder,
    get_atomic_number,
    is_aromatic_symbol,
)


@dataclass(slots=True)
class Bond:
    """Represents a chemical bond between two atoms.
    
    Attributes:
        idx: Unique index of this bond in the molecule.
        atom1_idx: Index of the first atom.
        atom2_idx: Index of the second atom.
        order: Bond order (1=single, 2=double, 3=triple).
        symbol: SMILES bond symbol as written, or None if implicit.
    """
    
    idx: int
    atom1_idx: int
    atom2_idx: int
    order: int = BondOrder.SINGLE
    symbol: str | None = None
    
    def other_atom(self, atom_idx: int) -> int:
        """Get the index of the atom on the other end of this bond.
        
        Raises:
            ValueError: If atom_idx is not part of this bond.
        """
        if atom_idx == self.atom1_idx:
            return self.atom2_idx
        if atom_idx == self.atom2_idx:
            return self.atom1_idx
        raise ValueError(f"Atom {atom_idx} not in bond {self.idx}")
    
    @property
    def bond_order(self) -> BondOrder:
        """Get bond order as enum."""
        return BondOrder(self.order)
    
    @property
    def is_aromatic(self) -> bool:
        """Whether the bond was written with the aromatic symbol ':'."""
        return self.symbol == ":"
    
    @property
    def stereo(self) -> str | None:
        """Directional marker ('/' or '\\'), if any."""
        return self.symbol if self.symbol in STEREO_BOND_SYMBOLS else None
    
    def __contains__(self, atom_idx: int) -> bool:
        """Check if atom is part of this bond."""
        return atom_idx in (self.atom1_idx, self.atom2_idx)


@dataclass(frozen=True, slots=True)
class Disconnection:
    """An explicit ``.`` between two atoms: adjacent in the string, not bonded."""
    
    idx: int
    atom1_idx: int
    atom2_idx: int


@dataclass(slots=True)
class Atom:
    """Represents an atom in a molecule.
    
    Attributes:
        idx: Unique index of this atom in the molecule.
        symbol: Element symbol (e.g., "C", "Cl", lowercase when aromatic).
        isotope: Mass number, or None for natural abundance.
        chirality: Raw chirality marker ('@' or '@@').
        hydrogen_count: Explicit hydrogen count from bracket notation.
        charge: Formal charge.
        bond_indices: Indices of bonds connected to this atom.
    """
    
    idx: int
    symbol: str
    isotope: int | None = None
    chirality: str | None = None
    hydrogen_count: int = 0
    charge: int = 0
    bond_indices: list[int] = field(default_factory=list)
    
    @property
    def atomic_number(self) -> int:
        """Get the atomic number for this element (0 for '*')."""
        return get_atomic_number(self.symbol)
    
    @property
    def is_aromatic(self) -> bool:
        return is_aromatic_symbol(self.symbol)
    
    def degree(self) -> int:
        """Number of bonds to this atom."""
        return len(self.bond_indices)
    
    def neighbors(self, mol: "Molecule") -> Iterator[int]:
        """Iterate over indices of neighboring atoms.
        
        Args:
            mol: Parent molecule.
        
        Yields:
            Indices of atoms bonded to this atom.
        """
        for bond_idx in self.bond_indices:
            yield mol.bonds[bond_idx].other_atom(self.idx)


@dataclass
class Molecule:
    """Represents a molecular structure.
    
    Attributes:
        atoms: List of atoms in the molecule.
        bonds: List of real bonds in the molecule.
        disconnections: Explicit ``.`` separators between atoms.
    
    Example:
        >>> mol = Molecule()
        >>> c1 = mol.add_atom("C")
        >>> c2 = mol.add_atom("C")
        >>> mol.add_bond(c1, c2)
        0
        >>> len(mol)
        2
    """
    
    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    disconnections: list[Disconnection] = field(default_factory=list)
    
    def __len__(self) -> int:
        """Return number of atoms."""
        return len(self.atoms)
    
    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms."""
        return iter(self.atoms)
    
    def __getitem__(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]
    
    def add_atom(
        self,
        symbol: str,
        *,
        isotope: int | None = None,
        chirality: str | None = None,
        hydrogen_count: int = 0,
        charge: int = 0,
    ) -> int:
        """Add an atom to the molecule.
        
        Returns:
            Index of the newly added atom.
        """
        idx = len(self.atoms)
        self.atoms.append(Atom(
            idx=idx,
            symbol=symbol,
            isotope=isotope,
            chirality=chirality,
            hydrogen_count=hydrogen_count,
            charge=charge,
        ))
        return idx
    
    def add_bond(
        self,
        atom1_idx: int,
        atom2_idx: int,
        *,
        order: int = BondOrder.SINGLE,
        symbol: str | None = None,
    ) -> int:
        """Add a bond between two atoms.
        
        Returns:
            Index of the newly added bond.
        
        Raises:
            IndexError: If atom indices are out of bounds.
            ValueError: If order is DISCONNECTED; use add_disconnection.
        """
        self._check_atoms(atom1_idx, atom2_idx)
        if order == BondOrder.DISCONNECTED:
            raise ValueError("Disconnected atoms are not a bond; use add_disconnection()")
        
        idx = len(self.bonds)
        self.bonds.append(Bond(
            idx=idx,
            atom1_idx=atom1_idx,
            atom2_idx=atom2_idx,
            order=order,
            symbol=symbol,
        ))
        self.atoms[atom1_idx].bond_indices.append(idx)
        self.atoms[atom2_idx].bond_indices.append(idx)
        return idx
    
    def add_disconnection(self, atom1_idx: int, atom2_idx: int) -> int:
        """Record an explicit ``.`` between two atoms.
        
        Returns:
            Index of the new entry in ``disconnections``.
        """
        self._check_atoms(atom1_idx, atom2_idx)
        idx = len(self.disconnections)
        self.disconnections.append(Disconnection(idx, atom1_idx, atom2_idx))
        return idx
    
    def _check_atoms(self, atom1_idx: int, atom2_idx: int) -> None:
        n = len(self.atoms)
        if not (0 <= atom1_idx < n and 0 <= atom2_idx < n):
            raise IndexError(f"Atom index out of bounds: {atom1_idx}, {atom2_idx}")
    
    def get_bond_between(self, atom1_idx: int, atom2_idx: int) -> Bond | None:
        """Find the bond between two atoms, or None."""
        for bond_idx in self.atoms[atom1_idx].bond_indices:
            bond = self.bonds[bond_idx]
            if atom1_idx in bond and atom2_idx in bond:
                return bond
        return None
    
    def connected_components(self) -> list[list[int]]:
        """Find connected components in the molecule.
        
        Returns:
            List of components, each being a sorted list of atom indices.
        """
        visited: set[int] = set()
        components: list[list[int]] = []
        
        for start in range(len(self.atoms)):
            if start in visited:
                continue
            
            component: list[int] = []
            stack = [start]
            visited.add(start)
            
            while stack:
                atom_idx = stack.pop()
                component.append(atom_idx)
                
                for neighbor in self.atoms[atom_idx].neighbors(self):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)
            
            components.append(sorted(component))
        
        return components
    
    @property
    def num_atoms(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)
    
    @property
    def num_bonds(self) -> int:
        """Number of real bonds in the molecule."""
        return len(self.bonds)
    
    @property
    def is_connected(self) -> bool:
        """Check if molecule is a single connected component."""
        return len(self.connected_components()) <= 1
