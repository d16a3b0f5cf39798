"""
Ring-closure resolution.

Each ring number is open between its first and second mention. The second
mention closes it into a bond and frees the number for reuse later in the
same string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from smilesink.exceptions import RingClosureError
from smilesink.lexer import RingClosureMarker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RingBond:
    """A bond produced by closing a ring number."""
    
    symbol: str | None
    atom1: Any
    atom2: Any
    ring: int


class RingClosureResolver:
    """Pairs the two mentions of each ring number.
    
    Example:
        >>> from smilesink.lexer import RingClosureMarker
        >>> resolver = RingClosureResolver()
        >>> resolver.resolve(RingClosureMarker(1, None, 1), "a1") is None
        True
        >>> resolver.resolve(RingClosureMarker(1, "=", 4), "a3")
        RingBond(symbol='=', atom1='a1', atom2='a3', ring=1)
        >>> resolver.pending
        []
    """
    
    __slots__ = ("_open", "_smiles")
    
    def __init__(self, smiles: str | None = None) -> None:
        # ring number -> (atom handle, bond symbol at first mention)
        self._open: dict[int, tuple[Any, str | None]] = {}
        self._smiles = smiles
    
    @property
    def pending(self) -> list[int]:
        """Ring numbers opened but not yet closed, in ascending order."""
        return sorted(self._open)
    
    def __len__(self) -> int:
        return len(self._open)
    
    def __contains__(self, ring: int) -> bool:
        return ring in self._open
    
    def resolve(self, marker: RingClosureMarker, atom: Any) -> RingBond | None:
        """Record or close the ring number of marker on atom.
        
        Args:
            marker: Ring-closure marker read after the atom.
            atom: Handle of the atom the marker belongs to.
        
        Returns:
            The ring bond to create if this closes the ring, else None.
        
        Raises:
            RingClosureError: If both mentions carry different bond symbols.
        """
        entry = self._open.get(marker.ring)
        if entry is None:
            self._open[marker.ring] = (atom, marker.bond)
            logger.debug("Opened ring %d at offset %d", marker.ring, marker.position)
            return None
        
        pending_atom, pending_bond = entry
        if pending_bond and marker.bond and pending_bond != marker.bond:
            raise RingClosureError(
                f"Inconsistent ring closure {marker.ring}: "
                f"'{pending_bond}' vs '{marker.bond}'",
                self._smiles,
                marker.position,
                ring_index=marker.ring,
            )
        
        del self._open[marker.ring]
        logger.debug("Closed ring %d at offset %d", marker.ring, marker.position)
        return RingBond(
            symbol=marker.bond or pending_bond,
            atom1=pending_atom,
            atom2=atom,
            ring=marker.ring,
        )
