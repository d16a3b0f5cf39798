"""
Sink protocol and built-in sinks.

The parser reports what it reads through exactly two operations:

    create_atom(state, spec) -> atom handle
    create_bond(state, symbol, atom1, atom2) -> bond handle

``state`` is whatever the caller passed to ``SmilesParser.parse`` and is
handed through untouched. Handles are opaque to the parser; it only keeps
them to bond later atoms to earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from smilesink.atoms import AtomSpec
from smilesink.elements import BondOrder, bond_order
from smilesink.types import Molecule


@runtime_checkable
class Sink(Protocol):
    """Receiver of atom and bond creation events."""
    
    def create_atom(self, state: Any, spec: AtomSpec) -> Any:
        """Create an atom and return a handle identifying it."""
        ...
    
    def create_bond(self, state: Any, symbol: str | None, atom1: Any, atom2: Any) -> Any:
        """Create a bond between two previously returned atom handles."""
        ...


class MoleculeSink:
    """Default sink: builds a :class:`~smilesink.types.Molecule`.
    
    The state must be a Molecule. Atom handles are atom indices. A ``.``
    bond symbol is stored in ``Molecule.disconnections`` rather than as a
    bond, and its handle indexes that list.
    """
    
    def create_atom(self, state: Molecule, spec: AtomSpec) -> int:
        return state.add_atom(
            spec.symbol,
            isotope=spec.isotope,
            chirality=spec.chirality,
            hydrogen_count=spec.hydrogen_count,
            charge=spec.charge,
        )
    
    def create_bond(self, state: Molecule, symbol: str | None, atom1: int, atom2: int) -> int:
        order = bond_order(symbol)
        if order == BondOrder.DISCONNECTED:
            return state.add_disconnection(atom1, atom2)
        return state.add_bond(atom1, atom2, order=order, symbol=symbol)


AtomCallback = Callable[..., Any]
BondCallback = Callable[..., Any]


class CallbackSink:
    """Adapts a pair of plain functions to the Sink protocol.
    
    The atom callback receives the fields positionally, in the order they
    are written in a bracket atom such as ``[18OH-]``::
    
        add_atom(state, isotope, symbol, chirality, hydrogen_count, charge)
        add_bond(state, symbol, atom1, atom2)
    
    Example:
        >>> atoms = []
        >>> sink = CallbackSink(
        ...     lambda st, iso, sym, chir, h, chg: atoms.append(sym) or len(atoms) - 1,
        ...     lambda st, bond, a1, a2: (a1, a2),
        ... )
    """
    
    __slots__ = ("_add_atom", "_add_bond")
    
    def __init__(self, add_atom: AtomCallback, add_bond: BondCallback) -> None:
        self._add_atom = add_atom
        self._add_bond = add_bond
    
    def create_atom(self, state: Any, spec: AtomSpec) -> Any:
        return self._add_atom(
            state,
            spec.isotope,
            spec.symbol,
            spec.chirality,
            spec.hydrogen_count,
            spec.charge,
        )
    
    def create_bond(self, state: Any, symbol: str | None, atom1: Any, atom2: Any) -> Any:
        return self._add_bond(state, symbol, atom1, atom2)


@dataclass(frozen=True, slots=True)
class AtomEvent:
    """An atom creation recorded by RecordingSink."""
    
    handle: int
    spec: AtomSpec


@dataclass(frozen=True, slots=True)
class BondEvent:
    """A bond creation recorded by RecordingSink."""
    
    handle: int
    symbol: str | None
    atom1: int
    atom2: int
    
    @property
    def order(self) -> BondOrder:
        return bond_order(self.symbol)


class RecordingSink:
    """Sink that appends AtomEvent and BondEvent records to a list state.
    
    A handle is the index of its event in the state list, so two parses of
    the same string record equal lists.
    
    Example:
        >>> from smilesink.parser import ParserConfig, SmilesParser
        >>> parser = SmilesParser(ParserConfig(sink=RecordingSink()))
        >>> [type(e).__name__ for e in parser.parse("CO", [])]
        ['AtomEvent', 'AtomEvent', 'BondEvent']
    """
    
    def create_atom(self, state: list, spec: AtomSpec) -> int:
        handle = len(state)
        state.append(AtomEvent(handle, spec))
        return handle
    
    def create_bond(self, state: list, symbol: str | None, atom1: int, atom2: int) -> int:
        handle = len(state)
        state.append(BondEvent(handle, symbol, atom1, atom2))
        return handle
