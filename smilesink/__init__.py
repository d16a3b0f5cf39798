"""
Smilesink - Pure Python SMILES reader with pluggable graph sinks.

A zero-dependency library that reads SMILES notation and reports the atoms
and bonds it describes to a sink of your choice.

    >>> from smilesink import parse
    >>> mol = parse("CC(=O)O")
    >>> len(mol.atoms), len(mol.bonds)
    (4, 3)

Custom graph backends implement the two-method Sink protocol:

    >>> from smilesink import SmilesParser, ParserConfig, RecordingSink
    >>> parser = SmilesParser(ParserConfig(sink=RecordingSink()))
    >>> events = parser.parse("C=O", [])
"""

__version__ = "0.1.0"

# Core types
from smilesink.types import Atom, Bond, Disconnection, Molecule
from smilesink.atoms import AtomSpec

# Parsing
from smilesink.parser import parse, ParserConfig, SmilesParser
from smilesink.lexer import Lexer, tokenize

# Sinks
from smilesink.sink import (
    AtomEvent,
    BondEvent,
    CallbackSink,
    MoleculeSink,
    RecordingSink,
    Sink,
)

# Exceptions
from smilesink.exceptions import (
    ChemError,
    ParseError,
    RingClosureError,
    SmilesSyntaxError,
    StructureError,
)

# Element data
from smilesink.elements import BondOrder, Element, bond_order

__all__ = [
    # Types
    "Atom", "Bond", "Disconnection", "Molecule", "AtomSpec",
    # Parsing
    "parse", "ParserConfig", "SmilesParser", "Lexer", "tokenize",
    # Sinks
    "Sink", "MoleculeSink", "CallbackSink", "RecordingSink", "AtomEvent", "BondEvent",
    # Exceptions
    "ChemError", "ParseError", "SmilesSyntaxError", "StructureError", "RingClosureError",
    # Elements
    "BondOrder", "Element", "bond_order",
]
