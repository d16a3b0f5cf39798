"""Test configuration and fixtures for smilesink tests."""

import pytest

from smilesink import ParserConfig, RecordingSink, SmilesParser
from smilesink.sink import AtomEvent, BondEvent


def record(smiles: str, strict: bool = False) -> list:
    """Parse smiles with a RecordingSink and return the event list."""
    parser = SmilesParser(ParserConfig(sink=RecordingSink(), strict=strict))
    return parser.parse(smiles, [])


def topology(events: list) -> tuple[list[str], list[tuple[int, int, int]]]:
    """Reduce an event list to atom symbols and (order, i, j) bonds.
    
    Atom positions replace handles, so the result does not depend on
    how the sink numbers its atoms.
    """
    index = {}
    symbols = []
    bonds = []
    for event in events:
        if isinstance(event, AtomEvent):
            index[event.handle] = len(symbols)
            symbols.append(event.spec.symbol)
        elif isinstance(event, BondEvent):
            bonds.append((int(event.order), index[event.atom1], index[event.atom2]))
    return symbols, bonds


@pytest.fixture
def simple_smiles() -> list[str]:
    """Basic valid SMILES strings for smoke testing."""
    return [
        "C",
        "CC",
        "CCC",
        "CCO",
        "C=C",
        "C#C",
        "C=O",
        "C#N",
        "ClCBr",
    ]


@pytest.fixture
def ring_smiles() -> list[str]:
    """SMILES with ring closures."""
    return [
        "C1CC1",
        "C1CCC1",
        "C1CCCCC1",
        "c1ccccc1",
        "C1CC2CCCCC2C1",
        "C12CC1CC2",
        "C%10CC%10",
        "C%99CC%99",
    ]


@pytest.fixture
def complex_smiles() -> list[str]:
    """Complex real-world molecules."""
    return [
        # Aspirin
        "CC(=O)OC1=CC=CC=C1C(=O)O",
        # Caffeine
        "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
        # Ibuprofen
        "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
        # Acetaminophen
        "CC(=O)Nc1ccc(O)cc1",
        # Naphthalene
        "c1ccc2ccccc2c1",
        # Nitro group with charges
        "C[N+](=O)[O-]",
    ]
