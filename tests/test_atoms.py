"""Tests for atom field decoding."""

import pytest

from smilesink.atoms import (
    AtomSpec,
    decode_atom,
    decode_charge,
    decode_hydrogen_count,
    decode_isotope,
)
from smilesink.lexer import tokenize


def decode(smiles: str) -> AtomSpec:
    return decode_atom(tokenize(smiles)[0])


class TestChargeDecoding:
    """Test charge marker decoding."""

    @pytest.mark.parametrize("raw,expected", [
        (None, 0),
        ("+", 1),
        ("++", 2),
        ("+++", 3),
        ("+2", 2),
        ("+10", 10),
        ("-", -1),
        ("--", -2),
        ("-3", -3),
        ("+0", 0),
    ])
    def test_decode_charge(self, raw, expected):
        """Sign runs count; sign+digits gives the magnitude."""
        assert decode_charge(raw) == expected

    def test_equivalent_charge_forms(self):
        """[N+2] and [N++] are the same charge."""
        assert decode("[N+]").charge == 1
        assert decode("[N++]").charge == decode("[N+2]").charge == 2
        assert decode("[O--]").charge == decode("[O-2]").charge == -2


class TestHydrogenDecoding:
    """Test hydrogen marker decoding."""

    @pytest.mark.parametrize("raw,expected", [
        (None, 0),
        ("H", 1),
        ("H0", 0),
        ("H2", 2),
        ("H12", 12),
    ])
    def test_decode_hydrogen_count(self, raw, expected):
        """H alone is one hydrogen."""
        assert decode_hydrogen_count(raw) == expected


class TestIsotopeDecoding:
    """Test isotope decoding."""

    def test_absent(self):
        """No digits means no isotope."""
        assert decode_isotope(None) is None
        assert decode_isotope("") is None

    def test_present(self):
        """Digits are parsed as an integer."""
        assert decode_isotope("13") == 13
        assert decode_isotope("0") == 0


class TestDecodeAtom:
    """Test full token decoding."""

    def test_labelled_methyl_anion(self):
        """[13CH3-] decodes all fields."""
        spec = decode("[13CH3-]")
        assert spec == AtomSpec(isotope=13, symbol="C", chirality=None, hydrogen_count=3, charge=-1)

    def test_chirality_passthrough(self):
        """Chirality markers are passed through uninterpreted."""
        assert decode("[C@H]").chirality == "@"
        assert decode("[C@@H]").chirality == "@@"
        assert decode("[CH4]").chirality is None

    def test_simple_atom_defaults(self):
        """Simple atoms only have a symbol."""
        spec = decode("Cl")
        assert spec == AtomSpec(isotope=None, symbol="Cl")
        assert spec.hydrogen_count == 0
        assert spec.charge == 0

    def test_bracket_defaults(self):
        """[C] has no hydrogens and no charge."""
        spec = decode("[C]")
        assert spec.hydrogen_count == 0
        assert spec.charge == 0
        assert spec.isotope is None

