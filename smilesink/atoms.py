"""
Atom field decoding.

Turns the raw text captured by the lexer into normalized atom properties.
Simple (unbracketed) atoms only ever populate the symbol; their implicit
hydrogens depend on valence rules this package does not apply.
"""

from __future__ import annotations

from dataclasses import dataclass

from smilesink.lexer import AtomToken


@dataclass(frozen=True, slots=True)
class AtomSpec:
    """Normalized atom fields, in the order they appear in ``[18OH-]``.
    
    Attributes:
        isotope: Mass number, or None when not written.
        symbol: Element symbol as written (lowercase for aromatic).
        chirality: Raw chirality marker ('@' or '@@'), or None.
        hydrogen_count: Explicit hydrogen count from bracket notation.
        charge: Formal charge.
    """
    
    isotope: int | None
    symbol: str
    chirality: str | None = None
    hydrogen_count: int = 0
    charge: int = 0


def decode_isotope(raw: str | None) -> int | None:
    """Decode isotope digits; absent means None."""
    if not raw:
        return None
    return int(raw)


def decode_hydrogen_count(raw: str | None) -> int:
    """Decode a hydrogen marker.
    
    Examples:
        >>> decode_hydrogen_count(None), decode_hydrogen_count("H"), decode_hydrogen_count("H3")
        (0, 1, 3)
    """
    if not raw:
        return 0
    digits = raw[1:]
    return int(digits) if digits else 1


def decode_charge(raw: str | None) -> int:
    """Decode a charge marker.
    
    A run of k identical signs means a charge of magnitude k; a single sign
    followed by digits gives the magnitude explicitly.
    
    Examples:
        >>> [decode_charge(c) for c in (None, "+", "++", "+2", "-", "---", "-3")]
        [0, 1, 2, 2, -1, -3, -3]
    """
    if not raw:
        return 0
    
    sign = 1 if raw[0] == "+" else -1
    digits = raw.lstrip("+-")
    if digits:
        return sign * int(digits)
    return sign * len(raw)


def decode_atom(token: AtomToken) -> AtomSpec:
    """Decode the atom fields of a lexer token.
    
    Args:
        token: Atom token produced by the lexer.
    
    Returns:
        AtomSpec with defaults filled in.
    
    Example:
        >>> from smilesink.lexer import tokenize
        >>> decode_atom(tokenize("[13CH3-]")[0])
        AtomSpec(isotope=13, symbol='C', chirality=None, hydrogen_count=3, charge=-1)
    """
    if not token.bracketed:
        return AtomSpec(isotope=None, symbol=token.symbol)
    
    return AtomSpec(
        isotope=decode_isotope(token.isotope),
        symbol=token.symbol,
        chirality=token.chirality or None,
        hydrogen_count=decode_hydrogen_count(token.hydrogens),
        charge=decode_charge(token.charge),
    )
