"""
Custom exceptions for smilesink.

Every error raised while reading a SMILES string derives from ParseError,
which in turn derives from the library-wide ChemError.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all chemistry-related errors."""
    
    pass


class ParseError(ChemError):
    """Error during SMILES parsing.
    
    Attributes:
        position: Character position in the SMILES string where error occurred.
        smiles: The original SMILES string being parsed.
        message: Description of what went wrong.
    """
    
    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.smiles = smiles
        self.position = position
        
        # Build detailed error message
        parts = [message]
        if smiles is not None and position is not None:
            parts.append(f"\n  {smiles}")
            parts.append(f"\n  {' ' * position}^")
        elif smiles is not None:
            parts.append(f" in: {smiles}")
        elif position is not None:
            parts.append(f" at position {position}")
        
        super().__init__("".join(parts))


class SmilesSyntaxError(ParseError):
    """No token form matches the input at the current position.
    
    Attributes:
        fragment: The unmatched remainder of the input.
    """
    
    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
        fragment: str | None = None,
    ) -> None:
        self.fragment = fragment
        super().__init__(message, smiles, position)


class StructureError(ParseError):
    """Branch structure is unbalanced."""
    
    pass


class RingClosureError(ParseError):
    """Inconsistent or dangling ring closure.
    
    Attributes:
        ring_index: The problematic ring closure number.
    """
    
    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
        ring_index: int | None = None,
    ) -> None:
        self.ring_index = ring_index
        super().__init__(message, smiles, position)
