"""
SMILES grammar lexer.

The lexer scans a SMILES string left to right and produces exactly one
token per step:

    - AtomToken: an optional leading bond symbol, a simple or bracketed
      atom, and any trailing ring-closure markers
    - BranchOpen / BranchClose: literal ``(`` and ``)``
    - ErrorFragment: the unmatched remainder when nothing else fits

Tokens carry raw text only; turning bracket fields into numbers is the job
of :mod:`smilesink.atoms`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from smilesink.elements import BOND_SYMBOLS, BRACKET_SYMBOLS, SIMPLE_SYMBOLS


@dataclass(frozen=True, slots=True)
class RingClosureMarker:
    """A ring-closure number following an atom, e.g. ``=1`` or ``%12``."""
    
    ring: int
    bond: str | None
    position: int


@dataclass(frozen=True, slots=True)
class AtomToken:
    """A bonded atom.
    
    Attributes:
        position: Offset of the first character of the token.
        text: The matched source text.
        bond: Leading bond symbol, or None if unwritten.
        symbol: Element symbol as written (lowercase for aromatic).
        bracketed: True for the ``[...]`` form.
        isotope: Raw isotope digits, or None.
        chirality: Raw chirality marker ("@" or "@@"), or None.
        hydrogens: Raw hydrogen marker ("H", "H3"), or None.
        charge: Raw charge marker ("+", "--", "+2"), or None.
        rings: Trailing ring-closure markers in source order.
    """
    
    position: int
    text: str
    bond: str | None
    symbol: str
    bracketed: bool = False
    isotope: str | None = None
    chirality: str | None = None
    hydrogens: str | None = None
    charge: str | None = None
    rings: tuple[RingClosureMarker, ...] = ()


@dataclass(frozen=True, slots=True)
class BranchOpen:
    position: int


@dataclass(frozen=True, slots=True)
class BranchClose:
    position: int


@dataclass(frozen=True, slots=True)
class ErrorFragment:
    """Unmatched input, from the failing position to the end of the string."""
    
    position: int
    text: str


Token = Union[AtomToken, BranchOpen, BranchClose, ErrorFragment]


class _Tokenizer:
    """Low-level character cursor over a SMILES string.
    
    Provides character-by-character access with lookahead and the ability
    to rewind to a saved position.
    """
    
    __slots__ = ("_string", "_pos")
    
    def __init__(self, string: str) -> None:
        self._string = string
        self._pos = 0
    
    @property
    def position(self) -> int:
        """Current position in the string."""
        return self._pos
    
    @property
    def remaining(self) -> str:
        """Remaining unparsed string."""
        return self._string[self._pos:]
    
    def peek(self, offset: int = 0) -> str | None:
        """Look at character at current position + offset without consuming."""
        pos = self._pos + offset
        if pos >= len(self._string):
            return None
        return self._string[pos]
    
    def next(self) -> str | None:
        """Consume and return the next character, or None at end."""
        if self._pos >= len(self._string):
            return None
        char = self._string[self._pos]
        self._pos += 1
        return char
    
    def skip(self, count: int = 1) -> None:
        """Skip forward by count characters."""
        self._pos += count
    
    def rewind(self, position: int) -> None:
        """Move back to a previously saved position."""
        self._pos = position
    
    def read_while(self, predicate) -> str:
        """Read characters while predicate is true."""
        start = self._pos
        while self._pos < len(self._string) and predicate(self._string[self._pos]):
            self._pos += 1
        return self._string[start:self._pos]
    
    def read_digits(self) -> str:
        """Read a run of ASCII digits (possibly empty)."""
        return self.read_while(_is_digit)
    
    def match_symbol(self, table) -> str | None:
        """Consume the longest symbol from table at the cursor, if any."""
        symbol = table.match(self._string, self._pos)
        if symbol is not None:
            self._pos += len(symbol)
        return symbol
    
    def slice(self, start: int) -> str:
        """Text consumed since start."""
        return self._string[start:self._pos]
    
    def is_eof(self) -> bool:
        """Check if at end of string."""
        return self._pos >= len(self._string)


def _is_digit(char: str) -> bool:
    # str.isdigit() accepts non-ASCII digits such as "²"
    return "0" <= char <= "9"


class Lexer:
    """Iterator over the tokens of a SMILES string.
    
    Example:
        >>> [type(t).__name__ for t in Lexer("C(O)C")]
        ['AtomToken', 'BranchOpen', 'AtomToken', 'BranchClose', 'AtomToken']
    
    Once an ErrorFragment has been produced the input is exhausted.
    """
    
    def __init__(self, smiles: str) -> None:
        self._tokenizer = _Tokenizer(smiles)
    
    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token
    
    def next_token(self) -> Token | None:
        """Extract the single token starting at the current position.
        
        Returns:
            The next token, or None if the input is exhausted.
        """
        tok = self._tokenizer
        if tok.is_eof():
            return None
        
        start = tok.position
        char = tok.peek()
        
        if char == "(":
            tok.next()
            return BranchOpen(start)
        if char == ")":
            tok.next()
            return BranchClose(start)
        
        atom = self._read_atom()
        if atom is not None:
            return atom
        
        tok.rewind(start)
        fragment = tok.remaining
        tok.skip(len(fragment))
        return ErrorFragment(start, fragment)
    
    def _read_atom(self) -> AtomToken | None:
        """Read a bonded atom with its ring closures, or None if there is none."""
        tok = self._tokenizer
        start = tok.position
        
        bond = None
        if tok.peek() in BOND_SYMBOLS:
            bond = tok.next()
        
        if tok.peek() == "[":
            fields = self._read_bracket_fields()
            if fields is None:
                return None
            symbol, isotope, chirality, hydrogens, charge = fields
            bracketed = True
        else:
            symbol = tok.match_symbol(SIMPLE_SYMBOLS)
            if symbol is None:
                return None
            isotope = chirality = hydrogens = charge = None
            bracketed = False
        
        rings = self._read_ring_closures()
        
        return AtomToken(
            position=start,
            text=tok.slice(start),
            bond=bond,
            symbol=symbol,
            bracketed=bracketed,
            isotope=isotope,
            chirality=chirality,
            hydrogens=hydrogens,
            charge=charge,
            rings=rings,
        )
    
    def _read_bracket_fields(
        self,
    ) -> tuple[str, str | None, str | None, str | None, str | None] | None:
        """Read ``[isotope symbol chirality hcount charge]``.
        
        Returns:
            Tuple of (symbol, isotope, chirality, hydrogens, charge) with raw
            text for each optional field, or None if the bracket is malformed.
        """
        tok = self._tokenizer
        tok.next()  # consume '['
        
        isotope = tok.read_digits() or None
        
        symbol = tok.match_symbol(BRACKET_SYMBOLS)
        if symbol is None:
            return None
        
        chirality = None
        if tok.peek() == "@":
            chirality = "@@" if tok.peek(1) == "@" else "@"
            tok.skip(len(chirality))
        
        hydrogens = None
        if tok.peek() == "H":
            start = tok.position
            tok.next()
            tok.read_digits()
            hydrogens = tok.slice(start)
        
        charge = None
        sign = tok.peek()
        if sign in ("+", "-"):
            start = tok.position
            run = tok.read_while(lambda c: c == sign)
            if len(run) == 1:
                tok.read_digits()
            charge = tok.slice(start)
        
        if tok.next() != "]":
            return None
        
        return symbol, isotope, chirality, hydrogens, charge
    
    def _read_ring_closures(self) -> tuple[RingClosureMarker, ...]:
        """Read zero or more ``(bond)? (digit | %dd)`` markers.
        
        A bond symbol that is not followed by a ring number is left
        unconsumed; it belongs to the next atom.
        """
        tok = self._tokenizer
        markers: list[RingClosureMarker] = []
        
        while True:
            start = tok.position
            bond = None
            if tok.peek() in BOND_SYMBOLS:
                bond = tok.next()
            
            char = tok.peek()
            if char is not None and _is_digit(char):
                tok.next()
                ring = int(char)
            elif char == "%":
                digits = (tok.peek(1) or "") + (tok.peek(2) or "")
                if len(digits) != 2 or not all(_is_digit(d) for d in digits):
                    tok.rewind(start)
                    break
                tok.skip(3)
                ring = int(digits)
            else:
                tok.rewind(start)
                break
            
            markers.append(RingClosureMarker(ring=ring, bond=bond, position=start))
        
        return tuple(markers)


def tokenize(smiles: str) -> list[Token]:
    """Split a SMILES string into tokens.
    
    Args:
        smiles: SMILES string to scan.
    
    Returns:
        List of tokens; if the input is malformed the last one is an
        ErrorFragment.
    
    Example:
        >>> tokens = tokenize("C1CC1")
        >>> [t.text for t in tokens]
        ['C1', 'C', 'C1']
    """
    return list(Lexer(smiles))
