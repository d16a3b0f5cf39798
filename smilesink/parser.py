"""
SMILES string parser.

This module drives the lexer over a SMILES string and turns its tokens into
Sink calls. All per-parse state (the branch stack and the open ring numbers)
lives in a context object created fresh for each call, so a parser can be
reused and shared freely.

Features:
    - Organic subset atoms, aromatic lowercase atoms
    - Bracket atoms with isotope, chirality, hydrogen count and charge
    - Bond symbols - = # : . / \\
    - Ring closures 0-9 and %10-%99, with ring-number reuse
    - Branches (parentheses), nested to any depth
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from smilesink.atoms import decode_atom
from smilesink.branches import BranchStack
from smilesink.exceptions import RingClosureError, SmilesSyntaxError, StructureError
from smilesink.lexer import AtomToken, BranchClose, BranchOpen, ErrorFragment, Lexer
from smilesink.rings import RingClosureResolver
from smilesink.sink import MoleculeSink, Sink
from smilesink.types import Molecule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserConfig:
    """Parser configuration.
    
    Attributes:
        sink: Receiver of atom and bond creation calls.
        strict: Reject input that is tolerated by default: unclosed
            branches, unclosed ring numbers, a bond symbol before the first
            atom of the string, and a ring number closed on the atom that
            opened it.
    """
    
    sink: Sink = field(default_factory=MoleculeSink)
    strict: bool = False


@dataclass
class _ParseContext:
    """Mutable state for one parse call."""
    
    smiles: str
    state: Any
    branches: BranchStack
    rings: RingClosureResolver
    
    @classmethod
    def start(cls, smiles: str, state: Any) -> "_ParseContext":
        return cls(
            smiles=smiles,
            state=state,
            branches=BranchStack(smiles),
            rings=RingClosureResolver(smiles),
        )


class SmilesParser:
    """SMILES string parser.
    
    Example:
        >>> parser = SmilesParser()
        >>> mol = parser.parse("CCO", Molecule())
        >>> len(mol.atoms), len(mol.bonds)
        (3, 2)
    
    With a custom sink, ``state`` can be any object the sink understands:
        >>> from smilesink.sink import RecordingSink
        >>> events = SmilesParser(ParserConfig(sink=RecordingSink())).parse("C=C", [])
        >>> len(events)
        3
    
    For the default molecule model, use the module-level `parse()` function:
        >>> from smilesink import parse
        >>> mol = parse("CCO")
    """
    
    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config if config is not None else ParserConfig()
    
    @property
    def config(self) -> ParserConfig:
        return self._config
    
    def parse(self, smiles: str, state: Any) -> Any:
        """Parse a SMILES string, reporting atoms and bonds to the sink.
        
        Args:
            smiles: SMILES string to parse.
            state: Value passed through to every sink call; for the default
                sink, the Molecule to fill.
        
        Returns:
            ``state``, after all sink calls.
        
        Raises:
            SmilesSyntaxError: If part of the string matches no token.
            StructureError: If a branch is closed without being opened.
            RingClosureError: If a ring number is closed with two different
                bond symbols.
        
        Sink calls made before an error are not undone.
        """
        ctx = _ParseContext.start(smiles, state)
        logger.debug("Parsing SMILES %r", smiles)
        
        for token in Lexer(smiles):
            if isinstance(token, AtomToken):
                self._add_atom(ctx, token)
            elif isinstance(token, BranchOpen):
                ctx.branches.open()
            elif isinstance(token, BranchClose):
                ctx.branches.close(token.position)
            elif isinstance(token, ErrorFragment):
                raise SmilesSyntaxError(
                    f"Unexpected input: '{token.text}'",
                    smiles,
                    token.position,
                    fragment=token.text,
                )
        
        self._finish(ctx)
        return state
    
    def _add_atom(self, ctx: _ParseContext, token: AtomToken) -> None:
        """Create the atom of token, its chain bond and its ring bonds."""
        sink = self._config.sink
        spec = decode_atom(token)
        atom = sink.create_atom(ctx.state, spec)
        
        previous = ctx.branches.top
        if previous is not None:
            sink.create_bond(ctx.state, token.bond, previous, atom)
        elif token.bond is not None:
            if self._config.strict:
                raise StructureError(
                    f"Bond '{token.bond}' has no preceding atom",
                    ctx.smiles,
                    token.position,
                )
            logger.debug("Ignoring bond '%s' with no preceding atom", token.bond)
        
        for marker in token.rings:
            ring_bond = ctx.rings.resolve(marker, atom)
            if ring_bond is None:
                continue
            if ring_bond.atom1 is ring_bond.atom2:
                if self._config.strict:
                    raise RingClosureError(
                        f"Ring closure {marker.ring} bonds an atom to itself",
                        ctx.smiles,
                        marker.position,
                        ring_index=marker.ring,
                    )
                logger.debug("Ring %d closes on the atom that opened it", marker.ring)
            sink.create_bond(ctx.state, ring_bond.symbol, ring_bond.atom1, ring_bond.atom2)
        
        ctx.branches.set_top(atom)
    
    def _finish(self, ctx: _ParseContext) -> None:
        """Check for branches and rings left open at end of input."""
        if ctx.branches.depth:
            if self._config.strict:
                raise StructureError(
                    f"{ctx.branches.depth} unclosed branch(es)",
                    ctx.smiles,
                    len(ctx.smiles),
                )
            logger.debug("%d branch(es) left open at end of input", ctx.branches.depth)
        
        if ctx.rings.pending:
            unclosed = ctx.rings.pending
            if self._config.strict:
                raise RingClosureError(
                    f"Unclosed ring indices: {unclosed}",
                    ctx.smiles,
                    len(ctx.smiles),
                    ring_index=unclosed[0],
                )
            logger.debug("Ring indices %s left open at end of input", unclosed)


_DEFAULT_PARSER = SmilesParser()
_STRICT_PARSER = SmilesParser(ParserConfig(strict=True))


def parse(smiles: str, *, strict: bool = False) -> Molecule:
    """Parse a SMILES string into a new Molecule.
    
    This is a convenience function that uses the default MoleculeSink.
    
    Args:
        smiles: SMILES string to parse.
        strict: Reject input tolerated by default (see ``ParserConfig``).
    
    Returns:
        Parsed Molecule object.
    
    Raises:
        ParseError: If the SMILES string is invalid.
    
    Example:
        >>> mol = parse("C1CC1")
        >>> len(mol.atoms), len(mol.bonds)
        (3, 3)
    """
    parser = _STRICT_PARSER if strict else _DEFAULT_PARSER
    return parser.parse(smiles, Molecule())
