"""Branch stack: tracks the atom the next bond attaches to across ``( )``."""

from __future__ import annotations

from typing import Any

from smilesink.exceptions import StructureError


class BranchStack:
    """Stack of attachment atoms.
    
    The stack starts with a single None entry (no atom yet) and can never
    be popped below it. The top is the atom the next bonded atom attaches to.
    
    Example:
        >>> stack = BranchStack()
        >>> stack.set_top(0)
        >>> stack.open()
        >>> stack.set_top(1)
        >>> stack.close()
        >>> stack.top
        0
    """
    
    __slots__ = ("_stack", "_smiles")
    
    def __init__(self, smiles: str | None = None) -> None:
        self._stack: list[Any] = [None]
        self._smiles = smiles
    
    @property
    def top(self) -> Any:
        """Current attachment atom handle, or None before the first atom."""
        return self._stack[-1]
    
    @property
    def depth(self) -> int:
        """Number of branches currently open."""
        return len(self._stack) - 1
    
    def open(self) -> None:
        """Start a branch attached to the current top."""
        self._stack.append(self._stack[-1])
    
    def close(self, position: int | None = None) -> None:
        """End the innermost branch.
        
        Args:
            position: Offset of the ``)`` for error reporting.
        
        Raises:
            StructureError: If no branch is open.
        """
        if len(self._stack) == 1:
            raise StructureError(
                "Branch close without matching open",
                self._smiles,
                position,
            )
        self._stack.pop()
    
    def set_top(self, handle: Any) -> None:
        """Make handle the attachment point for the next atom."""
        self._stack[-1] = handle
    
    def __len__(self) -> int:
        return len(self._stack)
