"""
Element symbols, symbol tables and bond semantics.

This module holds the static data the lexer matches against (the organic
subset usable without brackets and the full periodic table usable inside
brackets) together with the mapping from SMILES bond symbols to bond orders.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Final, FrozenSet, Iterable


class BondOrder(IntEnum):
    """Bond order enumeration.
    
    DISCONNECTED is the order of the explicit "not bonded" marker ``.``;
    it never counts as a real bond.
    """
    
    DISCONNECTED = 0
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    
    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.
    
    Attributes:
        atomic_number: Atomic number (proton count).
        symbol: Element symbol (e.g., "C", "Cl").
        name: Full element name.
    """
    
    atomic_number: int
    symbol: str
    name: str
    
    # Class-level registry
    _by_symbol: ClassVar[dict[str, "Element"]] = {}
    
    def __post_init__(self) -> None:
        Element._by_symbol[self.symbol] = self
    
    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by symbol; lowercase aromatic forms are accepted."""
        if symbol in cls._by_symbol:
            return cls._by_symbol[symbol]
        if symbol in AROMATIC_SUBSET:
            # "c" -> "C", "se" -> "Se"
            return cls._by_symbol[symbol.capitalize()]
        return None
    

_ELEMENTS_DATA: Final[list[tuple[int, str, str]]] = [
    (1, "H", "Hydrogen"), (2, "He", "Helium"), (3, "Li", "Lithium"),
    (4, "Be", "Beryllium"), (5, "B", "Boron"), (6, "C", "Carbon"),
    (7, "N", "Nitrogen"), (8, "O", "Oxygen"), (9, "F", "Fluorine"),
    (10, "Ne", "Neon"), (11, "Na", "Sodium"), (12, "Mg", "Magnesium"),
    (13, "Al", "Aluminum"), (14, "Si", "Silicon"), (15, "P", "Phosphorus"),
    (16, "S", "Sulfur"), (17, "Cl", "Chlorine"), (18, "Ar", "Argon"),
    (19, "K", "Potassium"), (20, "Ca", "Calcium"), (21, "Sc", "Scandium"),
    (22, "Ti", "Titanium"), (23, "V", "Vanadium"), (24, "Cr", "Chromium"),
    (25, "Mn", "Manganese"), (26, "Fe", "Iron"), (27, "Co", "Cobalt"),
    (28, "Ni", "Nickel"), (29, "Cu", "Copper"), (30, "Zn", "Zinc"),
    (31, "Ga", "Gallium"), (32, "Ge", "Germanium"), (33, "As", "Arsenic"),
    (34, "Se", "Selenium"), (35, "Br", "Bromine"), (36, "Kr", "Krypton"),
    (37, "Rb", "Rubidium"), (38, "Sr", "Strontium"), (39, "Y", "Yttrium"),
    (40, "Zr", "Zirconium"), (41, "Nb", "Niobium"), (42, "Mo", "Molybdenum"),
    (43, "Tc", "Technetium"), (44, "Ru", "Ruthenium"), (45, "Rh", "Rhodium"),
    (46, "Pd", "Palladium"), (47, "Ag", "Silver"), (48, "Cd", "Cadmium"),
    (49, "In", "Indium"), (50, "Sn", "Tin"), (51, "Sb", "Antimony"),
    (52, "Te", "Tellurium"), (53, "I", "Iodine"), (54, "Xe", "Xenon"),
    (55, "Cs", "Cesium"), (56, "Ba", "Barium"), (57, "La", "Lanthanum"),
    (58, "Ce", "Cerium"), (59, "Pr", "Praseodymium"), (60, "Nd", "Neodymium"),
    (61, "Pm", "Promethium"), (62, "Sm", "Samarium"), (63, "Eu", "Europium"),
    (64, "Gd", "Gadolinium"), (65, "Tb", "Terbium"), (66, "Dy", "Dysprosium"),
    (67, "Ho", "Holmium"), (68, "Er", "Erbium"), (69, "Tm", "Thulium"),
    (70, "Yb", "Ytterbium"), (71, "Lu", "Lutetium"), (72, "Hf", "Hafnium"),
    (73, "Ta", "Tantalum"), (74, "W", "Tungsten"), (75, "Re", "Rhenium"),
    (76, "Os", "Osmium"), (77, "Ir", "Iridium"), (78, "Pt", "Platinum"),
    (79, "Au", "Gold"), (80, "Hg", "Mercury"), (81, "Tl", "Thallium"),
    (82, "Pb", "Lead"), (83, "Bi", "Bismuth"), (84, "Po", "Polonium"),
    (85, "At", "Astatine"), (86, "Rn", "Radon"), (87, "Fr", "Francium"),
    (88, "Ra", "Radium"), (89, "Ac", "Actinium"), (90, "Th", "Thorium"),
    (91, "Pa", "Protactinium"), (92, "U", "Uranium"), (93, "Np", "Neptunium"),
    (94, "Pu", "Plutonium"), (95, "Am", "Americium"), (96, "Cm", "Curium"),
    (97, "Bk", "Berkelium"), (98, "Cf", "Californium"), (99, "Es", "Einsteinium"),
    (100, "Fm", "Fermium"), (101, "Md", "Mendelevium"), (102, "No", "Nobelium"),
    (103, "Lr", "Lawrencium"), (104, "Rf", "Rutherfordium"), (105, "Db", "Dubnium"),
    (106, "Sg", "Seaborgium"), (107, "Bh", "Bohrium"), (108, "Hs", "Hassium"),
    (109, "Mt", "Meitnerium"), (110, "Ds", "Darmstadtium"), (111, "Rg", "Roentgenium"),
    (112, "Cn", "Copernicium"), (113, "Nh", "Nihonium"), (114, "Fl", "Flerovium"),
    (115, "Mc", "Moscovium"), (116, "Lv", "Livermorium"), (117, "Ts", "Tennessine"),
    (118, "Og", "Oganesson"),
]

ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, name) for num, sym, name in _ELEMENTS_DATA
)

# Daylight "organic subset" - atoms that can appear without brackets
ORGANIC_SUBSET: Final[FrozenSet[str]] = frozenset({
    "B", "C", "N", "O", "P", "S", "F", "Cl", "Br", "I",
})

# Aromatic element symbols allowed in lowercase SMILES form
AROMATIC_SUBSET: Final[FrozenSet[str]] = frozenset({
    "b", "c", "n", "o", "p", "s", "as", "se",
})

# Only single-letter aromatic forms are allowed outside brackets
SIMPLE_AROMATIC: Final[FrozenSet[str]] = frozenset({"b", "c", "n", "o", "p", "s"})

WILDCARD: Final[str] = "*"


class SymbolTable:
    """Maximal-munch lookup over a fixed set of atom symbols.
    
    Candidates are tried longest first, so a two-letter symbol always wins
    over a one-letter symbol that is its prefix ("Cl" before "C").
    
    Example:
        >>> table = SymbolTable(["C", "Cl", "N"])
        >>> table.match("ClC", 0)
        'Cl'
        >>> table.match("CN", 0)
        'C'
    """
    
    __slots__ = ("_by_length",)
    
    def __init__(self, symbols: Iterable[str]) -> None:
        by_length: dict[int, set[str]] = {}
        for symbol in symbols:
            if not symbol:
                raise ValueError("Empty symbol in symbol table")
            by_length.setdefault(len(symbol), set()).add(symbol)
        self._by_length: tuple[tuple[int, frozenset[str]], ...] = tuple(
            (length, frozenset(group))
            for length, group in sorted(by_length.items(), reverse=True)
        )
    
    def match(self, text: str, pos: int = 0) -> str | None:
        """Return the longest symbol starting at ``text[pos]``, or None."""
        for length, group in self._by_length:
            candidate = text[pos:pos + length]
            if len(candidate) == length and candidate in group:
                return candidate
        return None
    
    def __contains__(self, symbol: str) -> bool:
        return any(symbol in group for _, group in self._by_length)


SIMPLE_SYMBOLS: Final[SymbolTable] = SymbolTable(ORGANIC_SUBSET | SIMPLE_AROMATIC)

BRACKET_SYMBOLS: Final[SymbolTable] = SymbolTable(
    [elem.symbol for elem in ELEMENTS] + sorted(AROMATIC_SUBSET) + [WILDCARD]
)


# Bond symbols and their orders. None is the implicit (unwritten) bond.
BOND_SYMBOLS: Final[FrozenSet[str]] = frozenset({"-", "=", "#", ":", ".", "/", "\\"})

BOND_ORDERS: Final[dict[str | None, BondOrder]] = {
    None: BondOrder.SINGLE,
    "-": BondOrder.SINGLE,
    "=": BondOrder.DOUBLE,
    "#": BondOrder.TRIPLE,
    ":": BondOrder.SINGLE,  # aromatic, kept as raw symbol
    "/": BondOrder.SINGLE,
    "\\": BondOrder.SINGLE,
    ".": BondOrder.DISCONNECTED,
}

STEREO_BOND_SYMBOLS: Final[FrozenSet[str]] = frozenset({"/", "\\"})


def bond_order(symbol: str | None) -> BondOrder:
    """Get the bond order for a SMILES bond symbol.
    
    Args:
        symbol: One of ``- = # : . / \\``, or None for an implicit bond.
    
    Returns:
        The corresponding BondOrder.
    
    Raises:
        ValueError: If symbol is not a SMILES bond symbol.
    """
    try:
        return BOND_ORDERS[symbol]
    except KeyError:
        raise ValueError(f"Unknown bond symbol: {symbol!r}") from None


def get_atomic_number(symbol: str) -> int:
    """Get atomic number for an element symbol.
    
    Args:
        symbol: Element symbol (e.g., "C", "cl", "Cl").
    
    Returns:
        Atomic number, or 0 if not found (including the wildcard).
    """
    elem = Element.from_symbol(symbol)
    return elem.atomic_number if elem else 0


def is_aromatic_symbol(symbol: str) -> bool:
    """Check if symbol represents an aromatic atom."""
    return symbol in AROMATIC_SUBSET
