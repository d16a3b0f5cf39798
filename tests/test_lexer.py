"""Tests for the SMILES grammar lexer."""

import pytest

from smilesink.lexer import (
    AtomToken,
    BranchClose,
    BranchOpen,
    ErrorFragment,
    Lexer,
    RingClosureMarker,
    tokenize,
)


class TestSimpleAtoms:
    """Test unbracketed atom tokens."""

    def test_single_atom(self):
        """A lone carbon is one atom token."""
        tokens = tokenize("C")
        assert tokens == [AtomToken(position=0, text="C", bond=None, symbol="C")]

    def test_two_letter_before_one_letter(self):
        """Cl and Br win over C and B."""
        tokens = tokenize("ClCBrB")
        assert [t.symbol for t in tokens] == ["Cl", "C", "Br", "B"]

    def test_aromatic_symbols(self):
        """Lowercase aromatic atoms are accepted."""
        tokens = tokenize("c1ccncc1")
        assert [t.symbol for t in tokens] == ["c", "c", "c", "n", "c", "c"]

    def test_leading_bond(self):
        """Bond symbols attach to the atom that follows them."""
        tokens = tokenize("C=C#N")
        assert [t.bond for t in tokens] == [None, "=", "#"]
        assert [t.text for t in tokens] == ["C", "=C", "#N"]

    @pytest.mark.parametrize("bond", ["-", "=", "#", ":", ".", "/", "\\"])
    def test_every_bond_symbol(self, bond):
        """All seven bond symbols are recognized."""
        tokens = tokenize(f"C{bond}C")
        assert tokens[1].bond == bond

    def test_positions(self):
        """Tokens record their starting offsets."""
        tokens = tokenize("CC(=O)O")
        assert [t.position for t in tokens] == [0, 1, 2, 3, 5, 6]

    def test_simple_form_leaves_fields_empty(self):
        """Simple atoms carry no bracket fields."""
        token = tokenize("N")[0]
        assert not token.bracketed
        assert token.isotope is None
        assert token.chirality is None
        assert token.hydrogens is None
        assert token.charge is None


class TestBracketAtoms:
    """Test bracketed atom tokens."""

    def test_all_fields(self):
        """Isotope, symbol, chirality, hydrogens and charge are captured raw."""
        token = tokenize("[13C@@H3-]")[0]
        assert token.bracketed
        assert token.isotope == "13"
        assert token.symbol == "C"
        assert token.chirality == "@@"
        assert token.hydrogens == "H3"
        assert token.charge == "-"

    def test_element_outside_organic_subset(self):
        """Any element symbol is allowed inside brackets."""
        assert tokenize("[Fe]")[0].symbol == "Fe"
        assert tokenize("[Na+]")[0].symbol == "Na"

    def test_two_letter_bracket_symbols(self):
        """Longest match picks Co over C, Sc over S."""
        assert tokenize("[Co]")[0].symbol == "Co"
        assert tokenize("[Sc]")[0].symbol == "Sc"
        assert tokenize("[Cl-]")[0].symbol == "Cl"

    def test_hydrogen_count_is_not_symbol(self):
        """An uppercase H after the symbol is a hydrogen count."""
        token = tokenize("[NH4+]")[0]
        assert token.symbol == "N"
        assert token.hydrogens == "H4"
        assert token.charge == "+"

    def test_bare_hydrogen_marker(self):
        """H without digits is kept as-is."""
        assert tokenize("[OH-]")[0].hydrogens == "H"

    def test_aromatic_bracket_atoms(self):
        """Aromatic forms including se and as are allowed in brackets."""
        assert tokenize("[nH]")[0].symbol == "n"
        assert tokenize("[se]")[0].symbol == "se"
        assert tokenize("[as]")[0].symbol == "as"

    def test_wildcard(self):
        """The wildcard atom is allowed in brackets."""
        assert tokenize("[*]")[0].symbol == "*"

    @pytest.mark.parametrize("charge", ["+", "++", "+++", "+2", "-", "--", "-3"])
    def test_charge_forms(self, charge):
        """Runs of signs and sign+digits are both valid charges."""
        assert tokenize(f"[N{charge}]")[0].charge == charge

    def test_hydrogen_as_element(self):
        """A bracketed H is the element, not a hydrogen count."""
        token = tokenize("[2H]")[0]
        assert token.symbol == "H"
        assert token.isotope == "2"
        assert token.hydrogens is None


class TestRingClosureMarkers:
    """Test trailing ring-closure markers."""

    def test_single_digit(self):
        """Digits after an atom are ring closures."""
        token = tokenize("C1")[0]
        assert token.rings == (RingClosureMarker(ring=1, bond=None, position=1),)

    def test_multiple_digits(self):
        """Each digit is its own ring number."""
        token = tokenize("C12")[0]
        assert [m.ring for m in token.rings] == [1, 2]

    def test_percent_two_digits(self):
        """%nn is a single two-digit ring number."""
        token = tokenize("C%12")[0]
        assert [m.ring for m in token.rings] == [12]
        assert token.text == "C%12"

    def test_ring_zero(self):
        """0 is a valid ring number."""
        assert tokenize("C0")[0].rings[0].ring == 0

    def test_bond_on_ring_marker(self):
        """A bond symbol directly before a digit belongs to the ring marker."""
        token = tokenize("C=1")[0]
        assert token.rings == (RingClosureMarker(ring=1, bond="=", position=1),)
        token = tokenize("C=1CC1")[1]
        assert token.symbol == "C"

    def test_ring_bond_after_atom(self):
        """In C=C1 the bond belongs to the atom; in C1=2, to ring 2."""
        atom = tokenize("C=C1")[1]
        assert atom.bond == "="
        assert atom.rings[0].bond is None
        atom = tokenize("C1=2")[0]
        assert [(m.ring, m.bond) for m in atom.rings] == [(1, None), (2, "=")]

    def test_bond_not_followed_by_digit(self):
        """A trailing bond without a ring number is left for the next atom."""
        tokens = tokenize("C1=C")
        assert [m.ring for m in tokens[0].rings] == [1]
        assert tokens[1].bond == "="

    def test_percent_with_one_digit_is_left_unconsumed(self):
        """%1 is not a ring marker; the rest becomes an error fragment."""
        tokens = tokenize("C%1")
        assert tokens[0].rings == ()
        assert tokens[1] == ErrorFragment(position=1, text="%1")


class TestBranches:
    """Test branch markers."""

    def test_branch_tokens(self):
        """Parentheses produce BranchOpen and BranchClose."""
        tokens = tokenize("C(O)C")
        assert isinstance(tokens[1], BranchOpen)
        assert isinstance(tokens[3], BranchClose)
        assert tokens[1].position == 1
        assert tokens[3].position == 3

    def test_unbalanced_is_lexed(self):
        """Balance is not the lexer's concern."""
        tokens = tokenize("C)C")
        assert isinstance(tokens[1], BranchClose)


class TestErrorFragments:
    """Test error fragments for malformed input."""

    def test_unknown_character(self):
        """An unknown character consumes the rest of the input."""
        tokens = tokenize("CC?CC")
        assert tokens[-1] == ErrorFragment(position=2, text="?CC")
        assert len(tokens) == 3

    def test_unterminated_bracket(self):
        """A bracket atom without ] is an error from the [ onwards."""
        tokens = tokenize("C[NH4")
        assert tokens[-1] == ErrorFragment(position=1, text="[NH4")

    def test_unknown_bracket_symbol(self):
        """Unknown element symbols are errors."""
        assert isinstance(tokenize("[Xx]")[0], ErrorFragment)

    def test_bad_charge(self):
        """A run of signs followed by digits is not a charge."""
        assert isinstance(tokenize("[N++2]")[0], ErrorFragment)

    def test_triple_chirality(self):
        """More than two @ is rejected."""
        assert isinstance(tokenize("[C@@@H]")[0], ErrorFragment)

    def test_dangling_bond(self):
        """A bond symbol with no atom after it is an error including the bond."""
        tokens = tokenize("CC=")
        assert tokens[-1] == ErrorFragment(position=2, text="=")

    def test_lowercase_unknown(self):
        """Two-letter aromatic forms are not allowed outside brackets."""
        tokens = tokenize("se")
        assert tokens[0].symbol == "s"
        assert tokens[1] == ErrorFragment(position=1, text="e")

    def test_whitespace(self):
        """Whitespace is not part of the grammar."""
        assert tokenize("C C")[1] == ErrorFragment(position=1, text=" C")


class TestLexerIteration:
    """Test the Lexer iterator interface."""

    def test_empty_string(self):
        """An empty string has no tokens."""
        assert tokenize("") == []

    def test_next_token_at_end(self):
        """next_token returns None once exhausted."""
        lexer = Lexer("C")
        assert isinstance(lexer.next_token(), AtomToken)
        assert lexer.next_token() is None

    def test_error_ends_iteration(self):
        """Nothing follows an error fragment."""
        tokens = list(Lexer("C$C(C)C"))
        assert isinstance(tokens[-1], ErrorFragment)
        assert len(tokens) == 2
