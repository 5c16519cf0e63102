"""Tests for the state code registry."""

from states import INDIAN_STATES, get_state, state_code, state_name


class TestRegistry:

    def test_has_37_unique_codes(self):
        codes = [s.code for s in INDIAN_STATES]
        assert len(codes) == 37
        assert len(set(codes)) == 37

    def test_code_25_is_not_registered(self):
        assert get_state("25") is None

    def test_other_territory(self):
        assert state_name("97") == "Other Territory"

    def test_lookup_by_code(self):
        assert state_name("27") == "Maharashtra"
        assert state_name("99") is None
        assert state_name(None) is None

    def test_lookup_by_name_is_case_insensitive(self):
        assert state_code("maharashtra") == "27"
        assert state_code("  TAMIL NADU ") == "33"

    def test_unknown_name(self):
        assert state_code("Atlantis") is None
        assert state_code("") is None
