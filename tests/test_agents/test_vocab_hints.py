"""Tests for technical term detection."""

from study_companion.agents import find_technical_terms


class TestFindTechnicalTerms:
    """Test the capitalization heuristic."""

    def test_finds_inner_capital_compound(self):
        """Test that a compound with an inner capital is detected."""
        assert find_technical_terms("What does the ElastizitätsModul describe?") == ["ElastizitätsModul"]

    def test_finds_acronym(self):
        """Test that consecutive capitals are detected."""
        assert find_technical_terms("Why is FCC dense?") == ["FC"]

    def test_plain_sentence_has_no_terms(self):
        """Test that ordinary capitalized words are ignored."""
        assert find_technical_terms("What is the primary mechanism of deformation?") == []

    def test_keeps_order_of_appearance(self):
        """Test that terms come back in order."""
        text = "Compare KornGrenze and GitterFehler."

        assert find_technical_terms(text) == ["KornGrenze", "GitterFehler"]
