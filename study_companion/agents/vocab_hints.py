"""Heuristic detection of technical (usually German compound) terms in question text."""

import re

# Words with an inner capital, e.g. "ElastizitätsModul" or acronyms such as "FCC"
TECHNICAL_TERM_PATTERN = re.compile(r"[A-ZÄÖÜ][a-zäöüß]*[A-ZÄÖÜ][a-zäöüß]*")


def find_technical_terms(text: str) -> list[str]:
    """Return candidate technical terms in order of appearance."""
    return TECHNICAL_TERM_PATTERN.findall(text)
