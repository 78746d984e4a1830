"""Locate the standard sections of a resume."""
from __future__ import annotations

from prepscore.lexicon import Lexicon, get_lexicon
from prepscore.text import find_section

SECTION_NAMES: tuple[str, ...] = ("skills", "experience", "education", "projects")


def extract_section(text: str, name: str, lexicon: Lexicon | None = None) -> str:
    """Body of one named section, using its header synonyms from the lexicon."""
    lexicon = lexicon or get_lexicon()
    return find_section(text, lexicon.section_headers[name], lexicon.common_section_headers)


def extract_sections(text: str, lexicon: Lexicon | None = None) -> dict[str, str]:
    lexicon = lexicon or get_lexicon()
    return {name: extract_section(text, name, lexicon) for name in SECTION_NAMES}
