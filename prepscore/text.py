"""Split raw text into words, sentences, paragraphs and named sections.

Every helper accepts ``None`` or non-string input and treats it as empty
text, so callers never need to guard transcripts coming from upstream.
"""
from __future__ import annotations

import re
from typing import Iterable, Sequence

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")

# Answers with this many words or fewer count as not answered.
EMPTY_WORD_THRESHOLD = 3
# A header line may exceed its keyword by fewer than this many characters.
HEADER_SLACK = 10


def normalize(text: object) -> str:
    return text if isinstance(text, str) else ""


def words(text: object) -> list[str]:
    return normalize(text).split()


def word_count(text: object) -> int:
    return len(words(text))


def is_effectively_empty(text: object) -> bool:
    """True for missing text or a transcript of three words or fewer."""
    trimmed = normalize(text).strip()
    if not trimmed:
        return True
    return word_count(trimmed) <= EMPTY_WORD_THRESHOLD


def sentences(text: object) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(normalize(text)) if s.strip()]


def paragraphs(text: object) -> list[str]:
    return [p for p in _PARAGRAPH_SPLIT.split(normalize(text)) if p.strip()]


def lines(text: object) -> list[str]:
    return normalize(text).split("\n")


def count_phrase(text: object, phrase: str) -> int:
    """Whole-word, case-insensitive occurrences of *phrase* in *text*."""
    pattern = r"\b" + re.escape(phrase) + r"\b"
    return len(re.findall(pattern, normalize(text), re.IGNORECASE))


def count_phrases(text: object, phrases: Iterable[str]) -> int:
    return sum(count_phrase(text, p) for p in phrases)


def contains_any(text: str, needles: Iterable[str]) -> bool:
    return any(n in text for n in needles)


def is_header_line(line: str, headers: Iterable[str], allow_colon: bool = False) -> bool:
    """True if *line* (already lower-cased and stripped) looks like a heading.

    A heading contains one of *headers* and is not much longer than it, so
    prose that merely mentions the word is not mistaken for a section start.
    """
    for header in headers:
        if header not in line:
            continue
        if len(line) < len(header) + HEADER_SLACK:
            return True
        if allow_colon and line.endswith(":"):
            return True
    return False


def find_section(
    text: object,
    headers: Sequence[str],
    stop_headers: Sequence[str] | None = None,
) -> str:
    """Return the body of the section introduced by any of *headers*.

    Capture starts after the first heading line that matches *headers* and
    stops at the next heading from *stop_headers* that is not itself one of
    *headers*. Blank lines are dropped. Returns ``""`` when absent.
    """
    body = normalize(text)
    if not body:
        return ""
    if stop_headers is None:
        from prepscore.lexicon import get_lexicon

        stop_headers = get_lexicon().common_section_headers

    names = [h.lower() for h in headers]
    captured: list[str] = []
    in_section = False

    for raw in lines(body):
        line = raw.strip().lower()

        if is_header_line(line, names):
            in_section = True
            continue

        if in_section:
            other = is_header_line(line, stop_headers, allow_colon=True) and not contains_any(line, names)
            if other:
                break
            if line:
                captured.append(raw)

    return "\n".join(captured).strip()
