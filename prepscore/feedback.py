"""Tiered feedback templates and suggestion de-duplication.

Shared by the answer evaluator, the per-question session verdicts and
the resume ATS feedback. Templates are fixed per score tier.
"""
from __future__ import annotations

from typing import Iterable

NO_ANSWER_FEEDBACK = "No answer was provided for this question."
NO_ANSWER_SUGGESTION = "Prepare an answer for this type of question before your interview."
NO_RESUME_CONTENT = "No resume content could be extracted. Please check the file format."

_ANSWER_TIERS: list[tuple[int, str]] = [
    (85, "Excellent answer! You provided a comprehensive response that directly addressed "
         "the question with specific examples and clear communication."),
    (70, "Good answer. Your response was relevant and addressed the key aspects of the "
         "question. With a few improvements, it could be even stronger."),
    (50, "Satisfactory answer. Your response touched on some important points, but could "
         "benefit from more specific examples and clearer structure."),
]
_ANSWER_FLOOR = (
    "Your answer needs improvement. Consider providing more specific details, examples, "
    "and a clearer structure to better address the question."
)

_RESUME_TIERS: list[tuple[int, str, str]] = [
    (85, "strong", "Your resume is well-optimized for ATS systems. Great use of relevant "
                   "keywords and formatting."),
    (60, "moderate", "Good resume, but you could add more role-specific keywords and "
                     "achievements to improve ATS compatibility."),
]
_RESUME_FLOOR = (
    "weak",
    "Your resume needs significant improvement for ATS compatibility. Focus on "
    "formatting, keywords, and structure.",
)


def answer_feedback(score: int, answered: bool = True) -> str:
    """Overall one-line verdict for an answer score."""
    if not answered:
        return NO_ANSWER_FEEDBACK
    for threshold, message in _ANSWER_TIERS:
        if score >= threshold:
            return message
    return _ANSWER_FLOOR


def resume_feedback(score: int) -> tuple[str, str]:
    """Return ``(strength, message)`` for an ATS score."""
    for threshold, strength, message in _RESUME_TIERS:
        if score >= threshold:
            return strength, message
    return _RESUME_FLOOR


def dedupe_suggestions(suggestions: Iterable[str]) -> list[str]:
    """Drop suggestions already covered by an earlier one.

    A suggestion is a duplicate when it contains, or is contained in, a kept
    suggestion, compared case-insensitively. Order is preserved.
    """
    kept: list[str] = []
    lowered: list[str] = []
    for s in suggestions:
        text = (s or "").strip()
        if not text:
            continue
        low = text.lower()
        if any(low in k or k in low for k in lowered):
            continue
        kept.append(text)
        lowered.append(low)
    return kept
