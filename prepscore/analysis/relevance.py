"""Question/answer overlap plus question-type pattern bonuses."""
from __future__ import annotations

import re

from prepscore.categories import QuestionType
from prepscore.lexicon import Lexicon, get_lexicon
from prepscore.log import get_logger
from prepscore.models import AnalysisResult
from prepscore.scoring import ratio, round_half_up
from prepscore.text import is_effectively_empty, normalize

log = get_logger(__name__)

_PUNCTUATION = re.compile(r"[.,?!;:(){}\[\]]")

STAR_FULL_BONUS = 30
STAR_PARTIAL_BONUS = 15
STAR_PARTIAL_CAP = 80
CODE_BONUS = 20


def question_terms(question: str, lexicon: Lexicon | None = None) -> list[str]:
    """Content words of a question: longer than three letters, not stop words."""
    lexicon = lexicon or get_lexicon()
    cleaned = _PUNCTUATION.sub("", normalize(question).lower())
    return [
        w for w in cleaned.split()
        if len(w) > 3 and w not in lexicon.relevance_stop_words
    ]


def has_star_elements(answer: str, lexicon: Lexicon | None = None) -> bool:
    lexicon = lexicon or get_lexicon()
    return all(p.search(answer) for p in lexicon.star_cues.values())


def _feedback(score: int) -> str:
    if score >= 80:
        return "Your answer directly addresses the question with relevant content."
    if score >= 60:
        return "Your answer is mostly relevant but could focus more directly on the question."
    if score >= 40:
        return "Your answer is somewhat relevant but misses key aspects of the question."
    return "Your answer appears to be off-topic or not directly addressing the question."


def analyze_relevance(
    answer: str,
    question: str,
    question_type: QuestionType | str | None,
) -> AnalysisResult:
    if is_effectively_empty(answer):
        return AnalysisResult(score=0, feedback="No answer provided to evaluate relevance.")

    lexicon = get_lexicon()
    qtype = QuestionType.parse(question_type)
    answer_lower = answer.lower()

    terms = question_terms(question, lexicon)
    matched = [t for t in terms if t in answer_lower]
    match_ratio = ratio(len(matched), len(terms))
    score = round_half_up(match_ratio * 70)

    star = None
    code = None
    if qtype is not None and qtype.is_behavioral:
        star = has_star_elements(answer_lower, lexicon)
        if star:
            score += STAR_FULL_BONUS
        else:
            score = min(STAR_PARTIAL_CAP, score + STAR_PARTIAL_BONUS)
    elif qtype is not None and qtype.is_programming_language:
        code = bool(lexicon.code_vocabulary.search(answer_lower))
        if code:
            score += CODE_BONUS

    score = max(0, min(100, score))
    log.debug("Relevance: %d/%d question terms matched → %d", len(matched), len(terms), score)

    details: dict = {"matchedTerms": matched, "questionTerms": terms, "matchRatio": match_ratio}
    if star is not None:
        details["starElements"] = star
    if code is not None:
        details["codeElements"] = code
    return AnalysisResult(score=score, feedback=_feedback(score), details=details)
