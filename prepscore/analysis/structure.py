"""Sentence and paragraph shape, transitions and word repetition."""
from __future__ import annotations

from collections import Counter

from prepscore.lexicon import get_lexicon
from prepscore.log import get_logger
from prepscore.models import AnalysisResult
from prepscore.text import count_phrases, is_effectively_empty, paragraphs, sentences, words

log = get_logger(__name__)


def _sentence_points(count: int, avg_length: float) -> int:
    if 3 <= count <= 15:
        return 20 if 10 <= avg_length <= 25 else 15
    return 5 if count > 0 else 0


def _paragraph_points(paras: list[str]) -> int:
    if 2 <= len(paras) <= 5:
        openings = {p.strip()[:20] for p in paras}
        return 25 + (15 if len(openings) == len(paras) else 5)
    return 15 if len(paras) == 1 else 0


def _transition_points(count: int) -> int:
    if count >= 3:
        return 30
    return 15 if count >= 1 else 0


def _coherence_points(repeated: int) -> int:
    if repeated <= 2:
        return 10
    return 5 if repeated <= 5 else 0


def repeated_word_count(answer: str) -> int:
    """Number of distinct words longer than three letters used more than three times."""
    freq = Counter(w for w in answer.lower().split() if len(w) > 3)
    return sum(1 for n in freq.values() if n > 3)


def _feedback(score: int) -> str:
    if score >= 80:
        return "Excellent structure with clear organization, appropriate paragraphs, and good transitions."
    if score >= 60:
        return "Good structure overall, but could improve organization or transition between ideas."
    if score >= 40:
        return "Basic structure present, but needs better organization and paragraph development."
    return "Structure needs improvement. Consider organizing your answer with clear paragraphs and transitions."


def analyze_structure(answer: str) -> AnalysisResult:
    if is_effectively_empty(answer):
        return AnalysisResult(score=0, feedback="No answer provided to evaluate structure.")

    lexicon = get_lexicon()
    sents = sentences(answer)
    paras = paragraphs(answer)
    lengths = [len(words(s)) for s in sents]
    avg_length = sum(lengths) / max(1, len(lengths))
    transitions = count_phrases(answer, lexicon.transition_words)
    repeated = repeated_word_count(answer)

    score = (
        _sentence_points(len(sents), avg_length)
        + _paragraph_points(paras)
        + _transition_points(transitions)
        + _coherence_points(repeated)
    )
    score = min(100, score)
    log.debug(
        "Structure: %d sentences, %d paragraphs, %d transitions → %d",
        len(sents), len(paras), transitions, score,
    )
    return AnalysisResult(
        score=score,
        feedback=_feedback(score),
        details={
            "sentenceCount": len(sents),
            "paragraphCount": len(paras),
            "avgSentenceLength": avg_length,
            "transitionCount": transitions,
            "repeatedWords": repeated,
            "fillerWordCount": count_phrases(answer, lexicon.filler_words),
        },
    )
