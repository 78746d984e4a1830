"""Length-based completeness score."""
from __future__ import annotations

from prepscore.log import get_logger
from prepscore.models import AnalysisResult
from prepscore.scoring import round_half_up
from prepscore.text import is_effectively_empty, word_count

log = get_logger(__name__)

MINIMAL_ANSWER = 15
SHORT_ANSWER = 50
MEDIUM_ANSWER = 100


def analyze_completeness(answer: str) -> AnalysisResult:
    if is_effectively_empty(answer):
        return AnalysisResult(score=0, feedback="No answer provided.")

    count = word_count(answer)

    if count < MINIMAL_ANSWER:
        band = "minimal"
        raw = max(20.0, (count / MINIMAL_ANSWER) * 40)
        feedback = "Your answer is very brief. Consider providing more details and examples."
    elif count < SHORT_ANSWER:
        band = "short"
        raw = 40 + ((count - MINIMAL_ANSWER) / (SHORT_ANSWER - MINIMAL_ANSWER)) * 20
        feedback = "Your answer could be more comprehensive. Try elaborating further."
    elif count < MEDIUM_ANSWER:
        band = "medium"
        raw = 60 + ((count - SHORT_ANSWER) / (MEDIUM_ANSWER - SHORT_ANSWER)) * 20
        feedback = "Good answer length, but ensure you're covering all key aspects."
    else:
        band = "full"
        raw = 80 + min(15.0, count / 50)
        feedback = "Your answer is detailed and comprehensive."

    score = min(100, round_half_up(raw))
    log.debug("Completeness: %d words (%s) → %d", count, band, score)
    return AnalysisResult(
        score=score,
        feedback=feedback,
        details={"wordCount": count, "band": band},
    )
