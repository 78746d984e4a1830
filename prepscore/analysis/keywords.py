"""Category-weighted vocabulary matching."""
from __future__ import annotations

from prepscore.categories import QuestionType
from prepscore.lexicon import KeywordTiers, get_lexicon
from prepscore.log import get_logger
from prepscore.models import AnalysisResult
from prepscore.scoring import ratio, round_half_up
from prepscore.text import is_effectively_empty

log = get_logger(__name__)

PRIMARY_WEIGHT = 50
SECONDARY_WEIGHT = 30
BONUS_WEIGHT = 20


def resolve_tiers(question_type: QuestionType | str | None) -> KeywordTiers:
    lexicon = get_lexicon()
    qtype = QuestionType.parse(question_type)
    if qtype is None:
        log.warning(
            "Unrecognized question type %r — using %s keywords",
            question_type, lexicon.default_tier,
        )
    return lexicon.tiers_for(qtype)


def _feedback(score: float) -> str:
    if score >= 80:
        return "Excellent use of relevant terminology and concepts."
    if score >= 60:
        return "Good use of key terms, but could incorporate more domain-specific vocabulary."
    if score >= 40:
        return "Some relevant terms used, but missing important concepts for this topic."
    return "Consider incorporating more technical/relevant terminology in your answer."


def analyze_keywords(answer: str, question_type: QuestionType | str | None) -> AnalysisResult:
    if is_effectively_empty(answer):
        return AnalysisResult(score=0, feedback="No answer provided for keyword analysis.")

    tiers = resolve_tiers(question_type)
    answer_lower = answer.lower()

    primary = [k for k in tiers.primary if k in answer_lower]
    secondary = [k for k in tiers.secondary if k in answer_lower]
    bonus = [k for k in tiers.bonus if k in answer_lower]

    raw = min(
        100.0,
        ratio(len(primary), len(tiers.primary)) * PRIMARY_WEIGHT
        + ratio(len(secondary), len(tiers.secondary)) * SECONDARY_WEIGHT
        + ratio(len(bonus), len(tiers.bonus)) * BONUS_WEIGHT,
    )
    score = round_half_up(raw)
    log.debug(
        "Keywords: %d primary, %d secondary, %d bonus → %d",
        len(primary), len(secondary), len(bonus), score,
    )
    return AnalysisResult(
        score=score,
        feedback=_feedback(raw),
        details={
            "primaryMatches": primary,
            "secondaryMatches": secondary,
            "bonusMatches": bonus,
        },
    )
