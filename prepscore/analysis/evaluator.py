"""Combine the four answer analyzers into one evaluation."""
from __future__ import annotations

from prepscore.analysis.completeness import analyze_completeness
from prepscore.analysis.keywords import analyze_keywords
from prepscore.analysis.relevance import analyze_relevance
from prepscore.analysis.structure import analyze_structure
from prepscore.categories import QuestionType
from prepscore.feedback import NO_ANSWER_FEEDBACK, NO_ANSWER_SUGGESTION, dedupe_suggestions
from prepscore.log import get_logger
from prepscore.models import AnalysisResult, EvaluationResult
from prepscore.scoring import round_half_up
from prepscore.text import is_effectively_empty, normalize

log = get_logger(__name__)

WEIGHTS: dict[str, float] = {
    "relevance": 0.4,
    "keywords": 0.3,
    "structure": 0.2,
    "completeness": 0.1,
}

# Dimensions below this score get a targeted suggestion.
WEAK_DIMENSION = 60
# At most this many of the weakest dimensions produce suggestions.
WEAK_DIMENSION_LIMIT = 2
TYPE_SUGGESTION_BELOW = 80
GENERIC_SUGGESTION_BELOW = 95

STAR_SUGGESTION = "Use the STAR method (Situation, Task, Action, Result) to structure your response."
CODE_SUGGESTION = "Include code examples or syntax to demonstrate your technical knowledge."
GENERIC_SUGGESTION = (
    "For an even better answer, consider quantifying your achievements with "
    "specific metrics or results."
)


def _dimension_suggestion(name: str, type_label: str) -> str:
    if name == "relevance":
        return "Focus more on addressing the specific question asked."
    if name == "keywords":
        return f"Include more {type_label}-specific terminology in your answer."
    if name == "structure":
        return "Improve your answer structure with clear paragraphs and transition phrases."
    return "Provide a more comprehensive answer with specific examples."


def _type_label(question_type: QuestionType | str | None) -> str:
    if isinstance(question_type, QuestionType):
        return question_type.value
    return normalize(question_type).strip() or QuestionType.BEHAVIORAL.value


def _empty_evaluation() -> EvaluationResult:
    blank = AnalysisResult(score=0, feedback="")
    return EvaluationResult(
        score=0,
        feedbacks=[NO_ANSWER_FEEDBACK],
        suggestions=[NO_ANSWER_SUGGESTION],
        completeness=blank,
        relevance=blank,
        keywords=blank,
        structure=blank,
    )


def build_suggestions(
    dimensions: dict[str, AnalysisResult],
    overall: int,
    question_type: QuestionType | str | None,
) -> list[str]:
    qtype = QuestionType.parse(question_type)
    label = _type_label(question_type)
    suggestions: list[str] = []

    # sorted() is stable, so ties keep relevance → keywords → structure → completeness
    ranked = sorted(WEIGHTS, key=lambda name: dimensions[name].score)
    for name in ranked[:WEAK_DIMENSION_LIMIT]:
        if dimensions[name].score < WEAK_DIMENSION:
            suggestions.append(_dimension_suggestion(name, label))

    if overall < TYPE_SUGGESTION_BELOW and qtype is not None:
        if qtype.is_behavioral:
            suggestions.append(STAR_SUGGESTION)
        elif qtype.is_programming_language:
            suggestions.append(CODE_SUGGESTION)

    if not suggestions and overall < GENERIC_SUGGESTION_BELOW:
        suggestions.append(GENERIC_SUGGESTION)
    return dedupe_suggestions(suggestions)


def evaluate_answer(
    answer: str,
    question: str,
    question_type: QuestionType | str | None,
) -> EvaluationResult:
    """Score an interview answer against its question.

    Runs the completeness, relevance, keyword and structure analyzers and
    combines them with fixed weights (40/30/20/10 for relevance, keywords,
    structure, completeness). Never raises on odd input: missing or
    effectively empty answers score 0 with a canned feedback pair.
    """
    if is_effectively_empty(answer):
        log.debug("Answer is effectively empty — skipping analyzers")
        return _empty_evaluation()

    question = normalize(question)
    dimensions = {
        "completeness": analyze_completeness(answer),
        "relevance": analyze_relevance(answer, question, question_type),
        "keywords": analyze_keywords(answer, question_type),
        "structure": analyze_structure(answer),
    }
    overall = round_half_up(sum(dimensions[n].score * w for n, w in WEIGHTS.items()))

    feedbacks = [
        dimensions[n].feedback
        for n in ("completeness", "relevance", "keywords", "structure")
        if dimensions[n].feedback
    ]
    suggestions = build_suggestions(dimensions, overall, question_type)

    log.debug(
        "Evaluated answer: relevance=%d keywords=%d structure=%d completeness=%d → %d",
        dimensions["relevance"].score, dimensions["keywords"].score,
        dimensions["structure"].score, dimensions["completeness"].score, overall,
    )
    return EvaluationResult(
        score=overall,
        feedbacks=feedbacks,
        suggestions=suggestions,
        **dimensions,
    )
