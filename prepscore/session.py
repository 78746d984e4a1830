"""
Score a whole mock-interview session.

Runs: validate questions → evaluate each answer in parallel → collect in question order → summarize.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Mapping, Sequence

from prepscore.analysis import evaluate_answer
from prepscore.config import get_max_workers
from prepscore.feedback import answer_feedback, dedupe_suggestions
from prepscore.log import get_logger
from prepscore.models import Question, QuestionResult, SessionSummary
from prepscore.scoring import round_half_up
from prepscore.text import is_effectively_empty, normalize

log = get_logger(__name__)

MAX_TOP_SUGGESTIONS = 5
DIMENSIONS = ("relevance", "keywords", "structure", "completeness")


def coerce_question(raw: Question | Mapping[str, Any] | None) -> Question | None:
    """Accept a Question or a ``{id, text, type}`` mapping; None if unusable."""
    if isinstance(raw, Question):
        question = raw
    elif isinstance(raw, Mapping):
        question = Question(
            id=str(raw.get("id") or ""),
            text=str(raw.get("text") or ""),
            type=str(raw.get("type") or ""),
        )
    else:
        return None
    if not question.id or not question.text:
        return None
    return question


def _score_one(question: Question, answer: str) -> QuestionResult:
    evaluation = evaluate_answer(answer, question.text, question.type)
    return QuestionResult(
        question=question.text,
        question_type=question.type,
        answer=answer,
        score=evaluation.score,
        verdict=answer_feedback(evaluation.score, answered=not is_effectively_empty(answer)),
        feedback=" ".join(evaluation.feedbacks),
        suggestions=list(evaluation.suggestions),
        evaluation=evaluation,
    )


def score_session(
    answers: Mapping[str, str] | None,
    questions: Sequence[Question | Mapping[str, Any]],
    max_workers: int | None = None,
) -> list[QuestionResult]:
    """Evaluate every question's answer; results follow question order.

    Questions without an id or text are skipped. A question with no entry
    in *answers* is scored as unanswered, as is every question when
    *answers* is not a mapping.
    """
    if answers is None:
        answers = {}
    elif not isinstance(answers, Mapping):
        log.warning("Answers must map question ids to text, got %s; scoring all as unanswered",
                    type(answers).__name__)
        answers = {}
    by_id = {str(k): v for k, v in answers.items()}
    if isinstance(questions, (str, bytes)) or not isinstance(questions, Sequence):
        if questions is not None:
            log.warning("Questions must be a list, got %s", type(questions).__name__)
        questions = []
    valid: list[Question] = []
    for raw in questions:
        question = coerce_question(raw)
        if question is None:
            log.warning("Skipping invalid question record: %r", raw)
            continue
        valid.append(question)

    if not valid:
        log.error("No valid questions to score")
        return []

    workers = max(1, max_workers or get_max_workers())
    log.info("Scoring %d answer(s) with %d worker(s)...", len(valid), workers)
    with ThreadPoolExecutor(max_workers=min(workers, len(valid))) as pool:
        futures = [
            pool.submit(_score_one, q, normalize(by_id.get(q.id))) for q in valid
        ]
        results = [f.result() for f in futures]

    log.info(
        "Session scored — %d question(s), overall %d",
        len(results), calculate_overall_score(results),
    )
    return results


def calculate_overall_score(results: Sequence[QuestionResult]) -> int:
    if not results:
        return 0
    return round_half_up(sum(r.score for r in results) / len(results))


def _dimension_averages(results: Sequence[QuestionResult]) -> dict[str, float]:
    answered = [r for r in results if not is_effectively_empty(r.answer)]
    if not answered:
        return {}
    return {
        name: sum(r.evaluation.details[name].score for r in answered) / len(answered)
        for name in DIMENSIONS
    }


def summarize_session(results: Sequence[QuestionResult]) -> SessionSummary:
    """Overall score, strongest/weakest dimension and the top suggestions."""
    averages = _dimension_averages(results)
    strongest = max(averages, key=averages.__getitem__) if averages else None
    weakest = min(averages, key=averages.__getitem__) if averages else None

    suggestions: list[str] = []
    for r in results:
        suggestions.extend(r.suggestions)

    return SessionSummary(
        overall_score=calculate_overall_score(results),
        question_count=len(results),
        answered_count=sum(1 for r in results if not is_effectively_empty(r.answer)),
        strongest=strongest,
        weakest=weakest,
        top_suggestions=dedupe_suggestions(suggestions)[:MAX_TOP_SUGGESTIONS],
    )
