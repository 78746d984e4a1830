from prepscore.feedback import NO_ANSWER_FEEDBACK, NO_ANSWER_SUGGESTION
from prepscore.models import Question
from prepscore.session import calculate_overall_score, coerce_question, score_session, summarize_session

UNSURE = "I am not sure how I would approach that honestly."


def _questions(behavioral_question):
    return [
        {"id": "q1", "text": behavioral_question, "type": "Behavioral"},
        Question(id="q2", text="Explain the CAP theorem.", type="Technical"),
        {"id": "", "text": "No id here", "type": "Behavioral"},
        "not a question",
        {"id": "q3", "text": "Explain list comprehensions.", "type": "Python"},
    ]


def test_coerce_question():
    assert coerce_question({"id": 7, "text": "Why?", "type": "Technical"}) == Question("7", "Why?", "Technical")
    assert coerce_question({"id": "x", "text": ""}) is None
    assert coerce_question(None) is None


def test_results_follow_question_order(star_answer, behavioral_question):
    answers = {"q1": star_answer, "q3": UNSURE}
    results = score_session(answers, _questions(behavioral_question), max_workers=2)
    assert [r.question_type for r in results] == ["Behavioral", "Technical", "Python"]
    assert [r.score for r in results] == [82, 0, 9]
    assert results[1].feedback == NO_ANSWER_FEEDBACK
    assert results[1].suggestions == [NO_ANSWER_SUGGESTION]
    assert calculate_overall_score(results) == 30


def test_integer_answer_keys(star_answer, behavioral_question):
    results = score_session({1: star_answer}, [{"id": 1, "text": behavioral_question, "type": "Behavioral"}])
    assert results[0].score == 82


def test_non_string_answer_is_unanswered(behavioral_question):
    results = score_session({"q1": 12345}, [{"id": "q1", "text": behavioral_question, "type": "Behavioral"}])
    assert results[0].score == 0
    assert results[0].answer == ""


def test_no_valid_questions():
    assert score_session({"q1": "answer"}, [{"text": "missing id"}]) == []
    assert calculate_overall_score([]) == 0


def test_summary(star_answer, behavioral_question):
    results = score_session({"q1": star_answer, "q3": UNSURE}, _questions(behavioral_question))
    summary = summarize_session(results)
    assert summary.overall_score == 30
    assert summary.question_count == 3
    assert summary.answered_count == 2
    assert summary.strongest == "structure"
    assert summary.weakest == "keywords"
    assert summary.top_suggestions[:2] == [
        "Include more Behavioral-specific terminology in your answer.",
        NO_ANSWER_SUGGESTION,
    ]
    assert len(summary.top_suggestions) <= 5


def test_summary_of_unanswered_session():
    results = score_session({}, [{"id": "q1", "text": "Tell me about yourself", "type": "Behavioral"}])
    summary = summarize_session(results)
    assert summary.answered_count == 0
    assert summary.strongest is None and summary.weakest is None


def test_result_serialization(star_answer, behavioral_question):
    [result] = score_session({"q1": star_answer}, _questions(behavioral_question)[:1])
    data = result.to_dict()
    assert data["questionType"] == "Behavioral"
    assert set(data["evaluationDetails"]) == {"completeness", "relevance", "keywords", "structure"}


def test_answers_that_are_not_a_mapping_score_as_unanswered(caplog, behavioral_question):
    questions = [{"id": "q1", "text": behavioral_question, "type": "Behavioral"}]
    with caplog.at_level("WARNING"):
        results = score_session(["a b c d e"], questions)
    assert [r.score for r in results] == [0]
    assert results[0].suggestions == [NO_ANSWER_SUGGESTION]
    assert "scoring all as unanswered" in caplog.text


def test_questions_that_are_not_a_list_are_ignored(star_answer):
    assert score_session({"q1": star_answer}, 42) == []
    assert score_session({"q1": star_answer}, "q1") == []


def test_negative_worker_count_is_clamped(star_answer, behavioral_question):
    questions = [{"id": "q1", "text": behavioral_question, "type": "Behavioral"}]
    [result] = score_session({"q1": star_answer}, questions, max_workers=-3)
    assert result.score == 82


def test_verdict_follows_score_tier(star_answer, behavioral_question):
    results = score_session({"q1": star_answer, "q3": UNSURE}, _questions(behavioral_question))
    verdicts = [r.verdict for r in results]
    # 82, unanswered, 9
    assert verdicts[0].startswith("Good answer.")
    assert verdicts[1] == NO_ANSWER_FEEDBACK
    assert verdicts[2].startswith("Your answer needs improvement.")
    assert results[0].to_dict()["verdict"] == verdicts[0]
