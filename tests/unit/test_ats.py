from prepscore.feedback import NO_RESUME_CONTENT
from prepscore.models import ATSAnalysis, FormattingIssue
from prepscore.resume import analyze_ats, analyze_resume, check_formatting_issues, generate_ats_feedback
from prepscore.resume.formatting import formatting_penalty


def test_clean_resume_has_no_formatting_issues(resume_text):
    assert check_formatting_issues(resume_text) == []


def test_sparse_resume_issues(sparse_resume):
    issues = check_formatting_issues(sparse_resume)
    assert issues == [
        FormattingIssue("Missing standard section(s): experience, education, skills", "high"),
        FormattingIssue("Missing contact information (email and phone)", "high"),
        FormattingIssue(
            "No quantifiable achievements found - add metrics to strengthen impact", "medium"
        ),
    ]
    assert formatting_penalty(issues) == 13


def test_tables_spacing_and_bullets_are_flagged(resume_text):
    text = resume_text + "\nA | B | C | D\n• mixed bullets\n*  starred"
    messages = [i.issue for i in check_formatting_issues(text)]
    assert "Possible table structures detected which may not parse well in ATS systems" in messages
    assert "Potential formatting issues detected (excessive spacing)" in messages
    assert "Inconsistent bullet point styles detected" in messages


def test_single_missing_contact_field():
    base = "Experience\nEducation\nSkills\nGrew revenue 10%\n"
    assert "Missing phone number" in [
        i.issue for i in check_formatting_issues(base + "me@example.com")
    ]
    assert "Missing email address" in [
        i.issue for i in check_formatting_issues(base + "555-123-4567")
    ]


def test_general_ats_score(resume_text):
    analysis = analyze_ats(resume_text, "general")
    # 70 + 1.5 keyword + 5 verbs + 4 metrics + 2 contact
    assert analysis.score == 83
    assert analysis.keywords_found == ["project"]
    assert analysis.missing_keywords == [
        "leadership", "management", "communication", "problem solving", "teamwork",
    ]
    assert analysis.action_verbs_found == ["created", "increased", "reduced", "led", "built"]
    assert analysis.recommendations == [
        "Include more industry-specific keywords relevant to the job description",
        "Consider adding these relevant keywords: leadership, management, "
        "communication, problem solving, teamwork",
    ]


def test_job_type_keywords_raise_the_score(resume_text):
    analysis = analyze_ats(resume_text, "softwareEngineering")
    assert analysis.score == 96
    assert analysis.missing_keywords == ["javascript", "react", "node", "frontend", "fullstack"]


def test_unknown_job_type_scores_as_general(resume_text):
    assert analyze_ats(resume_text, "astronaut").score == analyze_ats(resume_text).score


def test_sparse_resume_scores_low(sparse_resume):
    analysis = analyze_ats(sparse_resume)
    assert analysis.score == 49
    assert len(analysis.recommendations) == 5


def test_metrics_add_points(sparse_resume):
    with_metric = sparse_resume + "\nIncreased sales by 20%"
    assert analyze_ats(with_metric).score > analyze_ats(sparse_resume).score


def test_empty_resume():
    analysis = analyze_ats("")
    assert analysis.score == 0
    assert analysis.recommendations == [NO_RESUME_CONTENT]
    assert analysis.formatting_issues == []


def test_score_is_clamped():
    text = "\n".join(["a | b | c | d |", "•", "*", ">", "-"] * 3)
    assert analyze_ats(text).score >= 0


def test_feedback_tiers():
    assert generate_ats_feedback(90, ATSAnalysis(score=90)).strength == "strong"
    assert generate_ats_feedback(85, ATSAnalysis(score=85)).strength == "strong"
    assert generate_ats_feedback(84, None).strength == "moderate"
    assert generate_ats_feedback(59, None).strength == "weak"
    assert generate_ats_feedback(59, None).improvements == []


def test_feedback_merges_recommendations_and_issues(sparse_resume):
    analysis = analyze_ats(sparse_resume)
    feedback = generate_ats_feedback(analysis.score, analysis)
    assert feedback.strength == "weak"
    assert feedback.improvements[:5] == analysis.recommendations
    assert feedback.improvements[5:] == [i.issue for i in analysis.formatting_issues]


def test_analyze_resume_report(resume_text):
    report = analyze_resume(resume_text, "softwareEngineering")
    data = report.to_dict()
    assert data["ats"]["score"] == 96
    assert data["feedback"]["strength"] == "strong"
    assert data["info"]["companies"] == ["Acme", "Globex"]
    assert len(data["questions"]) >= 8
