"""Score a resume's compatibility with Applicant Tracking Systems."""
from __future__ import annotations

from prepscore.categories import JobType
from prepscore.feedback import NO_RESUME_CONTENT, dedupe_suggestions, resume_feedback
from prepscore.lexicon import get_lexicon
from prepscore.log import get_logger
from prepscore.models import ATSAnalysis, ATSFeedback
from prepscore.resume.extraction import keyword_in
from prepscore.resume.formatting import (
    check_formatting_issues,
    count_quantifiable,
    formatting_penalty,
    has_email,
    has_phone,
)
from prepscore.scoring import clamp_score
from prepscore.text import normalize

log = get_logger(__name__)

BASE_SCORE = 70
KEYWORD_POINTS = 1.5
KEYWORD_CAP = 15
ACTION_VERB_CAP = 10
QUANTIFIABLE_POINTS = 2
QUANTIFIABLE_CAP = 5
NO_QUANTIFIABLE_PENALTY = 5
CONTACT_BONUS = 2
CONTACT_PENALTY = 3
IMPORTANT_KEYWORDS = 10
MAX_MISSING_REPORTED = 5
MIN_KEYWORDS = 8
MIN_ACTION_VERBS = 5


def _recommendations(
    keywords_found: list[str],
    action_verbs: list[str],
    quantifiable: int,
    has_issues: bool,
    missing: list[str],
) -> list[str]:
    recs: list[str] = []
    if len(keywords_found) < MIN_KEYWORDS:
        recs.append("Include more industry-specific keywords relevant to the job description")
    if len(action_verbs) < MIN_ACTION_VERBS:
        recs.append("Use more strong action verbs to describe your experiences and achievements")
    if not quantifiable:
        recs.append("Add quantifiable achievements with numbers and percentages")
    if has_issues:
        recs.append("Address formatting issues that may affect ATS readability")
    if missing:
        recs.append(f"Consider adding these relevant keywords: {', '.join(missing)}")
    return dedupe_suggestions(recs)


def analyze_ats(resume_text: str, job_type: JobType | str | None = JobType.GENERAL) -> ATSAnalysis:
    """ATS score (0-100) with the keyword, verb and formatting findings behind it."""
    text = normalize(resume_text)
    if not text.strip():
        log.info("ATS analysis skipped — no resume content")
        return ATSAnalysis(score=0, recommendations=[NO_RESUME_CONTENT])

    lexicon = get_lexicon()
    jtype = JobType.parse(job_type)
    content = text.lower()
    score: float = BASE_SCORE

    universe = lexicon.keywords_for_job(jtype)
    keywords_found = [k for k in universe if keyword_in(content, k)]
    score += min(KEYWORD_CAP, len(keywords_found) * KEYWORD_POINTS)

    missing = [
        k for k in universe[:IMPORTANT_KEYWORDS] if not keyword_in(content, k)
    ][:MAX_MISSING_REPORTED]

    action_verbs = [v for v in lexicon.action_verbs if v in content]
    score += min(ACTION_VERB_CAP, len(action_verbs))

    quantifiable = count_quantifiable(content, lexicon)
    if quantifiable > 0:
        score += min(QUANTIFIABLE_CAP, quantifiable * QUANTIFIABLE_POINTS)
    else:
        score -= NO_QUANTIFIABLE_PENALTY

    if has_email(content, lexicon) and has_phone(content, lexicon):
        score += CONTACT_BONUS
    else:
        score -= CONTACT_PENALTY

    issues = check_formatting_issues(text)
    score -= formatting_penalty(issues)

    final = clamp_score(score)
    log.info(
        "ATS score %d (%s) — keywords=%d, verbs=%d, metrics=%d, issues=%d",
        final, jtype.value, len(keywords_found), len(action_verbs), quantifiable, len(issues),
    )
    return ATSAnalysis(
        score=final,
        keywords_found=keywords_found,
        missing_keywords=missing,
        action_verbs_found=action_verbs,
        formatting_issues=issues,
        recommendations=_recommendations(
            keywords_found, action_verbs, quantifiable, bool(issues), missing,
        ),
    )


def generate_ats_feedback(score: int, analysis: ATSAnalysis | None) -> ATSFeedback:
    """Tiered message plus the de-duplicated list of improvements."""
    strength, message = resume_feedback(score)
    improvements: list[str] = []
    if analysis is not None:
        improvements.extend(analysis.recommendations)
        improvements.extend(i.issue for i in analysis.formatting_issues)
    return ATSFeedback(
        message=message,
        strength=strength,
        improvements=dedupe_suggestions(improvements),
    )
