"""Detect resume formatting problems that hurt ATS parsing."""
from __future__ import annotations

from prepscore.lexicon import Lexicon, get_lexicon
from prepscore.models import FormattingIssue
from prepscore.text import normalize

SEVERITY_PENALTY: dict[str, int] = {"high": 5, "medium": 3, "low": 1}

_EXCESS_WHITESPACE = ("\t\t", "  ", "\n\n\n")
MAX_PIPES = 3


def count_quantifiable(text: str, lexicon: Lexicon | None = None) -> int:
    lexicon = lexicon or get_lexicon()
    return len(lexicon.quantifiable_pattern.findall(normalize(text)))


def has_email(text: str, lexicon: Lexicon | None = None) -> bool:
    lexicon = lexicon or get_lexicon()
    return lexicon.email_pattern.search(normalize(text)) is not None


def has_phone(text: str, lexicon: Lexicon | None = None) -> bool:
    lexicon = lexicon or get_lexicon()
    return lexicon.phone_pattern.search(normalize(text)) is not None


def _contact_issue(email: bool, phone: bool) -> FormattingIssue | None:
    if email and phone:
        return None
    if not email and not phone:
        message = "Missing contact information (email and phone)"
    elif not email:
        message = "Missing email address"
    else:
        message = "Missing phone number"
    return FormattingIssue(issue=message, severity="high")


def check_formatting_issues(resume_text: str) -> list[FormattingIssue]:
    lexicon = get_lexicon()
    text = normalize(resume_text)
    low = text.lower()
    issues: list[FormattingIssue] = []

    missing = [s for s in lexicon.essential_sections if s not in low]
    if missing:
        issues.append(FormattingIssue(
            issue=f"Missing standard section(s): {', '.join(missing)}",
            severity="high",
        ))

    if any(token in text for token in _EXCESS_WHITESPACE):
        issues.append(FormattingIssue(
            issue="Potential formatting issues detected (excessive spacing)",
            severity="medium",
        ))

    if text.count("|") > MAX_PIPES:
        issues.append(FormattingIssue(
            issue="Possible table structures detected which may not parse well in ATS systems",
            severity="high",
        ))

    styles_used = sum(1 for marker in lexicon.bullet_markers if marker in text)
    if styles_used > 1:
        issues.append(FormattingIssue(
            issue="Inconsistent bullet point styles detected",
            severity="low",
        ))

    contact = _contact_issue(has_email(text, lexicon), has_phone(text, lexicon))
    if contact:
        issues.append(contact)

    if count_quantifiable(text, lexicon) == 0:
        issues.append(FormattingIssue(
            issue="No quantifiable achievements found - add metrics to strengthen impact",
            severity="medium",
        ))

    return issues


def formatting_penalty(issues: list[FormattingIssue]) -> int:
    return sum(SEVERITY_PENALTY.get(i.severity, 0) for i in issues)
