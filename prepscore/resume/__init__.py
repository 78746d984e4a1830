from .ats import analyze_ats, generate_ats_feedback
from .extraction import extract_resume_information
from .formatting import check_formatting_issues
from .questions import generate_resume_questions
from .reader import read_resume_text, validate_resume_file
from .sections import extract_section, extract_sections

from prepscore.categories import JobType
from prepscore.log import get_logger
from prepscore.models import ResumeReport

log = get_logger(__name__)

__all__ = [
    "analyze_ats", "generate_ats_feedback", "extract_resume_information",
    "check_formatting_issues", "generate_resume_questions", "read_resume_text",
    "validate_resume_file", "extract_section", "extract_sections",
    "analyze_resume",
]


def analyze_resume(resume_text: str, job_type: JobType | str | None = JobType.GENERAL) -> ResumeReport:
    """Run extraction, ATS scoring, feedback and question generation together."""
    info = extract_resume_information(resume_text)
    ats = analyze_ats(resume_text, job_type)
    report = ResumeReport(
        info=info,
        ats=ats,
        feedback=generate_ats_feedback(ats.score, ats),
        questions=generate_resume_questions(info, job_type),
    )
    log.info("Resume analysis complete — ATS score %d (%s)", ats.score, report.feedback.strength)
    return report
