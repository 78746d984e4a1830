"""Interview questions tailored to what a resume mentions."""
from __future__ import annotations

from prepscore.categories import JobType
from prepscore.models import ResumeInfo

MIN_QUESTIONS = 8

JOB_TYPE_QUESTIONS: dict[JobType, list[str]] = {
    JobType.SOFTWARE_ENGINEERING: [
        "Describe your approach to debugging complex technical issues.",
        "How do you ensure your code is maintainable and scalable?",
    ],
    JobType.PRODUCT_MANAGEMENT: [
        "How do you prioritize features in a product roadmap?",
        "Describe a situation where you had to make a difficult product decision "
        "based on conflicting feedback.",
    ],
    JobType.DATA_SCIENCE: [
        "Explain how you would approach a new data analysis project from start to finish.",
        "How do you validate the accuracy of your predictive models?",
    ],
}

_DEFAULT_JOB_QUESTIONS = [
    "How do you handle situations when you have to meet tight deadlines?",
    "Describe a time when you had to learn a new skill quickly. How did you approach it?",
]

GENERAL_BEHAVIORAL = [
    "Tell me about a time you faced a significant challenge in your work.",
    "How do you prioritize tasks when you have multiple deadlines?",
    "Describe a situation where you had to work with a difficult team member.",
    "Tell me about a mistake you made and how you recovered from it.",
]


def generate_resume_questions(
    info: ResumeInfo | None,
    job_type: JobType | str | None = JobType.GENERAL,
) -> list[str]:
    """Build at least eight questions from resume facts, in a fixed order.

    Gaps are filled from a general behavioral list in list order, so the
    same resume always yields the same questions.
    """
    if info is None:
        return []
    questions: list[str] = []

    for skill in info.skills[:3]:
        questions.append(f"Tell me about your experience with {skill}?")
    if len(info.skills) > 2:
        questions.append(
            f"How do you stay updated with the latest developments in "
            f"{info.skills[0]} and {info.skills[1]}?"
        )

    for company in info.companies[:2]:
        questions.append(f"What was the most challenging project you worked on at {company}?")

    for project in info.projects[:2]:
        questions.append(
            f'Can you elaborate on your project "{project.name}" and your specific contribution to it?'
        )

    if info.achievements:
        questions.append(
            f'You mentioned "{info.achievements[0][:100]}..." - can you tell me more '
            f"about how you achieved this?"
        )

    if info.job_titles:
        questions.append(
            f"Based on your experience as a {info.job_titles[0]}, how do you approach "
            f"problem-solving in your work?"
        )

    questions.extend(JOB_TYPE_QUESTIONS.get(JobType.parse(job_type), _DEFAULT_JOB_QUESTIONS))

    for question in GENERAL_BEHAVIORAL:
        if len(questions) >= MIN_QUESTIONS:
            break
        if question not in questions:
            questions.append(question)

    return questions
