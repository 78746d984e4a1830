"""Pull structured facts (skills, employers, titles, projects, ...) from resume text."""
from __future__ import annotations

import re

from prepscore.lexicon import Lexicon, get_lexicon
from prepscore.log import get_logger
from prepscore.models import Project, ResumeInfo
from prepscore.resume.sections import extract_sections
from prepscore.text import lines, normalize

log = get_logger(__name__)

MAX_COMPANIES = 3
MAX_JOB_TITLES = 3
MAX_PROJECTS = 3
MAX_EDUCATION = 2
MAX_ACHIEVEMENTS = 5
# Fewer skills than this in the skills section triggers a whole-document scan.
MIN_SECTION_SKILLS = 3

_BULLET_PREFIX = re.compile(r"^[•\-\*]\s*")


def keyword_in(text_lower: str, keyword: str) -> bool:
    """Substring match; one- and two-letter keywords must stand alone as words."""
    if len(keyword) <= 2:
        return re.search(r"\b" + re.escape(keyword) + r"\b", text_lower) is not None
    return keyword in text_lower


def extract_skills(text: str, lexicon: Lexicon | None = None) -> list[str]:
    lexicon = lexicon or get_lexicon()
    body = normalize(text)
    if not body:
        return []
    low = body.lower()

    skills = [k for k in lexicon.all_job_keywords if keyword_in(low, k)]
    for pattern in lexicon.skill_patterns.values():
        skills.extend(m.group(0).lower() for m in pattern.finditer(body))
    return list(dict.fromkeys(s.lower() for s in skills))


def _company_from_line(line: str) -> str:
    if " at " in line:
        right = line.split(" at ", 1)[1]
    elif "|" in line:
        right = line.split("|")[1]
    elif " - " in line:
        right = line.split(" - ")[1]
    else:
        return ""
    return right.strip().split(",")[0].strip()


def extract_companies(experience: str, lexicon: Lexicon | None = None) -> list[str]:
    lexicon = lexicon or get_lexicon()
    companies: list[str] = []
    for raw in lines(experience):
        company = _company_from_line(raw.strip())
        if not (1 < len(company) < 50):
            continue
        for suffix in lexicon.company_suffixes:
            company = company.replace(suffix, "", 1).strip()
        if company:
            companies.append(company)
    return list(dict.fromkeys(companies))[:MAX_COMPANIES]


def extract_job_titles(experience: str, lexicon: Lexicon | None = None) -> list[str]:
    lexicon = lexicon or get_lexicon()
    titles: list[str] = []
    for raw in lines(experience):
        if len(raw) > 50:
            continue
        if not any(k in raw.lower() for k in lexicon.title_keywords):
            continue
        title = raw.split("|")[0].split("-")[0].split(" at ")[0].strip()
        if 5 < len(title) < 50:
            titles.append(title)
    return titles[:MAX_JOB_TITLES]


def extract_projects(projects_text: str) -> list[Project]:
    """Group project lines: a short heading line, then description lines.

    A line under 60 characters that does not end a sentence starts a new
    project when it is the first line or follows a blank or finished line.
    """
    projects: list[Project] = []
    current: Project | None = None
    raw_lines = lines(projects_text)

    for i, raw in enumerate(raw_lines):
        line = raw.strip()
        if not line:
            continue
        prev = raw_lines[i - 1].rstrip() if i > 0 else ""
        starts_project = (
            len(line) < 60
            and not line.endswith(".")
            and (i == 0 or not prev or prev.endswith("."))
        )
        if starts_project:
            if current:
                projects.append(current)
            current = Project(name=line)
        elif current:
            current.description = f"{current.description} {line}".strip()

    if current:
        projects.append(current)
    return projects[:MAX_PROJECTS]


def extract_education(education: str, lexicon: Lexicon | None = None) -> list[str]:
    lexicon = lexicon or get_lexicon()
    found = [
        line.strip()
        for line in lines(education)
        if line.strip() and any(p.search(line) for p in lexicon.degree_patterns)
    ]
    return found[:MAX_EDUCATION]


def extract_achievements(text: str, lexicon: Lexicon | None = None) -> list[str]:
    """Lines that pair a metric (%, $, users, ...) with a strong action verb."""
    lexicon = lexicon or get_lexicon()
    achievements: list[str] = []
    for raw in lines(text):
        if not lexicon.achievement_metric_pattern.search(raw):
            continue
        low = raw.lower()
        if not any(verb in low for verb in lexicon.action_verbs):
            continue
        cleaned = _BULLET_PREFIX.sub("", raw.strip()).strip()
        if len(cleaned) > 10:
            achievements.append(cleaned)
    return achievements[:MAX_ACHIEVEMENTS]


def extract_resume_information(resume_text: str) -> ResumeInfo:
    """Structured facts from a resume; empty fields when nothing is found."""
    text = normalize(resume_text)
    if not text.strip():
        return ResumeInfo()

    lexicon = get_lexicon()
    sections = extract_sections(text, lexicon)

    skills = extract_skills(sections["skills"], lexicon)
    if len(skills) < MIN_SECTION_SKILLS:
        skills = extract_skills(text, lexicon)

    info = ResumeInfo(
        skills=skills,
        companies=extract_companies(sections["experience"], lexicon),
        job_titles=extract_job_titles(sections["experience"], lexicon),
        projects=extract_projects(sections["projects"]),
        education=extract_education(sections["education"], lexicon),
        achievements=extract_achievements(text, lexicon),
    )
    log.info(
        "Extracted resume info — skills=%d, companies=%d, titles=%d, projects=%d, achievements=%d",
        len(info.skills), len(info.companies), len(info.job_titles),
        len(info.projects), len(info.achievements),
    )
    return info
