"""Closed category sets for interview questions and resume job targets."""
from __future__ import annotations

from enum import Enum

from prepscore.log import get_logger

log = get_logger(__name__)


class QuestionType(str, Enum):
    BEHAVIORAL = "Behavioral"
    TECHNICAL = "Technical"
    SITUATIONAL = "Situational"
    SOFTWARE_ENGINEERING = "Software Engineering"
    MARKETING = "Marketing"
    DATA_SCIENCE = "Data Science"
    PRODUCT_MANAGEMENT = "Product Management"
    DESIGN = "Design"
    SALES = "Sales"
    RESUME_BASED = "Resume-Based"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    PYTHON = "Python"

    @property
    def is_behavioral(self) -> bool:
        return self is QuestionType.BEHAVIORAL

    @property
    def is_programming_language(self) -> bool:
        return self in _PROGRAMMING_LANGUAGES

    @classmethod
    def parse(cls, raw: "str | QuestionType | None") -> "QuestionType | None":
        """Match a raw label by value or member name, ignoring case.

        Returns None for anything that is not a known category.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        key = raw.strip().lower()
        if not key:
            return None
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        return None


_PROGRAMMING_LANGUAGES = frozenset(
    {QuestionType.JAVA, QuestionType.JAVASCRIPT, QuestionType.PYTHON}
)


class JobType(str, Enum):
    GENERAL = "general"
    SOFTWARE_ENGINEERING = "softwareEngineering"
    PRODUCT_MANAGEMENT = "productManagement"
    DATA_SCIENCE = "dataScience"
    MARKETING = "marketing"

    @classmethod
    def parse(cls, raw: "str | JobType | None") -> "JobType":
        """Resolve a job-type tag; unknown tags score as ``general``."""
        if isinstance(raw, cls):
            return raw
        if not raw or not isinstance(raw, str):
            return cls.GENERAL
        key = raw.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        log.warning("Unknown job type %r — scoring as general", raw)
        return cls.GENERAL
