"""Data models for answers, evaluations and resume analyses.

All models are plain value objects. ``to_dict`` returns the JSON shape the
surrounding application stores, with camelCase field names.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Question:
    id: str
    text: str
    type: str


@dataclass
class AnalysisResult:
    score: int
    feedback: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"score": self.score, "feedback": self.feedback}
        if self.details:
            out["details"] = dict(self.details)
        return out


@dataclass
class EvaluationResult:
    score: int
    feedbacks: list[str]
    suggestions: list[str]
    completeness: AnalysisResult
    relevance: AnalysisResult
    keywords: AnalysisResult
    structure: AnalysisResult

    @property
    def details(self) -> dict[str, AnalysisResult]:
        return {
            "completeness": self.completeness,
            "relevance": self.relevance,
            "keywords": self.keywords,
            "structure": self.structure,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "feedbacks": list(self.feedbacks),
            "suggestions": list(self.suggestions),
            "details": {name: r.to_dict() for name, r in self.details.items()},
        }


@dataclass
class QuestionResult:
    question: str
    question_type: str
    answer: str
    score: int
    verdict: str
    feedback: str
    suggestions: list[str]
    evaluation: EvaluationResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "question": self.question,
            "questionType": self.question_type,
            "answer": self.answer,
            "score": self.score,
            "verdict": self.verdict,
            "feedback": self.feedback,
            "suggestions": list(self.suggestions),
            "evaluationDetails": self.evaluation.to_dict()["details"],
        }


@dataclass
class SessionSummary:
    overall_score: int
    question_count: int
    answered_count: int
    strongest: str | None
    weakest: str | None
    top_suggestions: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "questionCount": self.question_count,
            "answeredCount": self.answered_count,
            "strongest": self.strongest,
            "weakest": self.weakest,
            "topSuggestions": list(self.top_suggestions),
        }


@dataclass
class Project:
    name: str
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description}


@dataclass
class ResumeInfo:
    skills: list[str] = field(default_factory=list)
    companies: list[str] = field(default_factory=list)
    job_titles: list[str] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    education: list[str] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "skills": list(self.skills),
            "companies": list(self.companies),
            "jobTitles": list(self.job_titles),
            "projects": [p.to_dict() for p in self.projects],
            "education": list(self.education),
            "achievements": list(self.achievements),
        }


@dataclass(frozen=True)
class FormattingIssue:
    issue: str
    severity: str  # "high", "medium", "low"

    def to_dict(self) -> dict[str, str]:
        return {"issue": self.issue, "severity": self.severity}


@dataclass
class ATSAnalysis:
    score: int
    keywords_found: list[str] = field(default_factory=list)
    missing_keywords: list[str] = field(default_factory=list)
    action_verbs_found: list[str] = field(default_factory=list)
    formatting_issues: list[FormattingIssue] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "keywordsFound": list(self.keywords_found),
            "missingKeywords": list(self.missing_keywords),
            "actionVerbsFound": list(self.action_verbs_found),
            "formattingIssues": [i.to_dict() for i in self.formatting_issues],
            "recommendations": list(self.recommendations),
        }


@dataclass
class ATSFeedback:
    message: str
    strength: str  # "strong", "moderate", "weak"
    improvements: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "strength": self.strength,
            "improvements": list(self.improvements),
        }


@dataclass
class ResumeReport:
    info: ResumeInfo
    ats: ATSAnalysis
    feedback: ATSFeedback
    questions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "info": self.info.to_dict(),
            "ats": self.ats.to_dict(),
            "feedback": self.feedback.to_dict(),
            "questions": list(self.questions),
        }
