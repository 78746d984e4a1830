"""Load and validate the versioned lexical resources used by every scorer.

The tables live in ``data/lexicon.yaml`` so new question or job categories
only need a data change. The loaded :class:`Lexicon` is cached for the
process and never mutated afterwards, so scorers running in parallel share
it without locking.
"""
from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from prepscore.categories import JobType, QuestionType
from prepscore.config import get_lexicon_path
from prepscore.log import get_logger

log = get_logger(__name__)


class LexiconError(ValueError):
    """Raised when the lexicon file is missing, unreadable or incomplete."""


@dataclass(frozen=True)
class KeywordTiers:
    primary: tuple[str, ...]
    secondary: tuple[str, ...]
    bonus: tuple[str, ...]


@dataclass(frozen=True)
class Lexicon:
    version: str
    # answers
    keyword_tiers: dict[str, KeywordTiers]
    tier_aliases: dict[str, str]
    default_tier: str
    star_cues: dict[str, re.Pattern[str]]
    code_vocabulary: re.Pattern[str]
    relevance_stop_words: frozenset[str]
    transition_words: tuple[str, ...]
    filler_words: tuple[str, ...]
    # resumes
    job_keywords: dict[str, tuple[str, ...]]
    action_verbs: tuple[str, ...]
    section_headers: dict[str, tuple[str, ...]]
    common_section_headers: tuple[str, ...]
    essential_sections: tuple[str, ...]
    title_keywords: tuple[str, ...]
    company_suffixes: tuple[str, ...]
    skill_patterns: dict[str, re.Pattern[str]]
    degree_patterns: tuple[re.Pattern[str], ...]
    quantifiable_pattern: re.Pattern[str]
    achievement_metric_pattern: re.Pattern[str]
    email_pattern: re.Pattern[str]
    phone_pattern: re.Pattern[str]
    bullet_markers: tuple[str, ...]

    def tiers_for(self, question_type: QuestionType | None) -> KeywordTiers:
        """Keyword tiers for a question type, following aliases.

        ``None`` (an unrecognized label) takes the default tier set.
        """
        if question_type is None:
            return self.keyword_tiers[self.default_tier]
        name = question_type.value
        name = self.tier_aliases.get(name, name)
        return self.keyword_tiers[name]

    def keywords_for_job(self, job_type: JobType) -> list[str]:
        """Job-type keywords followed by the general set, de-duplicated in order."""
        combined = list(self.job_keywords.get(job_type.value, ()))
        combined += self.job_keywords[JobType.GENERAL.value]
        return list(dict.fromkeys(combined))

    @property
    def all_job_keywords(self) -> list[str]:
        flat: list[str] = []
        for words in self.job_keywords.values():
            flat.extend(words)
        return flat


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise LexiconError(f"Lexicon is missing '{where}.{key}'")
    return data[key]


def _words(values: Any, where: str) -> tuple[str, ...]:
    if not isinstance(values, list) or not values:
        raise LexiconError(f"Lexicon '{where}' must be a non-empty list")
    return tuple(str(v).lower() for v in values)


def _compile(pattern: Any, where: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(str(pattern), flags)
    except re.error as exc:
        raise LexiconError(f"Invalid pattern in '{where}': {exc}") from exc


def _parse_answers(section: dict[str, Any]) -> dict[str, Any]:
    tiers: dict[str, KeywordTiers] = {}
    for name, raw in _require(section, "keyword_tiers", "answers").items():
        where = f"answers.keyword_tiers.{name}"
        tiers[name] = KeywordTiers(
            primary=_words(_require(raw, "primary", where), f"{where}.primary"),
            secondary=_words(_require(raw, "secondary", where), f"{where}.secondary"),
            bonus=_words(_require(raw, "bonus", where), f"{where}.bonus"),
        )

    aliases = dict(section.get("tier_aliases") or {})
    default_tier = str(section.get("default_tier", QuestionType.BEHAVIORAL.value))
    if default_tier not in tiers:
        raise LexiconError(f"Default keyword tier '{default_tier}' is not defined")

    for member in QuestionType:
        target = aliases.get(member.value, member.value)
        if target not in tiers:
            raise LexiconError(
                f"Question type '{member.value}' has no keyword tiers or alias"
            )

    star_raw = _require(section, "star_cues", "answers")
    star_cues = {
        name: _compile(p, f"answers.star_cues.{name}", re.IGNORECASE)
        for name, p in star_raw.items()
    }
    if len(star_cues) != 4:
        raise LexiconError("Lexicon 'answers.star_cues' must define four cue families")

    return {
        "keyword_tiers": tiers,
        "tier_aliases": aliases,
        "default_tier": default_tier,
        "star_cues": star_cues,
        "code_vocabulary": _compile(
            _require(section, "code_vocabulary", "answers"),
            "answers.code_vocabulary",
            re.IGNORECASE,
        ),
        "relevance_stop_words": frozenset(
            _words(_require(section, "relevance_stop_words", "answers"), "answers.relevance_stop_words")
        ),
        "transition_words": _words(_require(section, "transition_words", "answers"), "answers.transition_words"),
        "filler_words": _words(_require(section, "filler_words", "answers"), "answers.filler_words"),
    }


def _parse_resumes(section: dict[str, Any]) -> dict[str, Any]:
    job_raw = _require(section, "job_keywords", "resumes")
    job_keywords = {
        name: _words(words, f"resumes.job_keywords.{name}")
        for name, words in job_raw.items()
    }
    for member in JobType:
        if member.value not in job_keywords:
            raise LexiconError(f"Job type '{member.value}' has no keyword set")

    headers_raw = _require(section, "section_headers", "resumes")
    section_headers = {
        name: _words(words, f"resumes.section_headers.{name}")
        for name, words in headers_raw.items()
    }
    for name in ("skills", "experience", "education", "projects"):
        if name not in section_headers:
            raise LexiconError(f"Lexicon is missing 'resumes.section_headers.{name}'")

    skill_raw = _require(section, "skill_patterns", "resumes")
    return {
        "job_keywords": job_keywords,
        "action_verbs": _words(_require(section, "action_verbs", "resumes"), "resumes.action_verbs"),
        "section_headers": section_headers,
        "common_section_headers": _words(
            _require(section, "common_section_headers", "resumes"), "resumes.common_section_headers"
        ),
        "essential_sections": _words(
            _require(section, "essential_sections", "resumes"), "resumes.essential_sections"
        ),
        "title_keywords": _words(_require(section, "title_keywords", "resumes"), "resumes.title_keywords"),
        "company_suffixes": tuple(
            str(s) for s in _require(section, "company_suffixes", "resumes")
        ),
        "skill_patterns": {
            name: _compile(p, f"resumes.skill_patterns.{name}", re.IGNORECASE)
            for name, p in skill_raw.items()
        },
        "degree_patterns": tuple(
            _compile(p, "resumes.degree_patterns", re.IGNORECASE)
            for p in _require(section, "degree_patterns", "resumes")
        ),
        "quantifiable_pattern": _compile(
            _require(section, "quantifiable_pattern", "resumes"), "resumes.quantifiable_pattern"
        ),
        "achievement_metric_pattern": _compile(
            _require(section, "achievement_metric_pattern", "resumes"),
            "resumes.achievement_metric_pattern",
            re.IGNORECASE,
        ),
        "email_pattern": _compile(_require(section, "email_pattern", "resumes"), "resumes.email_pattern"),
        "phone_pattern": _compile(_require(section, "phone_pattern", "resumes"), "resumes.phone_pattern"),
        "bullet_markers": tuple(
            str(m) for m in _require(section, "bullet_markers", "resumes")
        ),
    }


def load_lexicon(path: Path) -> Lexicon:
    """Read and validate a lexicon YAML document."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise LexiconError(f"Cannot read lexicon {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise LexiconError(f"Lexicon {path} is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise LexiconError(f"Lexicon {path} must be a mapping")

    version = str(_require(data, "version", "lexicon"))
    fields = _parse_answers(_require(data, "answers", "lexicon"))
    fields.update(_parse_resumes(_require(data, "resumes", "lexicon")))
    lexicon = Lexicon(version=version, **fields)
    log.debug(
        "Loaded lexicon v%s — %d answer tier sets, %d job keyword sets",
        version, len(lexicon.keyword_tiers), len(lexicon.job_keywords),
    )
    return lexicon


@functools.lru_cache(maxsize=1)
def get_lexicon() -> Lexicon:
    return load_lexicon(get_lexicon_path())


def reload_lexicon() -> Lexicon:
    """Drop the cached lexicon (e.g. after changing PREPSCORE_LEXICON)."""
    get_lexicon.cache_clear()
    return get_lexicon()
