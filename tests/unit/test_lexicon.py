import pytest

from prepscore.categories import JobType, QuestionType
from prepscore.config import DEFAULT_LEXICON_PATH
from prepscore.lexicon import LexiconError, get_lexicon, load_lexicon, reload_lexicon


def test_bundled_lexicon_loads():
    lexicon = get_lexicon()
    assert lexicon.version == "1.0.0"
    assert "experience" in lexicon.essential_sections
    assert len(lexicon.transition_words) == 12


def test_every_question_type_has_tiers():
    lexicon = get_lexicon()
    for qtype in QuestionType:
        tiers = lexicon.tiers_for(qtype)
        assert tiers.primary and tiers.secondary and tiers.bonus


def test_aliases_resolve_to_behavioral():
    lexicon = get_lexicon()
    behavioral = lexicon.tiers_for(QuestionType.BEHAVIORAL)
    assert lexicon.tiers_for(QuestionType.SITUATIONAL) == behavioral
    assert lexicon.tiers_for(QuestionType.RESUME_BASED) == behavioral
    assert lexicon.tiers_for(None) == behavioral


def test_job_keywords_append_general_set():
    lexicon = get_lexicon()
    words = lexicon.keywords_for_job(JobType.SOFTWARE_ENGINEERING)
    assert words[0] == "javascript"
    assert "leadership" in words
    assert len(words) == len(set(words))
    assert lexicon.keywords_for_job(JobType.GENERAL) == list(lexicon.job_keywords["general"])


def test_lexicon_is_cached():
    assert get_lexicon() is get_lexicon()


def test_missing_file_raises(tmp_path):
    with pytest.raises(LexiconError):
        load_lexicon(tmp_path / "nope.yaml")


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("answers: [unclosed", encoding="utf-8")
    with pytest.raises(LexiconError):
        load_lexicon(path)


def test_missing_question_type_tiers_rejected(tmp_path):
    text = DEFAULT_LEXICON_PATH.read_text(encoding="utf-8")
    path = tmp_path / "lexicon.yaml"
    path.write_text(text.replace("    Resume-Based: Behavioral\n", ""), encoding="utf-8")
    with pytest.raises(LexiconError, match="Resume-Based"):
        load_lexicon(path)


def test_missing_job_keyword_set_rejected(tmp_path):
    text = DEFAULT_LEXICON_PATH.read_text(encoding="utf-8")
    path = tmp_path / "lexicon.yaml"
    path.write_text(text.replace("    marketing:\n", "    advertising:\n"), encoding="utf-8")
    with pytest.raises(LexiconError, match="marketing"):
        load_lexicon(path)


def test_env_override_is_honoured(tmp_path, monkeypatch):
    text = DEFAULT_LEXICON_PATH.read_text(encoding="utf-8")
    path = tmp_path / "custom.yaml"
    path.write_text(text.replace('version: "1.0.0"', 'version: "9.9.9"'), encoding="utf-8")
    monkeypatch.setenv("PREPSCORE_LEXICON", str(path))
    assert reload_lexicon().version == "9.9.9"
