from prepscore.text import (
    count_phrase,
    find_section,
    is_effectively_empty,
    is_header_line,
    paragraphs,
    sentences,
    word_count,
)


def test_none_is_treated_as_empty_text():
    assert word_count(None) == 0
    assert sentences(None) == []
    assert paragraphs(123) == []
    assert is_effectively_empty(None)


def test_three_words_or_fewer_count_as_empty():
    assert is_effectively_empty("   ")
    assert is_effectively_empty("I don't know")
    assert not is_effectively_empty("I really don't know")


def test_sentences_ignore_empty_fragments():
    assert len(sentences("One. Two!! Three?")) == 3
    assert len(sentences("...")) == 0


def test_paragraphs_split_on_blank_lines():
    text = "First block.\n\nSecond block.\n   \nThird block."
    assert len(paragraphs(text)) == 3


def test_count_phrase_matches_whole_words_only():
    text = "First, we planned. At first it failed. Firstly is not counted."
    assert count_phrase(text, "first") == 2
    assert count_phrase("For example, in addition to that", "for example") == 1


def test_header_line_allows_small_slack():
    assert is_header_line("skills", ["skills"])
    assert is_header_line("core skills", ["skills"])
    assert not is_header_line("i have strong skills in many different areas", ["skills"])
    assert is_header_line("my skills and interests:", ["skills"], allow_colon=True)


def test_find_section_stops_at_next_header():
    text = "Summary\nHello\n\nSkills\nPython, SQL\n\nDocker\nEducation\nBSc"
    assert find_section(text, ["skills"]) == "Python, SQL\nDocker"


def test_find_section_missing_header_returns_empty():
    assert find_section("Just some text", ["projects"]) == ""
    assert find_section("", ["projects"]) == ""
