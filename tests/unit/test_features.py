"""Unit tests for document feature extraction."""

import pytest

from atscore.contexts.analysis.features import detect_sections, extract_features

SCENARIO_A = "Experience\nSkills: Python, React, SQL\n" + " ".join(str(n) for n in range(10, 22))


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   \n\t", None])
def test_empty_text_has_no_features(text):
    """Test that empty documents yield None rather than zeroed features."""
    assert extract_features(text) is None


@pytest.mark.unit
def test_scenario_a_features():
    """Test sections, keyword hits and numeric mentions of a short resume."""
    features = extract_features(SCENARIO_A)

    assert features.sections_found == frozenset({"experience", "skills"})
    assert features.keyword_hits == 3
    assert features.matched_reference_keywords == ("python", "react", "sql")
    assert features.quantified_achievements == 12
    assert features.word_count == 17
    assert not features.has_complex_formatting


@pytest.mark.unit
def test_section_synonyms_are_detected():
    """Test that synonyms count as their canonical section."""
    sections = detect_sections("PROFILE\nEmployment\nCore Competencies\nAcademic record")

    assert sections == frozenset({"summary", "experience", "skills", "education"})


@pytest.mark.unit
def test_keyword_counted_once_per_distinct_keyword():
    """Test that repetition doesn't inflate keyword hits."""
    features = extract_features("python python python docker docker")

    assert features.keyword_hits == 2


@pytest.mark.unit
def test_format_flags():
    """Test table/image/graphic markers."""
    features = extract_features("Skills TABLE with an embedded Image")

    assert features.complex_formatting_flags == {"table": True, "image": True, "graphic": False}
    assert features.has_complex_formatting


@pytest.mark.unit
def test_word_count_includes_stop_words():
    """Test that word count uses the unfiltered whitespace split."""
    features = extract_features("I led the team of the year")

    assert features.word_count == 7


@pytest.mark.unit
def test_contact_detection():
    """Test e-mail and phone detection."""
    features = extract_features("Jane Doe\njane.doe@example.com\n(555) 123-4567")
    no_contact = extract_features("Jane Doe\nWorked 2019 2020 2021")

    assert features.has_email and features.has_phone
    assert not no_contact.has_email and not no_contact.has_phone


@pytest.mark.unit
def test_missing_sections_in_canonical_order():
    """Test the missing_sections helper."""
    features = extract_features("Summary\nSkills\nProjects")

    assert features.missing_sections == ("experience", "education", "certifications")
