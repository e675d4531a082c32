"""Unit tests for keyword extraction."""

import pytest

from atscore.contexts.analysis.keywords import KeywordSet, extract_keywords

JOB_DESCRIPTION = """
Senior Backend Engineer

We need an engineer with strong Python and SQL skills. Python services run on
AWS with Docker. Experience with Kafka is a plus; SQL tuning experience and
Python testing experience required.
"""


@pytest.mark.unit
def test_keywords_ranked_by_frequency():
    """Test descending frequency order."""
    keywords = extract_keywords("sql python sql react sql python")

    assert keywords.keywords == ("sql", "python", "react")
    assert keywords.frequency("sql") == 3
    assert keywords.frequency("python") == 2


@pytest.mark.unit
def test_keyword_ties_keep_first_appearance_order():
    """Test that equal counts keep source order."""
    keywords = extract_keywords("react node docker react node docker kafka")

    assert keywords.keywords == ("react", "node", "docker", "kafka")


@pytest.mark.unit
def test_short_tokens_are_dropped():
    """Test that tokens of two characters or fewer are filtered."""
    keywords = extract_keywords("go go go ml ml api")

    assert keywords.keywords == ("api",)
    assert "go" not in keywords


@pytest.mark.unit
@pytest.mark.parametrize("limit", [1, 3, 5, 40])
def test_keywords_bounded_by_limit_and_sorted(limit):
    """Test the limit bound and non-increasing frequency property."""
    keywords = extract_keywords(JOB_DESCRIPTION, limit=limit)
    counts = [keywords.frequency(k) for k in keywords]

    assert len(keywords) <= limit
    assert counts == sorted(counts, reverse=True)


@pytest.mark.unit
def test_default_limit_is_forty():
    """Test the default top-N bound."""
    text = " ".join(f"term{i:03d}" for i in range(100))

    assert len(extract_keywords(text)) == 40


@pytest.mark.unit
@pytest.mark.parametrize("text, limit", [("", 40), ("   ", 40), ("python sql", 0), ("python sql", -3)])
def test_degenerate_input_yields_empty_set(text, limit):
    """Test that empty text or a non-positive limit never raises."""
    keywords = extract_keywords(text, limit=limit)

    assert len(keywords) == 0
    assert not keywords


@pytest.mark.unit
def test_keyword_set_helpers():
    """Test KeywordSet membership and slicing helpers."""
    keywords = KeywordSet.from_keywords(["React", "node", "react"])

    assert keywords.keywords == ("react", "node")
    assert "react" in keywords
    assert keywords.as_set() == {"react", "node"}
    assert keywords.top(1) == ["react"]
    assert keywords.top(-1) == []
