"""Unit tests for the score_resume pipeline."""

import time

import pytest

import atscore
from atscore.contexts.history.tracker import HistoryTracker
from atscore.contexts.intake.document import RawDocument
from atscore.contexts.scoring import pipeline
from atscore.contexts.scoring.pipeline import get_history, score_resume
from atscore.contexts.scoring.report import render_markdown_report
from atscore.exceptions import EmptyDocumentError, InvalidLimitError, ScoringTimeoutError
from atscore.utils.config import AppConfig

SCENARIO_A = "Experience\nSkills: Python, React, SQL\n" + " ".join(str(n) for n in range(10, 22))

RESUME = """Jane Doe
jane@example.com | (555) 123-4567

Summary
Backend engineer with eight years building data platforms and APIs for fintech and healthcare clients.

Experience
Senior Engineer at Acme Corp
- Built React dashboards backed by Python services

Skills: Python, SQL, Docker, AWS
"""

JOB = "React Node SQL developer needed. React and Node experience, Kafka a plus."


@pytest.mark.unit
def test_scenario_a_through_pipeline():
    """Test the no-JD path end to end."""
    result = score_resume(SCENARIO_A)

    assert result.score == 61
    assert result.matched_keywords == ()
    assert result.missing_keywords == ()
    assert result.parsed_snippet is None


@pytest.mark.unit
def test_top_level_reexport():
    """Test that the package exports the pipeline entry point."""
    assert atscore.score_resume is score_resume


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   \n\t", None])
def test_scenario_b_empty_document(text):
    """Test that empty text raises and records nothing."""
    tracker = HistoryTracker()

    with pytest.raises(EmptyDocumentError):
        score_resume(text, tracker=tracker, identity="u1")

    assert tracker.count("u1") == 0


@pytest.mark.unit
def test_jd_keywords_partitioned():
    """Test matched/missing against JD keywords in rank order."""
    result = score_resume(RESUME, JOB)

    assert result.matched_keywords[:1] == ("react",)
    assert "node" in result.missing_keywords
    assert "sql" in result.matched_keywords
    assert not set(result.matched_keywords) & set(result.missing_keywords)
    assert "add keyword & context: node" in result.suggestions
    assert 10 <= result.score <= 100


@pytest.mark.unit
def test_profile_rules_use_parsed_text():
    """Test that strengths come from the parsed resume profile."""
    result = score_resume(RESUME)

    assert result.strengths[:4] == (
        "Strong professional summary length",
        "Good number of technical skills",
        "Experience section present",
        "Contact details present",
    )


@pytest.mark.unit
@pytest.mark.parametrize("jd", [None, "", "   "])
def test_blank_jd_is_no_jd_mode(jd):
    """Test that a blank job description uses the no-JD path."""
    with_blank = score_resume(SCENARIO_A, jd)

    assert with_blank.score == 61
    assert not with_blank.has_job_description


@pytest.mark.unit
def test_stop_word_jd_still_scores_as_jd_mode():
    """Test that a JD with no usable keywords is labelled as JD mode."""
    result = score_resume(SCENARIO_A, "the and of a")
    report = render_markdown_report(result, "cv.txt")

    assert result.score == 51
    assert result.has_job_description
    assert result.matched_keywords == ()
    assert result.missing_keywords == ()
    assert "## Job Description Match (0%)" in report


@pytest.mark.unit
@pytest.mark.parametrize("limit", [0, -1])
def test_invalid_keyword_limit(limit):
    """Test that a non-positive keyword limit is rejected."""
    config = AppConfig().with_scoring(keyword_limit=limit)

    with pytest.raises(InvalidLimitError) as exc_info:
        score_resume(RESUME, JOB, config=config)

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.name == "keyword_limit"


@pytest.mark.unit
def test_history_entry_appended_after_success():
    """Test the history record of a successful run."""
    tracker = HistoryTracker()

    result = score_resume(RESUME, JOB, tracker=tracker, identity="jane", filename="jane.pdf")
    entries = get_history("jane", tracker=tracker)

    assert len(entries) == 1
    assert entries[0].score == result.score
    assert entries[0].filename == "jane.pdf"
    assert entries[0].sector == result.sector
    assert entries[0].timestamp == result.timestamp


@pytest.mark.unit
def test_explicit_sector_wins():
    """Test caller-supplied sector labels."""
    result = score_resume(RESUME, sector="Finance")

    assert result.sector == "Finance"


@pytest.mark.unit
def test_raw_document_input_keeps_filename():
    """Test passing a RawDocument instead of text."""
    tracker = HistoryTracker()
    document = RawDocument.from_text(SCENARIO_A, filename="cv.txt")

    score_resume(document, tracker=tracker, identity="u2")

    assert tracker.latest("u2").filename == "cv.txt"


@pytest.mark.unit
def test_excerpt_retained_only_when_configured():
    """Test parsed_snippet follows excerpt_chars."""
    config = AppConfig().with_scoring(excerpt_chars=8)

    result = score_resume(RESUME, config=config)

    assert result.parsed_snippet == RESUME[:8]
    assert result.to_dict()["parsedSnippet"] == "Jane Doe"
    assert "parsedSnippet" not in score_resume(RESUME).to_dict()


@pytest.mark.unit
def test_timeout_path_returns_result():
    """Test that a generous timeout behaves like no timeout."""
    assert score_resume(SCENARIO_A, timeout=10).score == 61


@pytest.mark.unit
def test_timeout_discards_work(monkeypatch):
    """Test that an expired deadline raises and appends nothing."""
    original = pipeline._run_pipeline

    def slow_pipeline(*args):
        time.sleep(0.5)
        return original(*args)

    monkeypatch.setattr(pipeline, "_run_pipeline", slow_pipeline)
    tracker = HistoryTracker()

    with pytest.raises(ScoringTimeoutError) as exc_info:
        score_resume(SCENARIO_A, tracker=tracker, identity="u3", timeout=0.05)

    assert exc_info.value.timeout == 0.05
    assert tracker.count("u3") == 0
