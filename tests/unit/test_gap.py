"""Unit tests for gap analysis."""

import pytest

from atscore.contexts.analysis.features import DocumentFeatures
from atscore.contexts.analysis.keywords import KeywordSet, extract_keywords
from atscore.contexts.analysis.profile import ResumeProfile, WorkEntry
from atscore.contexts.analysis.tokenizer import token_set
from atscore.contexts.scoring.gap import analyze_gap, build_suggestions

CONTACT = DocumentFeatures(has_email=True, has_phone=True)

COMPLETE_PROFILE = ResumeProfile(
    summary="x" * 81,
    hard_skills=("Python", "SQL", "Docker", "AWS"),
    work_experience=(WorkEntry(job_title="Engineer", company="Acme"),),
)


@pytest.mark.unit
def test_scenario_c_matched_and_missing():
    """Test JD {react, node, sql} against resume tokens {react, python}."""
    gap = analyze_gap(CONTACT, {"react", "python"}, KeywordSet.from_keywords(["react", "node", "sql"]))

    assert gap.matched == ("react",)
    assert gap.missing == ("node", "sql")
    assert "1 JD keywords matched" in gap.strengths
    assert "2 JD keywords missing" in gap.weaknesses


@pytest.mark.unit
def test_suggestions_from_missing_keywords():
    """Test suggestion rendering in JD rank order."""
    gap = analyze_gap(CONTACT, {"react"}, KeywordSet.from_keywords(["react", "node", "sql"]))

    assert gap.suggestions == ("add keyword & context: node", "add keyword & context: sql")


@pytest.mark.unit
def test_suggestion_count_limits_output():
    """Test the top-K bound on suggestions."""
    missing = [f"skill{i}" for i in range(12)]

    assert len(build_suggestions(missing)) == 8
    assert build_suggestions(missing, count=2) == (
        "add keyword & context: skill0",
        "add keyword & context: skill1",
    )
    assert build_suggestions(missing, count=0) == ()


@pytest.mark.unit
def test_rules_all_pass_in_fixed_order():
    """Test strengths order when every rule passes and no JD is given."""
    gap = analyze_gap(CONTACT, set(), profile=COMPLETE_PROFILE)

    assert gap.strengths == (
        "Strong professional summary length",
        "Good number of technical skills",
        "Experience section present",
        "Contact details present",
    )
    assert gap.weaknesses == ()
    assert gap.suggestions == ()


@pytest.mark.unit
def test_rules_all_fail_in_fixed_order():
    """Test weaknesses order for an empty profile with complex formatting."""
    features = DocumentFeatures(complex_formatting_flags={"image": True})
    gap = analyze_gap(features, set(), profile=ResumeProfile(summary="x" * 80))

    assert gap.strengths == ()
    assert gap.weaknesses == (
        "Short professional summary: consider expanding it with achievements",
        "Add more technical (hard) skills",
        "Add detailed work experience (company, role, responsibilities)",
        "Add an e-mail address and phone number",
        "Avoid tables and embedded graphics that ATS parsers cannot read",
    )


@pytest.mark.unit
def test_hard_skills_default_to_technical_keywords():
    """Test the profile fallback built from document features."""
    features = DocumentFeatures(matched_reference_keywords=("python", "sql", "aws", "git", "leadership"))
    gap = analyze_gap(features, set())

    assert "Good number of technical skills" in gap.strengths


@pytest.mark.unit
@pytest.mark.parametrize(
    "resume, jd",
    [
        ("Python developer with React", "React Node SQL developer. React and Node experience."),
        ("", "Kubernetes Terraform AWS"),
        ("Kubernetes Terraform AWS", "Kubernetes Terraform AWS"),
        ("anything", ""),
    ],
)
def test_matched_and_missing_partition_jd_keywords(resume, jd):
    """Test that matched and missing are disjoint and cover the JD keywords."""
    jd_keywords = extract_keywords(jd)
    gap = analyze_gap(CONTACT, token_set(resume), jd_keywords)

    assert not set(gap.matched) & set(gap.missing)
    assert set(gap.matched) | set(gap.missing) == jd_keywords.as_set()
