"""Unit tests for ResumeProfile construction and section splitting."""

import pytest

from atscore.contexts.analysis.profile import ResumeProfile, WorkEntry, split_sections

RESUME = """Jane Doe
jane@example.com | (555) 123-4567

Summary
Backend engineer with eight years building data platforms and APIs for fintech and healthcare clients.

Experience
Senior Engineer at Acme Corp
Jan 2019 - Present
- Built ingestion pipelines

Skills: Python, SQL, Docker, AWS, Leadership, Communication
"""


@pytest.mark.unit
def test_split_sections_finds_own_line_and_inline_headings():
    """Test heading detection on its own line and before a colon."""
    sections = split_sections(RESUME)

    assert list(sections) == ["header", "summary", "experience", "skills"]
    assert sections["header"].startswith("Jane Doe")
    assert sections["skills"] == "Python, SQL, Docker, AWS, Leadership, Communication"


@pytest.mark.unit
def test_sentence_starting_with_section_word_is_not_a_heading():
    """Test that 'Experienced engineer' stays in the current section."""
    sections = split_sections("Summary\nExperienced engineer\n")

    assert sections == {"summary": "Experienced engineer"}


@pytest.mark.unit
def test_profile_from_text():
    """Test summary, skills and work history parsed from free text."""
    profile = ResumeProfile.from_text(RESUME)

    assert profile.summary.startswith("Backend engineer")
    assert len(profile.summary) > 80
    assert profile.hard_skills == ("Python", "SQL", "Docker", "AWS")
    assert profile.soft_skills == ("Leadership", "Communication")
    assert profile.work_experience == (WorkEntry(job_title="Senior Engineer", company="Acme Corp"),)
    assert profile.has_company


@pytest.mark.unit
def test_profile_from_text_without_headings_falls_back_to_keywords():
    """Test hard skills found anywhere when there is no skills section."""
    profile = ResumeProfile.from_text("Wrote python and sql daily, shipped with docker")

    assert profile.summary == ""
    assert profile.hard_skills == ("python", "sql", "docker")
    assert not profile.has_company


@pytest.mark.unit
def test_profile_from_mapping_camel_case():
    """Test resume-builder form data with camelCase keys."""
    profile = ResumeProfile.from_mapping(
        {
            "professionalSummary": "  Seasoned analyst  ",
            "skills": {"hard": ["Python", "", "SQL"], "soft": ["Leadership"]},
            "workExperience": [{"jobTitle": "Analyst", "company": "Globex"}],
        }
    )

    assert profile.summary == "Seasoned analyst"
    assert profile.hard_skills == ("Python", "SQL")
    assert profile.soft_skills == ("Leadership",)
    assert profile.work_experience[0] == WorkEntry(job_title="Analyst", company="Globex")
    assert profile.has_company


@pytest.mark.unit
def test_profile_from_mapping_snake_case_and_blank_company():
    """Test snake_case keys and a first entry without an employer."""
    profile = ResumeProfile.from_mapping(
        {
            "summary": "Short",
            "skills": ["Excel"],
            "work_experience": [{"job_title": "Intern", "company": "  "}],
        }
    )

    assert profile.hard_skills == ("Excel",)
    assert profile.soft_skills == ()
    assert not profile.has_company


@pytest.mark.unit
def test_empty_mapping():
    """Test that an empty form yields an empty profile."""
    profile = ResumeProfile.from_mapping({})

    assert profile == ResumeProfile()
