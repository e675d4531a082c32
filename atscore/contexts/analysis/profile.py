"""
Resume profile: the handful of structured fields the gap analyzer's
threshold rules look at (summary, skills, work history).

A profile comes either from free text, via heading-based section splitting,
or from a resume-builder form mapping where the fields are already separate.

Usage:
    profile = ResumeProfile.from_text(resume_text)
    profile = ResumeProfile.from_mapping({
        "professionalSummary": "...",
        "skills": {"hard": ["Python", "SQL"], "soft": ["Leadership"]},
        "workExperience": [{"jobTitle": "Engineer", "company": "Acme"}],
    })
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from atscore.contexts.analysis.features import find_reference_keywords
from atscore.contexts.analysis.vocabulary import (
    SECTION_SYNONYMS,
    SOFT_SKILL_TERMS,
    TECHNICAL_KEYWORDS,
    FeaturePatterns,
)

PREAMBLE = "header"


@dataclass(frozen=True)
class WorkEntry:
    """One position in the work history."""

    job_title: str = ""
    company: str = ""


@dataclass(frozen=True)
class ResumeProfile:
    """Structured view of a resume used by the gap analyzer."""

    summary: str = ""
    hard_skills: tuple[str, ...] = ()
    soft_skills: tuple[str, ...] = ()
    work_experience: tuple[WorkEntry, ...] = ()
    sections: dict[str, str] = field(default_factory=dict)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, text: str) -> "ResumeProfile":
        """Build a profile from free resume text using heading detection."""
        sections = split_sections(text or "")

        summary = " ".join(sections.get("summary", "").split())
        hard, soft = _classify_skills(sections.get("skills", ""))
        if not hard:
            # No parseable skills section: fall back to hard skills found anywhere
            hard = tuple(find_reference_keywords(text or "", TECHNICAL_KEYWORDS))
        if not soft:
            soft = tuple(find_reference_keywords(text or "", SOFT_SKILL_TERMS))

        work = _parse_work_entries(sections.get("experience", ""))

        return cls(
            summary=summary,
            hard_skills=hard,
            soft_skills=soft,
            work_experience=work,
            sections=sections,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ResumeProfile":
        """
        Build a profile from resume-builder form data.

        Accepts camelCase (professionalSummary, workExperience, jobTitle) or
        snake_case (summary, work_experience, job_title) keys. Blank list
        items are dropped.
        """
        summary = data.get("professionalSummary") or data.get("summary") or ""

        skills = data.get("skills") or {}
        hard = _clean_items(skills.get("hard", [])) if isinstance(skills, Mapping) else _clean_items(skills)
        soft = _clean_items(skills.get("soft", [])) if isinstance(skills, Mapping) else ()

        raw_work = data.get("workExperience") or data.get("work_experience") or []
        work = tuple(
            WorkEntry(
                job_title=str(entry.get("jobTitle") or entry.get("job_title") or "").strip(),
                company=str(entry.get("company") or "").strip(),
            )
            for entry in raw_work
            if isinstance(entry, Mapping)
        )

        return cls(summary=str(summary).strip(), hard_skills=hard, soft_skills=soft, work_experience=work)

    @property
    def has_company(self) -> bool:
        """First listed position names an employer."""
        return bool(self.work_experience) and bool(self.work_experience[0].company.strip())


def _clean_items(items) -> tuple[str, ...]:
    return tuple(str(item).strip() for item in (items or []) if item and str(item).strip())


def _section_for_heading(heading: str) -> Optional[str]:
    """
    Map heading text to a canonical section.

    The heading must equal a synonym or end with one ("Work Experience",
    "Technical Skills"); "Experienced engineer" is not a heading.
    """
    lowered = " ".join(heading.lower().split())
    for section, synonyms in SECTION_SYNONYMS.items():
        for synonym in synonyms:
            if lowered == synonym or lowered.endswith(" " + synonym):
                return section
    return None


def split_sections(text: str) -> dict[str, str]:
    """
    Split resume text into canonical section bodies keyed by section name.

    Recognizes headings on their own line ("EXPERIENCE", "## Skills") and
    inline headings ("Skills: Python, SQL"). Text before the first heading
    is stored under "header". Repeated sections are concatenated.
    """
    sections: dict[str, list[str]] = {}
    current = PREAMBLE

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        heading, _, rest = stripped.partition(":")
        section = None
        if rest or stripped.endswith(":"):
            if FeaturePatterns.HEADING.match(heading):
                section = _section_for_heading(heading.lstrip("#").strip())
        elif FeaturePatterns.HEADING.match(stripped):
            section = _section_for_heading(stripped.lstrip("#").strip())

        if section is not None:
            current = section
            sections.setdefault(current, [])
            if rest.strip():
                sections[current].append(rest.strip())
            continue

        sections.setdefault(current, []).append(stripped)

    return {name: "\n".join(lines) for name, lines in sections.items()}


def _classify_skills(body: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split a skills section into (hard, soft) items, preserving order."""
    items = [item.strip(" .\t") for item in FeaturePatterns.LIST_SEPARATOR.split(body)]
    hard: list[str] = []
    soft: list[str] = []

    for item in items:
        if not item:
            continue
        lowered = item.lower()
        if any(term in lowered for term in SOFT_SKILL_TERMS):
            if item not in soft:
                soft.append(item)
        elif item not in hard:
            hard.append(item)

    return tuple(hard), tuple(soft)


def _parse_work_entries(body: str) -> tuple[WorkEntry, ...]:
    """
    Parse work history lines into entries.

    Bullet lines and date ranges are skipped. "Title at Company" style lines
    are split; any other line is taken as an employer name.
    """
    entries = []
    for line in body.splitlines():
        stripped = line.strip()
        if not stripped or stripped[0] in "-*":
            continue
        if FeaturePatterns.DATE_RANGE.match(stripped):
            continue
        if not any(ch.isalpha() for ch in stripped):
            continue

        match = FeaturePatterns.ROLE_AT_COMPANY.match(stripped)
        if match:
            entries.append(
                WorkEntry(
                    job_title=match.group("title").strip(),
                    company=match.group("company").strip(),
                )
            )
        else:
            entries.append(WorkEntry(company=stripped))

    return tuple(entries)
