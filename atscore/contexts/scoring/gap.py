"""
Gap analysis between a resume and a job description.

Rules are evaluated in a fixed sequence, each independently contributing a
strength or a weakness, so output order is deterministic.
"""

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Optional, Union

from atscore.contexts.analysis.features import DocumentFeatures
from atscore.contexts.analysis.keywords import KeywordSet
from atscore.contexts.analysis.profile import ResumeProfile
from atscore.contexts.scoring.engine import split_keywords

SUMMARY_MIN_CHARS = 80
MIN_HARD_SKILLS = 4
DEFAULT_SUGGESTION_COUNT = 8
SUGGESTION_TEMPLATE = "add keyword & context: {keyword}"


@dataclass(frozen=True)
class GapAnalysis:
    """Matched/missing JD keywords plus rule-based diagnostics."""

    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


def build_suggestions(missing: Iterable[str], count: int = DEFAULT_SUGGESTION_COUNT) -> tuple[str, ...]:
    """Render the top ``count`` missing keywords as suggestions."""
    if count <= 0:
        return ()
    return tuple(SUGGESTION_TEMPLATE.format(keyword=k) for k in list(missing)[:count])


def analyze_gap(
    features: DocumentFeatures,
    resume_tokens: AbstractSet[str],
    jd_keywords: Optional[Union[KeywordSet, Iterable[str]]] = None,
    profile: Optional[ResumeProfile] = None,
    suggestion_count: int = DEFAULT_SUGGESTION_COUNT,
) -> GapAnalysis:
    """
    Compare a resume against job description keywords.

    Args:
        features: Extracted document features
        resume_tokens: Token set of the resume
        jd_keywords: Job description keywords (None or empty: no keyword rules)
        profile: Structured resume view; without one, hard skills come from
            the technical keywords found in the features
        suggestion_count: How many missing keywords become suggestions

    Returns:
        GapAnalysis with matched/missing in JD rank order
    """
    if jd_keywords is None:
        jd_keywords = KeywordSet()
    elif not isinstance(jd_keywords, KeywordSet):
        jd_keywords = KeywordSet.from_keywords(jd_keywords)

    if profile is None:
        profile = ResumeProfile(hard_skills=features.technical_keywords)

    matched, missing = split_keywords(jd_keywords, resume_tokens)
    strengths: list[str] = []
    weaknesses: list[str] = []

    if len(profile.summary) > SUMMARY_MIN_CHARS:
        strengths.append("Strong professional summary length")
    else:
        weaknesses.append("Short professional summary: consider expanding it with achievements")

    if len(profile.hard_skills) >= MIN_HARD_SKILLS:
        strengths.append("Good number of technical skills")
    else:
        weaknesses.append("Add more technical (hard) skills")

    if profile.has_company:
        strengths.append("Experience section present")
    else:
        weaknesses.append("Add detailed work experience (company, role, responsibilities)")

    if features.has_email and features.has_phone:
        strengths.append("Contact details present")
    else:
        weaknesses.append("Add an e-mail address and phone number")

    if features.has_complex_formatting:
        weaknesses.append("Avoid tables and embedded graphics that ATS parsers cannot read")

    if matched:
        strengths.append(f"{len(matched)} JD keywords matched")
    if missing:
        weaknesses.append(f"{len(missing)} JD keywords missing")

    return GapAnalysis(
        matched=matched,
        missing=missing,
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        suggestions=build_suggestions(missing, suggestion_count),
    )
