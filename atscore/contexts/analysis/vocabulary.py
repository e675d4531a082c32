"""
Fixed vocabularies and regex patterns for resume analysis.

Pattern classes follow the frozen-dataclass convention used for section
patterns elsewhere in the codebase: class-level constants, no behavior.
"""

import re
from dataclasses import dataclass

# Common English function words dropped by the tokenizer
STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "if", "while", "with", "to",
        "of", "in", "on", "for", "by", "is", "are", "was", "were", "as",
        "at", "be", "this", "that", "these", "those", "it", "its", "from",
        "about", "which", "into", "has", "have", "had", "will", "would",
        "can", "could",
    }
)

# Canonical section name -> substrings that count as that section being present
SECTION_SYNONYMS: dict[str, tuple[str, ...]] = {
    "summary": ("summary", "profile", "objective"),
    "experience": ("experience", "employment", "work history"),
    "skills": ("skills", "competencies", "technologies"),
    "education": ("education", "academic"),
    "projects": ("projects",),
    "certifications": ("certifications", "certificates", "licenses"),
}

CANONICAL_SECTIONS: tuple[str, ...] = tuple(SECTION_SYNONYMS)

# Reference keywords counted once each by substring search
TECHNICAL_KEYWORDS: tuple[str, ...] = (
    "python",
    "javascript",
    "typescript",
    "react",
    "node",
    "express",
    "mongodb",
    "sql",
    "aws",
    "docker",
    "git",
    "html",
    "css",
    "java",
    "c++",
    "machine learning",
    "data analysis",
)

SOFT_SKILL_KEYWORDS: tuple[str, ...] = (
    "agile",
    "leadership",
    "team",
    "project",
    "developed",
    "built",
    "designed",
)

REFERENCE_KEYWORDS: tuple[str, ...] = TECHNICAL_KEYWORDS + SOFT_SKILL_KEYWORDS

# Markers of layouts ATS parsers handle poorly
FORMAT_MARKERS: tuple[str, ...] = ("table", "image", "graphic")


@dataclass(frozen=True)
class FeaturePatterns:
    """Regex patterns used during feature extraction."""

    NUMBER: re.Pattern = re.compile(r"\d+")

    # 10-digit phone number with optional country code and separators
    PHONE: re.Pattern = re.compile(
        r"(?<!\d)(?:\+?\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}(?!\d)"
    )

    EMAIL: re.Pattern = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

    # A heading line: short, letters only, optional markdown hashes and trailing colon
    HEADING: re.Pattern = re.compile(r"^\s*#*\s*([A-Za-z][A-Za-z &/]{1,40}?)\s*:?\s*$")

    # "Title at Company", "Title @ Company", "Title | Company", "Title - Company"
    ROLE_AT_COMPANY: re.Pattern = re.compile(
        r"^(?P<title>.+?)\s+(?:at|@|\||-)\s+(?P<company>.+?)$", re.IGNORECASE
    )

    # "Jan 2019 - Present", "2018 to 2021", "03/2020 - 06/2022"
    DATE_RANGE: re.Pattern = re.compile(
        r"^\W*(?:[A-Za-z]{3,9}\.?\s+|\d{1,2}/)?\d{4}\s*(?:-|to)\s*"
        r"(?:(?:[A-Za-z]{3,9}\.?\s+|\d{1,2}/)?\d{4}|present|current|now)\W*$",
        re.IGNORECASE,
    )

    # Separators between items in a skills line
    LIST_SEPARATOR: re.Pattern = re.compile(r"[,;|\n]|\s-\s|^\s*[-*]\s*", re.MULTILINE)


# Terms that mark a listed skill as a soft skill rather than a hard skill
SOFT_SKILL_TERMS: tuple[str, ...] = (
    "leadership",
    "communication",
    "teamwork",
    "collaboration",
    "mentoring",
    "problem solving",
    "problem-solving",
    "time management",
    "adaptability",
    "critical thinking",
    "team player",
)
