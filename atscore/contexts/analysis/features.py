"""
Document feature model.

Reduces raw resume text to the structural signals the scoring engine uses.
Every signal is a deliberately simple proxy (substring search, digit-run
counting), not an NLP entity extractor.
"""

from dataclasses import dataclass, field
from typing import Optional

from atscore.contexts.analysis.vocabulary import (
    CANONICAL_SECTIONS,
    FORMAT_MARKERS,
    REFERENCE_KEYWORDS,
    SECTION_SYNONYMS,
    TECHNICAL_KEYWORDS,
    FeaturePatterns,
)


@dataclass(frozen=True)
class DocumentFeatures:
    """
    Structural features extracted from one resume.

    Attributes:
        sections_found: Canonical section names detected in the text
        keyword_hits: Number of distinct reference keywords present
        quantified_achievements: Number of digit runs (measurable-result proxy)
        word_count: Whitespace-delimited word count (stopwords included)
        complex_formatting_flags: Marker name -> present (table/image/graphic)
        matched_reference_keywords: The reference keywords that were found
        has_email: An e-mail address appears in the text
        has_phone: A 10-digit phone number appears in the text
    """

    sections_found: frozenset[str] = frozenset()
    keyword_hits: int = 0
    quantified_achievements: int = 0
    word_count: int = 0
    complex_formatting_flags: dict[str, bool] = field(default_factory=dict)
    matched_reference_keywords: tuple[str, ...] = ()
    has_email: bool = False
    has_phone: bool = False

    @property
    def section_count(self) -> int:
        return len(self.sections_found)

    @property
    def has_complex_formatting(self) -> bool:
        return any(self.complex_formatting_flags.values())

    @property
    def technical_keywords(self) -> tuple[str, ...]:
        """Found reference keywords that are hard skills."""
        return tuple(k for k in self.matched_reference_keywords if k in TECHNICAL_KEYWORDS)

    @property
    def missing_sections(self) -> tuple[str, ...]:
        return tuple(s for s in CANONICAL_SECTIONS if s not in self.sections_found)


def detect_sections(text: str) -> frozenset[str]:
    """Canonical sections whose name or synonym appears anywhere (case-insensitive)."""
    lower = text.lower()
    return frozenset(
        section
        for section, synonyms in SECTION_SYNONYMS.items()
        if any(synonym in lower for synonym in synonyms)
    )


def find_reference_keywords(text: str, reference: tuple[str, ...] = REFERENCE_KEYWORDS) -> tuple[str, ...]:
    """Reference keywords present as substrings, each counted once."""
    lower = text.lower()
    return tuple(keyword for keyword in reference if keyword in lower)


def extract_features(text: Optional[str]) -> Optional[DocumentFeatures]:
    """
    Extract structural features from raw resume text.

    Args:
        text: Raw (extracted) resume text

    Returns:
        DocumentFeatures, or None when the text is empty or whitespace-only
        (the scoring engine turns None into EmptyDocumentError)
    """
    if not text or not text.strip():
        return None

    lower = text.lower()
    matched = find_reference_keywords(text)

    return DocumentFeatures(
        sections_found=detect_sections(text),
        keyword_hits=len(matched),
        quantified_achievements=len(FeaturePatterns.NUMBER.findall(text)),
        word_count=len(text.split()),
        complex_formatting_flags={marker: marker in lower for marker in FORMAT_MARKERS},
        matched_reference_keywords=matched,
        has_email=bool(FeaturePatterns.EMAIL.search(text)),
        has_phone=bool(FeaturePatterns.PHONE.search(text)),
    )
