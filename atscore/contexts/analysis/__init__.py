"""
Analysis Context

Responsibilities:
- Tokenizes text into normalized tokens (stopwords and punctuation removed)
- Extracts frequency-ranked keyword sets from job descriptions
- Extracts structural document features from resume text
- Builds a structured resume profile and detects the resume's sector

Owns: Tokenizer, KeywordSet, DocumentFeatures, ResumeProfile
Never: Produces scores or touches score history
"""

from atscore.contexts.analysis.features import DocumentFeatures, extract_features
from atscore.contexts.analysis.keywords import KeywordSet, extract_keywords
from atscore.contexts.analysis.profile import ResumeProfile, WorkEntry, split_sections
from atscore.contexts.analysis.sector import detect_sector
from atscore.contexts.analysis.tokenizer import Tokenizer, token_set, tokenize

__all__ = [
    "tokenize",
    "token_set",
    "Tokenizer",
    "extract_keywords",
    "KeywordSet",
    "extract_features",
    "DocumentFeatures",
    "ResumeProfile",
    "WorkEntry",
    "split_sections",
    "detect_sector",
]
