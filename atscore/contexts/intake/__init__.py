"""
Intake Context

Responsibilities:
- Accepts uploaded resume files and job description text
- Extracts plain text from PDF, DOCX and TXT uploads
- Normalizes extractor output (unicode, line endings, blank lines)

Owns: RawDocument, text extraction boundary
Never: Scores documents or keeps full document text after analysis
"""

from atscore.contexts.intake.document import RawDocument
from atscore.contexts.intake.extraction import extract_text, guess_mime_type

__all__ = ["RawDocument", "extract_text", "guess_mime_type"]
