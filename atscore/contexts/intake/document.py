"""
Raw document data structure for the Intake context.

A RawDocument is the transient text of one upload. It is created on upload,
handed to analysis, and dropped once features are extracted; only an
optional truncated excerpt may outlive it.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from atscore.contexts.intake.extraction import DEFAULT_MAX_BYTES, extract_text, guess_mime_type
from atscore.contexts.intake.normalizer import normalize_extracted_text


@dataclass(frozen=True)
class RawDocument:
    """
    Opaque text blob plus its declared MIME type.

    Factory methods:
        from_text(text) - Wrap already-extracted text
        from_bytes(data, mime_type, filename) - Extract from upload bytes
        from_path(path) - Read and extract a file on disk
    """

    text: str
    mime_type: str = "text/plain"
    filename: str = "resume"

    @classmethod
    def from_text(cls, text: str, filename: str = "resume") -> "RawDocument":
        """Wrap plain text, normalizing it like extractor output."""
        return cls(text=normalize_extracted_text(text or ""), filename=filename)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        mime_type: Optional[str] = None,
        filename: str = "resume",
        max_bytes: int = DEFAULT_MAX_BYTES,
    ) -> "RawDocument":
        """
        Extract text from upload bytes.

        Raises:
            UnreadableDocumentError: If extraction fails
        """
        mime_type = mime_type or guess_mime_type(filename)
        text = extract_text(data, mime_type, filename=filename, max_bytes=max_bytes)
        return cls(text=text, mime_type=mime_type, filename=filename)

    @classmethod
    def from_path(cls, path: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> "RawDocument":
        """
        Read a file from disk and extract its text.

        Raises:
            FileNotFoundError: If path doesn't exist
            UnreadableDocumentError: If extraction fails
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        return cls.from_bytes(path.read_bytes(), filename=path.name, max_bytes=max_bytes)

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    def excerpt(self, max_chars: int) -> str:
        """Truncated prefix retained after the document is discarded."""
        if max_chars <= 0:
            return ""
        return self.text[:max_chars]
