"""
Text extraction from uploaded resume files.

Turns raw upload bytes into plain text for analysis. PDFs go through
pdfplumber first with PyPDF2 as a fallback; DOCX goes through python-docx;
plain text is decoded as UTF-8. Anything that yields no text is reported as
UnreadableDocumentError so callers can re-prompt for an upload.

Usage:
    from atscore.contexts.intake.extraction import extract_text

    text = extract_text(pdf_bytes, "application/pdf", filename="resume.pdf")
"""

import io
from pathlib import Path
from typing import Callable, Dict, Optional

import docx
import pdfplumber
from PyPDF2 import PdfReader

from atscore.contexts.intake.logger import log_extraction_failure, log_extraction_result
from atscore.contexts.intake.normalizer import normalize_extracted_text
from atscore.exceptions import UnreadableDocumentError

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"

MIME_BY_SUFFIX = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".txt": TEXT_MIME,
    ".md": TEXT_MIME,
}

DEFAULT_MAX_BYTES = 10 * 1024 * 1024

# Below this many characters pdfplumber output is treated as a miss
PDF_TEXT_MIN_LENGTH = 20


def guess_mime_type(filename: str) -> Optional[str]:
    """Map a filename suffix to a supported MIME type, or None."""
    return MIME_BY_SUFFIX.get(Path(filename).suffix.lower())


def _extract_pdf_pdfplumber(data: bytes) -> str:
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        return "\n".join(page.extract_text() or "" for page in pdf.pages)


def _extract_pdf_pypdf2(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _extract_pdf(data: bytes, filename: str) -> str:
    """Attempt pdfplumber, fall back to PyPDF2 when it fails or finds too little."""
    text = ""
    backend = "pdfplumber"

    try:
        text = _extract_pdf_pdfplumber(data)
    except Exception as exc:
        log_extraction_failure(filename, f"pdfplumber failed ({exc}), trying PyPDF2")

    if len(text.strip()) < PDF_TEXT_MIN_LENGTH:
        try:
            fallback = _extract_pdf_pypdf2(data)
        except Exception as exc:
            if not text.strip():
                raise UnreadableDocumentError(
                    f"PDF could not be parsed: {exc}", filename=filename, mime_type=PDF_MIME
                ) from exc
        else:
            if len(fallback.strip()) > len(text.strip()):
                text = fallback
                backend = "PyPDF2"

    log_extraction_result(filename, backend, len(text))
    return text


def _extract_docx(data: bytes, filename: str) -> str:
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:
        raise UnreadableDocumentError(
            f"DOCX could not be parsed: {exc}", filename=filename, mime_type=DOCX_MIME
        ) from exc

    paragraphs = [para.text for para in document.paragraphs]
    # Table cells hold text too (skills grids, contact blocks)
    for table in document.tables:
        for row in table.rows:
            paragraphs.append(" ".join(cell.text for cell in row.cells))

    text = "\n".join(paragraphs)
    log_extraction_result(filename, "python-docx", len(text))
    return text


def _extract_plain(data: bytes, filename: str) -> str:
    text = data.decode("utf-8", errors="ignore")
    log_extraction_result(filename, "utf-8", len(text))
    return text


EXTRACTORS: Dict[str, Callable[[bytes, str], str]] = {
    PDF_MIME: _extract_pdf,
    DOCX_MIME: _extract_docx,
    TEXT_MIME: _extract_plain,
}


def extract_text(
    data: bytes,
    mime_type: Optional[str] = None,
    filename: str = "resume",
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> str:
    """
    Extract normalized plain text from an uploaded document.

    Args:
        data: Raw file contents
        mime_type: Declared MIME type (guessed from filename when None)
        filename: Original filename, used for MIME guessing and messages
        max_bytes: Upload size cap

    Returns:
        Normalized text (never empty)

    Raises:
        UnreadableDocumentError: If the upload is empty, too large, of an
            unsupported type, corrupt, or has no text layer
    """
    mime_type = mime_type or guess_mime_type(filename)

    if not data:
        log_extraction_failure(filename, "empty upload")
        raise UnreadableDocumentError("Upload is empty", filename=filename, mime_type=mime_type)

    if len(data) > max_bytes:
        log_extraction_failure(filename, f"{len(data)} bytes exceeds cap of {max_bytes}")
        raise UnreadableDocumentError(
            f"Upload exceeds {max_bytes} bytes", filename=filename, mime_type=mime_type
        )

    extractor = EXTRACTORS.get(mime_type)
    if extractor is None:
        log_extraction_failure(filename, f"unsupported type {mime_type}")
        raise UnreadableDocumentError(
            "Unsupported file type", filename=filename, mime_type=mime_type
        )

    text = normalize_extracted_text(extractor(data, filename))

    if not text:
        log_extraction_failure(filename, "no text layer")
        raise UnreadableDocumentError(
            "No extractable text (scanned or image-only document?)",
            filename=filename,
            mime_type=mime_type,
        )

    return text
