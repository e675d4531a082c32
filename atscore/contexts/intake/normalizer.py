"""
Extracted-text normalizer for the Intake context.

PDF and DOCX extraction leaves behind smart quotes, bullet glyphs, ligatures,
private-use bullet codepoints and ragged blank lines. Normalizing before
analysis keeps section detection and tokenization stable across extractors.
"""

import re
import unicodedata

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
    "\u00ad": "",  # soft hyphen
    # Quotes
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    # Dashes
    "\u2010": "-",
    "\u2012": "-",
    "\u2013": "-",
    "\u2014": "-",
    "\u2015": "-",
    "\u2212": "-",
    # Bullets (including Symbol-font private-use glyphs from Word exports)
    "\u2022": "-",
    "\u2023": "-",
    "\u25e6": "-",
    "\u2043": "-",
    "\u00b7": "-",
    "\uf0b7": "-",
    "\uf0a7": "-",
    "\uf0d8": "-",
    "\u2026": "...",
}

# Mojibake left by double-decoded UTF-8 dashes
MOJIBAKE_REPLACEMENTS = {
    "\u00e2\u20ac\u201c": "-",
    "\u00e2\u20ac\u201d": "-",
    "\u00e2\u20ac\u00a2": "-",
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that confuse downstream matching.

    NFKC folds ligatures (ﬁ → fi) and full-width forms; the explicit table
    handles quotes, dashes and bullets NFKC leaves alone.
    """
    for source, target in MOJIBAKE_REPLACEMENTS.items():
        text = text.replace(source, target)

    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        pattern = r"\n\s*\n(\s*\n)+"

    replacement = "\n" * (max_consecutive + 1)
    return re.sub(pattern, replacement, content)


def normalize_extracted_text(text: str) -> str:
    """
    Main entry point for cleaning extractor output.

    Handles:
    - Unicode normalization (quotes, dashes, bullets, ligatures)
    - CRLF / CR line endings
    - Trailing whitespace on lines
    - Runs of blank lines
    """
    if not text:
        return ""

    text = normalize_unicode(text)
    text = re.sub(r"\r\n?", "\n", text)
    text = re.sub(r"[ \t]+\n", "\n", text)
    text = set_max_consecutive_blank_lines(text, max_consecutive=1)
    return text.strip()
