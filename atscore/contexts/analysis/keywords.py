"""
Frequency-ranked keyword extraction.

Derives a bounded keyword set from a job description (or resume body):
tokenize, count, keep tokens longer than two characters, rank by descending
frequency with ties kept in first-appearance order, truncate to the limit.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator, Optional

from atscore.contexts.analysis.tokenizer import DEFAULT_TOKENIZER, Tokenizer

DEFAULT_KEYWORD_LIMIT = 40
MIN_KEYWORD_LENGTH = 3


@dataclass(frozen=True)
class KeywordSet:
    """
    Ranked keywords with their source frequencies.

    Iteration yields keywords in rank order (most frequent first). Set
    semantics (membership, ``as_set``) ignore order.
    """

    keywords: tuple[str, ...] = ()
    frequencies: dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.keywords)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keywords)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.frequencies

    def __bool__(self) -> bool:
        return bool(self.keywords)

    def frequency(self, keyword: str) -> int:
        return self.frequencies.get(keyword, 0)

    def as_set(self) -> set[str]:
        return set(self.keywords)

    def top(self, n: int) -> list[str]:
        return list(self.keywords[: max(n, 0)])

    @classmethod
    def from_keywords(cls, keywords) -> "KeywordSet":
        """Build a set from an explicit keyword list (each with frequency 1)."""
        ordered = list(dict.fromkeys(k.lower() for k in keywords))
        return cls(keywords=tuple(ordered), frequencies={k: 1 for k in ordered})


def extract_keywords(
    text: str,
    limit: int = DEFAULT_KEYWORD_LIMIT,
    tokenizer: Optional[Tokenizer] = None,
) -> KeywordSet:
    """
    Extract the top ``limit`` keywords of text by frequency.

    Never raises: empty text or a non-positive limit yields an empty set
    (the top-level pipeline is responsible for rejecting bad limits).

    Args:
        text: Source text
        limit: Maximum number of keywords to keep
        tokenizer: Tokenizer to use (defaults to the standard one)

    Returns:
        KeywordSet ranked by non-increasing frequency
    """
    if not text or not isinstance(limit, int) or limit <= 0:
        return KeywordSet()

    tokenizer = tokenizer or DEFAULT_TOKENIZER
    tokens = [t for t in tokenizer.tokenize(text) if len(t) >= MIN_KEYWORD_LENGTH]

    # Counter preserves first-insertion order, and sorted() is stable,
    # so equal counts keep first-appearance order
    counts = Counter(tokens)
    ranked = sorted(counts.items(), key=lambda item: -item[1])[:limit]

    return KeywordSet(
        keywords=tuple(word for word, _ in ranked),
        frequencies={word: count for word, count in ranked},
    )
