"""
Standardized text tokenization.

Normalizes raw text into a clean token stream:
1. Lowercase
2. Replace anything outside [a-z0-9] and whitespace with a space
3. Split on whitespace runs, drop empty strings
4. Stopword removal
5. Min length filtering

Tokenization never raises on content: empty or whitespace-only input yields
an empty list.

Usage:
    from atscore.contexts.analysis.tokenizer import Tokenizer, tokenize

    tokens = tokenize("Built REST APIs in Python & Go")
    # ['built', 'rest', 'apis', 'python', 'go']

    tokenizer = Tokenizer(custom_stopwords={"resume"}, min_token_length=3)
    tokens = tokenizer.tokenize(text)
"""

import re
from typing import Optional

from atscore.contexts.analysis.vocabulary import STOP_WORDS

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


class Tokenizer:
    """
    Configurable tokenizer with a normalization pipeline.

    The tokenizer is callable so it can be passed anywhere a
    ``Callable[[str], list[str]]`` is expected.
    """

    def __init__(
        self,
        use_stopwords: bool = True,
        custom_stopwords: Optional[set[str]] = None,
        min_token_length: int = 1,
    ):
        """
        Initialize tokenizer.

        Args:
            use_stopwords: Whether to remove stopwords
            custom_stopwords: Extra stopwords added to the built-in set
            min_token_length: Minimum token length to keep
        """
        self.use_stopwords = use_stopwords
        self.min_token_length = min_token_length

        if use_stopwords:
            self._stopwords = STOP_WORDS | {w.lower() for w in (custom_stopwords or set())}
        else:
            self._stopwords = frozenset()

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize text with the full normalization pipeline.

        Returns:
            List of normalized tokens in source order
        """
        if not text:
            return []

        cleaned = _NON_ALNUM.sub(" ", text.lower())
        tokens = [t.strip() for t in cleaned.split()]

        return [
            t
            for t in tokens
            if t and len(t) >= self.min_token_length and t not in self._stopwords
        ]

    def token_set(self, text: str) -> set[str]:
        """Distinct tokens of text, for membership tests."""
        return set(self.tokenize(text))

    def __call__(self, text: str) -> list[str]:
        return self.tokenize(text)


DEFAULT_TOKENIZER = Tokenizer()


def tokenize(text: str) -> list[str]:
    """Tokenize with the default configuration."""
    return DEFAULT_TOKENIZER.tokenize(text)


def token_set(text: str) -> set[str]:
    """Distinct default tokens of text."""
    return DEFAULT_TOKENIZER.token_set(text)
