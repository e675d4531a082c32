"""Unit tests for the tokenizer."""

import pytest

from atscore.contexts.analysis.tokenizer import Tokenizer, token_set, tokenize
from atscore.contexts.analysis.vocabulary import STOP_WORDS


@pytest.mark.unit
def test_tokenize_lowercases_and_strips_punctuation():
    """Test that punctuation becomes whitespace and case is folded."""
    assert tokenize("Built REST APIs, in Python & Go!") == ["built", "rest", "apis", "python", "go"]


@pytest.mark.unit
def test_tokenize_drops_stop_words():
    """Test that function words are removed."""
    assert tokenize("The quick fox and the lazy dog") == ["quick", "fox", "lazy", "dog"]


@pytest.mark.unit
def test_tokenize_splits_symbols_inside_words():
    """Test that symbols inside words split them (C++, Node.js)."""
    assert tokenize("C++ and Node.js") == ["c", "node", "js"]


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "   ", "\n\t  \n", None])
def test_tokenize_empty_input(text):
    """Test that empty or whitespace-only input yields an empty list."""
    assert tokenize(text) == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "The the THE a an",
        "Managed a team of 12 engineers -- and it was great!!!",
        "... --- ;;; ,,,",
        "Résumé naïve café",
        "It is what it is, and that's that.",
    ],
)
def test_tokenize_never_yields_stop_words_or_empty_tokens(text):
    """Test the token invariants across awkward inputs."""
    tokens = tokenize(text)

    assert all(tokens)
    assert not any(t in STOP_WORDS for t in tokens)
    assert all(t == t.lower() for t in tokens)


@pytest.mark.unit
def test_tokenize_is_deterministic():
    """Test that repeated calls return equal, independent lists."""
    first = tokenize("Python developer with SQL")
    second = tokenize("Python developer with SQL")

    assert first == second
    assert first is not second


@pytest.mark.unit
def test_custom_stopwords_and_min_length():
    """Test tokenizer configuration options."""
    tokenizer = Tokenizer(custom_stopwords={"Resume"}, min_token_length=3)

    assert tokenizer("My resume: Go, SQL, Python") == ["sql", "python"]


@pytest.mark.unit
def test_stopwords_can_be_disabled():
    """Test that use_stopwords=False keeps function words."""
    tokenizer = Tokenizer(use_stopwords=False)

    assert tokenizer.tokenize("the team") == ["the", "team"]


@pytest.mark.unit
def test_token_set_is_distinct():
    """Test that token_set collapses repeats."""
    assert token_set("react React REACT node") == {"react", "node"}
