"""
Query normalization and text similarity scoring.

`score` grades how well a text field matches a query on a 0-100 scale.
Tiers are checked in order and the first hit wins:

    exact       100
    prefix       80
    substring    60
    fuzzy      0-50   best normalized Levenshtein similarity between a
                      word of the text and a term of the query, times 50

Everything is compared lower-cased.
"""
from typing import Optional

from .constants import (
    EXACT_MATCH_SCORE,
    PREFIX_MATCH_SCORE,
    SUBSTRING_MATCH_SCORE,
    FUZZY_MATCH_CEILING,
)


def normalize_query(raw: Optional[str]) -> str:
    """Lower-case and trim a raw query; a missing query normalizes to ``""``."""
    if raw is None:
        return ""
    return raw.lower().strip()


def levenshtein_distance(source: str, target: str) -> int:
    """Classic edit distance where insert, delete and substitute each cost 1."""
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]


def levenshtein_similarity(word: str, term: str) -> float:
    """``1 - distance / longest length``, 0.0 when both strings are empty."""
    longest = max(len(word), len(term))
    if longest == 0:
        return 0.0
    return 1.0 - levenshtein_distance(word, term) / longest


def fuzzy_score(text: str, query: str) -> float:
    """Best word/term similarity scaled into 0-50. Inputs must be lower-cased."""
    words = text.split()
    terms = query.split()
    if not words or not terms:
        return 0.0

    best = max(levenshtein_similarity(word, term) for word in words for term in terms)
    return best * FUZZY_MATCH_CEILING


def score(text: Optional[str], query: str) -> float:
    """Similarity between a text field and a query, in [0, 100]."""
    text = (text or "").lower()
    query = query.lower()

    if text == query:
        return EXACT_MATCH_SCORE
    if text.startswith(query):
        return PREFIX_MATCH_SCORE
    if query in text:
        return SUBSTRING_MATCH_SCORE
    return fuzzy_score(text, query)
