"""Fuzzy matching of search queries against timer descriptions."""

from typing import NamedTuple


MATCH_SCORE = 1
WORD_START_BONUS = 5
CONSECUTIVE_BONUS = 5

WORD_SEPARATORS = (" ", "-")


class FuzzyMatch(NamedTuple):
    """Result of matching a query against a piece of text."""
    matches: bool
    score: int


def fuzzy_match(query: str, text: str) -> FuzzyMatch:
    """
    Match a query against text as a case-insensitive subsequence.

    Text is scanned once from left to right; each character equal to the next
    unconsumed query character consumes it. Every consumed character scores a
    point, with bonuses when it starts a word (index 0 or after a space or
    hyphen) and when the previous text character was consumed as well.

    The scan is greedy: the first eligible character always wins, so the score
    is not necessarily the best achievable alignment.

    Args:
        query: Text typed by the user
        text: Description to match against

    Returns:
        FuzzyMatch with ``matches`` True only if the whole query was consumed;
        ``score`` is 0 whenever there is no match
    """
    if not query:
        return FuzzyMatch(True, 0)

    query_lower = query.lower()
    text_lower = text.lower()

    query_index = 0
    score = 0
    last_match_index = -1

    for i, char in enumerate(text_lower):
        if query_index >= len(query_lower):
            break
        if char != query_lower[query_index]:
            continue

        score += MATCH_SCORE
        if i == 0 or text_lower[i - 1] in WORD_SEPARATORS:
            score += WORD_START_BONUS
        if i > 0 and last_match_index == i - 1:
            score += CONSECUTIVE_BONUS

        last_match_index = i
        query_index += 1

    if query_index == len(query_lower):
        return FuzzyMatch(True, score)
    return FuzzyMatch(False, 0)
