import logging
import re

from .errors import UnparseableQuery
from .models import FilterSpec, InterpretedQuery

logger = logging.getLogger(__name__)

WORD_COUNT_PHRASES = {
    "single word": 1,
    "single-word": 1,
    "one word": 1,
    "two words": 2,
    "three words": 3,
}

PALINDROME_RE = re.compile(r"\bpalindrom(?:e|es|ic)\b")
WORD_COUNT_OF_RE = re.compile(r"word count of (\d+)")
LONGER_THAN_RE = re.compile(r"longer than (\d+)")
SHORTER_THAN_RE = re.compile(r"shorter than (\d+)")
AT_LEAST_RE = re.compile(r"\bat least (\d+)\b")
# the captured character must stand alone, so "containing the first vowel"
# does not yield "t"
CONTAINS_RE = re.compile(r"\bcontain(?:s|ing)? (?:the (?:letter|character) )?([a-z0-9])\b")


def interpret_query(query: str) -> InterpretedQuery:
    """
    Translate a free-text query into a FilterSpec.

    This is a handful of phrase heuristics, not language understanding.
    Raises UnparseableQuery when no phrase is recognised.
    """
    query_lower = query.lower()
    parsed_filters = {}

    # Rule 1: palindrome-related queries
    if PALINDROME_RE.search(query_lower):
        parsed_filters["is_palindrome"] = True

    # Rule 2: number of words
    for phrase, count in WORD_COUNT_PHRASES.items():
        if re.search(r"\b%s\b" % re.escape(phrase), query_lower):
            parsed_filters["word_count"] = count
            break
    else:
        match = WORD_COUNT_OF_RE.search(query_lower)
        if match:
            parsed_filters["word_count"] = int(match.group(1))

    # Rule 3: length bounds; "at least" wins over "longer than"
    match_longer = LONGER_THAN_RE.search(query_lower)
    if match_longer:
        parsed_filters["min_length"] = int(match_longer.group(1)) + 1
    match_at_least = AT_LEAST_RE.search(query_lower)
    if match_at_least:
        parsed_filters["min_length"] = int(match_at_least.group(1))
    match_shorter = SHORTER_THAN_RE.search(query_lower)
    if match_shorter:
        parsed_filters["max_length"] = int(match_shorter.group(1)) - 1

    # Rule 4: "first vowel" is read as the letter "a"
    if "first vowel" in query_lower:
        parsed_filters["contains_character"] = "a"

    # Rule 5: "containing the letter X"; an explicit letter wins
    match_contains = CONTAINS_RE.search(query_lower)
    if match_contains:
        parsed_filters["contains_character"] = match_contains.group(1)

    if not parsed_filters:
        logger.warning("Unable to parse natural language query: %r", query)
        raise UnparseableQuery(query)

    return InterpretedQuery(original=query, filters=FilterSpec(**parsed_filters))
