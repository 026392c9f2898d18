"""
Text Locator

Finds literal, case-insensitive occurrences of configured terms and reports
where they are, with a clipped window of surrounding context. Every detector
builds its findings from these two functions.

Overlap policy: occurrences of the SAME term never overlap (the scan resumes
after each match), but distinct terms are searched independently, so "free"
and "free trial" may both report the same region.
"""

from __future__ import annotations

import re
from dataclasses import replace
from functools import lru_cache
from typing import Iterable, Sequence

from uxdetective.types import TextLocation

DEFAULT_CONTEXT_LENGTH = 50


@lru_cache(maxsize=1024)
def _term_regex(term: str) -> re.Pattern:
    return re.compile(re.escape(term), re.IGNORECASE)


def _location(
    text: str, term: str, start: int, end: int, context_length: int,
) -> TextLocation:
    context_start = max(0, start - context_length)
    context_end = min(len(text), end + context_length)
    return TextLocation(
        term=term,
        start_index=start,
        end_index=end,
        context=text[context_start:context_end],
        exact_match=text[start:end],
        context_start=context_start,
        context_end=context_end,
    )


def find_text_locations(
    text: str,
    terms: Iterable[str],
    context_length: int = DEFAULT_CONTEXT_LENGTH,
) -> list[TextLocation]:
    """
    Find every non-overlapping occurrence of each term in ``text``.

    Results are grouped by term (in the order given), then by position.
    Empty terms are ignored; empty text yields no locations.
    """
    if not text:
        return []

    locations: list[TextLocation] = []
    for term in terms:
        if not term:
            continue
        for match in _term_regex(term).finditer(text):
            locations.append(
                _location(text, term, match.start(), match.end(), context_length)
            )
    return locations


def find_array_item_locations(
    items: Sequence[str],
    terms: Iterable[str],
    context_length: int = DEFAULT_CONTEXT_LENGTH,
) -> list[TextLocation]:
    """
    Emit one location per (item, term) pair where the item contains the term.

    This is containment, not word matching: "Cancellation" contains "cancel".
    Offsets and context refer to the first occurrence inside the item.
    """
    terms = [t for t in terms if t]
    locations: list[TextLocation] = []
    for index, item in enumerate(items):
        for term in terms:
            match = _term_regex(term).search(item)
            if match is None:
                continue
            loc = _location(item, term, match.start(), match.end(), context_length)
            locations.append(replace(loc, array_index=index, array_item=item))
    return locations
