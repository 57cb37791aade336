from collections.abc import Mapping, Sequence


def check_keywords(text: str, keywords: Sequence[str]) -> dict[str, bool]:
    """
    Check recognized text against every keyword.

    Matching is a case-insensitive substring search: no tokenization,
    no fuzzy matching. Duplicate keywords collapse into one entry.

    Args:
        text: Recognized text (may be empty)
        keywords: Keywords to look for, in column order

    Returns:
        Mapping of keyword -> found, in keyword order
    """
    lower_text: str = text.lower()
    status: dict[str, bool] = {}

    for keyword in keywords:
        status[keyword] = keyword.lower() in lower_text

    return status


def count_matches(keyword_status: Mapping[str, bool]) -> int:
    """Count keywords marked as found."""
    return sum(1 for found in keyword_status.values() if found)
