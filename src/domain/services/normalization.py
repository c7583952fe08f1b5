"""Domain normalization helpers."""

from src.domain.constants import DEFAULT_SPEND_CATEGORY


def normalize_category(category: str | None) -> str:
    """Normalize a spend category label.

    Labels outside the known category set are kept verbatim; only
    surrounding whitespace is removed.

    Args:
        category: Raw category value from a record or a parser.

    Returns:
        str: Cleaned label, or ``General`` when it is missing or blank.
    """
    if not category:
        return DEFAULT_SPEND_CATEGORY
    cleaned = str(category).strip()
    return cleaned or DEFAULT_SPEND_CATEGORY


__all__ = ["normalize_category"]
