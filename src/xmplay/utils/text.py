"""Text processing utilities."""

import re


def matches_filter(text: str, needle: str | None) -> bool:
    """Case-insensitive substring test; an empty or missing filter matches everything."""
    if not needle:
        return True
    return needle.casefold() in text.casefold()


def sanitize_filename(text: str) -> str:
    """
    Sanitize text for use as a filename.

    Args:
        text: Text to sanitize

    Returns:
        Safe filename string
    """
    # Remove/replace problematic characters
    text = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "", text)
    # Collapse whitespace
    text = re.sub(r"\s+", " ", text)
    # yt-dlp output templates treat % specially
    text = text.replace("%", "%%")
    return text.strip(" .")


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to a maximum length with suffix."""
    if len(text) <= max_length:
        return text

    return text[: max_length - len(suffix)] + suffix
