"""
utils/validation_utils.py

Purpose: Input helpers

- Email local-part extraction (default display names)
- Input sanitization for values echoed into HTML
"""

import html


def email_local_part(email: str) -> str:
    """
    Returns the part of an email before "@".

    Example:
        "ann.smith@x.com" -> "ann.smith"
    """
    return email.split("@")[0]


def sanitize_input(text: str, max_length: int = 200) -> str:
    """
    Sanitizes client-supplied text before it goes into an email body.

    - Strips whitespace
    - Truncates to max_length
    - Escapes HTML
    """
    if not text:
        return ""

    text = text.strip()

    if len(text) > max_length:
        text = text[:max_length]

    return html.escape(text)
