"""
Text processing utilities for the LLM layer.

Cleans user input before it is embedded into a prompt and scrubs
credentials out of provider messages before they are surfaced.
"""

import re
import unicodedata


CONSECUTIVE_SPACES_PATTERN = re.compile(r" {3,}")
ZERO_WIDTH_PATTERN = re.compile(r"[\u200b-\u200d\ufeff]")
# \t (09), \n (0A) and \r (0D) are deliberately outside these ranges
CONTROL_CHARS_PATTERN = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _sanitize_once(text: str) -> str:
    text = text.strip()
    text = unicodedata.normalize("NFC", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = CONSECUTIVE_SPACES_PATTERN.sub(" ", text)
    text = ZERO_WIDTH_PATTERN.sub("", text)
    text = CONTROL_CHARS_PATTERN.sub("", text)
    return text


def sanitize_input(text: str) -> str:
    """
    Normalize raw user text before it is sent to a model.

    Steps, in order:
    1. Trim leading/trailing whitespace
    2. Unicode NFC normalization
    3. CRLF (and lone CR) to LF
    4. Collapse runs of 3+ spaces to one space (1-2 spaces are kept)
    5. Remove zero-width characters (U+200B-U+200D, U+FEFF)
    6. Remove control characters other than tab and newline

    Deleting characters in steps 5-6 can expose new edge whitespace, space
    runs or decomposed sequences, so the pass is repeated until the text
    stops changing. This makes the function idempotent.

    Args:
        text: Raw text from the user

    Returns:
        Sanitized text (possibly empty)

    Examples:
        >>> sanitize_input("  hello   world  ")
        'hello world'
        >>> sanitize_input("line1\\r\\nline2")
        'line1\\nline2'
    """
    result = _sanitize_once(text)
    while True:
        again = _sanitize_once(result)
        if again == result:
            return result
        result = again


def redact_secret(text: str, secret: str) -> str:
    """
    Replace every occurrence of `secret` in `text` with a placeholder.

    Providers sometimes echo the offending key back in error bodies.

    Args:
        text: Message that may contain the secret
        secret: Secret value (ignored when empty)

    Returns:
        Text safe to log or show to the user
    """
    if not secret:
        return text
    return text.replace(secret, "[REDACTED]")
