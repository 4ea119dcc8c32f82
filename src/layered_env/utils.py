"""Utility functions for layered-env."""

from collections.abc import Mapping

QUOTE_CHARS = ('"', "'")


def merge_overwriting(base: Mapping[str, str], overlay: Mapping[str, str]) -> dict[str, str]:
    """Merge two flat mappings with overlay precedence.

    Values are flat strings, so there is no recursion: on a key collision the
    overlay value replaces the base value (last writer wins).

    Args:
        base: Base mapping
        overlay: Overlay mapping (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> merge_overwriting({"A": "1", "B": "2"}, {"B": "20", "C": "3"})
        {'A': '1', 'B': '20', 'C': '3'}

        >>> merge_overwriting({}, {"A": "1"})
        {'A': '1'}
    """
    result = dict(base)
    result.update(overlay)
    return result


def unquote(raw: str) -> str:
    """Trim whitespace and strip one layer of matching quotes.

    Only a single pair of matching ``"`` or ``'`` around the whole trimmed
    string is removed. The inner content is kept verbatim (no unescaping).

    Examples:
        >>> unquote('  "a value"  ')
        'a value'

        >>> unquote("'it''s'")
        "it''s"

        >>> unquote('"mismatched\\'')
        '"mismatched\\''
    """
    text = raw.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in QUOTE_CHARS:
        return text[1:-1]
    return text
