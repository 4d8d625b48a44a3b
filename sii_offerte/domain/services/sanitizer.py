"""Text cleaning for SII XML output.

XML 1.0 only admits ``#x9 | #xA | #xD | [#x20-#xD7FF] | [#xE000-#xFFFD]``
(plus the astral planes, which the SII portal rejects). Everything outside
those ranges is dropped rather than replaced.
"""

from __future__ import annotations

_ALLOWED_CONTROL_CHARS = frozenset({0x09, 0x0A, 0x0D})

# Order matters: "&" first so the other entities are not double-escaped.
XML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def _is_valid_xml_char(char: str) -> bool:
    code = ord(char)
    return (
        code in _ALLOWED_CONTROL_CHARS
        or 0x20 <= code <= 0xD7FF
        or 0xE000 <= code <= 0xFFFD
    )


def remove_invalid_xml_chars(value: str) -> str:
    """Drop every character outside the XML 1.0 character ranges.

    Args:
        value: String to clean

    Returns:
        The string without invalid characters
    """
    return "".join(char for char in value if _is_valid_xml_char(char))


def escape_xml(value: str) -> str:
    for char, entity in XML_ENTITIES:
        value = value.replace(char, entity)
    return value


def sanitize_for_xml(value: str | None) -> str:
    """Make a string safe to embed as XML text content.

    Invalid characters are removed first, then the five reserved characters
    are replaced by their named entities.

    Args:
        value: String to sanitize, ``None`` is accepted

    Returns:
        Sanitized string, empty for ``None`` or empty input
    """
    if not value:
        return ""
    return escape_xml(remove_invalid_xml_chars(str(value)))


def is_round_trip_safe(value: str | None) -> bool:
    """Check that a string survives a strict UTF-8 encode/decode cycle.

    Python strings can only fail this when they carry lone surrogates.
    """
    if value is None:
        return True
    try:
        value.encode("utf-8", errors="strict").decode("utf-8", errors="strict")
    except (UnicodeEncodeError, UnicodeDecodeError, AttributeError):
        return False
    return True
