"""Filenames for SII offer transmissions.

The portal names files ``<PIVA>_<ACTION>[_<LABEL>].XML``. Labels keep ASCII
letters, digits, hyphens and underscores; any whitespace, Unicode included,
becomes a single underscore.
"""

from __future__ import annotations

import re

from ...constants import Constraints, Defaults, Patterns

_DISALLOWED_CHARS = re.compile(Patterns.FILENAME_LABEL_DISALLOWED)
_WHITESPACE_RUN = re.compile(r"\s+")
_UNDERSCORE_RUN = re.compile(r"_+")


def sanitize_filename_label(label: str | None) -> str:
    if not label or not label.strip():
        return ""
    cleaned = _DISALLOWED_CHARS.sub("", label.strip().upper())
    cleaned = _WHITESPACE_RUN.sub("_", cleaned)
    cleaned = _UNDERSCORE_RUN.sub("_", cleaned)
    return cleaned.strip("_")


def generate_xml_filename(
    identifier: str,
    label: str | None = None,
    *,
    action: str = Defaults.ACTION,
) -> str:
    """Build the SII transmission filename ``<PIVA>_<ACTION>[_<LABEL>].XML``.

    The identifier is only uppercased; the label is trimmed, uppercased and
    reduced to letters, digits and single underscores. A label that cleans
    down to nothing is left out.

    Args:
        identifier: PIVA of the transmitting user
        label: Optional free-text description
        action: Transmission action, INSERIMENTO unless updating an offer

    Returns:
        The filename

    Raises:
        ValueError: If the action is not a known transmission action
    """
    action = action.upper()
    if action not in Constraints.ACTIONS:
        raise ValueError(
            f"action must be one of {', '.join(Constraints.ACTIONS)}, got {action!r}"
        )
    base = f"{identifier.upper()}_{action}"
    suffix = sanitize_filename_label(label)
    if suffix:
        base = f"{base}_{suffix}"
    return f"{base}{Constraints.FILENAME_EXTENSION}"
