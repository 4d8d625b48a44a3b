"""SII offer XML writer.

Renders the ordered element tree produced by
:func:`~sii_offerte.domain.services.offer_transformer.transform_offer` as the
text document the SII portal accepts. ``xml.etree`` is not used for output:
the portal wants every text node entity-escaped (quotes included) and no
self-closing tags, neither of which ``ElementTree.write`` can produce.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from ...domain.services.offer_transformer import transform_offer
from ...domain.services.sanitizer import sanitize_for_xml
from ..logging.null_logger import NullLogger
from .exceptions import OfferXMLError

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.ports.services import LoggerPort
    from ...domain.entities.offer import OfferDocument


@dataclass(frozen=True, slots=True)
class XMLFormat:
    version: str = "1.0"
    encoding: str = "UTF-8"
    indent: str = "    "
    newline: str = "\n"

    @property
    def declaration(self) -> str:
        return f'<?xml version="{self.version}" encoding="{self.encoding}"?>'


SII_FORMAT = XMLFormat()


def format_value(value: object) -> str:
    """Format a leaf value as escaped XML text.

    Numbers keep their natural decimal form: integral floats lose the
    trailing ``.0`` and no exponent notation is produced.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return sanitize_for_xml(str(value))


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def render_offer_xml(
    structure: Mapping[str, object], fmt: XMLFormat = SII_FORMAT
) -> str:
    """Render an ordered element tree, declaration included.

    Args:
        structure: Mapping with a single root element
        fmt: Output format

    Returns:
        The XML document as text, terminated by a newline
    """
    lines: list[str] = [fmt.declaration]
    for name, value in structure.items():
        _render_field(lines, name, value, 0, fmt)
    body = fmt.newline.join(lines) + fmt.newline
    return normalize_line_endings(body)


def _render_field(
    lines: list[str], name: str, value: object, depth: int, fmt: XMLFormat
) -> None:
    if isinstance(value, (list, tuple)):
        for item in value:
            _render_element(lines, name, item, depth, fmt)
    else:
        _render_element(lines, name, value, depth, fmt)


def _render_element(
    lines: list[str], name: str, value: object, depth: int, fmt: XMLFormat
) -> None:
    pad = fmt.indent * depth
    if isinstance(value, Mapping):
        if not value:
            lines.append(f"{pad}<{name}></{name}>")
            return
        lines.append(f"{pad}<{name}>")
        for child_name, child_value in value.items():
            _render_field(lines, str(child_name), child_value, depth + 1, fmt)
        lines.append(f"{pad}</{name}>")
    else:
        lines.append(f"{pad}<{name}>{format_value(value)}</{name}>")


def build_offer_xml(
    document: OfferDocument | Mapping[str, Any],
    *,
    fmt: XMLFormat = SII_FORMAT,
    logger: LoggerPort | None = None,
) -> str:
    """Build the SII XML document for an offer.

    Args:
        document: Offer document or the raw form mapping
        fmt: Output format
        logger: Optional logger for debug output

    Returns:
        The XML document as text

    Raises:
        OfferInputError: If a raw mapping does not match the document model
    """
    logger = logger or NullLogger()
    structure = transform_offer(document)
    xml_string = render_offer_xml(structure, fmt)
    logger.debug(f"Built offer XML ({len(xml_string.encode('utf-8')):,} bytes)")
    return xml_string


def write_offer_xml(
    document: OfferDocument | Mapping[str, Any],
    output: Path,
    *,
    fmt: XMLFormat = SII_FORMAT,
) -> Path:
    """Write the SII XML document for an offer to ``output`` as UTF-8."""
    xml_string = build_offer_xml(document, fmt=fmt)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(xml_string.encode("utf-8"))
    except OSError as exc:
        raise OfferXMLError(f"Failed to write offer XML: {exc}") from exc
    return output


class OfferXMLWriter:
    """Adapter for writing offer XML files.

    Example:
        >>> writer = OfferXMLWriter()
        >>> writer.write(document, Path("output/IT123_INSERIMENTO.XML"))
    """

    def __init__(self, fmt: XMLFormat = SII_FORMAT) -> None:
        super().__init__()
        self.fmt = fmt

    def build(self, document: OfferDocument | Mapping[str, Any]) -> str:
        return build_offer_xml(document, fmt=self.fmt)

    def write(
        self, document: OfferDocument | Mapping[str, Any], output_path: Path
    ) -> Path:
        return write_offer_xml(document, output_path, fmt=self.fmt)
