"""SII offer XML exporter.

This package turns the data of an Italian energy or gas commercial offer
into the XML document expected by the Sistema Informativo Integrato (SII).

Features:
- Ordered transformation of offer form data into the SII element tree
- Deterministic XML serialization with entity escaping
- Standard filenames derived from the seller's VAT number
- Export through a pluggable save host
- Optional structural validation of produced documents
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("sii-offerte")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from sii_offerte.domain.entities.offer import OfferDocument, load_offer_document
from sii_offerte.domain.services.filename import generate_xml_filename
from sii_offerte.domain.services.offer_transformer import transform_offer
from sii_offerte.domain.services.offer_validator import validate_offer_xml
from sii_offerte.domain.services.sanitizer import is_round_trip_safe, sanitize_for_xml
from sii_offerte.infrastructure.io.download import DownloadResult, download_xml
from sii_offerte.infrastructure.io.xml_writer import build_offer_xml

__all__ = [
    "__version__",
    # Building
    "OfferDocument",
    "build_offer_xml",
    "load_offer_document",
    "transform_offer",
    # Text safety
    "is_round_trip_safe",
    "sanitize_for_xml",
    # Export
    "DownloadResult",
    "download_xml",
    "generate_xml_filename",
    # Validation
    "validate_offer_xml",
]
