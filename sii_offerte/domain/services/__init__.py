"""Pure domain services for building, naming and checking offer XML."""

from .filename import generate_xml_filename, sanitize_filename_label
from .offer_transformer import ElementBuilder, transform_offer
from .offer_validator import (
    ValidationIssue,
    ValidationResult,
    validate_business_rules,
    validate_offer_xml,
    validation_summary,
)
from .sanitizer import escape_xml, is_round_trip_safe, sanitize_for_xml

__all__ = [
    "ElementBuilder",
    "ValidationIssue",
    "ValidationResult",
    "escape_xml",
    "generate_xml_filename",
    "is_round_trip_safe",
    "sanitize_filename_label",
    "sanitize_for_xml",
    "transform_offer",
    "validate_business_rules",
    "validate_offer_xml",
    "validation_summary",
]
