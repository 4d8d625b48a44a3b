from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.offer import OfferDocument
    from ..domain.services.offer_validator import ValidationResult


@dataclass(slots=True)
class ExportOfferRequest:
    document: OfferDocument | Mapping[str, Any]
    label: str | None = None
    action: str = Defaults.ACTION
    validate: bool = Defaults.VALIDATE
    fail_on_validation_errors: bool = False


@dataclass(slots=True)
class ExportOfferResponse:
    success: bool
    filename: str | None = None
    xml: str | None = None
    path: Path | None = None
    validation: ValidationResult | None = None
    error: str | None = None
