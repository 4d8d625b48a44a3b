"""Pre-flight validation of SII offer XML documents.

The checks mirror what the SII portal rejects (errors) or flags for review
(warnings):

- Presence: root element, mandatory sections and fields
- Format: PIVA, SII timestamps, market type, duration range
- Conditional requirements: fields that become mandatory for a given market,
  client or offer type
- Order: root children must follow the XSD sequence
- Business rules: validity window and consumption ranges

Validation is opt-in. Building a document never runs it, so an incomplete
offer can still be exported and inspected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Literal
from xml.etree import ElementTree as ET

from ...constants import (
    ActivationMethods,
    ClientTypes,
    Constraints,
    MarketTypes,
    OfferTypes,
    Patterns,
    Sections,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

type Severity = Literal["error", "warning"]

PIVA_PATTERN = re.compile(Patterns.PIVA)
SII_DATETIME_PATTERN = re.compile(Patterns.SII_DATETIME)
SII_DATETIME_FORMAT = "%d/%m/%Y_%H:%M:%S"

_DETTAGLIO_MANDATORY_FIELDS = (
    "TIPO_MERCATO",
    "TIPO_CLIENTE",
    "TIPO_OFFERTA",
    "NOME_OFFERTA",
    "DESCRIZIONE",
    "DURATA",
    "GARANZIE",
)
_SECTION_LABELS = {
    "IdentificativiOfferta": "IdentificativiOfferta",
    "DettaglioOfferta": "DettaglioOfferta",
    "DettaglioOfferta.ModalitaAttivazione": "Modalità Attivazione",
    "DettaglioOfferta.Contatti": "Contatti",
    "ValiditaOfferta": "Validità Offerta",
    "MetodoPagamento": "Metodo Pagamento",
}


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    path: str
    message: str
    severity: Severity = "error"

    def __str__(self) -> str:
        return f"[{self.severity}] {self.path}: {self.message}"


def _empty_issues() -> list[ValidationIssue]:
    return []


@dataclass(slots=True)
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=_empty_issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _children(parent: ET.Element | None, name: str) -> list[ET.Element]:
    if parent is None:
        return []
    return [child for child in parent if child.tag == name]


def _child(parent: ET.Element | None, name: str) -> ET.Element | None:
    found = _children(parent, name)
    return found[0] if found else None


def _text(parent: ET.Element | None, name: str) -> str | None:
    element = _child(parent, name)
    if element is None or element.text is None:
        return None
    text = element.text.strip()
    return text or None


def _parse_number(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_sii_datetime(value: str | None) -> datetime | None:
    """Parse a ``DD/MM/YYYY_HH:MM:SS`` timestamp, ``None`` when malformed."""
    if value is None or not SII_DATETIME_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, SII_DATETIME_FORMAT)
    except ValueError:
        return None


def _parse_document(
    xml_string: str, issues: list[ValidationIssue]
) -> ET.Element | None:
    try:
        root = ET.fromstring(xml_string.encode("utf-8"))
    except (ET.ParseError, UnicodeEncodeError) as exc:
        issues.append(ValidationIssue("/", f"Errore nel parsing XML: {exc}"))
        return None
    if root.tag != Sections.ROOT:
        issues.append(
            ValidationIssue("/", f'Elemento radice "{Sections.ROOT}" mancante')
        )
        return None
    return root


def validate_offer_xml(xml_string: str) -> ValidationResult:
    """Validate an offer XML string against the SII structural rules.

    Args:
        xml_string: The XML document

    Returns:
        ValidationResult listing every issue found
    """
    issues: list[ValidationIssue] = []
    offerta = _parse_document(xml_string, issues)
    if offerta is None:
        return ValidationResult(issues)

    _check_mandatory_sections(offerta, issues)
    _check_field_formats(offerta, issues)
    _check_conditional_requirements(offerta, issues)
    _check_element_order(offerta, issues)
    return ValidationResult(issues)


def validate_business_rules(xml_string: str) -> ValidationResult:
    """Structural validation plus date and price-interval consistency."""
    result = validate_offer_xml(xml_string)
    try:
        offerta = ET.fromstring(xml_string.encode("utf-8"))
    except (ET.ParseError, UnicodeEncodeError):
        return result
    if offerta.tag != Sections.ROOT:
        return result

    _check_validity_window(offerta, result.issues)
    _check_price_intervals(offerta, result.issues)
    return result


def _check_mandatory_sections(
    offerta: ET.Element, issues: list[ValidationIssue]
) -> None:
    for section in Sections.MANDATORY:
        if _child(offerta, section) is None:
            issues.append(
                ValidationIssue(
                    f"/Offerta/{section}",
                    f'Sezione obbligatoria "{_SECTION_LABELS[section]}" mancante',
                )
            )

    identificativi = _child(offerta, "IdentificativiOfferta")
    if identificativi is not None:
        for name in ("PIVA_UTENTE", "COD_OFFERTA"):
            if _text(identificativi, name) is None:
                issues.append(
                    ValidationIssue(
                        f"/Offerta/IdentificativiOfferta/{name}",
                        f'Campo obbligatorio "{name}" mancante',
                    )
                )

    dettaglio = _child(offerta, "DettaglioOfferta")
    if dettaglio is not None:
        for name in _DETTAGLIO_MANDATORY_FIELDS:
            if _text(dettaglio, name) is None:
                issues.append(
                    ValidationIssue(
                        f"/Offerta/DettaglioOfferta/{name}",
                        f'Campo obbligatorio "{name}" mancante',
                    )
                )
        if not _children(dettaglio, "TIPOLOGIA_ATT_CONTR"):
            issues.append(
                ValidationIssue(
                    "/Offerta/DettaglioOfferta/TIPOLOGIA_ATT_CONTR",
                    "È richiesto almeno un tipo di attivazione contratto",
                )
            )


def _check_field_formats(offerta: ET.Element, issues: list[ValidationIssue]) -> None:
    piva = _text(_child(offerta, "IdentificativiOfferta"), "PIVA_UTENTE")
    if piva is not None:
        path = "/Offerta/IdentificativiOfferta/PIVA_UTENTE"
        if len(piva) > Constraints.PIVA_MAX_LENGTH:
            issues.append(
                ValidationIssue(
                    path,
                    f"PIVA_UTENTE non può superare i {Constraints.PIVA_MAX_LENGTH} caratteri",
                )
            )
        if not PIVA_PATTERN.match(piva):
            issues.append(
                ValidationIssue(
                    path, "PIVA_UTENTE deve contenere solo lettere maiuscole e numeri"
                )
            )

    validita = _child(offerta, "ValiditaOfferta")
    for name in ("DATA_INIZIO", "DATA_FINE"):
        value = _text(validita, name)
        if value is not None and not SII_DATETIME_PATTERN.match(value):
            issues.append(
                ValidationIssue(
                    f"/Offerta/ValiditaOfferta/{name}",
                    f"{name} deve essere nel formato GG/MM/AAAA_HH:MM:SS",
                )
            )

    dettaglio = _child(offerta, "DettaglioOfferta")
    mercato = _text(dettaglio, "TIPO_MERCATO")
    if mercato is not None and mercato not in MarketTypes.ALL:
        issues.append(
            ValidationIssue(
                "/Offerta/DettaglioOfferta/TIPO_MERCATO",
                "TIPO_MERCATO deve essere 01 (Elettrico), 02 (Gas) o 03 (Dual Fuel)",
            )
        )

    durata_text = _text(dettaglio, "DURATA")
    if durata_text is not None:
        durata = _parse_number(durata_text)
        if durata is None or (
            durata != Constraints.DURATION_INDEFINITE
            and not Constraints.DURATION_MIN <= durata <= Constraints.DURATION_MAX
        ):
            issues.append(
                ValidationIssue(
                    "/Offerta/DettaglioOfferta/DURATA",
                    "DURATA deve essere -1 (indeterminata) o un valore tra 1 e 99",
                )
            )


def _check_conditional_requirements(
    offerta: ET.Element, issues: list[ValidationIssue]
) -> None:
    dettaglio = _child(offerta, "DettaglioOfferta")
    mercato = _text(dettaglio, "TIPO_MERCATO")
    cliente = _text(dettaglio, "TIPO_CLIENTE")
    tipo_offerta = _text(dettaglio, "TIPO_OFFERTA")

    if dettaglio is not None:
        if (
            mercato is not None
            and mercato != MarketTypes.DUAL_FUEL
            and _text(dettaglio, "OFFERTA_SINGOLA") is None
        ):
            issues.append(
                ValidationIssue(
                    "/Offerta/DettaglioOfferta/OFFERTA_SINGOLA",
                    "OFFERTA_SINGOLA è obbligatorio per mercati Elettrico e Gas",
                )
            )
        if (
            cliente == ClientTypes.DOMESTIC
            and mercato == MarketTypes.ELECTRICITY
            and _text(dettaglio, "DOMESTICO_RESIDENTE") is None
        ):
            issues.append(
                ValidationIssue(
                    "/Offerta/DettaglioOfferta/DOMESTICO_RESIDENTE",
                    "DOMESTICO_RESIDENTE è obbligatorio per clienti domestici "
                    "nel mercato elettrico",
                    "warning",
                )
            )
        if mercato == MarketTypes.ELECTRICITY:
            if (
                _child(offerta, "TipoPrezzo") is None
                and tipo_offerta != OfferTypes.FLAT
            ):
                issues.append(
                    ValidationIssue(
                        "/Offerta/TipoPrezzo",
                        "TipoPrezzo è obbligatorio per offerte elettriche non FLAT",
                        "warning",
                    )
                )
            if _child(offerta, "Dispacciamento") is None:
                issues.append(
                    ValidationIssue(
                        "/Offerta/Dispacciamento",
                        "Dispacciamento è obbligatorio per offerte elettriche",
                        "warning",
                    )
                )

        if tipo_offerta == OfferTypes.FLAT:
            caratteristiche = _child(offerta, "CaratteristicheOfferta")
            for name in ("CONSUMO_MIN", "CONSUMO_MAX"):
                if _text(caratteristiche, name) is None:
                    issues.append(
                        ValidationIssue(
                            f"/Offerta/CaratteristicheOfferta/{name}",
                            f"{name} è obbligatorio per offerte FLAT",
                        )
                    )
        if (
            tipo_offerta == OfferTypes.VARIABLE
            and _child(offerta, "RiferimentiPrezzoEnergia") is None
        ):
            issues.append(
                ValidationIssue(
                    "/Offerta/RiferimentiPrezzoEnergia",
                    "RiferimentiPrezzoEnergia è obbligatorio per offerte variabili",
                    "warning",
                )
            )

    modalita = _child(offerta, "DettaglioOfferta.ModalitaAttivazione")
    codes = {(c.text or "").strip() for c in _children(modalita, "MODALITA")}
    if ActivationMethods.OTHER in codes and _text(modalita, "DESCRIZIONE") is None:
        issues.append(
            ValidationIssue(
                "/Offerta/DettaglioOfferta.ModalitaAttivazione/DESCRIZIONE",
                'DESCRIZIONE è obbligatoria quando MODALITA include "Altro" (99)',
            )
        )

    if mercato == MarketTypes.DUAL_FUEL:
        dual = _child(offerta, "OffertaDUAL")
        for name in ("OFFERTE_CONGIUNTE_EE", "OFFERTE_CONGIUNTE_GAS"):
            if not _children(dual, name):
                issues.append(
                    ValidationIssue(
                        f"/Offerta/OffertaDUAL/{name}",
                        f"{name} è obbligatorio per offerte Dual Fuel",
                    )
                )


def _check_element_order(offerta: ET.Element, issues: list[ValidationIssue]) -> None:
    last_index = -1
    for child in offerta:
        if child.tag not in Sections.ORDER:
            continue
        index = Sections.ORDER.index(child.tag)
        if index < last_index:
            issues.append(
                ValidationIssue(
                    f"/Offerta/{child.tag}",
                    f'Elemento "{child.tag}" non è nell\'ordine corretto '
                    "secondo lo schema XSD",
                    "warning",
                )
            )
        last_index = max(last_index, index)


def _check_validity_window(
    offerta: ET.Element, issues: list[ValidationIssue]
) -> None:
    validita = _child(offerta, "ValiditaOfferta")
    start = parse_sii_datetime(_text(validita, "DATA_INIZIO"))
    end = parse_sii_datetime(_text(validita, "DATA_FINE"))
    if start is not None and end is not None and start >= end:
        issues.append(
            ValidationIssue(
                "/Offerta/ValiditaOfferta",
                "DATA_FINE deve essere successiva a DATA_INIZIO",
            )
        )


def _check_price_intervals(
    offerta: ET.Element, issues: list[ValidationIssue]
) -> None:
    for comp_index, component in enumerate(_children(offerta, "ComponenteImpresa")):
        intervals = _children(component, "IntervalloPrezzi")
        for int_index, interval in enumerate(intervals):
            consumo_da = _parse_number(_text(interval, "CONSUMO_DA"))
            consumo_a = _parse_number(_text(interval, "CONSUMO_A"))
            if (
                consumo_da is not None
                and consumo_a is not None
                and consumo_da >= consumo_a
            ):
                issues.append(
                    ValidationIssue(
                        f"/Offerta/ComponenteImpresa[{comp_index}]"
                        f"/IntervalloPrezzi[{int_index}]",
                        "CONSUMO_DA deve essere minore di CONSUMO_A",
                    )
                )


def validation_summary(issues: Iterable[ValidationIssue]) -> str:
    issues = list(issues)
    error_count = sum(1 for i in issues if i.severity == "error")
    warning_count = sum(1 for i in issues if i.severity == "warning")
    if error_count == 0 and warning_count == 0:
        return "XML valido secondo le specifiche SII"

    parts: list[str] = []
    if error_count:
        parts.append(f"{error_count} {'errore' if error_count == 1 else 'errori'}")
    if warning_count:
        parts.append(
            f"{warning_count} {'avviso' if warning_count == 1 else 'avvisi'}"
        )
    return f"Trovati {' e '.join(parts)}"
