"""Validate command - Check an existing SII offer XML file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...domain.services.offer_validator import (
    validate_business_rules,
    validate_offer_xml,
)
from ..presenters.validation import ValidationPresenter

console = Console()


@click.command()
@click.argument("xml_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--business-rules/--no-business-rules",
    "business_rules",
    default=True,
    show_default=True,
    help="Also check validity dates and consumption ranges",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as failures",
)
def validate_command(xml_file: Path, business_rules: bool, strict: bool) -> None:
    """Validate an SII offer XML file.

    Checks mandatory sections, field formats, conditional requirements and
    the order of the top-level sections.

    Examples:

    \b
        sii-offerte validate output/01234567890_INSERIMENTO.XML

    \b
        # Fail on warnings too
        sii-offerte validate offerta.xml --strict
    """
    try:
        xml_string = xml_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Failed to read {xml_file}: {exc}") from exc

    validator = validate_business_rules if business_rules else validate_offer_xml
    result = validator(xml_string)
    ValidationPresenter(console).present(result, source=xml_file.name)

    if not result.is_valid or (strict and result.warnings):
        raise click.ClickException("Validation failed")
