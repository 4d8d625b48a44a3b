"""Build command - Turn offer form data into an SII offer XML file.

This module is a thin adapter between Click and the application layer's
ExportOfferUseCase. It parses the CLI arguments, builds the request, runs
the use case and presents the response.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ExportOfferRequest
from ...config import ConfigLoader, ExporterConfig
from ...constants import Constraints
from ...domain.entities.offer import OfferInputError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import OfferExportError
from ...infrastructure.io.offer_reader import OfferJSONReader
from ...infrastructure.io.xml_writer import OfferXMLWriter
from ..presenters.export import ExportPresenter
from ..presenters.validation import ValidationPresenter

console = Console()


@dataclass(frozen=True)
class BuildCommandOptions:
    config_file: Path | None
    output_dir: Path | None
    label: str | None
    action: str | None
    validate: bool | None
    fail_on_validation_errors: bool
    to_stdout: bool
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> BuildCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            output_dir=cast("Path | None", options.get("output_dir")),
            label=cast("str | None", options.get("label")),
            action=cast("str | None", options.get("action")),
            validate=cast("bool | None", options.get("validate")),
            fail_on_validation_errors=cast(
                "bool", options["fail_on_validation_errors"]
            ),
            to_stdout=cast("bool", options["to_stdout"]),
            verbose=cast("int", options["verbose"]),
        )

    def resolve_config(self) -> ExporterConfig:
        config = ConfigLoader.load(config_file=self.config_file)
        return ExporterConfig(
            output_dir=self.output_dir or config.output_dir,
            cleanup_delay=config.cleanup_delay,
            validate=config.validate if self.validate is None else self.validate,
            action=self.action or config.action,
        )


@click.command()
@click.argument("offer_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a sii_offerte.toml config file (default: ./sii_offerte.toml)",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory the XML file is saved into (default: ./output)",
)
@click.option("--label", help="Free-text label appended to the filename")
@click.option(
    "--action",
    type=click.Choice(Constraints.ACTIONS, case_sensitive=False),
    help="Transmission action encoded in the filename (default: INSERIMENTO)",
)
@click.option(
    "--validate/--no-validate",
    "validate",
    default=None,
    help="Check the produced XML against the SII structural rules",
)
@click.option(
    "--fail-on-validation-errors",
    is_flag=True,
    help="Do not save the file when validation reports errors",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the XML instead of saving it",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def build_command(offer_file: Path, **options: object) -> None:
    """Build the SII XML document for an offer saved as JSON.

    The JSON file holds the offer form data grouped by section
    (basicInfo, offerDetails, activationContacts, pricingConfig, ...).

    Examples:

    \b
        # Build and save output/<PIVA>_INSERIMENTO.XML
        sii-offerte build offerta.json

    \b
        # Update an existing offer, with a label in the filename
        sii-offerte build offerta.json --action aggiornamento --label "Promo Estate"

    \b
        # Print the XML only
        sii-offerte build offerta.json --stdout
    """
    command_options = BuildCommandOptions.from_kwargs(dict(options))

    try:
        data = OfferJSONReader().read(offer_file)
    except OfferExportError as exc:
        raise click.ClickException(str(exc)) from exc

    if command_options.to_stdout:
        try:
            xml_string = OfferXMLWriter().build(data)
        except OfferInputError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(xml_string, nl=False)
        return

    try:
        config = command_options.resolve_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    request = ExportOfferRequest(
        document=data,
        label=command_options.label,
        action=config.action.upper(),
        validate=config.validate,
        fail_on_validation_errors=command_options.fail_on_validation_errors,
    )

    container = DependencyContainer(
        config=config, verbose=command_options.verbose, console=console
    )
    try:
        response = container.create_export_offer_use_case().execute(request)
    finally:
        container.close()

    if response.validation is not None and command_options.verbose:
        ValidationPresenter(console).present(response.validation, source=offer_file.name)
    ExportPresenter(console).present(response)
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(response.error or "Offer export failed")
