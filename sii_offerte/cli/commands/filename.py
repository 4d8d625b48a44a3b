from __future__ import annotations

import click

from ...constants import Constraints, Defaults
from ...domain.services.filename import generate_xml_filename


@click.command()
@click.argument("piva")
@click.option("--label", help="Free-text label appended to the filename")
@click.option(
    "--action",
    type=click.Choice(Constraints.ACTIONS, case_sensitive=False),
    default=Defaults.ACTION,
    show_default=True,
    help="Transmission action encoded in the filename",
)
def filename_command(piva: str, label: str | None, action: str) -> None:
    """Print the standard XML filename for a VAT number."""
    click.echo(generate_xml_filename(piva, label, action=action.upper()))
