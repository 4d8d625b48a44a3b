from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import ExportOfferResponse


class ExportPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ExportOfferResponse) -> None:
        table = Table(title="Offer Export Summary", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Filename", response.filename or "-")
        table.add_row("Path", str(response.path) if response.path else "-")
        size = len(response.xml.encode("utf-8")) if response.xml else 0
        table.add_row("Size", f"{size:,} bytes")
        if response.validation is not None:
            table.add_row(
                "Validation",
                f"{len(response.validation.errors)} errors, "
                f"{len(response.validation.warnings)} warnings",
            )
        status = "[green]OK[/]" if response.success else "[red]FAILED[/]"
        table.add_row("Status", status)
        if response.error:
            table.add_row("Error", f"[red]{escape(response.error)}[/]")
        self.console.print()
        self.console.print(table)
