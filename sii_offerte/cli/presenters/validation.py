from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.services.offer_validator import validation_summary

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.services.offer_validator import ValidationResult

_SEVERITY_STYLES = {"error": "red", "warning": "yellow"}


class ValidationPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, result: ValidationResult, *, source: str | None = None) -> None:
        self.console.print()
        if result.issues:
            self.console.print(self._build_issue_table(result, source))
            self.console.print()
        style = "green" if result.is_valid else "red"
        self.console.print(f"[bold {style}]{validation_summary(result.issues)}[/]")

    def _build_issue_table(
        self, result: ValidationResult, source: str | None
    ) -> Table:
        title = "Validation Issues" if source is None else f"Validation Issues: {source}"
        table = Table(title=title, show_lines=False)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Path", style="cyan")
        table.add_column("Message")
        for issue in result.issues:
            style = _SEVERITY_STYLES.get(issue.severity, "white")
            table.add_row(
                f"[{style}]{issue.severity.upper()}[/]", issue.path, escape(issue.message)
            )
        return table
