from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.offer_validator import ValidationResult


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    piva_utente: str = ""
    cod_offerta: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "documents_built": 0,
        "documents_exported": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_build_start(self, piva_utente: str, cod_offerta: str) -> None:
        self.set_context(
            piva_utente=piva_utente.upper(),
            cod_offerta=cod_offerta.upper(),
            operation="build",
        )
        self._stats["documents_built"] += 1
        self.verbose(f"Building offer {cod_offerta.upper()} for {piva_utente.upper()}")

    @override
    def log_validation_result(self, result: ValidationResult) -> None:
        if result.is_valid and not result.issues:
            self.verbose("Offer XML passed validation")
            return
        for issue in result.issues:
            if issue.severity == "error":
                self.error(f"{issue.path}: {issue.message}")
            else:
                self.warning(f"{issue.path}: {issue.message}")

    @override
    def log_export_complete(self, filename: str, path: Path | None) -> None:
        self._stats["documents_exported"] += 1
        target = str(path) if path is not None else filename
        self.success(f"Exported {target}")
        if self._context is not None and self.verbosity >= LogLevel.DEBUG:
            self.debug(f"Export took {self._context.elapsed_ms():.1f} ms")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Export Statistics:[/dim]")
            self.console.print(
                f"[dim]  Documents built: {self._stats['documents_built']}[/dim]"
            )
            self.console.print(
                f"[dim]  Documents exported: {self._stats['documents_exported']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts = [p for p in (self._context.piva_utente, self._context.cod_offerta) if p]
        return f"[{':'.join(parts)}] " if parts else ""
