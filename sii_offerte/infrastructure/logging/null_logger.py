from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.offer_validator import ValidationResult


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_build_start(self, piva_utente: str, cod_offerta: str) -> None:
        return None

    @override
    def log_validation_result(self, result: ValidationResult) -> None:
        return None

    @override
    def log_export_complete(self, filename: str, path: Path | None) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
