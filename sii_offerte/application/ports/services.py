from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.offer import OfferDocument
    from ...domain.services.offer_validator import ValidationResult
    from ...infrastructure.io.download import DownloadResult, XMLBlob


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_build_start(self, piva_utente: str, cod_offerta: str) -> None: ...

    def log_validation_result(self, result: ValidationResult) -> None: ...

    def log_export_complete(self, filename: str, path: Path | None) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class SaveHostPort(Protocol):
    """Environment that can hold a blob and hand it to the user."""

    def supports_blobs(self) -> bool: ...

    def create_object_url(self, blob: XMLBlob) -> str: ...

    def revoke_object_url(self, url: str) -> None: ...

    def supports_named_download(self) -> bool: ...

    def save_as(self, url: str, filename: str) -> Path | None: ...

    def open_in_new_tab(self, url: str) -> None: ...


@runtime_checkable
class OfferXMLBuilderPort(Protocol):
    pass

    def build(self, document: OfferDocument) -> str: ...


@runtime_checkable
class DownloaderPort(Protocol):
    pass

    def download(self, xml_string: str, filename: str) -> DownloadResult: ...
