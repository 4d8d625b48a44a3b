"""Export of a finished offer XML to the user.

The export goes through a :class:`~sii_offerte.application.ports.SaveHostPort`:
the XML is wrapped in a blob, the host hands out a temporary URL for it, and
the blob is either saved under the requested filename or opened for the user.
The temporary URL is always revoked shortly afterwards on a background timer.

:func:`download_xml` never raises; every failure comes back as a
:class:`DownloadResult` with a user-facing (Italian) message.
"""

from __future__ import annotations

import shutil
import tempfile
import threading
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, override
from urllib.parse import unquote, urlparse

from ...application.ports.services import SaveHostPort
from ...constants import Defaults
from ..logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort

XML_MIME_TYPE = "application/xml;charset=utf-8"

EMPTY_CONTENT_MESSAGE = "Il contenuto XML è vuoto"
INVALID_FILENAME_MESSAGE = "Il nome del file non è valido"
UNSUPPORTED_HOST_MESSAGE = "L'ambiente non supporta il download di file"
UNEXPECTED_ERROR_MESSAGE = "Si è verificato un errore durante il download del file"

type Scheduler = Callable[[float, Callable[[], None]], None]


@dataclass(frozen=True, slots=True)
class XMLBlob:
    data: bytes
    content_type: str = XML_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class DownloadResult:
    success: bool
    error: str | None = None
    path: Path | None = None


def create_xml_blob(xml_string: str) -> XMLBlob:
    """Encode the XML as UTF-8 bytes, without byte-order mark."""
    return XMLBlob(xml_string.encode("utf-8"))


def schedule_with_timer(delay: float, callback: Callable[[], None]) -> None:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


class FileSystemSaveHost(SaveHostPort):
    """Save host backed by the local filesystem.

    Object URLs are ``file://`` URIs of temporary files. ``save_as`` copies
    the blob into ``output_dir``; without an output directory the host can
    only open the file with the default application.
    """

    def __init__(
        self,
        output_dir: Path | None = None,
        *,
        temp_dir: Path | None = None,
        opener: Callable[[str], object] | None = None,
    ) -> None:
        super().__init__()
        self.output_dir = output_dir
        self.temp_dir = temp_dir
        self._opener = opener or webbrowser.open_new_tab
        self._urls: dict[str, Path] = {}
        self._lock = threading.Lock()

    @override
    def supports_blobs(self) -> bool:
        return True

    @override
    def create_object_url(self, blob: XMLBlob) -> str:
        with tempfile.NamedTemporaryFile(
            mode="wb", suffix=".xml", dir=self.temp_dir, delete=False
        ) as handle:
            handle.write(blob.data)
            path = Path(handle.name)
        url = path.resolve().as_uri()
        with self._lock:
            self._urls[url] = path
        return url

    @override
    def revoke_object_url(self, url: str) -> None:
        with self._lock:
            path = self._urls.pop(url, None)
        if path is not None:
            path.unlink(missing_ok=True)

    @override
    def supports_named_download(self) -> bool:
        return self.output_dir is not None

    @override
    def save_as(self, url: str, filename: str) -> Path | None:
        if self.output_dir is None:
            raise RuntimeError("No output directory configured")
        source = self._resolve(url)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / Path(filename).name
        shutil.copyfile(source, target)
        return target

    @override
    def open_in_new_tab(self, url: str) -> None:
        self._opener(url)

    def active_urls(self) -> list[str]:
        with self._lock:
            return list(self._urls)

    def close(self) -> None:
        """Revoke every URL still outstanding, removing its temporary file."""
        for url in self.active_urls():
            self.revoke_object_url(url)

    def _resolve(self, url: str) -> Path:
        with self._lock:
            path = self._urls.get(url)
        if path is None:
            path = Path(unquote(urlparse(url).path))
        return path


def _trigger_save(
    host: SaveHostPort, url: str, filename: str, logger: LoggerPort
) -> Path | None:
    if host.supports_named_download():
        try:
            return host.save_as(url, filename)
        except Exception as exc:
            logger.verbose(f"Named download failed ({exc}), opening instead")
    host.open_in_new_tab(url)
    return None


def download_xml(
    xml_string: str | None,
    filename: str | None,
    host: SaveHostPort | None = None,
    *,
    cleanup_delay: float = Defaults.CLEANUP_DELAY,
    scheduler: Scheduler | None = None,
    logger: LoggerPort | None = None,
) -> DownloadResult:
    """Hand an XML document to the user under ``filename``.

    Args:
        xml_string: Serialized XML
        filename: Name to save the document under
        host: Save host, defaults to the current working directory
        cleanup_delay: Seconds before the temporary URL is revoked
        scheduler: Runs the deferred cleanup, defaults to a daemon timer
        logger: Optional logger

    Returns:
        DownloadResult with ``success`` and, on failure, a message
    """
    logger = logger or NullLogger()
    try:
        if not xml_string or not xml_string.strip():
            return DownloadResult(success=False, error=EMPTY_CONTENT_MESSAGE)
        if not filename or not filename.strip():
            return DownloadResult(success=False, error=INVALID_FILENAME_MESSAGE)

        if host is None:
            host = FileSystemSaveHost(Path.cwd())
        if not host.supports_blobs():
            return DownloadResult(success=False, error=UNSUPPORTED_HOST_MESSAGE)

        blob = create_xml_blob(xml_string)
        url = host.create_object_url(blob)
        logger.debug(f"Created object URL for {blob.size:,} bytes: {url}")

        try:
            saved_path = _trigger_save(host, url, filename, logger)
        finally:
            (scheduler or schedule_with_timer)(
                cleanup_delay, lambda: host.revoke_object_url(url)
            )
        return DownloadResult(success=True, path=saved_path)
    except Exception as exc:
        logger.error(f"Download of {filename!r} failed: {exc}")
        return DownloadResult(success=False, error=UNEXPECTED_ERROR_MESSAGE)


class XMLDownloader:
    """Adapter binding :func:`download_xml` to a host and cleanup policy."""

    def __init__(
        self,
        host: SaveHostPort | None = None,
        *,
        cleanup_delay: float = Defaults.CLEANUP_DELAY,
        scheduler: Scheduler | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.host = host
        self.cleanup_delay = cleanup_delay
        self.scheduler = scheduler
        self.logger = logger

    def download(self, xml_string: str, filename: str) -> DownloadResult:
        return download_xml(
            xml_string,
            filename,
            self.host,
            cleanup_delay=self.cleanup_delay,
            scheduler=self.scheduler,
            logger=self.logger,
        )
