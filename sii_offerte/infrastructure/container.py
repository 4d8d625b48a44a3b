from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.export_offer_use_case import (
    ExportOfferDependencies,
    ExportOfferUseCase,
)
from ..config import ExporterConfig
from .io.download import FileSystemSaveHost, XMLDownloader
from .io.xml_writer import OfferXMLWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import (
        DownloaderPort,
        LoggerPort,
        OfferXMLBuilderPort,
        SaveHostPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        config: ExporterConfig | None = None,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or ExporterConfig()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._xml_writer_instance: OfferXMLWriter | None = None
        self._save_host_instance: SaveHostPort | None = None
        self._downloader_instance: DownloaderPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_xml_writer(self) -> OfferXMLBuilderPort:
        if self._xml_writer_instance is None:
            self._xml_writer_instance = OfferXMLWriter()
        return self._xml_writer_instance

    def create_save_host(self) -> SaveHostPort:
        if self._save_host_instance is None:
            self._save_host_instance = FileSystemSaveHost(self.config.output_dir)
        return self._save_host_instance

    def create_downloader(self) -> DownloaderPort:
        if self._downloader_instance is None:
            self._downloader_instance = XMLDownloader(
                self.create_save_host(),
                cleanup_delay=self.config.cleanup_delay,
                logger=self.create_logger(),
            )
        return self._downloader_instance

    def create_export_offer_use_case(self) -> ExportOfferUseCase:
        dependencies = ExportOfferDependencies(
            logger=self.create_logger(),
            xml_builder=self.create_xml_writer(),
            downloader=self.create_downloader(),
        )
        return ExportOfferUseCase(dependencies)

    def close(self) -> None:
        """Release host resources created by this container."""
        if isinstance(self._save_host_instance, FileSystemSaveHost):
            self._save_host_instance.close()
        self._save_host_instance = None
        self._downloader_instance = None


def create_default_container(
    config: ExporterConfig | None = None, verbose: int = 0
) -> DependencyContainer:
    return DependencyContainer(config=config, verbose=verbose)
