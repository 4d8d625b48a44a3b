"""Unit tests for ExportOfferUseCase.

The use case is exercised with in-memory fakes for every port, so no files
are written and no browser is opened.
"""

from pathlib import Path

import pytest

from sii_offerte.application.export_offer_use_case import (
    ExportOfferDependencies,
    ExportOfferUseCase,
)
from sii_offerte.application.models import ExportOfferRequest
from sii_offerte.infrastructure.io.download import DownloadResult
from sii_offerte.infrastructure.io.xml_writer import OfferXMLWriter


class RecordingLogger:
    """Logger fake keeping every call for assertions."""

    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def log_build_start(self, piva_utente: str, cod_offerta: str) -> None:
        self.messages.append(("build_start", (piva_utente, cod_offerta)))

    def log_validation_result(self, result) -> None:
        self.messages.append(("validation", result))

    def log_export_complete(self, filename: str, path: Path | None) -> None:
        self.messages.append(("export_complete", (filename, path)))

    def log_final_stats(self) -> None:
        self.messages.append(("final_stats", None))

    def kinds(self):
        return [kind for kind, _ in self.messages]


class FakeDownloader:
    """Downloader fake returning a fixed result."""

    def __init__(self, result: DownloadResult | None = None):
        self.result = result or DownloadResult(success=True, path=Path("/out/x.XML"))
        self.calls = []

    def download(self, xml_string: str, filename: str) -> DownloadResult:
        self.calls.append((xml_string, filename))
        return self.result


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def downloader():
    return FakeDownloader()


@pytest.fixture
def use_case(logger, downloader):
    return ExportOfferUseCase(
        ExportOfferDependencies(
            logger=logger, xml_builder=OfferXMLWriter(), downloader=downloader
        )
    )


class TestExportOfferUseCase:
    """Tests for the export workflow."""

    def test_successful_export(self, use_case, downloader, logger, complete_form_data):
        response = use_case.execute(ExportOfferRequest(document=complete_form_data))

        assert response.success
        assert response.error is None
        assert response.filename == "IT12345678901_INSERIMENTO.XML"
        assert response.path == Path("/out/x.XML")
        assert response.validation is not None and response.validation.is_valid
        assert downloader.calls == [(response.xml, response.filename)]
        assert logger.kinds() == ["build_start", "validation", "export_complete"]

    def test_label_and_action_reach_filename(self, use_case, complete_form_data):
        response = use_case.execute(
            ExportOfferRequest(
                document=complete_form_data, label="Promo Estate", action="AGGIORNAMENTO"
            )
        )

        assert response.filename == "IT12345678901_AGGIORNAMENTO_PROMO_ESTATE.XML"

    def test_validation_can_be_skipped(self, use_case, logger, minimal_form_data):
        response = use_case.execute(
            ExportOfferRequest(document=minimal_form_data, validate=False)
        )

        assert response.success
        assert response.validation is None
        assert "validation" not in logger.kinds()

    def test_validation_errors_do_not_block_by_default(
        self, use_case, minimal_form_data
    ):
        response = use_case.execute(ExportOfferRequest(document=minimal_form_data))

        assert response.success
        assert not response.validation.is_valid

    def test_validation_errors_block_when_requested(
        self, use_case, downloader, minimal_form_data
    ):
        response = use_case.execute(
            ExportOfferRequest(
                document=minimal_form_data, fail_on_validation_errors=True
            )
        )

        assert not response.success
        assert response.error == "Trovati 1 errore e 1 avviso"
        assert response.xml is not None
        assert downloader.calls == []

    def test_invalid_document(self, use_case, logger, downloader):
        response = use_case.execute(ExportOfferRequest(document={"basicInfo": {}}))

        assert not response.success
        assert "Invalid offer document" in response.error
        assert logger.kinds() == ["error"]
        assert downloader.calls == []

    def test_unknown_action(self, use_case, downloader, minimal_form_data):
        response = use_case.execute(
            ExportOfferRequest(document=minimal_form_data, action="ANNULLA")
        )

        assert not response.success
        assert "action must be one of" in response.error
        assert downloader.calls == []

    def test_download_failure(self, logger, minimal_form_data):
        downloader = FakeDownloader(
            DownloadResult(
                success=False, error="L'ambiente non supporta il download di file"
            )
        )
        use_case = ExportOfferUseCase(
            ExportOfferDependencies(
                logger=logger, xml_builder=OfferXMLWriter(), downloader=downloader
            )
        )

        response = use_case.execute(ExportOfferRequest(document=minimal_form_data))

        assert not response.success
        assert response.filename == "IT98765432101_INSERIMENTO.XML"
        assert response.error == "L'ambiente non supporta il download di file"
        assert ("error", "L'ambiente non supporta il download di file") in logger.messages
