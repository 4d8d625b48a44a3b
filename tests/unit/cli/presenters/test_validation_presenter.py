"""Unit tests for ValidationPresenter and ExportPresenter."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from sii_offerte.application.models import ExportOfferResponse
from sii_offerte.cli.presenters import ExportPresenter, ValidationPresenter
from sii_offerte.domain.services.offer_validator import (
    ValidationIssue,
    ValidationResult,
)


@pytest.fixture
def console():
    """Create a console with StringIO for capturing output."""
    return Console(file=StringIO(), width=160)


def _output(console):
    return console.file.getvalue()


class TestValidationPresenter:
    """Test suite for ValidationPresenter class."""

    def test_presenter_initialization(self, console):
        presenter = ValidationPresenter(console)
        assert presenter.console == console

    def test_valid_result(self, console):
        ValidationPresenter(console).present(ValidationResult())

        output = _output(console)
        assert "XML valido secondo le specifiche SII" in output
        assert "Validation Issues" not in output

    def test_issue_table(self, console):
        result = ValidationResult(
            [
                ValidationIssue("/Offerta/ValiditaOfferta", "DATA_FINE errata"),
                ValidationIssue("/Offerta/TipoPrezzo", "mancante", "warning"),
            ]
        )

        ValidationPresenter(console).present(result, source="offer.xml")

        output = _output(console)
        assert "Validation Issues: offer.xml" in output
        assert "ERROR" in output
        assert "WARNING" in output
        assert "DATA_FINE errata" in output
        assert "Trovati 1 errore e 1 avviso" in output


class TestExportPresenter:
    """Test suite for ExportPresenter class."""

    def test_success(self, console):
        response = ExportOfferResponse(
            success=True,
            filename="IT1_INSERIMENTO.XML",
            xml="<Offerta></Offerta>\n",
            path=Path("out/IT1_INSERIMENTO.XML"),
            validation=ValidationResult(),
        )

        ExportPresenter(console).present(response)

        output = _output(console)
        assert "Offer Export Summary" in output
        assert "IT1_INSERIMENTO.XML" in output
        assert "20 bytes" in output
        assert "0 errors, 0 warnings" in output
        assert "OK" in output

    def test_failure(self, console):
        response = ExportOfferResponse(success=False, error="Invalid [type=missing]")

        ExportPresenter(console).present(response)

        output = _output(console)
        assert "FAILED" in output
        assert "Invalid [type=missing]" in output
