"""Export of one offer: build, validate, name and hand over the XML.

The use case depends only on ports; the concrete XML writer, downloader and
logger are injected by the infrastructure container.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.entities.offer import OfferInputError, load_offer_document
from ..domain.services.filename import generate_xml_filename
from ..domain.services.offer_validator import (
    validate_business_rules,
    validation_summary,
)
from .models import ExportOfferResponse

if TYPE_CHECKING:
    from .models import ExportOfferRequest
    from .ports.services import DownloaderPort, LoggerPort, OfferXMLBuilderPort


@dataclass(slots=True)
class ExportOfferDependencies:
    logger: LoggerPort
    xml_builder: OfferXMLBuilderPort
    downloader: DownloaderPort


class ExportOfferUseCase:
    pass

    def __init__(self, dependencies: ExportOfferDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self.xml_builder = dependencies.xml_builder
        self.downloader = dependencies.downloader

    def execute(self, request: ExportOfferRequest) -> ExportOfferResponse:
        """Run the export and report the outcome; never raises for bad input.

        Args:
            request: Offer document and export options

        Returns:
            ExportOfferResponse describing the produced file or the failure
        """
        try:
            offer = load_offer_document(request.document)
        except OfferInputError as exc:
            self.logger.error(str(exc))
            return ExportOfferResponse(success=False, error=str(exc))

        self.logger.log_build_start(
            offer.basic_info.piva_utente, offer.basic_info.cod_offerta
        )
        xml_string = self.xml_builder.build(offer)

        validation = None
        if request.validate:
            validation = validate_business_rules(xml_string)
            self.logger.log_validation_result(validation)
            if request.fail_on_validation_errors and not validation.is_valid:
                return ExportOfferResponse(
                    success=False,
                    xml=xml_string,
                    validation=validation,
                    error=validation_summary(validation.issues),
                )

        try:
            filename = generate_xml_filename(
                offer.basic_info.piva_utente, request.label, action=request.action
            )
        except ValueError as exc:
            self.logger.error(str(exc))
            return ExportOfferResponse(
                success=False, xml=xml_string, validation=validation, error=str(exc)
            )

        result = self.downloader.download(xml_string, filename)
        if not result.success:
            self.logger.error(result.error or "Download failed")
            return ExportOfferResponse(
                success=False,
                filename=filename,
                xml=xml_string,
                validation=validation,
                error=result.error,
            )

        self.logger.log_export_complete(filename, result.path)
        return ExportOfferResponse(
            success=True,
            filename=filename,
            xml=xml_string,
            path=result.path,
            validation=validation,
        )
