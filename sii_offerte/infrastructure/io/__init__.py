"""File and host I/O for offer documents."""

from .download import (
    DownloadResult,
    FileSystemSaveHost,
    XMLBlob,
    XMLDownloader,
    create_xml_blob,
    download_xml,
)
from .exceptions import OfferExportError, OfferSourceError, OfferXMLError
from .offer_reader import OfferJSONReader
from .xml_writer import (
    SII_FORMAT,
    OfferXMLWriter,
    XMLFormat,
    build_offer_xml,
    render_offer_xml,
    write_offer_xml,
)

__all__ = [
    "SII_FORMAT",
    "DownloadResult",
    "FileSystemSaveHost",
    "OfferExportError",
    "OfferJSONReader",
    "OfferSourceError",
    "OfferXMLError",
    "OfferXMLWriter",
    "XMLBlob",
    "XMLDownloader",
    "XMLFormat",
    "build_offer_xml",
    "create_xml_blob",
    "download_xml",
    "render_offer_xml",
    "write_offer_xml",
]
