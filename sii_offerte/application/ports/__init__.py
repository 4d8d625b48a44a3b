from .services import (
    DownloaderPort,
    LoggerPort,
    OfferXMLBuilderPort,
    SaveHostPort,
)

__all__ = ["DownloaderPort", "LoggerPort", "OfferXMLBuilderPort", "SaveHostPort"]
