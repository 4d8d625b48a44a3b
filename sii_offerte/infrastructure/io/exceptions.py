class OfferExportError(Exception):
    pass


class OfferXMLError(OfferExportError):
    pass


class OfferSourceError(OfferExportError):
    pass
