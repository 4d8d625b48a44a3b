from .offer import OfferDocument, OfferInputError, load_offer_document

__all__ = ["OfferDocument", "OfferInputError", "load_offer_document"]
