from typing import ClassVar


class Defaults:
    ACTION = "INSERIMENTO"
    CLEANUP_DELAY = 0.1
    OUTPUT_DIR = "output"
    VALIDATE = True
    CONFIG_FILE = "sii_offerte.toml"


class Constraints:
    PIVA_MAX_LENGTH = 16
    DURATION_MIN = 1
    DURATION_MAX = 99
    DURATION_INDEFINITE = -1
    FILENAME_EXTENSION = ".XML"
    ACTIONS: ClassVar[tuple[str, ...]] = ("INSERIMENTO", "AGGIORNAMENTO")


class Patterns:
    PIVA = "^[A-Z0-9]+$"
    SII_DATETIME = "^\\d{2}/\\d{2}/\\d{4}_\\d{2}:\\d{2}:\\d{2}$"
    FILENAME_LABEL_DISALLOWED = "[^0-9A-Za-z_\\s-]"


class MarketTypes:
    ELECTRICITY = "01"
    GAS = "02"
    DUAL_FUEL = "03"
    ALL: ClassVar[tuple[str, ...]] = ("01", "02", "03")


class ClientTypes:
    DOMESTIC = "01"
    OTHER_USES = "02"
    RESIDENTIAL_CONDOMINIUM = "03"


class OfferTypes:
    FIXED = "01"
    VARIABLE = "02"
    FLAT = "03"


class ActivationMethods:
    WEB_ONLY = "01"
    ANY_CHANNEL = "02"
    POINT_OF_SALE = "03"
    TELESELLING = "04"
    AGENCY = "05"
    OTHER = "99"


class Sections:
    ROOT = "Offerta"
    MANDATORY: ClassVar[tuple[str, ...]] = (
        "IdentificativiOfferta",
        "DettaglioOfferta",
        "DettaglioOfferta.ModalitaAttivazione",
        "DettaglioOfferta.Contatti",
        "ValiditaOfferta",
        "MetodoPagamento",
    )
    OPTIONAL: ClassVar[tuple[str, ...]] = (
        "RiferimentiPrezzoEnergia",
        "TipoPrezzo",
        "FasceOrarieSettimanale",
        "Dispacciamento",
        "ComponentiRegolate",
        "ComponenteImpresa",
        "CondizioniContrattuali",
        "CaratteristicheOfferta",
        "OffertaDUAL",
        "ZoneOfferta",
        "Sconto",
        "ProdottiServiziAggiuntivi",
    )
    ORDER: ClassVar[tuple[str, ...]] = MANDATORY + OPTIONAL
