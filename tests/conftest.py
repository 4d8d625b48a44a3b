from collections.abc import Callable
from typing import Any

import pytest

type FormData = dict[str, Any]


def _complete_form_data() -> FormData:
    return {
        "basicInfo": {
            "pivaUtente": "IT12345678901",
            "codOfferta": "OFFER2024TEST",
        },
        "offerDetails": {
            "tipoMercato": "01",
            "offertaSingola": "SI",
            "tipoCliente": "01",
            "domesticoResidente": "SI",
            "tipoOfferta": "01",
            "tipologiaAttContr": ["01", "02"],
            "nomeOfferta": "Test Offer Name",
            "descrizione": "Test offer description with special chars & < >",
            "durata": 12,
            "garanzie": "Test guarantees",
        },
        "activationContacts": {
            "modalita": ["01", "02"],
            "descrizioneModalita": "Online and phone activation",
            "telefono": "+39 02 12345678",
            "urlSitoVenditore": "https://example.com",
            "urlOfferta": "https://example.com/offer",
        },
        "pricingConfig": {
            "riferimentiPrezzoEnergia": {
                "idxPrezzoEnergia": "PUN",
                "altro": "Additional price reference",
            },
            "tipoPrezzo": {"tipologiaFasce": "F1"},
            "fasceOrarieSettimanale": {
                "fLunedi": "F1",
                "fMartedi": "F1",
                "fMercoledi": "F1",
                "fGiovedi": "F1",
                "fVenerdi": "F1",
                "fSabato": "F2",
                "fDomenica": "F3",
                "fFestivita": "F3",
            },
            "dispacciamento": [
                {
                    "tipoDispacciamento": "01",
                    "valoreDisp": 0.05,
                    "nome": "Dispacciamento 1",
                    "descrizione": "Dispacciamento description",
                }
            ],
        },
        "companyComponents": {
            "componentiRegolate": {"codice": ["COMP1", "COMP2"]},
            "componenteImpresa": [
                {
                    "nome": "Component Name",
                    "descrizione": "Component description",
                    "tipologia": "01",
                    "macroArea": "VENDITA",
                    "intervalloPrezzi": [
                        {
                            "fasciaComponente": "F1",
                            "consumoDa": 0,
                            "consumoA": 1000,
                            "prezzo": 0.08,
                            "unitaMisura": "EUR/kWh",
                            "periodoValidita": {
                                "durata": 6,
                                "validoFino": "2024-12-31",
                                "meseValidita": ["01", "02", "03"],
                            },
                        }
                    ],
                }
            ],
        },
        "paymentConditions": {
            "metodoPagamento": [
                {"modalitaPagamento": "01", "descrizione": "Bank transfer"},
                {"modalitaPagamento": "02", "descrizione": "Credit card"},
            ],
            "condizioniContrattuali": [
                {
                    "tipologiaCondizione": "01",
                    "altro": "Other condition",
                    "descrizione": "Contract condition description",
                    "limitante": "SI",
                }
            ],
        },
        "additionalFeatures": {
            "caratteristicheOfferta": {
                "consumoMin": 100,
                "consumoMax": 5000,
                "potenzaMin": 3,
                "potenzaMax": 15,
            },
            "offertaDUAL": {
                "offerteCongiungeEE": ["ELEC01", "ELEC02"],
                "offerteCongiungeGas": ["GAS01", "GAS02"],
            },
            "zoneOfferta": {
                "regione": ["01", "02"],
                "provincia": ["MI", "RM"],
                "comune": ["015146", "058091"],
            },
            "sconto": [
                {
                    "nome": "Early Bird Discount",
                    "descrizione": "Special discount for early subscribers",
                    "codiceComponenteFascia": ["F1", "F2"],
                    "validita": "2024-12-31",
                    "ivaSconto": "22",
                    "periodoValidita": {
                        "durata": 12,
                        "validoFino": "2024-12-31",
                        "meseValidita": ["01", "02", "03"],
                    },
                    "scontoCondizione": {
                        "condizioneApplicazione": "EARLY_SIGNUP",
                        "descrizioneCondizione": "Sign up before launch date",
                    },
                    "prezziSconto": [
                        {
                            "tipologia": "PERCENTAGE",
                            "validoDa": 0,
                            "validoFino": 1000,
                            "unitaMisura": "%",
                            "prezzo": 10,
                        }
                    ],
                }
            ],
            "prodottiServiziAggiuntivi": [
                {
                    "nome": "Green Energy Certificate",
                    "dettaglio": "Renewable energy certification",
                    "macroArea": "SOSTENIBILITA",
                    "dettagliMacroArea": "Environmental services",
                }
            ],
        },
        "validityReview": {
            "validitaOfferta": {
                "dataInizio": "01/01/2024_00:00:00",
                "dataFine": "31/12/2024_23:59:59",
            }
        },
    }


def _minimal_form_data() -> FormData:
    return {
        "basicInfo": {
            "pivaUtente": "IT98765432101",
            "codOfferta": "MINIMAL2024",
        },
        "offerDetails": {
            "tipoMercato": "02",
            "tipoCliente": "02",
            "tipoOfferta": "02",
            "tipologiaAttContr": ["03"],
            "nomeOfferta": "Minimal Offer",
            "descrizione": "Minimal description",
            "durata": 24,
            "garanzie": "Basic guarantees",
        },
        "activationContacts": {
            "modalita": ["01"],
            "telefono": "800123456",
        },
        "pricingConfig": {},
        "companyComponents": {},
        "paymentConditions": {
            "metodoPagamento": [{"modalitaPagamento": "03"}],
        },
        "additionalFeatures": {},
        "validityReview": {
            "validitaOfferta": {
                "dataInizio": "01/06/2024_00:00:00",
                "dataFine": "31/05/2025_23:59:59",
            }
        },
    }


@pytest.fixture
def complete_form_data() -> FormData:
    """Offer form data with every section and optional field filled in."""
    return _complete_form_data()


@pytest.fixture
def minimal_form_data() -> FormData:
    """Offer form data with only the mandatory sections."""
    return _minimal_form_data()


@pytest.fixture
def form_data_factory() -> Callable[[bool], FormData]:
    """Fresh copies of the form data, complete or minimal."""

    def _factory(complete: bool = True) -> FormData:
        return _complete_form_data() if complete else _minimal_form_data()

    return _factory
