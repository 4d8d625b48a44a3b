"""Input document for the SII offer XML.

The models mirror the record assembled by the offer form, section by section.
Requiredness rules that depend on sibling values (e.g. a description that is
mandatory only when a code equals ``99``) are deliberately not encoded here:
they belong to the form validation, the XML engine only decides emission.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

Number = int | float


class OfferInputError(ValueError):
    pass


class _Section(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class BasicInfo(_Section):
    piva_utente: str
    cod_offerta: str


class OfferDetails(_Section):
    tipo_mercato: str
    offerta_singola: str | None = None
    tipo_cliente: str
    domestico_residente: str | None = None
    tipo_offerta: str
    tipologia_att_contr: list[str] = Field(default_factory=list)
    nome_offerta: str
    descrizione: str
    durata: int
    garanzie: str


class ActivationContacts(_Section):
    modalita: list[str] = Field(default_factory=list)
    descrizione_modalita: str | None = None
    telefono: str
    url_sito_venditore: str | None = None
    url_offerta: str | None = None


class EnergyPriceReference(_Section):
    idx_prezzo_energia: str
    altro: str | None = None


class PriceType(_Section):
    tipologia_fasce: str


class WeeklyTimeBands(_Section):
    f_lunedi: str | None = None
    f_martedi: str | None = None
    f_mercoledi: str | None = None
    f_giovedi: str | None = None
    f_venerdi: str | None = None
    f_sabato: str | None = None
    f_domenica: str | None = None
    f_festivita: str | None = None


class DispatchingComponent(_Section):
    tipo_dispacciamento: str
    valore_disp: Number | None = None
    nome: str
    descrizione: str | None = None


class PricingConfig(_Section):
    riferimenti_prezzo_energia: EnergyPriceReference | None = None
    tipo_prezzo: PriceType | None = None
    fasce_orarie_settimanale: WeeklyTimeBands | None = None
    dispacciamento: list[DispatchingComponent] | None = None


class ValidityPeriod(_Section):
    durata: int | None = None
    valido_fino: str | None = None
    mese_validita: list[str] | None = None


class PriceInterval(_Section):
    fascia_componente: str | None = None
    consumo_da: Number | None = None
    consumo_a: Number | None = None
    prezzo: Number
    unita_misura: str
    periodo_validita: ValidityPeriod | None = None


class CompanyComponent(_Section):
    nome: str
    descrizione: str
    tipologia: str
    macro_area: str
    intervallo_prezzi: list[PriceInterval] = Field(default_factory=list)


class RegulatedComponents(_Section):
    codice: list[str] = Field(default_factory=list)


class CompanyComponents(_Section):
    componenti_regolate: RegulatedComponents | None = None
    componente_impresa: list[CompanyComponent] | None = None


class PaymentMethod(_Section):
    modalita_pagamento: str
    descrizione: str | None = None


class ContractualCondition(_Section):
    tipologia_condizione: str
    altro: str | None = None
    descrizione: str
    limitante: str


class PaymentConditions(_Section):
    metodo_pagamento: list[PaymentMethod] = Field(default_factory=list)
    condizioni_contrattuali: list[ContractualCondition] | None = None


class OfferCharacteristics(_Section):
    consumo_min: Number | None = None
    consumo_max: Number | None = None
    potenza_min: Number | None = None
    potenza_max: Number | None = None


class DualFuelOffer(_Section):
    # The form layer spells these keys "Congiunge"; the XML tags say "CONGIUNTE".
    offerte_congiunge_ee: list[str] = Field(
        default_factory=list, alias="offerteCongiungeEE"
    )
    offerte_congiunge_gas: list[str] = Field(
        default_factory=list, alias="offerteCongiungeGas"
    )


class OfferZones(_Section):
    regione: list[str] | None = None
    provincia: list[str] | None = None
    comune: list[str] | None = None


class DiscountCondition(_Section):
    condizione_applicazione: str
    descrizione_condizione: str | None = None


class DiscountPrice(_Section):
    tipologia: str
    valido_da: Number | None = None
    valido_fino: Number | None = None
    unita_misura: str
    prezzo: Number


class Discount(_Section):
    nome: str
    descrizione: str
    codice_componente_fascia: list[str] | None = None
    validita: str | None = None
    iva_sconto: str
    periodo_validita: ValidityPeriod | None = None
    sconto_condizione: DiscountCondition
    prezzi_sconto: list[DiscountPrice] = Field(default_factory=list)


class AdditionalProduct(_Section):
    nome: str
    dettaglio: str
    macro_area: str | None = None
    dettagli_macro_area: str | None = None


class AdditionalFeatures(_Section):
    caratteristiche_offerta: OfferCharacteristics | None = None
    offerta_dual: DualFuelOffer | None = Field(default=None, alias="offertaDUAL")
    zone_offerta: OfferZones | None = None
    sconto: list[Discount] | None = None
    prodotti_servizi_aggiuntivi: list[AdditionalProduct] | None = None


class OfferValidity(_Section):
    data_inizio: str
    data_fine: str


class ValidityReview(_Section):
    validita_offerta: OfferValidity


class OfferDocument(_Section):
    basic_info: BasicInfo
    offer_details: OfferDetails
    activation_contacts: ActivationContacts
    pricing_config: PricingConfig = Field(default_factory=PricingConfig)
    company_components: CompanyComponents = Field(default_factory=CompanyComponents)
    payment_conditions: PaymentConditions
    additional_features: AdditionalFeatures = Field(
        default_factory=AdditionalFeatures
    )
    validity_review: ValidityReview


def load_offer_document(data: OfferDocument | Mapping[str, Any]) -> OfferDocument:
    if isinstance(data, OfferDocument):
        return data
    try:
        return OfferDocument.model_validate(data)
    except ValidationError as exc:
        raise OfferInputError(f"Invalid offer document: {exc}") from exc
