"""Structure transformer for the SII offer document.

Maps an :class:`OfferDocument` onto the ordered element tree of the SII
"Trasmissione Offerte" XML. The result is a plain nested ``dict`` whose
insertion order is the document order:

- scalar values become leaf elements
- lists of scalars become repeated leaf elements
- mappings become compound elements
- lists of mappings become repeated compound elements

Every section is assembled with :class:`ElementBuilder`, one
append-if-present step per field, so the element order can be read top to
bottom in this module.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Self

from ...constants import Sections
from ..entities.offer import load_offer_document

if TYPE_CHECKING:
    from ..entities.offer import (
        AdditionalProduct,
        CompanyComponent,
        ContractualCondition,
        Discount,
        DispatchingComponent,
        OfferDocument,
        PaymentMethod,
        PriceInterval,
        ValidityPeriod,
    )

ElementMap = dict[str, object]


def _is_present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


class ElementBuilder:
    """Ordered accumulator for the children of one XML element."""

    def __init__(self) -> None:
        super().__init__()
        self._children: ElementMap = {}

    def add(self, name: str, value: object) -> Self:
        """Append a mandatory leaf; ``None`` is rendered as an empty element."""
        self._children[name] = "" if value is None else value
        return self

    def add_optional(self, name: str, value: object) -> Self:
        if _is_present(value):
            self._children[name] = value
        return self

    def add_defined(self, name: str, value: object) -> Self:
        """Append a leaf whenever it is set, even to an empty string."""
        if value is not None:
            self._children[name] = value
        return self


    def add_list(self, name: str, values: Iterable[object] | None) -> Self:
        items = [v for v in values or () if _is_present(v)]
        if items:
            self._children[name] = items
        return self

    def add_block(self, name: str, block: Mapping[str, object] | None) -> Self:
        if block:
            self._children[name] = dict(block)
        return self

    def add_blocks(
        self, name: str, blocks: Iterable[Mapping[str, object]] | None
    ) -> Self:
        items = [dict(b) for b in blocks or () if b]
        if items:
            self._children[name] = items
        return self

    def is_empty(self) -> bool:
        return not self._children

    def build(self) -> ElementMap:
        return dict(self._children)


def transform_offer(document: OfferDocument | Mapping[str, Any]) -> ElementMap:
    """Build the ordered element tree for an offer.

    Args:
        document: Offer document, or the raw mapping produced by the form

    Returns:
        ``{"Offerta": {...}}`` with children in SII document order

    Raises:
        OfferInputError: If a raw mapping does not match the document model
    """
    offer = load_offer_document(document)
    root = ElementBuilder()

    # Mandatory sections
    root.add_block("IdentificativiOfferta", _identificativi_offerta(offer))
    root.add_block("DettaglioOfferta", _dettaglio_offerta(offer))
    root.add_block(
        "DettaglioOfferta.ModalitaAttivazione", _modalita_attivazione(offer)
    )
    root.add_block("DettaglioOfferta.Contatti", _contatti(offer))
    root.add_block("ValiditaOfferta", _validita_offerta(offer))
    root.add_blocks(
        "MetodoPagamento",
        [_metodo_pagamento(m) for m in offer.payment_conditions.metodo_pagamento],
    )

    # Optional sections
    pricing = offer.pricing_config
    root.add_block("RiferimentiPrezzoEnergia", _riferimenti_prezzo_energia(offer))
    if pricing.tipo_prezzo is not None:
        root.add_block(
            "TipoPrezzo",
            ElementBuilder()
            .add_optional("TIPOLOGIA_FASCE", pricing.tipo_prezzo.tipologia_fasce)
            .build(),
        )
    root.add_block("FasceOrarieSettimanale", _fasce_orarie_settimanale(offer))
    root.add_blocks(
        "Dispacciamento", [_dispacciamento(d) for d in pricing.dispacciamento or ()]
    )

    components = offer.company_components
    if components.componenti_regolate is not None:
        root.add_block(
            "ComponentiRegolate",
            ElementBuilder()
            .add_list("CODICE", components.componenti_regolate.codice)
            .build(),
        )
    root.add_blocks(
        "ComponenteImpresa",
        [_componente_impresa(c) for c in components.componente_impresa or ()],
    )
    root.add_blocks(
        "CondizioniContrattuali",
        [
            _condizione_contrattuale(c)
            for c in offer.payment_conditions.condizioni_contrattuali or ()
        ],
    )

    features = offer.additional_features
    root.add_block("CaratteristicheOfferta", _caratteristiche_offerta(offer))
    if features.offerta_dual is not None:
        root.add_block(
            "OffertaDUAL",
            ElementBuilder()
            .add_list("OFFERTE_CONGIUNTE_EE", features.offerta_dual.offerte_congiunge_ee)
            .add_list(
                "OFFERTE_CONGIUNTE_GAS", features.offerta_dual.offerte_congiunge_gas
            )
            .build(),
        )
    root.add_block("ZoneOfferta", _zone_offerta(offer))
    root.add_blocks("Sconto", [_sconto(s) for s in features.sconto or ()])
    root.add_blocks(
        "ProdottiServiziAggiuntivi",
        [_prodotto_servizio(p) for p in features.prodotti_servizi_aggiuntivi or ()],
    )

    return {Sections.ROOT: root.build()}


def _identificativi_offerta(offer: OfferDocument) -> ElementMap:
    return (
        ElementBuilder()
        .add("PIVA_UTENTE", offer.basic_info.piva_utente.upper())
        .add("COD_OFFERTA", offer.basic_info.cod_offerta.upper())
        .build()
    )


def _dettaglio_offerta(offer: OfferDocument) -> ElementMap:
    details = offer.offer_details
    return (
        ElementBuilder()
        .add("TIPO_MERCATO", details.tipo_mercato)
        .add("TIPO_CLIENTE", details.tipo_cliente)
        .add("TIPO_OFFERTA", details.tipo_offerta)
        .add_list("TIPOLOGIA_ATT_CONTR", details.tipologia_att_contr)
        .add("NOME_OFFERTA", details.nome_offerta)
        .add("DESCRIZIONE", details.descrizione)
        .add("DURATA", details.durata)
        .add("GARANZIE", details.garanzie)
        .add_defined("OFFERTA_SINGOLA", details.offerta_singola)
        .add_defined("DOMESTICO_RESIDENTE", details.domestico_residente)
        .build()
    )


def _modalita_attivazione(offer: OfferDocument) -> ElementMap:
    contacts = offer.activation_contacts
    return (
        ElementBuilder()
        .add_list("MODALITA", contacts.modalita)
        .add_optional("DESCRIZIONE", contacts.descrizione_modalita)
        .build()
    )


def _contatti(offer: OfferDocument) -> ElementMap:
    contacts = offer.activation_contacts
    return (
        ElementBuilder()
        .add("TELEFONO", contacts.telefono)
        .add_optional("URL_SITO_VENDITORE", contacts.url_sito_venditore)
        .add_optional("URL_OFFERTA", contacts.url_offerta)
        .build()
    )


def _validita_offerta(offer: OfferDocument) -> ElementMap:
    validity = offer.validity_review.validita_offerta
    return (
        ElementBuilder()
        .add("DATA_INIZIO", validity.data_inizio)
        .add("DATA_FINE", validity.data_fine)
        .build()
    )


def _metodo_pagamento(method: PaymentMethod) -> ElementMap:
    return (
        ElementBuilder()
        .add("MODALITA_PAGAMENTO", method.modalita_pagamento)
        .add_optional("DESCRIZIONE", method.descrizione)
        .build()
    )


def _riferimenti_prezzo_energia(offer: OfferDocument) -> ElementMap | None:
    reference = offer.pricing_config.riferimenti_prezzo_energia
    if reference is None:
        return None
    return (
        ElementBuilder()
        .add("IDX_PREZZO_ENERGIA", reference.idx_prezzo_energia)
        .add_optional("ALTRO", reference.altro)
        .build()
    )


_WEEKDAY_TAGS: tuple[tuple[str, str], ...] = (
    ("f_lunedi", "F_LUNEDI"),
    ("f_martedi", "F_MARTEDI"),
    ("f_mercoledi", "F_MERCOLEDI"),
    ("f_giovedi", "F_GIOVEDI"),
    ("f_venerdi", "F_VENERDI"),
    ("f_sabato", "F_SABATO"),
    ("f_domenica", "F_DOMENICA"),
    ("f_festivita", "F_FESTIVITA"),
)


def _fasce_orarie_settimanale(offer: OfferDocument) -> ElementMap | None:
    bands = offer.pricing_config.fasce_orarie_settimanale
    if bands is None:
        return None
    builder = ElementBuilder()
    for attribute, tag_name in _WEEKDAY_TAGS:
        builder.add_optional(tag_name, getattr(bands, attribute))
    return builder.build()


def _dispacciamento(component: DispatchingComponent) -> ElementMap:
    return (
        ElementBuilder()
        .add("TIPO_DISPACCIAMENTO", component.tipo_dispacciamento)
        .add_optional("VALORE_DISP", component.valore_disp)
        .add("NOME", component.nome)
        .add_optional("DESCRIZIONE", component.descrizione)
        .build()
    )


def _periodo_validita(period: ValidityPeriod | None) -> ElementMap | None:
    if period is None:
        return None
    return (
        ElementBuilder()
        .add_optional("DURATA", period.durata)
        .add_optional("VALIDO_FINO", period.valido_fino)
        .add_list("MESE_VALIDITA", period.mese_validita)
        .build()
    )


def _componente_impresa(component: CompanyComponent) -> ElementMap:
    return (
        ElementBuilder()
        .add("NOME", component.nome)
        .add("DESCRIZIONE", component.descrizione)
        .add("TIPOLOGIA", component.tipologia)
        .add("MACROAREA", component.macro_area)
        .add_blocks(
            "IntervalloPrezzi",
            [_intervallo_prezzi(i) for i in component.intervallo_prezzi],
        )
        .build()
    )


def _intervallo_prezzi(interval: PriceInterval) -> ElementMap:
    return (
        ElementBuilder()
        .add("PREZZO", interval.prezzo)
        .add("UNITA_MISURA", interval.unita_misura)
        .add_optional("FASCIA_COMPONENTE", interval.fascia_componente)
        .add_optional("CONSUMO_DA", interval.consumo_da)
        .add_optional("CONSUMO_A", interval.consumo_a)
        .add_block("PeriodoValidita", _periodo_validita(interval.periodo_validita))
        .build()
    )


def _condizione_contrattuale(condition: ContractualCondition) -> ElementMap:
    return (
        ElementBuilder()
        .add("TIPOLOGIA_CONDIZIONE", condition.tipologia_condizione)
        .add_optional("ALTRO", condition.altro)
        .add("DESCRIZIONE", condition.descrizione)
        .add("LIMITANTE", condition.limitante)
        .build()
    )


def _caratteristiche_offerta(offer: OfferDocument) -> ElementMap | None:
    characteristics = offer.additional_features.caratteristiche_offerta
    if characteristics is None:
        return None
    return (
        ElementBuilder()
        .add_optional("CONSUMO_MIN", characteristics.consumo_min)
        .add_optional("CONSUMO_MAX", characteristics.consumo_max)
        .add_optional("POTENZA_MIN", characteristics.potenza_min)
        .add_optional("POTENZA_MAX", characteristics.potenza_max)
        .build()
    )


def _zone_offerta(offer: OfferDocument) -> ElementMap | None:
    zones = offer.additional_features.zone_offerta
    if zones is None:
        return None
    return (
        ElementBuilder()
        .add_list("REGIONE", zones.regione)
        .add_list("PROVINCIA", zones.provincia)
        .add_list("COMUNE", zones.comune)
        .build()
    )


def _sconto(discount: Discount) -> ElementMap:
    condition = discount.sconto_condizione
    return (
        ElementBuilder()
        .add("NOME", discount.nome)
        .add("DESCRIZIONE", discount.descrizione)
        .add("IVA_SCONTO", discount.iva_sconto)
        .add_block(
            "Condizione",
            ElementBuilder()
            .add("CONDIZIONE_APPLICAZIONE", condition.condizione_applicazione)
            .add_optional("DESCRIZIONE_CONDIZIONE", condition.descrizione_condizione)
            .build(),
        )
        .add_blocks(
            "PREZZISconto",
            [
                ElementBuilder()
                .add("TIPOLOGIA", price.tipologia)
                .add_optional("VALIDO_DA", price.valido_da)
                .add_optional("VALIDO_FINO", price.valido_fino)
                .add("UNITA_MISURA", price.unita_misura)
                .add("PREZZO", price.prezzo)
                .build()
                for price in discount.prezzi_sconto
            ],
        )
        .add_list("CODICE_COMPONENTE_FASCIA", discount.codice_componente_fascia)
        .add_optional("VALIDITA", discount.validita)
        .add_block("PeriodoValidita", _periodo_validita(discount.periodo_validita))
        .build()
    )


def _prodotto_servizio(product: AdditionalProduct) -> ElementMap:
    return (
        ElementBuilder()
        .add("NOME", product.nome)
        .add("DETTAGLIO", product.dettaglio)
        .add_optional("MACROAREA", product.macro_area)
        .add_optional("DETTAGLI_MACROAREA", product.dettagli_macro_area)
        .build()
    )
