"""Unit tests for SII filename derivation."""

import pytest

from sii_offerte.domain.services.filename import (
    generate_xml_filename,
    sanitize_filename_label,
)


class TestGenerateXMLFilename:
    """Tests for generate_xml_filename."""

    def test_identifier_only(self):
        assert generate_xml_filename("IT12345678901") == "IT12345678901_INSERIMENTO.XML"

    def test_identifier_and_label(self):
        assert (
            generate_xml_filename("IT12345678901", "Test Offer 2024")
            == "IT12345678901_INSERIMENTO_TEST_OFFER_2024.XML"
        )

    def test_special_characters_are_removed(self):
        assert (
            generate_xml_filename("IT12345678901", "Test@#$%^&*()Offer!")
            == "IT12345678901_INSERIMENTO_TESTOFFER.XML"
        )

    def test_whitespace_runs_collapse(self):
        assert (
            generate_xml_filename("IT12345678901", "Test   Multiple   Spaces")
            == "IT12345678901_INSERIMENTO_TEST_MULTIPLE_SPACES.XML"
        )

    def test_identifier_is_uppercased(self):
        assert (
            generate_xml_filename("it12345678901", "test")
            == "IT12345678901_INSERIMENTO_TEST.XML"
        )

    @pytest.mark.parametrize("label", [None, "", "   "])
    def test_blank_label_is_omitted(self, label):
        assert (
            generate_xml_filename("IT12345678901", label)
            == "IT12345678901_INSERIMENTO.XML"
        )

    def test_label_is_trimmed_before_processing(self):
        assert (
            generate_xml_filename("IT12345678901", "  Test  ")
            == "IT12345678901_INSERIMENTO_TEST.XML"
        )

    @pytest.mark.parametrize("label", ["@#$%^&*()", "@@@", "!?."])
    def test_label_of_only_symbols_is_omitted(self, label):
        assert (
            generate_xml_filename("IT12345678901", label)
            == "IT12345678901_INSERIMENTO.XML"
        )

    @pytest.mark.parametrize("space", [" ", "\u00a0", "\u3000", "\t"])
    def test_unicode_whitespace_becomes_underscore(self, space):
        assert (
            generate_xml_filename("IT1", f"Test{space}Offer")
            == "IT1_INSERIMENTO_TEST_OFFER.XML"
        )


    def test_accented_letters_are_dropped(self):
        assert (
            generate_xml_filename("IT12345678901", "Offerta più verde")
            == "IT12345678901_INSERIMENTO_OFFERTA_PI_VERDE.XML"
        )

    def test_update_action(self):
        assert (
            generate_xml_filename("IT12345678901", "Promo", action="aggiornamento")
            == "IT12345678901_AGGIORNAMENTO_PROMO.XML"
        )

    def test_unknown_action_raises(self):
        with pytest.raises(ValueError, match="action must be one of"):
            generate_xml_filename("IT12345678901", action="CANCELLAZIONE")


class TestSanitizeFilenameLabel:
    def test_keeps_digits_and_hyphens(self):
        assert sanitize_filename_label("promo-2024 q1") == "PROMO-2024_Q1"

    def test_collapses_existing_underscores(self):
        assert sanitize_filename_label("a__b") == "A_B"
