"""Unit tests for OfferJSONReader."""

import json

import pytest

from sii_offerte.infrastructure.io.exceptions import OfferExportError, OfferSourceError
from sii_offerte.infrastructure.io.offer_reader import OfferJSONReader


class TestOfferJSONReader:
    """Test suite for reading offer form data from JSON files."""

    def test_reads_object(self, tmp_path, minimal_form_data):
        path = tmp_path / "offer.json"
        path.write_text(json.dumps(minimal_form_data), encoding="utf-8")

        assert OfferJSONReader().read(path) == minimal_form_data

    def test_missing_file(self, tmp_path):
        with pytest.raises(OfferSourceError, match="File not found"):
            OfferJSONReader().read(tmp_path / "missing.json")

    def test_directory(self, tmp_path):
        with pytest.raises(OfferSourceError, match="Not a file"):
            OfferJSONReader().read(tmp_path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "offer.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(OfferSourceError, match="Failed to parse JSON"):
            OfferJSONReader().read(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "offer.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(OfferSourceError, match="Expected a JSON object"):
            OfferJSONReader().read(path)

    def test_encoding_error(self, tmp_path):
        path = tmp_path / "offer.json"
        path.write_bytes(b'{"a": "\xff"}')

        with pytest.raises(OfferSourceError, match="Encoding error"):
            OfferJSONReader().read(path)

    def test_source_error_is_export_error(self):
        assert issubclass(OfferSourceError, OfferExportError)
