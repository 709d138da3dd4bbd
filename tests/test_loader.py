from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest
import requests

from api_typegen.parser.loader import fetch_document, is_url, load_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestIsUrl:
    def test_http_and_https(self):
        assert is_url("http://localhost:3000/api/swagger.json")
        assert is_url("https://api.example.com/openapi.json")

    def test_file_path(self):
        assert not is_url("specs/openapi.yaml")


class TestFetchDocument:
    @patch("api_typegen.parser.loader.requests.get")
    def test_returns_decoded_json(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.json.return_value = {"openapi": "3.0.0"}
        mock_get.return_value = mock_resp

        assert fetch_document("https://api.example.com/openapi.json", timeout=5) == {"openapi": "3.0.0"}
        mock_get.assert_called_once_with("https://api.example.com/openapi.json", timeout=5)
        mock_resp.raise_for_status.assert_called_once()

    @patch("api_typegen.parser.loader.requests.get")
    def test_http_error_propagates(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = mock_resp

        with pytest.raises(requests.HTTPError):
            fetch_document("https://api.example.com/missing.json")

    @patch("api_typegen.parser.loader.requests.get")
    def test_non_json_body_propagates(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = mock_resp

        with pytest.raises(ValueError):
            fetch_document("https://api.example.com/index.html")


class TestLoadDocument:
    def test_reads_yaml_file(self):
        doc = load_document(str(FIXTURES / "petstore.yaml"))
        assert doc["openapi"] == "3.0.0"

    def test_reads_json_file(self):
        doc = load_document(str(FIXTURES / "petstore_v2.json"))
        assert doc["swagger"] == "2.0"

    @patch("api_typegen.parser.loader.fetch_document")
    def test_urls_are_fetched(self, mock_fetch):
        mock_fetch.return_value = {"swagger": "2.0"}
        assert load_document("http://localhost/swagger.json") == {"swagger": "2.0"}
        mock_fetch.assert_called_once_with("http://localhost/swagger.json")
