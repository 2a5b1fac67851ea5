import io
import json

import pytest
import requests

from entity_codegen import utils
from entity_codegen.utils import (
    JSONLoaderError,
    load_json,
    load_json_from_file,
    load_json_from_stream,
    load_json_from_url,
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, content_type="application/json", body=None):
        self.payload = payload
        self.status_code = status_code
        self.headers = {"content-type": content_type}
        self.body = body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        if self.body is not None:
            return json.loads(self.body)
        return self.payload


# ═══════════════════════════════════════════════════════════════════════════
# Files and streams
# ═══════════════════════════════════════════════════════════════════════════


class TestFileLoading:
    def test_load_file(self, tmp_path, shop_document):
        path = tmp_path / "shop.json"
        path.write_text(json.dumps(shop_document), encoding="utf-8")

        source, data = load_json_from_file(path)

        assert source == str(path)
        assert data == shop_document

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json_from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(JSONLoaderError, match="Invalid JSON"):
            load_json_from_file(path)

    def test_other_extension_is_accepted(self, tmp_path):
        path = tmp_path / "shop.txt"
        path.write_text('{"entities": []}', encoding="utf-8")

        assert load_json_from_file(path)[1] == {"entities": []}

    def test_stream(self):
        assert load_json_from_stream(io.StringIO('{"entities": []}')) == (
            "<stdin>",
            {"entities": []},
        )

    def test_invalid_stream(self):
        with pytest.raises(JSONLoaderError, match="input stream"):
            load_json_from_stream(io.StringIO("nope"))


# ═══════════════════════════════════════════════════════════════════════════
# URLs
# ═══════════════════════════════════════════════════════════════════════════


class TestUrlLoading:
    def test_load_url(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse({"entities": []})

        monkeypatch.setattr(utils.requests, "get", fake_get)

        assert load_json_from_url("https://example.com/schema.json", timeout=5) == (
            "https://example.com/schema.json",
            {"entities": []},
        )
        assert calls == [("https://example.com/schema.json", 5)]

    def test_invalid_url(self):
        with pytest.raises(JSONLoaderError, match="Invalid URL"):
            load_json_from_url("not a url")

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(utils.requests, "get", lambda url, timeout: FakeResponse(status_code=404))

        with pytest.raises(JSONLoaderError, match="HTTP error 404"):
            load_json_from_url("https://example.com/schema.json")

    def test_timeout(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.exceptions.Timeout()

        monkeypatch.setattr(utils.requests, "get", fake_get)

        with pytest.raises(JSONLoaderError, match="timeout"):
            load_json_from_url("https://example.com/schema.json")

    def test_invalid_body(self, monkeypatch):
        monkeypatch.setattr(
            utils.requests,
            "get",
            lambda url, timeout: FakeResponse(content_type="text/html", body="<html>"),
        )

        with pytest.raises(JSONLoaderError, match="Invalid JSON response"):
            load_json_from_url("https://example.com/schema")


class TestLoadJson:
    def test_requires_exactly_one_source(self):
        with pytest.raises(JSONLoaderError, match="must be provided"):
            load_json()

        with pytest.raises(JSONLoaderError, match="both"):
            load_json(file_path="a.json", url="https://example.com/a.json")

    def test_dispatches_to_file(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text("[]", encoding="utf-8")

        assert load_json(file_path=path) == (str(path), [])
