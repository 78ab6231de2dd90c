"""Tests for the asset download helpers."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import requests

from ecdict_lookup import download


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code
        self.headers = {"content-length": str(len(content))}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start : start + chunk_size]


@pytest.fixture
def fake_get(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Serve fixed content for both upstream URLs and record requested URLs."""
    requested: list[str] = []
    payloads = {
        download.ECDICT_URL: b"word,phonetic\n",
        download.LEMMA_URL: b"go -> went\n",
    }

    def get(url: str, **kwargs: Any) -> FakeResponse:
        requested.append(url)
        if url not in payloads:
            return FakeResponse(b"", status_code=404)
        return FakeResponse(payloads[url])

    monkeypatch.setattr(download.requests, "get", get)
    return requested


class TestDownload:
    """Tests for download_dictionary, download_lemma and download_all."""

    def test_downloads_dictionary(self, tmp_path: Path, fake_get: list[str]) -> None:
        dest = tmp_path / "ecdict.csv"

        stats = download.download_dictionary(dest=dest)

        assert stats == {"downloaded": 1, "skipped": 0}
        assert dest.read_bytes() == b"word,phonetic\n"
        assert fake_get == [download.ECDICT_URL]
        assert not (tmp_path / "ecdict.csv.part").exists()

    def test_skips_existing_file(self, tmp_path: Path, fake_get: list[str]) -> None:
        dest = tmp_path / "lemma.en.txt"
        dest.write_bytes(b"old -> data\n")

        stats = download.download_lemma(dest=dest)

        assert stats == {"downloaded": 0, "skipped": 1}
        assert dest.read_bytes() == b"old -> data\n"
        assert fake_get == []

    def test_force_replaces_existing_file(self, tmp_path: Path, fake_get: list[str]) -> None:
        dest = tmp_path / "lemma.en.txt"
        dest.write_bytes(b"old -> data\n")

        stats = download.download_lemma(force=True, dest=dest)

        assert stats == {"downloaded": 1, "skipped": 0}
        assert dest.read_bytes() == b"go -> went\n"

    def test_download_all(self, tmp_path: Path, fake_get: list[str]) -> None:
        results = download.download_all(dest_dir=tmp_path)

        assert results == {
            "dictionary": {"downloaded": 1, "skipped": 0},
            "lemma": {"downloaded": 1, "skipped": 0},
        }
        assert (tmp_path / "ecdict.csv").exists()
        assert (tmp_path / "lemma.en.txt").exists()

    def test_http_error_propagates(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            download.requests, "get", lambda url, **kwargs: FakeResponse(b"", 500)
        )
        dest = tmp_path / "ecdict.csv"

        with pytest.raises(requests.HTTPError):
            download.download_dictionary(dest=dest)
        assert not dest.exists()
