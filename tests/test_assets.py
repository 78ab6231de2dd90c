"""Tests for the bundled asset loaders."""

from pathlib import Path

from ecdict_lookup.assets import (
    DICTIONARY_ASSET,
    LEMMA_ASSET,
    asset_path,
    file_loader,
    load_dictionary_bytes,
    load_lemma_bytes,
)
from ecdict_lookup.parsers import parse_dictionary, parse_lemma


class TestBundledAssets:
    """The shipped sample assets must parse cleanly."""

    def test_dictionary_starts_with_header(self) -> None:
        assert load_dictionary_bytes().startswith(b"word,phonetic,definition,")

    def test_dictionary_rows_all_parse(self) -> None:
        data = load_dictionary_bytes()
        entries = parse_dictionary(data)

        rows = data.decode("utf-8").strip().count("\n")  # excludes header
        assert len({entry.word for entry in entries.values()}) == rows

    def test_lemma_rules_parse(self) -> None:
        lemmas = parse_lemma(load_lemma_bytes())

        assert lemmas["went"] == "go"
        assert lemmas["is"] == "be"

    def test_asset_path_points_at_bundled_file(self) -> None:
        path = asset_path(DICTIONARY_ASSET)

        assert path.name == DICTIONARY_ASSET
        assert path.read_bytes() == load_dictionary_bytes()
        assert asset_path(LEMMA_ASSET).read_bytes() == load_lemma_bytes()


class TestFileLoader:
    """Tests for file_loader."""

    def test_reads_file_on_each_call(self, tmp_path: Path) -> None:
        path = tmp_path / "lemma.txt"
        path.write_bytes(b"go -> went\n")
        load = file_loader(path)

        assert load() == b"go -> went\n"
        path.write_bytes(b"be -> is\n")
        assert load() == b"be -> is\n"
