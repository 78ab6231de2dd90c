"""Parsers for the bundled ECDICT assets."""

from ecdict_lookup.parsers.dictionary import (
    DictionaryLoadError,
    decode_line_breaks,
    parse_dictionary,
)
from ecdict_lookup.parsers.lemma import parse_lemma
from ecdict_lookup.parsers.stats import ParseStats

__all__ = [
    "DictionaryLoadError",
    "ParseStats",
    "decode_line_breaks",
    "parse_dictionary",
    "parse_lemma",
]
