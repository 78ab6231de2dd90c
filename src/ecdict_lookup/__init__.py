"""English word lookup over ECDICT with lemma fallback."""

from ecdict_lookup.index import DictionaryIndex, get_index, look_up
from ecdict_lookup.models import COLUMNS, DictEntry
from ecdict_lookup.parsers import DictionaryLoadError, ParseStats

__all__ = [
    "COLUMNS",
    "DictEntry",
    "DictionaryIndex",
    "DictionaryLoadError",
    "ParseStats",
    "get_index",
    "look_up",
]
