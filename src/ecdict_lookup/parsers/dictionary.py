"""Parse the ECDICT tabular dictionary (ecdict.csv)."""

import csv
import io
import logging

from ecdict_lookup.models import COLUMNS, DictEntry
from ecdict_lookup.parsers.stats import ParseStats

logger = logging.getLogger(__name__)

FIELD_COUNT = len(COLUMNS)


class DictionaryLoadError(ValueError):
    """The dictionary asset cannot be read as CSV at all."""


def decode_line_breaks(text: str) -> str:
    """Turn literal backslash-n escapes into real line breaks.

    ECDICT stores multi-sense glosses on one CSV line, e.g.
    "n. a cat\\nv. to vomit" -> "n. a cat" + newline + "v. to vomit".
    """
    return text.replace("\\n", "\n")


def _is_header(word: str, record: list[str]) -> bool:
    return word == "word" and record[1] == "phonetic"


def _to_entry(word: str, record: list[str]) -> DictEntry:
    return DictEntry(
        word=word,
        phonetic=record[1],
        definition=decode_line_breaks(record[2]),
        translation=decode_line_breaks(record[3]),
        pos=record[4],
        collins=record[5],
        oxford=record[6],
        tag=record[7],
        bnc=record[8],
        frq=record[9],
        exchange=record[10],
        detail=record[11],
        audio=record[12],
    )


def parse_dictionary(data: bytes, stats: ParseStats | None = None) -> dict[str, DictEntry]:
    """Parse ECDICT CSV bytes into a word -> entry mapping.

    Every entry is stored twice: under its exact word and under the
    lowercase word, so "English" is reachable as "english" too. When two
    rows share a key the later one wins.

    Rows with the wrong number of fields, an empty word, or that are the
    header row are skipped. A buffer that is not valid UTF-8 or not valid
    CSV raises DictionaryLoadError; no partial mapping is returned.
    """
    if stats is None:
        stats = ParseStats()

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"Dictionary asset is not valid UTF-8: {e}") from e

    result: dict[str, DictEntry] = {}
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        for record in reader:
            stats.rows_read += 1

            if len(record) != FIELD_COUNT:
                stats.skipped_field_count += 1
                logger.debug(
                    "Skipping line %d: %d fields, expected %d",
                    reader.line_num,
                    len(record),
                    FIELD_COUNT,
                )
                continue

            word = record[0].strip()
            if not word:
                stats.skipped_empty_word += 1
                continue

            if _is_header(word, record):
                stats.skipped_header += 1
                continue

            entry = _to_entry(word, record)
            result[word] = entry
            result[word.lower()] = entry
            stats.entries += 1
    except csv.Error as e:
        raise DictionaryLoadError(f"Malformed CSV at line {reader.line_num}: {e}") from e

    return result
