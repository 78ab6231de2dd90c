"""Record types for ECDICT dictionary data."""

from dataclasses import asdict, dataclass

# Column order of the ECDICT tabular source
COLUMNS = (
    "word",
    "phonetic",
    "definition",
    "translation",
    "pos",
    "collins",
    "oxford",
    "tag",
    "bnc",
    "frq",
    "exchange",
    "detail",
    "audio",
)


@dataclass(frozen=True)
class DictEntry:
    """One word's full ECDICT record.

    Frozen: the index hands the same instance to every caller.
    """

    word: str  # Canonical surface form, trimmed (e.g., "run")
    phonetic: str  # Pronunciation (e.g., "rʌn"), may be empty
    definition: str  # English gloss, one sense per line
    translation: str  # Chinese gloss, one sense per line
    pos: str  # Part-of-speech distribution (e.g., "v:62/n:38")
    collins: str  # Collins star rating
    oxford: str  # Oxford 3000 core word flag
    tag: str  # Exam tags (e.g., "zk gk cet4")
    bnc: str  # British National Corpus frequency rank
    frq: str  # Contemporary corpus frequency rank
    exchange: str  # Inflected forms (e.g., "p:ran/d:run/i:running")
    detail: str  # JSON detail blob
    audio: str  # Audio URL

    def to_dict(self) -> dict[str, str]:
        """Return a fresh dict keyed by ECDICT column names."""
        return asdict(self)
