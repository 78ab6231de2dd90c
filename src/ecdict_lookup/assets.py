"""Access to the ECDICT assets bundled as package data."""

from collections.abc import Callable
from importlib import resources
from pathlib import Path

DATA_PACKAGE = "ecdict_lookup.data"
DICTIONARY_ASSET = "ecdict.csv"
LEMMA_ASSET = "lemma.en.txt"


def read_asset(name: str) -> bytes:
    """Read a bundled asset as raw bytes."""
    return resources.files(DATA_PACKAGE).joinpath(name).read_bytes()


def asset_path(name: str) -> Path:
    """Return the filesystem location of a bundled asset.

    Only meaningful for source or editable installs, where the download
    step writes the full upstream files into the package.
    """
    return Path(str(resources.files(DATA_PACKAGE).joinpath(name)))


def load_dictionary_bytes() -> bytes:
    """Return the bundled ecdict.csv."""
    return read_asset(DICTIONARY_ASSET)


def load_lemma_bytes() -> bytes:
    """Return the bundled lemma.en.txt."""
    return read_asset(LEMMA_ASSET)


def file_loader(path: Path | str) -> Callable[[], bytes]:
    """Build a loader that reads an asset from an explicit file instead."""
    path = Path(path)

    def load() -> bytes:
        return path.read_bytes()

    return load
