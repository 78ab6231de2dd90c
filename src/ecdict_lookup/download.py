"""Download the full ECDICT assets into the package data directory."""

import sys
from pathlib import Path

import requests

from ecdict_lookup.assets import DICTIONARY_ASSET, LEMMA_ASSET, asset_path

ECDICT_BASE_URL = "https://raw.githubusercontent.com/skywind3000/ECDICT/master"
ECDICT_URL = f"{ECDICT_BASE_URL}/ecdict.csv"
LEMMA_URL = f"{ECDICT_BASE_URL}/lemma.en.txt"

DEFAULT_TIMEOUT = 300
CHUNK_SIZE = 8192


def _file_exists_and_nonempty(path: Path) -> bool:
    """Check if file exists and has size > 0."""
    return path.exists() and path.stat().st_size > 0


def _download_to_file(url: str, dest: Path, desc: str) -> None:
    """Download a URL to a file with progress reporting.

    Writes to a temporary sibling first so an interrupted download never
    replaces a working asset.
    """
    print(f"Downloading {desc}...")
    print(f"  URL: {url}")
    print(f"  Destination: {dest}")

    dest.parent.mkdir(parents=True, exist_ok=True)
    partial = dest.with_name(dest.name + ".part")

    response = requests.get(url, stream=True, timeout=DEFAULT_TIMEOUT)
    response.raise_for_status()

    total_size = int(response.headers.get("content-length", 0))
    downloaded = 0

    with partial.open("wb") as f:
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            f.write(chunk)
            downloaded += len(chunk)
            mb_done = downloaded / (1024 * 1024)
            if total_size > 0:
                pct = (downloaded / total_size) * 100
                mb_total = total_size / (1024 * 1024)
                print(f"\r  Progress: {mb_done:.1f}/{mb_total:.1f} MB ({pct:.1f}%)", end="")
            else:
                print(f"\r  Downloaded: {mb_done:.1f} MB", end="")

    print()  # newline after progress
    partial.replace(dest)
    print(f"  Saved: {dest.stat().st_size / (1024 * 1024):.1f} MB")


def _download_asset(url: str, dest: Path, desc: str, force: bool) -> dict[str, int]:
    if not force and _file_exists_and_nonempty(dest):
        print(f"Skipping {desc} (already exists): {dest}")
        return {"downloaded": 0, "skipped": 1}

    _download_to_file(url, dest, desc)
    return {"downloaded": 1, "skipped": 0}


def download_dictionary(force: bool = False, dest: Path | None = None) -> dict[str, int]:
    """Download the ECDICT tabular dictionary.

    Returns stats dict with 'downloaded' and 'skipped' counts.
    """
    dest = dest or asset_path(DICTIONARY_ASSET)
    return _download_asset(ECDICT_URL, dest, "ECDICT dictionary", force)


def download_lemma(force: bool = False, dest: Path | None = None) -> dict[str, int]:
    """Download the ECDICT lemma rules.

    Returns stats dict with 'downloaded' and 'skipped' counts.
    """
    dest = dest or asset_path(LEMMA_ASSET)
    return _download_asset(LEMMA_URL, dest, "ECDICT lemma rules", force)


def download_all(force: bool = False, dest_dir: Path | None = None) -> dict[str, dict[str, int]]:
    """Download both assets.

    The bundled files are small samples, so pass force=True to replace them
    with the upstream data. Returns a dict mapping asset name to stats dict.
    """
    results: dict[str, dict[str, int]] = {}

    dictionary_dest = dest_dir / DICTIONARY_ASSET if dest_dir else None
    lemma_dest = dest_dir / LEMMA_ASSET if dest_dir else None

    print("=" * 60)
    print("Downloading ECDICT dictionary")
    print("=" * 60)
    results["dictionary"] = download_dictionary(force, dictionary_dest)
    print()

    print("=" * 60)
    print("Downloading ECDICT lemma rules")
    print("=" * 60)
    results["lemma"] = download_lemma(force, lemma_dest)
    print()

    total_downloaded = sum(r["downloaded"] for r in results.values())
    total_skipped = sum(r["skipped"] for r in results.values())
    print(f"  Downloaded: {total_downloaded} files")
    print(f"  Skipped:    {total_skipped} files")

    return results


if __name__ == "__main__":
    force = "--force" in sys.argv
    download_all(force=force)
