"""Fetching, caching and unpacking of CLDR JSON release archives."""

from __future__ import annotations

import json
import zipfile
from collections.abc import Iterable
from pathlib import Path

import requests
from tqdm import tqdm

DEFAULT_USER_AGENT = "localedata-cldr-generator/1.0"
DEFAULT_TIMEOUT_SECONDS = 60
CHUNK_SIZE = 64 * 1024


class DownloadError(Exception):
    """Raised when the CLDR archive cannot be downloaded."""


class ExtractionError(Exception):
    """Raised when the CLDR archive cannot be extracted."""


def download_file(url: str, destination: Path) -> None:
    """Stream ``url`` into ``destination`` with a progress bar.

    The body is written to a ``.part`` sibling first and only renamed into
    place once complete, so an interrupted download never leaves a truncated
    archive where a cached one is expected.

    Raises:
        DownloadError: If the request fails or returns an error status.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    partial = destination.with_name(destination.name + ".part")
    try:
        with requests.get(
            url,
            stream=True,
            timeout=DEFAULT_TIMEOUT_SECONDS,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        ) as response:
            response.raise_for_status()
            with (
                partial.open("wb") as output,
                tqdm(
                    desc=f"Downloading {destination.name}",
                    total=int(response.headers.get("content-length", 0)) or None,
                    unit="iB",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar,
            ):
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    bar.update(output.write(chunk))
    except requests.RequestException as e:
        partial.unlink(missing_ok=True)
        raise DownloadError(f"Error downloading {url}: {e}") from e
    partial.replace(destination)


def fetch_archive(url: str, cache_path: Path) -> tuple[Path, bool]:
    """Return the cached archive, downloading it first when absent.

    The flag is ``True`` when the archive was already cached.
    """
    if cache_path.is_file():
        return cache_path, True
    download_file(url, cache_path)
    return cache_path, False


def _package_of(member: zipfile.ZipInfo) -> str:
    return member.filename.split("/", 1)[0]


def extract_archive(
    archive_path: Path,
    destination: Path,
    packages: Iterable[str] | None = None,
) -> int:
    """Unpack a CLDR JSON archive and return the number of extracted members.

    Args:
        archive_path: Path to the ZIP archive.
        destination: Directory to extract to.
        packages: Top-level CLDR package directories to keep, e.g.
            ``cldr-core``. Every member is extracted when omitted.

    Raises:
        ExtractionError: If the archive is unreadable, holds none of the
            requested packages, or cannot be written out.
    """
    wanted = frozenset(packages) if packages is not None else None
    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = [
                member
                for member in archive.infolist()
                if wanted is None or _package_of(member) in wanted
            ]
            if wanted is not None:
                missing = wanted - {_package_of(member) for member in members}
                if missing:
                    raise ExtractionError(
                        f"Archive '{archive_path.name}' is missing CLDR packages: "
                        + ", ".join(sorted(missing))
                    )
            for member in tqdm(members, desc=f"Extracting {archive_path.name}", unit="file"):
                archive.extract(member, destination)
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"Failed to open zip file '{archive_path}'. It may be corrupted."
        ) from e
    except OSError as e:
        raise ExtractionError(f"Error extracting archive: {e}") from e
    return len(members)


def load_json(path: Path) -> dict:
    """Load a UTF-8 JSON file from disk."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)
