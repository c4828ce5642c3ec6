"""Directory discovery of candidate metadata files."""

import logging
import os
from pathlib import Path
from typing import Union

from ..core.model import Candidate
from .attributes import is_hidden

logger = logging.getLogger(__name__)


def normalise_extension(extension: str) -> str:
    ext = (extension or "").strip()
    if ext.startswith("."):
        ext = ext[1:]
    if not ext:
        raise ValueError("File extension must be a non-empty string")
    return ext.lower()


def scan_directory(directory: Union[Path, str], extension: str) -> list[Candidate]:
    """Return the visible regular files in `directory` ending in `.extension`.

    Matching is case-insensitive on the file name only. A missing or
    unreadable directory yields an empty list.
    """
    ext = normalise_extension(extension)
    suffix = "." + ext
    directory = Path(directory)

    try:
        if not directory.is_dir():
            logger.debug("Metadata directory %s does not exist or is not a directory", directory)
            return []
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning("Unable to list metadata directory %s: %s", directory, e)
        return []

    candidates = []
    for entry in entries:
        if not entry.name.lower().endswith(suffix):
            continue
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        path = Path(entry.path)
        if is_hidden(path):
            logger.debug("Skipping hidden metadata file %s", path)
            continue
        candidates.append(Candidate(path=path, extension=ext))
    return candidates
