import os
from pathlib import Path
from typing import List

from loguru import logger

from import_organizer.config.constants import OrganizerFileConstants
from import_organizer.models.domain_models import normalize_path


def _is_hidden(name: str) -> bool:
    # Glob-style enumeration does not match dot-prefixed entries
    return name.startswith(".")


def scan_project(root: Path) -> List[Path]:
    """Every source or JSON file under ``root``, sorted and absolute."""
    root = normalize_path(root)
    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames
                       if d not in OrganizerFileConstants.IGNORED_DIRECTORIES and not _is_hidden(d)]
        for filename in filenames:
            if _is_hidden(filename):
                continue
            if os.path.splitext(filename)[1].lower() in OrganizerFileConstants.SCANNED_EXTENSIONS:
                files.append(normalize_path(os.path.join(dirpath, filename)))

    files.sort()
    logger.debug(f"Scanned {len(files)} eligible files under {root}")
    return files
