import glob
import os
from pathlib import Path
from typing import Callable, List

from import_organizer.models.domain_models import normalize_path

# Any callable mapping one glob pattern to the files it matches
FileFinder = Callable[[str], List[Path]]


class GlobFinder:
    """Filesystem-backed finder: regular files only, sorted, normalized."""

    def __call__(self, pattern: str) -> List[Path]:
        matches = glob.glob(pattern)
        return sorted(normalize_path(m) for m in matches if os.path.isfile(m))
