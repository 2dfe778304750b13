import shutil
from pathlib import Path

from loguru import logger

from import_organizer.exceptions import RelocationError
from import_organizer.models.domain_models import Relocation, normalize_path


class Relocator:
    """Moves a file into a directory, overwriting whatever is already there."""

    def relocate(self, source: Path, destination_directory: Path) -> Relocation:
        relocation = Relocation(normalize_path(source), normalize_path(destination_directory))
        destination = relocation.destination
        try:
            relocation.destination_directory.mkdir(parents=True, exist_ok=True)
            if relocation.is_noop:
                logger.debug(f"Already in place: {destination}")
                return relocation
            if destination.is_file():
                destination.unlink()
            shutil.move(str(relocation.source), str(destination))
        except OSError as e:
            raise RelocationError(relocation.source, destination, e) from e

        logger.debug(f"Moved {relocation.source} -> {destination}")
        return relocation
