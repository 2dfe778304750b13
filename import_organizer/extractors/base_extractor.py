from pathlib import Path
from typing import Protocol

from import_organizer.models.domain_models import ExtractionResult


class ImportExtractor(Protocol):
    def extract(self, file_path: Path) -> ExtractionResult: ...
    def extract_source(self, text: str, extension: str) -> ExtractionResult: ...
