import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple


DEFAULT_IMPORT_ALIAS = "@/"
DEFAULT_SOURCE_FOLDERS = ("components", "lib", "hooks", "utils", "types")


def normalize_path(path) -> Path:
    """Absolute, lexically normalized path (symlinks are not followed)."""
    return Path(os.path.normpath(os.path.abspath(str(path))))


class ImportKind(Enum):
    ALIASED = "aliased"
    RELATIVE = "relative"
    EXTERNAL = "external"


class FileState(Enum):
    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class ExtractionStatus(Enum):
    PARSED = "parsed"
    PARSE_FAILED = "parse_failed"
    SKIPPED_JSON = "skipped_json"


@dataclass(frozen=True)
class ProjectConfiguration:
    root_directory: Path
    source_folders: Tuple[str, ...] = DEFAULT_SOURCE_FOLDERS
    import_alias: str = DEFAULT_IMPORT_ALIAS

    def __post_init__(self):
        if not self.import_alias:
            raise ValueError("import_alias must be a non-empty prefix")
        # Ordered set: keep the first occurrence of every folder name
        folders = tuple(dict.fromkeys(f.strip("/") for f in self.source_folders if f.strip("/")))
        object.__setattr__(self, "root_directory", normalize_path(self.root_directory))
        object.__setattr__(self, "source_folders", folders)

    @classmethod
    def from_settings(cls, directory: Optional[str] = None) -> "ProjectConfiguration":
        from import_organizer.config.config import configs

        return cls(
            root_directory=Path(directory or configs.ORGANIZER_DEFAULT_DIR),
            source_folders=tuple(configs.source_folders),
            import_alias=configs.ORGANIZER_IMPORT_ALIAS,
        )


@dataclass
class SourceFile:
    path: Path
    state: FileState = FileState.UNVISITED

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()

    @property
    def is_json(self) -> bool:
        return self.extension == ".json"


@dataclass(frozen=True)
class ExtractionResult:
    imports: Tuple[str, ...]
    status: ExtractionStatus

    @property
    def parsed(self) -> bool:
        return self.status == ExtractionStatus.PARSED

    @classmethod
    def failed(cls) -> "ExtractionResult":
        return cls(imports=(), status=ExtractionStatus.PARSE_FAILED)

    @classmethod
    def json_leaf(cls) -> "ExtractionResult":
        return cls(imports=(), status=ExtractionStatus.SKIPPED_JSON)


@dataclass(frozen=True)
class ResolutionTier:
    name: str
    patterns: Tuple[str, ...]
    destination: Path


@dataclass(frozen=True)
class ResolutionPlan:
    specifier: str
    kind: ImportKind
    tiers: Tuple[ResolutionTier, ...] = ()
    skipped_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


@dataclass(frozen=True)
class Resolution:
    specifier: str
    matches: Tuple[Path, ...] = ()
    destination: Optional[Path] = None
    tier: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.matches)


@dataclass(frozen=True)
class Relocation:
    source: Path
    destination_directory: Path

    @property
    def destination(self) -> Path:
        return self.destination_directory / self.source.name

    @property
    def is_noop(self) -> bool:
        return normalize_path(self.source) == normalize_path(self.destination)


@dataclass
class SkippedImport:
    file_path: str
    specifier: str
    reason: str


@dataclass
class OrganizeReport:
    root_directory: str
    files_scanned: int = 0
    files_processed: int = 0
    relocations: List[Relocation] = field(default_factory=list)
    noop_relocations: int = 0
    parse_failures: List[str] = field(default_factory=list)
    skipped_imports: List[SkippedImport] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def moved_files(self) -> int:
        return len(self.relocations)

    def to_dict(self) -> Dict:
        return {
            "root_directory": self.root_directory,
            "files_scanned": self.files_scanned,
            "files_processed": self.files_processed,
            "relocations": [{"source": r.source.as_posix(),
                             "destination": r.destination.as_posix()} for r in self.relocations],
            "noop_relocations": self.noop_relocations,
            "parse_failures": list(self.parse_failures),
            "skipped_imports": [{"file_path": s.file_path,
                                 "specifier": s.specifier,
                                 "reason": s.reason} for s in self.skipped_imports],
            "elapsed": self.elapsed,
        }
