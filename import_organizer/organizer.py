import time
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from loguru import logger

from import_organizer.analyzers.resolver import TieredResolver
from import_organizer.config.constants import OrganizerResolutionConstants
from import_organizer.exceptions import ProjectNotFoundError
from import_organizer.extractors.base_extractor import ImportExtractor
from import_organizer.fs.relocator import Relocator
from import_organizer.fs.scanner import scan_project
from import_organizer.models.domain_models import (
    ExtractionStatus,
    FileState,
    ImportKind,
    OrganizeReport,
    ProjectConfiguration,
    SkippedImport,
    SourceFile,
    normalize_path,
)
from import_organizer.utils.common import display_path

# One pending move: (matched file, destination directory)
RelocationStep = Tuple[Path, Path]
Frame = Tuple[SourceFile, Iterator[RelocationStep]]


class ProjectOrganizer:
    """
    Drives extraction, resolution and relocation over the import graph.

    Propagation is depth-first: when a file is relocated it is fully processed,
    including everything it drags along, before the importer moves on to its
    next match or import. The traversal uses an explicit stack of per-file step
    iterators, and a file path is entered at most once per run, which bounds
    the work on cyclic import graphs.
    """

    def __init__(self, config: ProjectConfiguration,
                 extractor: Optional[ImportExtractor] = None,
                 resolver: Optional[TieredResolver] = None,
                 relocator: Optional[Relocator] = None):
        if extractor is None:
            from import_organizer.extractors.import_extractor import TreeSitterImportExtractor
            extractor = TreeSitterImportExtractor()

        self.config = config
        self.extractor = extractor
        self.resolver = resolver or TieredResolver(config)
        self.relocator = relocator or Relocator()
        self.states: Dict[Path, FileState] = {}
        self.report = OrganizeReport(root_directory=config.root_directory.as_posix())

    def run(self, files: Optional[List[Path]] = None) -> OrganizeReport:
        if files is None:
            files = scan_project(self.config.root_directory)
        self.report.files_scanned = len(files)
        logger.info(f"Found {len(files)} files to organize")

        for file in files:
            path = normalize_path(file)
            if self.state_of(path) == FileState.DONE:
                continue
            if not path.is_file():
                # Relocated earlier in this run and processed at its new path
                logger.info(f"⏩ Skipped file no longer at scanned path: {self._display(path)}")
                continue
            self.process(path)

        return self.report

    def state_of(self, path: Path) -> FileState:
        return self.states.get(normalize_path(path), FileState.UNVISITED)

    def process(self, path: Path) -> None:
        path = normalize_path(path)
        if self.state_of(path) != FileState.UNVISITED:
            return

        stack: List[Frame] = [self._enter(path)]
        while stack:
            source_file, steps = stack[-1]
            step = next(steps, None)
            if step is None:
                stack.pop()
                self._finish(source_file)
                continue

            match, destination_directory = step
            if not match.is_file():
                logger.info(f"⏩ Skipped match moved earlier in this run: {self._display(match)}")
                continue

            relocation = self.relocator.relocate(match, destination_directory)
            if relocation.is_noop:
                self.report.noop_relocations += 1
            else:
                self.report.relocations.append(relocation)

            target = relocation.destination
            if self.state_of(target) != FileState.UNVISITED:
                logger.debug(f"Already visited, not reprocessing: {self._display(target)}")
                continue
            stack.append(self._enter(target))

    def _enter(self, path: Path) -> Frame:
        source_file = SourceFile(path, state=FileState.IN_PROGRESS)
        self.states[path] = FileState.IN_PROGRESS
        self.report.files_processed += 1
        logger.info(f"📂 Starting to handle file: {self._display(path)}")
        return source_file, self._relocation_steps(source_file)

    def _finish(self, source_file: SourceFile) -> None:
        source_file.state = FileState.DONE
        self.states[source_file.path] = FileState.DONE
        if not source_file.is_json:
            logger.info(f"🏁 Finished handling file: {self._display(source_file.path)}")

    def _relocation_steps(self, source_file: SourceFile) -> Iterator[RelocationStep]:
        if source_file.is_json:
            logger.info(f"⏩ Skipped JSON file: {self._display(source_file.path)}")
            return

        result = self.extractor.extract(source_file.path)
        if result.status == ExtractionStatus.PARSE_FAILED:
            logger.warning(f"Could not parse {self._display(source_file.path)}, no imports followed")
            self.report.parse_failures.append(source_file.path.as_posix())

        for specifier in result.imports:
            logger.info(f"🧩 Processing import: {specifier}")
            plan = self.resolver.plan(specifier, source_file.path)

            if plan.kind == ImportKind.EXTERNAL:
                logger.info(f"⏩ Skipped external module import: {specifier}")
                self._skip(source_file, specifier, plan.skipped_reason)
                continue
            if plan.skipped:
                logger.info(f"⏩ Skipped {plan.skipped_reason} import: {specifier}")
                self._skip(source_file, specifier, plan.skipped_reason)
                continue

            resolution = self.resolver.resolve(plan)
            if not resolution.found:
                logger.warning(f"❌ No files matched for import: {specifier}")
                self._skip(source_file, specifier, OrganizerResolutionConstants.SKIP_UNRESOLVED)
                continue

            for match in resolution.matches:
                logger.info(f"✅ Matched ({resolution.tier}) and moving file: {self._display(match)}")
                yield match, resolution.destination

    def _skip(self, source_file: SourceFile, specifier: str, reason: str) -> None:
        self.report.skipped_imports.append(
            SkippedImport(file_path=source_file.path.as_posix(), specifier=specifier, reason=reason)
        )

    def _display(self, path: Path) -> str:
        return display_path(path, self.config.root_directory)


def organize_project(config: ProjectConfiguration,
                     extractor: Optional[ImportExtractor] = None) -> OrganizeReport:
    """Reorganize ``config.root_directory`` in place and return a run summary."""
    root = config.root_directory
    if not root.is_dir():
        raise ProjectNotFoundError(root)

    start_time = time.perf_counter()
    logger.info(f"Organizing project at {root} (alias '{config.import_alias}', "
                f"source folders: {', '.join(config.source_folders)})")

    organizer = ProjectOrganizer(config, extractor=extractor)
    report = organizer.run()
    report.elapsed = time.perf_counter() - start_time

    logger.info(f"Moved {report.moved_files} files, {report.noop_relocations} already in place, "
                f"{len(report.skipped_imports)} imports skipped, "
                f"{len(report.parse_failures)} unparseable files in {report.elapsed:.2f}s")
    return report
