"""
Tiered resolution of aliased and relative import specifiers.

Planning is pure: ``plan_aliased`` and ``plan_relative`` turn a specifier into
an ordered list of tiers, each holding glob patterns and the directory a match
should end up in. ``TieredResolver`` runs a plan against an injected finder and
stops at the first tier that matches anything.
"""
import glob
import posixpath
from pathlib import Path
from typing import List, Optional

from loguru import logger

from import_organizer.analyzers.classifier import classify
from import_organizer.config.constants import OrganizerResolutionConstants as C
from import_organizer.fs.finder import FileFinder, GlobFinder
from import_organizer.models.domain_models import (
    ImportKind,
    ProjectConfiguration,
    Resolution,
    ResolutionPlan,
    ResolutionTier,
    normalize_path,
)


def _any_extension(path: Path) -> str:
    return glob.escape(str(path)) + C.ANY_EXTENSION


def plan_aliased(specifier: str, config: ProjectConfiguration) -> ResolutionPlan:
    remainder = specifier[len(config.import_alias):]
    segments = [segment for segment in remainder.split("/") if segment]

    if not segments or segments[0] not in config.source_folders:
        return ResolutionPlan(specifier, ImportKind.ALIASED, skipped_reason=C.SKIP_NON_SOURCE_FOLDER)

    first_segment = segments[0]
    file_name = segments[-1]
    dir_segments = segments[:-1]

    root = config.root_directory
    nested_dir = root.joinpath(*dir_segments)
    source_root_dir = root / first_segment

    return ResolutionPlan(
        specifier,
        ImportKind.ALIASED,
        tiers=(
            ResolutionTier(C.TIER_NESTED, (_any_extension(nested_dir / file_name),), nested_dir),
            ResolutionTier(C.TIER_SOURCE_ROOT, (_any_extension(source_root_dir / file_name),), source_root_dir),
        ),
    )


def plan_relative(specifier: str, importer: Path, config: ProjectConfiguration) -> ResolutionPlan:
    importer_dir = normalize_path(importer).parent
    resolved = normalize_path(importer_dir / specifier)

    tiers = [
        ResolutionTier(C.TIER_EXACT, (glob.escape(str(resolved)),), importer_dir),
        ResolutionTier(C.TIER_EXTENSION, (_any_extension(resolved),), importer_dir),
    ]

    # Only the search location changes; the match is still colocated with the importer
    name = posixpath.basename(specifier.rstrip("/"))
    if name and name not in (".", ".."):
        cross_folder = tuple(_any_extension(config.root_directory / folder / name)
                             for folder in config.source_folders)
        if cross_folder:
            tiers.append(ResolutionTier(C.TIER_CROSS_FOLDER, cross_folder, importer_dir))

    return ResolutionPlan(specifier, ImportKind.RELATIVE, tiers=tuple(tiers))


def plan_resolution(specifier: str, importer: Path, config: ProjectConfiguration) -> ResolutionPlan:
    kind = classify(specifier, config.import_alias)
    if kind == ImportKind.ALIASED:
        return plan_aliased(specifier, config)
    if kind == ImportKind.RELATIVE:
        return plan_relative(specifier, importer, config)
    return ResolutionPlan(specifier, ImportKind.EXTERNAL, skipped_reason=C.SKIP_EXTERNAL)


class TieredResolver:

    def __init__(self, config: ProjectConfiguration, finder: Optional[FileFinder] = None):
        self.config = config
        self.finder = finder or GlobFinder()

    def plan(self, specifier: str, importer: Path) -> ResolutionPlan:
        return plan_resolution(specifier, importer, self.config)

    def resolve(self, plan: ResolutionPlan) -> Resolution:
        """Try each tier in order; within a tier the first pattern with matches wins."""
        if plan.skipped or plan.kind == ImportKind.EXTERNAL:
            return Resolution(plan.specifier)

        for tier in plan.tiers:
            for pattern in tier.patterns:
                matches = self._find(pattern)
                if matches:
                    logger.debug(f"Tier '{tier.name}' matched {len(matches)} file(s) for {plan.specifier}")
                    return Resolution(plan.specifier, tuple(matches), tier.destination, tier.name)
            logger.debug(f"Tier '{tier.name}' found nothing for {plan.specifier}")

        return Resolution(plan.specifier)

    def _find(self, pattern: str) -> List[Path]:
        seen = set()
        matches = []
        for match in self.finder(pattern):
            if match not in seen:
                seen.add(match)
                matches.append(match)
        return matches
