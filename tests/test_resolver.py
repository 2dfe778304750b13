"""
Test cases for tiered resolution.

Plans are checked without touching the filesystem; execution uses a fake
finder keyed by glob pattern so tier ordering can be asserted directly.
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from typing import Dict, List

from import_organizer.analyzers.resolver import TieredResolver, plan_aliased, plan_relative, plan_resolution
from import_organizer.models.domain_models import ImportKind, ProjectConfiguration

ROOT = Path("/project")


class FakeFinder:
    """Returns canned matches per pattern and records every query."""

    def __init__(self, matches: Dict[str, List[str]] = None):
        self.matches = matches or {}
        self.queries: List[str] = []

    def __call__(self, pattern: str) -> List[Path]:
        self.queries.append(pattern)
        return [Path(m) for m in self.matches.get(pattern, [])]


@pytest.fixture
def config() -> ProjectConfiguration:
    return ProjectConfiguration(root_directory=ROOT)


class TestPlanAliased:

    def test_nested_then_source_root(self, config):
        plan = plan_aliased("@/components/ui/Button", config)

        assert plan.kind == ImportKind.ALIASED
        assert not plan.skipped
        assert [t.name for t in plan.tiers] == ["nested", "source-root"]
        assert plan.tiers[0].patterns == ("/project/components/ui/Button.*",)
        assert plan.tiers[0].destination == ROOT / "components" / "ui"
        assert plan.tiers[1].patterns == ("/project/components/Button.*",)
        assert plan.tiers[1].destination == ROOT / "components"

    def test_direct_child_of_source_folder(self, config):
        plan = plan_aliased("@/lib/format", config)

        assert plan.tiers[0].patterns == ("/project/lib/format.*",)
        assert plan.tiers[0].destination == ROOT / "lib"
        assert plan.tiers[1].destination == ROOT / "lib"

    def test_folder_not_allowed_is_skipped(self, config):
        plan = plan_aliased("@/app/page", config)

        assert plan.skipped
        assert plan.skipped_reason == "non-source folder"
        assert plan.tiers == ()

    def test_bare_alias_is_skipped(self, config):
        assert plan_aliased("@/", config).skipped

    def test_custom_alias_and_folders(self):
        config = ProjectConfiguration(root_directory=ROOT, source_folders=("features",), import_alias="~/")
        plan = plan_aliased("~/features/auth/Login", config)

        assert plan.tiers[0].patterns == ("/project/features/auth/Login.*",)
        assert plan_aliased("~/components/Button", config).skipped

    def test_glob_characters_are_escaped(self, config):
        plan = plan_aliased("@/components/[id]/Page", config)

        assert plan.tiers[0].patterns == ("/project/components/[[]id]/Page.*",)


class TestPlanRelative:

    def test_exact_extension_and_cross_folder(self, config):
        importer = ROOT / "lib" / "foo.ts"
        plan = plan_relative("./bar", importer, config)

        assert plan.kind == ImportKind.RELATIVE
        assert [t.name for t in plan.tiers] == ["exact", "extension", "cross-folder"]
        assert plan.tiers[0].patterns == ("/project/lib/bar",)
        assert plan.tiers[1].patterns == ("/project/lib/bar.*",)
        assert plan.tiers[2].patterns == (
            "/project/components/bar.*",
            "/project/lib/bar.*",
            "/project/hooks/bar.*",
            "/project/utils/bar.*",
            "/project/types/bar.*",
        )
        # Every relative tier colocates with the importer
        assert {t.destination for t in plan.tiers} == {ROOT / "lib"}

    def test_parent_segments_are_normalized(self, config):
        plan = plan_relative("../utils/format", ROOT / "components" / "ui" / "Card.tsx", config)

        assert plan.tiers[0].patterns == ("/project/components/utils/format",)
        assert plan.tiers[2].patterns[0] == "/project/components/format.*"
        assert plan.tiers[0].destination == ROOT / "components" / "ui"

    def test_dot_only_specifier_has_no_cross_folder_tier(self, config):
        plan = plan_relative(".", ROOT / "lib" / "index.ts", config)

        assert [t.name for t in plan.tiers] == ["exact", "extension"]


class TestPlanResolution:

    def test_external_is_never_planned(self, config):
        plan = plan_resolution("react", ROOT / "index.ts", config)

        assert plan.kind == ImportKind.EXTERNAL
        assert plan.skipped
        assert plan.tiers == ()


class TestTieredResolver:

    def test_nested_match_wins_over_source_root(self, config):
        finder = FakeFinder({
            "/project/components/ui/Button.*": ["/project/components/ui/Button.tsx"],
            "/project/components/Button.*": ["/project/components/Button.tsx"],
        })
        resolver = TieredResolver(config, finder)

        resolution = resolver.resolve(resolver.plan("@/components/ui/Button", ROOT / "index.ts"))

        assert resolution.tier == "nested"
        assert resolution.matches == (Path("/project/components/ui/Button.tsx"),)
        assert resolution.destination == ROOT / "components" / "ui"
        assert finder.queries == ["/project/components/ui/Button.*"]

    def test_falls_back_to_source_root(self, config):
        finder = FakeFinder({"/project/components/Button.*": ["/project/components/Button.tsx"]})
        resolver = TieredResolver(config, finder)

        resolution = resolver.resolve(resolver.plan("@/components/ui/Button", ROOT / "index.ts"))

        assert resolution.tier == "source-root"
        assert resolution.destination == ROOT / "components"

    def test_no_tier_matches(self, config):
        finder = FakeFinder()
        resolver = TieredResolver(config, finder)

        resolution = resolver.resolve(resolver.plan("@/hooks/useAuth", ROOT / "index.ts"))

        assert not resolution.found
        assert resolution.tier is None
        assert len(finder.queries) == 2

    def test_relative_exact_before_extension(self, config):
        finder = FakeFinder({
            "/project/lib/data.json": ["/project/lib/data.json"],
            "/project/lib/data.json.*": ["/project/lib/data.json.bak"],
        })
        resolver = TieredResolver(config, finder)

        resolution = resolver.resolve(resolver.plan("./data.json", ROOT / "lib" / "index.ts"))

        assert resolution.tier == "exact"
        assert resolution.matches == (Path("/project/lib/data.json"),)

    def test_cross_folder_stops_at_first_matching_folder(self, config):
        finder = FakeFinder({
            "/project/hooks/bar.*": ["/project/hooks/bar.ts"],
            "/project/utils/bar.*": ["/project/utils/bar.ts"],
        })
        resolver = TieredResolver(config, finder)

        resolution = resolver.resolve(resolver.plan("./bar", ROOT / "lib" / "foo.ts"))

        assert resolution.tier == "cross-folder"
        assert resolution.matches == (Path("/project/hooks/bar.ts"),)
        assert resolution.destination == ROOT / "lib"
        assert "/project/utils/bar.*" not in finder.queries

    def test_every_match_of_winning_tier_is_returned(self, config):
        finder = FakeFinder({"/project/lib/Button.*": [
            "/project/lib/Button.module.css", "/project/lib/Button.tsx", "/project/lib/Button.tsx",
        ]})
        resolver = TieredResolver(config, finder)

        resolution = resolver.resolve(resolver.plan("@/lib/Button", ROOT / "index.ts"))

        assert resolution.matches == (Path("/project/lib/Button.module.css"), Path("/project/lib/Button.tsx"))

    def test_external_and_skipped_plans_never_query(self, config):
        finder = FakeFinder()
        resolver = TieredResolver(config, finder)

        assert not resolver.resolve(resolver.plan("lodash", ROOT / "index.ts")).found
        assert not resolver.resolve(resolver.plan("@/app/page", ROOT / "index.ts")).found
        assert finder.queries == []
