from typing import Set


class OrganizerFileConstants:
    SOURCE_EXTENSIONS: Set[str] = {".ts", ".tsx", ".js", ".jsx"}
    JSON_EXTENSION = ".json"
    SCANNED_EXTENSIONS: Set[str] = SOURCE_EXTENSIONS | {JSON_EXTENSION}

    # Dependency cache, never descended into
    IGNORED_DIRECTORIES: Set[str] = {"node_modules"}


class OrganizerParsingConstants:
    # The tsx grammar covers TypeScript annotations and JSX markup for every extension
    GRAMMAR = "tsx"

    IMPORT_SOURCE_QUERY = """
        (import_statement
            source: (string) @source)
    """

    STRING_QUOTES = "'\""


class OrganizerResolutionConstants:
    ANY_EXTENSION = ".*"

    # Tier names, in the order they are tried
    TIER_NESTED = "nested"
    TIER_SOURCE_ROOT = "source-root"
    TIER_EXACT = "exact"
    TIER_EXTENSION = "extension"
    TIER_CROSS_FOLDER = "cross-folder"

    SKIP_NON_SOURCE_FOLDER = "non-source folder"
    SKIP_EXTERNAL = "external module"
    SKIP_UNRESOLVED = "no match"
