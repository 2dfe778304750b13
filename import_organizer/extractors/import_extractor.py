from pathlib import Path
from typing import Dict, List

from loguru import logger
from tree_sitter import Language, Node, Parser, Query, QueryCursor
from tree_sitter_language_pack import get_language

from import_organizer.config.constants import OrganizerFileConstants, OrganizerParsingConstants
from import_organizer.models.domain_models import ExtractionResult, ExtractionStatus
from import_organizer.utils.common import read_file_content
from import_organizer.utils.tree_sitter_helper import extract_content, strip_quotes


class TreeSitterImportExtractor:
    """
    Collects the source specifier of every static ``import ... from "<x>"``
    declaration in a JS/TS module.

    Dynamic ``import()`` calls and ``require()`` are not import declarations
    and are never reported. A file the parser cannot handle cleanly reports
    ``PARSE_FAILED`` instead of raising, so one malformed file cannot abort a run.
    """

    def __init__(self, grammar: str = OrganizerParsingConstants.GRAMMAR):
        self.language: Language = get_language(grammar)
        self.parser = Parser(self.language)
        self._query_cache: Dict[str, Query] = {}

    def extract(self, file_path: Path) -> ExtractionResult:
        if file_path.suffix.lower() == OrganizerFileConstants.JSON_EXTENSION:
            return ExtractionResult.json_leaf()
        content = read_file_content(file_path)
        return self.extract_source(content, file_path.suffix)

    def extract_source(self, text: str, extension: str) -> ExtractionResult:
        if extension.lower() == OrganizerFileConstants.JSON_EXTENSION:
            return ExtractionResult.json_leaf()

        source = bytes(text, "utf8")
        try:
            tree = self.parser.parse(source)
            if tree.root_node.has_error:
                logger.debug("Syntax errors in module, treating it as having no imports")
                return ExtractionResult.failed()
            imports = self._import_sources(tree.root_node, source)
        except Exception as e:
            logger.debug(f"Import extraction failed: {e}")
            return ExtractionResult.failed()

        return ExtractionResult(imports=tuple(imports), status=ExtractionStatus.PARSED)

    def _import_sources(self, root_node: Node, source: bytes) -> List[str]:
        captures = self._query_captures(OrganizerParsingConstants.IMPORT_SOURCE_QUERY, root_node)
        # Declaration order
        nodes = sorted(captures.get("source", []), key=lambda node: node.start_byte)
        return [
            strip_quotes(extract_content(node, source), OrganizerParsingConstants.STRING_QUOTES)
            for node in nodes
        ]

    def _get_or_create_query(self, query_string: str) -> Query:
        if query_string not in self._query_cache:
            self._query_cache[query_string] = Query(self.language, query_string)
        return self._query_cache[query_string]

    def _query_captures(self, query_string: str, node: Node) -> dict:
        """Execute tree-sitter query and return captures."""
        query = self._get_or_create_query(query_string)
        return QueryCursor(query).captures(node)
