from tree_sitter import Node


def extract_content(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf8")


def strip_quotes(text: str, quotes: str) -> str:
    if len(text) >= 2 and text[0] in quotes and text[-1] == text[0]:
        return text[1:-1]
    return text
