"""TypeScript and TSX source transformation backed by tree-sitter."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import PurePosixPath

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from regbuild.errors import SourceParseError

__all__ = ["AUTHORING_DIRECTIVES", "strip_declarations"]

# Preview-only exports read by the docs site.
AUTHORING_DIRECTIVES: tuple[str, ...] = ("iframeHeight", "containerClassName", "description")

_VARIABLE_DECLARATION_TYPES = {"lexical_declaration", "variable_declaration"}

# Plain TypeScript allows `<T>expr` casts, which the TSX grammar reads as JSX.
_TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}


@lru_cache(maxsize=2)
def _language(tsx: bool) -> Language:
    if tsx:
        return Language(tree_sitter_typescript.language_tsx())
    return Language(tree_sitter_typescript.language_typescript())


def _language_for(path: str) -> Language:
    return _language(PurePosixPath(path).suffix not in _TYPESCRIPT_SUFFIXES)


def _first_error_line(node: Node) -> int | None:
    if node.is_error or node.is_missing:
        return node.start_point[0] + 1
    for child in node.children:
        line = _first_error_line(child)
        if line is not None:
            return line
    return None


def _variable_declaration(statement: Node) -> Node | None:
    if statement.type in _VARIABLE_DECLARATION_TYPES:
        return statement
    if statement.type == "export_statement":
        declaration = statement.child_by_field_name("declaration")
        if declaration is not None and declaration.type in _VARIABLE_DECLARATION_TYPES:
            return declaration
    return None


def _declared_name(declarator: Node, source: bytes) -> str | None:
    name = declarator.child_by_field_name("name")
    # Destructuring patterns never bind a directive name on their own.
    if name is None or name.type != "identifier":
        return None
    return source[name.start_byte : name.end_byte].decode("utf-8")


def _statement_span(statement: Node, source: bytes) -> tuple[int, int]:
    start = statement.start_byte
    while start > 0 and source[start - 1 : start] in (b" ", b"\t"):
        start -= 1
    at_line_start = start == 0 or source[start - 1 : start] == b"\n"
    if not at_line_start:
        return statement.start_byte, statement.end_byte

    end = statement.end_byte
    while source[end : end + 1] in (b" ", b"\t"):
        end += 1
    if source[end : end + 2] == b"\r\n":
        end += 2
    elif source[end : end + 1] == b"\n":
        end += 1
    return start, end


def _declarator_spans(declarators: list[Node], removed: list[bool]) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    for i, declarator in enumerate(declarators):
        if not removed[i]:
            continue
        if not all(removed[:i]):
            # Take the separator in front, back to the previous declarator.
            spans.append((declarators[i - 1].end_byte, declarator.end_byte))
        else:
            spans.append((declarator.start_byte, declarators[i + 1].start_byte))
    return spans


def strip_declarations(
    text: str,
    names: Iterable[str] = AUTHORING_DIRECTIVES,
    path: str = "<source>",
) -> str:
    """Remove top-level variable declarations bound to any of ``names``.

    ``path`` selects the grammar: plain TypeScript for `.ts`, `.mts` and `.cts`
    files, TSX for everything else. Text outside the removed declarations is
    kept byte for byte, so a file declaring none of the names comes back
    unchanged.

    Raises:
        SourceParseError: If ``text`` is not syntactically valid for its grammar.
    """
    source = text.encode("utf-8")
    tree = Parser(_language_for(path)).parse(source)
    root = tree.root_node
    if root.has_error:
        raise SourceParseError(path=path, line=_first_error_line(root))

    targets = set(names)
    spans: list[tuple[int, int]] = []
    for statement in root.named_children:
        declaration = _variable_declaration(statement)
        if declaration is None:
            continue
        declarators = [c for c in declaration.named_children if c.type == "variable_declarator"]
        removed = [_declared_name(d, source) in targets for d in declarators]
        if not any(removed):
            continue
        if all(removed):
            spans.append(_statement_span(statement, source))
        else:
            spans.extend(_declarator_spans(declarators, removed))

    if not spans:
        return text

    output = bytearray(source)
    for start, end in sorted(spans, reverse=True):
        del output[start:end]
    return output.decode("utf-8")
