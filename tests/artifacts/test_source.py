"""Tests for strip_declarations()."""

from __future__ import annotations

import pytest

from regbuild.artifacts.source import strip_declarations
from regbuild.errors import SourceParseError


class TestStripDeclarations:
    def test_removes_const_with_its_line(self) -> None:
        text = 'const description = "A simple alert"\nexport function Alert() {}\n'
        assert strip_declarations(text) == "export function Alert() {}\n"

    def test_removes_exported_declarations(self) -> None:
        text = (
            '"use client"\n'
            "export const iframeHeight = \"600px\"\n"
            "export const containerClassName = \"w-full h-full\"\n"
            "export default function Page() {\n"
            "  return <main />\n"
            "}\n"
        )
        result = strip_declarations(text)
        assert result == '"use client"\nexport default function Page() {\n  return <main />\n}\n'

    def test_no_directive_returns_input_unchanged(self) -> None:
        text = 'import { cn } from "@/lib/utils"\n\nexport function Badge() {\n  return <span className={cn()} />\n}\n'
        assert strip_declarations(text) == text

    def test_empty_source(self) -> None:
        assert strip_declarations("") == ""

    def test_nested_declaration_untouched(self) -> None:
        text = 'export function Card() {\n  const description = "inner"\n  return <p>{description}</p>\n}\n'
        assert strip_declarations(text) == text

    def test_let_and_var_removed(self) -> None:
        text = 'let description = "a";\nvar iframeHeight = 300;\nexport const size = 1;\n'
        assert strip_declarations(text) == "export const size = 1;\n"

    def test_typed_declaration_removed(self) -> None:
        text = 'export const description: string = "typed"\nexport const Foo = 1\n'
        assert strip_declarations(text) == "export const Foo = 1\n"

    def test_trailing_declarator_removed_from_list(self) -> None:
        assert strip_declarations('const a = 1, description = "x";\n') == "const a = 1;\n"

    def test_leading_declarator_removed_from_list(self) -> None:
        assert strip_declarations('const description = "x", b = 2;\n') == "const b = 2;\n"

    def test_several_declarators_removed_from_list(self) -> None:
        text = 'const iframeHeight = 1, a = 2, description = "x", b = 3;\n'
        assert strip_declarations(text) == "const a = 2, b = 3;\n"

    def test_similar_names_kept(self) -> None:
        text = 'export const descriptionText = "keep"\n'
        assert strip_declarations(text) == text

    def test_custom_names(self) -> None:
        text = "const meta = {}\nexport const x = 1\n"
        assert strip_declarations(text, names=["meta"]) == "export const x = 1\n"

    def test_idempotent(self) -> None:
        text = 'export const description = "d"\n\nexport function A() {\n  return <div />\n}\n'
        once = strip_declarations(text)
        assert strip_declarations(once) == once

    def test_unparseable_source_raises(self) -> None:
        with pytest.raises(SourceParseError) as exc_info:
            strip_declarations("export function (\n", path="ui/broken.tsx")
        assert exc_info.value.path == "ui/broken.tsx"

    def test_typescript_cast_parsed_by_suffix(self) -> None:
        text = 'const el = <HTMLElement>document.body\nexport const description = "d"\nexport default el\n'
        assert strip_declarations(text, path="lib/u.ts") == "const el = <HTMLElement>document.body\nexport default el\n"

    def test_jsx_kept_for_tsx_suffix(self) -> None:
        text = 'export const description = "d"\nexport const A = () => <div />\n'
        assert strip_declarations(text, path="ui/a.tsx") == "export const A = () => <div />\n"
