"""Tests for infrastructure/golang/imports.py."""

from pathlib import Path

import pytest

from layercheck.domain.exceptions import ParsingError
from layercheck.infrastructure.golang import parse_imports, read_imports

SRC = Path("x.go")


class TestParseImports:
    """Tests for parse_imports() on well-formed sources."""

    def test_no_imports(self) -> None:
        assert parse_imports("package main\n\nfunc main() {}\n", SRC) == ()

    def test_single(self) -> None:
        assert parse_imports('package main\nimport "fmt"\n', SRC) == ("fmt",)

    def test_grouped(self) -> None:
        source = 'package main\n\nimport (\n\t"fmt"\n\t"os"\n)\n\nfunc main() {}\n'
        assert parse_imports(source, SRC) == ("fmt", "os")

    def test_named_dot_and_blank(self) -> None:
        source = (
            "package main\n"
            "import (\n"
            '\tf "fmt"\n'
            '\t. "strings"\n'
            '\t_ "embed"\n'
            ")\n"
        )
        assert parse_imports(source, SRC) == ("fmt", "strings", "embed")

    def test_multiple_declarations(self) -> None:
        source = 'package main\nimport "fmt"\nimport ("os"; "io")\nimport x "example.com/m/x"\n'
        assert parse_imports(source, SRC) == ("fmt", "os", "io", "example.com/m/x")

    def test_raw_string_path(self) -> None:
        assert parse_imports("package main\nimport `example.com/m/domain`\n", SRC) == (
            "example.com/m/domain",
        )

    def test_comments_skipped(self) -> None:
        source = (
            "// Package main does things.\n"
            "/* build notes */\n"
            "package main // trailing\n"
            "import (\n"
            '\t"fmt" // printing\n'
            "\t/* storage */ \"os\"\n"
            ")\n"
        )
        assert parse_imports(source, SRC) == ("fmt", "os")

    def test_duplicates_kept(self) -> None:
        assert parse_imports('package p\nimport ("fmt"; "fmt")\n', SRC) == ("fmt", "fmt")

    def test_byte_order_mark(self) -> None:
        assert parse_imports('\ufeffpackage p\nimport "fmt"\n', SRC) == ("fmt",)

    def test_body_not_tokenized(self) -> None:
        """Code after the import block need not be valid."""
        source = 'package p\nimport "fmt"\nfunc f() { x := @@@ "unterminated\n'
        assert parse_imports(source, SRC) == ("fmt",)

    def test_stops_at_first_non_import(self) -> None:
        source = 'package p\nvar x = 1\nimport "late"\n'
        assert parse_imports(source, SRC) == ()


class TestParseImportsErrors:
    """Tests for parse_imports() syntax errors."""

    def test_empty_file(self) -> None:
        with pytest.raises(ParsingError, match="expected 'package', got end of file"):
            parse_imports("", SRC)

    def test_missing_package_clause(self) -> None:
        with pytest.raises(ParsingError, match="expected 'package'"):
            parse_imports('import "fmt"\n', SRC)

    def test_missing_package_name(self) -> None:
        with pytest.raises(ParsingError, match="expected package name"):
            parse_imports('package "main"\n', SRC)

    def test_unterminated_group(self) -> None:
        with pytest.raises(ParsingError, match="expected import path, got end of file"):
            parse_imports('package p\nimport (\n\t"fmt"\n', SRC)

    def test_missing_path(self) -> None:
        with pytest.raises(ParsingError, match="expected import path"):
            parse_imports("package p\nimport f\n", SRC)

    def test_invalid_character_reported_with_offset(self) -> None:
        with pytest.raises(ParsingError, match="at offset 17"):
            parse_imports("package p\nimport @\n", SRC)

    def test_empty_path(self) -> None:
        with pytest.raises(ParsingError, match="empty import path"):
            parse_imports('package p\nimport ""\n', SRC)

    def test_escape_in_path(self) -> None:
        with pytest.raises(ParsingError, match="escape sequence"):
            parse_imports('package p\nimport "a\\tb"\n', SRC)

    def test_error_carries_path(self) -> None:
        with pytest.raises(ParsingError) as exc_info:
            parse_imports("", Path("dir/file.go"))
        assert exc_info.value.path == Path("dir/file.go")


class TestReadImports:
    """Tests for read_imports() file handling."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.go"
        path.write_text('package a\nimport "fmt"\n', encoding="utf-8")
        assert read_imports(path) == ("fmt",)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="file not found"):
            read_imports(tmp_path / "missing.go")

    def test_bad_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "a.go"
        path.write_bytes(b"package a\nimport \"\xff\"\n")
        with pytest.raises(ParsingError, match="encoding error"):
            read_imports(path)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="cannot read file"):
            read_imports(tmp_path)

    def test_symlink_loop(self, tmp_path: Path) -> None:
        """ELOOP and other OSErrors become ParsingError, not raw OSError."""
        path = tmp_path / "loop.go"
        path.symlink_to(path)
        with pytest.raises(ParsingError, match="cannot read file") as exc_info:
            read_imports(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, OSError)
