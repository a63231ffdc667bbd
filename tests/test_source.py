from pathlib import Path

import pytest

from bolang.bolang_source import FileSource, SourceProvider, StringSource


def test_string_source() -> None:
    source = StringSource("let x = 1;")
    assert source.read() == "let x = 1;"
    assert source.name == "<string>"
    assert StringSource("", name="repl").name == "repl"


def test_file_source_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "prog.bo"
    path.write_text("let größe = 1;", encoding="utf-8")
    source = FileSource(path)
    assert source.name == str(path)
    assert source.read() == "let größe = 1;"


def test_file_source_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        FileSource(tmp_path / "missing.bo").read()


def test_providers_satisfy_protocol(tmp_path: Path) -> None:
    providers: list[SourceProvider] = [
        StringSource("x"),
        FileSource(tmp_path / "a.bo"),
    ]
    assert all(hasattr(p, "name") and callable(p.read) for p in providers)
    assert "a.bo" in repr(providers[1])
