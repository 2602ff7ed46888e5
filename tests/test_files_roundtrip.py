from __future__ import annotations

from pathlib import Path

import pytest

from huffcodec.core.decode_table import load_decode_table
from huffcodec.errors import ResourceOpenError, TableLoadError
from huffcodec.files import compress_file, decompress_file, print_stats


def test_file_roundtrip(tmp_path: Path) -> None:
    inp = tmp_path / "in.txt"
    out = tmp_path / "out.huf"
    table = tmp_path / "table.json"
    back = tmp_path / "back.txt"

    data = "HELLO 123\nRIGA ARTICOLO: vite M3 qty=10 prezzo=1.20\n" * 20
    inp.write_text(data, encoding="ascii")

    assert compress_file(inp, out, table) == 0
    assert out.stat().st_size < inp.stat().st_size
    assert load_decode_table(table).codes

    decompress_file(out, back, table)
    assert back.read_text(encoding="ascii") == data


def test_empty_file_roundtrip(tmp_path: Path) -> None:
    inp = tmp_path / "empty.txt"
    inp.write_bytes(b"")
    compress_file(inp, tmp_path / "out.huf", tmp_path / "t.json")
    assert (tmp_path / "out.huf").read_bytes() == b""
    decompress_file(tmp_path / "out.huf", tmp_path / "back.txt", tmp_path / "t.json")
    assert (tmp_path / "back.txt").read_bytes() == b""


def test_missing_input_is_fatal(tmp_path: Path) -> None:
    out = tmp_path / "out.huf"
    table = tmp_path / "table.json"
    with pytest.raises(ResourceOpenError):
        compress_file(tmp_path / "missing.txt", out, table)
    assert not out.exists()
    assert not table.exists()


def test_unwritable_target_is_fatal(tmp_path: Path) -> None:
    inp = tmp_path / "in.txt"
    inp.write_bytes(b"abc")
    with pytest.raises(ResourceOpenError):
        compress_file(inp, tmp_path / "no" / "such" / "dir.huf", tmp_path / "t.json")


def test_decompress_needs_table_first(tmp_path: Path) -> None:
    back = tmp_path / "back.txt"
    with pytest.raises(TableLoadError):
        decompress_file(tmp_path / "missing.huf", back, tmp_path / "missing.json")
    assert not back.exists()


def test_decompress_missing_stream(tmp_path: Path) -> None:
    inp = tmp_path / "in.txt"
    inp.write_bytes(b"abc")
    compress_file(inp, tmp_path / "out.huf", tmp_path / "t.json")
    with pytest.raises(ResourceOpenError):
        decompress_file(tmp_path / "gone.huf", tmp_path / "back.txt", tmp_path / "t.json")


def test_non_ascii_warning(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    inp = tmp_path / "in.txt"
    inp.write_text("perché no\n", encoding="utf-8")
    skipped = compress_file(inp, tmp_path / "out.huf", tmp_path / "t.json")
    assert skipped == 2
    err = capsys.readouterr().err
    assert "[huffcodec] warning" in err

    decompress_file(tmp_path / "out.huf", tmp_path / "back.txt", tmp_path / "t.json")
    assert (tmp_path / "back.txt").read_bytes() == b"perch no\n"


def test_print_stats(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    inp = tmp_path / "in.txt"
    inp.write_text("aaaaaaaabbbbcc\n", encoding="ascii")
    compress_file(inp, tmp_path / "out.huf", tmp_path / "t.json")
    print_stats(inp, tmp_path / "out.huf", tmp_path / "t.json")
    out = capsys.readouterr().out
    assert "huffcodec stats" in out
    assert "Rapporto" in out


def test_unwritable_table_removes_bitstream(tmp_path: Path) -> None:
    inp = tmp_path / "in.txt"
    out = tmp_path / "out.huf"
    inp.write_bytes(b"abracadabra\n")
    with pytest.raises(ResourceOpenError):
        compress_file(inp, out, tmp_path / "no" / "dir" / "t.json")
    assert not out.exists()


def test_print_stats_reports_codes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    inp = tmp_path / "in.txt"
    inp.write_text("aaab", encoding="ascii")
    compress_file(inp, tmp_path / "out.huf", tmp_path / "t.json")
    print_stats(inp, tmp_path / "out.huf", tmp_path / "t.json")
    out = capsys.readouterr().out
    assert "Simboli        : 2" in out
    assert "Codice minimo  : 0" in out
    assert "Lunghezza max  : 1 bit" in out
