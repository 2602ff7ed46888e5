"""File-level compress/decompress.

Every file is opened in a ``with`` block; a failed open is fatal for the
operation (ResourceOpenError), nothing proceeds with an unusable handle.
"""

from __future__ import annotations

import sys
from pathlib import Path

from huffcodec.core.code_table import max_code_length, min_code
from huffcodec.core.codec_huffman import CodecHuffman
from huffcodec.core.decode_table import load_decode_table, save_decode_table
from huffcodec.errors import ResourceOpenError


def _read_bytes(path: str | Path, what: str) -> bytes:
    p = Path(path)
    try:
        with p.open("rb") as f:
            return f.read()
    except OSError as e:
        raise ResourceOpenError(f"impossibile aprire {what} {p}: {e}") from e


def _write_bytes(path: str | Path, data: bytes, what: str) -> None:
    p = Path(path)
    try:
        with p.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise ResourceOpenError(f"impossibile scrivere {what} {p}: {e}") from e


def compress_file(
    input_path: str | Path,
    target_path: str | Path,
    decode_table_path: str | Path,
    *,
    strict: bool = False,
    pad: bool = True,
) -> int:
    """Compress input_path into target_path + decode table. Returns skipped non-ASCII bytes."""
    data = _read_bytes(input_path, "l'input")

    res = CodecHuffman(strict=strict, pad=pad).compress_bytes(data)
    if res.unsupported:
        print(
            f"[huffcodec] warning: {res.unsupported} byte non-ASCII in {input_path} ignorati; "
            "l'output decompresso non coincidera' con l'input",
            file=sys.stderr,
        )

    _write_bytes(target_path, res.bitstream, "il file compresso")
    try:
        save_decode_table(decode_table_path, res.table)
    except ResourceOpenError:
        # bitstream senza tabella: indecodificabile, non lo lasciamo su disco
        Path(target_path).unlink(missing_ok=True)
        raise
    return res.unsupported


def decompress_file(
    input_path: str | Path,
    target_path: str | Path,
    decode_table_path: str | Path,
    *,
    strict: bool = False,
) -> None:
    # tabella prima: senza tabella valida non si legge nemmeno il bitstream
    table = load_decode_table(decode_table_path)
    bitstream = _read_bytes(input_path, "il file compresso")
    data = CodecHuffman(strict=strict).decompress_bytes(bitstream, table)
    _write_bytes(target_path, data, "l'output")


def print_stats(original_path: str | Path, compressed_path: str | Path, table_path: str | Path) -> None:
    original_path = Path(original_path)
    compressed_path = Path(compressed_path)
    table_path = Path(table_path)

    size_orig = original_path.stat().st_size
    size_comp = compressed_path.stat().st_size
    size_table = table_path.stat().st_size

    print("=== huffcodec stats ===")
    print(f"File originale : {original_path} ({size_orig} byte)")
    print(f"File compresso : {compressed_path} ({size_comp} byte)")
    print(f"Decode table   : {table_path} ({size_table} byte)")

    if size_orig == 0:
        print("File originale vuoto: niente statistiche sensate")
        print("=======================")
        return

    ratio = size_comp / size_orig
    bps = (size_comp * 8) / size_orig

    print(f"Rapporto       : {ratio:.3f} (1.0 = nessuna compressione)")
    print(f"Bit/simbolo    : {bps:.3f} (8.0 = non compresso)")

    codes = load_decode_table(table_path).codes
    print(f"Simboli        : {len(codes)}")
    print(f"Codice minimo  : {min_code(codes)}")
    print(f"Lunghezza max  : {max_code_length(codes)} bit")
    print("=======================")
