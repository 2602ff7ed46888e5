from __future__ import annotations

import random
import string

import pytest

from huffcodec.core.code_table import is_prefix_free
from huffcodec.core.codec_huffman import CodecHuffman
from huffcodec.core.decode_table import dump_decode_table, parse_decode_table
from huffcodec.errors import UnsupportedCharacterError


def _roundtrip(data: bytes, codec: CodecHuffman | None = None) -> bytes:
    codec = codec or CodecHuffman()
    res = codec.compress_bytes(data)
    # passa dalla forma persistita, come farebbe un processo separato
    table = parse_decode_table(dump_decode_table(res.table))
    return codec.decompress_bytes(res.bitstream, table)


def test_aaab_scenario() -> None:
    res = CodecHuffman().compress_bytes(b"aaab")
    assert res.table.codes == {"0": ord("b"), "1": ord("a")}
    assert res.table.lastbits == 4
    assert len(res.bitstream) == 1
    assert CodecHuffman().decompress_bytes(res.bitstream, res.table) == b"aaab"


def test_roundtrip_text() -> None:
    data = (
        "FATTURA 1001\nRIGA ARTICOLO: vite M3 qty=10 prezzo=1.20\n"
        "\tTOTALE 12.00\r\n"
    ).encode("ascii")
    assert _roundtrip(data) == data


def test_roundtrip_random_ascii() -> None:
    rng = random.Random(1234)
    alphabet = string.printable
    for n in (1, 2, 7, 8, 9, 63, 1000):
        data = "".join(rng.choice(alphabet) for _ in range(n)).encode("ascii")
        assert _roundtrip(data, CodecHuffman(strict=True)) == data


def test_roundtrip_all_ascii_bytes() -> None:
    data = bytes(range(128)) * 3 + b"\x00" * 10
    res = CodecHuffman().compress_bytes(data)
    assert len(res.table.codes) == 128
    assert is_prefix_free(res.table.codes)
    assert _roundtrip(data) == data


def test_single_symbol_input() -> None:
    res = CodecHuffman().compress_bytes(b"zzzz")
    assert res.table.codes == {"0": ord("z")}
    assert res.bitstream == b"\x00"
    assert res.table.lastbits == 4
    assert CodecHuffman(strict=True).decompress_bytes(res.bitstream, res.table) == b"zzzz"


def test_empty_input() -> None:
    res = CodecHuffman().compress_bytes(b"")
    assert res.bitstream == b""
    assert res.table.codes == {}
    assert res.table.lastbits == 0
    assert _roundtrip(b"") == b""


def test_compress_is_deterministic() -> None:
    data = b"mississippi river banks\n" * 5
    r1 = CodecHuffman().compress_bytes(data)
    r2 = CodecHuffman().compress_bytes(data)
    assert r1 == r2
    assert dump_decode_table(r1.table) == dump_decode_table(r2.table)


def test_non_ascii_is_dropped_with_count() -> None:
    data = "caffè latte".encode("utf-8")
    res = CodecHuffman().compress_bytes(data)
    assert res.unsupported == 2
    assert CodecHuffman().decompress_bytes(res.bitstream, res.table) == b"caff latte"


def test_non_ascii_strict() -> None:
    with pytest.raises(UnsupportedCharacterError):
        CodecHuffman(strict=True).compress_bytes("caffè".encode("utf-8"))


def test_unpadded_mode_loses_tail() -> None:
    codec = CodecHuffman(pad=False)
    res = codec.compress_bytes(b"aaab")
    assert res.bitstream == b""
    assert codec.decompress_bytes(res.bitstream, res.table) == b""
