from __future__ import annotations

from dataclasses import dataclass

from huffcodec.core.bitstream import decode_bits, encode_bits
from huffcodec.core.code_table import build_code_table, invert_code_table
from huffcodec.core.codec_base import Codec, CompressResult
from huffcodec.core.decode_table import DecodeTableDoc
from huffcodec.core.frequency import count_frequencies, strip_unsupported
from huffcodec.core.tree import build_huffman_tree


def huffman_compress_core(data: bytes, *, strict: bool = False, pad: bool = True) -> CompressResult:
    """
    Core: data -> (bitstream, decode table)

    Frequency table and tree live only inside this call; the encode table is
    used right away, its inverse goes out as the persisted decode table.
    """
    freq = count_frequencies(data, strict=strict)
    if freq.unsupported:
        data = strip_unsupported(data)

    root = build_huffman_tree(freq)
    codes = build_code_table(root)
    bitstream, lastbits = encode_bits(data, codes, pad=pad)

    table = DecodeTableDoc(codes=invert_code_table(codes), lastbits=lastbits)
    return CompressResult(bitstream=bitstream, table=table, unsupported=freq.unsupported)


def huffman_decompress_core(bitstream: bytes, table: DecodeTableDoc, *, strict: bool = False) -> bytes:
    return decode_bits(bitstream, table.codes, lastbits=table.lastbits, strict=strict)


@dataclass(frozen=True)
class CodecHuffman(Codec):
    strict: bool = False
    pad: bool = True

    codec_id = "huffman"

    def compress_bytes(self, data: bytes) -> CompressResult:
        return huffman_compress_core(data, strict=self.strict, pad=self.pad)

    def decompress_bytes(self, bitstream: bytes, table: DecodeTableDoc) -> bytes:
        return huffman_decompress_core(bitstream, table, strict=self.strict)
