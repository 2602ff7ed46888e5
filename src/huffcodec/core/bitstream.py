"""Bit-level packing of Huffman codes (MSB-first).

``lastbits`` follows the container convention: number of valid bits in the
final byte (1..8), 0 for an empty stream. ``None`` on decode means the tail
length is unknown (stream written without padding).
"""

from __future__ import annotations

from typing import Optional, Tuple

from huffcodec.core.code_table import DecodeTable, EncodeTable, max_code_length
from huffcodec.errors import CorruptStream, EncodeLookupError


def encode_bits(data: bytes, codes: EncodeTable, *, pad: bool = True) -> Tuple[bytes, int]:
    """
    data -> (bitstream, lastbits)

    pad=True: the trailing partial byte is zero-filled and kept.
    pad=False: the trailing partial byte is dropped (historical unpadded format).
    """
    if not data:
        return b"", 0

    out_bytes = bytearray()
    current_byte = 0
    bit_count = 0

    for pos, b in enumerate(data):
        code = codes.get(b)
        if code is None:
            raise EncodeLookupError(f"nessun codice per il byte {b} (posizione {pos})")
        for ch in code:
            current_byte = (current_byte << 1) | (ch == "1")
            bit_count += 1
            if bit_count == 8:
                out_bytes.append(current_byte)
                current_byte = 0
                bit_count = 0

    if bit_count > 0 and pad:
        current_byte <<= (8 - bit_count)
        out_bytes.append(current_byte)
        return bytes(out_bytes), bit_count

    return bytes(out_bytes), 8 if out_bytes else 0


def _check_lastbits(bitstream: bytes, lastbits: int) -> None:
    if not bitstream:
        if lastbits != 0:
            raise CorruptStream(f"lastbits={lastbits} ma bitstream vuoto")
        return
    if not 1 <= lastbits <= 8:
        raise CorruptStream(f"lastbits fuori range: {lastbits} (atteso 1..8)")


def decode_bits(
    bitstream: bytes,
    table: DecodeTable,
    *,
    lastbits: Optional[int] = None,
    strict: bool = False,
) -> bytes:
    """
    Growing-prefix match of the bitstream against the decode table.

    Leftover bits that never complete a code are discarded, unless
    ``strict`` is set (then they raise CorruptStream).
    """
    if lastbits is not None:
        _check_lastbits(bitstream, lastbits)
    if not bitstream:
        return b""
    if not table:
        raise CorruptStream("bitstream non vuoto ma tabella di decodifica vuota")

    limit = max_code_length(table)
    out = bytearray()
    frame = ""
    total_bytes = len(bitstream)

    for i, byte in enumerate(bitstream):
        bits_in_this_byte = 8
        if i == total_bytes - 1 and lastbits is not None:
            bits_in_this_byte = lastbits

        for bit_index in range(bits_in_this_byte):
            frame += "1" if (byte >> (7 - bit_index)) & 1 else "0"
            sym = table.get(frame)
            if sym is not None:
                out.append(sym)
                frame = ""
            elif len(frame) >= limit:
                raise CorruptStream(
                    f"sequenza di bit {frame!r} non presente nella tabella (byte {i})"
                )

    if frame and strict:
        raise CorruptStream(f"{len(frame)} bit finali non decodificabili: {frame!r}")

    return bytes(out)
