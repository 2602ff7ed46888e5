from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from huffcodec.core.decode_table import DecodeTableDoc


@dataclass(frozen=True)
class CompressResult:
    bitstream: bytes
    table: DecodeTableDoc
    unsupported: int = 0  # byte non-ASCII scartati (solo in modalita' non strict)


class Codec(ABC):
    """
    Minimal interface for whole-buffer codecs.

    The decode table is the only thing a later, independent decode run gets
    besides the bitstream.
    """

    codec_id: str

    @abstractmethod
    def compress_bytes(self, data: bytes) -> CompressResult:
        raise NotImplementedError

    @abstractmethod
    def decompress_bytes(self, bitstream: bytes, table: DecodeTableDoc) -> bytes:
        raise NotImplementedError
