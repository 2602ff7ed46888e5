from __future__ import annotations

from dataclasses import dataclass, field

from huffcodec.errors import UnsupportedCharacterError

# Alfabeto supportato: ASCII 7-bit
MAX_SYMBOL = 127


@dataclass(frozen=True)
class FrequencyTable:
    """byte -> occorrenze (solo 0..127), in ordine crescente di byte."""

    counts: dict[int, int] = field(default_factory=dict)
    unsupported: int = 0  # byte > 127 scartati

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def __len__(self) -> int:
        return len(self.counts)


def count_frequencies(data: bytes, *, strict: bool = False) -> FrequencyTable:
    """Count every byte in 0..127.

    Bytes above 127 are skipped and tallied in ``unsupported``; with
    ``strict=True`` the first one raises UnsupportedCharacterError instead.
    """
    freq = [0] * (MAX_SYMBOL + 1)
    unsupported = 0

    for pos, b in enumerate(data):
        if b > MAX_SYMBOL:
            if strict:
                raise UnsupportedCharacterError(
                    f"byte non-ASCII 0x{b:02x} alla posizione {pos} (supportati: 0..{MAX_SYMBOL})"
                )
            unsupported += 1
            continue
        freq[b] += 1

    counts = {sym: f for sym, f in enumerate(freq) if f > 0}
    return FrequencyTable(counts=counts, unsupported=unsupported)


def strip_unsupported(data: bytes) -> bytes:
    return bytes(b for b in data if b <= MAX_SYMBOL)
