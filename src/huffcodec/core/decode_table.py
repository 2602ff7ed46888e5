"""Persisted decode table (v1).

The decode table is the only state shared between an encoding run and a
later, independent decoding run. Format: one JSON object, UTF-8, sorted keys.

    {
      "spec": "huffcodec.decode-table.v1",
      "lastbits": 4,
      "codes": {"0": 97, "10": 98, "11": 99}
    }

This module intentionally stays *small* and strict:
  - JSON only
  - explicit schema id
  - unknown keys are rejected
  - a table that is not a bijection or not prefix-free is rejected
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from huffcodec.core.code_table import DecodeTable, is_prefix_free
from huffcodec.core.frequency import MAX_SYMBOL
from huffcodec.errors import ResourceOpenError, TableLoadError

SPEC_ID_V1 = "huffcodec.decode-table.v1"


@dataclass(frozen=True)
class DecodeTableDoc:
    codes: DecodeTable = field(default_factory=dict)
    lastbits: int | None = None


def dump_decode_table(doc: DecodeTableDoc) -> str:
    obj = {
        "spec": SPEC_ID_V1,
        "lastbits": doc.lastbits,
        "codes": {code: int(sym) for code, sym in doc.codes.items()},
    }
    return json.dumps(obj, sort_keys=True, indent=2) + "\n"


def _parse_codes(v: Any) -> DecodeTable:
    if not isinstance(v, dict):
        raise TableLoadError("decode table: 'codes' deve essere un oggetto {bits: byte}")
    codes: DecodeTable = {}
    seen: dict[int, str] = {}
    for code, sym in v.items():
        if not isinstance(code, str) or not code or set(code) - {"0", "1"}:
            raise TableLoadError(f"decode table: chiave non valida {code!r} (solo '0'/'1')")
        # bool e' un int: lo escludiamo esplicitamente
        if isinstance(sym, bool) or not isinstance(sym, int) or not 0 <= sym <= MAX_SYMBOL:
            raise TableLoadError(f"decode table: valore non valido per {code!r}: {sym!r}")
        if sym in seen:
            raise TableLoadError(
                f"decode table: byte {sym} mappato da {seen[sym]!r} e {code!r}"
            )
        seen[sym] = code
        codes[code] = sym
    if not is_prefix_free(codes):
        raise TableLoadError("decode table: i codici non sono prefix-free")
    return codes


def _parse_lastbits(obj: dict[str, Any]) -> int | None:
    v = obj.get("lastbits")
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 8:
        raise TableLoadError(f"decode table: 'lastbits' deve essere un intero 0..8 o null, non {v!r}")
    return v


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in pairs:
        if k in out:
            raise TableLoadError(f"decode table: chiave duplicata {k!r}")
        out[k] = v
    return out


def parse_decode_table(text: str) -> DecodeTableDoc:
    try:
        obj = json.loads(text, object_pairs_hook=_reject_duplicates)
    except ValueError as e:
        raise TableLoadError(f"decode table: JSON non valido: {e}") from e
    if not isinstance(obj, dict):
        raise TableLoadError("decode table: il JSON deve essere un oggetto")

    allowed = {"spec", "lastbits", "codes"}
    extra = sorted(set(obj.keys()) - allowed)
    if extra:
        raise TableLoadError(f"decode table: chiavi non supportate: {', '.join(extra)}")

    spec_id = obj.get("spec")
    if spec_id != SPEC_ID_V1:
        raise TableLoadError(
            f"decode table: spec non supportata: {spec_id!r} (attesa {SPEC_ID_V1!r})"
        )
    if "codes" not in obj:
        raise TableLoadError("decode table: campo 'codes' richiesto")

    return DecodeTableDoc(codes=_parse_codes(obj["codes"]), lastbits=_parse_lastbits(obj))


def save_decode_table(path: str | Path, doc: DecodeTableDoc) -> None:
    p = Path(path)
    text = dump_decode_table(doc)
    try:
        with p.open("w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise ResourceOpenError(f"impossibile scrivere la decode table {p}: {e}") from e


def load_decode_table(path: str | Path) -> DecodeTableDoc:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise TableLoadError(f"decode table non trovata: {p}") from e
    except UnicodeDecodeError as e:
        raise TableLoadError(f"decode table non UTF-8: {p}") from e
    except OSError as e:
        raise ResourceOpenError(f"impossibile aprire la decode table {p}: {e}") from e
    return parse_decode_table(text)
