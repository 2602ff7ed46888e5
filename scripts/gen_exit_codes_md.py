#!/usr/bin/env python3
"""Generate docs/exit_codes.md from src/huffcodec/errors.py (single source of truth).

  gen_exit_codes_md.py            rewrite the doc
  gen_exit_codes_md.py --check    exit 1 if the committed doc is stale
  gen_exit_codes_md.py --out F    write to F instead of docs/exit_codes.md
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
DEFAULT_OUT = REPO / "docs" / "exit_codes.md"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Render the exit-code table from huffcodec.errors")
    p.add_argument("--check", action="store_true", help="Compare only, do not write")
    p.add_argument("--out", type=Path, default=DEFAULT_OUT)
    ns = p.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from huffcodec.errors import render_exit_codes_markdown  # noqa: E402

    expected = render_exit_codes_markdown()
    out: Path = ns.out

    if ns.check:
        current = out.read_text(encoding="utf-8") if out.is_file() else None
        if current != expected:
            print(f"[huffcodec] {out} non aggiornato: rigenera con scripts/gen_exit_codes_md.py", file=sys.stderr)
            return 1
        print(f"[huffcodec] {out} OK")
        return 0

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(expected, encoding="utf-8")
    print(f"[huffcodec] wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
