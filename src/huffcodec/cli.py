"""huffcodec CLI.

This is the stable CLI entrypoint (console-script: ``huffcodec``).

  huffcodec compress <input_path> <target_path> <decode_table_path>
  huffcodec decompress <input_path> <target_path> <decode_table_path>

Wrong or missing arguments print the usage and exit 0.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from huffcodec.errors import EXIT_GENERIC, HuffCodecError, UsageError


class _UsageParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(f"{self.format_usage()}{self.prog}: {message}")


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on non-ASCII input bytes and on undecodable trailing bits",
    )


def _add_paths(p: argparse.ArgumentParser) -> None:
    p.add_argument("input_path", type=Path)
    p.add_argument("target_path", type=Path)
    p.add_argument("decode_table_path", type=Path)


def _cmd_compress(ns: argparse.Namespace) -> int:
    from huffcodec.files import compress_file, print_stats

    compress_file(
        ns.input_path,
        ns.target_path,
        ns.decode_table_path,
        strict=bool(ns.strict),
        pad=not ns.no_pad,
    )
    if ns.stats:
        print_stats(ns.input_path, ns.target_path, ns.decode_table_path)
    return 0


def _cmd_decompress(ns: argparse.Namespace) -> int:
    from huffcodec.files import decompress_file

    decompress_file(ns.input_path, ns.target_path, ns.decode_table_path, strict=bool(ns.strict))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = _UsageParser(prog="huffcodec", description="Huffman compressor for ASCII text")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_c = sub.add_parser("compress", help="Compress a file, writing bitstream + decode table")
    _add_paths(p_c)
    p_c.add_argument(
        "--no-pad",
        action="store_true",
        help="Drop the trailing partial byte (historical format, not lossless)",
    )
    p_c.add_argument("--stats", action="store_true", help="Print size/ratio summary")
    _add_common_args(p_c)

    p_d = sub.add_parser("decompress", help="Decompress a file using its decode table")
    _add_paths(p_d)
    _add_common_args(p_d)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    try:
        ns = p.parse_args(argv)
    except UsageError as e:
        print(e)
        return e.exit_code

    try:
        if ns.cmd == "compress":
            return _cmd_compress(ns)
        if ns.cmd == "decompress":
            return _cmd_decompress(ns)
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except HuffCodecError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffcodec] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[huffcodec] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
