"""Typed errors for huffcodec.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 0
EXIT_GENERIC = 10
EXIT_MISSING_RESOURCE = 12
EXIT_BAD_TABLE = 13
EXIT_CORRUPT_STREAM = 14


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success (also: wrong arguments, usage printed)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (tree invariant, missing code, unexpected error)"),
    ExitCodeInfo(EXIT_MISSING_RESOURCE, "MISSING_RESOURCE", "Input/output/table file cannot be opened"),
    ExitCodeInfo(EXIT_BAD_TABLE, "BAD_TABLE", "Decode table missing or malformed"),
    ExitCodeInfo(EXIT_CORRUPT_STREAM, "CORRUPT_STREAM", "Bitstream does not match its decode table"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/huffcodec/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Internal errors extend `HuffCodecError` and carry an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append("- Unsupported (non-ASCII) bytes are a warning unless `--strict` is given.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffCodecError(Exception):
    """Base error for huffcodec."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffCodecError):
    """Wrong or missing CLI arguments: usage is printed, exit is clean."""

    exit_code = EXIT_USAGE


class ResourceOpenError(HuffCodecError):
    exit_code = EXIT_MISSING_RESOURCE


class UnsupportedCharacterError(HuffCodecError):
    """Input byte outside 0..127 (only raised in strict mode)."""

    exit_code = EXIT_GENERIC


class TreeInvariantError(HuffCodecError):
    exit_code = EXIT_GENERIC


class LeafAttributeAccessError(HuffCodecError):
    exit_code = EXIT_GENERIC


class EncodeLookupError(HuffCodecError):
    exit_code = EXIT_GENERIC


class TableLoadError(HuffCodecError):
    exit_code = EXIT_BAD_TABLE


class CorruptStream(HuffCodecError):
    exit_code = EXIT_CORRUPT_STREAM
