from __future__ import annotations

from typing import Dict

from huffcodec.core.tree import HuffmanNode
from huffcodec.errors import TreeInvariantError

EncodeTable = Dict[int, str]  # byte -> "0101..."
DecodeTable = Dict[str, int]  # "0101..." -> byte

# Codice assegnato quando l'albero e' una sola foglia
SINGLE_SYMBOL_CODE = "0"


def build_code_table(root: HuffmanNode | None) -> EncodeTable:
    """DFS from the root: "0" going left, "1" going right."""
    codes: EncodeTable = {}
    if root is None:
        return codes

    def dfs(node: HuffmanNode, path: str) -> None:
        if node.is_leaf():
            codes[node.byte] = path if path else SINGLE_SYMBOL_CODE
            return
        dfs(node.left, path + "0")
        dfs(node.right, path + "1")

    dfs(root, "")
    return codes


def invert_code_table(codes: EncodeTable) -> DecodeTable:
    table: DecodeTable = {}
    for sym, code in codes.items():
        if code in table:
            raise TreeInvariantError(
                f"codice duplicato {code!r} per i byte {table[code]} e {sym}"
            )
        table[code] = sym
    return table


def is_prefix_free(codes) -> bool:
    """True if no code is a prefix of another (accepts either table direction)."""
    words = sorted(codes.keys() if _keys_are_codes(codes) else codes.values())
    # in ordine lessicografico un prefisso precede sempre le sue estensioni
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return True


def _keys_are_codes(table) -> bool:
    return any(isinstance(k, str) for k in table)


def max_code_length(table: DecodeTable) -> int:
    return max((len(c) for c in table), default=0)


def min_code(table: DecodeTable) -> str | None:
    if not table:
        return None
    return min(table, key=lambda c: (len(c), c))
