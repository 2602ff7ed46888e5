"""Huffman tree construction.

Tie-break (deterministic): the heap key is ``(weight, seq)``. Leaves get
``seq`` in ascending byte order, every merged node takes the next ``seq``.
The first node popped becomes the left child.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Optional

from huffcodec.core.frequency import FrequencyTable
from huffcodec.errors import LeafAttributeAccessError, TreeInvariantError


@dataclass
class HuffmanNode:
    weight: int
    symbol: Optional[int] = None  # 0-127 per foglie, None per interni
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @classmethod
    def leaf(cls, symbol: int, weight: int) -> "HuffmanNode":
        return cls(weight=weight, symbol=symbol)

    @classmethod
    def internal(cls, left: "HuffmanNode", right: "HuffmanNode") -> "HuffmanNode":
        return cls(weight=left.weight + right.weight, left=left, right=right)

    def is_leaf(self) -> bool:
        if self.left is None and self.right is None:
            return True
        if self.left is None or self.right is None:
            raise TreeInvariantError(
                "albero Huffman non valido: nodo interno con un solo figlio "
                "(gli alberi Huffman devono essere binari pieni)"
            )
        return False

    @property
    def byte(self) -> int:
        if not self.is_leaf() or self.symbol is None:
            raise LeafAttributeAccessError("i nodi interni non hanno un simbolo")
        return self.symbol


def build_huffman_tree(freq: FrequencyTable) -> Optional[HuffmanNode]:
    heap: list[tuple[int, int, HuffmanNode]] = []
    counter = itertools.count()

    for sym in sorted(freq.counts):
        f = freq.counts[sym]
        heapq.heappush(heap, (f, next(counter), HuffmanNode.leaf(sym, f)))

    if not heap:
        return None

    # Un solo simbolo: la radice resta una foglia (codice "0", vedi code_table)
    while len(heap) > 1:
        _, _, n1 = heapq.heappop(heap)
        _, _, n2 = heapq.heappop(heap)
        parent = HuffmanNode.internal(n1, n2)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]
