from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union
import heapq

from hufftext.codec.errors import EmptyAlphabetError, SingleSymbolError
from hufftext.codec.frequency import FrequencyTable


@dataclass(frozen=True)
class Leaf:
    symbol: str
    freq: int = 0


@dataclass(frozen=True)
class Internal:
    left: "Node"
    right: "Node"
    freq: int = 0


Node = Union[Leaf, Internal]


def _leaves(freqs: FrequencyTable) -> List[Leaf]:
    if not freqs:
        raise EmptyAlphabetError("cannot build a Huffman tree from an empty alphabet")
    if len(freqs) == 1:
        only = next(iter(freqs))
        raise SingleSymbolError(
            f"only one distinct symbol ({only!r}); no code tree can be built"
        )
    return [Leaf(sym, f) for sym, f in freqs.items()]


def _merge(a: Node, b: Node) -> Internal:
    return Internal(left=a, right=b, freq=a.freq + b.freq)


def _build_heap(leaves: List[Leaf]) -> Node:
    # (freq, seq, node): seq is the insertion number, so ties go to the
    # node that entered the forest first and nodes are never compared.
    heap: List[Tuple[int, int, Node]] = [(n.freq, i, n) for i, n in enumerate(leaves)]
    heapq.heapify(heap)
    seq = len(heap)

    while len(heap) > 1:
        _, _, a = heapq.heappop(heap)
        _, _, b = heapq.heappop(heap)
        merged = _merge(a, b)
        heapq.heappush(heap, (merged.freq, seq, merged))
        seq += 1

    return heap[0][2]


def _build_sorted(leaves: List[Leaf]) -> Node:
    forest: List[Node] = list(leaves)
    forest.sort(key=lambda n: n.freq)

    while len(forest) > 1:
        a = forest.pop(0)
        b = forest.pop(0)
        forest.append(_merge(a, b))
        # stable: the merged node lands after every equal-frequency node
        forest.sort(key=lambda n: n.freq)

    return forest[0]


_BUILDERS = {
    "heap": _build_heap,
    "sort": _build_sorted,
}


def build_tree(freqs: FrequencyTable, method: str = "heap") -> Node:
    """
    Merge the two lowest-frequency roots until one tree is left.

    The first node taken becomes the left child. Among equal frequencies the
    node that is earliest in forest order is taken first: leaves in the
    frequency table's order, merged nodes after everything already there.

    method:
      "heap" - O(n log n), (freq, seq) keyed heap
      "sort" - O(n^2), stable re-sort of the forest each round

    Both give structurally identical trees.
    """
    try:
        builder = _BUILDERS[method]
    except KeyError:
        raise ValueError(f"unknown tree build method: {method!r}") from None

    return builder(_leaves(freqs))

