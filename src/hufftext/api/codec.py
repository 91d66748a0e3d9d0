from __future__ import annotations

import logging
from typing import Iterable, Tuple

from hufftext.codec.bitpack import decode_bits, encode_symbols
from hufftext.codec.codes import assign_codes
from hufftext.codec.errors import InvalidSymbolError
from hufftext.codec.frequency import compute_frequencies
from hufftext.codec.symbols import text_to_symbols
from hufftext.codec.tree import Node, build_tree


log = logging.getLogger(__name__)


def compress_symbols(symbols: Iterable[str], method: str = "heap") -> Tuple[Node, bytes]:
    """
    Two passes over the symbols: count, then code.
    Each symbol must be a one-character string.
    Returns (tree, payload). Tree build errors propagate unchanged.
    """
    symbols = list(symbols)
    for s in symbols:
        if not isinstance(s, str) or len(s) != 1:
            raise InvalidSymbolError(f"symbols must be single characters, got {s!r}")

    freqs = compute_frequencies(symbols)
    tree = build_tree(freqs, method=method)
    codes = assign_codes(tree)
    payload = encode_symbols(symbols, codes)

    log.debug(
        "compressed %d symbols (%d distinct) into %d bytes",
        len(symbols), len(freqs), len(payload),
    )
    return tree, payload


def compress_text(text: str, method: str = "heap") -> Tuple[Node, bytes]:
    """
    Newlines become the sentinel before coding, so line breaks survive.
    """
    return compress_symbols(text_to_symbols(text), method=method)


def decompress_bytes(tree: Node, data: bytes) -> str:
    """
    Decode payload with its tree.

    A tree that kept its frequencies knows how many symbols were coded (the
    root frequency), which stops the walk before the zero padding. A tree
    without frequencies decodes the whole buffer, padding included.
    """
    limit = tree.freq if tree.freq > 0 else None
    if limit is None:
        log.debug("tree has no frequencies; decoding until the buffer is exhausted")
    return decode_bits(tree, data, limit=limit)
