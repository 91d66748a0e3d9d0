from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Set, Tuple

import zstandard as zstd

from hufftext.codec.errors import TreeFormatError
from hufftext.codec.tree import Internal, Leaf, Node
from hufftext.codec.varint import decode_uvarint, encode_uvarint


log = logging.getLogger(__name__)

MAGIC = b"HUFT"
VERSION = 1
DEFAULT_LEVEL = 10

_INTERNAL = 0
_MAX_CODEPOINT = 0x10FFFF


def serialize_tree(tree: Node) -> bytes:
    """
    Pre-order body:
      internal node: [0]
      leaf:          [codepoint + 1][freq]
    all uvarints. Internal frequencies are not stored; they are sums.
    """
    out = bytearray()
    stack: List[Node] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            out += encode_uvarint(ord(node.symbol) + 1)
            out += encode_uvarint(node.freq)
        else:
            out += encode_uvarint(_INTERNAL)
            stack.append(node.right)
            stack.append(node.left)
    return bytes(out)


def _read_tokens(body: bytes) -> List[Tuple[int, int]]:
    tokens: List[Tuple[int, int]] = []
    off = 0
    while off < len(body):
        tag, off = decode_uvarint(body, off)
        if tag == _INTERNAL:
            tokens.append((tag, 0))
            continue
        if tag - 1 > _MAX_CODEPOINT:
            raise TreeFormatError(f"leaf codepoint out of range: {tag - 1}")
        freq, off = decode_uvarint(body, off)
        tokens.append((tag, freq))
    return tokens


def deserialize_tree(body: bytes) -> Node:
    tokens = _read_tokens(body)
    if not tokens:
        raise TreeFormatError("empty tree body")
    if len(tokens) == 1:
        raise TreeFormatError("tree body holds a single leaf")

    # Reversed pre-order: both subtrees of a node are built before the node.
    stack: List[Node] = []
    seen: Set[str] = set()
    for tag, freq in reversed(tokens):
        if tag != _INTERNAL:
            sym = chr(tag - 1)
            if sym in seen:
                raise TreeFormatError(f"duplicate leaf symbol {sym!r}")
            seen.add(sym)
            stack.append(Leaf(sym, freq))
            continue
        if len(stack) < 2:
            raise TreeFormatError("internal node is missing a child")
        left = stack.pop()
        right = stack.pop()
        stack.append(Internal(left=left, right=right, freq=left.freq + right.freq))

    if len(stack) != 1:
        raise TreeFormatError(f"tree body does not describe one tree ({len(stack)} roots)")
    return stack[0]


def dump_tree(tree: Node, level: int = DEFAULT_LEVEL) -> bytes:
    """
    Tree file:
      [MAGIC 4B][version u8][zstd(body)...]
    """
    body = serialize_tree(tree)
    comp = zstd.ZstdCompressor(level=level).compress(body)
    log.debug("tree body %d bytes, zstd %d bytes", len(body), len(comp))
    return MAGIC + bytes([VERSION]) + comp


def load_tree(blob: bytes) -> Node:
    if len(blob) < len(MAGIC) + 1:
        raise TreeFormatError("tree file: blob too small")
    if blob[:4] != MAGIC:
        raise TreeFormatError("tree file: bad magic")
    ver = blob[4]
    if ver != VERSION:
        raise TreeFormatError(f"tree file: unsupported version {ver}")

    try:
        body = zstd.ZstdDecompressor().decompress(blob[5:])
    except zstd.ZstdError as e:
        raise TreeFormatError(f"tree file: {e}") from e

    return deserialize_tree(body)


def save_tree(path: str, tree: Node, level: int = DEFAULT_LEVEL) -> int:
    blob = dump_tree(tree, level=level)
    Path(path).write_bytes(blob)
    return len(blob)


def read_tree(path: str) -> Node:
    return load_tree(Path(path).read_bytes())
