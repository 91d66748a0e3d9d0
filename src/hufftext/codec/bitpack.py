from typing import Iterable, List, Optional

from hufftext.codec.codes import CodeTable
from hufftext.codec.errors import SingleSymbolError, UnknownSymbolError
from hufftext.codec.symbols import SENTINEL
from hufftext.codec.tree import Leaf, Node


def pack_bits(bitstring: str) -> bytes:
    """
    Pack '010101' into bytes, MSB first.
    The last byte is padded with 0 bits; the pad length is not recorded.
    """
    if not bitstring:
        return b""
    nbytes = (len(bitstring) + 7) // 8
    padded = bitstring.ljust(nbytes * 8, "0")
    return int(padded, 2).to_bytes(nbytes, "big")


def unpack_bits(data: bytes) -> str:
    """
    Unpack every bit of data, MSB first (padding included).
    """
    return "".join(format(b, "08b") for b in data)


def to_bitstring(symbols: Iterable[str], codes: CodeTable) -> str:
    parts: List[str] = []
    for s in symbols:
        try:
            parts.append(codes[s])
        except KeyError:
            raise UnknownSymbolError(s) from None
    return "".join(parts)


def encode_symbols(symbols: Iterable[str], codes: CodeTable) -> bytes:
    return pack_bits(to_bitstring(symbols, codes))


def decode_bits(tree: Node, data: bytes, limit: Optional[int] = None) -> str:
    """
    Walk the tree bit by bit: '0' goes left, '1' goes right. Each leaf emits
    its symbol (the sentinel comes back as '\\n') and the cursor returns to
    the root.

    limit: stop after this many symbols. Without it the whole buffer is
    walked, so zero padding may decode into extra symbols. Bits that end
    mid-tree are dropped.

    A tree that does not belong to data decodes to garbage; there is no
    integrity check to catch it.
    """
    if isinstance(tree, Leaf):
        raise SingleSymbolError("a single-leaf tree cannot decode a bitstream")
    if limit is not None and limit <= 0:
        return ""

    out: List[str] = []
    node = tree
    for ch in unpack_bits(data):
        node = node.left if ch == "0" else node.right
        if isinstance(node, Leaf):
            out.append("\n" if node.symbol == SENTINEL else node.symbol)
            node = tree
            if limit is not None and len(out) >= limit:
                break

    return "".join(out)
