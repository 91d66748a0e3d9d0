from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from hufftext.api.codec import compress_text, decompress_bytes
from hufftext.api.tree_store import DEFAULT_LEVEL, dump_tree, read_tree
from hufftext.codec.codes import assign_codes
from hufftext.codec.frequency import compute_frequencies
from hufftext.codec.stats import average_code_length, coded_bits, shannon_entropy
from hufftext.codec.symbols import text_to_symbols
from hufftext.codec.tree import Node


log = logging.getLogger(__name__)

COMPRESSED_SUFFIX = "compressed.bin"
TREE_SUFFIX = "HuffmanTree.ser"
DECOMPRESSED_SUFFIX = "decompressed.txt"


@dataclass
class CompressionReport:
    raw_bytes: int
    payload_bytes: int
    tree_bytes: int
    symbols: int
    alphabet: int
    coded_bits: int
    avg_code_len: float
    entropy: float
    payload_path: str = ""
    tree_path: str = ""

    @property
    def ratio(self) -> float:
        return self.raw_bytes / max(1, self.payload_bytes + self.tree_bytes)


def _base(path: str) -> Path:
    # "notes.v2.txt" -> "notes": everything up to the first dot of the name
    p = Path(path)
    return p.with_name(p.name.split(".")[0])


def derive_compressed_paths(path: str) -> Tuple[str, str]:
    """
    report.txt -> (reportcompressed.bin, reportHuffmanTree.ser)
    """
    base = str(_base(path))
    return base + COMPRESSED_SUFFIX, base + TREE_SUFFIX


def derive_decompressed_paths(bin_path: str) -> Tuple[str, str]:
    """
    reportcompressed.bin -> (reportHuffmanTree.ser, reportdecompressed.txt)
    """
    if not bin_path.endswith(COMPRESSED_SUFFIX):
        raise ValueError(f"expected a *{COMPRESSED_SUFFIX} file, got {bin_path!r}")
    stem = bin_path[: -len(COMPRESSED_SUFFIX)]
    if not os.path.basename(stem):
        raise ValueError(f"no base name in {bin_path!r}")
    return stem + TREE_SUFFIX, stem + DECOMPRESSED_SUFFIX


def read_text(path: str) -> str:
    # newline="" keeps "\r" as an ordinary symbol
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: str, text: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def _write_bytes(path: str, data: bytes) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def summarize(text: str, tree: Node, payload: bytes, tree_blob: bytes) -> CompressionReport:
    freqs = compute_frequencies(text_to_symbols(text))
    codes = assign_codes(tree)
    return CompressionReport(
        raw_bytes=len(text.encode("utf-8")),
        payload_bytes=len(payload),
        tree_bytes=len(tree_blob),
        symbols=sum(freqs.values()),
        alphabet=len(freqs),
        coded_bits=coded_bits(freqs, codes),
        avg_code_len=average_code_length(freqs, codes),
        entropy=shannon_entropy(freqs),
    )


def compress_file(
    path: str,
    out_path: Optional[str] = None,
    tree_path: Optional[str] = None,
    level: int = DEFAULT_LEVEL,
) -> CompressionReport:
    """
    Write the payload and its tree next to the input (or where asked).
    """
    default_out, default_tree = derive_compressed_paths(path)
    out_path = out_path or default_out
    tree_path = tree_path or default_tree

    text = read_text(path)
    tree, payload = compress_text(text)
    tree_blob = dump_tree(tree, level=level)

    _write_bytes(out_path, payload)
    _write_bytes(tree_path, tree_blob)
    log.debug("wrote %s (%d bytes) and %s (%d bytes)", out_path, len(payload), tree_path, len(tree_blob))

    rep = summarize(text, tree, payload, tree_blob)
    rep.payload_path = out_path
    rep.tree_path = tree_path
    return rep


def decompress_file(
    bin_path: str,
    tree_path: Optional[str] = None,
    out_path: Optional[str] = None,
) -> str:
    """
    Returns the path of the written text file.
    """
    if tree_path is None or out_path is None:
        default_tree, default_out = derive_decompressed_paths(bin_path)
        tree_path = tree_path or default_tree
        out_path = out_path or default_out

    tree = read_tree(tree_path)
    text = decompress_bytes(tree, _read_bytes(bin_path))
    _write_text(out_path, text)
    log.debug("decoded %s with %s -> %s (%d chars)", bin_path, tree_path, out_path, len(text))
    return out_path
