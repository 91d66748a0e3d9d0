from typing import List, Tuple

from hufftext.api.codec import compress_text, decompress_bytes
from hufftext.api.tree_store import dump_tree
from hufftext.bench.datasets import toy_notes, toy_notes_repeated, toy_words_varied
from hufftext.bench.metrics import SizeReport, gzip_compress, zstd_compress


def measure(text: str) -> SizeReport:
    raw = text.encode("utf-8")
    tree, payload = compress_text(text)

    if decompress_bytes(tree, payload) != text:
        raise RuntimeError("hufftext roundtrip mismatch")

    return SizeReport(
        raw_bytes=len(raw),
        gzip_bytes=len(gzip_compress(raw)),
        zstd_bytes=len(zstd_compress(raw)),
        huff_bytes=len(payload),
        tree_bytes=len(dump_tree(tree)),
    )


def run_bench(loops: int = 30, seed: int = 7) -> List[Tuple[str, SizeReport]]:
    cases = [
        ("SMALL NOTES", toy_notes()),
        ("REPEAT-HEAVY (gzip showcase)", toy_notes_repeated(repeats=loops)),
        ("SKEWED WORDS (Huffman showcase)", toy_words_varied(lines=loops * 20, seed=seed)),
    ]

    results = []
    for name, text in cases:
        r = measure(text)
        results.append((name, r))

        print(f"hufftext Bench - {name}")
        print("----------------------------------------")
        print(f"RAW bytes     : {r.raw_bytes}")
        print(f"GZIP bytes    : {r.gzip_bytes}  (ratio {r.gzip_ratio:.2f}x)")
        print(f"ZSTD bytes    : {r.zstd_bytes}  (ratio {r.zstd_ratio:.2f}x)")
        print(f"HUFF payload  : {r.huff_bytes}")
        print(f"HUFF tree     : {r.tree_bytes}")
        print(f"HUFF total    : {r.huff_bytes + r.tree_bytes}  (ratio {r.huff_ratio:.2f}x)")
        print("----------------------------------------")
        print()

    return results
