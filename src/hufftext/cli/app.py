from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from hufftext.api.files import (
    COMPRESSED_SUFFIX,
    DECOMPRESSED_SUFFIX,
    read_text,
    compress_file,
    decompress_file,
)
from hufftext.api.tree_store import DEFAULT_LEVEL
from hufftext.bench.runner import run_bench
from hufftext.cli.logging_setup import setup_logging
from hufftext.codec.codes import assign_codes
from hufftext.codec.errors import HuffmanError
from hufftext.codec.frequency import compute_frequencies
from hufftext.codec.symbols import SENTINEL, text_to_symbols
from hufftext.codec.tree import build_tree


def _pretty(n: int) -> str:
    if n >= 1_000_000:
        return f"{n/1_000_000:.2f} MB"
    if n >= 1_000:
        return f"{n/1_000:.2f} KB"
    return f"{n} B"


def _fail(msg: str) -> int:
    print(f"hufftext: {msg}", file=sys.stderr)
    return 1


def cmd_compress(args: argparse.Namespace) -> int:
    try:
        rep = compress_file(args.infile, out_path=args.out, tree_path=args.tree, level=args.level)
    except (HuffmanError, OSError, ValueError) as e:
        return _fail(str(e))

    print("hufftext compress OK")
    print("------------------------------")
    print("infile       :", args.infile)
    print("payload      :", rep.payload_path)
    print("tree         :", rep.tree_path)
    print("raw          :", _pretty(rep.raw_bytes))
    print("payload size :", _pretty(rep.payload_bytes))
    print("tree size    :", _pretty(rep.tree_bytes))
    print("symbols      :", rep.symbols)
    print("alphabet     :", rep.alphabet)
    print(f"avg code len : {rep.avg_code_len:.3f} bits (entropy {rep.entropy:.3f})")
    print(f"ratio        : {rep.ratio:.2f}x")
    print("------------------------------")
    return 0


def cmd_decompress(args: argparse.Namespace) -> int:
    try:
        out = decompress_file(args.infile, tree_path=args.tree, out_path=args.out)
    except (HuffmanError, OSError, ValueError) as e:
        return _fail(str(e))

    print(f"hufftext decompress OK: {args.infile} -> {out}")
    return 0


def cmd_codes(args: argparse.Namespace) -> int:
    try:
        freqs = compute_frequencies(text_to_symbols(read_text(args.infile)))
        codes = assign_codes(build_tree(freqs))
    except (HuffmanError, OSError, UnicodeDecodeError) as e:
        return _fail(str(e))

    rows = sorted(codes.items(), key=lambda kv: (len(kv[1]), kv[1]))
    for sym, code in rows:
        label = "\\n" if sym == SENTINEL else repr(sym)
        print(f"{label:>8}  {freqs[sym]:>8}  {code}")
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    run_bench(loops=args.loops, seed=args.seed)
    return 0


def run_interactive(
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """
    Menu loop: 1 compresses a .txt file, 2 decompresses a *compressed.bin
    file, anything else quits.
    """
    while True:
        output_fn("Please enter 1 to COMPRESS and 2 to DECOMPRESS")
        try:
            choice = input_fn().strip()
        except EOFError:
            return 0

        if choice == "1":
            output_fn("Please enter filename to compress:")
            try:
                name = input_fn().strip()
            except EOFError:
                return 0
            if len(name) > 4 and name.endswith(".txt"):
                try:
                    compress_file(name)
                    output_fn("Compression Completed!")
                    continue
                except (HuffmanError, OSError, UnicodeDecodeError):
                    pass
            output_fn("Please enter a valid file")
        elif choice == "2":
            output_fn("Please enter filename to decompress:")
            try:
                name = input_fn().strip()
            except EOFError:
                return 0
            if len(name) > len(COMPRESSED_SUFFIX) and name.endswith(COMPRESSED_SUFFIX):
                try:
                    decompress_file(name)
                    output_fn("Decompression Completed!")
                    continue
                except (HuffmanError, OSError, ValueError):
                    pass
            output_fn("Please enter a valid file")
        else:
            return 0


def cmd_interactive(args: argparse.Namespace) -> int:
    return run_interactive()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hufftext", description="Static Huffman codec for text files")
    p.add_argument("-v", "--verbose", action="store_true", help="Log codec details")
    sub = p.add_subparsers(dest="cmd", required=True)

    pc = sub.add_parser("compress", help="Compress a text file into payload + tree files")
    pc.add_argument("infile")
    pc.add_argument("--out", default=None, help=f"Payload path (default: <base>{COMPRESSED_SUFFIX})")
    pc.add_argument("--tree", default=None, help="Tree path (default: <base>HuffmanTree.ser)")
    pc.add_argument("--level", type=int, default=DEFAULT_LEVEL, help="zstd level for the tree file")
    pc.set_defaults(fn=cmd_compress)

    pd = sub.add_parser("decompress", help="Decompress a payload with its tree")
    pd.add_argument("infile")
    pd.add_argument("--tree", default=None, help="Tree path (default: derived from infile)")
    pd.add_argument(
        "--out",
        default=None,
        help=(
            f"Output text path (default: <base>{DECOMPRESSED_SUFFIX}, where <base> is "
            f"infile without '{COMPRESSED_SUFFIX}'; e.g. reportcompressed.bin -> "
            f"report{DECOMPRESSED_SUFFIX})"
        ),
    )
    pd.set_defaults(fn=cmd_decompress)

    pk = sub.add_parser("codes", help="Print the code table of a text file")
    pk.add_argument("infile")
    pk.set_defaults(fn=cmd_codes)

    pb = sub.add_parser("bench", help="Compare sizes against gzip and zstd")
    pb.add_argument("--loops", type=int, default=30)
    pb.add_argument("--seed", type=int, default=7)
    pb.set_defaults(fn=cmd_bench)

    pi = sub.add_parser("interactive", help="Menu-driven compress/decompress loop")
    pi.set_defaults(fn=cmd_interactive)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    return int(args.fn(args))


if __name__ == "__main__":
    raise SystemExit(main())
