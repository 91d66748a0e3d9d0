import random


def toy_notes() -> str:
    """
    Small multi-line text (kept for quick checks).
    """
    return (
        "Project: hufftext\n"
        "Goal: two-pass static Huffman coding for text files.\n"
        "Decision: keep the tree in its own file.\n"
        "Next: measure against gzip and zstd.\n"
        "\n"
        "Session recap:\n"
        "- Counted symbol frequencies.\n"
        "- Built the code tree.\n"
        "- Packed codes into bytes.\n"
        "\n"
        "Reminder: line breaks travel as a sentinel symbol.\n"
    )


def toy_notes_repeated(repeats: int = 30) -> str:
    """
    Repetition-heavy text. Good for gzip/zstd, no help for Huffman.
    """
    base = toy_notes()
    out = []
    for i in range(repeats):
        out.append(f"--- COPY {i} ---\n")
        out.append(base)
        out.append("\n")
    return "".join(out)


_WORDS = [
    "tree", "leaf", "node", "code", "bit", "byte", "merge", "left", "right",
    "frequency", "symbol", "stream", "padding", "root", "walk", "table",
]


def toy_words_varied(lines: int = 600, seed: int = 7) -> str:
    """
    Skewed word soup: a few words dominate, which is where Huffman shines.
    """
    rng = random.Random(seed)
    weights = [1.0 / (i + 1) for i in range(len(_WORDS))]
    out = []
    for i in range(lines):
        n = rng.randint(3, 12)
        words = rng.choices(_WORDS, weights=weights, k=n)
        out.append(f"{i:04d} " + " ".join(words) + "\n")
    return "".join(out)
