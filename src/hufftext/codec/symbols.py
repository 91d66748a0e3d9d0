from hufftext.codec.errors import ReservedSymbolError


# Stands in for "\n" so multi-line text travels through one flat bitstream.
SENTINEL = "§"


def text_to_symbols(text: str) -> str:
    """
    Replace every newline with the sentinel.

    Nothing is added or removed, so a text that ends with "\\n" gets one
    sentinel per line and a text without a final newline round-trips as-is.
    """
    if SENTINEL in text:
        raise ReservedSymbolError(
            f"input already contains the line sentinel {SENTINEL!r}"
        )
    return text.replace("\n", SENTINEL)


def symbols_to_text(symbols: str) -> str:
    return symbols.replace(SENTINEL, "\n")
