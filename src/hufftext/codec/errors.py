class HuffmanError(Exception):
    """
    Base class for every failure the codec reports to its caller.
    The codec never prints or exits; the CLI decides what to do with these.
    """
    pass


class EmptyAlphabetError(HuffmanError):
    """Raised when the frequency table has no entries (nothing to encode)."""
    pass


class SingleSymbolError(HuffmanError):
    """
    Raised when the input has exactly one distinct symbol.
    Such a tree has no edges, so the symbol would get a zero-length code.
    """
    pass


class UnknownSymbolError(HuffmanError, LookupError):
    """Raised when a symbol to encode has no entry in the code table."""

    def __init__(self, symbol: str):
        super().__init__(f"symbol {symbol!r} has no code in this table")
        self.symbol = symbol


class ReservedSymbolError(HuffmanError, ValueError):
    """Raised when input text already contains the line sentinel."""
    pass


class TreeFormatError(HuffmanError, ValueError):
    """Raised when a persisted tree blob cannot be parsed."""
    pass


class InvalidSymbolError(HuffmanError, ValueError):
    """Raised when a symbol is not a single character."""
    pass
