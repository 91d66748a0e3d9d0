import math

from hufftext.codec.codes import CodeTable
from hufftext.codec.frequency import FrequencyTable


def coded_bits(freqs: FrequencyTable, codes: CodeTable) -> int:
    """Payload length in bits before padding."""
    return sum(f * len(codes[s]) for s, f in freqs.items())


def average_code_length(freqs: FrequencyTable, codes: CodeTable) -> float:
    total = sum(freqs.values())
    if total == 0:
        return 0.0
    return coded_bits(freqs, codes) / total


def shannon_entropy(freqs: FrequencyTable) -> float:
    """
    Bits per symbol of the empirical distribution. A Huffman code's average
    length lies in [entropy, entropy + 1).
    """
    total = sum(freqs.values())
    if total == 0:
        return 0.0
    h = 0.0
    for f in freqs.values():
        if f:
            p = f / total
            h -= p * math.log2(p)
    return h
