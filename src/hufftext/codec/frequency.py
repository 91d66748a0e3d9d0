from types import MappingProxyType
from typing import Dict, Iterable, Mapping


FrequencyTable = Mapping[str, int]


def compute_frequencies(symbols: Iterable[str]) -> FrequencyTable:
    """
    Count every symbol. Iteration order is first-seen order, which the
    tree builder relies on for its tie-break.
    """
    freqs: Dict[str, int] = {}
    for s in symbols:
        freqs[s] = freqs.get(s, 0) + 1
    return MappingProxyType(freqs)
