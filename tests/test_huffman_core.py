import pytest

from hufftext.bench.datasets import toy_notes, toy_words_varied
from hufftext.codec.bitpack import decode_bits, encode_symbols, pack_bits, to_bitstring, unpack_bits
from hufftext.codec.codes import assign_codes
from hufftext.codec.errors import (
    EmptyAlphabetError,
    HuffmanError,
    SingleSymbolError,
    UnknownSymbolError,
)
from hufftext.codec.frequency import compute_frequencies
from hufftext.codec.stats import average_code_length, coded_bits, shannon_entropy
from hufftext.codec.symbols import SENTINEL, text_to_symbols
from hufftext.codec.tree import Internal, Leaf, build_tree


def test_frequencies_first_seen_order_and_counts():
    freqs = compute_frequencies("banana")
    assert list(freqs.items()) == [("b", 1), ("a", 3), ("n", 2)]


def test_frequencies_empty_and_read_only():
    assert dict(compute_frequencies("")) == {}
    freqs = compute_frequencies("ab")
    with pytest.raises(TypeError):
        freqs["c"] = 1


def test_build_tree_empty_alphabet():
    with pytest.raises(EmptyAlphabetError):
        build_tree(compute_frequencies(""))


def test_build_tree_single_symbol():
    with pytest.raises(SingleSymbolError):
        build_tree(compute_frequencies("aaaa"))


def test_build_tree_unknown_method():
    with pytest.raises(ValueError):
        build_tree(compute_frequencies("ab"), method="quick")


def test_two_symbol_tree_aaab():
    tree = build_tree(compute_frequencies("aaab"))
    # b (freq 1) is taken first, so it is the left child
    assert tree == Internal(left=Leaf("b", 1), right=Leaf("a", 3), freq=4)
    assert assign_codes(tree) == {"b": "0", "a": "1"}


def test_ties_go_to_earliest_node():
    # a, b, sentinel all at 2: a and b merge first, the sentinel meets the merged node
    tree = build_tree(compute_frequencies(text_to_symbols("ab\nba\n")))
    assert tree.left == Leaf(SENTINEL, 2)
    assert tree.right == Internal(left=Leaf("a", 2), right=Leaf("b", 2), freq=4)


def test_merged_node_goes_after_equal_frequency_leaves():
    # a:1 b:1 c:2 -> (a,b)=2 is appended after c, so c is taken first
    tree = build_tree(compute_frequencies("abcc"))
    assert tree.left == Leaf("c", 2)
    assert tree.right == Internal(left=Leaf("a", 1), right=Leaf("b", 1), freq=2)


def test_heap_and_sort_builders_agree():
    for text in [toy_notes(), toy_words_varied(lines=80), "abcdefgh" * 3, "aabbbcccc\n"]:
        freqs = compute_frequencies(text_to_symbols(text))
        heap_tree = build_tree(freqs, method="heap")
        sort_tree = build_tree(freqs, method="sort")
        assert heap_tree == sort_tree
        assert assign_codes(heap_tree) == assign_codes(sort_tree)


def test_tree_is_deterministic():
    freqs = compute_frequencies(text_to_symbols(toy_notes()))
    assert assign_codes(build_tree(freqs)) == assign_codes(build_tree(freqs))


def test_codes_cover_alphabet_and_are_prefix_free():
    freqs = compute_frequencies(text_to_symbols(toy_words_varied(lines=120)))
    codes = assign_codes(build_tree(freqs))

    assert set(codes) == set(freqs)
    assert len(set(codes.values())) == len(codes)
    values = list(codes.values())
    for i, a in enumerate(values):
        assert a
        for j, b in enumerate(values):
            if i != j:
                assert not b.startswith(a)


def test_root_frequency_is_symbol_count():
    symbols = text_to_symbols(toy_notes())
    tree = build_tree(compute_frequencies(symbols))
    assert tree.freq == len(symbols)


def test_assign_codes_rejects_bare_leaf():
    with pytest.raises(SingleSymbolError):
        assign_codes(Leaf("a", 4))


def test_pack_bits_msb_first_with_zero_padding():
    assert pack_bits("") == b""
    assert pack_bits("1") == b"\x80"
    assert pack_bits("0" * 9) == b"\x00\x00"
    assert pack_bits("10110111" + "10") == b"\xb7\x80"
    assert unpack_bits(b"\xb7\x80") == "1011011110000000"


def test_encode_three_symbol_scenario():
    symbols = text_to_symbols("ab\nba\n")
    freqs = compute_frequencies(symbols)
    assert dict(freqs) == {"a": 2, "b": 2, SENTINEL: 2}

    codes = assign_codes(build_tree(freqs))
    assert sorted(len(c) for c in codes.values()) == [1, 2, 2]
    assert coded_bits(freqs, codes) == 10
    # a=10 b=11 sentinel=0
    assert to_bitstring(symbols, codes) == "1011011100"

    data = encode_symbols(symbols, codes)
    assert data == b"\xb7\x00"
    assert len(data) == 2


def test_encode_two_symbol_scenario():
    codes = assign_codes(build_tree(compute_frequencies("aaab")))
    assert all(len(c) == 1 for c in codes.values())
    data = encode_symbols("aaab", codes)
    assert data == b"\xe0"


def test_encode_unknown_symbol():
    with pytest.raises(UnknownSymbolError) as ei:
        encode_symbols("abc", {"a": "0", "b": "1"})
    assert ei.value.symbol == "c"
    assert isinstance(ei.value, LookupError)
    assert isinstance(ei.value, HuffmanError)


def test_output_is_byte_aligned():
    for text in [toy_notes(), toy_words_varied(lines=33), "xyz", "aaab"]:
        symbols = text_to_symbols(text)
        codes = assign_codes(build_tree(compute_frequencies(symbols)))
        nbits = len(to_bitstring(symbols, codes))
        data = encode_symbols(symbols, codes)
        assert len(data) * 8 >= nbits
        assert len(data) * 8 - nbits < 8


def test_decode_with_limit_stops_before_padding():
    tree = build_tree(compute_frequencies("aaab"))
    assert decode_bits(tree, b"\xe0", limit=4) == "aaab"


def test_decode_without_limit_walks_padding():
    # pad bits are '0', which is b's code here
    tree = build_tree(compute_frequencies("aaab"))
    assert decode_bits(tree, b"\xe0") == "aaabbbbb"


def test_decode_translates_sentinel_and_drops_mid_tree_tail():
    tree = build_tree(compute_frequencies(text_to_symbols("ab\nba\n")))
    # codes: sentinel=0 a=10 b=11 ; 0000000 then a lone '1'
    assert decode_bits(tree, bytes([0b00000001])) == "\n" * 7
    assert decode_bits(tree, b"\xb7\x00", limit=6) == "ab\nba\n"


def test_decode_leaves_tree_untouched():
    tree = build_tree(compute_frequencies("hello world"))
    before = assign_codes(tree)
    decode_bits(tree, b"\x5a\xa5\xff")
    assert assign_codes(tree) == before


def test_decode_rejects_bare_leaf():
    with pytest.raises(SingleSymbolError):
        decode_bits(Leaf("a"), b"\x00")


def test_stats():
    assert shannon_entropy(compute_frequencies("ab")) == pytest.approx(1.0)
    assert shannon_entropy(compute_frequencies("")) == 0.0

    freqs = compute_frequencies(text_to_symbols(toy_words_varied(lines=200)))
    codes = assign_codes(build_tree(freqs))
    h = shannon_entropy(freqs)
    avg = average_code_length(freqs, codes)
    assert h <= avg < h + 1
