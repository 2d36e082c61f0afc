import pytest

from algokit.huffman import build_huffman_tree, huffman_codes

CLASSIC = [("a", 5), ("b", 9), ("c", 12), ("d", 13), ("e", 16), ("f", 45)]


def test_classic_example():
    assert huffman_codes(CLASSIC) == {
        "f": "0",
        "c": "100",
        "d": "101",
        "a": "1100",
        "b": "1101",
        "e": "111",
    }


def test_root_frequency_is_total():
    root = build_huffman_tree(CLASSIC)
    assert root.freq == sum(f for _, f in CLASSIC)


@pytest.mark.parametrize(
    "symbols",
    [CLASSIC, [("x", 1), ("y", 1)], [(c, i + 1) for i, c in enumerate("abcdefghij")]],
)
def test_codes_are_prefix_free_and_complete(symbols):
    codes = huffman_codes(symbols)
    assert set(codes) == {s for s, _ in symbols}
    values = list(codes.values())
    for a in values:
        for b in values:
            if a != b:
                assert not b.startswith(a)
    assert sum(2.0 ** -len(code) for code in values) == pytest.approx(1.0)


def test_more_frequent_never_gets_longer_code():
    codes = huffman_codes(CLASSIC)
    freq = dict(CLASSIC)
    for a in codes:
        for b in codes:
            if freq[a] > freq[b]:
                assert len(codes[a]) <= len(codes[b])


def test_single_symbol():
    assert huffman_codes([("z", 3)]) == {"z": ""}


def test_no_symbols():
    with pytest.raises(ValueError):
        build_huffman_tree([])