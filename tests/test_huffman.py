import pytest

from algoshelf.huffman import huffman_codes, huffman_tree

SYMBOLS = ["A", "B", "C", "D", "F"]
FREQS = [5, 1, 2, 4, 10]


def test_worked_example():
    codes = huffman_codes(SYMBOLS, FREQS)
    assert codes == {"F": "0", "A": "10", "B": "1100", "C": "1101", "D": "111"}
    assert list(codes) == ["F", "A", "B", "C", "D"]


def test_root_frequency_is_total():
    root = huffman_tree(SYMBOLS, FREQS)
    assert root.freq == sum(FREQS)
    assert not root.is_leaf


@pytest.mark.parametrize(
    "symbols, freqs",
    [(SYMBOLS, FREQS), (list("abcdefg"), [3, 3, 3, 3, 3, 3, 3]), (list("xy"), [1, 100])],
)
def test_codes_are_prefix_free_and_complete(symbols, freqs):
    codes = huffman_codes(symbols, freqs)
    assert set(codes) == set(symbols)
    values = list(codes.values())
    for a in values:
        for b in values:
            if a is not b:
                assert not b.startswith(a)
    assert sum(2 ** -len(code) for code in values) == pytest.approx(1.0)


def test_more_frequent_symbols_get_shorter_codes():
    codes = huffman_codes(SYMBOLS, FREQS)
    assert len(codes["F"]) <= len(codes["A"]) <= len(codes["B"])


def test_single_symbol_has_empty_code():
    assert huffman_codes(["Q"], [7]) == {"Q": ""}


def test_dollar_symbol_is_kept():
    codes = huffman_codes(["$", "x"], [1, 2])
    assert set(codes) == {"$", "x"}


def test_empty_input_raises():
    with pytest.raises(ValueError):
        huffman_tree([], [])


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        huffman_codes(["a", "b"], [1])