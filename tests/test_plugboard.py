import pytest

from alphabet import ALPHABET
from errors import ConfigurationError
from plugboard import MAX_PAIRS, Plugboard, swap

PAIRS = [["A", "B"], ["C", "D"]]


@pytest.mark.parametrize(
    "letter, expected",
    [("A", "B"), ("B", "A"), ("C", "D"), ("D", "C"), ("E", "E")],
)
def test_swap(letter, expected):
    assert swap(letter, PAIRS) == expected


def test_swap_without_pairs_is_identity():
    assert all(swap(ch, []) == ch for ch in ALPHABET)


@pytest.mark.parametrize("letter", list(ALPHABET))
def test_swap_is_involution(letter):
    pairs = ["AZ", "BY", "CX", "QW", "MN"]
    assert swap(swap(letter, pairs), pairs) == letter


def test_plugboard_accepts_strings_and_tuples():
    board = Plugboard(["ab", ("C", "d")])
    assert board.pairs == [("A", "B"), ("C", "D")]
    assert board.swap("A") == "B"
    assert board.swap("D") == "C"
    assert board.swap("E") == "E"


def test_plugboard_matches_swap():
    pairs = ["AZ", "BY", "CX"]
    board = Plugboard(pairs)
    assert all(board.swap(ch) == swap(ch, board.pairs) for ch in ALPHABET)


def test_full_plugboard_is_allowed():
    pairs = [ALPHABET[i] + ALPHABET[i + 1] for i in range(0, 26, 2)]
    assert len(pairs) == MAX_PAIRS
    board = Plugboard(pairs)
    assert all(board.swap(ch) != ch for ch in ALPHABET)


@pytest.mark.parametrize(
    "pairs",
    [
        ["AA"],                       # self-pair
        ["AB", "BC"],                 # letter reused
        ["AB", "CA"],
        ["A1"],                       # not a letter
        ["ABC"],                      # wrong length
        ["A"],
        [1],
        ["AB", "CD", "EF", "GH", "IJ", "KL", "MN", "OP", "QR", "ST", "UV", "WX", "YZ", "ZA"],
    ],
)
def test_plugboard_rejects_bad_pairs(pairs):
    with pytest.raises(ConfigurationError):
        Plugboard(pairs)
