import random
import pytest
import regex
from pretoken_scanner.pattern_scanner import find_matches
from pretoken_scanner.pretoken_utilities import REFERENCE_PRETOKEN_REGEX

reference_regex = regex.compile(REFERENCE_PRETOKEN_REGEX)

# characters from every class the rules distinguish, restricted to long assigned codepoints
alphabet = [
    "a", "b", "e", "l", "r", "v", "x", "S", "D", "M", "T", "L", "V", "R", "E",
    "'", "'", "'", ",", ".", "!", "$", "-", "_",
    "0", "1", "7", chr(0x0663), chr(0x216B), chr(0x00BD),
    " ", " ", " ", "\t", "\n", "\r", chr(0xA0), chr(0x2009), chr(0x3000),
    chr(0xE9), chr(0xDF), chr(0x0416), chr(0x4E2D), chr(0x01C5), chr(0x02B0),
    chr(0x0301), chr(0x1F600), chr(0x00A9),
]

@pytest.mark.parametrize("text", [
    "",
    "Hello world, it's 2024!\nI'll be there at 10:30 -- don't be late.\r\n",
    "    indented code()\n\tand tabs\n\n\n   trailing   ",
    "We'RE 'll 'VE 'D 'm 'T 's",
    "price: $1,234,567.89 (approx.)",
    "emoji " + chr(0x1F600) + chr(0x1F600) + " and symbols " + chr(0x00A9) + chr(0x00AE),
    "cafe" + chr(0x0301) + " na" + chr(0xEF) + "ve " + chr(0x4E2D) + chr(0x6587) + " " + chr(0x0663) * 5,
    "a  b   c    d\n  \n e",
    "x" + chr(0xA0) + chr(0xA0) + "y" + chr(0x3000) + "z",
    "!!!\n\n!!! \n !",
])
def test_matches_reference_regex(text):
    assert find_matches(text) == reference_regex.findall(text)

def test_matches_reference_regex_on_random_text():
    rng = random.Random(1234)
    for _ in range(2000):
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 24)))
        assert find_matches(text) == reference_regex.findall(text), repr(text)

@pytest.mark.parametrize("text", [
    "a" + chr(0x0558) + "b",
    " " + chr(0x1E030) + chr(0x0558) + " 1" + chr(0x0558),
])
def test_matches_reference_regex_on_recently_assigned_letters(text):
    assert find_matches(text) == reference_regex.findall(text)

def test_recently_assigned_letter_joins_the_word():
    assert find_matches("a" + chr(0x0558) + "b") == ["a" + chr(0x0558) + "b"]
