"""String routines: run trimming, pair removal scoring and word checks."""

from __future__ import annotations

from itertools import groupby

_VOWELS = frozenset("aeiou")


def make_fancy_string(s: str) -> str:
    """Delete the fewest characters so no three consecutive characters are equal."""
    return "".join(char * min(len(list(run)), 2) for char, run in groupby(s))


def _strip_pair(text: str, pair: str) -> str:
    first, second = pair
    stack: list[str] = []
    for char in text:
        if char == second and stack and stack[-1] == first:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def maximum_gain(s: str, x: int, y: int) -> int:
    """Return the best score from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    high, low = ("ab", "ba") if x > y else ("ba", "ab")
    after_first = _strip_pair(s, high)
    after_second = _strip_pair(after_first, low)
    first_pairs = (len(s) - len(after_first)) // 2
    second_pairs = (len(after_first) - len(after_second)) // 2
    return first_pairs * max(x, y) + second_pairs * min(x, y)


def largest_good_integer(num: str) -> str:
    """Return the largest substring of three equal digits, or an empty string."""
    return max(
        (a * 3 for a, b, c in zip(num, num[1:], num[2:]) if a == b == c),
        default="",
    )


def is_valid_word(word: str) -> bool:
    """Tell whether a word has 3+ ASCII letters/digits, a vowel and a consonant."""
    if len(word) < 3:
        return False
    has_vowel = has_consonant = False
    for char in word:
        if char.isascii() and char.isalpha():
            if char.lower() in _VOWELS:
                has_vowel = True
            else:
                has_consonant = True
        elif not (char.isascii() and char.isdigit()):
            return False
    return has_vowel and has_consonant