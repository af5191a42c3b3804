"""
Consistency check for a single (guess, pattern) observation.

Given:
  - a candidate word
  - a previously submitted guess
  - the feedback pattern Wordle showed for that guess

Return:
  - True if the candidate could have produced exactly that feedback.

Conventions (case-insensitive):
  - 'g' : green  = letter is correct and in the correct position
  - 'y' : yellow = letter is in the word but at another position
  - 'b' : black  = letter has no unclaimed occurrence left in the word

Any other pattern symbol places no constraint on its position. Letters are
compared case-sensitively.

Algorithm (three passes over the candidate's positions, in this order):
  1) Greens claim their own position.
  2) Yellows claim the leftmost unclaimed occurrence of the letter elsewhere.
  3) Blacks require that no unclaimed occurrence of the letter remains.

Claims live in a scratch list allocated per call, so the function is pure.
"""

from typing import List

GREEN = "g"
YELLOW = "y"
BLACK = "b"


def _is(symbol: str, target: str) -> bool:
    return symbol.lower() == target


def _green_pass(word: str, guess: str, pattern: str, used: List[bool]) -> bool:
    for i, p in enumerate(pattern):
        if _is(p, GREEN):
            if word[i] != guess[i]:
                return False
            used[i] = True
    return True


def _yellow_pass(word: str, guess: str, pattern: str, used: List[bool]) -> bool:
    for i, p in enumerate(pattern):
        if not _is(p, YELLOW):
            continue
        # Same letter at the same spot would have been green.
        if word[i] == guess[i]:
            return False
        for j, ch in enumerate(word):
            if j != i and not used[j] and ch == guess[i]:
                used[j] = True
                break
        else:
            return False
    return True


def _black_pass(word: str, guess: str, pattern: str, used: List[bool]) -> bool:
    for i, p in enumerate(pattern):
        if not _is(p, BLACK):
            continue
        if any(not used[j] and ch == guess[i] for j, ch in enumerate(word)):
            return False
    return True


def matches(word: str, guess: str, pattern: str) -> bool:
    """
    Return True if `word` is consistent with `guess` having scored `pattern`.

    Length disagreement between the three strings is a non-match, not an
    error.

    Examples:
      matches("allot", "lolly", "yygbb") -> True
      matches("allot", "lolly", "ybgyb") -> False   (no second free 'l')
      matches("hello", "lolls", "byggb") -> True    (both 'l's claimed by greens)
    """
    if len(word) != len(guess) or len(guess) != len(pattern):
        return False

    used = [False] * len(word)

    return (
            _green_pass(word, guess, pattern, used)
            and _yellow_pass(word, guess, pattern, used)
            and _black_pass(word, guess, pattern, used)
    )
