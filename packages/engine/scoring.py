"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (same alphabet the matcher reads):
  - 'g' : green  = correct letter in the correct position
  - 'y' : yellow = correct letter in the wrong position
  - 'b' : black  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and counts the remaining (unmatched) letters
     from the answer.
  2) Second pass marks yellows only if the letter still has remaining count.

Any answer survives filtering by its own feedback:
  matches(answer, guess, score(guess, answer)) is always True.
"""

from collections import Counter

from .matching import BLACK, GREEN, YELLOW


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern Wordle would show for `guess` against `answer`.

    Letters are compared as given (no case folding), matching `matches`.

    Raises:
      ValueError if the two words differ in length.

    Examples:
      score("belle", "level") -> "bgyyy"
      score("lemon", "level") -> "ggbbb"
    """
    if len(guess) != len(answer):
        raise ValueError(
            f"guess and answer must be the same length; got {len(guess)} and {len(answer)}")

    pattern = [BLACK] * len(guess)

    # Pass 1: greens, and leftover letters of the answer for pass 2.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = GREEN
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the answer's multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return "".join(pattern)
