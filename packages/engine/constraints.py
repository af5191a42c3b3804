"""
Candidate filtering given observed feedback.

Given:
  - a pool of words (the dictionary, or what is left of it)
  - one or more (guess, pattern) observations

Return:
  - words consistent with ALL observations, in their original order.

This is the step that turns feedback into a shrinking candidate set. Every
operation here returns a new list; the input sequence is never mutated, so the
original dictionary can be reused for any number of resets.
"""

from typing import Iterable, List, Sequence, Tuple

from .matching import matches

# History is a sequence of (guess, pattern) tuples as typed by the player.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def reset_candidates(dictionary: Iterable[str]) -> List[str]:
    """Start over: a fresh candidate list holding the whole dictionary."""
    return list(dictionary)


def apply_feedback(candidates: Iterable[str], guess: str, pattern: str) -> List[str]:
    """
    Keep only the candidates that could have produced `pattern` for `guess`.

    Words whose length differs from the guess never match.
    """
    return [w for w in candidates if matches(w, guess, pattern)]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with every (guess, pattern) in `history`.

    Each observation is checked independently against the word; observations
    are never compared with each other.

    Args:
      words   : iterable of candidate words (often the whole dictionary)
      history : iterable of (guess, pattern) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if all(matches(w, g, patt) for g, patt in history):
            out.append(w)

    return out


def list_candidates(candidates: Sequence[str]) -> List[str]:
    return list(candidates)
