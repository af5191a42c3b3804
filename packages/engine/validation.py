"""
Boundary validation for observations typed by a user.

The matcher itself accepts any pattern and treats unknown symbols as
"no constraint". Callers that take patterns from people (the CLI, a strict
Session) run them through here first so typos are reported instead of
silently widening the candidate set.

An observation is valid iff:
  - the guess is a non-empty string
  - the pattern uses only 'g', 'y', 'b' (any case)
  - the pattern has the same length as the guess
"""

from typing import Optional, Tuple

PATTERN_SYMBOLS = "gyb"


class InvalidObservation(ValueError):
    """A guess/pattern pair that cannot be applied to a candidate set."""


def validate_pattern(pattern: str, N: Optional[int] = None) -> str:
    """
    Return `pattern` lowercased, or raise InvalidObservation.

    Args:
      pattern : feedback string, e.g. "YBBGy"
      N       : required length, if known
    """
    if not isinstance(pattern, str) or not pattern:
        raise InvalidObservation("pattern must be a non-empty string")

    p = pattern.lower()
    bad = sorted({ch for ch in p if ch not in PATTERN_SYMBOLS})
    if bad:
        raise InvalidObservation(
            f"pattern {pattern!r} contains invalid symbol(s) {bad}; "
            f"use only {', '.join(PATTERN_SYMBOLS)}")

    if N is not None and len(p) != N:
        raise InvalidObservation(f"pattern {pattern!r} must have {N} symbols; got {len(p)}")

    return p


def validate_observation(guess: str, pattern: str) -> Tuple[str, str]:
    """Check a full (guess, pattern) pair; returns it with the pattern lowercased."""
    if not isinstance(guess, str) or not guess:
        raise InvalidObservation("guess must be a non-empty string")
    return guess, validate_pattern(pattern, N=len(guess))

