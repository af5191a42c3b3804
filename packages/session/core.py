"""
Candidate-set session primitives.

- Session:   owns one player's candidate set (interactive loop or batch run).
- run_batch: apply a fixed list of observations to a dictionary in one go.

The dictionary is stored as a tuple and never modified; `reset` always goes
back to it. These are UI-agnostic so the CLI, a notebook, or tests can drive
them directly.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from packages.engine import apply_feedback, list_candidates, reset_candidates
from packages.engine.validation import validate_observation

log = logging.getLogger(__name__)


class Session:
    """
    Candidate set plus the observations that produced it.

    Args:
        dictionary: every word the session may ever offer (order is kept)
        strict:     validate each (guess, pattern) before applying it; with
                    strict=False unknown pattern symbols act as wildcards
    """

    def __init__(self, dictionary: Iterable[str], *, strict: bool = True):
        self.dictionary: Tuple[str, ...] = tuple(dictionary)
        self.strict = strict
        self.candidates: List[str] = []
        self.history: List[Tuple[str, str]] = []
        self.reset()

    def __len__(self) -> int:
        return len(self.candidates)

    def reset(self) -> List[str]:
        """Drop all observations and restore the full dictionary."""
        self.candidates = reset_candidates(self.dictionary)
        self.history = []
        log.debug("session reset to %d words", len(self.candidates))
        return self.list()

    def apply(self, guess: str, pattern: str) -> List[str]:
        """
        Narrow the candidates with one observation and return the survivors.

        Raises InvalidObservation (strict sessions only) without touching the
        current candidates.
        """
        if self.strict:
            guess, pattern = validate_observation(guess, pattern)

        before = len(self.candidates)
        self.candidates = apply_feedback(self.candidates, guess, pattern)
        self.history.append((guess, pattern))
        log.debug("%s/%s: %d -> %d candidates", guess, pattern, before, len(self.candidates))
        return self.list()

    def list(self) -> List[str]:
        return list_candidates(self.candidates)


def run_batch(
        dictionary: Iterable[str],
        observations: Iterable[Tuple[str, str]],
        *,
        strict: bool = True,
) -> List[str]:
    """
    Apply every (guess, pattern) in order and return the remaining words.

    Equivalent to a fresh Session with one `apply` per observation.
    """
    session = Session(dictionary, strict=strict)
    for guess, pattern in observations:
        session.apply(guess, pattern)
    return session.list()
