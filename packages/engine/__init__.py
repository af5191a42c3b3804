from .matching import matches
from .scoring import score
from .constraints import apply_feedback, filter_candidates, list_candidates, reset_candidates
from .validation import InvalidObservation, validate_observation, validate_pattern

__all__ = [
    "matches",
    "score",
    "apply_feedback",
    "filter_candidates",
    "list_candidates",
    "reset_candidates",
    "InvalidObservation",
    "validate_observation",
    "validate_pattern",
]
