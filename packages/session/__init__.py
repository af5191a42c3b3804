from .core import Session, run_batch

__all__ = ["Session", "run_batch"]
