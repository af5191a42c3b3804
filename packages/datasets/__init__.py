from .summary import summarize_dictionary, pretty_summary
from .io import load_dictionary, write_lines

__all__ = ["summarize_dictionary", "pretty_summary", "load_dictionary", "write_lines"]
