from .validator import validate_candidates, pretty_summary
from .io import load_candidates

__all__ = ["validate_candidates", "pretty_summary", "load_candidates"]
