from .commonality import commonality, commonality_matrix
from .constraints import filter_candidates
from .filtration import filtration_power, recommend, recommend_matrix
from .validation import validate_correctness

__all__ = [
    "commonality", "commonality_matrix", "filter_candidates",
    "filtration_power", "recommend", "recommend_matrix",
    "validate_correctness",
]
