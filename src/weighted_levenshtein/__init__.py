"""Weighted Levenshtein distance over arbitrary sequences."""
from importlib.metadata import version, PackageNotFoundError

from .costs import (
    BaseCostModel,
    EditWeight,
    ElementCost,
    IndelCost,
    TableCost,
    UniformCost,
    available_cost_models,
    get_cost_model,
    register_cost_model,
)
from .engine import distance, distance_matrix
from .matching import Match, best_match, pairwise, rank
from .metrics import max_distance, normalized_distance, similarity

try:
    __version__ = version("weighted-levenshtein")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "distance",
    "distance_matrix",
    "BaseCostModel",
    "UniformCost",
    "IndelCost",
    "TableCost",
    "EditWeight",
    "ElementCost",
    "get_cost_model",
    "register_cost_model",
    "available_cost_models",
    "max_distance",
    "normalized_distance",
    "similarity",
    "Match",
    "rank",
    "best_match",
    "pairwise",
]
