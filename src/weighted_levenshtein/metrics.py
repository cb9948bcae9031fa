from __future__ import annotations

"""Normalized distance and similarity scores."""

from typing import Any, Iterable, Optional

from .costs import BaseCostModel, Cost, UniformCost
from .engine import as_sequence, distance


def max_distance(
    a: Iterable[Any], b: Iterable[Any], cost_model: Optional[BaseCostModel] = None
) -> Cost:
    """Upper bound on :func:`distance` used for normalisation.

    Under uniform weights this is ``max(len(a), len(b))``; for any other
    model it is the price of removing all of *a* and adding all of *b*.
    """

    model = cost_model if cost_model is not None else UniformCost()
    a = as_sequence(a)
    b = as_sequence(b)
    if model.uniform:
        return max(len(a), len(b))
    return sum(model.rm_cost(x) for x in a) + sum(model.add_cost(y) for y in b)


def normalized_distance(
    a: Iterable[Any], b: Iterable[Any], cost_model: Optional[BaseCostModel] = None
) -> float:
    """Distance scaled into ``[0, 1]`` by :func:`max_distance`."""

    a = as_sequence(a)
    b = as_sequence(b)
    bound = max_distance(a, b, cost_model)
    if not bound:
        return 0.0
    return distance(a, b, cost_model) / bound


def similarity(
    a: Iterable[Any], b: Iterable[Any], cost_model: Optional[BaseCostModel] = None
) -> float:
    """``1 - normalized_distance``; 1.0 for identical sequences."""

    return 1.0 - normalized_distance(a, b, cost_model)


__all__ = ["max_distance", "normalized_distance", "similarity"]
