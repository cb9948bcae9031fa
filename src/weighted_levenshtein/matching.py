from __future__ import annotations

"""Approximate lookup of a query among candidate sequences."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

import numpy as np

from .costs import BaseCostModel, Cost
from .engine import as_sequence, distance


@dataclass(frozen=True)
class Match:
    choice: Any
    index: int
    distance: Cost


def rank(
    query: Iterable[Any],
    choices: Iterable[Any],
    cost_model: Optional[BaseCostModel] = None,
    *,
    limit: Optional[int] = None,
) -> List[Match]:
    """Score every choice against *query*, closest first.

    Ties keep the order of *choices*.
    """

    query = as_sequence(query)
    matches = [
        Match(choice=choice, index=index, distance=distance(query, choice, cost_model))
        for index, choice in enumerate(choices)
    ]
    matches.sort(key=lambda match: match.distance)
    if limit is not None:
        return matches[: max(limit, 0)]
    return matches


def best_match(
    query: Iterable[Any],
    choices: Iterable[Any],
    cost_model: Optional[BaseCostModel] = None,
    *,
    max_cost: Optional[Cost] = None,
) -> Optional[Match]:
    """Return the closest choice, or ``None`` if none is within *max_cost*."""

    matches = rank(query, choices, cost_model, limit=1)
    if not matches:
        return None
    best = matches[0]
    if max_cost is not None and best.distance > max_cost:
        return None
    return best


def pairwise(
    sequences: Sequence[Any], cost_model: Optional[BaseCostModel] = None
) -> np.ndarray:
    """Square matrix of distances between every pair of *sequences*.

    Cell ``[i, j]`` is ``distance(sequences[i], sequences[j])``; the diagonal
    is zero. Both triangles are computed since a model may price insertions
    and deletions differently.
    """

    size = len(sequences)
    values = [
        [distance(sequences[i], sequences[j], cost_model) for j in range(size)]
        for i in range(size)
    ]
    is_integral = all(isinstance(value, int) for row in values for value in row)
    return np.array(values, dtype=np.int64 if is_integral else np.float64).reshape(
        size, size
    )


__all__ = ["Match", "rank", "best_match", "pairwise"]
