from __future__ import annotations

"""Weighted Levenshtein distance over arbitrary element sequences."""

from typing import Any, Iterable, List, Optional, Sequence

from .costs import BaseCostModel, Cost, SwappedCost, UniformCost

_UNIFORM = UniformCost()


def as_sequence(items: Iterable[Any]) -> Sequence[Any]:
    if isinstance(items, Sequence):
        return items
    return tuple(items)


def _elementwise_equal(a: Sequence[Any], b: Sequence[Any]) -> bool:
    if len(a) != len(b):
        return False
    if type(a) is type(b):
        return a == b
    return all(x == y for x, y in zip(a, b))


def distance(
    a: Iterable[Any],
    b: Iterable[Any],
    cost_model: Optional[BaseCostModel] = None,
) -> Cost:
    """Return the minimum total cost of editing *a* into *b*.

    Without *cost_model* every insertion, deletion and mismatching
    substitution costs 1 (plain Levenshtein distance). Strings are compared
    per character; pass lists of words or any other tokens to compare at a
    different granularity.

    Only two rows of the cost table are kept, each ``min(len(a), len(b)) + 1``
    cells wide.
    """

    model = cost_model if cost_model is not None else _UNIFORM
    a = as_sequence(a)
    b = as_sequence(b)

    if _elementwise_equal(a, b):
        return 0

    # keep the row width bounded by the shorter input
    if len(a) > len(b):
        a, b = b, a
        model = SwappedCost(model)

    if not a:
        return sum(model.add_cost(elem) for elem in b)

    if model.uniform and len(a) == 1:
        needle = a[0]
        return len(b) - 1 if any(needle == elem for elem in b) else len(b)

    # rows run over the shorter input, one row per element of the longer one;
    # cell i holds the cost of turning a[:i] into the prefix of b seen so far
    add_cost = model.add_cost
    sub_cost = model.sub_cost
    rm_costs = [model.rm_cost(elem) for elem in a]

    prev: List[Cost] = [0] * (len(a) + 1)
    for i, cost in enumerate(rm_costs):
        prev[i + 1] = prev[i] + cost
    curr: List[Cost] = [0] * len(prev)

    for y in b:
        insert = add_cost(y)
        curr[0] = prev[0] + insert
        for i, x in enumerate(a):
            insertion = prev[i + 1] + insert
            deletion = curr[i] + rm_costs[i]
            substitution = prev[i] + sub_cost(x, y)
            curr[i + 1] = min(insertion, deletion, substitution)
        prev, curr = curr, prev

    return prev[-1]


def distance_matrix(
    a: Iterable[Any],
    b: Iterable[Any],
    cost_model: Optional[BaseCostModel] = None,
) -> List[List[Cost]]:
    """Return the full ``(len(a) + 1) x (len(b) + 1)`` cost table.

    Cell ``[i][j]`` holds the cheapest way to turn the first ``i`` elements of
    *a* into the first ``j`` elements of *b*. No shortcuts and no swapping;
    meant for inspection and for checking :func:`distance`.
    """

    model = cost_model if cost_model is not None else _UNIFORM
    a = as_sequence(a)
    b = as_sequence(b)

    table: List[List[Cost]] = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for j, y in enumerate(b, start=1):
        table[0][j] = table[0][j - 1] + model.add_cost(y)
    for i, x in enumerate(a, start=1):
        table[i][0] = table[i - 1][0] + model.rm_cost(x)
        for j, y in enumerate(b, start=1):
            table[i][j] = min(
                table[i - 1][j] + model.rm_cost(x),
                table[i][j - 1] + model.add_cost(y),
                table[i - 1][j - 1] + model.sub_cost(x, y),
            )
    return table


__all__ = ["as_sequence", "distance", "distance_matrix"]
