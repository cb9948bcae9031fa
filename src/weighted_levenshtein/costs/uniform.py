from __future__ import annotations

"""Unit-weight cost models."""

from typing import Any

from .base_cost import BaseCostModel, Cost


class UniformCost(BaseCostModel):
    """Plain Levenshtein weights: every edit costs 1, a match costs 0."""

    name = "uniform"
    uniform = True

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # repriced subclasses lose the unit-cost shortcuts
        if any(method in vars(cls) for method in ("add_cost", "rm_cost", "sub_cost")):
            cls.uniform = False

    def add_cost(self, elem: Any) -> Cost:
        return 1

    def rm_cost(self, elem: Any) -> Cost:
        return 1

    def sub_cost(self, src: Any, dst: Any) -> Cost:
        return 0 if src == dst else 1


class IndelCost(BaseCostModel):
    """Insertions and deletions only; a substitution is a remove plus an add."""

    name = "indel"

    def add_cost(self, elem: Any) -> Cost:
        return 1

    def rm_cost(self, elem: Any) -> Cost:
        return 1

    def sub_cost(self, src: Any, dst: Any) -> Cost:
        return 0 if src == dst else 2


__all__ = ["UniformCost", "IndelCost"]
