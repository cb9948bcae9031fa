from __future__ import annotations

"""Cost model backed by per-element lookup tables."""

from typing import Any, Dict, Hashable, Mapping, Optional, Tuple

from .base_cost import BaseCostModel, Cost


class TableCost(BaseCostModel):
    """Look up add/remove/substitute prices, falling back to *default*.

    ``remove`` defaults to the ``add`` table so symmetric weights only need to
    be declared once. Substitution pairs missing from ``substitute`` use the
    base rule ``max(rm_cost(src), add_cost(dst))``.
    """

    name = "table"

    def __init__(
        self,
        add: Optional[Mapping[Hashable, Cost]] = None,
        *,
        remove: Optional[Mapping[Hashable, Cost]] = None,
        substitute: Optional[Mapping[Tuple[Hashable, Hashable], Cost]] = None,
        default: Cost = 1,
    ) -> None:
        self.add: Dict[Hashable, Cost] = dict(add or {})
        self.remove: Dict[Hashable, Cost] = dict(remove) if remove else dict(self.add)
        self.substitute: Dict[Tuple[Hashable, Hashable], Cost] = dict(substitute or {})
        self.default = default

    def add_cost(self, elem: Any) -> Cost:
        return self.add.get(elem, self.default)

    def rm_cost(self, elem: Any) -> Cost:
        return self.remove.get(elem, self.default)

    def sub_cost(self, src: Any, dst: Any) -> Cost:
        if src == dst:
            return 0
        cost = self.substitute.get((src, dst))
        if cost is not None:
            return cost
        return super().sub_cost(src, dst)

    def __repr__(self) -> str:
        return (
            f"TableCost(add={len(self.add)}, remove={len(self.remove)}, "
            f"substitute={len(self.substitute)}, default={self.default!r})"
        )


__all__ = ["TableCost"]
