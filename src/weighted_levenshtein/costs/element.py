from __future__ import annotations

"""Weights carried by the elements themselves."""

from typing import Any

from .base_cost import BaseCostModel, Cost


class EditWeight:
    """Mixin for element types that price their own edits.

    Subclass it (alongside ``Enum`` or a dataclass, for example) and override
    :meth:`addrm_cost`; :meth:`sub_cost` then follows the default rule. Pass
    :class:`ElementCost` as the cost model to use these weights.
    """

    def addrm_cost(self) -> Cost:
        return 1

    def sub_cost(self, other: Any) -> Cost:
        if self == other:
            return 0
        return max(self.addrm_cost(), other.addrm_cost())


class ElementCost(BaseCostModel):
    """Delegate every price to the :class:`EditWeight` elements."""

    name = "element"

    def add_cost(self, elem: EditWeight) -> Cost:
        return elem.addrm_cost()

    def sub_cost(self, src: EditWeight, dst: EditWeight) -> Cost:
        return src.sub_cost(dst)


__all__ = ["EditWeight", "ElementCost"]
