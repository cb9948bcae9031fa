from __future__ import annotations

"""Cost model base class."""

from typing import Any, Union

Cost = Union[int, float]


class BaseCostModel:
    """Prices the three edit operations for one element type.

    Subclasses override :meth:`add_cost` and optionally :meth:`rm_cost` and
    :meth:`sub_cost`. Every method must be pure: the engine may call them any
    number of times and in any order.
    """

    name: str = "base"
    uniform: bool = False

    def add_cost(self, elem: Any) -> Cost:  # pragma: no cover - interface
        """Price of inserting *elem* into the target sequence."""

        raise NotImplementedError

    def rm_cost(self, elem: Any) -> Cost:
        """Price of deleting *elem* from the source sequence."""

        return self.add_cost(elem)

    def sub_cost(self, src: Any, dst: Any) -> Cost:
        """Price of replacing *src* with *dst*; zero when they are equal."""

        if src == dst:
            return 0
        return max(self.rm_cost(src), self.add_cost(dst))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SwappedCost(BaseCostModel):
    """View of *inner* with insertion and deletion exchanged.

    Turning ``b`` into ``a`` under this view costs exactly as much as turning
    ``a`` into ``b`` under *inner*.
    """

    name = "swapped"

    def __init__(self, inner: BaseCostModel) -> None:
        self.inner = inner
        self.uniform = inner.uniform

    def add_cost(self, elem: Any) -> Cost:
        return self.inner.rm_cost(elem)

    def rm_cost(self, elem: Any) -> Cost:
        return self.inner.add_cost(elem)

    def sub_cost(self, src: Any, dst: Any) -> Cost:
        return self.inner.sub_cost(dst, src)

    def __repr__(self) -> str:
        return f"SwappedCost({self.inner!r})"


__all__ = ["BaseCostModel", "SwappedCost", "Cost"]
