from __future__ import annotations

"""Cost model registry."""

import logging
from typing import Any, Dict, Type

from .base_cost import BaseCostModel, Cost, SwappedCost
from .element import EditWeight, ElementCost
from .table import TableCost
from .uniform import IndelCost, UniformCost

logger = logging.getLogger(__name__)

_COST_MODELS: Dict[str, Type[BaseCostModel]] = {
    UniformCost.name: UniformCost,
    IndelCost.name: IndelCost,
    TableCost.name: TableCost,
    ElementCost.name: ElementCost,
}


def get_cost_model(name: str, **kwargs: Any) -> BaseCostModel:
    try:
        model_cls = _COST_MODELS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown cost model '{name}'") from exc
    return model_cls(**kwargs)


def register_cost_model(model_cls: Type[BaseCostModel]) -> None:
    """Register a new cost model class by its declared name."""

    name = getattr(model_cls, "name", None)
    if not name or name == BaseCostModel.name:
        raise ValueError("Cost model class must define a name")
    if name in _COST_MODELS and _COST_MODELS[name] is not model_cls:
        logger.warning("Replacing cost model '%s' (%s)", name, _COST_MODELS[name].__name__)
    _COST_MODELS[name] = model_cls


def available_cost_models() -> Dict[str, Type[BaseCostModel]]:
    """Return the currently registered cost model mapping."""

    return dict(_COST_MODELS)


__all__ = [
    "BaseCostModel",
    "Cost",
    "SwappedCost",
    "UniformCost",
    "IndelCost",
    "TableCost",
    "EditWeight",
    "ElementCost",
    "get_cost_model",
    "register_cost_model",
    "available_cost_models",
]
