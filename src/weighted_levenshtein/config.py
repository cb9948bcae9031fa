from __future__ import annotations

"""Cost-table schema models and YAML loading."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, NonNegativeFloat, ValidationError

from .costs import TableCost

logger = logging.getLogger(__name__)


class SubstitutionModel(BaseModel):
    """One explicit substitution price."""

    src: str
    dst: str
    cost: float = Field(ge=0)


class CostTableModel(BaseModel):
    """Per-token weights declared in a cost-table file."""

    name: Optional[str] = None
    default: float = Field(default=1, ge=0)
    add: Dict[str, NonNegativeFloat] = Field(default_factory=dict)
    remove: Dict[str, NonNegativeFloat] = Field(default_factory=dict)
    substitute: List[SubstitutionModel] = Field(default_factory=list)


class CostTableNotFoundError(FileNotFoundError):
    """Raised when a cost-table file cannot be located."""


def _as_cost(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


def load_cost_table(path: Path) -> CostTableModel:
    """Read and validate a YAML cost table."""

    if not path.exists():
        raise CostTableNotFoundError(f"Cost table not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in cost table {path}: {exc}") from exc
    try:
        table = CostTableModel.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid cost table {path}: {exc}") from exc
    logger.debug(
        "Loaded cost table %s from %s (%d add, %d remove, %d substitute)",
        table.name or path.stem,
        path,
        len(table.add),
        len(table.remove),
        len(table.substitute),
    )
    return table


def build_cost_model(table: CostTableModel) -> TableCost:
    """Turn a validated table into a :class:`TableCost`.

    Whole-number weights stay integers so distances come back as ``int``.
    """

    return TableCost(
        {token: _as_cost(cost) for token, cost in table.add.items()},
        remove={token: _as_cost(cost) for token, cost in table.remove.items()} or None,
        substitute={
            (entry.src, entry.dst): _as_cost(entry.cost) for entry in table.substitute
        },
        default=_as_cost(table.default),
    )


__all__ = [
    "SubstitutionModel",
    "CostTableModel",
    "CostTableNotFoundError",
    "load_cost_table",
    "build_cost_model",
]
