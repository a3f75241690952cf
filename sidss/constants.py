"""
Fixed policy knobs of the multi-criteria decision model

Every literal the scoring formulas depend on lives here so it can be audited
or overridden without touching the formulas. Defaults are the dataclass
field values; the same numbers ship in data/model_constants.json.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of the final weighted-sum decision rule"""
    financial: float = 0.4
    environmental: float = 0.3
    social: float = 0.2
    engineering: float = 0.1

    @property
    def total(self) -> float:
        return self.financial + self.environmental + self.social + self.engineering


@dataclass(frozen=True)
class SocialNormalization:
    jobs_reference: float = 500.0  # jobs for a full jobs score
    population_reference: float = 10000.0  # people served for a full population score
    safety_scale: float = 10.0
    jobs_weight: float = 40.0
    population_weight: float = 40.0
    safety_weight: float = 20.0


@dataclass(frozen=True)
class IRRSettings:
    """Newton-Raphson settings for the internal-rate-of-return solver"""
    initial_rate: float = 0.10
    max_iterations: int = 20
    tolerance: float = 1e-6  # step size at which the rate counts as converged
    min_derivative: float = 1e-6  # stop before dividing by a flatter slope


@dataclass(frozen=True)
class ModelConstants:
    """
    All constants of the evaluation model

    Attributes:
        weights: Final score weights (financial/environmental/social/engineering)
        carbon_reference_tons: Total carbon that scores 0 ("worst case" project)
        operational_carbon_fraction: Yearly operational carbon as share of embodied
        kg_per_ton: Carbon mass conversion
        cost_per_year_divisor: Normalization of life-cycle cost per year
        carbon_tax_volume_tons: Fixed taxed volume per year in the cash flow
        financial_baseline_score: Financial score of a break-even project
        npv_ratio_slope: Score points per unit of NPV / initial investment
        social: Social score normalization
        irr: IRR solver settings
    """
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    carbon_reference_tons: float = 50000.0
    operational_carbon_fraction: float = 0.02
    kg_per_ton: float = 1000.0
    cost_per_year_divisor: float = 10000.0
    carbon_tax_volume_tons: float = 100.0
    financial_baseline_score: float = 50.0
    npv_ratio_slope: float = 25.0
    social: SocialNormalization = field(default_factory=SocialNormalization)
    irr: IRRSettings = field(default_factory=IRRSettings)


DEFAULT_CONSTANTS = ModelConstants()

DEFAULT_CONSTANTS_PATH = Path(__file__).resolve().parent / "data" / "model_constants.json"


def _apply_overrides(base: Any, overrides: Dict[str, Any], path: str) -> Any:
    known = {f.name: f for f in fields(base)}
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        where = f"{path}.{key}" if path else key
        if key not in known:
            raise ValueError(f"Unknown model constant '{where}'")
        current = getattr(base, key)
        if is_dataclass(current):
            if not isinstance(value, dict):
                raise ValueError(f"Model constant group '{where}' must be an object")
            changes[key] = _apply_overrides(current, value, where)
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Model constant '{where}' is not numeric: {value!r}")
        changes[key] = int(value) if isinstance(current, int) else float(value)
    return replace(base, **changes)


def constants_from_dict(data: Dict[str, Any]) -> ModelConstants:
    """
    Build ModelConstants from a nested mapping.

    Missing keys keep their defaults; unknown keys and non-numeric values
    raise ValueError.
    """
    return _apply_overrides(DEFAULT_CONSTANTS, data, "")


def load_model_constants(path: Optional[Path] = None) -> ModelConstants:
    base = path or DEFAULT_CONSTANTS_PATH
    with open(base, "r", encoding="utf-8") as fp:
        return constants_from_dict(json.load(fp))
