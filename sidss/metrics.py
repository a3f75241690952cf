"""
Metric groups produced by the four sub-models and the aggregated result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ApprovalStatus(Enum):
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class EngineeringMetrics:
    total_construction_cost: float
    total_material_mass: float


@dataclass(frozen=True)
class EnvironmentalMetrics:
    """
    Carbon accounting for one project

    Attributes:
        material_carbon_kg: Embodied carbon from the BOQ (kgCO2e)
        material_carbon_tons: Embodied carbon in tons
        operational_carbon_tons: Operational carbon over the whole design life
        total_carbon_tons: Embodied + operational
        environmental_score: 100 for zero carbon, floored at 0
    """
    material_carbon_kg: float
    material_carbon_tons: float
    operational_carbon_tons: float
    total_carbon_tons: float
    environmental_score: float


@dataclass(frozen=True)
class FinancialMetrics:
    """
    Life-cycle financial analysis

    Attributes:
        npv: Net present value of the cash-flow series
        irr: Internal rate of return in percent (approximate)
        payback_period: Not computed, always 0.0
        life_cycle_cost: Construction cost + accumulated maintenance
        financial_score: 50 at break-even, clamped to [0, 100]
        initial_investment: Construction cost net of subsidy
        cash_flows: Year 0..design life, index 0 = -initial_investment
        irr_converged: False when the IRR solver stopped without converging
        maintenance_costs: Maintenance of years 1..design life (index t - 1)
        annual_carbon_tax: Carbon tax charged in every operating year
    """
    npv: float
    irr: float
    payback_period: float
    life_cycle_cost: float
    financial_score: float
    initial_investment: float
    cash_flows: Tuple[float, ...]
    irr_converged: bool
    maintenance_costs: Tuple[float, ...] = ()
    annual_carbon_tax: float = 0.0


@dataclass(frozen=True)
class SocialMetrics:
    social_score: float


@dataclass(frozen=True)
class EvaluationResult:
    """Aggregated Go/No-Go evaluation of one ProjectRequest"""
    project_name: str
    engineering: EngineeringMetrics
    financial: FinancialMetrics
    environmental: EnvironmentalMetrics
    social: SocialMetrics
    engineering_score: float
    final_score: float
    approval_status: ApprovalStatus
    decision_log: Tuple[str, ...]
    diagnostics: Tuple[str, ...] = ()

    @property
    def approved(self) -> bool:
        return self.approval_status is ApprovalStatus.APPROVED
