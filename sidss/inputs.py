"""
Evaluation Request Data Structures

Everything the engine reads for one evaluation: the bill of quantities plus
the maintenance, economic, social and policy parameter groups.

KEY PRINCIPLE: A request is a VALUE. It is built once (usually by
sidss.payload from raw dashboard fields) and never mutated while the models
read it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class ProjectType(Enum):
    """Kind of infrastructure asset (informational, no scoring branch)"""
    BUILDING = "BUILDING"
    BRIDGE = "BRIDGE"
    ROAD = "ROAD"


@dataclass(frozen=True)
class BillOfQuantitiesItem:
    """
    One material line of the bill of quantities

    Attributes:
        name: Free-text label (not used in any calculation)
        quantity: Physical quantity in the material's own unit
        unit_cost: Currency per unit
        carbon_factor: kgCO2e per unit
    """
    name: str
    quantity: float
    unit_cost: float
    carbon_factor: float


@dataclass(frozen=True)
class MaintenanceParams:
    annual_maintenance_cost: float = 0.0
    degradation_rate: float = 0.0  # yearly growth of maintenance cost, e.g. 0.02


@dataclass(frozen=True)
class EconomicParams:
    discount_rate: float = 0.0  # e.g. 0.05 for 5%
    annual_economic_benefit: float = 0.0  # tolls, rent, monetized social value


@dataclass(frozen=True)
class SocialParams:
    jobs_created: int = 0
    population_served: int = 0
    safety_score: float = 0.0  # 1-10 intended, not enforced


@dataclass(frozen=True)
class PolicyParams:
    subsidy_rate: float = 0.0  # % of construction cost covered by government
    carbon_tax_rate: float = 0.0  # currency per ton CO2
    approval_threshold: float = 0.0  # score out of 100 needed for approval


@dataclass(frozen=True)
class ProjectRequest:
    """A complete, already-coerced evaluation request"""
    name: str
    project_type: ProjectType
    design_life_years: int
    construction_duration_months: int
    boq: Tuple[BillOfQuantitiesItem, ...] = ()
    maintenance: MaintenanceParams = field(default_factory=MaintenanceParams)
    economics: EconomicParams = field(default_factory=EconomicParams)
    social: SocialParams = field(default_factory=SocialParams)
    policy: PolicyParams = field(default_factory=PolicyParams)

    def __post_init__(self):
        # Lists from callers are frozen into a tuple so the request stays hashable
        if not isinstance(self.boq, tuple):
            object.__setattr__(self, "boq", tuple(self.boq))
