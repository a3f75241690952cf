"""
Environmental model: embodied + operational carbon and the carbon score.

Operational carbon is a fixed yearly fraction of embodied carbon, not a
physical model of HVAC, lighting or traffic load.
"""

from typing import Iterable

from ..constants import DEFAULT_CONSTANTS, ModelConstants
from ..inputs import BillOfQuantitiesItem
from ..metrics import EnvironmentalMetrics


class EnvironmentalModel:
    def __init__(self, constants: ModelConstants = DEFAULT_CONSTANTS):
        self.constants = constants

    def calculate_impact(
        self,
        boq: Iterable[BillOfQuantitiesItem],
        design_life_years: int,
    ) -> EnvironmentalMetrics:
        c = self.constants

        material_carbon_kg = 0.0
        for item in boq:
            material_carbon_kg += item.quantity * item.carbon_factor
        material_carbon_tons = material_carbon_kg / c.kg_per_ton

        annual_operational_tons = material_carbon_tons * c.operational_carbon_fraction
        operational_carbon_tons = annual_operational_tons * design_life_years

        total_carbon_tons = material_carbon_tons + operational_carbon_tons

        # 100 is zero carbon, 0 at (or beyond) the reference ceiling
        score = max(0.0, 100 - (total_carbon_tons / c.carbon_reference_tons * 100))

        return EnvironmentalMetrics(
            material_carbon_kg=material_carbon_kg,
            material_carbon_tons=material_carbon_tons,
            operational_carbon_tons=operational_carbon_tons,
            total_carbon_tons=total_carbon_tons,
            environmental_score=score,
        )
