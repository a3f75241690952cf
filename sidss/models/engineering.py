"""
Engineering model: aggregates the bill of quantities.
"""

from typing import Iterable

from ..inputs import BillOfQuantitiesItem
from ..metrics import EngineeringMetrics


class EngineeringModel:
    def calculate_metrics(self, boq: Iterable[BillOfQuantitiesItem]) -> EngineeringMetrics:
        total_cost = 0.0
        total_mass = 0.0
        for item in boq:
            total_cost += item.quantity * item.unit_cost
            total_mass += item.quantity
        return EngineeringMetrics(
            total_construction_cost=total_cost,
            total_material_mass=total_mass,
        )
