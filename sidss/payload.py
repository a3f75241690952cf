"""
Boundary layer between raw input fields and the engine.

Raw payloads use the camelCase field names of the v1 JSON API
(designLifeYears, unitCost, annualEconomicBenefit, ...). Blank or non-numeric
numeric fields become 0 here so the engine only ever sees machine numbers:

    - float fields take the longest numeric prefix ("12.5kg" -> 12.5)
    - int fields take the integer prefix ("12.7" -> 12), floats truncate
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, List, Mapping, Optional

from .inputs import (
    BillOfQuantitiesItem,
    EconomicParams,
    MaintenanceParams,
    PolicyParams,
    ProjectRequest,
    ProjectType,
    SocialParams,
)
from .metrics import EvaluationResult

logger = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def _coerced_zero(field: str, value: Any, warnings: Optional[List[str]]):
    message = f"Field '{field}' value {value!r} is blank or not numeric; using 0"
    logger.warning(message)
    if warnings is not None:
        warnings.append(message)


def coerce_float(value: Any, field: str = "value", warnings: Optional[List[str]] = None) -> float:
    if isinstance(value, bool) or value is None:
        _coerced_zero(field, value, warnings)
        return 0.0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            _coerced_zero(field, value, warnings)
            return 0.0
        return float(value)
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        _coerced_zero(field, value, warnings)
        return 0.0
    number = float(match.group(0))
    if not math.isfinite(number):
        _coerced_zero(field, value, warnings)
        return 0.0
    return number


def coerce_int(value: Any, field: str = "value", warnings: Optional[List[str]] = None) -> int:
    if isinstance(value, bool) or value is None:
        _coerced_zero(field, value, warnings)
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            _coerced_zero(field, value, warnings)
            return 0
        return int(value)
    match = _INT_PREFIX.match(str(value))
    if not match:
        _coerced_zero(field, value, warnings)
        return 0
    return int(match.group(0))


def parse_project_type(value: Any) -> ProjectType:
    try:
        return ProjectType(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(t.value for t in ProjectType)
        raise ValueError(f"Unknown project type {value!r} (expected one of {allowed})") from None


def request_from_payload(
    payload: Mapping[str, Any], warnings: Optional[List[str]] = None
) -> ProjectRequest:
    """
    Build a ProjectRequest from a raw mapping.

    Missing parameter groups are treated as all-blank. Coercion notes are
    appended to `warnings` when a list is given.
    """
    boq = tuple(
        BillOfQuantitiesItem(
            name=str(row.get("name") or ""),
            quantity=coerce_float(row.get("quantity"), f"boq[{i}].quantity", warnings),
            unit_cost=coerce_float(row.get("unitCost"), f"boq[{i}].unitCost", warnings),
            carbon_factor=coerce_float(row.get("carbonFactor"), f"boq[{i}].carbonFactor", warnings),
        )
        for i, row in enumerate(payload.get("boq") or [])
    )

    maint = payload.get("maintenance") or {}
    eco = payload.get("economics") or {}
    soc = payload.get("social") or {}
    pol = payload.get("policy") or {}

    return ProjectRequest(
        name=str(payload.get("name") or ""),
        project_type=parse_project_type(payload.get("projectType", ProjectType.BUILDING.value)),
        design_life_years=coerce_int(payload.get("designLifeYears"), "designLifeYears", warnings),
        construction_duration_months=coerce_int(
            payload.get("constructionDurationMonths"), "constructionDurationMonths", warnings
        ),
        boq=boq,
        maintenance=MaintenanceParams(
            annual_maintenance_cost=coerce_float(
                maint.get("annualMaintenanceCost"), "maintenance.annualMaintenanceCost", warnings
            ),
            degradation_rate=coerce_float(
                maint.get("degradationRate"), "maintenance.degradationRate", warnings
            ),
        ),
        economics=EconomicParams(
            discount_rate=coerce_float(eco.get("discountRate"), "economics.discountRate", warnings),
            annual_economic_benefit=coerce_float(
                eco.get("annualEconomicBenefit"), "economics.annualEconomicBenefit", warnings
            ),
        ),
        social=SocialParams(
            jobs_created=coerce_int(soc.get("jobsCreated"), "social.jobsCreated", warnings),
            population_served=coerce_int(soc.get("populationServed"), "social.populationServed", warnings),
            safety_score=coerce_float(soc.get("safetyScore"), "social.safetyScore", warnings),
        ),
        policy=PolicyParams(
            subsidy_rate=coerce_float(pol.get("subsidyRate"), "policy.subsidyRate", warnings),
            carbon_tax_rate=coerce_float(pol.get("carbonTaxRate"), "policy.carbonTaxRate", warnings),
            approval_threshold=coerce_float(
                pol.get("approvalThreshold"), "policy.approvalThreshold", warnings
            ),
        ),
    )


def result_to_dict(result: EvaluationResult) -> Dict[str, Any]:
    """JSON-compatible view of a result using the v1 API field names."""
    eng = result.engineering
    fin = result.financial
    env = result.environmental
    return {
        "projectName": result.project_name,
        "engineering": {
            "totalConstructionCost": eng.total_construction_cost,
            "totalMaterialMass": eng.total_material_mass,
            "engineeringScore": result.engineering_score,
        },
        "financial": {
            "npv": fin.npv,
            "irr": fin.irr,
            "irrConverged": fin.irr_converged,
            "paybackPeriod": fin.payback_period,
            "lifeCycleCost": fin.life_cycle_cost,
            "financialScore": fin.financial_score,
            "initialInvestment": fin.initial_investment,
            "cashFlows": list(fin.cash_flows),
        },
        "environmental": {
            "materialCarbon": env.material_carbon_kg,
            "materialCarbonTons": env.material_carbon_tons,
            "operationalCarbon": env.operational_carbon_tons,
            "totalCarbonTons": env.total_carbon_tons,
            "environmentalScore": env.environmental_score,
        },
        "social": {"socialScore": result.social.social_score},
        "finalSustainabilityScore": result.final_score,
        "approvalStatus": result.approval_status.value,
        "decisionLog": list(result.decision_log),
        "diagnostics": list(result.diagnostics),
    }
