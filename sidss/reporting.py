"""
Reporting utilities for presenting evaluation inputs and results.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .constants import DEFAULT_CONSTANTS, ModelConstants
from .inputs import BillOfQuantitiesItem, ProjectRequest
from .metrics import EvaluationResult
from .models.engineering import EngineeringModel


BOQ_COLUMNS = [
    "material",
    "quantity",
    "unit_cost",
    "carbon_factor",
    "line_cost",
    "line_carbon_kg",
    "cost_share_pct",
]

CASH_FLOW_COLUMNS = [
    "year",
    "benefit",
    "maintenance",
    "carbon_tax",
    "cash_flow",
    "discount_factor",
    "present_value",
    "cumulative_present_value",
]


def build_boq_table(boq: Iterable[BillOfQuantitiesItem]) -> pd.DataFrame:
    """One row per BOQ line with its cost, embodied carbon and cost share."""
    items = list(boq)
    if not items:
        return pd.DataFrame(columns=BOQ_COLUMNS)

    total_cost = EngineeringModel().calculate_metrics(items).total_construction_cost
    rows = []
    for item in items:
        line_cost = item.quantity * item.unit_cost
        rows.append({
            "material": item.name,
            "quantity": item.quantity,
            "unit_cost": item.unit_cost,
            "carbon_factor": item.carbon_factor,
            "line_cost": line_cost,
            "line_carbon_kg": item.quantity * item.carbon_factor,
            "cost_share_pct": (line_cost / total_cost * 100) if total_cost else 0.0,
        })
    return pd.DataFrame(rows, columns=BOQ_COLUMNS)


def build_cash_flow_table(request: ProjectRequest, result: EvaluationResult) -> pd.DataFrame:
    """
    Yearly cash-flow ledger behind the NPV.

    Cash flows, maintenance and carbon tax come from the evaluated result;
    only the discounting is applied here, in year order, so the last
    cumulative_present_value equals the engine's NPV.
    """
    fin = result.financial
    rate = request.economics.discount_rate
    benefit = request.economics.annual_economic_benefit

    rows = []
    cumulative = 0.0
    for year, cash_flow in enumerate(fin.cash_flows):
        factor = 1 / (1 + rate) ** year
        present_value = cash_flow / (1 + rate) ** year
        cumulative += present_value
        rows.append({
            "year": year,
            "benefit": benefit if year else 0.0,
            "maintenance": fin.maintenance_costs[year - 1] if year else 0.0,
            "carbon_tax": fin.annual_carbon_tax if year else 0.0,
            "cash_flow": cash_flow,
            "discount_factor": factor,
            "present_value": present_value,
            "cumulative_present_value": cumulative,
        })
    return pd.DataFrame(rows, columns=CASH_FLOW_COLUMNS)


def build_score_breakdown(
    result: EvaluationResult, constants: ModelConstants = DEFAULT_CONSTANTS
) -> pd.DataFrame:
    """Sub-scores with their weights; the contributions add up to the final score."""
    w = constants.weights
    rows = [
        ("Financial", result.financial.financial_score, w.financial),
        ("Environmental", result.environmental.environmental_score, w.environmental),
        ("Social", result.social.social_score, w.social),
        ("Engineering Efficiency", result.engineering_score, w.engineering),
    ]
    df = pd.DataFrame(rows, columns=["component", "score", "weight"])
    df["weighted"] = df["score"] * df["weight"]
    return df
