"""
Financial model: life-cycle cash flows, NPV, IRR and the financial score.

Cash-flow series layout (length design_life_years + 1):
    year 0:  -initial_investment (construction cost net of subsidy)
    year t:  benefit - maintenance(t) - carbon tax

Maintenance compounds with the degradation rate: maintenance(t) =
annual_maintenance_cost * (1 + degradation_rate) ** t. The carbon tax uses a
fixed taxed volume per year (constants.carbon_tax_volume_tons), not the
footprint computed by the environmental model.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..constants import DEFAULT_CONSTANTS, IRRSettings, ModelConstants
from ..errors import InvalidDesignParametersError
from ..inputs import EconomicParams, MaintenanceParams, PolicyParams
from ..metrics import FinancialMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CashFlowSchedule:
    initial_investment: float
    cash_flows: Tuple[float, ...]
    maintenance: Tuple[float, ...]  # maintenance[t - 1] is the cost of year t
    annual_benefit: float
    annual_carbon_tax: float
    total_maintenance: float


@dataclass(frozen=True)
class IRRSolution:
    """
    Outcome of the Newton-Raphson IRR iteration

    Attributes:
        rate: Last rate reached (decimal, not percent)
        converged: True only if the step fell below the tolerance
        iterations: Newton steps evaluated
    """
    rate: float
    converged: bool
    iterations: int


def build_cash_flows(
    construction_cost: float,
    maintenance: MaintenanceParams,
    economics: EconomicParams,
    design_life_years: int,
    policy: PolicyParams,
    constants: ModelConstants = DEFAULT_CONSTANTS,
) -> CashFlowSchedule:
    initial_investment = construction_cost * (1 - (policy.subsidy_rate / 100.0))

    cash_flows: List[float] = [-initial_investment]
    yearly_maintenance: List[float] = []
    total_maintenance = 0.0

    annual_carbon_tax = constants.carbon_tax_volume_tons * policy.carbon_tax_rate

    for t in range(1, design_life_years + 1):
        current_maintenance = maintenance.annual_maintenance_cost * (1 + maintenance.degradation_rate) ** t
        total_maintenance += current_maintenance
        yearly_maintenance.append(current_maintenance)

        net_cash_flow = economics.annual_economic_benefit - current_maintenance
        cash_flows.append(net_cash_flow - annual_carbon_tax)

    return CashFlowSchedule(
        initial_investment=initial_investment,
        cash_flows=tuple(cash_flows),
        maintenance=tuple(yearly_maintenance),
        annual_benefit=economics.annual_economic_benefit,
        annual_carbon_tax=annual_carbon_tax,
        total_maintenance=total_maintenance,
    )


def discount_cash_flows(cash_flows: Sequence[float], rate: float) -> float:
    """Net present value of cash_flows[t] discounted at `rate` for t = 0..n."""
    npv = 0.0
    for t, cash_flow in enumerate(cash_flows):
        npv += cash_flow / (1 + rate) ** t
    return npv


def solve_irr(cash_flows: Sequence[float], settings: IRRSettings = IRRSettings()) -> IRRSolution:
    """
    Solve NPV(rate) = 0 by Newton-Raphson.

    Stops early (not converged) when the derivative is flatter than
    settings.min_derivative or the discount factors overflow. After
    settings.max_iterations steps the last rate is returned as a best-effort
    approximation. Never raises for non-convergence.
    """
    rate = settings.initial_rate
    for iteration in range(settings.max_iterations):
        npv = 0.0
        d_npv = 0.0
        try:
            for t, cash_flow in enumerate(cash_flows):
                npv += cash_flow / (1 + rate) ** t
                d_npv -= t * cash_flow / (1 + rate) ** (t + 1)
        except (OverflowError, ZeroDivisionError):
            logger.debug("IRR discount factors overflowed at rate %r", rate)
            return IRRSolution(rate=rate, converged=False, iterations=iteration)

        if abs(d_npv) < settings.min_derivative:
            return IRRSolution(rate=rate, converged=False, iterations=iteration)

        new_rate = rate - npv / d_npv
        if not math.isfinite(new_rate):
            return IRRSolution(rate=rate, converged=False, iterations=iteration + 1)
        if abs(new_rate - rate) < settings.tolerance:
            return IRRSolution(rate=new_rate, converged=True, iterations=iteration + 1)
        rate = new_rate

    return IRRSolution(rate=rate, converged=False, iterations=settings.max_iterations)


class FinancialModel:
    def __init__(self, constants: ModelConstants = DEFAULT_CONSTANTS):
        self.constants = constants

    def analyze(
        self,
        construction_cost: float,
        maintenance: MaintenanceParams,
        economics: EconomicParams,
        design_life_years: int,
        policy: PolicyParams,
    ) -> FinancialMetrics:
        c = self.constants

        try:
            schedule = build_cash_flows(
                construction_cost, maintenance, economics, design_life_years, policy, c
            )
        except OverflowError:
            raise InvalidDesignParametersError(
                f"Maintenance growth (1 + {maintenance.degradation_rate}) ** {design_life_years} "
                "is out of floating-point range",
                parameter="degradation_rate",
            ) from None
        if schedule.initial_investment == 0:
            raise InvalidDesignParametersError(
                "Initial investment is zero (empty bill of quantities or full subsidy); "
                "the NPV ratio of the financial score is undefined",
                parameter="initial_investment",
            )
        if 1 + economics.discount_rate == 0:
            raise InvalidDesignParametersError(
                "Discount rate of -1 makes every discount factor zero",
                parameter="discount_rate",
            )

        try:
            npv = discount_cash_flows(schedule.cash_flows, economics.discount_rate)
        except OverflowError:
            raise InvalidDesignParametersError(
                f"Discount factor (1 + {economics.discount_rate}) ** {design_life_years} "
                "is out of floating-point range",
                parameter="discount_rate",
            ) from None

        irr = solve_irr(schedule.cash_flows, c.irr)
        if not irr.converged:
            logger.warning(
                "IRR did not converge after %d iterations, reporting last rate %.6f",
                irr.iterations,
                irr.rate,
            )

        life_cycle_cost = construction_cost + schedule.total_maintenance

        # Break-even scores the baseline; NPV in units of the investment moves it
        npv_ratio = npv / schedule.initial_investment
        score = c.financial_baseline_score + (npv_ratio * c.npv_ratio_slope)
        score = min(100.0, max(0.0, score))

        return FinancialMetrics(
            npv=npv,
            irr=irr.rate * 100,
            payback_period=0.0,
            life_cycle_cost=life_cycle_cost,
            financial_score=score,
            initial_investment=schedule.initial_investment,
            cash_flows=schedule.cash_flows,
            irr_converged=irr.converged,
            maintenance_costs=schedule.maintenance,
            annual_carbon_tax=schedule.annual_carbon_tax,
        )
