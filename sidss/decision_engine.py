"""
Multi-criteria decision engine.

Runs the four sub-models in a fixed order and combines their scores:

1. Engineering  -> construction cost and material mass
2. Environmental -> carbon totals and score
3. Financial    -> cash flows, NPV, IRR, life-cycle cost and score
4. Social       -> social score
5. Weighted sum -> final score and Go/No-Go status

Each call is a pure function of the request; nothing is kept between calls.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .constants import DEFAULT_CONSTANTS, ModelConstants
from .errors import InvalidDesignParametersError
from .inputs import ProjectRequest
from .metrics import ApprovalStatus, EvaluationResult
from .models import EngineeringModel, EnvironmentalModel, FinancialModel, SocialModel

logger = logging.getLogger(__name__)


class DecisionEngine:
    def __init__(self, constants: Optional[ModelConstants] = None):
        self.constants = constants or DEFAULT_CONSTANTS
        self.engineering_model = EngineeringModel()
        self.environmental_model = EnvironmentalModel(self.constants)
        self.financial_model = FinancialModel(self.constants)
        self.social_model = SocialModel(self.constants)

    # ------------------------------------------------------------------ public
    def evaluate_project(self, request: ProjectRequest) -> EvaluationResult:
        c = self.constants
        diagnostics = self._input_warnings(request)

        eng = self.engineering_model.calculate_metrics(request.boq)
        logger.debug(
            "Engineering: cost=%.2f mass=%.2f", eng.total_construction_cost, eng.total_material_mass
        )

        env = self.environmental_model.calculate_impact(request.boq, request.design_life_years)
        logger.debug(
            "Environmental: total_carbon=%.2f t score=%.2f", env.total_carbon_tons, env.environmental_score
        )

        fin = self.financial_model.analyze(
            eng.total_construction_cost,
            request.maintenance,
            request.economics,
            request.design_life_years,
            request.policy,
        )
        logger.debug("Financial: npv=%.2f irr=%.4f%% score=%.2f", fin.npv, fin.irr, fin.financial_score)
        if not fin.irr_converged:
            diagnostics.append(f"IRR did not converge; reported {fin.irr:.2f}% is an approximation")

        soc = self.social_model.evaluate(request.social)
        logger.debug("Social: score=%.2f", soc.social_score)

        if request.design_life_years == 0:
            raise InvalidDesignParametersError(
                "Design life must be positive to compute life-cycle cost per year",
                parameter="design_life_years",
            )
        # Efficiency: lower life-cycle cost per year scores higher
        cost_per_year = fin.life_cycle_cost / request.design_life_years
        eng_score = max(0.0, 100 - (cost_per_year / c.cost_per_year_divisor))

        w = c.weights
        final_score = (
            (fin.financial_score * w.financial)
            + (env.environmental_score * w.environmental)
            + (soc.social_score * w.social)
            + (eng_score * w.engineering)
        )

        if final_score >= request.policy.approval_threshold:
            status = ApprovalStatus.APPROVED
        else:
            status = ApprovalStatus.REJECTED

        log = build_decision_log(
            eng.total_construction_cost, env.total_carbon_tons, fin.npv, final_score
        )
        logger.info(
            "Evaluated '%s': score=%.2f threshold=%.2f -> %s",
            request.name,
            final_score,
            request.policy.approval_threshold,
            status.value,
        )

        return EvaluationResult(
            project_name=request.name,
            engineering=eng,
            financial=fin,
            environmental=env,
            social=soc,
            engineering_score=eng_score,
            final_score=final_score,
            approval_status=status,
            decision_log=tuple(log),
            diagnostics=tuple(diagnostics),
        )

    # ---------------------------------------------------------------- utilities
    def _input_warnings(self, request: ProjectRequest) -> List[str]:
        """Out-of-range inputs are evaluated as given; they are only reported."""
        warnings: List[str] = []
        safety = request.social.safety_score
        if not 0 <= safety <= self.constants.social.safety_scale:
            warnings.append(
                f"Safety score {safety} is outside 0-{self.constants.social.safety_scale:g}; "
                "social score is not clamped"
            )
        for label, value in (
            ("Subsidy rate", request.policy.subsidy_rate),
            ("Approval threshold", request.policy.approval_threshold),
        ):
            if not 0 <= value <= 100:
                warnings.append(f"{label} {value} is outside 0-100")
        for message in warnings:
            logger.warning(message)
        return warnings


def build_decision_log(
    construction_cost: float, total_carbon_tons: float, npv: float, final_score: float
) -> List[str]:
    return [
        f"Engineering Cost Calculated: ${construction_cost:.2f}",
        f"Total Carbon Emission: {total_carbon_tons:.2f} tons",
        f"Financial NPV: ${npv:.2f}",
        f"Weighted Score Calculated: {final_score:.2f}",
    ]


def evaluate_project(
    request: ProjectRequest, constants: Optional[ModelConstants] = None
) -> EvaluationResult:
    """Evaluate one request with a fresh DecisionEngine."""
    return DecisionEngine(constants).evaluate_project(request)
