"""
Scoring sub-models of the multi-criteria evaluation

Main Classes:
    - EngineeringModel: Construction cost and material mass from the BOQ
    - EnvironmentalModel: Embodied/operational carbon and the carbon score
    - FinancialModel: Cash flows, NPV, IRR, life-cycle cost, financial score
    - SocialModel: Jobs/population/safety score

Each model is stateless; one instance can serve any number of evaluations.
"""

from .engineering import EngineeringModel
from .environmental import EnvironmentalModel
from .financial import (
    CashFlowSchedule,
    FinancialModel,
    IRRSolution,
    build_cash_flows,
    discount_cash_flows,
    solve_irr,
)
from .social import SocialModel

__all__ = [
    'EngineeringModel',
    'EnvironmentalModel',
    'FinancialModel',
    'SocialModel',

    # Financial building blocks
    'CashFlowSchedule',
    'IRRSolution',
    'build_cash_flows',
    'discount_cash_flows',
    'solve_irr',
]
