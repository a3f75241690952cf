"""
SIDSS - Sustainable Infrastructure Decision Support System

Evaluates a proposed construction project against financial, environmental,
social and engineering-efficiency criteria and renders a Go/No-Go decision.

Main entry points:
    - evaluate_project / DecisionEngine: ProjectRequest -> EvaluationResult
    - run_evaluation: raw dashboard/JSON fields -> EvaluationRun (result + tables)
    - load_model_constants: read the policy constants from JSON
"""

from .constants import DEFAULT_CONSTANTS, ModelConstants, load_model_constants
from .decision_engine import DecisionEngine, evaluate_project
from .errors import InvalidDesignParametersError
from .inputs import (
    BillOfQuantitiesItem,
    EconomicParams,
    MaintenanceParams,
    PolicyParams,
    ProjectRequest,
    ProjectType,
    SocialParams,
)
from .metrics import (
    ApprovalStatus,
    EngineeringMetrics,
    EnvironmentalMetrics,
    EvaluationResult,
    FinancialMetrics,
    SocialMetrics,
)
from .pipeline import EvaluationRun, run_evaluation

__all__ = [
    'DecisionEngine',
    'evaluate_project',
    'run_evaluation',
    'EvaluationRun',
    'InvalidDesignParametersError',

    # Configuration
    'DEFAULT_CONSTANTS',
    'ModelConstants',
    'load_model_constants',

    # Request
    'BillOfQuantitiesItem',
    'EconomicParams',
    'MaintenanceParams',
    'PolicyParams',
    'ProjectRequest',
    'ProjectType',
    'SocialParams',

    # Results
    'ApprovalStatus',
    'EngineeringMetrics',
    'EnvironmentalMetrics',
    'EvaluationResult',
    'FinancialMetrics',
    'SocialMetrics',
]
