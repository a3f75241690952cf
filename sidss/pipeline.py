"""
End-to-end evaluation pipeline:

1. Coerce raw input fields into a ProjectRequest.
2. Run the decision engine.
3. Build the reporting tables (BOQ, cash flows, score breakdown).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from .constants import DEFAULT_CONSTANTS, ModelConstants
from .decision_engine import DecisionEngine
from .inputs import ProjectRequest
from .metrics import EvaluationResult
from .payload import request_from_payload, result_to_dict
from .reporting import build_boq_table, build_cash_flow_table, build_score_breakdown


@dataclass
class EvaluationRun:
    request: ProjectRequest
    result: EvaluationResult
    tables: Dict[str, pd.DataFrame]
    input_warnings: List[str]
    inputs: Dict[str, Any] = field(default_factory=dict)

    def matches(self, inputs: Mapping[str, Any]) -> bool:
        """True if `inputs` are the raw fields this run was evaluated from."""
        return self.inputs == dict(inputs)

    def table(self, name: str) -> pd.DataFrame:
        return self.tables[name]

    def to_dict(self) -> Dict[str, Any]:
        return result_to_dict(self.result)


def run_evaluation(
    *,
    inputs: Mapping[str, Any],
    constants: Optional[ModelConstants] = None,
) -> EvaluationRun:
    """
    Execute the full evaluation pipeline and return an EvaluationRun.

    Raises InvalidDesignParametersError (a ValueError) for a zero design life,
    a zero initial investment, or rates whose compounding leaves float range.
    """
    constants = constants or DEFAULT_CONSTANTS
    input_warnings: List[str] = []
    request = request_from_payload(inputs, input_warnings)

    result = DecisionEngine(constants).evaluate_project(request)

    tables = {
        "boq": build_boq_table(request.boq),
        "cash_flows": build_cash_flow_table(request, result),
        "scores": build_score_breakdown(result, constants),
    }
    return EvaluationRun(
        request=request,
        result=result,
        tables=tables,
        input_warnings=input_warnings,
        inputs=copy.deepcopy(dict(inputs)),
    )
