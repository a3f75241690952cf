from ..constants import DEFAULT_CONSTANTS, ModelConstants
from ..inputs import SocialParams
from ..metrics import SocialMetrics


class SocialModel:
    """
    Normalizes jobs, population served and safety into a 0-100 score.

    Jobs and population saturate at their reference values; safety is passed
    through unclamped, so a safety score outside 0-10 moves the result
    proportionally.
    """

    def __init__(self, constants: ModelConstants = DEFAULT_CONSTANTS):
        self.constants = constants

    def evaluate(self, social: SocialParams) -> SocialMetrics:
        n = self.constants.social

        jobs_norm = min(social.jobs_created / n.jobs_reference, 1.0)
        pop_norm = min(social.population_served / n.population_reference, 1.0)
        safety_norm = social.safety_score / n.safety_scale

        score = (
            (jobs_norm * n.jobs_weight)
            + (pop_norm * n.population_weight)
            + (safety_norm * n.safety_weight)
        )
        return SocialMetrics(social_score=score)
