import logging
from collections.abc import Sequence

from langsmith import traceable

from src.cuisine.models import AuthenticityAssessment, IngredientSubstitution

logger = logging.getLogger(__name__)

BASE_SCORE = 100

IMPACT_PENALTIES = {
    "minimal": 5,
    "moderate": 10,
    "significant": 20,
}

FEEDBACK_TEMPLATES = {
    "minimal": "Using {substitute} instead of {original} has minimal impact on authenticity",
    "moderate": "Using {substitute} instead of {original} moderately affects the authentic flavor",
    "significant": "Using {substitute} instead of {original} significantly changes the traditional taste",
}


class AuthenticityTool:
    """
    Score how far a set of substitutions moves a dish from tradition.

    Simple deterministic calculation, clamped at zero.
    """

    @staticmethod
    @traceable(name="authenticity_tool_score")
    def score(
        applied_substitutions: Sequence[IngredientSubstitution],
        request_id: str = None
    ) -> AuthenticityAssessment:
        """
        Compute the authenticity score for applied substitutions.

        Parameters
        ----------
        applied_substitutions : Sequence[IngredientSubstitution]
            Substitutions the user intends to use
        request_id : str, optional
            Request ID for tracing

        Returns
        -------
        AuthenticityAssessment
            Score in [0, 100] and one feedback line per substitution
        """
        score = BASE_SCORE
        feedback = []

        for sub in applied_substitutions:
            template = FEEDBACK_TEMPLATES.get(sub.flavor_impact)
            if template is None:
                logger.warning(
                    f"[{request_id}] Skipping unknown flavor impact '{sub.flavor_impact}'"
                )
                continue
            score -= IMPACT_PENALTIES[sub.flavor_impact]
            feedback.append(template.format(
                substitute=sub.substitute,
                original=sub.original
            ))

        score = max(0, score)

        logger.info(
            f"[{request_id}] Authenticity score {score} from {len(feedback)} substitutions",
            extra={"request_id": request_id}
        )

        return AuthenticityAssessment(score=score, feedback=feedback)
