"""
Risk assessment: composite score and risk tier.

risk_score = sum(all_dimensions) / number_of_dimensions

| Composite Score | Risk Tier |
|-----------------|-----------|
| <= 2.0          | Low       |
| <= 3.5          | Medium    |
| > 3.5           | High      |
"""

from typing import Any, Dict, Optional, Sequence, Union

from app.core.errors import PreconditionError
from app.core.logging import get_logger
from app.schemas.change import RiskAssessment, RiskTier
from app.services.change_enablement.policy.loader import get_risk_tiers

logger = get_logger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5


def validate_scores(scores: Sequence[int]) -> None:
    """
    Check every score is an integer in [1, 5].

    Raises:
        PreconditionError: On an empty sequence or any invalid score.
    """
    if not scores:
        raise PreconditionError("At least one risk score is required")
    for score in scores:
        # bool is an int subclass but never a valid score
        if isinstance(score, bool) or not isinstance(score, int):
            raise PreconditionError(f"Risk score {score!r} is not an integer")
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise PreconditionError(
                f"Risk score {score} is outside [{MIN_SCORE}, {MAX_SCORE}]"
            )


def tier_for_score(
    composite_score: float, policy: Optional[Dict[str, Any]] = None
) -> RiskTier:
    """Map an unrounded composite score to its tier (inclusive upper bounds)."""
    for rule in get_risk_tiers(policy):
        if rule.max_score is None or composite_score <= rule.max_score:
            return RiskTier(rule.tier)
    # get_risk_tiers guarantees an unbounded last tier
    raise PreconditionError(f"No risk tier covers score {composite_score}")


def assess_risk(
    scores: Sequence[int], policy: Optional[Dict[str, Any]] = None
) -> RiskAssessment:
    """
    Compute the composite score and tier from dimension scores.

    Divides by the number of scores actually supplied.

    Raises:
        PreconditionError: If no scores are given or any score is not an
            integer in [1, 5].
    """
    scores = list(scores)
    validate_scores(scores)

    composite_score = sum(scores) / len(scores)
    tier = tier_for_score(composite_score, policy)
    logger.debug("Scores %s -> composite %.4f (%s)", scores, composite_score, tier.value)
    return RiskAssessment(composite_score=composite_score, risk_tier=tier)


def tier_badge_class(
    tier: Union[RiskTier, str, None], policy: Optional[Dict[str, Any]] = None
) -> str:
    """Badge class for a risk tier; empty string if the tier is unknown."""
    key = tier.value if isinstance(tier, RiskTier) else tier
    for rule in get_risk_tiers(policy):
        if rule.tier == key:
            return rule.display_class
    return ""


def format_composite_score(composite_score: float) -> str:
    """Two-decimal display form. Never used for tier assignment."""
    return f"{composite_score:.2f}"
