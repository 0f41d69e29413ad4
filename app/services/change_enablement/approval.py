"""
Approval path resolution.

Maps (category, tier) to one of the five approval workflows:
    standard       Standard Change Flow
    normal_low     Normal Change Flow, Low Risk
    normal_medium  Normal Change Flow, Medium Risk
    normal_high    Normal Change Flow, High Risk
    emergency      Emergency Change Flow
"""

from typing import Any, Dict, Optional, Union

from app.core.errors import PolicyError, PreconditionError
from app.core.logging import get_logger
from app.schemas.change import ApprovalPath, ChangeCategory, RiskTier
from app.services.change_enablement.policy.loader import get_workflows

logger = get_logger(__name__)


def _coerce_category(category: Union[ChangeCategory, str]) -> ChangeCategory:
    try:
        return ChangeCategory(category)
    except ValueError as e:
        raise PreconditionError(f"Unrecognized change category: {category!r}") from e


def _coerce_tier(tier: Union[RiskTier, str, None]) -> Optional[RiskTier]:
    """Unset or unknown tiers mean the tier is not yet determined."""
    if not tier:
        return None
    try:
        return RiskTier(tier)
    except ValueError:
        logger.debug("Unrecognized risk tier %r treated as unset", tier)
        return None


def _workflow_path(workflow_id: str, policy: Optional[Dict[str, Any]]) -> ApprovalPath:
    workflow = get_workflows(policy).get(workflow_id)
    if workflow is None:
        raise PolicyError(f"Policy has no '{workflow_id}' workflow")
    return ApprovalPath(title=workflow.title, steps=workflow.steps)


def resolve_approval_path(
    category: Union[ChangeCategory, str],
    tier: Union[RiskTier, str, None] = None,
    policy: Optional[Dict[str, Any]] = None,
) -> ApprovalPath:
    """
    Resolve the approval workflow for a classified change.

    Standard and Emergency ignore the tier. Normal without a determined tier
    resolves to the empty path.

    Raises:
        PreconditionError: If the category is not a ChangeCategory value.
    """
    category = _coerce_category(category)

    match category, _coerce_tier(tier):
        case ChangeCategory.STANDARD, _:
            return _workflow_path("standard", policy)
        case ChangeCategory.EMERGENCY, _:
            return _workflow_path("emergency", policy)
        case ChangeCategory.NORMAL, RiskTier.LOW:
            return _workflow_path("normal_low", policy)
        case ChangeCategory.NORMAL, RiskTier.MEDIUM:
            return _workflow_path("normal_medium", policy)
        case ChangeCategory.NORMAL, RiskTier.HIGH:
            return _workflow_path("normal_high", policy)
        case ChangeCategory.NORMAL, None:
            return ApprovalPath()

    raise PreconditionError(f"Unhandled approval path for {category.value}/{tier!r}")
