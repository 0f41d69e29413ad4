"""Decision nodes for the change assessment graph."""

from typing import Optional

from langchain_core.runnables import RunnableConfig

from app.core.errors import PreconditionError
from app.core.logging import get_logger
from app.schemas.change import ChangeCategory
from app.services.change_enablement.approval import resolve_approval_path
from app.services.change_enablement.classifier import classify
from app.services.change_enablement.nodes.utils import get_policy
from app.services.change_enablement.risk import assess_risk
from app.services.change_enablement.state import AssessmentState

logger = get_logger(__name__)

NODE_CLASSIFY = "classify_change"
NODE_ASSESS_RISK = "assess_change_risk"
NODE_RESOLVE_PATH = "resolve_approval_path"


def classify_change(state: AssessmentState) -> dict:
    """Classify the change from the two required answers."""
    category = classify(state.service_down, state.pre_approved)
    logger.info(
        "Run %s classified as %s (service_down=%s, pre_approved=%s)",
        state.run_id,
        category.value,
        state.service_down,
        state.pre_approved,
    )
    return {"category": category}


def route_after_classification(state: AssessmentState) -> str:
    """Only Normal changes with submitted scores go through risk assessment."""
    if state.category == ChangeCategory.NORMAL and state.scores is not None:
        return NODE_ASSESS_RISK
    return NODE_RESOLVE_PATH


def assess_change_risk(
    state: AssessmentState, config: Optional[RunnableConfig] = None
) -> dict:
    """Score a Normal change."""
    if state.category != ChangeCategory.NORMAL:
        raise PreconditionError(
            f"Risk assessment only applies to Normal changes, got {state.category}"
        )
    assessment = assess_risk(state.scores or [], get_policy(config))
    logger.info(
        "Run %s composite score %.2f -> %s",
        state.run_id,
        assessment.composite_score,
        assessment.risk_tier.value,
    )
    return {"assessment": assessment}


def resolve_change_approval_path(
    state: AssessmentState, config: Optional[RunnableConfig] = None
) -> dict:
    """Resolve the approval workflow from the (category, tier) pair."""
    tier = state.assessment.risk_tier if state.assessment else None
    path = resolve_approval_path(state.category, tier, get_policy(config))
    if path.is_empty:
        logger.debug("Run %s approval path not yet determined", state.run_id)
    return {"approval_path": path}
