"""
View builders for the assessment page.

Turns decision results into an AssessmentView. Derived panels are hidden
whenever an upstream answer changes so stale scores or paths never show next
to new inputs.
"""

from typing import Any, Dict, Optional

from app.schemas.assessment_view import AssessmentView, SliderValue
from app.schemas.change import ApprovalPath, ChangeCategory, RiskAssessment
from app.services.change_enablement.classifier import describe_category
from app.services.change_enablement.policy.loader import (
    get_mitigation_checklist,
    get_risk_dimensions,
)
from app.services.change_enablement.risk import (
    MIN_SCORE,
    format_composite_score,
    tier_badge_class,
)


def build_sliders(scores=None, policy: Optional[Dict[str, Any]] = None):
    """Slider values in display order, defaulting every dimension to the minimum."""
    dimensions = get_risk_dimensions(policy)
    values = list(scores) if scores is not None else [MIN_SCORE] * len(dimensions)
    return [
        SliderValue(key=dimension.key, name=dimension.name, value=value)
        for dimension, value in zip(dimensions, values)
    ]


def initial_view(policy: Optional[Dict[str, Any]] = None) -> AssessmentView:
    """The pre-submission page: results hidden, nothing classified."""
    return AssessmentView(
        sliders=build_sliders(policy=policy),
        checklist=get_mitigation_checklist(policy),
    )


def classification_view(
    service_down: bool,
    pre_approved: bool,
    category: ChangeCategory,
    approval_path: ApprovalPath,
    policy: Optional[Dict[str, Any]] = None,
) -> AssessmentView:
    """
    View after the classification form is submitted.

    Normal changes show the risk sliders reset to the minimum and hide
    everything downstream. Standard and Emergency go straight to the path.
    """
    needs_risk = category == ChangeCategory.NORMAL
    return AssessmentView(
        service_down=service_down,
        pre_approved=pre_approved,
        category=category,
        classification=describe_category(category, policy),
        sliders=build_sliders(policy=policy),
        approval_path=approval_path,
        checklist=get_mitigation_checklist(policy),
        results_visible=True,
        risk_assessment_visible=needs_risk,
        risk_score_visible=False,
        approval_path_visible=not needs_risk,
        checklist_visible=not needs_risk,
    )


def risk_view(
    service_down: bool,
    pre_approved: bool,
    scores,
    assessment: RiskAssessment,
    approval_path: ApprovalPath,
    policy: Optional[Dict[str, Any]] = None,
) -> AssessmentView:
    """View after the risk sliders are submitted for a Normal change."""
    return AssessmentView(
        service_down=service_down,
        pre_approved=pre_approved,
        category=ChangeCategory.NORMAL,
        classification=describe_category(ChangeCategory.NORMAL, policy),
        sliders=build_sliders(scores, policy),
        assessment=assessment,
        composite_score_display=format_composite_score(assessment.composite_score),
        risk_tier=assessment.risk_tier,
        tier_badge_class=tier_badge_class(assessment.risk_tier, policy),
        approval_path=approval_path,
        checklist=get_mitigation_checklist(policy),
        results_visible=True,
        risk_assessment_visible=True,
        risk_score_visible=True,
        approval_path_visible=True,
        checklist_visible=True,
    )
