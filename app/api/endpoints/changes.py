from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.core.logging import get_logger
from app.schemas.assessment_view import AssessmentView
from app.schemas.change import ApprovalPath
from app.schemas.requests import (
    AssessmentRequest,
    ClassifyRequest,
    ClassifyResponse,
    PolicyResponse,
    RiskDimensionPublic,
    RiskRequest,
    RiskResponse,
    RiskTierPublic,
)
from app.services.change_enablement import (
    assess_risk,
    classify,
    describe_category,
    format_composite_score,
    get_mitigation_checklist,
    get_risk_dimensions,
    get_risk_tiers,
    get_workflows,
    resolve_approval_path,
    tier_badge_class,
)
from app.services.change_enablement.assessments import ChangeAssessmentService

logger = get_logger(__name__)

router = APIRouter()


def get_assessment_service() -> ChangeAssessmentService:
    """Get assessment service (Dependency Injection)."""
    return ChangeAssessmentService()


ServiceDep = Annotated[ChangeAssessmentService, Depends(get_assessment_service)]


@router.post("/classify", response_model=ClassifyResponse)
def classify_change(body: ClassifyRequest):
    """Classify a change from the two required answers."""
    category = classify(body.service_down, body.pre_approved)
    return ClassifyResponse(
        category=category, classification=describe_category(category)
    )


@router.post("/risk", response_model=RiskResponse)
def assess_change_risk(body: RiskRequest):
    """Compute the composite risk score and tier."""
    assessment = assess_risk(body.scores)
    return RiskResponse(
        composite_score=assessment.composite_score,
        risk_tier=assessment.risk_tier,
        composite_score_display=format_composite_score(assessment.composite_score),
        tier_badge_class=tier_badge_class(assessment.risk_tier),
    )


@router.get("/approval-path", response_model=ApprovalPath)
def get_approval_path(
    category: str = Query(...),
    tier: Optional[str] = Query(None),
):
    """Resolve the approval workflow for a (category, tier) pair."""
    return resolve_approval_path(category, tier)


@router.post("/assessments", response_model=AssessmentView)
def create_assessment(body: AssessmentRequest, service: ServiceDep):
    """Run the full assessment and return the page view."""
    return service.assess(body.service_down, body.pre_approved, body.scores)


@router.get("/policy", response_model=PolicyResponse)
def get_policy():
    """Return the static policy tables."""
    return PolicyResponse(
        risk_dimensions=[
            RiskDimensionPublic(key=d.key, name=d.name) for d in get_risk_dimensions()
        ],
        risk_tiers=[
            RiskTierPublic(
                tier=t.tier, max_score=t.max_score, display_class=t.display_class
            )
            for t in get_risk_tiers()
        ],
        workflows={
            workflow_id: ApprovalPath(title=w.title, steps=w.steps)
            for workflow_id, w in get_workflows().items()
        },
        mitigation_checklist=get_mitigation_checklist(),
    )
