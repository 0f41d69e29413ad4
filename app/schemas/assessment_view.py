"""
Render model for the change assessment page.

Describes which panels are visible and what they show. Built by the
presentation adapter, consumed by templates and the JSON API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.change import (
    ApprovalPath,
    ChangeCategory,
    ClassificationDetails,
    RiskAssessment,
    RiskTier,
)


class SliderValue(BaseModel):
    """Current value of one risk dimension slider."""

    key: str
    name: str
    value: int = Field(default=1, ge=1, le=5)


class AssessmentView(BaseModel):
    """Visible state of the assessment page after a user action."""

    service_down: Optional[bool] = None
    pre_approved: Optional[bool] = None
    category: Optional[ChangeCategory] = None
    classification: ClassificationDetails = Field(default_factory=ClassificationDetails)
    sliders: List[SliderValue] = Field(default_factory=list)
    assessment: Optional[RiskAssessment] = None
    composite_score_display: str = ""
    risk_tier: Optional[RiskTier] = None
    tier_badge_class: str = ""
    approval_path: ApprovalPath = Field(default_factory=ApprovalPath)
    checklist: List[str] = Field(
        default_factory=list, description="Mitigation items, always unchecked."
    )

    results_visible: bool = False
    risk_assessment_visible: bool = False
    risk_score_visible: bool = False
    approval_path_visible: bool = True
    checklist_visible: bool = True
