"""
Request and response DTOs for the change enablement API.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictInt

from app.schemas.change import (
    ApprovalPath,
    ChangeCategory,
    ClassificationDetails,
    RiskTier,
)


class ClassifyRequest(BaseModel):
    """Inputs of the classifier."""

    service_down: bool = Field(
        description="Is the service currently down or critically degraded?"
    )
    pre_approved: bool = Field(description="Is this a pre-approved change model?")


class ClassifyResponse(BaseModel):
    category: ChangeCategory
    classification: ClassificationDetails


class RiskRequest(BaseModel):
    """Risk dimension scores, each 1-5."""

    scores: List[StrictInt] = Field(description="One score per risk dimension.")


class RiskResponse(BaseModel):
    composite_score: float
    risk_tier: RiskTier
    composite_score_display: str
    tier_badge_class: str


class AssessmentRequest(BaseModel):
    """
    Form answers for a full assessment.

    Answers are "yes"/"no" (or booleans). Scores are only sent once a Normal
    change has been classified.
    """

    service_down: Optional[Union[bool, str]] = None
    pre_approved: Optional[Union[bool, str]] = None
    scores: Optional[List[StrictInt]] = None


class RiskDimensionPublic(BaseModel):
    key: str
    name: str


class RiskTierPublic(BaseModel):
    tier: str
    max_score: Optional[float] = None
    display_class: str = ""


class PolicyResponse(BaseModel):
    """Static policy tables."""

    risk_dimensions: List[RiskDimensionPublic]
    risk_tiers: List[RiskTierPublic]
    workflows: dict[str, ApprovalPath]
    mitigation_checklist: List[str]
