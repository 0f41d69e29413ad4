"""
Graph state for the change assessment workflow.

Pure graph state — no service-layer imports. Category and tier travel here
between nodes instead of living in module-level variables.
"""

from sqlmodel import SQLModel, Field
from typing import Optional, List
from pydantic import StrictInt
import uuid

from app.schemas.change import ApprovalPath, ChangeCategory, RiskAssessment


class AssessmentState(SQLModel):
    """
    State of one change assessment.

    This is used by LangGraph to manage workflow state, not a database table.
    """

    run_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), description="The id of the run."
    )
    service_down: bool = Field(
        description="Whether the service is down or critically degraded."
    )
    pre_approved: bool = Field(
        description="Whether the change matches a pre-approved change model."
    )
    scores: Optional[List[StrictInt]] = Field(
        default=None,
        description="Risk dimension scores; None until the sliders are submitted.",
    )
    category: Optional[ChangeCategory] = Field(
        default=None, description="Category assigned by the classifier."
    )
    assessment: Optional[RiskAssessment] = Field(
        default=None, description="Composite score and tier (Normal changes only)."
    )
    approval_path: Optional[ApprovalPath] = Field(
        default=None, description="Resolved approval workflow."
    )
