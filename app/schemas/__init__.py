"""
Schema and DTO package.
"""

from app.schemas.change import (
    ApprovalPath,
    ChangeCategory,
    ClassificationDetails,
    RiskAssessment,
    RiskTier,
)
from app.schemas.assessment_view import AssessmentView, SliderValue

__all__ = [
    "ApprovalPath",
    "AssessmentView",
    "ChangeCategory",
    "ClassificationDetails",
    "RiskAssessment",
    "RiskTier",
    "SliderValue",
]
