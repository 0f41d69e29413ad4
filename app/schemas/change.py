"""
Change classification and risk value types.

Pure data models — no service imports. All values are immutable and
recomputed for every request.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class ChangeCategory(str, Enum):
    """ITIL change category."""

    STANDARD = "Standard"
    NORMAL = "Normal"
    EMERGENCY = "Emergency"


class RiskTier(str, Enum):
    """Coarse risk bucket derived from the composite score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskAssessment(BaseModel):
    """
    Composite risk score and the tier it falls into.

    The score is kept unrounded; rounding is a display concern.
    """

    model_config = ConfigDict(frozen=True)

    composite_score: float = Field(
        description="Arithmetic mean of the risk dimension scores."
    )
    risk_tier: RiskTier = Field(description="Tier assigned from the unrounded score.")


class ApprovalPath(BaseModel):
    """
    Ordered approval workflow for a change.

    An empty path (no title, no steps) means the path is not yet determined.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Short label for the workflow.")
    steps: Tuple[str, ...] = Field(
        default_factory=tuple, description="Ordered step descriptions."
    )

    @property
    def is_empty(self) -> bool:
        return not self.title and not self.steps


class ClassificationDetails(BaseModel):
    """Display class and explanatory text for a change category."""

    model_config = ConfigDict(frozen=True)

    display_class: str = Field(default="", description="CSS badge class.")
    description: str = Field(default="", description="Human-readable explanation.")
