"""
Policy table models.

Parsed from policy YAML, not database tables. Pure data models — no service
imports.
"""

from sqlmodel import SQLModel, Field
from typing import Optional, Tuple


class CategoryRule(SQLModel):
    """Display details for a change category."""

    category: str = Field(description="The change category name.")
    display_class: str = Field(default="", description="CSS badge class.")
    description: str = Field(default="", description="Explanatory text.")


class RiskDimension(SQLModel):
    """A single scored risk dimension (1-5)."""

    key: str = Field(description="Stable identifier used by form fields.")
    name: str = Field(description="Display label of the dimension.")


class RiskTierRule(SQLModel):
    """Inclusive upper bound for a risk tier; None means unbounded."""

    tier: str = Field(description="The risk tier name.")
    max_score: Optional[float] = Field(
        default=None, description="Inclusive upper bound of the composite score."
    )
    display_class: str = Field(default="", description="CSS badge class.")


class WorkflowDefinition(SQLModel):
    """Approval workflow: a title and its ordered steps."""

    id: str = Field(description="The id of the workflow.")
    title: str = Field(description="Short label for the workflow.")
    steps: Tuple[str, ...] = Field(
        default_factory=tuple, description="Ordered step descriptions."
    )
